"""Region guard: the region in the path must exist for the provider in the path."""
from __future__ import annotations

import logging

from fastapi import Request

from src.core.errors import BadParamsError

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def validate_region_param(request: Request) -> None:
    """Reject the request unless the catalog confirms the region.

    Expects the provider guard to have run. Lookup failures are treated the
    same as an unknown region.
    """
    provider = request.path_params.get("provider", "")
    region = request.path_params.get("region", "")
    message = f"invalid region in path: {region}"

    try:
        valid = request.app.state.region_catalog.is_valid_region(provider, region)
    except Exception as exc:
        logger.warning("region lookup failed for %s/%s: %s", provider, region, exc)
        raise BadParamsError(message, cause=str(exc), params={"region": region}) from exc

    if not valid:
        raise BadParamsError(
            message,
            cause=f"region {region} is not available for provider {provider}",
            params={"region": region},
        )
