"""Request body binding for the cluster recommendation route.

The request value is composed from the path (provider, region) and the JSON
body (workload description). Path values win: same-named body keys are
removed before the body is decoded. Any failure ends the request with
400 bad_params / "validation failed" and the underlying cause.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict

from fastapi import Request
from pydantic import ValidationError

from src.core.errors import BadParamsError
from src.models.domain import ClusterRecommendationReq
from src.models.requests import RecommendationRequest

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "validation failed"
PATH_FIELDS = ("provider", "region")


def _fail(cause: str) -> BadParamsError:
    logger.error("failed to bind request body: %s", cause)
    return BadParamsError(VALIDATION_FAILED, cause=cause)


def format_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic errors into `loc: msg; loc: msg`."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "body"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


def decode_body(raw: bytes) -> Dict[str, Any]:
    """Decode the raw body into a JSON object or raise BadParamsError."""
    try:
        document = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise _fail(str(exc)) from exc
    if not isinstance(document, dict):
        raise _fail("request body must be a JSON object")
    return document


def _check_zones(request: Request, provider: str, region: str, workload: ClusterRecommendationReq) -> None:
    if not workload.zones:
        return
    try:
        available = set(request.app.state.region_catalog.zones(provider, region))
    except Exception as exc:
        raise _fail(str(exc)) from exc
    for zone in workload.zones:
        if zone not in available:
            raise _fail(f"zones: zone {zone} is not available in region {region}")


# PUBLIC_INTERFACE
async def bind_recommendation_request(request: Request) -> RecommendationRequest:
    """Build the RecommendationRequest for the current request."""
    provider = request.path_params["provider"]
    region = request.path_params["region"]

    document = decode_body(await request.body())
    for field in PATH_FIELDS:
        if document.pop(field, None) is not None:
            logger.debug("ignoring %s from request body; path value %s is used", field, request.path_params[field])

    try:
        workload = ClusterRecommendationReq.model_validate(document)
    except ValidationError as exc:
        raise _fail(format_validation_error(exc)) from exc

    _check_zones(request, provider, region, workload)
    return RecommendationRequest(provider=provider, region=region, workload=workload)
