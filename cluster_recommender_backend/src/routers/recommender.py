"""Cluster recommendation endpoint and its guard chain.

Guards run in list order and the first failure ends the request:
bearer token (when enabled) -> provider parameter -> region -> body binding.
"""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.params import Depends as DependsParam

from src.core.config import Settings
from src.core.errors import EngineError
from src.models.domain import ClusterRecommendationResp
from src.models.requests import RecommendationRequest
from src.security.gate import require_token
from src.validation.binder import bind_recommendation_request
from src.validation.params import validate_path_param
from src.validation.region import validate_region_param

logger = logging.getLogger(__name__)

PROVIDER_PARAM = "provider"
REGION_PARAM = "region"

validate_provider_param = validate_path_param(PROVIDER_PARAM, "required", "provider")

router = APIRouter(prefix="/recommender", tags=["recommender"])


# PUBLIC_INTERFACE
def business_guards(settings: Settings) -> List[DependsParam]:
    """Ordered guard chain applied to the business route group."""
    guards: List[DependsParam] = []
    if settings.auth_enabled:
        guards.append(Depends(require_token))
    guards.append(Depends(validate_provider_param))
    guards.append(Depends(validate_region_param))
    return guards


# PUBLIC_INTERFACE
@router.post(
    "/{provider}/{region}/cluster/",
    summary="Recommend cluster setup",
    description="Provides a recommended set of node pools on a given provider in a specific region.",
    responses={200: {"model": ClusterRecommendationResp}},
)
def recommend_cluster_setup(
    provider: str,
    region: str,
    request: Request,
    req: RecommendationRequest = Depends(bind_recommendation_request),
):
    """Dispatch a validated request to the engine; any engine error is a 500."""
    logger.info("recommend cluster setup for %s/%s", req.provider, req.region)
    engine = request.app.state.engine
    try:
        return engine.recommend_cluster(req.provider, req.region, req.workload)
    except Exception as exc:
        logger.error("recommendation failed for %s/%s: %s", req.provider, req.region, exc)
        raise EngineError(str(exc)) from exc
