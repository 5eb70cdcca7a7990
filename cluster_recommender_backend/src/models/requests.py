"""Request value handed from the binder to the recommendation handler."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from src.models.domain import ClusterRecommendationReq


class RecommendationRequest(BaseModel):
    """Workload description composed with the provider and region from the path.

    provider and region are always the path values; the binder removes any
    same-named keys from the body before decoding the workload.
    """
    model_config = ConfigDict(frozen=True)

    provider: str = Field(..., description="Cloud provider from the request path")
    region: str = Field(..., description="Region from the request path")
    workload: ClusterRecommendationReq = Field(..., description="Decoded request body")
