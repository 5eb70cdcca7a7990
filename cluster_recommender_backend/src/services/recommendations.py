"""Contract between the HTTP layer and the recommendation engine.

The engine computes the node-pool layout; this layer only calls it once per
request. Engines are shared by concurrent requests and must be safe for that.
"""
from __future__ import annotations

from typing import Any, Protocol

from src.models.domain import ClusterRecommendationReq


class RecommendationEngine(Protocol):
    def recommend_cluster(self, provider: str, region: str, req: ClusterRecommendationReq) -> Any:
        """Return the recommended layout or raise on failure.

        The returned value is serialized as the response body unchanged; a
        ClusterRecommendationResp is the expected shape.
        """
        ...
