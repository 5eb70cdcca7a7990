"""Recommendation engine DTOs: workload description and cluster layout.

These shapes belong to the engine's request/response contract. JSON uses
camelCase keys; Python code uses the snake_case field names.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NetworkPerf(str, Enum):
    """Network performance classes an instance type can be filtered on."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    HIGHEST = "highest"


class Category(str, Enum):
    """Instance type categories."""
    GENERAL_PURPOSE = "General purpose"
    COMPUTE_OPTIMIZED = "Compute optimized"
    MEMORY_OPTIMIZED = "Memory optimized"
    GPU_INSTANCE = "GPU instance"
    STORAGE_OPTIMIZED = "Storage optimized"


class ClusterRecommendationReq(_CamelModel):
    """Workload description the engine sizes a cluster for."""
    # Wire keys are camelCase only.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=False)

    sum_cpu: float = Field(..., ge=1, description="Total number of CPUs requested for the cluster")
    sum_mem: float = Field(..., ge=1, description="Total memory requested for the cluster (GB)")
    min_nodes: int = Field(default=1, ge=1, description="Minimum number of nodes in the recommended cluster")
    max_nodes: int = Field(default=1, ge=1, description="Maximum number of nodes in the recommended cluster")
    same_size: bool = Field(default=False, description="If true, recommended instance types will have a similar size")
    on_demand_pct: int = Field(default=100, ge=0, le=100, description="Percentage of regular (on-demand) nodes")
    zones: List[str] = Field(default_factory=list, description="Availability zones the cluster should expand to")
    sum_gpu: int = Field(default=0, ge=0, description="Total number of GPUs requested for the cluster")
    allow_burst: Optional[bool] = Field(default=None, description="Are burst instances allowed in recommendation")
    network_perf: Optional[NetworkPerf] = Field(default=None, description="Requested network performance class")
    excludes: List[str] = Field(default_factory=list, description="Excluded instance types")
    includes: List[str] = Field(default_factory=list, description="If not empty, only these types are considered")
    allow_older_gen: Optional[bool] = Field(default=None, description="Are previous generation types allowed")
    category: Optional[List[Category]] = Field(default=None, description="Instance type categories to consider")

    @model_validator(mode="after")
    def _node_bounds(self) -> "ClusterRecommendationReq":
        if self.min_nodes > self.max_nodes:
            raise ValueError("minNodes must be less than or equal to maxNodes")
        return self


class VirtualMachine(_CamelModel):
    """Instance type with its price and capacity attributes."""
    category: str = Field(..., description="Instance type category")
    type: str = Field(..., description="Instance type name")
    avg_price: float = Field(default=0.0, description="Average spot price")
    on_demand_price: float = Field(default=0.0, description="Regular price")
    cpus: float = Field(..., description="Number of CPUs")
    mem: float = Field(..., description="Memory (GB)")
    gpus: float = Field(default=0.0, description="Number of GPUs")
    burst: bool = Field(default=False, description="Burst capable")
    network_perf: Optional[str] = Field(default=None, description="Network performance")
    network_perf_category: Optional[str] = Field(default=None, description="Network performance category")
    current_gen: bool = Field(default=True, description="Current generation flag")
    zones: List[str] = Field(default_factory=list, description="Zones the type is available in")


class NodePool(_CamelModel):
    """A group of identical nodes in the recommended layout."""
    vm: VirtualMachine = Field(..., description="Instance type of the pool")
    sum_nodes: int = Field(..., ge=0, description="Number of nodes in the pool")
    vm_class: str = Field(..., description="regular or spot")


class ClusterRecommendationAccuracy(_CamelModel):
    """How closely the layout matches the requested resources."""
    rec_mem: float = Field(default=0.0, description="Recommended total memory")
    rec_cpu: float = Field(default=0.0, description="Recommended total CPUs")
    rec_nodes: int = Field(default=0, description="Recommended node count")
    rec_zone: List[str] = Field(default_factory=list, description="Zones of the recommendation")
    rec_regular_price: float = Field(default=0.0, description="Price of the regular nodes")
    rec_regular_nodes: int = Field(default=0, description="Number of regular nodes")
    rec_spot_price: float = Field(default=0.0, description="Price of the spot nodes")
    rec_spot_nodes: int = Field(default=0, description="Number of spot nodes")
    rec_total_price: float = Field(default=0.0, description="Total price")


class ClusterRecommendationResp(_CamelModel):
    """Recommended node-pool layout returned by the engine."""
    provider: str = Field(..., description="Cloud provider")
    region: str = Field(..., description="Region")
    zones: List[str] = Field(default_factory=list, description="Availability zones")
    node_pools: List[NodePool] = Field(default_factory=list, description="Recommended node pools")
    accuracy: ClusterRecommendationAccuracy = Field(
        default_factory=ClusterRecommendationAccuracy, description="Accuracy of the recommendation"
    )
