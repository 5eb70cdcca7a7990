"""
Pytest configuration to ensure the application package (src/) is importable,
plus shared fixtures: a recording fake engine and app/client builders.
"""
import sys
from pathlib import Path

import pytest

# Compute the backend root that contains the 'src' directory
BACKEND_ROOT = Path(__file__).resolve().parents[1]

# Prepend backend root to sys.path if not already present
backend_root_str = str(BACKEND_ROOT)
if backend_root_str not in sys.path:
    sys.path.insert(0, backend_root_str)

from fastapi.testclient import TestClient  # noqa: E402

from src.api.main import create_app  # noqa: E402
from src.core.config import Settings, reset_settings_cache  # noqa: E402
from src.models.domain import (  # noqa: E402
    ClusterRecommendationAccuracy,
    ClusterRecommendationResp,
    NodePool,
    VirtualMachine,
)

SIGNING_KEY = "test-signing-key-0123456789abcdef"

RECOMMEND_PATH = "/api/v1/recommender/{provider}/{region}/cluster/"


def recommend_path(provider: str = "amazon", region: str = "eu-west-1") -> str:
    return RECOMMEND_PATH.format(provider=provider, region=region)


def valid_body() -> dict:
    return {
        "sumCpu": 8,
        "sumMem": 32,
        "minNodes": 1,
        "maxNodes": 4,
        "onDemandPct": 50,
        "zones": ["eu-west-1a"],
    }


def sample_response(provider: str = "amazon", region: str = "eu-west-1") -> ClusterRecommendationResp:
    vm = VirtualMachine(category="General purpose", type="m5.xlarge", avg_price=0.07,
                        on_demand_price=0.214, cpus=4, mem=16, zones=["eu-west-1a"])
    return ClusterRecommendationResp(
        provider=provider,
        region=region,
        zones=["eu-west-1a"],
        node_pools=[NodePool(vm=vm, sum_nodes=2, vm_class="regular")],
        accuracy=ClusterRecommendationAccuracy(rec_mem=32, rec_cpu=8, rec_nodes=2,
                                               rec_regular_nodes=2, rec_regular_price=0.428,
                                               rec_total_price=0.428),
    )


class FakeEngine:
    """Engine double recording every call; returns `result` or raises `error`."""

    def __init__(self, result=None, error=None):
        self.result = result if result is not None else sample_response()
        self.error = error
        self.calls = []

    def recommend_cluster(self, provider, region, req):
        self.calls.append((provider, region, req))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    for var in ("TELESCOPES_BASEPATH", "TELESCOPES_PROVIDERS", "TELESCOPES_AUTH_ENABLED",
                "TELESCOPES_AUTH_ROLE", "TELESCOPES_TOKEN_SIGNING_KEY", "TELESCOPES_JWT_ALGORITHM",
                "DATA_DIR", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def client(engine):
    return TestClient(create_app(engine, settings=Settings()))


@pytest.fixture
def auth_settings():
    return Settings(auth_enabled=True, auth_role="recommender", token_signing_key=SIGNING_KEY)
