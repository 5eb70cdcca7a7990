"""Liveness endpoint."""
from __future__ import annotations

from fastapi import APIRouter

router = APIRouter(tags=["health"])


# PUBLIC_INTERFACE
@router.get("/status", summary="Status", description="Liveness check; never guarded.", operation_id="signal_status")
def signal_status():
    """Return the constant liveness answer."""
    return "ok"
