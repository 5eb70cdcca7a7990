"""Authenticated caller attached to a request."""
from __future__ import annotations
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class AuthenticatedIdentity(BaseModel):
    """Identity derived from a verified bearer token; lives for one request."""
    model_config = ConfigDict(frozen=True)

    subject: str = Field(..., description="Token subject (user identifier)")
    token_id: str = Field(..., description="Token identifier (jti)")
    scope: Optional[str] = Field(None, description="Scope claim, if present")
    claims: Dict[str, Any] = Field(default_factory=dict, description="All verified claims")
