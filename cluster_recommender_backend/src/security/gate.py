"""Bearer token guard for the business routes.

Runs first in the guard chain when authentication is enabled. On success the
caller's identity is stored on request.state.identity for the rest of the
request.
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from src.core.errors import AuthError
from src.models.auth import AuthenticatedIdentity
from src.security.jwt import decode_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


# PUBLIC_INTERFACE
def require_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> AuthenticatedIdentity:
    """Verify the bearer token and attach the identity to the request."""
    if credentials is None or not credentials.credentials:
        raise AuthError("missing bearer token")

    settings = request.app.state.settings
    try:
        payload = decode_token(credentials.credentials, settings.token_signing_key, settings.jwt_algorithm)
    except JWTError as exc:
        logger.info("rejected bearer token: %s", exc)
        raise AuthError("invalid token")

    sub = payload.get("sub")
    jti = payload.get("jti")
    if not sub or not jti:
        raise AuthError("invalid token")

    if not request.app.state.token_store.exists(str(sub), str(jti)):
        logger.info("token %s of %s not found in token store", jti, sub)
        raise AuthError("token revoked or unknown")

    scope = payload.get("scope")
    identity = AuthenticatedIdentity(
        subject=str(sub),
        token_id=str(jti),
        scope=scope if isinstance(scope, str) else None,
        claims=payload,
    )
    request.state.identity = identity
    return identity
