"""Security utilities for bearer JWT verification.

Tokens are HMAC-signed JWTs carrying a subject (sub) and a token id (jti).
The signing key comes from Settings; it is never logged.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from uuid import uuid4

from jose import jwt  # python-jose (fastapi-compatible)

DEFAULT_EXPIRE_MINUTES = 60


# PUBLIC_INTERFACE
def create_access_token(
    subject: str,
    signing_key: str,
    algorithm: str = "HS256",
    token_id: Optional[str] = None,
    expires_minutes: Optional[int] = None,
    claims: Optional[dict[str, Any]] = None,
) -> str:
    """
    PUBLIC_INTERFACE
    Create a signed JWT access token.

    Args:
        subject: The subject/user identifier.
        signing_key: HMAC key shared with the verifying service.
        algorithm: JWT signing algorithm.
        token_id: jti claim; a random one is generated when omitted.
        expires_minutes: TTL override; defaults to one hour.
        claims: Additional claims to include.

    Returns:
        A compact JWT string.
    """
    exp_minutes = expires_minutes if isinstance(expires_minutes, int) else DEFAULT_EXPIRE_MINUTES
    now = datetime.now(timezone.utc)
    to_encode: dict[str, Any] = {
        "sub": subject,
        "jti": token_id or str(uuid4()),
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=exp_minutes)).timestamp()),
    }
    if isinstance(claims, dict):
        for k, v in claims.items():
            if k not in {"sub", "jti", "iat", "exp"}:
                to_encode[k] = v
    return jwt.encode(to_encode, signing_key, algorithm=algorithm)


# PUBLIC_INTERFACE
def decode_token(token: str, signing_key: str, algorithm: str = "HS256") -> dict[str, Any]:
    """
    PUBLIC_INTERFACE
    Decode and validate a JWT token, returning claims.

    Raises:
        JWTError: If token is invalid or expired.
    """
    return jwt.decode(token, signing_key, algorithms=[algorithm])
