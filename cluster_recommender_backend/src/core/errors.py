"""Error taxonomy for the request pipeline and its JSON renderings.

Guards raise; the handlers registered in create_app turn the exception into
the response body. The first raised error ends the request.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors that map onto a fixed HTTP response shape."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "internal_error"

    def __init__(self, message: str, cause: Optional[str] = None):
        self.message = message
        self.cause = cause
        super().__init__(message if cause is None else f"{message}: {cause}")

    def to_content(self) -> Dict[str, Any]:
        content: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.cause is not None:
            content["cause"] = self.cause
        return content


class BadParamsError(ApiError):
    """Invalid path parameter, region or request body."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "bad_params"

    def __init__(self, message: str, cause: Optional[str] = None, params: Optional[Dict[str, str]] = None):
        self.params = params
        super().__init__(message, cause)

    def to_content(self) -> Dict[str, Any]:
        content = super().to_content()
        if self.params:
            content["params"] = dict(self.params)
        return content


class AuthError(ApiError):
    """Missing or rejected bearer credential."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "unauthorized"


class EngineError(ApiError):
    """Any failure reported by the recommendation engine."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "engine_error"

    def to_content(self) -> Dict[str, Any]:
        return {"status": self.status_code, "message": self.message}


# ===========================================
# Exception Handlers
# ===========================================


async def api_error_handler(request: Request, exc: ApiError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_content(), headers=headers)


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all for truly unhandled exceptions; no internals in the body."""
    logger.error(
        "unhandled error on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=True,
    )
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
