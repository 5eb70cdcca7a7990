"""Application configuration utilities.

This module assembles the process-wide configuration once at startup: the
route base path, the known provider set, the authentication settings and the
static CORS policy. The resulting Settings object is frozen and handed to
create_app; nothing else reads the environment.

Environment variables:
- TELESCOPES_BASEPATH: Route base path; defaults to "/"
- TELESCOPES_PROVIDERS: Comma separated list of known cloud providers
- TELESCOPES_AUTH_ENABLED: "true"/"1" enables bearer token authentication
- TELESCOPES_AUTH_ROLE: Credential role served by the token store
- TELESCOPES_TOKEN_SIGNING_KEY: HMAC key used to verify bearer tokens
- TELESCOPES_JWT_ALGORITHM: Defaults to HS256
- DATA_DIR: Directory holding the region catalog dataset
- LOG_LEVEL: Root log level; defaults to INFO
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_PROVIDERS = ("alibaba", "amazon", "azure", "google", "oracle")

_TRUTHY = {"1", "true", "yes", "on"}


class CorsPolicy(BaseModel):
    """Cross-origin policy applied uniformly to every route."""
    model_config = ConfigDict(frozen=True)

    allow_origins: Tuple[str, ...] = Field(default=("*",), description="Allowed origins.")
    allow_methods: Tuple[str, ...] = Field(
        default=("PUT", "DELETE", "GET", "POST", "OPTIONS"), description="Allowed methods."
    )
    allow_headers: Tuple[str, ...] = Field(
        default=("Origin", "Authorization", "Content-Type"), description="Allowed request headers."
    )
    expose_headers: Tuple[str, ...] = Field(default=("Content-Length",), description="Exposed headers.")
    allow_credentials: bool = Field(default=True, description="Allow credentialed requests.")
    max_age: int = Field(default=12, description="Preflight cache lifetime in seconds.")


class Settings(BaseModel):
    """Configuration settings loaded from environment with secure defaults."""
    model_config = ConfigDict(frozen=True)

    base_path: str = Field(default="/", description="Base path all routes are mounted under.")
    known_providers: Tuple[str, ...] = Field(
        default=DEFAULT_PROVIDERS, description="Providers accepted in the request path."
    )
    auth_enabled: bool = Field(default=False, description="Require bearer tokens on business routes.")
    auth_role: str = Field(default="", description="Credential role served by the token store.")
    token_signing_key: Optional[str] = Field(default=None, description="JWT signing key.")
    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm.")
    cors: CorsPolicy = Field(default_factory=CorsPolicy, description="Static CORS policy.")
    data_dir: str = Field(
        default=str(Path(__file__).resolve().parents[2] / "data"),
        description="Path to JSON data directory."
    )
    log_level: str = Field(default="INFO", description="Root log level.")

    @model_validator(mode="after")
    def _signing_key_required(self) -> "Settings":
        if self.auth_enabled and not self.token_signing_key:
            raise ValueError("token_signing_key is required when auth is enabled")
        return self

    @property
    def route_prefix(self) -> str:
        """Base path normalized for use as a router prefix ("" for the root)."""
        path = self.base_path.strip()
        if not path.startswith("/"):
            path = "/" + path
        return path.rstrip("/")


def _split_csv(raw: str) -> Tuple[str, ...]:
    return tuple(p.strip().lower() for p in raw.split(",") if p.strip())


def load_settings() -> Settings:
    """Load settings from environment with robust defaults and validation.

    Returns:
        Settings: Validated, immutable settings object.

    Raises:
        ValidationError: If environment values are invalid.
    """
    base_path = os.getenv("TELESCOPES_BASEPATH", "").strip() or "/"

    providers = _split_csv(os.getenv("TELESCOPES_PROVIDERS", ""))

    kwargs = {}
    data_dir = os.getenv("DATA_DIR")
    if data_dir:
        kwargs["data_dir"] = data_dir

    return Settings(
        base_path=base_path,
        known_providers=providers or DEFAULT_PROVIDERS,
        auth_enabled=os.getenv("TELESCOPES_AUTH_ENABLED", "").strip().lower() in _TRUTHY,
        auth_role=os.getenv("TELESCOPES_AUTH_ROLE", ""),
        token_signing_key=os.getenv("TELESCOPES_TOKEN_SIGNING_KEY") or None,
        jwt_algorithm=os.getenv("TELESCOPES_JWT_ALGORITHM", "HS256"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        **kwargs,
    )


# Singleton-style accessor
_settings: Optional[Settings] = None

# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Get cached application settings."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings

# PUBLIC_INTERFACE
def reset_settings_cache() -> None:
    """Reset the cached settings.

    Intended for tests so that environment changes made with monkeypatch take
    effect on the next get_settings() call.
    """
    global _settings
    _settings = None
