import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import Settings, get_settings
from src.core.errors import ApiError, api_error_handler, unhandled_exception_handler
from src.core.logging_config import setup_logging
from src.routers import health, recommender
from src.security.token_store import InMemoryTokenStore, TokenStore
from src.services.recommendations import RecommendationEngine
from src.services.regions import JsonRegionCatalog, RegionCatalog
from src.validation.params import ParamRules

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def create_app(
    engine: RecommendationEngine,
    settings: Optional[Settings] = None,
    region_catalog: Optional[RegionCatalog] = None,
    token_store: Optional[TokenStore] = None,
) -> FastAPI:
    """Assemble the HTTP boundary around a recommendation engine.

    Args:
        engine: Computes recommendations; shared by all requests.
        settings: Immutable configuration; loaded from the environment if omitted.
        region_catalog: Region knowledge; defaults to the bundled regions dataset.
        token_store: Token validity store used when auth is enabled.

    Returns:
        The configured FastAPI application.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    logger.info("configuring routes")

    app = FastAPI(
        title="Cluster Recommender",
        description="Recommends node-pool layouts for a workload on a cloud provider region.",
        version="0.1.0",
        openapi_tags=[
            {"name": "health", "description": "Service health"},
            {"name": "recommender", "description": "Cluster recommendations"},
        ],
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.param_rules = ParamRules.for_providers(settings.known_providers)
    app.state.region_catalog = region_catalog or JsonRegionCatalog(settings.data_dir)
    if settings.auth_enabled:
        logger.info("authentication enabled for role %r", settings.auth_role)
        app.state.token_store = token_store or InMemoryTokenStore(settings.auth_role)

    cors = settings.cors
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors.allow_origins),
        allow_credentials=cors.allow_credentials,
        allow_methods=list(cors.allow_methods),
        allow_headers=list(cors.allow_headers),
        expose_headers=list(cors.expose_headers),
        max_age=cors.max_age,
    )

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    base = settings.route_prefix
    app.include_router(health.router, prefix=base)
    app.include_router(
        recommender.router,
        prefix=f"{base}/api/v1",
        dependencies=recommender.business_guards(settings),
    )
    return app
