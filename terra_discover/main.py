"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (spaces, taxonomies, auth, users, health)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (CORS, secure headers)
- Logging configuration
- Database schema creation at startup

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from terra_discover.core.config import settings
from terra_discover.infrastructure.database import get_engine, init_db
from terra_discover.interfaces.accounts.router import router as auth_router
from terra_discover.interfaces.accounts.users_router import router as users_router
from terra_discover.interfaces.catalog.router import router as spaces_router
from terra_discover.interfaces.catalog.taxonomy_router import (
    categories_router,
    features_router,
    types_router,
)
from terra_discover.interfaces.health import router as health_router
from terra_discover.shared.errors.handlers import register_error_handlers
from terra_discover.shared.logging import configure_logging
from terra_discover.shared.security.headers import SecurityHeadersMiddleware

logger = logging.getLogger(__name__)

WELCOME_TEXT = "Welcome to the Terra Discover API!"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: make sure the schema exists before serving."""
    init_db(get_engine())
    logger.info("%s %s started", settings.project_name, settings.version)
    yield
    get_engine().dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level, sql_echo=settings.sql_echo)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    def welcome() -> str:
        return WELCOME_TEXT

    for router in (
        health_router,
        auth_router,
        users_router,
        spaces_router,
        types_router,
        categories_router,
        features_router,
    ):
        app.include_router(router, prefix=settings.api_prefix)

    return app


app = create_app()
