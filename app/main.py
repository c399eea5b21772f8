# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# Starts the Oyster Review service: opens the database, plugs in the review and profile
# endpoints and wraps every request with logging, CORS and error formatting.
#
# 🧪 Purpose (Technical Summary):
# create_application() builds the FastAPI app (lifespan, middleware stack, slowapi limiter
# state, exception handlers, /api/v1 router). main() runs it under uvicorn.
#
# 🔗 Dependencies:
# - FastAPI framework, slowapi, uvicorn
# - app.shared.config.settings
# - app.shared.infrastructure.database.connection / session
# - app.api.v1.router (review and profile module routers)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn (app.main:app)
# - oyster-review-api console script
# - tests (httpx ASGITransport)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from app.api.middleware import RequestLoggingMiddleware, register_exception_handlers
from app.api.v1.router import api_v1_router
from app.modules.review_management.presentation.dependencies import limiter
from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import close_database, db_manager, init_database
from app.shared.infrastructure.database.session import initialize_sessions
from app.shared.utils.logging import setup_logging

settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging, open the database on startup and dispose of it on shutdown."""
    setup_logging()

    logger.info("🦪 Oyster Review API starting up...")

    try:
        await init_database()
        logger.info("✅ Database connection initialized")

        initialize_sessions()
        logger.info("✅ Session manager initialized")

        # SQLite has no migrations run against it; build the schema from the models
        if settings.is_sqlite:
            await db_manager.create_tables()

        logger.info("✅ Oyster Review API startup complete")

    except Exception as e:
        logger.error(f"❌ Startup failed: {e}")
        raise

    try:
        yield
    finally:
        logger.info("🔄 Oyster Review API shutting down...")
        await close_database()
        logger.info("✅ Oyster Review API shutdown complete")


def create_application() -> FastAPI:
    """
    Build the FastAPI application.

    Docs are only served in DEBUG. Middleware is added innermost first,
    so GZip wraps CORS which wraps request logging.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    # Request id and timing
    app.add_middleware(RequestLoggingMiddleware)

    # Mobile and web clients
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Response-Time"],
    )

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Rate limiter used by the @limiter.limit decorators on review writes
    app.state.limiter = limiter

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    register_exception_handlers(app)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(
        api_v1_router,
        prefix="/api/v1",
    )

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.DEBUG else None,
            "health_check": "/api/v1/health",
            "api_base": "/api/v1",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)

    return app


app = create_application()


def main():
    """Entry point for the oyster-review-api console script."""
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
