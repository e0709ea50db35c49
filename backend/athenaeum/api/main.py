"""
Athenaeum API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           ATHENAEUM API                                     │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   Middleware:    CORS  ·  exception handlers (error taxonomy → JSON)        │
│                              │                                              │
│                              ▼                                              │
│   Routers:       health · biographies · biography-annexes · articles        │
│                  research · glossary · dialogues · catalog                  │
│                              │                                              │
│                              ▼                                              │
│   Dependencies:  DbSession · CurrentAdmin · Pagination · services           │
│                              │                                              │
│                              ▼                                              │
│   Core:          services → repositories (slug, SEO meta, pagination)       │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connectivity verified
3. Application serves requests
4. Application stops → lifespan shutdown
5. Engine disposed

Usage:
======
    # Run with uvicorn (from backend/)
    uvicorn athenaeum.api.main:app --host 0.0.0.0 --port 8000 --reload

    # Or programmatically
    from athenaeum.api.main import create_application
    app = create_application()
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from athenaeum.config.settings import settings
from athenaeum.shared.db import close_db, init_db
from athenaeum.shared.core.logging import logger
from athenaeum.api.middleware import setup_exception_handlers
from athenaeum.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup verifies the database; shutdown disposes the engine.
    """
    logger.info(
        "Starting Athenaeum API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )
    await init_db()
    logger.info("Athenaeum API started successfully")

    yield

    logger.info("Shutting down Athenaeum API")
    await close_db()
    logger.info("Athenaeum API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Content backend: biographies, articles, research, glossary, dialogues, catalog",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


# Create the application instance
app = create_application()
