"""
Clubroster API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           CLUBROSTER API                                    │
├─────────────────────────────────────────────────────────────────────────────┤
│   Middleware Stack:   CORS → Error Handler                                  │
│                              │                                              │
│                              ▼                                              │
│   Routers:    Health │ Clubs │ Memberships │ Ownership                      │
│                              │                                              │
│                              ▼                                              │
│   Dependencies:  Database (unit of work) │ Auth (JWT + club role) │ Services│
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connectivity verified
3. Application serves requests
4. Application stops → lifespan shutdown
5. Database connections closed

Usage:
======
    uvicorn clubroster.api.main:app --host 0.0.0.0 --port 8000 --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from clubroster.config.settings import settings
from clubroster.shared.db import init_db, close_db
from clubroster.shared.core.logging import logger
from clubroster.api.middleware import setup_exception_handlers, setup_request_context
from clubroster.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup: verify the database is reachable.
    Shutdown: close pooled connections.
    """
    logger.info(
        "Starting Clubroster API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    await init_db()
    logger.info("Clubroster API started successfully")

    yield

    logger.info("Shutting down Clubroster API")
    await close_db()
    logger.info("Clubroster API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    This factory function:
    1. Creates the FastAPI app with settings
    2. Adds middleware (CORS, request context)
    3. Sets up exception handlers
    4. Registers all routes
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Club membership and ownership governance",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)
    setup_request_context(app)
    register_routes(app)

    return app


# Create the application instance
app = create_application()
