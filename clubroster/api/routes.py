"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live                     → Health check endpoints
    /clubs                                     → Club registration, join/leave/role
    /clubs/{club_id}/members                   → Roster and moderation
    /clubs/{club_id}/ownership, /moderators    → Owner-level governance

Usage:
======
    from clubroster.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from clubroster.api.handlers import (
    club_handler,
    membership_handler,
    ownership_handler,
    health_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        club_handler.router,
        prefix="/clubs",
        tags=["Clubs"],
    )

    app.include_router(
        membership_handler.router,
        prefix="/clubs",
        tags=["Memberships"],
    )

    app.include_router(
        ownership_handler.router,
        prefix="/clubs",
        tags=["Ownership"],
    )
