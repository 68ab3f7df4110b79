"""
Clubroster

Club-membership governance: who belongs to which club, the roles each member
holds, and safe transfer of club ownership.

Package Structure:
==================
    clubroster/
    ├── api/        ← FastAPI application (authorization, error translation)
    ├── shared/     ← Shared code (models, repositories, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn clubroster.api.main:app --reload

    # Migrations
    alembic upgrade head
"""
