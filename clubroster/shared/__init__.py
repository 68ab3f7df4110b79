"""
Shared Module

Contains the governance core used by the HTTP API and by library callers:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Engine, sessions, unit of work
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── migrations/     ← Alembic environment and revisions
    └── utils/          ← JWT helpers

Usage:
======
    from clubroster.shared.db import unit_of_work
    from clubroster.shared.models import ClubRole
    from clubroster.shared.services import ClubOwnerService
    from clubroster.shared.core import logger, ClubrosterException
"""
