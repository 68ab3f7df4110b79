"""
API Handlers

Route handlers for the Clubroster API.

Handlers follow the pattern:
- Parse HTTP requests
- Authorize via dependencies
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from clubroster.api.handlers import (
    club_handler,
    membership_handler,
    ownership_handler,
    health_handler,
)

__all__ = [
    "club_handler",
    "membership_handler",
    "ownership_handler",
    "health_handler",
]
