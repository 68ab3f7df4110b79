"""
API Middleware

Components:
===========
- error_handler: Global exception handling
- request_context: Request id bound into structured logs

Usage:
======
    from clubroster.api.middleware import setup_exception_handlers, setup_request_context

    app = FastAPI()
    setup_exception_handlers(app)
    setup_request_context(app)
"""

from clubroster.api.middleware.error_handler import setup_exception_handlers
from clubroster.api.middleware.request_context import setup_request_context

__all__ = [
    "setup_exception_handlers",
    "setup_request_context",
]
