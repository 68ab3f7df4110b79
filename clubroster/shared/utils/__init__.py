"""
Utilities Package

Contents:
=========
- security: JWT management

Usage:
======
    from clubroster.shared.utils.security import SecurityUtils
"""

from clubroster.shared.utils.security import SecurityUtils

__all__ = [
    "SecurityUtils",
]
