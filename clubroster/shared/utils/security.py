"""
Security Utilities

Bearer tokens naming the acting user.

Token Claims:
=============
    user_id   acting user's UUID (string)
    iat/exp   issue and expiry time

Nothing else is trusted from the token: club roles and administrator status
are always read from the database.

Usage:
======
    from clubroster.shared.utils.security import SecurityUtils

    token = SecurityUtils.create_access_token(
        data={"user_id": str(user.id)},
        secret_key=settings.SECRET_KEY,
        expires_delta=timedelta(hours=1),
    )
    payload = SecurityUtils.decode_access_token(token, settings.SECRET_KEY)
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt


DEFAULT_TOKEN_LIFETIME = timedelta(days=1)
REQUIRED_CLAIMS = ["user_id", "exp", "iat"]


class SecurityUtils:
    """Signing and verification of access tokens with PyJWT."""

    @staticmethod
    def create_access_token(
        data: dict[str, Any],
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        issued_at = datetime.now(timezone.utc)
        claims = {
            **data,
            "iat": issued_at,
            "exp": issued_at + (expires_delta or DEFAULT_TOKEN_LIFETIME),
        }
        return jwt.encode(claims, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict[str, Any]:
        """
        Verify signature, expiry and required claims.

        Raises:
            ValueError: Expired, tampered with, or missing a required claim
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise ValueError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {e}") from e
