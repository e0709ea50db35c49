"""
Admin Token Utilities

Bridge to the external auth collaborator. Admin accounts, passwords and
token issuance live in that collaborator; this backend only needs to turn a
bearer token into the ``admin_id`` that owns a write.

JWT Tokens:
===========
Uses PyJWT. The payload must carry an integer ``admin_id`` claim.

Usage:
======
    from athenaeum.shared.utils.security import SecurityUtils

    admin_id = SecurityUtils.admin_id_from_token(token, settings.SECRET_KEY)

    # Tests and local tooling can mint compatible tokens
    token = SecurityUtils.create_access_token({"admin_id": 1}, settings.SECRET_KEY)
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt


class SecurityUtils:
    """JWT helpers for the admin token seam."""

    @staticmethod
    def create_access_token(
        data: dict,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create a signed JWT.

        Args:
            data: Payload data to encode (e.g. {"admin_id": 1})
            secret_key: Secret key for signing
            expires_delta: Token lifetime (default: 1 day)
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT token string
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)
        to_encode.update({
            "exp": now + (expires_delta or timedelta(days=1)),
            "iat": now,
        })
        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Decode and verify a JWT.

        Raises:
            ValueError: If token is expired or invalid
        """
        try:
            return jwt.decode(token, secret_key, algorithms=[algorithm])
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")

    @classmethod
    def admin_id_from_token(
        cls,
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> int:
        """
        Extract the acting admin's id from a token.

        Raises:
            ValueError: If the token is invalid or has no integer admin_id
        """
        payload = cls.decode_access_token(token, secret_key, algorithm)
        admin_id = payload.get("admin_id")
        if isinstance(admin_id, bool) or not isinstance(admin_id, (int, str)):
            raise ValueError("Token has no admin_id claim")
        try:
            return int(admin_id)
        except ValueError:
            raise ValueError("Token admin_id is not an integer")
