# accounts/tokens.py
"""
Signed identity assertions (JWT bearer tokens).

Tokens carry the user id in ``sub`` and the role name in ``role``.
They are signed with ``settings.JWT_SECRET`` and expire after
``settings.JWT_EXPIRATION`` seconds.
"""

from datetime import datetime, timedelta, timezone

import jwt
from django.conf import settings

from .models import role_of


class TokenError(Exception):
    """Raised when a token cannot be decoded or has expired."""


def create_access_token(user) -> str:
    """
    Issue a signed access token for a user.

    Parameters
    ----------
    user : User
        The authenticated user.

    Returns
    -------
    str
        The encoded JWT.
    """
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user.pk),
        "role": role_of(user),
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=settings.JWT_EXPIRATION)).timestamp()),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError as exc:
        raise TokenError("Token expired") from exc
    except jwt.InvalidTokenError as exc:
        raise TokenError("Invalid token") from exc


def subject_id(payload: dict) -> int:
    """
    Extract the user id from a decoded token.

    Raises
    ------
    TokenError
        If the ``sub`` claim is missing or not an integer.
    """
    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError) as exc:
        raise TokenError("Token missing user id") from exc
