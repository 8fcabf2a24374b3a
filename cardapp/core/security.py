# File: cardapp/core/security.py

"""
Security helpers for the Card App API.

Passwords are hashed with bcrypt, access tokens are HS256 JWTs whose
``sub`` claim carries the user id.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import bcrypt
import jwt

from cardapp.core.config import settings

logger = logging.getLogger(__name__)

ALGORITHM = settings.algorithm
ACCESS_TOKEN_EXPIRE_MINUTES = settings.access_token_expire_minutes
SECRET_KEY = settings.secret_key


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        logger.warning("Password check against a malformed hash")
        return False


def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Issue a signed access token for ``subject`` (a user id).

    ``iat`` and ``exp`` are set here; PyJWT validates ``exp`` on decode.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode: dict[str, Any] = {"sub": subject, "iat": now, "exp": expire}
    token = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
    logger.info("Generated token for user id %s", subject)
    return token


def decode_access_token(token: str) -> Optional[str]:
    """
    Return the ``sub`` claim of a valid token, or None when the token is
    malformed, badly signed or expired.
    """
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired token")
        return None
    except jwt.InvalidTokenError as exc:
        logger.info("Rejected invalid token: %s", exc)
        return None

    subject = payload.get("sub")
    if not isinstance(subject, str):
        return None
    return subject
