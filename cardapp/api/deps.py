# File: cardapp/api/deps.py

import logging
from collections.abc import Callable, Generator
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from cardapp.core.errors import MalformedInput, UserNotFound
from cardapp.core.security import decode_access_token
from cardapp.db.session import SessionLocal
from cardapp.models.user import User
from cardapp.services.auth_service import get_user

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None:
        raise _unauthorized("Authentication required")

    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        raise _unauthorized("Authentication required")

    try:
        user = get_user(db, user_id)
    except (UserNotFound, MalformedInput):
        logger.info("Token subject %s does not resolve to a user", user_id)
        raise _unauthorized("Authentication required") from None

    logger.debug("Authenticated %s (%s)", user.username, user.role)
    return user


def require_roles(*roles: str) -> Callable[..., User]:
    """Dependency factory: the current user must hold one of ``roles``."""

    def checker(user: User = Depends(get_current_user)) -> User:
        if user.role not in roles:
            logger.info("User %s (%s) denied; needs one of %s", user.username, user.role, roles)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Forbidden - Insufficient permissions",
            )
        return user

    return checker


require_admin = require_roles("admin")
require_owner = require_roles("owner")
