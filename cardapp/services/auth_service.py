# File: cardapp/services/auth_service.py

"""
Authentication service.

Contains:
  - User lookup
  - Registration (unique username and email)
  - Password verification
  - First-boot creation of the admin and owner accounts
"""

import logging
from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cardapp.core.config import settings
from cardapp.core.errors import MalformedInput, UserAlreadyExists, UserNotFound
from cardapp.core.security import hash_password, verify_password
from cardapp.models.user import User
from cardapp.services.common import store_errors, validate_id

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: str) -> User:
    """Resolve a user id, raising UserNotFound when it does not exist."""
    user_id = validate_id(user_id, "user id")
    with store_errors("user lookup"):
        user = db.get(User, user_id)
    if user is None:
        raise UserNotFound()
    return user


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    with store_errors("user lookup"):
        return db.scalar(select(User).where(User.username == username))


def register_user(
    db: Session,
    *,
    username: str,
    email: str,
    password: str,
    role: Optional[str] = None,
) -> User:
    if len(password) < settings.min_password_length:
        raise MalformedInput(
            f"Password must be at least {settings.min_password_length} characters"
        )

    with store_errors("user registration"):
        existing = db.scalar(
            select(User).where(or_(User.username == username, User.email == email))
        )
        if existing is not None:
            raise UserAlreadyExists()

        user = User(
            username=username,
            email=email,
            hashed_password=hash_password(password),
            role=role or "user",
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration
            db.rollback()
            raise UserAlreadyExists() from None
        db.refresh(user)

    logger.info("Registered user %s (%s)", user.username, user.role)
    return user


def authenticate_user(
    db: Session,
    *,
    username: str,
    password: str,
) -> Optional[User]:
    """
    Return the user when the credentials match, otherwise None.
    """
    user = get_user_by_username(db, username)
    if user is None or not verify_password(password, user.hashed_password):
        logger.info("Failed login for username %s", username)
        return None
    return user


def ensure_user(
    db: Session,
    *,
    username: str,
    email: str,
    password: str,
    role: str,
) -> bool:
    """Create the account if no user with that username exists. Returns True if created."""
    if get_user_by_username(db, username) is not None:
        return False
    register_user(db, username=username, email=email, password=password, role=role)
    logger.info("Default %s user created", role)
    return True
