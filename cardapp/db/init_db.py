"""
Database initialization helpers.

Models are imported so their tables get registered on Base.metadata.
"""

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from cardapp.core.config import settings
from cardapp.core.errors import CardAppError
from cardapp.models.base import Base
from cardapp.models import card, user  # noqa: F401
from cardapp.services.auth_service import ensure_user

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine)


def seed_initial_data(db: Session) -> None:
    """
    Create the default admin and owner accounts if they are missing.

    A failure is logged and does not stop the application from starting.
    """
    accounts = [
        (settings.admin_username, settings.admin_email, settings.admin_password, "admin"),
        (settings.owner_username, settings.owner_email, settings.owner_password, "owner"),
    ]
    for username, email, password, role in accounts:
        try:
            ensure_user(db, username=username, email=email, password=password, role=role)
        except CardAppError as exc:
            db.rollback()
            logger.error("Error initializing %s user: %s", role, exc.detail)
