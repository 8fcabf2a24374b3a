# File: cardapp/services/common.py

"""
Helpers shared by the services: id validation and translation of
database failures into ``StoreUnavailable``.
"""

import logging
import uuid
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import DBAPIError, OperationalError, TimeoutError as PoolTimeoutError

from cardapp.core.errors import MalformedInput, StoreUnavailable

logger = logging.getLogger(__name__)


def validate_id(value: str, kind: str = "id") -> str:
    """Return ``value`` in canonical UUID form or raise MalformedInput."""
    try:
        return str(uuid.UUID(str(value)))
    except (ValueError, TypeError, AttributeError):
        raise MalformedInput(f"Invalid {kind} format: {value!r}") from None


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """
    Run a block of store reads/writes and surface connectivity failures
    as a single StoreUnavailable.
    """
    try:
        yield
    except (OperationalError, PoolTimeoutError) as exc:
        logger.error("Store unavailable during %s: %s", operation, exc)
        raise StoreUnavailable() from exc
    except DBAPIError as exc:
        if exc.connection_invalidated:
            logger.error("Store connection lost during %s: %s", operation, exc)
            raise StoreUnavailable() from exc
        raise
