# File: cardapp/core/logging.py

import logging

from cardapp.core.errors import MalformedInput

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

AVAILABLE_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging once at application start."""
    logging.basicConfig(level=_resolve(level), format=LOG_FORMAT)


def get_log_level() -> str:
    return logging.getLevelName(logging.getLogger().level)


def set_log_level(level: str) -> str:
    """Change the root log level at runtime and return the new level name."""
    logging.getLogger().setLevel(_resolve(level))
    return get_log_level()


def _resolve(level: str) -> int:
    name = (level or "").upper()
    if name not in AVAILABLE_LEVELS:
        raise MalformedInput(f"Invalid log level: {level}")
    return getattr(logging, name)
