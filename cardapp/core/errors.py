# File: cardapp/core/errors.py

"""
Domain errors raised by the services layer.

Each error carries the HTTP status it surfaces as; the application
installs one handler (see ``cardapp.main``) that turns them into
``{"detail": ...}`` responses.
"""

from fastapi import status


class CardAppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class StoreUnavailable(CardAppError):
    """The card store could not be reached or timed out."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Card store unavailable"


class UserNotFound(CardAppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "User not found"


class CardNotFound(CardAppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Card not found"


class MalformedInput(CardAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Malformed input"


class UserAlreadyExists(CardAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "User already exists"
