"""
Error taxonomy shared by the services and the HTTP layer.

Services raise these; endpoint functions catch them and turn them into
the ``{"success": false, ...}`` envelope the client expects.
"""

from typing import Any


class FeedError(Exception):
    """Base class for every error raised by the service layer."""


class ValidationError(FeedError):
    """A required field is missing or empty."""


class DuplicateEmailError(FeedError):
    """Registration attempted with an email that is already taken."""


class NotFoundError(FeedError):
    """A lookup matched no row."""


class AuthError(FeedError):
    """The supplied password does not match the stored hash."""


class StoreError(FeedError):
    """Any failure reported by SQLite (constraint, I/O, locking...).

    ``message`` carries the engine's own text so callers can tell a
    uniqueness violation apart from other failures.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def is_unique_violation(self) -> bool:
        return "UNIQUE" in self.message


def require_fields(**fields: Any) -> None:
    """Raise ``ValidationError`` naming every field that is empty or absent.

    ``0`` and ``""`` count as absent, the same as ``None``.
    """
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise ValidationError("Missing required fields: " + ", ".join(missing))
