from abc import ABC


class UserError(ABC, Exception):
    """Base class for errors caused by the caller's request.

    All errors that inherit from UserError will have their messages
    returned to the caller. These errors should not contain any
    sensitive information.
    """


class NotFoundError(UserError):
    """Raised when a note or comment does not exist under the given constraints."""

    def __init__(self, message: str = "Not found") -> None:
        super().__init__(message)


class AuthenticationError(UserError):
    """Raised when the acting user cannot be identified."""

    def __init__(self, message: str = "Actor identity required") -> None:
        super().__init__(message)


class AccessDeniedError(UserError):
    """Raised when the actor may not perform a transition on an existing entity.

    Covers both authorship/ownership failures and deletion-state conflicts
    (double delete, restoring a live comment, editing a deleted entity).
    """


class ValidationError(UserError):
    """Raised when input fails a structural check before authorization."""
