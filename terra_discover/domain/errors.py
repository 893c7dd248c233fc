"""
Error taxonomy shared by every bounded context.

Each concrete domain error belongs to exactly one ErrorKind, and each
kind carries a stable numeric code. The interface layer renders errors
from the kind alone, so a Conflict can never be reported as a fault.

Persistence errors are raised by infrastructure adapters only and are
translated into domain errors by the application layer.
No framework imports allowed.
"""

from enum import Enum


class ErrorKind(Enum):
    """Client-facing error classification with its HTTP-style code."""

    VALIDATION_FAILED = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    UNEXPECTED = 500

    @property
    def code(self) -> int:
        return self.value


class DomainError(Exception):
    """Base error for all domain errors."""

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationFailedError(DomainError):
    """Raised when input is malformed or a required value is missing."""

    kind = ErrorKind.VALIDATION_FAILED


class UnauthorizedError(DomainError):
    """Raised by the authentication collaborator before the core runs."""

    kind = ErrorKind.UNAUTHORIZED


class ForbiddenError(DomainError):
    """Raised when an authenticated caller may not touch a resource."""

    kind = ErrorKind.FORBIDDEN


class NotFoundError(DomainError):
    """Raised when an entity or a referenced entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class ConflictError(DomainError):
    """Raised when a write would break a uniqueness rule."""

    kind = ErrorKind.CONFLICT


class UnexpectedError(DomainError):
    """Raised for failures with no better classification.

    The message is for server logs only; clients get a generic text.
    """

    kind = ErrorKind.UNEXPECTED


class PersistenceError(Exception):
    """Base error raised by persistence adapters."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UniqueViolationError(PersistenceError):
    """The store rejected a write because a unique constraint failed."""


class RelatedRecordMissingError(PersistenceError):
    """A referenced row did not exist when the write reached the store."""
