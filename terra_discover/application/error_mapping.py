"""
Error mapper.

Turns persistence failures into domain errors, and any exception into
the client-facing ``ErrorBody``. The mapping is deterministic and total:

- UniqueViolationError       -> Conflict (409)
- RelatedRecordMissingError  -> NotFound (404)
- any other PersistenceError -> Unexpected (500)
- any non-domain exception   -> Unexpected (500)

Unexpected errors never expose their message; callers log the detail.
"""

from dataclasses import dataclass
from typing import Optional

from terra_discover.domain.errors import (
    ConflictError,
    DomainError,
    ErrorKind,
    NotFoundError,
    PersistenceError,
    RelatedRecordMissingError,
    UnexpectedError,
    UniqueViolationError,
)

GENERIC_UNEXPECTED_MESSAGE = "An unexpected server error occurred."
DEFAULT_CONFLICT_MESSAGE = "A resource with the same unique value already exists."
DEFAULT_NOT_FOUND_MESSAGE = "One or more related records not found."


@dataclass(frozen=True)
class ErrorBody:
    """Tagged error result: kind plus the ``{message, code}`` body."""

    kind: ErrorKind
    message: str

    @property
    def code(self) -> int:
        return self.kind.code

    def as_dict(self) -> dict[str, object]:
        return {"message": self.message, "code": self.code}


def translate_persistence_error(
    exc: PersistenceError,
    conflict: Optional[ConflictError] = None,
    not_found: Optional[NotFoundError] = None,
) -> DomainError:
    """Classify a persistence failure into a domain error.

    Args:
        exc: The error raised by a repository adapter.
        conflict: Error to use for a unique violation, for a precise message.
        not_found: Error to use for a missing related record.

    Returns:
        A DomainError of kind Conflict, NotFound or Unexpected.
    """
    if isinstance(exc, UniqueViolationError):
        return conflict or ConflictError(DEFAULT_CONFLICT_MESSAGE)
    if isinstance(exc, RelatedRecordMissingError):
        return not_found or NotFoundError(DEFAULT_NOT_FOUND_MESSAGE)
    return UnexpectedError(f"Persistence failure: {exc.message}")


def describe_error(exc: Exception) -> ErrorBody:
    """Return the client-facing error body for any exception."""
    if isinstance(exc, PersistenceError):
        exc = translate_persistence_error(exc)

    if isinstance(exc, DomainError) and exc.kind is not ErrorKind.UNEXPECTED:
        return ErrorBody(kind=exc.kind, message=exc.message)

    return ErrorBody(kind=ErrorKind.UNEXPECTED, message=GENERIC_UNEXPECTED_MESSAGE)
