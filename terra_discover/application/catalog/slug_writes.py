"""
Shared write helper for use cases that assign a slug.

The slug generator's pre-check races with concurrent writers; the
store's unique index decides. When the write loses that race the slug
is regenerated and the write retried up to ``retries`` times, after
which the violation is reported as a Conflict.
"""

import logging
from typing import Callable

from terra_discover.application.error_mapping import translate_persistence_error
from terra_discover.domain.catalog.entities import Space
from terra_discover.domain.catalog.errors import (
    RelatedRecordsNotFoundError,
    SlugConflictError,
)
from terra_discover.domain.errors import PersistenceError, UniqueViolationError

logger = logging.getLogger(__name__)


def write_with_slug_retry(
    write: Callable[[str], Space],
    slug: str,
    regenerate: Callable[[], str],
    retries: int,
) -> Space:
    """Run ``write(slug)``, regenerating the slug on unique violations.

    Args:
        write: Persists the space using the given slug.
        slug: The slug produced by the slug generator.
        regenerate: Produces a fresh slug after a lost race.
        retries: How many regenerate-and-retry rounds are allowed.

    Returns:
        The persisted space.

    Raises:
        SlugConflictError: If the slug still collides after all retries.
        RelatedRecordsNotFoundError: If a referenced row vanished.
        UnexpectedError: For any other persistence failure.
    """
    attempt = 0
    while True:
        try:
            return write(slug)
        except UniqueViolationError as exc:
            if attempt >= retries:
                raise translate_persistence_error(
                    exc, conflict=SlugConflictError(slug)
                ) from exc
            attempt += 1
            logger.warning(
                "Slug %s taken at write time, regenerating (attempt %d/%d)",
                slug,
                attempt,
                retries,
            )
            slug = regenerate()
        except PersistenceError as exc:
            raise translate_persistence_error(
                exc, not_found=RelatedRecordsNotFoundError()
            ) from exc
