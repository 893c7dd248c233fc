"""
Domain service: unique slug generation for spaces.

Derives a lowercase, hyphenated, ASCII-only slug from a display name
and probes the SpaceRepository until an unused value is found.

The probe is best effort. Two concurrent requests can still pick the
same slug, so the store's unique index stays the final arbiter.
"""

import logging
import uuid

from slugify import slugify

from terra_discover.domain.catalog.ports import SpaceRepository

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 100
RANDOM_SUFFIX_LENGTH = 8

# Dropped rather than turned into a separator: "St. Mary's" -> "st-marys"
APOSTROPHES = [["'", ""], ["’", ""]]


def slugify_name(name: str) -> str:
    """Return the strict slug of ``name`` (may be empty for symbol-only names)."""
    return slugify(name, lowercase=True, replacements=APOSTROPHES)


def _random_suffix() -> str:
    return uuid.uuid4().hex[:RANDOM_SUFFIX_LENGTH]


class SlugGenerator:
    """Generates slugs that no existing space uses.

    Suffixes are always appended to the slug of the original name
    (``name-1``, ``name-2``, ...), never to the previous candidate.
    After ``max_attempts`` numbered candidates a random suffix is used.
    """

    def __init__(
        self,
        space_repo: SpaceRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self._space_repo = space_repo
        self._max_attempts = max_attempts

    def ensure_unique_slug(self, display_name: str) -> str:
        """Return a slug for ``display_name`` not used by any space.

        Args:
            display_name: Non-empty display name of the space.

        Returns:
            The first unused candidate.
        """
        base = slugify_name(display_name)
        if not base:
            base = _random_suffix()

        if not self._space_repo.slug_exists(base):
            return base

        for counter in range(1, self._max_attempts + 1):
            candidate = f"{base}-{counter}"
            if not self._space_repo.slug_exists(candidate):
                return candidate

        fallback = f"{base}-{_random_suffix()}"
        logger.warning(
            "Slug attempts exhausted for base=%s after %d tries, using %s",
            base,
            self._max_attempts,
            fallback,
        )
        return fallback
