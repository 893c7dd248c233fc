"""
Domain service: validation of taxonomy references.

Every create and update path checks type, category and feature IDs
through this one service, with a single batched lookup per kind.
The check exists for precise error messages; the write itself is
still guarded by the store's foreign keys.
"""

from typing import Iterable, Optional

from terra_discover.domain.catalog.entities import TaxonomyKind
from terra_discover.domain.catalog.errors import ReferencesNotFoundError
from terra_discover.domain.catalog.ports import TaxonomyRepository


class ReferenceValidator:
    """Resolves reference IDs against their taxonomy repositories."""

    def __init__(self, repositories: Iterable[TaxonomyRepository]) -> None:
        self._repos = {repo.kind: repo for repo in repositories}

    def validate(self, kind: TaxonomyKind, term_ids: Optional[list[str]]) -> None:
        """Check that every ID in ``term_ids`` exists for ``kind``.

        An empty or missing list is valid and means "no associations".

        Raises:
            ReferencesNotFoundError: Naming every ID that did not resolve.
        """
        if not term_ids:
            return

        found = self._repos[kind].find_existing_ids(term_ids)
        missing = [term_id for term_id in dict.fromkeys(term_ids) if term_id not in found]
        if missing:
            raise ReferencesNotFoundError(kind, missing)

    def validate_type(self, type_id: str) -> None:
        """Check a single, mandatory type reference."""
        self.validate(TaxonomyKind.TYPE, [type_id])
