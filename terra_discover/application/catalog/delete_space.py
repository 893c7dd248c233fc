"""
Use case: Delete a space.

Input: DeleteSpaceCommand (caller, space ID)
Output: None
Side effects: Removes the space; join rows cascade in the store.
Failure cases: SpaceNotFoundError, NotSpaceAuthorError, UnexpectedError.
"""

import logging

from terra_discover.application.catalog.dtos import DeleteSpaceCommand
from terra_discover.application.error_mapping import translate_persistence_error
from terra_discover.domain.catalog.errors import NotSpaceAuthorError, SpaceNotFoundError
from terra_discover.domain.catalog.ports import SpaceRepository
from terra_discover.domain.errors import PersistenceError

logger = logging.getLogger(__name__)


class DeleteSpaceUseCase:
    """Orchestrates deletion of a space by its author."""

    def __init__(self, space_repo: SpaceRepository) -> None:
        self._space_repo = space_repo

    def execute(self, command: DeleteSpaceCommand) -> None:
        """Run the delete space use case.

        Raises:
            SpaceNotFoundError: If no space has the ID, or it vanished
                before the delete ran.
            NotSpaceAuthorError: If the caller is not the author.
        """
        space = self._space_repo.get_by_id(command.space_id)
        if space is None:
            raise SpaceNotFoundError(command.space_id)

        if space.submitted_by_id != command.caller_id:
            logger.warning(
                "User %s tried to delete space %s owned by %s",
                command.caller_id,
                space.id,
                space.submitted_by_id,
            )
            raise NotSpaceAuthorError("delete")

        try:
            deleted = self._space_repo.delete(space.id)
        except PersistenceError as exc:
            raise translate_persistence_error(exc) from exc

        if not deleted:
            raise SpaceNotFoundError(command.space_id)

        logger.info("Deleted space id=%s", space.id)
