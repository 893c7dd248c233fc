"""
Use cases: Read spaces.

Side effects: None (read-only queries).
Failure cases: SpaceNotFoundError, UserNotFoundError.
"""

import logging

from terra_discover.domain.accounts.errors import UserNotFoundError
from terra_discover.domain.accounts.ports import UserRepository
from terra_discover.domain.catalog.entities import Space
from terra_discover.domain.catalog.errors import SpaceNotFoundError
from terra_discover.domain.catalog.ports import SpaceRepository

logger = logging.getLogger(__name__)


class ListSpacesUseCase:
    """Returns every space in the catalog."""

    def __init__(self, space_repo: SpaceRepository) -> None:
        self._space_repo = space_repo

    def execute(self) -> list[Space]:
        return self._space_repo.list_all()


class GetSpaceUseCase:
    """Returns one space looked up by ID or slug."""

    def __init__(self, space_repo: SpaceRepository) -> None:
        self._space_repo = space_repo

    def execute(self, identifier: str) -> Space:
        """Run the get space use case.

        Raises:
            SpaceNotFoundError: If neither an ID nor a slug matches.
        """
        space = self._space_repo.find_by_identifier(identifier)
        if space is None:
            raise SpaceNotFoundError(identifier)
        return space


class ListUserSpacesUseCase:
    """Returns the spaces submitted by a user given a username or email."""

    def __init__(self, user_repo: UserRepository, space_repo: SpaceRepository) -> None:
        self._user_repo = user_repo
        self._space_repo = space_repo

    def execute(self, identifier: str) -> list[Space]:
        """Run the list user spaces use case.

        Raises:
            UserNotFoundError: If no user has that username or email.
        """
        user = self._user_repo.find_by_identifier(identifier)
        if user is None:
            raise UserNotFoundError(identifier)

        spaces = self._space_repo.list_by_author(user.id)
        logger.debug("Found %d spaces for user id=%s", len(spaces), user.id)
        return spaces
