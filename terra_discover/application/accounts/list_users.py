"""
Use case: List registered users.

Side effects: None (read-only query).
"""

from terra_discover.domain.accounts.entities import User
from terra_discover.domain.accounts.ports import UserRepository


class ListUsersUseCase:
    """Returns every registered user."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self) -> list[User]:
        return self._user_repo.list_all()
