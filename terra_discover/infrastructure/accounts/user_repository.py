"""
Adapter: User repository.

Implements UserRepository port on top of the SQLAlchemy ORM.
"""

from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Session, sessionmaker

from terra_discover.domain.accounts.entities import NewUser, User
from terra_discover.domain.accounts.ports import UserRepository
from terra_discover.infrastructure.accounts.models import UserModel
from terra_discover.infrastructure.database import as_utc, translate_errors


def _to_user(model: UserModel) -> User:
    return User(
        id=model.id,
        username=model.username,
        email=model.email,
        password_hash=model.password_hash,
        created_at=as_utc(model.created_at),
        profile_picture=model.profile_picture,
        bio=model.bio,
    )


class UserRepositoryAdapter(UserRepository):
    """Persists users to the relational store."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def list_all(self) -> list[User]:
        with translate_errors(), self._session_factory() as session:
            models = session.scalars(select(UserModel).order_by(UserModel.created_at)).all()
            return [_to_user(model) for model in models]

    def get_by_id(self, user_id: str) -> Optional[User]:
        with translate_errors(), self._session_factory() as session:
            model = session.get(UserModel, user_id)
            return _to_user(model) if model is not None else None

    def get_by_email(self, email: str) -> Optional[User]:
        return self._first(UserModel.email == email)

    def get_by_username(self, username: str) -> Optional[User]:
        return self._first(UserModel.username == username)

    def find_by_identifier(self, identifier: str) -> Optional[User]:
        return self._first(
            or_(UserModel.email == identifier, UserModel.username == identifier)
        )

    def add(self, user: NewUser) -> User:
        with translate_errors(), self._session_factory.begin() as session:
            model = UserModel(
                username=user.username,
                email=user.email,
                password_hash=user.password_hash,
                profile_picture=user.profile_picture,
                bio=user.bio,
            )
            session.add(model)
            session.flush()
            return _to_user(model)

    def _first(self, condition) -> Optional[User]:
        with translate_errors(), self._session_factory() as session:
            model = session.scalars(select(UserModel).where(condition).limit(1)).first()
            return _to_user(model) if model is not None else None
