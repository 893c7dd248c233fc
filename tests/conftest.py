"""
Shared pytest fixtures.

Every test gets a fresh in-memory SQLite database with foreign keys
enabled, real repository adapters on top of it, and seeded users and
taxonomy terms. API tests reuse the same database through a
dependency override on the session factory.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from terra_discover.core.config import settings
from terra_discover.domain.accounts.entities import NewUser, User
from terra_discover.domain.catalog.entities import TaxonomyKind, TaxonomyTerm
from terra_discover.domain.catalog.reference_validator import ReferenceValidator
from terra_discover.domain.catalog.slug_generator import SlugGenerator
from terra_discover.infrastructure.accounts.password_hasher import BcryptPasswordHasherAdapter
from terra_discover.infrastructure.accounts.token_service import JwtTokenServiceAdapter
from terra_discover.infrastructure.accounts.user_repository import UserRepositoryAdapter
from terra_discover.infrastructure.catalog.space_repository import SpaceRepositoryAdapter
from terra_discover.infrastructure.catalog.taxonomy_repository import (
    build_taxonomy_repositories,
)
from terra_discover.infrastructure.database import (
    create_db_engine,
    create_session_factory,
    get_session_factory,
    init_db,
)
from terra_discover.interfaces.accounts.dependencies import get_password_hasher
from terra_discover.main import app

FAST_BCRYPT_ROUNDS = 4


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def space_repo(session_factory) -> SpaceRepositoryAdapter:
    return SpaceRepositoryAdapter(session_factory)


@pytest.fixture
def user_repo(session_factory) -> UserRepositoryAdapter:
    return UserRepositoryAdapter(session_factory)


@pytest.fixture
def taxonomy_repos(session_factory):
    return build_taxonomy_repositories(session_factory)


@pytest.fixture
def reference_validator(taxonomy_repos) -> ReferenceValidator:
    return ReferenceValidator(taxonomy_repos.values())


@pytest.fixture
def slug_generator(space_repo) -> SlugGenerator:
    return SlugGenerator(space_repo)


@pytest.fixture
def password_hasher() -> BcryptPasswordHasherAdapter:
    return BcryptPasswordHasherAdapter(rounds=FAST_BCRYPT_ROUNDS)


@pytest.fixture
def token_service() -> JwtTokenServiceAdapter:
    return JwtTokenServiceAdapter(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl_seconds=settings.access_token_ttl_seconds,
    )


def _add_user(user_repo, hasher, username: str) -> User:
    return user_repo.add(
        NewUser(
            username=username,
            email=f"{username}@example.com",
            password_hash=hasher.hash("correct-horse"),
        )
    )


@pytest.fixture
def author(user_repo, password_hasher) -> User:
    return _add_user(user_repo, password_hasher, "alice")


@pytest.fixture
def other_user(user_repo, password_hasher) -> User:
    return _add_user(user_repo, password_hasher, "bob")


@pytest.fixture
def park_type(taxonomy_repos) -> TaxonomyTerm:
    return taxonomy_repos[TaxonomyKind.TYPE].add("Park", "Green public space")


@pytest.fixture
def museum_type(taxonomy_repos) -> TaxonomyTerm:
    return taxonomy_repos[TaxonomyKind.TYPE].add("Museum", None)


@pytest.fixture
def categories(taxonomy_repos) -> dict[str, TaxonomyTerm]:
    repo = taxonomy_repos[TaxonomyKind.CATEGORY]
    return {name: repo.add(name, None) for name in ("Nature", "History", "Family")}


@pytest.fixture
def features(taxonomy_repos) -> dict[str, TaxonomyTerm]:
    repo = taxonomy_repos[TaxonomyKind.FEATURE]
    return {name: repo.add(name, None) for name in ("Parking", "Wifi")}


@pytest.fixture
def client(session_factory, password_hasher):
    """TestClient bound to the per-test database. Lifespan is not run."""
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_password_hasher] = lambda: password_hasher
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(token_service):
    """Build an Authorization header for a stored user."""

    def build(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {token_service.issue(user.id, user.email)}"}

    return build
