"""
Tests for the catalog application layer (use cases).

Use cases run against the real SQLite-backed adapters from conftest,
except where a persistence failure has to be injected; those tests
mock the SpaceRepository port.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from terra_discover.application.catalog.create_space import CreateSpaceUseCase
from terra_discover.application.catalog.delete_space import DeleteSpaceUseCase
from terra_discover.application.catalog.dtos import (
    CreateSpaceCommand,
    CreateTaxonomyCommand,
    DeleteSpaceCommand,
    UpdateSpaceCommand,
    UpdateTaxonomyCommand,
)
from terra_discover.application.catalog.get_spaces import (
    GetSpaceUseCase,
    ListUserSpacesUseCase,
)
from terra_discover.application.catalog.manage_taxonomy import (
    CreateTaxonomyTermUseCase,
    DeleteTaxonomyTermUseCase,
    UpdateTaxonomyTermUseCase,
)
from terra_discover.application.catalog.update_space import UpdateSpaceUseCase
from terra_discover.domain.accounts.entities import NewUser
from terra_discover.domain.accounts.errors import UserNotFoundError
from terra_discover.domain.catalog.entities import Space, TaxonomyKind
from terra_discover.domain.catalog.errors import (
    InvalidSpaceError,
    NotSpaceAuthorError,
    ReferencesNotFoundError,
    RelatedRecordsNotFoundError,
    SlugConflictError,
    SpaceNotFoundError,
    TaxonomyNameConflictError,
    TaxonomyNotFoundError,
)
from terra_discover.domain.catalog.ports import SpaceRepository
from terra_discover.domain.catalog.reference_validator import ReferenceValidator
from terra_discover.domain.catalog.slug_generator import SlugGenerator
from terra_discover.domain.errors import (
    ErrorKind,
    PersistenceError,
    RelatedRecordMissingError,
    UnexpectedError,
    UniqueViolationError,
)
from terra_discover.infrastructure.accounts.user_repository import UserRepositoryAdapter
from terra_discover.infrastructure.catalog.space_repository import SpaceRepositoryAdapter
from terra_discover.infrastructure.catalog.taxonomy_repository import (
    build_taxonomy_repositories,
)
from terra_discover.infrastructure.database import (
    create_db_engine,
    create_session_factory,
    init_db,
)


@pytest.fixture
def create_space(space_repo, reference_validator, slug_generator) -> CreateSpaceUseCase:
    return CreateSpaceUseCase(space_repo, reference_validator, slug_generator)


@pytest.fixture
def update_space(space_repo, reference_validator, slug_generator) -> UpdateSpaceUseCase:
    return UpdateSpaceUseCase(space_repo, reference_validator, slug_generator)


@pytest.fixture
def delete_space(space_repo) -> DeleteSpaceUseCase:
    return DeleteSpaceUseCase(space_repo)


@pytest.fixture
def hidden_gem(create_space, author, park_type, categories, features) -> Space:
    return create_space.execute(
        CreateSpaceCommand(
            author_id=author.id,
            name="Hidden Gem",
            type_id=park_type.id,
            category_ids=[categories["Nature"].id, categories["History"].id],
            feature_ids=[features["Parking"].id],
        )
    )


def _fake_space(slug: str = "hidden-gem") -> Space:
    now = datetime.now(timezone.utc)
    return Space(
        id="s1",
        name="Hidden Gem",
        slug=slug,
        description="",
        type_id="t1",
        submitted_by_id="u1",
        created_at=now,
        updated_at=now,
    )


def _mocked_create(space_repo: MagicMock, retries: int = 1) -> CreateSpaceUseCase:
    space_repo.slug_exists.return_value = False
    return CreateSpaceUseCase(
        space_repo,
        MagicMock(spec=ReferenceValidator),
        SlugGenerator(space_repo),
        slug_conflict_retries=retries,
    )


# ══════════════════════════════════════════════════════════════════════
# Create
# ══════════════════════════════════════════════════════════════════════


class TestCreateSpaceUseCase:
    """Tests for CreateSpaceUseCase."""

    def test_creates_space_with_relations(self, hidden_gem, author, park_type) -> None:
        """Relations come back as name lists, ordered by name."""
        assert hidden_gem.slug == "hidden-gem"
        assert hidden_gem.type_id == park_type.id
        assert hidden_gem.submitted_by_id == author.id
        assert hidden_gem.categories == ["History", "Nature"]
        assert hidden_gem.features == ["Parking"]

    def test_missing_description_becomes_empty_string(self, hidden_gem) -> None:
        assert hidden_gem.description == ""

    def test_opaque_documents_pass_through(self, create_space, author, park_type) -> None:
        hours = {"mon": "9-17", "notes": ["closed on holidays"]}
        space = create_space.execute(
            CreateSpaceCommand(
                author_id=author.id,
                name="Clock Tower",
                type_id=park_type.id,
                operating_hours=hours,
                alternate_names=["The Tower"],
            )
        )
        assert space.operating_hours == hours
        assert space.alternate_names == ["The Tower"]
        assert space.categories == []

    def test_colliding_name_gets_suffix(self, create_space, hidden_gem, author, park_type) -> None:
        second = create_space.execute(
            CreateSpaceCommand(author_id=author.id, name="Hidden Gem", type_id=park_type.id)
        )
        assert second.slug == "hidden-gem-1"

    def test_empty_name_is_rejected(self, create_space, author, park_type) -> None:
        with pytest.raises(InvalidSpaceError):
            create_space.execute(
                CreateSpaceCommand(author_id=author.id, name="   ", type_id=park_type.id)
            )

    def test_unknown_type_names_the_id(self, create_space, author, space_repo) -> None:
        with pytest.raises(ReferencesNotFoundError) as excinfo:
            create_space.execute(
                CreateSpaceCommand(author_id=author.id, name="Nowhere", type_id="missing-type")
            )
        assert "missing-type" in excinfo.value.message
        assert space_repo.list_all() == []

    def test_two_bad_categories_are_both_named(
        self, create_space, author, park_type, categories
    ) -> None:
        with pytest.raises(ReferencesNotFoundError) as excinfo:
            create_space.execute(
                CreateSpaceCommand(
                    author_id=author.id,
                    name="Nowhere",
                    type_id=park_type.id,
                    category_ids=["bad-1", categories["Nature"].id, "bad-2"],
                )
            )
        assert excinfo.value.missing_ids == ["bad-1", "bad-2"]
        assert "bad-1" in excinfo.value.message
        assert "bad-2" in excinfo.value.message

    def test_unknown_feature_is_rejected(self, create_space, author, park_type) -> None:
        with pytest.raises(ReferencesNotFoundError) as excinfo:
            create_space.execute(
                CreateSpaceCommand(
                    author_id=author.id,
                    name="Nowhere",
                    type_id=park_type.id,
                    feature_ids=["ghost"],
                )
            )
        assert excinfo.value.taxonomy_kind is TaxonomyKind.FEATURE

    def test_lost_slug_race_is_retried(self) -> None:
        """A unique violation at write time regenerates the slug once."""
        space_repo = MagicMock(spec=SpaceRepository)
        space_repo.add.side_effect = [UniqueViolationError("slug taken"), _fake_space()]
        use_case = _mocked_create(space_repo, retries=1)

        space = use_case.execute(CreateSpaceCommand(author_id="u1", name="Hidden Gem", type_id="t1"))

        assert space.slug == "hidden-gem"
        assert space_repo.add.call_count == 2

    def test_slug_race_becomes_conflict_after_retries(self) -> None:
        space_repo = MagicMock(spec=SpaceRepository)
        space_repo.add.side_effect = UniqueViolationError("slug taken")
        use_case = _mocked_create(space_repo, retries=1)

        with pytest.raises(SlugConflictError) as excinfo:
            use_case.execute(CreateSpaceCommand(author_id="u1", name="Hidden Gem", type_id="t1"))

        assert excinfo.value.kind is ErrorKind.CONFLICT
        assert space_repo.add.call_count == 2

    def test_vanished_reference_is_not_found(self) -> None:
        space_repo = MagicMock(spec=SpaceRepository)
        space_repo.add.side_effect = RelatedRecordMissingError("fk")
        use_case = _mocked_create(space_repo)

        with pytest.raises(RelatedRecordsNotFoundError):
            use_case.execute(CreateSpaceCommand(author_id="u1", name="Hidden Gem", type_id="t1"))

    def test_other_persistence_failure_is_unexpected(self) -> None:
        space_repo = MagicMock(spec=SpaceRepository)
        space_repo.add.side_effect = PersistenceError("connection reset")
        use_case = _mocked_create(space_repo)

        with pytest.raises(UnexpectedError) as excinfo:
            use_case.execute(CreateSpaceCommand(author_id="u1", name="Hidden Gem", type_id="t1"))

        assert excinfo.value.kind is ErrorKind.UNEXPECTED
        assert space_repo.add.call_count == 1


class TestConcurrentCreates:
    """Simultaneous creates with one name against a shared file database."""

    WRITERS = 6

    @pytest.fixture
    def file_session_factory(self, tmp_path):
        engine = create_db_engine(f"sqlite:///{tmp_path / 'catalog.db'}")
        init_db(engine)
        yield create_session_factory(engine)
        engine.dispose()

    def test_no_two_spaces_share_a_slug(self, file_session_factory) -> None:
        space_repo = SpaceRepositoryAdapter(file_session_factory)
        taxonomy_repos = build_taxonomy_repositories(file_session_factory)
        author = UserRepositoryAdapter(file_session_factory).add(
            NewUser(username="alice", email="alice@example.com", password_hash="x")
        )
        park = taxonomy_repos[TaxonomyKind.TYPE].add("Park", None)
        use_case = CreateSpaceUseCase(
            space_repo,
            ReferenceValidator(taxonomy_repos.values()),
            SlugGenerator(space_repo),
        )
        barrier = threading.Barrier(self.WRITERS)

        def create() -> Space:
            barrier.wait()
            return use_case.execute(
                CreateSpaceCommand(author_id=author.id, name="Foo", type_id=park.id)
            )

        with ThreadPoolExecutor(max_workers=self.WRITERS) as pool:
            futures = [pool.submit(create) for _ in range(self.WRITERS)]

        created, failures = [], []
        for future in futures:
            error = future.exception()
            if error is None:
                created.append(future.result().slug)
            else:
                failures.append(error)

        assert all(isinstance(error, SlugConflictError) for error in failures)
        assert "foo" in created
        assert len(set(created)) == len(created)
        assert sorted(space.slug for space in space_repo.list_all()) == sorted(created)


# ══════════════════════════════════════════════════════════════════════
# Update
# ══════════════════════════════════════════════════════════════════════


class TestUpdateSpaceUseCase:
    """Tests for UpdateSpaceUseCase."""

    def test_empty_category_list_clears(self, update_space, hidden_gem, author) -> None:
        updated = update_space.execute(
            UpdateSpaceCommand(caller_id=author.id, identifier=hidden_gem.id, category_ids=[])
        )
        assert updated.categories == []
        assert updated.features == ["Parking"]

    def test_omitted_categories_are_kept(self, update_space, hidden_gem, author) -> None:
        updated = update_space.execute(
            UpdateSpaceCommand(
                caller_id=author.id,
                identifier=hidden_gem.id,
                description="Quiet spot by the river",
            )
        )
        assert updated.categories == ["History", "Nature"]
        assert updated.description == "Quiet spot by the river"

    def test_category_list_replaces_set(
        self, update_space, hidden_gem, author, categories
    ) -> None:
        updated = update_space.execute(
            UpdateSpaceCommand(
                caller_id=author.id,
                identifier=hidden_gem.id,
                category_ids=[categories["Family"].id],
            )
        )
        assert updated.categories == ["Family"]

    def test_lookup_by_slug(self, update_space, hidden_gem, author) -> None:
        updated = update_space.execute(
            UpdateSpaceCommand(caller_id=author.id, identifier="hidden-gem", activities=["hiking"])
        )
        assert updated.id == hidden_gem.id
        assert updated.activities == ["hiking"]

    def test_same_name_keeps_slug(self, update_space, hidden_gem, author) -> None:
        updated = update_space.execute(
            UpdateSpaceCommand(caller_id=author.id, identifier=hidden_gem.id, name="Hidden Gem")
        )
        assert updated.slug == "hidden-gem"

    def test_rename_derives_new_slug(self, update_space, hidden_gem, author) -> None:
        updated = update_space.execute(
            UpdateSpaceCommand(caller_id=author.id, identifier=hidden_gem.id, name="Secret Garden")
        )
        assert updated.name == "Secret Garden"
        assert updated.slug == "secret-garden"

    def test_rename_onto_taken_slug_gets_suffix(
        self, update_space, create_space, hidden_gem, author, park_type
    ) -> None:
        other = create_space.execute(
            CreateSpaceCommand(author_id=author.id, name="Old Mill", type_id=park_type.id)
        )
        updated = update_space.execute(
            UpdateSpaceCommand(caller_id=author.id, identifier=other.id, name="Hidden Gem")
        )
        assert updated.slug == "hidden-gem-1"

    def test_null_description_becomes_empty(self, update_space, hidden_gem, author) -> None:
        updated = update_space.execute(
            UpdateSpaceCommand(caller_id=author.id, identifier=hidden_gem.id, description=None)
        )
        assert updated.description == ""

    def test_null_optional_field_is_cleared(
        self, update_space, create_space, author, park_type
    ) -> None:
        space = create_space.execute(
            CreateSpaceCommand(
                author_id=author.id,
                name="Clock Tower",
                type_id=park_type.id,
                architectural_style="Gothic",
            )
        )
        updated = update_space.execute(
            UpdateSpaceCommand(caller_id=author.id, identifier=space.id, architectural_style=None)
        )
        assert updated.architectural_style is None

    def test_change_type(self, update_space, hidden_gem, author, museum_type) -> None:
        updated = update_space.execute(
            UpdateSpaceCommand(caller_id=author.id, identifier=hidden_gem.id, type_id=museum_type.id)
        )
        assert updated.type_id == museum_type.id

    def test_missing_space_is_not_found(self, update_space, author) -> None:
        with pytest.raises(SpaceNotFoundError):
            update_space.execute(
                UpdateSpaceCommand(caller_id=author.id, identifier="nope", name="X")
            )

    def test_non_author_is_forbidden_without_mutation(
        self, update_space, hidden_gem, other_user, space_repo
    ) -> None:
        with pytest.raises(NotSpaceAuthorError) as excinfo:
            update_space.execute(
                UpdateSpaceCommand(
                    caller_id=other_user.id,
                    identifier=hidden_gem.id,
                    name="Mine Now",
                    category_ids=[],
                )
            )
        assert excinfo.value.kind is ErrorKind.FORBIDDEN
        unchanged = space_repo.get_by_id(hidden_gem.id)
        assert unchanged.name == "Hidden Gem"
        assert unchanged.slug == "hidden-gem"
        assert unchanged.categories == ["History", "Nature"]

    def test_authorship_is_checked_before_validation(
        self, update_space, hidden_gem, other_user
    ) -> None:
        """A non-author with an invalid payload still gets Forbidden."""
        with pytest.raises(NotSpaceAuthorError):
            update_space.execute(
                UpdateSpaceCommand(
                    caller_id=other_user.id,
                    identifier=hidden_gem.id,
                    type_id="missing-type",
                )
            )

    def test_bad_feature_ids_leave_space_unchanged(
        self, update_space, hidden_gem, author, space_repo
    ) -> None:
        with pytest.raises(ReferencesNotFoundError):
            update_space.execute(
                UpdateSpaceCommand(
                    caller_id=author.id,
                    identifier=hidden_gem.id,
                    name="Renamed",
                    feature_ids=["ghost"],
                )
            )
        assert space_repo.get_by_id(hidden_gem.id).name == "Hidden Gem"

    def test_empty_name_is_rejected(self, update_space, hidden_gem, author) -> None:
        with pytest.raises(InvalidSpaceError):
            update_space.execute(
                UpdateSpaceCommand(caller_id=author.id, identifier=hidden_gem.id, name="")
            )

    def test_unrenamed_update_does_not_retry_on_unique_violation(self) -> None:
        space_repo = MagicMock(spec=SpaceRepository)
        space = _fake_space()
        space_repo.find_by_identifier.return_value = space
        space_repo.update.side_effect = UniqueViolationError("dup")
        use_case = UpdateSpaceUseCase(
            space_repo, MagicMock(spec=ReferenceValidator), SlugGenerator(space_repo)
        )

        with pytest.raises(SlugConflictError):
            use_case.execute(UpdateSpaceCommand(caller_id="u1", identifier="s1", activities=[]))

        assert space_repo.update.call_count == 1

    def test_rename_race_regenerates_slug(self) -> None:
        space_repo = MagicMock(spec=SpaceRepository)
        space_repo.find_by_identifier.return_value = _fake_space()
        space_repo.slug_exists.side_effect = [False, True, False]
        space_repo.update.side_effect = [UniqueViolationError("dup"), _fake_space("old-mill-1")]
        use_case = UpdateSpaceUseCase(
            space_repo, MagicMock(spec=ReferenceValidator), SlugGenerator(space_repo)
        )

        use_case.execute(UpdateSpaceCommand(caller_id="u1", identifier="s1", name="Old Mill"))

        slugs = [call.args[1].slug for call in space_repo.update.call_args_list]
        assert slugs == ["old-mill", "old-mill-1"]

    def test_space_deleted_before_write_is_not_found(self) -> None:
        space_repo = MagicMock(spec=SpaceRepository)
        space_repo.find_by_identifier.return_value = _fake_space()
        space_repo.update.return_value = None
        use_case = UpdateSpaceUseCase(
            space_repo, MagicMock(spec=ReferenceValidator), SlugGenerator(space_repo)
        )

        with pytest.raises(SpaceNotFoundError) as excinfo:
            use_case.execute(UpdateSpaceCommand(caller_id="u1", identifier="s1", activities=[]))

        assert excinfo.value.message == "Space not found."


# ══════════════════════════════════════════════════════════════════════
# Delete and reads
# ══════════════════════════════════════════════════════════════════════


class TestDeleteSpaceUseCase:
    """Tests for DeleteSpaceUseCase."""

    def test_author_deletes(self, delete_space, hidden_gem, author, space_repo) -> None:
        delete_space.execute(DeleteSpaceCommand(caller_id=author.id, space_id=hidden_gem.id))
        assert space_repo.get_by_id(hidden_gem.id) is None

    def test_non_author_is_forbidden(
        self, delete_space, hidden_gem, other_user, space_repo
    ) -> None:
        with pytest.raises(NotSpaceAuthorError):
            delete_space.execute(
                DeleteSpaceCommand(caller_id=other_user.id, space_id=hidden_gem.id)
            )
        assert space_repo.get_by_id(hidden_gem.id) is not None

    def test_delete_by_slug_is_not_supported(self, delete_space, hidden_gem, author) -> None:
        with pytest.raises(SpaceNotFoundError):
            delete_space.execute(DeleteSpaceCommand(caller_id=author.id, space_id="hidden-gem"))

    def test_row_vanishing_before_delete_is_not_found(self) -> None:
        space_repo = MagicMock(spec=SpaceRepository)
        space_repo.get_by_id.return_value = _fake_space()
        space_repo.delete.return_value = False

        with pytest.raises(SpaceNotFoundError):
            DeleteSpaceUseCase(space_repo).execute(DeleteSpaceCommand(caller_id="u1", space_id="s1"))


class TestReadSpaces:
    """Tests for the read-only space use cases."""

    def test_get_by_id_or_slug(self, space_repo, hidden_gem) -> None:
        use_case = GetSpaceUseCase(space_repo)
        assert use_case.execute(hidden_gem.id).id == hidden_gem.id
        assert use_case.execute("hidden-gem").id == hidden_gem.id

    def test_get_unknown_is_not_found(self, space_repo) -> None:
        with pytest.raises(SpaceNotFoundError):
            GetSpaceUseCase(space_repo).execute("nope")

    def test_user_spaces_by_username_or_email(
        self, user_repo, space_repo, hidden_gem, author, other_user
    ) -> None:
        use_case = ListUserSpacesUseCase(user_repo, space_repo)
        assert [s.id for s in use_case.execute(author.username)] == [hidden_gem.id]
        assert [s.id for s in use_case.execute(author.email)] == [hidden_gem.id]
        assert use_case.execute(other_user.username) == []

    def test_unknown_user_is_not_found(self, user_repo, space_repo) -> None:
        with pytest.raises(UserNotFoundError):
            ListUserSpacesUseCase(user_repo, space_repo).execute("nobody")


# ══════════════════════════════════════════════════════════════════════
# Taxonomies
# ══════════════════════════════════════════════════════════════════════


class TestTaxonomyUseCases:
    """Tests for the taxonomy CRUD use cases."""

    def test_duplicate_name_is_conflict(self, taxonomy_repos, categories) -> None:
        use_case = CreateTaxonomyTermUseCase(taxonomy_repos[TaxonomyKind.CATEGORY])
        with pytest.raises(TaxonomyNameConflictError):
            use_case.execute(CreateTaxonomyCommand(name="Nature"))

    def test_same_name_in_other_kind_is_allowed(self, taxonomy_repos, categories) -> None:
        term = CreateTaxonomyTermUseCase(taxonomy_repos[TaxonomyKind.FEATURE]).execute(
            CreateTaxonomyCommand(name="Nature", description="Natural setting")
        )
        assert term.name == "Nature"

    def test_partial_update_keeps_description(self, taxonomy_repos, park_type) -> None:
        term = UpdateTaxonomyTermUseCase(taxonomy_repos[TaxonomyKind.TYPE]).execute(
            UpdateTaxonomyCommand(term_id=park_type.id, name="City Park")
        )
        assert term.name == "City Park"
        assert term.description == "Green public space"

    def test_update_unknown_is_not_found(self, taxonomy_repos) -> None:
        with pytest.raises(TaxonomyNotFoundError):
            UpdateTaxonomyTermUseCase(taxonomy_repos[TaxonomyKind.TYPE]).execute(
                UpdateTaxonomyCommand(term_id="nope", name="X")
            )

    def test_deleting_category_detaches_it(
        self, taxonomy_repos, categories, hidden_gem, space_repo
    ) -> None:
        DeleteTaxonomyTermUseCase(taxonomy_repos[TaxonomyKind.CATEGORY]).execute(
            categories["Nature"].id
        )
        assert space_repo.get_by_id(hidden_gem.id).categories == ["History"]

    def test_deleting_used_type_is_unexpected(self, taxonomy_repos, park_type, hidden_gem) -> None:
        with pytest.raises(UnexpectedError) as excinfo:
            DeleteTaxonomyTermUseCase(taxonomy_repos[TaxonomyKind.TYPE]).execute(park_type.id)
        assert excinfo.value.kind is ErrorKind.UNEXPECTED
        assert taxonomy_repos[TaxonomyKind.TYPE].get_by_id(park_type.id) is not None
