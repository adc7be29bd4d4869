"""Unit tests for the user and training repositories.

Every test runs against both the SQL and the in-memory backend; the two must
answer every query identically.
"""

from datetime import date, datetime, timedelta, timezone

import pytest
from sqlmodel import Session

from fitness_tracker.entities.training import (
    ActivityType,
    InMemoryTrainingRepository,
    SqlTrainingRepository,
    Training,
    TrainingRepository,
)
from fitness_tracker.entities.user import (
    InMemoryUserRepository,
    SqlUserRepository,
    UserRepository,
    age_cutoff,
)
from tests.fixtures.data import make_attributes, make_user


@pytest.fixture(params=["sql", "memory"])
def repositories(request, session: Session) -> tuple[UserRepository, TrainingRepository]:
    if request.param == "sql":
        return SqlUserRepository(session), SqlTrainingRepository(session)
    users = InMemoryUserRepository()
    return users, InMemoryTrainingRepository(users)


@pytest.fixture
def users(repositories) -> UserRepository:
    return repositories[0]


@pytest.fixture
def trainings(repositories) -> TrainingRepository:
    return repositories[1]


def _ids(entities) -> set[int]:
    return {entity.id for entity in entities}


class TestAgeCutoff:
    def test_subtracts_years(self):
        assert age_cutoff(20, today=date(2024, 1, 1)) == date(2004, 1, 1)

    def test_leap_day_maps_to_february_28(self):
        assert age_cutoff(1, today=date(2024, 2, 29)) == date(2023, 2, 28)

    def test_leap_day_kept_in_leap_year(self):
        assert age_cutoff(4, today=date(2024, 2, 29)) == date(2020, 2, 29)


class TestUserRepository:
    def test_create_assigns_id(self, users: UserRepository):
        created = users.create(make_user())

        assert created.id is not None
        assert users.get(created.id) == created

    def test_create_ignores_supplied_id(self, users: UserRepository):
        first = users.create(make_user())
        second = users.create(make_user(id=first.id, email="second@example.com"))

        assert second.id != first.id
        assert users.get(first.id).email == "john.doe@example.com"

    def test_ids_are_unique(self, users: UserRepository):
        created = [users.create(make_user(email=f"user{i}@example.com")) for i in range(5)]

        assert len(_ids(created)) == 5

    def test_get_missing_returns_none(self, users: UserRepository):
        assert users.get(999) is None
        assert not users.exists(999)

    def test_list_all(self, users: UserRepository):
        first = users.create(make_user())
        second = users.create(make_user(email="jane@example.com"))

        assert _ids(users.list_all()) == {first.id, second.id}

    def test_update_replaces_fields(self, users: UserRepository):
        created = users.create(make_user())

        updated = users.update(
            make_user(id=created.id, first_name="Jane", birthdate=date(1991, 1, 1))
        )

        assert updated.id == created.id
        assert updated.first_name == "Jane"
        assert users.get(created.id).birthdate == date(1991, 1, 1)

    def test_update_missing_raises(self, users: UserRepository):
        with pytest.raises(ValueError):
            users.update(make_user(id=999))

    def test_delete(self, users: UserRepository):
        created = users.create(make_user())

        assert users.delete(created.id) is True
        assert users.get(created.id) is None
        assert users.delete(created.id) is False

    def test_find_by_email_exact(self, users: UserRepository):
        users.create(make_user(email="john@example.com"))

        assert users.find_by_email("john@example.com").email == "john@example.com"
        assert users.find_by_email("JOHN@example.com") is None
        assert users.find_by_email("john@") is None

    def test_find_by_email_returns_first_of_duplicates(self, users: UserRepository):
        first = users.create(make_user(email="same@example.com"))
        users.create(make_user(first_name="Jane", email="same@example.com"))

        assert users.find_by_email("same@example.com").id == first.id

    def test_find_by_email_containing_ignores_case(self, users: UserRepository):
        john = users.create(make_user(email="John.Doe@Example.com"))
        users.create(make_user(email="jane@other.org"))

        assert _ids(users.find_by_email_containing("example")) == {john.id}
        assert _ids(users.find_by_email_containing("DOE@")) == {john.id}

    def test_find_by_email_containing_folds_non_ascii(self, users: UserRepository):
        elodie = users.create(make_user(email="ÉLODIE@example.com"))
        users.create(make_user(email="elodie@example.com"))

        assert _ids(users.find_by_email_containing("élodie")) == {elodie.id}
        assert _ids(users.find_by_email_containing("Élodie@")) == {elodie.id}

    def test_find_by_email_containing_uses_full_case_folding(self, users: UserRepository):
        strasse = users.create(make_user(email="STRASSE@example.de"))

        assert _ids(users.find_by_email_containing("straße")) == {strasse.id}

    def test_find_by_email_containing_empty_fragment_matches_all(self, users: UserRepository):
        users.create(make_user(email="a@example.com"))
        users.create(make_user(email="b@example.com"))

        assert len(users.find_by_email_containing("")) == 2

    def test_find_by_email_containing_treats_wildcards_literally(self, users: UserRepository):
        users.create(make_user(email="plain@example.com"))
        underscored = users.create(make_user(email="under_score@example.com"))

        assert _ids(users.find_by_email_containing("_")) == {underscored.id}
        assert users.find_by_email_containing("%") == []

    def test_find_by_birthdate_before_is_strict(self, users: UserRepository):
        older = users.create(make_user(birthdate=date(1989, 12, 31)))
        users.create(make_user(birthdate=date(1990, 1, 1)))

        assert _ids(users.find_by_birthdate_before(date(1990, 1, 1))) == {older.id}

    def test_find_by_age_greater_than(self, users: UserRepository):
        older = users.create(make_user(birthdate=date(2003, 12, 31)))
        users.create(make_user(birthdate=date(2004, 1, 1)))
        users.create(make_user(birthdate=date(2010, 6, 1)))

        result = users.find_by_age_greater_than(20, today=date(2024, 1, 1))

        assert _ids(result) == {older.id}


class TestTrainingRepository:
    @pytest.fixture
    def owner(self, users: UserRepository):
        return users.create(make_user())

    def _create(self, trainings: TrainingRepository, owner, **overrides) -> Training:
        return trainings.create(Training(user=owner, **make_attributes(**overrides).model_dump()))

    def test_create_resolves_user(self, trainings: TrainingRepository, owner):
        created = self._create(trainings, owner)

        assert created.id is not None
        assert created.user == owner
        assert trainings.get(created.id) == created

    def test_get_missing_returns_none(self, trainings: TrainingRepository):
        assert trainings.get(999) is None
        assert not trainings.exists(999)

    def test_list_all(self, trainings: TrainingRepository, owner):
        first = self._create(trainings, owner)
        second = self._create(trainings, owner, activity_type=ActivityType.TENNIS)

        assert _ids(trainings.list_all()) == {first.id, second.id}

    def test_update_keeps_user(self, trainings: TrainingRepository, users: UserRepository, owner):
        created = self._create(trainings, owner)
        users.create(make_user(email="other@example.com"))

        updated = trainings.update(
            created.id,
            make_attributes(activity_type=ActivityType.CYCLING, distance=42.0),
        )

        assert updated.id == created.id
        assert updated.user.id == owner.id
        assert updated.activity_type is ActivityType.CYCLING
        assert trainings.get(created.id).distance == 42.0

    def test_update_missing_raises(self, trainings: TrainingRepository):
        with pytest.raises(ValueError):
            trainings.update(999, make_attributes())

    def test_find_by_user_id(self, trainings: TrainingRepository, users: UserRepository, owner):
        other = users.create(make_user(email="other@example.com"))
        mine = self._create(trainings, owner)
        self._create(trainings, other)

        assert _ids(trainings.find_by_user_id(owner.id)) == {mine.id}
        assert trainings.find_by_user_id(999) == []

    def test_find_by_activity_type(self, trainings: TrainingRepository, owner):
        running = self._create(trainings, owner, activity_type=ActivityType.RUNNING)
        self._create(trainings, owner, activity_type=ActivityType.SWIMMING)

        assert _ids(trainings.find_by_activity_type(ActivityType.RUNNING)) == {running.id}
        assert trainings.find_by_activity_type(ActivityType.WALKING) == []

    def test_find_by_end_time_after_is_strict(self, trainings: TrainingRepository, owner):
        self._create(trainings, owner, end_time=datetime(2024, 1, 1, 0, 0))
        later = self._create(trainings, owner, end_time=datetime(2024, 1, 1, 0, 1))

        result = trainings.find_by_end_time_after(datetime(2024, 1, 1, 0, 0))

        assert _ids(result) == {later.id}

    def test_find_by_end_time_after_mixes_naive_and_offset(
        self, trainings: TrainingRepository, owner
    ):
        plus_five = timezone(timedelta(hours=5))
        ended = self._create(
            trainings, owner, end_time=datetime(2024, 1, 1, 5, 0, tzinfo=plus_five)
        )

        assert _ids(trainings.find_by_end_time_after(datetime(2023, 12, 31, 23, 59))) == {ended.id}
        assert trainings.find_by_end_time_after(datetime(2024, 1, 1, 0, 0)) == []
        assert trainings.find_by_end_time_after(datetime(2024, 1, 1, 4, 59, tzinfo=plus_five)) != []

    def test_exists_for_user(self, trainings: TrainingRepository, users: UserRepository, owner):
        idle = users.create(make_user(email="idle@example.com"))
        self._create(trainings, owner)

        assert trainings.exists_for_user(owner.id)
        assert not trainings.exists_for_user(idle.id)
