"""Unit tests for the Training entity, ActivityType, DTOs and mapper."""

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from fitness_tracker.entities.training import (
    ActivityType,
    Training,
    TrainingCreateDto,
    TrainingUpdateDto,
    mapper,
)
from tests.fixtures.data import make_attributes, make_user, training_payload


class TestActivityType:
    @pytest.mark.parametrize(
        "activity_type, display_name",
        [
            (ActivityType.RUNNING, "Running"),
            (ActivityType.CYCLING, "Cycling"),
            (ActivityType.WALKING, "Walking"),
            (ActivityType.SWIMMING, "Swimming"),
            (ActivityType.TENNIS, "Tennis"),
        ],
    )
    def test_display_name(self, activity_type: ActivityType, display_name: str):
        assert activity_type.display_name == display_name

    def test_value_is_name(self):
        assert all(member.value == member.name for member in ActivityType)

    def test_lookup_by_name(self):
        assert ActivityType("SWIMMING") is ActivityType.SWIMMING

    def test_unknown_name_is_rejected(self):
        with pytest.raises(ValueError):
            ActivityType("SKIING")


class TestTrainingEntity:
    def test_end_before_start_is_allowed(self):
        attributes = make_attributes(
            start_time=datetime(2024, 1, 1, 12, 0),
            end_time=datetime(2024, 1, 1, 11, 0),
        )

        assert attributes.end_time < attributes.start_time

    def test_naive_times_are_read_as_utc(self):
        attributes = make_attributes(start_time=datetime(2024, 1, 1, 10, 0))

        assert attributes.start_time == datetime(2024, 1, 1, 10, 0, tzinfo=UTC)
        assert attributes.start_time.tzinfo is UTC

    def test_offset_times_are_converted_to_utc(self):
        plus_five = timezone(timedelta(hours=5))

        attributes = make_attributes(end_time=datetime(2024, 1, 1, 16, 0, tzinfo=plus_five))

        assert attributes.end_time == datetime(2024, 1, 1, 11, 0, tzinfo=UTC)
        assert attributes.end_time.utcoffset() == timedelta(0)

    def test_equality_includes_user(self):
        attributes = make_attributes().model_dump()
        first = Training(id=1, user=make_user(id=1), **attributes)
        second = Training(id=1, user=make_user(id=2), **attributes)

        assert first != second
        assert first == Training(id=1, user=make_user(id=1), **attributes)


class TestTrainingMapper:
    def test_to_dto_expands_user(self):
        training = Training(id=5, user=make_user(id=2), **make_attributes().model_dump())

        payload = mapper.to_dto(training).model_dump(mode="json", by_alias=True)

        assert payload["id"] == 5
        assert payload["user"]["id"] == 2
        assert payload["user"]["firstName"] == "John"
        assert payload["activityType"] == "RUNNING"
        assert payload["averageSpeed"] == 10.5
        assert datetime.fromisoformat(payload["startTime"]) == datetime(2024, 1, 1, 10, 0, tzinfo=UTC)

    def test_to_new_training_keeps_only_user_reference(self):
        dto = TrainingCreateDto.model_validate(training_payload(4))

        new_training = mapper.to_new_training(dto)

        assert new_training.user.id == 4
        assert new_training.activity_type is ActivityType.RUNNING
        assert new_training.distance == 10.5

    def test_update_dto_user_is_optional(self):
        payload = training_payload(1)
        del payload["user"]

        dto = TrainingUpdateDto.model_validate(payload)

        assert dto.user is None
        assert mapper.to_attributes(dto).end_time == datetime(2024, 1, 1, 11, 0, tzinfo=UTC)

    def test_create_dto_requires_user(self):
        payload = training_payload(1)
        del payload["user"]

        with pytest.raises(ValidationError):
            TrainingCreateDto.model_validate(payload)

    def test_unknown_activity_type_is_rejected(self):
        with pytest.raises(ValidationError):
            TrainingCreateDto.model_validate(training_payload(1, activityType="SKIING"))
