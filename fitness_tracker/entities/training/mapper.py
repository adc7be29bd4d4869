"""Conversions between training entities and their transport representations."""

from fitness_tracker.entities.user import mapper as user_mapper

from .dto import TrainingAttributesDto, TrainingCreateDto, TrainingDto
from .entity import NewTraining, Training, TrainingAttributes, UserReference


def to_dto(training: Training) -> TrainingDto:
    return TrainingDto(
        id=training.id,
        user=user_mapper.to_dto(training.user),
        start_time=training.start_time,
        end_time=training.end_time,
        activity_type=training.activity_type,
        distance=training.distance,
        average_speed=training.average_speed,
    )


def to_attributes(dto: TrainingAttributesDto) -> TrainingAttributes:
    return TrainingAttributes(
        start_time=dto.start_time,
        end_time=dto.end_time,
        activity_type=dto.activity_type,
        distance=dto.distance,
        average_speed=dto.average_speed,
    )


def to_new_training(dto: TrainingCreateDto) -> NewTraining:
    return NewTraining(
        user=UserReference(id=dto.user.id),
        **to_attributes(dto).model_dump(),
    )
