"""Training API router."""

from datetime import UTC, date, datetime, time

from fastapi import APIRouter, Depends, Query, status

from fitness_tracker.api.http.deps import get_training_service
from fitness_tracker.core.services import TrainingService
from fitness_tracker.entities.training import (
    ActivityType,
    TrainingCreateDto,
    TrainingDto,
    TrainingUpdateDto,
    mapper,
)

router = APIRouter()


@router.get("/", response_model=list[TrainingDto])
def get_all_trainings(service: TrainingService = Depends(get_training_service)) -> list[TrainingDto]:
    """List all trainings."""
    return [mapper.to_dto(training) for training in service.get_all_trainings()]


@router.get("/finished/{after_date}", response_model=list[TrainingDto])
def get_finished_trainings_after(
    after_date: date,
    service: TrainingService = Depends(get_training_service),
) -> list[TrainingDto]:
    """List trainings that ended after midnight UTC of the given YYYY-MM-DD date."""
    after = datetime.combine(after_date, time.min, tzinfo=UTC)
    return [mapper.to_dto(training) for training in service.get_finished_trainings_after(after)]


@router.get("/activityType", response_model=list[TrainingDto])
def get_trainings_by_activity_type(
    activity_type: ActivityType = Query(alias="activityType"),
    service: TrainingService = Depends(get_training_service),
) -> list[TrainingDto]:
    """List trainings of one activity type, given by name (e.g. RUNNING)."""
    return [mapper.to_dto(training) for training in service.get_trainings_by_activity_type(activity_type)]


@router.get("/{user_id}", response_model=list[TrainingDto])
def get_trainings_by_user(
    user_id: int,
    service: TrainingService = Depends(get_training_service),
) -> list[TrainingDto]:
    """List the trainings of one user; empty when the user has none."""
    return [mapper.to_dto(training) for training in service.get_trainings_by_user(user_id)]


@router.post("/", response_model=TrainingDto, status_code=status.HTTP_201_CREATED)
def create_training(
    training: TrainingCreateDto,
    service: TrainingService = Depends(get_training_service),
) -> TrainingDto:
    """Create a training for the user referenced in the body."""
    return mapper.to_dto(service.create_training(mapper.to_new_training(training)))


@router.put("/{training_id}", response_model=TrainingDto)
def update_training(
    training_id: int,
    training: TrainingUpdateDto,
    service: TrainingService = Depends(get_training_service),
) -> TrainingDto:
    """Replace the times, type, distance and speed of a training."""
    return mapper.to_dto(service.update_training(training_id, mapper.to_attributes(training)))
