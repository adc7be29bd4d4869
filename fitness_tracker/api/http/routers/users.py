"""User API router."""

from datetime import date

from fastapi import APIRouter, Depends, Query, Response, status

from fitness_tracker.api.http.deps import get_user_service
from fitness_tracker.core.services import UserService
from fitness_tracker.entities.user import UserDto, UserSimpleDto, mapper

router = APIRouter()


@router.get("/", response_model=list[UserDto])
def get_all_users(service: UserService = Depends(get_user_service)) -> list[UserDto]:
    """List all users."""
    return [mapper.to_dto(user) for user in service.get_all_users()]


@router.get("/simple", response_model=list[UserSimpleDto])
def get_all_simple_users(service: UserService = Depends(get_user_service)) -> list[UserSimpleDto]:
    """List all users with only their id and names."""
    return [mapper.to_simple_dto(user) for user in service.get_all_users()]


@router.get("/email", response_model=list[UserDto])
def get_users_by_email(
    email: str = Query(description="Email or email fragment"),
    exact: bool = Query(default=False, description="Require an exact email match"),
    service: UserService = Depends(get_user_service),
) -> list[UserDto]:
    """Find users by email, by case-insensitive fragment unless ``exact`` is set."""
    if exact:
        user = service.get_user_by_email(email)
        return [mapper.to_dto(user)] if user is not None else []
    return [mapper.to_dto(user) for user in service.search_users_by_email(email)]


@router.get("/search/email", response_model=list[UserDto])
def search_users_by_email(
    email: str = Query(description="Email fragment, matched case-insensitively"),
    service: UserService = Depends(get_user_service),
) -> list[UserDto]:
    """Search users whose email contains the given fragment."""
    return [mapper.to_dto(user) for user in service.search_users_by_email(email)]


@router.get("/search/age", response_model=list[UserDto])
def search_users_by_age(
    age: int = Query(ge=0, le=200, description="Users strictly older than this many years"),
    service: UserService = Depends(get_user_service),
) -> list[UserDto]:
    """Search users older than the given age."""
    return [mapper.to_dto(user) for user in service.search_users_by_age_greater_than(age)]


@router.get("/older/{cutoff}", response_model=list[UserDto])
def find_users_older_than(
    cutoff: date,
    service: UserService = Depends(get_user_service),
) -> list[UserDto]:
    """Find users born before the given ISO-8601 date."""
    return [mapper.to_dto(user) for user in service.find_users_older_than(cutoff)]


@router.get("/{user_id}", response_model=UserDto)
def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> UserDto:
    """Get a user by ID."""
    return mapper.to_dto(service.get_user_by_id(user_id))


@router.post("/", response_model=UserDto, status_code=status.HTTP_201_CREATED)
def create_user(user: UserDto, service: UserService = Depends(get_user_service)) -> UserDto:
    """Create a new user."""
    return mapper.to_dto(service.create_user(mapper.to_entity(user)))


@router.put("/{user_id}", response_model=UserDto)
def update_user(
    user_id: int,
    user: UserDto,
    service: UserService = Depends(get_user_service),
) -> UserDto:
    """Replace all fields of a user; the path ID always wins over a body ID."""
    return mapper.to_dto(service.update_user(user_id, mapper.to_entity(user)))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> Response:
    """Delete a user that owns no trainings."""
    service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
