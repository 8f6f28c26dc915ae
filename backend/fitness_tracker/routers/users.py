"""Users API router."""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from fitness_tracker.database import get_db
from fitness_tracker.mappers import (
    user_dto_to_entity,
    user_to_dto,
    user_to_email_dto,
    user_to_simple_dto,
)
from fitness_tracker.schemas import UserDto, UserEmailDto, UserPatch, UserSimpleDto
from fitness_tracker.services import UserService

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


@router.get("", response_model=List[UserDto])
def get_all_users(service: UserService = Depends(get_user_service)):
    """List every user."""
    return [user_to_dto(user) for user in service.find_all_users()]


@router.get("/simple", response_model=List[UserSimpleDto])
def get_all_simple_users(service: UserService = Depends(get_user_service)):
    """List every user with id and name only."""
    return [user_to_simple_dto(user) for user in service.find_all_users()]


@router.get("/email", response_model=List[UserEmailDto])
def get_users_by_email(
    email: str = Query(..., min_length=1),
    service: UserService = Depends(get_user_service),
):
    """Search users whose email contains the given text (case-insensitive)."""
    return [user_to_email_dto(user) for user in service.get_user_by_email(email)]


@router.get("/older/{time}", response_model=List[UserDto])
def get_users_older_than(
    time: date,
    service: UserService = Depends(get_user_service),
):
    """List users born strictly before ``time`` (yyyy-MM-dd)."""
    return [user_to_dto(user) for user in service.get_user_older_than(time)]


@router.get("/{user_id}", response_model=UserDto)
def get_user_by_id(
    user_id: int,
    service: UserService = Depends(get_user_service),
):
    """Get a single user by ID."""
    return user_to_dto(service.get_user_or_raise(user_id))


@router.post("", response_model=UserDto, status_code=status.HTTP_201_CREATED)
def add_user(
    user_dto: UserDto,
    service: UserService = Depends(get_user_service),
):
    """Create a user. The body must not carry an id."""
    return user_to_dto(service.create_user(user_dto_to_entity(user_dto)))


# Existing clients expect 201 from updates as well
@router.put("/{user_id}", response_model=UserDto, status_code=status.HTTP_201_CREATED)
def update_user(
    user_id: int,
    patch: UserPatch,
    service: UserService = Depends(get_user_service),
):
    """Update the supplied fields of a user, keeping the rest."""
    return user_to_dto(service.update_user(user_id, patch))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
):
    """Delete a user and their trainings. Missing users are not an error."""
    service.delete_user_by_id(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
