"""Conversions between the ``User`` entity and its wire projections."""

from fitness_tracker.models import User
from fitness_tracker.schemas import UserDto, UserEmailDto, UserSimpleDto


def user_to_dto(user: User) -> UserDto:
    return UserDto(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        birthdate=user.birthdate,
        email=user.email,
    )


def user_to_simple_dto(user: User) -> UserSimpleDto:
    return UserSimpleDto(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
    )


def user_to_email_dto(user: User) -> UserEmailDto:
    return UserEmailDto(id=user.id, email=user.email)


def user_dto_to_entity(user_dto: UserDto) -> User:
    """Build a transient ``User``.

    The id is carried over unchanged so that creation can reject a
    client-supplied identifier.
    """
    return User(
        id=user_dto.id,
        first_name=user_dto.first_name,
        last_name=user_dto.last_name,
        birthdate=user_dto.birthdate,
        email=user_dto.email,
    )
