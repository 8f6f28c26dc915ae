"""Mappers package."""

from fitness_tracker.mappers.user_mapper import (
    user_to_dto,
    user_to_simple_dto,
    user_to_email_dto,
    user_dto_to_entity,
)
from fitness_tracker.mappers.training_mapper import (
    training_to_dto,
    training_dto_to_entity,
    simple_training_dto_to_entity,
)

__all__ = [
    "user_to_dto",
    "user_to_simple_dto",
    "user_to_email_dto",
    "user_dto_to_entity",
    "training_to_dto",
    "training_dto_to_entity",
    "simple_training_dto_to_entity",
]
