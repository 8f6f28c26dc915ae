"""Repositories package."""

from fitness_tracker.repositories.user_repository import UserRepository
from fitness_tracker.repositories.training_repository import TrainingRepository

__all__ = [
    "UserRepository",
    "TrainingRepository",
]
