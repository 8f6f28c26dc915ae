"""Services package."""

from fitness_tracker.services.user_service import UserService
from fitness_tracker.services.training_service import TrainingService

__all__ = [
    "UserService",
    "TrainingService",
]
