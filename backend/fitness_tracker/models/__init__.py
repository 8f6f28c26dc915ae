"""Database models package."""

from fitness_tracker.models.user import User
from fitness_tracker.models.training import Training, ActivityType

__all__ = [
    "User",
    "Training",
    "ActivityType",
]
