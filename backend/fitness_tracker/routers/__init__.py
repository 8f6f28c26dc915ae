"""Routers package."""

from fitness_tracker.routers.users import router as users_router
from fitness_tracker.routers.trainings import router as trainings_router

__all__ = [
    "users_router",
    "trainings_router",
]
