"""Training business rules."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from fitness_tracker.errors import NotFoundError, ValidationError
from fitness_tracker.models import Training
from fitness_tracker.repositories import TrainingRepository, UserRepository

logger = logging.getLogger(__name__)


class TrainingService:
    """Service for training operations."""

    def __init__(
        self,
        db: Session,
        repository: Optional[TrainingRepository] = None,
        user_repository: Optional[UserRepository] = None,
    ):
        self.db = db
        self.repository = repository or TrainingRepository(db)
        self.user_repository = user_repository or UserRepository(db)

    def create_training(self, training: Training) -> Training:
        """
        Persist a new training.

        The owner must exist; nothing is written when it does not.
        """
        logger.info("Creating %s training for user %s", training.activity_type, training.user_id)
        if training.id is not None:
            raise ValidationError("Training has already DB ID, update is not permitted!")
        if training.end_time < training.start_time:
            logger.warning("Rejected training ending before it starts (user %s)", training.user_id)
            raise ValidationError("Training end time precedes its start time")
        if self.user_repository.find_by_id(training.user_id) is None:
            logger.warning("Training references unknown user %s", training.user_id)
            raise NotFoundError(f"Not found User with id: {training.user_id}")

        created = self.repository.save(training)
        logger.info("Created training %s", created.id)
        return created

    def get_all_trainings(self) -> List[Training]:
        return self.repository.find_all()

    def get_all_trainings_by_user_id(self, user_id: int) -> List[Training]:
        return self.repository.find_by_user_id(user_id)
