"""Persistence access for trainings."""

from typing import List, Optional

from sqlalchemy.orm import Session

from fitness_tracker.models import Training
from fitness_tracker.repositories.keys import is_storable_id


class TrainingRepository:
    """CRUD and per-user queries over the ``trainings`` table."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, training_id: int) -> Optional[Training]:
        if not is_storable_id(training_id):
            return None
        return self.db.get(Training, training_id)

    def find_all(self) -> List[Training]:
        return self.db.query(Training).order_by(Training.start_time, Training.id).all()

    def find_by_user_id(self, user_id: int) -> List[Training]:
        if not is_storable_id(user_id):
            return []
        return (
            self.db.query(Training)
            .filter(Training.user_id == user_id)
            .order_by(Training.start_time, Training.id)
            .all()
        )

    def save(self, training: Training) -> Training:
        """Insert or update ``training`` and commit."""
        try:
            self.db.add(training)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(training)
        return training
