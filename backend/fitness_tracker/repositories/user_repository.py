"""Persistence access for users."""

from datetime import date
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from fitness_tracker.models import User
from fitness_tracker.repositories.keys import is_storable_id


class UserRepository:
    """CRUD and filtered queries over the ``users`` table."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, user_id: int) -> Optional[User]:
        if not is_storable_id(user_id):
            return None
        return self.db.get(User, user_id)

    def find_all(self) -> List[User]:
        return self.db.query(User).order_by(User.id).all()

    def find_by_email(self, email: str) -> List[User]:
        """Users whose email contains ``email``, ignoring case."""
        return (
            self.db.query(User)
            .filter(func.lower(User.email).contains(email.lower(), autoescape=True))
            .order_by(User.id)
            .all()
        )

    def find_by_email_exact(self, email: str) -> Optional[User]:
        """The user owning exactly ``email``, ignoring case."""
        return (
            self.db.query(User)
            .filter(func.lower(User.email) == email.lower())
            .first()
        )

    def find_by_birthdate_before(self, birthdate: date) -> List[User]:
        return (
            self.db.query(User)
            .filter(User.birthdate < birthdate)
            .order_by(User.id)
            .all()
        )

    def save(self, user: User) -> User:
        """Insert or update ``user`` and commit."""
        try:
            self.db.add(user)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user

    def delete_by_id(self, user_id: int) -> bool:
        """Delete the user if present. Returns whether a row was removed."""
        user = self.find_by_id(user_id)
        if not user:
            return False
        try:
            self.db.delete(user)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return True
