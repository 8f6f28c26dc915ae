"""User business rules: creation, partial updates, lookups and deletion."""

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fitness_tracker.errors import DuplicateEmailError, NotFoundError, ValidationError
from fitness_tracker.models import User
from fitness_tracker.repositories import UserRepository
from fitness_tracker.schemas import UserPatch

logger = logging.getLogger(__name__)


class UserService:
    """Service for user operations.

    Every mutating call is a single commit through the repository. Email
    addresses are unique regardless of case; the service checks this up
    front and also translates a unique-constraint violation raised by the
    database (two concurrent requests racing for one address).
    """

    def __init__(self, db: Session, repository: Optional[UserRepository] = None):
        self.db = db
        self.repository = repository or UserRepository(db)

    def create_user(self, user: User) -> User:
        """Persist a new user and return it with its assigned id.

        Raises ``ValidationError`` if the user already carries an id and
        ``DuplicateEmailError`` if the email is taken.
        """
        logger.info("Creating user %s", user.email)
        if user.id is not None:
            logger.warning("Rejected user creation with preset id %s", user.id)
            raise ValidationError("User has already DB ID, update is not permitted!")
        self._ensure_email_available(user.email)
        try:
            created = self.repository.save(user)
        except IntegrityError:
            raise DuplicateEmailError(f"Email {user.email} is already in use")
        logger.info("Created user %s", created.id)
        return created

    def update_user(self, user_id: Optional[int], patch: UserPatch) -> User:
        """Apply the supplied fields of ``patch`` onto an existing user.

        Fields not present in the patch keep their stored values.
        """
        if user_id is None:
            raise ValidationError("User ID is empty!")
        logger.info("Updating user %s", user_id)
        user = self.repository.find_by_id(user_id)
        if not user:
            logger.warning("User %s not found for update", user_id)
            raise NotFoundError(f"Not found User with id: {user_id}")

        changes = patch.changes()
        if "email" in changes:
            self._ensure_email_available(changes["email"], exclude_id=user_id)
        for field, value in changes.items():
            setattr(user, field, value)

        # A rollback expires the instance, so keep the address being saved
        email = user.email
        try:
            return self.repository.save(user)
        except IntegrityError:
            raise DuplicateEmailError(f"Email {email} is already in use")

    def get_user(self, user_id: int) -> Optional[User]:
        logger.debug("Fetching user %s", user_id)
        return self.repository.find_by_id(user_id)

    def get_user_or_raise(self, user_id: int) -> User:
        """Get a user by id, raising ``NotFoundError`` when absent."""
        user = self.get_user(user_id)
        if not user:
            raise NotFoundError(f"Not found User with id: {user_id}")
        return user

    def get_user_by_email(self, email: str) -> List[User]:
        """Users whose email contains ``email`` (case-insensitive)."""
        return self.repository.find_by_email(email)

    def get_user_older_than(self, birthdate: date) -> List[User]:
        """Users born strictly before ``birthdate``."""
        return self.repository.find_by_birthdate_before(birthdate)

    def find_all_users(self) -> List[User]:
        return self.repository.find_all()

    def delete_user_by_id(self, user_id: int) -> None:
        """Delete a user and their trainings. Unknown ids are ignored."""
        if self.repository.delete_by_id(user_id):
            logger.info("Deleted user %s", user_id)
        else:
            logger.info("User %s already absent, nothing to delete", user_id)

    def _ensure_email_available(self, email: str, exclude_id: Optional[int] = None) -> None:
        owner = self.repository.find_by_email_exact(email)
        if owner is not None and owner.id != exclude_id:
            logger.warning("Email %s already belongs to user %s", email, owner.id)
            raise DuplicateEmailError(f"Email {email} is already in use")
