"""User model."""

from sqlalchemy import Column, Integer, String, Date
from sqlalchemy.orm import relationship

from fitness_tracker.database import Base


class User(Base):
    """A person whose trainings are tracked."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    birthdate = Column(Date, nullable=False, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)

    # Relationships
    trainings = relationship(
        "Training",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<User {self.id}: {self.first_name} {self.last_name} <{self.email}>>"
