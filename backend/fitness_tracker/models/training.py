"""Training model for recorded workouts."""

import enum

from sqlalchemy import Column, Integer, Float, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship

from fitness_tracker.database import Base


class ActivityType(str, enum.Enum):
    """Kinds of activity a training can record."""

    RUNNING = "RUNNING"
    CYCLING = "CYCLING"
    WALKING = "WALKING"
    SWIMMING = "SWIMMING"
    TENNIS = "TENNIS"


class Training(Base):
    """A single workout owned by a user."""

    __tablename__ = "trainings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Timing (naive UTC)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)

    activity_type = Column(Enum(ActivityType, name="activity_type"), nullable=False)

    # Metrics
    distance = Column(Float, default=0)  # km
    average_speed = Column(Float, default=0)  # km/h

    # Relationships
    user = relationship("User", back_populates="trainings")

    def __repr__(self):
        return f"<Training {self.id} ({self.activity_type}) user={self.user_id}>"
