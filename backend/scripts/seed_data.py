#!/usr/bin/env python3
"""
Seed the configured database with sample users and trainings.

Does nothing when users already exist.

Run with: python scripts/seed_data.py
"""

from datetime import date, datetime

from fitness_tracker.database import Base, SessionLocal, engine
from fitness_tracker.models import ActivityType, Training, User


SAMPLE_USERS = [
    ("Emma", "Johnson", date(1996, 5, 12), "emma.johnson@domain.com"),
    ("Ethan", "Taylor", date(1993, 11, 3), "ethan.taylor@domain.com"),
    ("Olivia", "Davis", date(1999, 2, 21), "olivia.davis@domain.com"),
    ("Daniel", "Thomas", date(1985, 7, 30), "daniel.thomas@domain.com"),
    ("Sophia", "Baker", date(2001, 9, 9), "sophia.baker@domain.com"),
]

SAMPLE_TRAININGS = [
    # (user index, start, end, activity, distance km, average speed km/h)
    (0, datetime(2024, 1, 19, 8, 0), datetime(2024, 1, 19, 8, 30), ActivityType.RUNNING, 10.5, 8.2),
    (1, datetime(2024, 1, 18, 15, 30), datetime(2024, 1, 18, 17, 30), ActivityType.CYCLING, 25.0, 18.5),
    (2, datetime(2024, 1, 17, 7, 45), datetime(2024, 1, 17, 8, 45), ActivityType.WALKING, 5.2, 5.8),
    (3, datetime(2024, 1, 16, 18, 0), datetime(2024, 1, 16, 20, 0), ActivityType.RUNNING, 12.3, 9.1),
    (4, datetime(2024, 1, 15, 12, 30), datetime(2024, 1, 15, 13, 0), ActivityType.SWIMMING, 1.2, 2.4),
    (0, datetime(2024, 1, 14, 9, 0), datetime(2024, 1, 14, 10, 30), ActivityType.TENNIS, 0, 0),
]


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(User).first():
            print("Users already present, skipping seed.")
            return

        users = [
            User(first_name=first, last_name=last, birthdate=born, email=email)
            for first, last, born, email in SAMPLE_USERS
        ]
        db.add_all(users)
        db.flush()
        print(f"Inserted {len(users)} users")

        for index, start, end, activity, distance, speed in SAMPLE_TRAININGS:
            db.add(Training(
                user_id=users[index].id,
                start_time=start,
                end_time=end,
                activity_type=activity,
                distance=distance,
                average_speed=speed,
            ))
        db.commit()
        print(f"Inserted {len(SAMPLE_TRAININGS)} trainings")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed()
