from datetime import date, datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from fitness_tracker.database import Base, build_engine, get_db
from fitness_tracker.main import app
from fitness_tracker.models import ActivityType, Training, User


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    """Insert a user directly, bypassing the service."""
    def _make_user(
        first_name="Alice",
        last_name="Smith",
        birthdate=date(1990, 4, 1),
        email="alice@example.com",
    ):
        user = User(
            first_name=first_name,
            last_name=last_name,
            birthdate=birthdate,
            email=email,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make_user


@pytest.fixture
def make_training(db):
    """Insert a training directly, bypassing the service."""
    def _make_training(
        user,
        start_time=datetime(2024, 1, 19, 8, 0, 0),
        end_time=datetime(2024, 1, 19, 8, 30, 0),
        activity_type=ActivityType.RUNNING,
        distance=5.0,
        average_speed=10.0,
    ):
        training = Training(
            user_id=user.id,
            start_time=start_time,
            end_time=end_time,
            activity_type=activity_type,
            distance=distance,
            average_speed=average_speed,
        )
        db.add(training)
        db.commit()
        db.refresh(training)
        return training
    return _make_training
