from datetime import datetime
from unittest.mock import MagicMock

from fitness_tracker.main import app
from fitness_tracker.models import Training
from fitness_tracker.routers.trainings import get_training_service


def training_body(user_id, **overrides):
    body = {
        "userId": user_id,
        "startTime": "2024-01-19T08:00:00",
        "endTime": "2024-01-19T08:30:00",
        "activityType": "RUNNING",
        "distance": 10.5,
        "averageSpeed": 8.2,
    }
    body.update(overrides)
    return body


def test_create_training(client, make_user):
    user = make_user()

    response = client.post("/v1/trainings", json=training_body(user.id))

    assert response.status_code == 201
    data = response.json()
    assert data["id"] is not None
    assert data["user"] == {
        "id": user.id,
        "firstName": "Alice",
        "lastName": "Smith",
        "birthdate": "1990-04-01",
        "email": "alice@example.com",
    }
    assert data["startTime"] == "2024-01-19T08:00:00.000+00:00"
    assert data["endTime"] == "2024-01-19T08:30:00.000+00:00"
    assert data["activityType"] == "RUNNING"
    assert data["distance"] == 10.5
    assert data["averageSpeed"] == 8.2


def test_create_training_for_unknown_user(client, db):
    response = client.post("/v1/trainings", json=training_body(999))

    assert response.status_code == 404
    assert client.get("/v1/trainings").json() == []
    assert db.query(Training).count() == 0


def test_create_training_with_bad_timestamp(client, make_user):
    user = make_user()

    response = client.post("/v1/trainings", json=training_body(user.id, startTime="2024-01-19 08:00"))

    assert response.status_code == 422


def test_create_training_ending_before_start(client, make_user):
    user = make_user()

    response = client.post(
        "/v1/trainings",
        json=training_body(user.id, startTime="2024-01-19T09:00:00", endTime="2024-01-19T08:00:00"),
    )

    assert response.status_code == 400


def test_list_trainings_and_filter_by_user(client, make_user, make_training):
    alice = make_user()
    bob = make_user(first_name="Bob", email="bob@example.com")
    make_training(alice)
    make_training(bob, start_time=datetime(2024, 2, 1, 6, 0, 0), end_time=datetime(2024, 2, 1, 7, 0, 0))

    everything = client.get("/v1/trainings").json()
    assert len(everything) == 2

    bobs = client.get(f"/v1/trainings/{bob.id}").json()
    assert len(bobs) == 1
    assert bobs[0]["user"]["id"] == bob.id
    assert bobs[0]["startTime"] == "2024-02-01T06:00:00.000+00:00"

    assert client.get("/v1/trainings/999").json() == []


def test_deleting_user_removes_their_trainings(client, make_user, make_training):
    user = make_user()
    make_training(user)

    assert client.delete(f"/v1/users/{user.id}").status_code == 204
    assert client.get("/v1/trainings").json() == []


def test_create_training_for_user_beyond_key_range(client, db):
    response = client.post("/v1/trainings", json=training_body(99999999999999999999))

    assert response.status_code == 404
    assert db.query(Training).count() == 0


def test_list_trainings_for_user_beyond_key_range(client):
    response = client.get("/v1/trainings/99999999999999999999")

    assert response.status_code == 200
    assert response.json() == []


def test_training_routes_use_the_injected_service(client):
    service = MagicMock()
    service.get_all_trainings.return_value = []
    app.dependency_overrides[get_training_service] = lambda: service

    assert client.get("/v1/trainings").json() == []
    service.get_all_trainings.assert_called_once_with()
