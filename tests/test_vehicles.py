import pytest
from fastapi.testclient import TestClient

from shuttle.app.db.base import Base
from shuttle.app.db.session import engine
from shuttle.app.main import app


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def create_parent(client: TestClient) -> dict:
    return client.post("/api/parents", json={"name": "J. Doe", "email": "j@x.com", "phone": "0612345678"}).json()


def create_vehicle(client: TestClient, parent_id: int, seats: int) -> dict:
    resp = client.post("/api/vehicles", json={"parentId": parent_id, "availableSeats": seats})
    assert resp.status_code == 201
    return resp.json()


def create_transport(client: TestClient, parent_id: int, seats: int = 4) -> dict:
    activity = client.post("/api/activities", json={"name": "Swimming", "address": "Pool Rd"}).json()
    resp = client.post(
        "/api/transports",
        json={
            "type": "RETURN",
            "dateStart": "2030-01-01T16:00:00",
            "dateEnd": "2030-01-01T17:00:00",
            "pickupLocation": "Pool",
            "activityId": activity["id"],
            "vehicle": {"parentId": parent_id, "availableSeats": seats},
        },
    )
    assert resp.status_code == 201
    return resp.json()


def test_create_and_get_vehicle():
    client = TestClient(app)
    parent = create_parent(client)
    vehicle = create_vehicle(client, parent["id"], 4)

    assert vehicle["parentId"] == parent["id"]
    assert vehicle["availableSeats"] == 4
    assert vehicle["parent"]["email"] == "j@x.com"
    assert client.get(f"/api/vehicles/{vehicle['id']}").json()["availableSeats"] == 4


@pytest.mark.parametrize("seats", [0, -2])
def test_non_positive_seats_rejected(seats):
    client = TestClient(app)
    parent = create_parent(client)
    resp = client.post("/api/vehicles", json={"parentId": parent["id"], "availableSeats": seats})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Available seats must be greater than 0"
    assert client.get("/api/vehicles").json() == []


def test_vehicle_for_unknown_parent_rejected():
    client = TestClient(app)
    resp = client.post("/api/vehicles", json={"parentId": 12, "availableSeats": 3})
    assert resp.status_code == 400


def test_update_vehicle():
    client = TestClient(app)
    parent = create_parent(client)
    vehicle = create_vehicle(client, parent["id"], 4)

    resp = client.put(f"/api/vehicles/{vehicle['id']}", json={"availableSeats": 2})
    assert resp.status_code == 200
    assert resp.json()["availableSeats"] == 2
    assert resp.json()["parentId"] == parent["id"]

    assert client.put(f"/api/vehicles/{vehicle['id']}", json={"availableSeats": 0}).status_code == 400
    assert client.put("/api/vehicles/999", json={"availableSeats": 2}).status_code == 404


def test_vehicles_by_parent_and_seats():
    client = TestClient(app)
    parent = create_parent(client)
    small = create_vehicle(client, parent["id"], 2)
    large = create_vehicle(client, parent["id"], 6)

    assert [v["id"] for v in client.get(f"/api/vehicles/parent/{parent['id']}").json()] == [small["id"], large["id"]]
    assert [v["id"] for v in client.get("/api/vehicles/available", params={"seats": 3}).json()] == [large["id"]]
    assert client.get("/api/vehicles/available", params={"seats": 0}).status_code == 400


def test_vehicle_availability():
    client = TestClient(app)
    parent = create_parent(client)
    vehicle = create_vehicle(client, parent["id"], 3)

    resp = client.get(f"/api/vehicles/{vehicle['id']}/availability", params={"seats": 3})
    assert resp.status_code == 200
    assert resp.json() == {"vehicleId": vehicle["id"], "requiredSeats": 3, "available": True}

    resp = client.get(f"/api/vehicles/{vehicle['id']}/availability", params={"seats": 4})
    assert resp.json()["available"] is False

    assert client.get(f"/api/vehicles/{vehicle['id']}/availability", params={"seats": -1}).status_code == 400
    assert client.get("/api/vehicles/999/availability", params={"seats": 1}).status_code == 404


def test_vehicle_in_use_cannot_be_deleted():
    client = TestClient(app)
    parent = create_parent(client)
    transport = create_transport(client, parent["id"])
    vehicle_id = transport["vehicleId"]

    assert [v["id"] for v in client.get(f"/api/vehicles/transport/{transport['id']}").json()] == [vehicle_id]

    resp = client.delete(f"/api/vehicles/{vehicle_id}")
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Cannot delete vehicle associated with transports"
    assert client.get(f"/api/vehicles/{vehicle_id}").status_code == 200


def test_free_vehicle_can_be_deleted():
    client = TestClient(app)
    parent = create_parent(client)
    vehicle = create_vehicle(client, parent["id"], 4)

    assert client.delete(f"/api/vehicles/{vehicle['id']}").status_code == 204
    assert client.get(f"/api/vehicles/{vehicle['id']}").status_code == 404
    assert client.delete(f"/api/vehicles/{vehicle['id']}").status_code == 404


@pytest.mark.parametrize("seats", [True, 4.0, "4"])
def test_non_integer_seats_rejected(seats):
    client = TestClient(app)
    parent = create_parent(client)
    resp = client.post("/api/vehicles", json={"parentId": parent["id"], "availableSeats": seats})
    assert resp.status_code == 400
    assert client.get("/api/vehicles").json() == []


def test_update_with_boolean_seats_rejected():
    client = TestClient(app)
    parent = create_parent(client)
    vehicle = create_vehicle(client, parent["id"], 4)

    assert client.put(f"/api/vehicles/{vehicle['id']}", json={"availableSeats": True}).status_code == 400
    assert client.get(f"/api/vehicles/{vehicle['id']}").json()["availableSeats"] == 4
