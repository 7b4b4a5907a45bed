from fastapi.testclient import TestClient

from shuttle.app.db.base import Base
from shuttle.app.db.session import engine
from shuttle.app.main import app

client = TestClient(app)


def test_read_root():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"app": "Shuttle Planner backend", "status": "ok"}


def test_health_check():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_unknown_route_is_404():
    response = client.get("/api/unknown")
    assert response.status_code == 404


def test_startup_creates_tables():
    Base.metadata.drop_all(bind=engine)
    with TestClient(app) as started:
        response = started.get("/api/activities")
    assert response.status_code == 200
    assert response.json() == []
    Base.metadata.drop_all(bind=engine)
