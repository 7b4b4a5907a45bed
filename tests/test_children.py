import pytest
from fastapi.testclient import TestClient

from shuttle.app.db.base import Base
from shuttle.app.db.session import SessionLocal, engine
from shuttle.app.main import app
from shuttle.app.models.associations import ChildActivity, ParentChild
from shuttle.app.models.child import Child


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def create_parent(client: TestClient, name="J. Doe") -> dict:
    resp = client.post("/api/parents", json={"name": name, "email": "j@x.com", "phone": "0612345678"})
    assert resp.status_code == 201
    return resp.json()


def create_activity(client: TestClient, name: str) -> dict:
    resp = client.post("/api/activities", json={"name": name, "address": f"{name} Rd"})
    assert resp.status_code == 201
    return resp.json()


def parent_links(child_id: int) -> list:
    db = SessionLocal()
    try:
        return db.query(ParentChild).filter(ParentChild.child_id == child_id).all()
    finally:
        db.close()


def activity_links(child_id: int) -> list:
    db = SessionLocal()
    try:
        return db.query(ChildActivity).filter(ChildActivity.child_id == child_id).all()
    finally:
        db.close()


def test_create_child_with_parent_and_activities():
    client = TestClient(app)
    parent = create_parent(client)
    swim = create_activity(client, "Swimming")
    judo = create_activity(client, "Judo")

    resp = client.post(
        "/api/children",
        json={"name": "Ann", "parentId": parent["id"], "activityIds": [swim["id"], judo["id"], swim["id"]]},
    )
    assert resp.status_code == 201
    child = resp.json()
    assert child["parentId"] == parent["id"]
    assert child["parent"]["name"] == "J. Doe"
    assert [a["name"] for a in child["activities"]] == ["Swimming", "Judo"]
    assert len(activity_links(child["id"])) == 2


def test_create_child_with_unknown_activity_leaves_nothing():
    client = TestClient(app)
    parent = create_parent(client)
    swim = create_activity(client, "Swimming")

    resp = client.post(
        "/api/children",
        json={"name": "Ann", "parentId": parent["id"], "activityIds": [swim["id"], 999]},
    )
    assert resp.status_code == 400
    assert client.get("/api/children").json() == []


def test_create_child_with_unknown_parent_rejected():
    client = TestClient(app)
    resp = client.post("/api/children", json={"name": "Ann", "parentId": 77})
    assert resp.status_code == 400
    assert client.get("/api/children").json() == []


def test_update_replaces_parent_and_activities():
    client = TestClient(app)
    first = create_parent(client, "First")
    second = create_parent(client, "Second")
    swim = create_activity(client, "Swimming")
    judo = create_activity(client, "Judo")
    riding = create_activity(client, "Riding")
    child = client.post(
        "/api/children",
        json={"name": "Ann", "parentId": first["id"], "activityIds": [swim["id"], judo["id"]]},
    ).json()

    resp = client.put(
        f"/api/children/{child['id']}",
        json={"name": "Annie", "parentId": second["id"], "activityIds": [riding["id"]]},
    )
    assert resp.status_code == 200
    updated = resp.json()
    assert updated["name"] == "Annie"
    assert updated["parentId"] == second["id"]
    assert [a["name"] for a in updated["activities"]] == ["Riding"]
    assert [link.parent_id for link in parent_links(child["id"])] == [second["id"]]
    assert [link.activity_id for link in activity_links(child["id"])] == [riding["id"]]


def test_update_without_parent_clears_links():
    client = TestClient(app)
    parent = create_parent(client)
    swim = create_activity(client, "Swimming")
    child = client.post(
        "/api/children", json={"name": "Ann", "parentId": parent["id"], "activityIds": [swim["id"]]}
    ).json()

    resp = client.put(f"/api/children/{child['id']}", json={"name": "Ann"})
    assert resp.status_code == 200
    assert resp.json()["parent"] is None
    assert resp.json()["activities"] == []
    assert parent_links(child["id"]) == []


def test_update_missing_child_is_404():
    client = TestClient(app)
    assert client.put("/api/children/5", json={"name": "Ghost"}).status_code == 404


def test_delete_child_removes_associations():
    client = TestClient(app)
    parent = create_parent(client)
    swim = create_activity(client, "Swimming")
    child = client.post(
        "/api/children", json={"name": "Ann", "parentId": parent["id"], "activityIds": [swim["id"]]}
    ).json()

    assert client.delete(f"/api/children/{child['id']}").status_code == 204
    assert client.get(f"/api/children/{child['id']}").status_code == 404
    assert parent_links(child["id"]) == []
    assert activity_links(child["id"]) == []
    assert client.delete(f"/api/children/{child['id']}").status_code == 404


def test_add_and_remove_activity():
    client = TestClient(app)
    swim = create_activity(client, "Swimming")
    judo = create_activity(client, "Judo")
    child = client.post("/api/children", json={"name": "Ann", "activityIds": [swim["id"]]}).json()

    resp = client.post(f"/api/children/{child['id']}/activities/{judo['id']}")
    assert resp.status_code == 200
    assert [a["id"] for a in resp.json()["activities"]] == [swim["id"], judo["id"]]

    # adding an existing link is a no-op
    resp = client.post(f"/api/children/{child['id']}/activities/{judo['id']}")
    assert resp.status_code == 200
    assert len(activity_links(child["id"])) == 2

    resp = client.delete(f"/api/children/{child['id']}/activities/{swim['id']}")
    assert resp.status_code == 200
    assert [a["id"] for a in resp.json()["activities"]] == [judo["id"]]

    assert client.post(f"/api/children/{child['id']}/activities/999").status_code == 404
    assert client.post(f"/api/children/999/activities/{judo['id']}").status_code == 404


def test_set_parent_replaces_existing_link():
    client = TestClient(app)
    first = create_parent(client, "First")
    second = create_parent(client, "Second")
    child = client.post("/api/children", json={"name": "Ann", "parentId": first["id"]}).json()

    resp = client.post(f"/api/children/{child['id']}/parent/{second['id']}")
    assert resp.status_code == 200
    assert resp.json()["parentId"] == second["id"]
    assert [link.parent_id for link in parent_links(child["id"])] == [second["id"]]

    assert client.post(f"/api/children/{child['id']}/parent/999").status_code == 404


def test_remove_parent_links():
    client = TestClient(app)
    first = create_parent(client, "First")
    second = create_parent(client, "Second")
    child = client.post("/api/children", json={"name": "Ann", "parentId": first["id"]}).json()

    # removing an unrelated parent leaves the link in place
    resp = client.delete(f"/api/children/{child['id']}/parent/{second['id']}")
    assert resp.status_code == 200
    assert resp.json()["parentId"] == first["id"]

    resp = client.delete(f"/api/children/{child['id']}/parent/{first['id']}")
    assert resp.json()["parentId"] is None

    client.post(f"/api/children/{child['id']}/parent/{second['id']}")
    resp = client.delete(f"/api/children/{child['id']}/parent")
    assert resp.status_code == 200
    assert resp.json()["parent"] is None
    assert parent_links(child["id"]) == []


def test_children_by_parent_and_activity_keep_all_activities():
    client = TestClient(app)
    parent = create_parent(client)
    swim = create_activity(client, "Swimming")
    judo = create_activity(client, "Judo")
    ann = client.post(
        "/api/children",
        json={"name": "Ann", "parentId": parent["id"], "activityIds": [swim["id"], judo["id"]]},
    ).json()
    client.post("/api/children", json={"name": "Bob", "activityIds": [swim["id"]]})

    by_parent = client.get(f"/api/children/parent/{parent['id']}").json()
    assert [c["id"] for c in by_parent] == [ann["id"]]

    by_judo = client.get(f"/api/children/activity/{judo['id']}").json()
    assert [c["name"] for c in by_judo] == ["Ann"]
    assert [a["name"] for a in by_judo[0]["activities"]] == ["Swimming", "Judo"]

    by_swim = client.get(f"/api/children/activity/{swim['id']}").json()
    assert [c["name"] for c in by_swim] == ["Ann", "Bob"]


def test_list_children_has_one_entry_per_child():
    client = TestClient(app)
    activities = [create_activity(client, name)["id"] for name in ("A", "B", "C")]
    client.post("/api/children", json={"name": "Ann", "activityIds": activities})
    client.post("/api/children", json={"name": "Bob"})

    children = client.get("/api/children").json()
    assert [c["name"] for c in children] == ["Ann", "Bob"]
    assert len(children[0]["activities"]) == 3

    db = SessionLocal()
    try:
        assert db.query(Child).count() == 2
    finally:
        db.close()


def test_set_parent_collapses_several_prior_links():
    client = TestClient(app)
    first = create_parent(client, "First")
    second = create_parent(client, "Second")
    third = create_parent(client, "Third")
    child = client.post("/api/children", json={"name": "Ann"}).json()
    db = SessionLocal()
    try:
        db.add_all(
            [
                ParentChild(parent_id=first["id"], child_id=child["id"]),
                ParentChild(parent_id=second["id"], child_id=child["id"]),
            ]
        )
        db.commit()
    finally:
        db.close()
    assert len(parent_links(child["id"])) == 2

    resp = client.post(f"/api/children/{child['id']}/parent/{third['id']}")
    assert resp.status_code == 200
    assert resp.json()["parentId"] == third["id"]
    assert [link.parent_id for link in parent_links(child["id"])] == [third["id"]]
