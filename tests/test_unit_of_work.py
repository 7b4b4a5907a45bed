from datetime import datetime

import pytest
from sqlalchemy import event

from shuttle.app.core.errors import NotFoundError
from shuttle.app.db.base import Base
from shuttle.app.db.session import SessionLocal, engine
from shuttle.app.db.unit_of_work import unit_of_work
from shuttle.app.models.activity import Activity
from shuttle.app.models.child import Child
from shuttle.app.models.parent import Parent
from shuttle.app.models.transport import Transport, TransportType
from shuttle.app.models.vehicle import Vehicle
from shuttle.app.schemas.child import ChildCreate
from shuttle.app.schemas.transport import TransportCreate
from shuttle.app.services import child_service, transport_service


class InjectedFailure(Exception):
    pass


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def fail_on():
    """Make the next statement starting with the given prefix raise."""
    listeners = []

    def install(prefix: str):
        def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
            if statement.lstrip().upper().startswith(prefix):
                raise InjectedFailure(f"injected failure on {prefix}")

        event.listen(engine, "before_cursor_execute", before_cursor_execute)
        listeners.append(before_cursor_execute)

    yield install
    for listener in listeners:
        event.remove(engine, "before_cursor_execute", listener)


@pytest.fixture
def statements():
    seen = []

    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        seen.append(statement.lstrip().upper())

    event.listen(engine, "before_cursor_execute", before_cursor_execute)
    yield seen
    event.remove(engine, "before_cursor_execute", before_cursor_execute)


def seed() -> tuple[int, int]:
    with unit_of_work(SessionLocal) as db:
        activity = Activity(name="Swimming", address="Pool Rd")
        parent = Parent(name="J. Doe", email="j@x.com", phone="0612345678")
        db.add_all([activity, parent])
        db.flush()
        return activity.id, parent.id


def count(model) -> int:
    db = SessionLocal()
    try:
        return db.query(model).count()
    finally:
        db.close()


def transport_in(activity_id: int, parent_id: int) -> TransportCreate:
    return TransportCreate(
        type=TransportType.OUTWARD,
        date_start=datetime(2030, 1, 1, 8),
        date_end=datetime(2030, 1, 1, 9),
        pickup_location="School",
        activity_id=activity_id,
        vehicle={"parent_id": parent_id, "available_seats": 4},
    )


def test_commit_on_success():
    with unit_of_work(SessionLocal) as db:
        db.add(Child(name="Ann"))
    assert count(Child) == 1


def test_rollback_and_reraise_on_error():
    with pytest.raises(InjectedFailure):
        with unit_of_work(SessionLocal) as db:
            db.add(Child(name="Ann"))
            db.flush()
            raise InjectedFailure("boom")
    assert count(Child) == 0


def test_session_closed_on_every_path():
    closed = []

    class TrackingSession:
        def __init__(self):
            self.session = SessionLocal()

        def __getattr__(self, name):
            return getattr(self.session, name)

        def close(self):
            closed.append(True)
            self.session.close()

    with unit_of_work(TrackingSession):
        pass
    with pytest.raises(InjectedFailure):
        with unit_of_work(TrackingSession):
            raise InjectedFailure("boom")
    assert closed == [True, True]


def test_failed_transport_insert_leaves_no_orphan_vehicle(fail_on):
    activity_id, parent_id = seed()
    fail_on("INSERT INTO TRANSPORTS")

    with pytest.raises(Exception, match="injected failure"):
        transport_service.create_transport(SessionLocal, transport_in(activity_id, parent_id))

    assert count(Vehicle) == 0
    assert count(Transport) == 0


def test_failed_vehicle_delete_keeps_transport(fail_on):
    activity_id, parent_id = seed()
    transport = transport_service.create_transport(SessionLocal, transport_in(activity_id, parent_id))
    fail_on("DELETE FROM VEHICLES")

    with pytest.raises(Exception, match="injected failure"):
        transport_service.delete_transport(SessionLocal, transport.id)

    assert count(Transport) == 1
    assert count(Vehicle) == 1


def test_deleting_missing_transport_touches_no_vehicle(statements):
    seed()
    with pytest.raises(NotFoundError):
        transport_service.delete_transport(SessionLocal, 404)
    assert not [s for s in statements if s.startswith("DELETE FROM VEHICLES")]


def test_failed_activity_link_leaves_no_child(fail_on):
    activity_id, parent_id = seed()
    fail_on("INSERT INTO CHILD_ACTIVITY")

    with pytest.raises(Exception, match="injected failure"):
        child_service.create_child(
            SessionLocal, ChildCreate(name="Ann", parent_id=parent_id, activity_ids=[activity_id])
        )

    assert count(Child) == 0
