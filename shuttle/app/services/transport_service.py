"""Transport use cases.

A transport owns the vehicle created with it. Creation inserts the vehicle and
then the transport in one unit of work; deletion removes the transport and then
its vehicle in one unit of work, so neither an orphan vehicle nor a transport
pointing at a deleted vehicle can be committed.
"""

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from shuttle.app.core.errors import BusinessRuleError, NotFoundError
from shuttle.app.crud.crud_activity import activity_crud
from shuttle.app.crud.crud_parent import parent_crud
from shuttle.app.crud.crud_transport import transport_crud
from shuttle.app.crud.crud_vehicle import vehicle_crud
from shuttle.app.db.session import SessionProvider
from shuttle.app.db.unit_of_work import unit_of_work
from shuttle.app.graph import entities
from shuttle.app.schemas.transport import TransportCreate, TransportUpdate
from shuttle.app.services import capacity_guard

logger = logging.getLogger(__name__)


def _ensure_date_order(date_start: datetime, date_end: datetime) -> None:
    if date_end <= date_start:
        raise BusinessRuleError("End date must be after start date")


def _ensure_activity(db: Session, activity_id: int) -> None:
    if not activity_crud.exists(db, activity_id=activity_id):
        raise BusinessRuleError("Activity not found")


def list_transports(session_provider: SessionProvider) -> list[entities.Transport]:
    with unit_of_work(session_provider) as db:
        return transport_crud.get_multi(db)


def get_transport(session_provider: SessionProvider, transport_id: int) -> entities.Transport:
    with unit_of_work(session_provider) as db:
        transport = transport_crud.get(db, transport_id=transport_id)
    if transport is None:
        raise NotFoundError("Transport", transport_id)
    return transport


def list_transports_by_activity(session_provider: SessionProvider, activity_id: int) -> list[entities.Transport]:
    with unit_of_work(session_provider) as db:
        if not activity_crud.exists(db, activity_id=activity_id):
            raise NotFoundError("Activity", activity_id)
        return transport_crud.get_multi_by_activity(db, activity_id=activity_id)


def list_transports_by_parent(session_provider: SessionProvider, parent_id: int) -> list[entities.Transport]:
    with unit_of_work(session_provider) as db:
        if not parent_crud.exists(db, parent_id=parent_id):
            raise NotFoundError("Parent", parent_id)
        return transport_crud.get_multi_by_parent(db, parent_id=parent_id)


def list_transports_by_vehicle(session_provider: SessionProvider, vehicle_id: int) -> list[entities.Transport]:
    with unit_of_work(session_provider) as db:
        if not vehicle_crud.exists(db, vehicle_id=vehicle_id):
            raise NotFoundError("Vehicle", vehicle_id)
        return transport_crud.get_multi_by_vehicle(db, vehicle_id=vehicle_id)


def create_transport(session_provider: SessionProvider, transport_in: TransportCreate) -> entities.Transport:
    _ensure_date_order(transport_in.date_start, transport_in.date_end)
    capacity_guard.ensure_positive_seats(transport_in.vehicle.available_seats)
    with unit_of_work(session_provider) as db:
        _ensure_activity(db, transport_in.activity_id)
        if not parent_crud.exists(db, parent_id=transport_in.vehicle.parent_id):
            raise BusinessRuleError("Parent not found")
        transport_id = transport_crud.create(
            db,
            type=transport_in.type,
            date_start=transport_in.date_start,
            date_end=transport_in.date_end,
            pickup_location=transport_in.pickup_location,
            activity_id=transport_in.activity_id,
            vehicle_parent_id=transport_in.vehicle.parent_id,
            available_seats=transport_in.vehicle.available_seats,
        )
        transport = transport_crud.get(db, transport_id=transport_id)
    logger.info("Created transport %s with vehicle %s", transport_id, transport.vehicle_id)
    return transport


def update_transport(
    session_provider: SessionProvider, transport_id: int, transport_in: TransportUpdate
) -> entities.Transport:
    """Merge the supplied fields over the stored transport and apply them atomically."""
    if transport_in.vehicle is not None:
        capacity_guard.ensure_positive_seats(transport_in.vehicle.available_seats)
    with unit_of_work(session_provider) as db:
        existing = transport_crud.get(db, transport_id=transport_id)
        if existing is None:
            raise NotFoundError("Transport", transport_id)
        changes = transport_in.model_dump(exclude_unset=True, exclude_none=True, exclude={"vehicle"})
        _ensure_date_order(
            changes.get("date_start", existing.date_start),
            changes.get("date_end", existing.date_end),
        )
        if "activity_id" in changes and changes["activity_id"] != existing.activity_id:
            _ensure_activity(db, changes["activity_id"])
        transport_crud.update(
            db,
            transport_id=transport_id,
            values=changes,
            available_seats=transport_in.vehicle.available_seats if transport_in.vehicle else None,
        )
        transport = transport_crud.get(db, transport_id=transport_id)
    logger.info("Updated transport %s", transport_id)
    return transport


def delete_transport(session_provider: SessionProvider, transport_id: int) -> None:
    with unit_of_work(session_provider) as db:
        if not transport_crud.delete(db, transport_id=transport_id):
            raise NotFoundError("Transport", transport_id)
    logger.info("Deleted transport %s and its vehicle", transport_id)
