"""Vehicle use cases, guarded by the capacity rules."""

import logging

from shuttle.app.core.errors import BusinessRuleError, NotFoundError
from shuttle.app.crud.crud_parent import parent_crud
from shuttle.app.crud.crud_vehicle import vehicle_crud
from shuttle.app.db.session import SessionProvider
from shuttle.app.db.unit_of_work import unit_of_work
from shuttle.app.graph import entities
from shuttle.app.schemas.vehicle import VehicleCreate, VehicleUpdate
from shuttle.app.services import capacity_guard

logger = logging.getLogger(__name__)


def list_vehicles(session_provider: SessionProvider) -> list[entities.Vehicle]:
    with unit_of_work(session_provider) as db:
        return vehicle_crud.get_multi(db)


def get_vehicle(session_provider: SessionProvider, vehicle_id: int) -> entities.Vehicle:
    with unit_of_work(session_provider) as db:
        vehicle = vehicle_crud.get(db, vehicle_id=vehicle_id)
    if vehicle is None:
        raise NotFoundError("Vehicle", vehicle_id)
    return vehicle


def list_vehicles_by_parent(session_provider: SessionProvider, parent_id: int) -> list[entities.Vehicle]:
    with unit_of_work(session_provider) as db:
        return vehicle_crud.get_multi_by_parent(db, parent_id=parent_id)


def list_vehicles_by_transport(session_provider: SessionProvider, transport_id: int) -> list[entities.Vehicle]:
    with unit_of_work(session_provider) as db:
        return vehicle_crud.get_multi_by_transport(db, transport_id=transport_id)


def list_vehicles_with_seats(session_provider: SessionProvider, required_seats: int) -> list[entities.Vehicle]:
    capacity_guard.ensure_positive_required_seats(required_seats)
    with unit_of_work(session_provider) as db:
        return vehicle_crud.get_multi_with_seats(db, required_seats=required_seats)


def check_vehicle_availability(session_provider: SessionProvider, vehicle_id: int, required_seats: int) -> bool:
    capacity_guard.ensure_positive_required_seats(required_seats)
    vehicle = get_vehicle(session_provider, vehicle_id)
    return capacity_guard.has_capacity(vehicle, required_seats)


def create_vehicle(session_provider: SessionProvider, vehicle_in: VehicleCreate) -> entities.Vehicle:
    capacity_guard.ensure_positive_seats(vehicle_in.available_seats)
    with unit_of_work(session_provider) as db:
        if not parent_crud.exists(db, parent_id=vehicle_in.parent_id):
            raise BusinessRuleError("Parent not found")
        vehicle_id = vehicle_crud.create(
            db, parent_id=vehicle_in.parent_id, available_seats=vehicle_in.available_seats
        )
        vehicle = vehicle_crud.get(db, vehicle_id=vehicle_id)
    logger.info("Created vehicle %s for parent %s", vehicle_id, vehicle_in.parent_id)
    return vehicle


def update_vehicle(session_provider: SessionProvider, vehicle_id: int, vehicle_in: VehicleUpdate) -> entities.Vehicle:
    if vehicle_in.available_seats is not None:
        capacity_guard.ensure_positive_seats(vehicle_in.available_seats)
    with unit_of_work(session_provider) as db:
        if not vehicle_crud.exists(db, vehicle_id=vehicle_id):
            raise NotFoundError("Vehicle", vehicle_id)
        if vehicle_in.parent_id is not None and not parent_crud.exists(db, parent_id=vehicle_in.parent_id):
            raise BusinessRuleError("Parent not found")
        vehicle_crud.update(
            db,
            vehicle_id=vehicle_id,
            parent_id=vehicle_in.parent_id,
            available_seats=vehicle_in.available_seats,
        )
        vehicle = vehicle_crud.get(db, vehicle_id=vehicle_id)
    logger.info("Updated vehicle %s", vehicle_id)
    return vehicle


def delete_vehicle(session_provider: SessionProvider, vehicle_id: int) -> None:
    with unit_of_work(session_provider) as db:
        if not vehicle_crud.exists(db, vehicle_id=vehicle_id):
            raise NotFoundError("Vehicle", vehicle_id)
        capacity_guard.ensure_vehicle_not_in_use(db, vehicle_id)
        vehicle_crud.delete(db, vehicle_id=vehicle_id)
    logger.info("Deleted vehicle %s", vehicle_id)
