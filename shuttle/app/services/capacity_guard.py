"""Vehicle seat and in-use rules checked around the atomic writes.

Seats are a declarative field: nothing here decrements ``available_seats`` when
a transport is booked. Callers keep the count current with explicit vehicle
updates.
"""

from sqlalchemy.orm import Session

from shuttle.app.core.errors import BusinessRuleError, VehicleInUseError
from shuttle.app.crud.crud_vehicle import vehicle_crud
from shuttle.app.graph import entities

SEATS_ERROR = "Available seats must be greater than 0"


def ensure_positive_seats(available_seats) -> None:
    if isinstance(available_seats, bool) or not isinstance(available_seats, int) or available_seats <= 0:
        raise BusinessRuleError(SEATS_ERROR)


def ensure_positive_required_seats(required_seats) -> None:
    if isinstance(required_seats, bool) or not isinstance(required_seats, int) or required_seats <= 0:
        raise BusinessRuleError("Invalid number of seats")


def ensure_vehicle_not_in_use(db: Session, vehicle_id: int) -> None:
    if vehicle_crud.is_used_by_transports(db, vehicle_id=vehicle_id):
        raise VehicleInUseError(vehicle_id)


def has_capacity(vehicle: entities.Vehicle, required_seats: int) -> bool:
    return vehicle.available_seats >= required_seats
