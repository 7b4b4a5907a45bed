"""CRUD operations for vehicles."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from shuttle.app.crud.columns import parent_columns, vehicle_columns
from shuttle.app.graph import entities
from shuttle.app.graph.hydrator import Relation, hydrate, hydrate_one
from shuttle.app.models.parent import Parent
from shuttle.app.models.transport import Transport
from shuttle.app.models.vehicle import Vehicle

VEHICLE_GRAPH = (
    Relation(key="p_id", build=entities.Parent.from_row, attach=entities.Vehicle.set_parent),
)


class CRUDVehicle:
    def _select(self):
        return (
            select(*vehicle_columns(), *parent_columns())
            .select_from(Vehicle)
            .outerjoin(Parent, Parent.id == Vehicle.parent_id)
            .order_by(Vehicle.id)
        )

    def _hydrate(self, db: Session, stmt) -> List[entities.Vehicle]:
        rows = db.execute(stmt).mappings().all()
        return hydrate(rows, key="v_id", build=entities.Vehicle.from_row, relations=VEHICLE_GRAPH)

    def get_multi(self, db: Session) -> List[entities.Vehicle]:
        return self._hydrate(db, self._select())

    def get(self, db: Session, *, vehicle_id: int) -> Optional[entities.Vehicle]:
        rows = db.execute(self._select().where(Vehicle.id == vehicle_id)).mappings().all()
        return hydrate_one(rows, key="v_id", build=entities.Vehicle.from_row, relations=VEHICLE_GRAPH)

    def get_multi_by_parent(self, db: Session, *, parent_id: int) -> List[entities.Vehicle]:
        return self._hydrate(db, self._select().where(Vehicle.parent_id == parent_id))

    def get_multi_by_transport(self, db: Session, *, transport_id: int) -> List[entities.Vehicle]:
        owned = select(Transport.vehicle_id).where(Transport.id == transport_id)
        return self._hydrate(db, self._select().where(Vehicle.id.in_(owned)))

    def get_multi_with_seats(self, db: Session, *, required_seats: int) -> List[entities.Vehicle]:
        return self._hydrate(db, self._select().where(Vehicle.available_seats >= required_seats))

    def exists(self, db: Session, *, vehicle_id: int) -> bool:
        return db.query(Vehicle.id).filter(Vehicle.id == vehicle_id).first() is not None

    def is_used_by_transports(self, db: Session, *, vehicle_id: int) -> bool:
        return db.query(Transport.id).filter(Transport.vehicle_id == vehicle_id).first() is not None

    def create(self, db: Session, *, parent_id: int, available_seats: int) -> int:
        vehicle = Vehicle(parent_id=parent_id, available_seats=available_seats)
        db.add(vehicle)
        db.flush()
        return vehicle.id

    def update(
        self, db: Session, *, vehicle_id: int, parent_id: Optional[int] = None, available_seats: Optional[int] = None
    ) -> int:
        values = {}
        if parent_id is not None:
            values[Vehicle.parent_id] = parent_id
        if available_seats is not None:
            values[Vehicle.available_seats] = available_seats
        if not values:
            return 0
        return db.query(Vehicle).filter(Vehicle.id == vehicle_id).update(values, synchronize_session=False)

    def delete(self, db: Session, *, vehicle_id: int) -> bool:
        deleted = db.query(Vehicle).filter(Vehicle.id == vehicle_id).delete(synchronize_session=False)
        return deleted > 0


vehicle_crud = CRUDVehicle()
