"""CRUD operations for transports and the vehicles they own."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from shuttle.app.crud.columns import activity_columns, parent_columns, transport_columns, vehicle_columns
from shuttle.app.crud.crud_vehicle import VEHICLE_GRAPH, vehicle_crud
from shuttle.app.graph import entities
from shuttle.app.graph.hydrator import Relation, hydrate, hydrate_one
from shuttle.app.models.activity import Activity
from shuttle.app.models.parent import Parent
from shuttle.app.models.transport import Transport, TransportType
from shuttle.app.models.vehicle import Vehicle

TRANSPORT_GRAPH = (
    Relation(key="a_id", build=entities.Activity.from_row, attach=entities.Transport.set_activity),
    Relation(
        key="v_id",
        build=entities.Vehicle.from_row,
        attach=entities.Transport.set_vehicle,
        relations=VEHICLE_GRAPH,
    ),
)


class CRUDTransport:
    def _select(self):
        return (
            select(*transport_columns(), *activity_columns(), *vehicle_columns(), *parent_columns())
            .select_from(Transport)
            .join(Activity, Activity.id == Transport.activity_id)
            .join(Vehicle, Vehicle.id == Transport.vehicle_id)
            .outerjoin(Parent, Parent.id == Vehicle.parent_id)
            .order_by(Transport.id)
        )

    def _hydrate(self, db: Session, stmt) -> List[entities.Transport]:
        rows = db.execute(stmt).mappings().all()
        return hydrate(rows, key="t_id", build=entities.Transport.from_row, relations=TRANSPORT_GRAPH)

    def get_multi(self, db: Session) -> List[entities.Transport]:
        return self._hydrate(db, self._select())

    def get(self, db: Session, *, transport_id: int) -> Optional[entities.Transport]:
        rows = db.execute(self._select().where(Transport.id == transport_id)).mappings().all()
        return hydrate_one(rows, key="t_id", build=entities.Transport.from_row, relations=TRANSPORT_GRAPH)

    def get_multi_by_activity(self, db: Session, *, activity_id: int) -> List[entities.Transport]:
        return self._hydrate(db, self._select().where(Transport.activity_id == activity_id))

    def get_multi_by_parent(self, db: Session, *, parent_id: int) -> List[entities.Transport]:
        return self._hydrate(db, self._select().where(Vehicle.parent_id == parent_id))

    def get_multi_by_vehicle(self, db: Session, *, vehicle_id: int) -> List[entities.Transport]:
        return self._hydrate(db, self._select().where(Transport.vehicle_id == vehicle_id))

    def get_vehicle_id(self, db: Session, *, transport_id: int) -> Optional[int]:
        row = db.query(Transport.vehicle_id).filter(Transport.id == transport_id).first()
        return row.vehicle_id if row else None

    def create(
        self,
        db: Session,
        *,
        type: TransportType,
        date_start: datetime,
        date_end: datetime,
        pickup_location: str,
        activity_id: int,
        vehicle_parent_id: int,
        available_seats: int,
    ) -> int:
        """Insert the owned vehicle first, then the transport pointing at it."""
        vehicle_id = vehicle_crud.create(db, parent_id=vehicle_parent_id, available_seats=available_seats)
        transport = Transport(
            type=type,
            date_start=date_start,
            date_end=date_end,
            pickup_location=pickup_location,
            activity_id=activity_id,
            vehicle_id=vehicle_id,
        )
        db.add(transport)
        db.flush()
        return transport.id

    def update(
        self,
        db: Session,
        *,
        transport_id: int,
        values: dict,
        available_seats: Optional[int] = None,
    ) -> int:
        """Update the transport row, then its owned vehicle when seat data is supplied."""
        updated = 0
        if values:
            columns = {getattr(Transport, name): value for name, value in values.items()}
            updated = (
                db.query(Transport)
                .filter(Transport.id == transport_id)
                .update(columns, synchronize_session=False)
            )
        if available_seats is not None:
            vehicle_id = self.get_vehicle_id(db, transport_id=transport_id)
            if vehicle_id is not None:
                vehicle_crud.update(db, vehicle_id=vehicle_id, available_seats=available_seats)
        return updated

    def delete(self, db: Session, *, transport_id: int) -> bool:
        """Delete the transport and, when a row was removed, the vehicle it owned."""
        vehicle_id = self.get_vehicle_id(db, transport_id=transport_id)
        deleted = db.query(Transport).filter(Transport.id == transport_id).delete(synchronize_session=False)
        if deleted > 0 and vehicle_id is not None:
            vehicle_crud.delete(db, vehicle_id=vehicle_id)
        return deleted > 0


transport_crud = CRUDTransport()
