"""CRUD operations for parents and the parent -> children -> activities graph."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from shuttle.app.crud.columns import activity_columns, child_columns, parent_columns, vehicle_columns
from shuttle.app.graph import entities
from shuttle.app.graph.hydrator import Relation, hydrate, hydrate_one
from shuttle.app.models.activity import Activity
from shuttle.app.models.associations import ChildActivity, ParentChild
from shuttle.app.models.child import Child
from shuttle.app.models.parent import Parent
from shuttle.app.models.vehicle import Vehicle

# One row per (child, activity, vehicle) combination; every level is deduplicated.
PARENT_GRAPH = (
    Relation(
        key="c_id",
        build=entities.Child.from_row,
        attach=entities.Parent.add_child,
        many=True,
        relations=(
            Relation(key="a_id", build=entities.Activity.from_row, attach=entities.Child.add_activity, many=True),
        ),
    ),
    Relation(key="v_id", build=entities.Vehicle.from_row, attach=entities.Parent.add_vehicle, many=True),
)


class CRUDParent:
    def _select(self):
        return select(*parent_columns()).order_by(Parent.id)

    def get_multi(self, db: Session) -> List[entities.Parent]:
        rows = db.execute(self._select()).mappings().all()
        return hydrate(rows, key="p_id", build=entities.Parent.from_row)

    def get(self, db: Session, *, parent_id: int) -> Optional[entities.Parent]:
        rows = db.execute(self._select().where(Parent.id == parent_id)).mappings().all()
        return hydrate_one(rows, key="p_id", build=entities.Parent.from_row)

    def get_with_children(self, db: Session, *, parent_id: int) -> Optional[entities.Parent]:
        stmt = (
            select(*parent_columns(), *child_columns(), *activity_columns(), *vehicle_columns())
            .select_from(Parent)
            .outerjoin(ParentChild, ParentChild.parent_id == Parent.id)
            .outerjoin(Child, Child.id == ParentChild.child_id)
            .outerjoin(ChildActivity, ChildActivity.child_id == Child.id)
            .outerjoin(Activity, Activity.id == ChildActivity.activity_id)
            .outerjoin(Vehicle, Vehicle.parent_id == Parent.id)
            .where(Parent.id == parent_id)
            .order_by(Child.id, Activity.id, Vehicle.id)
        )
        rows = db.execute(stmt).mappings().all()
        return hydrate_one(rows, key="p_id", build=entities.Parent.from_row, relations=PARENT_GRAPH)

    def exists(self, db: Session, *, parent_id: int) -> bool:
        return db.query(Parent.id).filter(Parent.id == parent_id).first() is not None

    def create(self, db: Session, *, name: str, email: str, phone: str) -> int:
        parent = Parent(name=name, email=email, phone=phone)
        db.add(parent)
        db.flush()
        return parent.id

    def update(self, db: Session, *, parent_id: int, name: str, email: str, phone: str) -> int:
        return (
            db.query(Parent)
            .filter(Parent.id == parent_id)
            .update({Parent.name: name, Parent.email: email, Parent.phone: phone}, synchronize_session=False)
        )

    def owns_vehicles(self, db: Session, *, parent_id: int) -> bool:
        return db.query(Vehicle.id).filter(Vehicle.parent_id == parent_id).first() is not None

    def delete(self, db: Session, *, parent_id: int) -> bool:
        """Remove the parent's child links, then the parent row."""
        db.query(ParentChild).filter(ParentChild.parent_id == parent_id).delete(synchronize_session=False)
        deleted = db.query(Parent).filter(Parent.id == parent_id).delete(synchronize_session=False)
        return deleted > 0


parent_crud = CRUDParent()
