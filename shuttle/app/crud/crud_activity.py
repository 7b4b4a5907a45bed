"""CRUD operations for activities."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from shuttle.app.crud.columns import activity_columns
from shuttle.app.graph import entities
from shuttle.app.graph.hydrator import hydrate, hydrate_one
from shuttle.app.models.activity import Activity
from shuttle.app.models.associations import ChildActivity
from shuttle.app.models.transport import Transport


class CRUDActivity:
    def _select(self):
        return select(*activity_columns()).order_by(Activity.id)

    def get_multi(self, db: Session) -> List[entities.Activity]:
        rows = db.execute(self._select()).mappings().all()
        return hydrate(rows, key="a_id", build=entities.Activity.from_row)

    def get(self, db: Session, *, activity_id: int) -> Optional[entities.Activity]:
        rows = db.execute(self._select().where(Activity.id == activity_id)).mappings().all()
        return hydrate_one(rows, key="a_id", build=entities.Activity.from_row)

    def exists(self, db: Session, *, activity_id: int) -> bool:
        return db.query(Activity.id).filter(Activity.id == activity_id).first() is not None

    def count_existing(self, db: Session, *, activity_ids: List[int]) -> int:
        if not activity_ids:
            return 0
        return db.query(Activity.id).filter(Activity.id.in_(activity_ids)).count()

    def create(self, db: Session, *, name: str, address: str) -> int:
        activity = Activity(name=name, address=address)
        db.add(activity)
        db.flush()
        return activity.id

    def update(self, db: Session, *, activity_id: int, name: str, address: str) -> int:
        return (
            db.query(Activity)
            .filter(Activity.id == activity_id)
            .update({Activity.name: name, Activity.address: address}, synchronize_session=False)
        )

    def is_used_by_transports(self, db: Session, *, activity_id: int) -> bool:
        return db.query(Transport.id).filter(Transport.activity_id == activity_id).first() is not None

    def delete(self, db: Session, *, activity_id: int) -> bool:
        """Remove the activity's child links, then the activity row."""
        db.query(ChildActivity).filter(ChildActivity.activity_id == activity_id).delete(synchronize_session=False)
        deleted = db.query(Activity).filter(Activity.id == activity_id).delete(synchronize_session=False)
        return deleted > 0


activity_crud = CRUDActivity()
