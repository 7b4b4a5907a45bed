"""CRUD operations for children and their parent / activity links.

The write helpers issue their statements in dependency order and flush after
each step; callers run them inside one ``unit_of_work`` so a failure at any
step rolls back everything before it.
"""

from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from shuttle.app.crud.columns import activity_columns, child_columns, parent_columns
from shuttle.app.graph import entities
from shuttle.app.graph.hydrator import Relation, hydrate, hydrate_one
from shuttle.app.models.activity import Activity
from shuttle.app.models.associations import ChildActivity, ParentChild
from shuttle.app.models.child import Child
from shuttle.app.models.parent import Parent

CHILD_GRAPH = (
    Relation(key="p_id", build=entities.Parent.from_row, attach=entities.Child.set_parent),
    Relation(key="a_id", build=entities.Activity.from_row, attach=entities.Child.add_activity, many=True),
)


class CRUDChild:
    def _select(self):
        return (
            select(*child_columns(), *parent_columns(), *activity_columns())
            .select_from(Child)
            .outerjoin(ParentChild, ParentChild.child_id == Child.id)
            .outerjoin(Parent, Parent.id == ParentChild.parent_id)
            .outerjoin(ChildActivity, ChildActivity.child_id == Child.id)
            .outerjoin(Activity, Activity.id == ChildActivity.activity_id)
            .order_by(Child.id, Activity.id)
        )

    def _hydrate(self, db: Session, stmt) -> List[entities.Child]:
        rows = db.execute(stmt).mappings().all()
        return hydrate(rows, key="c_id", build=entities.Child.from_row, relations=CHILD_GRAPH)

    def get_multi(self, db: Session) -> List[entities.Child]:
        return self._hydrate(db, self._select())

    def get(self, db: Session, *, child_id: int) -> Optional[entities.Child]:
        rows = db.execute(self._select().where(Child.id == child_id)).mappings().all()
        return hydrate_one(rows, key="c_id", build=entities.Child.from_row, relations=CHILD_GRAPH)

    def get_multi_by_parent(self, db: Session, *, parent_id: int) -> List[entities.Child]:
        linked = select(ParentChild.child_id).where(ParentChild.parent_id == parent_id)
        return self._hydrate(db, self._select().where(Child.id.in_(linked)))

    def get_multi_by_activity(self, db: Session, *, activity_id: int) -> List[entities.Child]:
        # filter on membership so each child still carries all of its activities
        enrolled = select(ChildActivity.child_id).where(ChildActivity.activity_id == activity_id)
        return self._hydrate(db, self._select().where(Child.id.in_(enrolled)))

    def exists(self, db: Session, *, child_id: int) -> bool:
        return db.query(Child.id).filter(Child.id == child_id).first() is not None

    def has_activity(self, db: Session, *, child_id: int, activity_id: int) -> bool:
        return (
            db.query(ChildActivity.child_id)
            .filter(ChildActivity.child_id == child_id, ChildActivity.activity_id == activity_id)
            .first()
            is not None
        )

    # statement-level helpers

    def link_parent(self, db: Session, *, child_id: int, parent_id: int) -> None:
        db.add(ParentChild(parent_id=parent_id, child_id=child_id))
        db.flush()

    def unlink_parents(self, db: Session, *, child_id: int) -> int:
        return db.query(ParentChild).filter(ParentChild.child_id == child_id).delete(synchronize_session=False)

    def unlink_parent(self, db: Session, *, child_id: int, parent_id: int) -> int:
        return (
            db.query(ParentChild)
            .filter(ParentChild.child_id == child_id, ParentChild.parent_id == parent_id)
            .delete(synchronize_session=False)
        )

    def link_activities(self, db: Session, *, child_id: int, activity_ids: Iterable[int]) -> None:
        for activity_id in dict.fromkeys(activity_ids):
            db.add(ChildActivity(child_id=child_id, activity_id=activity_id))
            db.flush()

    def unlink_activities(self, db: Session, *, child_id: int) -> int:
        return db.query(ChildActivity).filter(ChildActivity.child_id == child_id).delete(synchronize_session=False)

    def unlink_activity(self, db: Session, *, child_id: int, activity_id: int) -> int:
        return (
            db.query(ChildActivity)
            .filter(ChildActivity.child_id == child_id, ChildActivity.activity_id == activity_id)
            .delete(synchronize_session=False)
        )

    # logical writes

    def create(
        self, db: Session, *, name: str, parent_id: Optional[int] = None, activity_ids: Iterable[int] = ()
    ) -> int:
        """Insert the child row, then its parent link, then one row per activity."""
        child = Child(name=name)
        db.add(child)
        db.flush()
        if parent_id is not None:
            self.link_parent(db, child_id=child.id, parent_id=parent_id)
        self.link_activities(db, child_id=child.id, activity_ids=activity_ids)
        return child.id

    def replace(
        self,
        db: Session,
        *,
        child_id: int,
        name: str,
        parent_id: Optional[int] = None,
        activity_ids: Iterable[int] = (),
    ) -> None:
        """Make the stored child equal exactly what was supplied.

        Links are dropped and re-inserted even when unchanged.
        """
        db.query(Child).filter(Child.id == child_id).update({Child.name: name}, synchronize_session=False)
        self.unlink_parents(db, child_id=child_id)
        if parent_id is not None:
            self.link_parent(db, child_id=child_id, parent_id=parent_id)
        self.unlink_activities(db, child_id=child_id)
        self.link_activities(db, child_id=child_id, activity_ids=activity_ids)

    def set_parent(self, db: Session, *, child_id: int, parent_id: int) -> None:
        """Leave exactly one parent link for the child."""
        self.unlink_parents(db, child_id=child_id)
        self.link_parent(db, child_id=child_id, parent_id=parent_id)

    def delete(self, db: Session, *, child_id: int) -> bool:
        """Remove both kinds of links before the child row."""
        self.unlink_parents(db, child_id=child_id)
        self.unlink_activities(db, child_id=child_id)
        deleted = db.query(Child).filter(Child.id == child_id).delete(synchronize_session=False)
        return deleted > 0


child_crud = CRUDChild()
