"""Child use cases.

Every write runs as one unit of work: the child row and its association rows
are committed together or not at all, and the returned graph is read back
inside the same unit.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from shuttle.app.core.errors import BusinessRuleError, NotFoundError
from shuttle.app.crud.crud_activity import activity_crud
from shuttle.app.crud.crud_child import child_crud
from shuttle.app.crud.crud_parent import parent_crud
from shuttle.app.db.session import SessionProvider
from shuttle.app.db.unit_of_work import unit_of_work
from shuttle.app.graph import entities
from shuttle.app.schemas.child import ChildCreate, ChildUpdate

logger = logging.getLogger(__name__)


def _ensure_child(db: Session, child_id: int) -> None:
    if not child_crud.exists(db, child_id=child_id):
        raise NotFoundError("Child", child_id)


def _ensure_references(db: Session, parent_id: Optional[int], activity_ids: list[int]) -> None:
    if parent_id is not None and not parent_crud.exists(db, parent_id=parent_id):
        raise BusinessRuleError("Parent not found")
    unique_ids = set(activity_ids)
    if activity_crud.count_existing(db, activity_ids=list(unique_ids)) != len(unique_ids):
        raise BusinessRuleError("Activity not found")


def list_children(session_provider: SessionProvider) -> list[entities.Child]:
    with unit_of_work(session_provider) as db:
        return child_crud.get_multi(db)


def get_child(session_provider: SessionProvider, child_id: int) -> entities.Child:
    with unit_of_work(session_provider) as db:
        child = child_crud.get(db, child_id=child_id)
    if child is None:
        raise NotFoundError("Child", child_id)
    return child


def list_children_by_parent(session_provider: SessionProvider, parent_id: int) -> list[entities.Child]:
    with unit_of_work(session_provider) as db:
        return child_crud.get_multi_by_parent(db, parent_id=parent_id)


def list_children_by_activity(session_provider: SessionProvider, activity_id: int) -> list[entities.Child]:
    with unit_of_work(session_provider) as db:
        return child_crud.get_multi_by_activity(db, activity_id=activity_id)


def create_child(session_provider: SessionProvider, child_in: ChildCreate) -> entities.Child:
    with unit_of_work(session_provider) as db:
        _ensure_references(db, child_in.parent_id, child_in.activity_ids)
        child_id = child_crud.create(
            db, name=child_in.name, parent_id=child_in.parent_id, activity_ids=child_in.activity_ids
        )
        child = child_crud.get(db, child_id=child_id)
    logger.info("Created child %s", child_id)
    return child


def update_child(session_provider: SessionProvider, child_id: int, child_in: ChildUpdate) -> entities.Child:
    with unit_of_work(session_provider) as db:
        _ensure_child(db, child_id)
        _ensure_references(db, child_in.parent_id, child_in.activity_ids)
        child_crud.replace(
            db,
            child_id=child_id,
            name=child_in.name,
            parent_id=child_in.parent_id,
            activity_ids=child_in.activity_ids,
        )
        child = child_crud.get(db, child_id=child_id)
    logger.info("Replaced child %s", child_id)
    return child


def delete_child(session_provider: SessionProvider, child_id: int) -> None:
    with unit_of_work(session_provider) as db:
        _ensure_child(db, child_id)
        child_crud.delete(db, child_id=child_id)
    logger.info("Deleted child %s", child_id)


def add_activity_to_child(session_provider: SessionProvider, child_id: int, activity_id: int) -> entities.Child:
    with unit_of_work(session_provider) as db:
        _ensure_child(db, child_id)
        if not activity_crud.exists(db, activity_id=activity_id):
            raise NotFoundError("Activity", activity_id)
        if not child_crud.has_activity(db, child_id=child_id, activity_id=activity_id):
            child_crud.link_activities(db, child_id=child_id, activity_ids=[activity_id])
        child = child_crud.get(db, child_id=child_id)
    logger.info("Linked activity %s to child %s", activity_id, child_id)
    return child


def remove_activity_from_child(session_provider: SessionProvider, child_id: int, activity_id: int) -> entities.Child:
    with unit_of_work(session_provider) as db:
        _ensure_child(db, child_id)
        child_crud.unlink_activity(db, child_id=child_id, activity_id=activity_id)
        child = child_crud.get(db, child_id=child_id)
    logger.info("Unlinked activity %s from child %s", activity_id, child_id)
    return child


def set_parent_for_child(session_provider: SessionProvider, child_id: int, parent_id: int) -> entities.Child:
    with unit_of_work(session_provider) as db:
        _ensure_child(db, child_id)
        if not parent_crud.exists(db, parent_id=parent_id):
            raise NotFoundError("Parent", parent_id)
        child_crud.set_parent(db, child_id=child_id, parent_id=parent_id)
        child = child_crud.get(db, child_id=child_id)
    logger.info("Set parent %s for child %s", parent_id, child_id)
    return child


def remove_parent_from_child(session_provider: SessionProvider, child_id: int) -> entities.Child:
    with unit_of_work(session_provider) as db:
        _ensure_child(db, child_id)
        child_crud.unlink_parents(db, child_id=child_id)
        child = child_crud.get(db, child_id=child_id)
    logger.info("Removed parent from child %s", child_id)
    return child


def remove_child_from_parent(session_provider: SessionProvider, child_id: int, parent_id: int) -> entities.Child:
    with unit_of_work(session_provider) as db:
        _ensure_child(db, child_id)
        child_crud.unlink_parent(db, child_id=child_id, parent_id=parent_id)
        child = child_crud.get(db, child_id=child_id)
    logger.info("Removed child %s from parent %s", child_id, parent_id)
    return child
