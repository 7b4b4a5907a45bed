"""Parent use cases."""

import logging

from shuttle.app.core.errors import BusinessRuleError, NotFoundError
from shuttle.app.crud.crud_parent import parent_crud
from shuttle.app.db.session import SessionProvider
from shuttle.app.db.unit_of_work import unit_of_work
from shuttle.app.graph import entities
from shuttle.app.schemas.parent import ParentCreate, ParentUpdate

logger = logging.getLogger(__name__)


def list_parents(session_provider: SessionProvider) -> list[entities.Parent]:
    with unit_of_work(session_provider) as db:
        return parent_crud.get_multi(db)


def get_parent(session_provider: SessionProvider, parent_id: int) -> entities.Parent:
    with unit_of_work(session_provider) as db:
        parent = parent_crud.get(db, parent_id=parent_id)
    if parent is None:
        raise NotFoundError("Parent", parent_id)
    return parent


def get_parent_with_children(session_provider: SessionProvider, parent_id: int) -> entities.Parent:
    with unit_of_work(session_provider) as db:
        parent = parent_crud.get_with_children(db, parent_id=parent_id)
    if parent is None:
        raise NotFoundError("Parent", parent_id)
    return parent


def create_parent(session_provider: SessionProvider, parent_in: ParentCreate) -> entities.Parent:
    with unit_of_work(session_provider) as db:
        parent_id = parent_crud.create(db, name=parent_in.name, email=parent_in.email, phone=parent_in.phone)
        parent = parent_crud.get(db, parent_id=parent_id)
    logger.info("Created parent %s", parent_id)
    return parent


def update_parent(session_provider: SessionProvider, parent_id: int, parent_in: ParentUpdate) -> entities.Parent:
    with unit_of_work(session_provider) as db:
        if not parent_crud.exists(db, parent_id=parent_id):
            raise NotFoundError("Parent", parent_id)
        parent_crud.update(db, parent_id=parent_id, name=parent_in.name, email=parent_in.email, phone=parent_in.phone)
        parent = parent_crud.get(db, parent_id=parent_id)
    logger.info("Updated parent %s", parent_id)
    return parent


def delete_parent(session_provider: SessionProvider, parent_id: int) -> None:
    with unit_of_work(session_provider) as db:
        if not parent_crud.exists(db, parent_id=parent_id):
            raise NotFoundError("Parent", parent_id)
        if parent_crud.owns_vehicles(db, parent_id=parent_id):
            raise BusinessRuleError("Cannot delete parent who still owns vehicles")
        parent_crud.delete(db, parent_id=parent_id)
    logger.info("Deleted parent %s", parent_id)
