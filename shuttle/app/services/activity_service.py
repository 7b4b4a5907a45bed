"""Activity use cases."""

import logging

from shuttle.app.core.errors import BusinessRuleError, NotFoundError
from shuttle.app.crud.crud_activity import activity_crud
from shuttle.app.db.session import SessionProvider
from shuttle.app.db.unit_of_work import unit_of_work
from shuttle.app.graph import entities
from shuttle.app.schemas.activity import ActivityCreate, ActivityUpdate

logger = logging.getLogger(__name__)


def list_activities(session_provider: SessionProvider) -> list[entities.Activity]:
    with unit_of_work(session_provider) as db:
        return activity_crud.get_multi(db)


def get_activity(session_provider: SessionProvider, activity_id: int) -> entities.Activity:
    with unit_of_work(session_provider) as db:
        activity = activity_crud.get(db, activity_id=activity_id)
    if activity is None:
        raise NotFoundError("Activity", activity_id)
    return activity


def create_activity(session_provider: SessionProvider, activity_in: ActivityCreate) -> entities.Activity:
    with unit_of_work(session_provider) as db:
        activity_id = activity_crud.create(db, name=activity_in.name, address=activity_in.address)
        activity = activity_crud.get(db, activity_id=activity_id)
    logger.info("Created activity %s", activity_id)
    return activity


def update_activity(
    session_provider: SessionProvider, activity_id: int, activity_in: ActivityUpdate
) -> entities.Activity:
    with unit_of_work(session_provider) as db:
        if not activity_crud.exists(db, activity_id=activity_id):
            raise NotFoundError("Activity", activity_id)
        activity_crud.update(db, activity_id=activity_id, name=activity_in.name, address=activity_in.address)
        activity = activity_crud.get(db, activity_id=activity_id)
    logger.info("Updated activity %s", activity_id)
    return activity


def delete_activity(session_provider: SessionProvider, activity_id: int) -> None:
    with unit_of_work(session_provider) as db:
        if not activity_crud.exists(db, activity_id=activity_id):
            raise NotFoundError("Activity", activity_id)
        if activity_crud.is_used_by_transports(db, activity_id=activity_id):
            raise BusinessRuleError("Cannot delete activity associated with transports")
        activity_crud.delete(db, activity_id=activity_id)
    logger.info("Deleted activity %s", activity_id)
