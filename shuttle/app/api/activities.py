"""Activity endpoints."""

from fastapi import APIRouter, Depends, Response, status

from shuttle.app.db.session import SessionProvider, get_session_provider
from shuttle.app.schemas.activity import ActivityCreate, ActivityRead, ActivityUpdate
from shuttle.app.services import activity_service

router = APIRouter(prefix="/api/activities", tags=["activities"])


@router.get("", response_model=list[ActivityRead])
def list_activities(session_provider: SessionProvider = Depends(get_session_provider)):
    return activity_service.list_activities(session_provider)


@router.get("/{activity_id}", response_model=ActivityRead)
def get_activity(activity_id: int, session_provider: SessionProvider = Depends(get_session_provider)):
    return activity_service.get_activity(session_provider, activity_id)


@router.post("", response_model=ActivityRead, status_code=status.HTTP_201_CREATED)
def create_activity(activity_in: ActivityCreate, session_provider: SessionProvider = Depends(get_session_provider)):
    return activity_service.create_activity(session_provider, activity_in)


@router.put("/{activity_id}", response_model=ActivityRead)
def update_activity(
    activity_id: int,
    activity_in: ActivityUpdate,
    session_provider: SessionProvider = Depends(get_session_provider),
):
    return activity_service.update_activity(session_provider, activity_id, activity_in)


@router.delete("/{activity_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_activity(activity_id: int, session_provider: SessionProvider = Depends(get_session_provider)):
    activity_service.delete_activity(session_provider, activity_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
