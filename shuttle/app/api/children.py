"""Child endpoints, including the parent and activity relationship sub-routes."""

from fastapi import APIRouter, Depends, Response, status

from shuttle.app.db.session import SessionProvider, get_session_provider
from shuttle.app.schemas.child import ChildCreate, ChildRead, ChildUpdate
from shuttle.app.services import child_service

router = APIRouter(prefix="/api/children", tags=["children"])


@router.get("", response_model=list[ChildRead])
def list_children(session_provider: SessionProvider = Depends(get_session_provider)):
    return child_service.list_children(session_provider)


@router.get("/parent/{parent_id}", response_model=list[ChildRead])
def list_children_by_parent(parent_id: int, session_provider: SessionProvider = Depends(get_session_provider)):
    return child_service.list_children_by_parent(session_provider, parent_id)


@router.get("/activity/{activity_id}", response_model=list[ChildRead])
def list_children_by_activity(activity_id: int, session_provider: SessionProvider = Depends(get_session_provider)):
    return child_service.list_children_by_activity(session_provider, activity_id)


@router.get("/{child_id}", response_model=ChildRead)
def get_child(child_id: int, session_provider: SessionProvider = Depends(get_session_provider)):
    return child_service.get_child(session_provider, child_id)


@router.post("", response_model=ChildRead, status_code=status.HTTP_201_CREATED)
def create_child(child_in: ChildCreate, session_provider: SessionProvider = Depends(get_session_provider)):
    return child_service.create_child(session_provider, child_in)


@router.put("/{child_id}", response_model=ChildRead)
def update_child(
    child_id: int,
    child_in: ChildUpdate,
    session_provider: SessionProvider = Depends(get_session_provider),
):
    return child_service.update_child(session_provider, child_id, child_in)


@router.delete("/{child_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_child(child_id: int, session_provider: SessionProvider = Depends(get_session_provider)):
    child_service.delete_child(session_provider, child_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{child_id}/activities/{activity_id}", response_model=ChildRead)
def add_activity_to_child(
    child_id: int,
    activity_id: int,
    session_provider: SessionProvider = Depends(get_session_provider),
):
    return child_service.add_activity_to_child(session_provider, child_id, activity_id)


@router.delete("/{child_id}/activities/{activity_id}", response_model=ChildRead)
def remove_activity_from_child(
    child_id: int,
    activity_id: int,
    session_provider: SessionProvider = Depends(get_session_provider),
):
    return child_service.remove_activity_from_child(session_provider, child_id, activity_id)


@router.post("/{child_id}/parent/{parent_id}", response_model=ChildRead)
def set_parent_for_child(
    child_id: int,
    parent_id: int,
    session_provider: SessionProvider = Depends(get_session_provider),
):
    return child_service.set_parent_for_child(session_provider, child_id, parent_id)


@router.delete("/{child_id}/parent", response_model=ChildRead)
def remove_parent_from_child(child_id: int, session_provider: SessionProvider = Depends(get_session_provider)):
    return child_service.remove_parent_from_child(session_provider, child_id)


@router.delete("/{child_id}/parent/{parent_id}", response_model=ChildRead)
def remove_child_from_parent(
    child_id: int,
    parent_id: int,
    session_provider: SessionProvider = Depends(get_session_provider),
):
    return child_service.remove_child_from_parent(session_provider, child_id, parent_id)
