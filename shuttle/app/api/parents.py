"""Parent endpoints."""

from fastapi import APIRouter, Depends, Response, status

from shuttle.app.db.session import SessionProvider, get_session_provider
from shuttle.app.schemas.parent import ParentCreate, ParentRead, ParentUpdate, ParentWithChildren
from shuttle.app.services import parent_service

router = APIRouter(prefix="/api/parents", tags=["parents"])


@router.get("", response_model=list[ParentRead])
def list_parents(session_provider: SessionProvider = Depends(get_session_provider)):
    return parent_service.list_parents(session_provider)


@router.get("/children/{parent_id}", response_model=ParentWithChildren)
@router.get("/{parent_id}/children", response_model=ParentWithChildren)
def get_parent_with_children(parent_id: int, session_provider: SessionProvider = Depends(get_session_provider)):
    return parent_service.get_parent_with_children(session_provider, parent_id)


@router.get("/{parent_id}", response_model=ParentRead)
def get_parent(parent_id: int, session_provider: SessionProvider = Depends(get_session_provider)):
    return parent_service.get_parent(session_provider, parent_id)


@router.post("", response_model=ParentRead, status_code=status.HTTP_201_CREATED)
def create_parent(parent_in: ParentCreate, session_provider: SessionProvider = Depends(get_session_provider)):
    return parent_service.create_parent(session_provider, parent_in)


@router.put("/{parent_id}", response_model=ParentRead)
def update_parent(
    parent_id: int,
    parent_in: ParentUpdate,
    session_provider: SessionProvider = Depends(get_session_provider),
):
    return parent_service.update_parent(session_provider, parent_id, parent_in)


@router.delete("/{parent_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_parent(parent_id: int, session_provider: SessionProvider = Depends(get_session_provider)):
    parent_service.delete_parent(session_provider, parent_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
