"""Transport endpoints."""

from fastapi import APIRouter, Depends, Response, status

from shuttle.app.db.session import SessionProvider, get_session_provider
from shuttle.app.schemas.transport import TransportCreate, TransportRead, TransportUpdate
from shuttle.app.services import transport_service

router = APIRouter(prefix="/api/transports", tags=["transports"])


@router.get("", response_model=list[TransportRead])
def list_transports(session_provider: SessionProvider = Depends(get_session_provider)):
    return transport_service.list_transports(session_provider)


@router.get("/activity/{activity_id}", response_model=list[TransportRead])
def list_transports_by_activity(activity_id: int, session_provider: SessionProvider = Depends(get_session_provider)):
    return transport_service.list_transports_by_activity(session_provider, activity_id)


@router.get("/parent/{parent_id}", response_model=list[TransportRead])
def list_transports_by_parent(parent_id: int, session_provider: SessionProvider = Depends(get_session_provider)):
    return transport_service.list_transports_by_parent(session_provider, parent_id)


@router.get("/vehicle/{vehicle_id}", response_model=list[TransportRead])
def list_transports_by_vehicle(vehicle_id: int, session_provider: SessionProvider = Depends(get_session_provider)):
    return transport_service.list_transports_by_vehicle(session_provider, vehicle_id)


@router.get("/{transport_id}", response_model=TransportRead)
def get_transport(transport_id: int, session_provider: SessionProvider = Depends(get_session_provider)):
    return transport_service.get_transport(session_provider, transport_id)


@router.post("", response_model=TransportRead, status_code=status.HTTP_201_CREATED)
def create_transport(transport_in: TransportCreate, session_provider: SessionProvider = Depends(get_session_provider)):
    return transport_service.create_transport(session_provider, transport_in)


@router.put("/{transport_id}", response_model=TransportRead)
def update_transport(
    transport_id: int,
    transport_in: TransportUpdate,
    session_provider: SessionProvider = Depends(get_session_provider),
):
    return transport_service.update_transport(session_provider, transport_id, transport_in)


@router.delete("/{transport_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_transport(transport_id: int, session_provider: SessionProvider = Depends(get_session_provider)):
    transport_service.delete_transport(session_provider, transport_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
