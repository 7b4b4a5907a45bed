"""Vehicle endpoints."""

from fastapi import APIRouter, Depends, Query, Response, status

from shuttle.app.db.session import SessionProvider, get_session_provider
from shuttle.app.schemas.vehicle import VehicleAvailability, VehicleCreate, VehicleRead, VehicleUpdate
from shuttle.app.services import vehicle_service

router = APIRouter(prefix="/api/vehicles", tags=["vehicles"])


@router.get("", response_model=list[VehicleRead])
def list_vehicles(session_provider: SessionProvider = Depends(get_session_provider)):
    return vehicle_service.list_vehicles(session_provider)


@router.get("/available", response_model=list[VehicleRead])
def list_vehicles_with_seats(
    seats: int = Query(default=1),
    session_provider: SessionProvider = Depends(get_session_provider),
):
    return vehicle_service.list_vehicles_with_seats(session_provider, seats)


@router.get("/parent/{parent_id}", response_model=list[VehicleRead])
def list_vehicles_by_parent(parent_id: int, session_provider: SessionProvider = Depends(get_session_provider)):
    return vehicle_service.list_vehicles_by_parent(session_provider, parent_id)


@router.get("/transport/{transport_id}", response_model=list[VehicleRead])
def list_vehicles_by_transport(transport_id: int, session_provider: SessionProvider = Depends(get_session_provider)):
    return vehicle_service.list_vehicles_by_transport(session_provider, transport_id)


@router.get("/{vehicle_id}/availability", response_model=VehicleAvailability)
def check_vehicle_availability(
    vehicle_id: int,
    seats: int = Query(default=1),
    session_provider: SessionProvider = Depends(get_session_provider),
):
    available = vehicle_service.check_vehicle_availability(session_provider, vehicle_id, seats)
    return VehicleAvailability(vehicle_id=vehicle_id, required_seats=seats, available=available)


@router.get("/{vehicle_id}", response_model=VehicleRead)
def get_vehicle(vehicle_id: int, session_provider: SessionProvider = Depends(get_session_provider)):
    return vehicle_service.get_vehicle(session_provider, vehicle_id)


@router.post("", response_model=VehicleRead, status_code=status.HTTP_201_CREATED)
def create_vehicle(vehicle_in: VehicleCreate, session_provider: SessionProvider = Depends(get_session_provider)):
    return vehicle_service.create_vehicle(session_provider, vehicle_in)


@router.put("/{vehicle_id}", response_model=VehicleRead)
def update_vehicle(
    vehicle_id: int,
    vehicle_in: VehicleUpdate,
    session_provider: SessionProvider = Depends(get_session_provider),
):
    return vehicle_service.update_vehicle(session_provider, vehicle_id, vehicle_in)


@router.delete("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_vehicle(vehicle_id: int, session_provider: SessionProvider = Depends(get_session_provider)):
    vehicle_service.delete_vehicle(session_provider, vehicle_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
