"""Transport schemas."""

from datetime import datetime
from typing import Optional

from pydantic import StrictInt, field_validator

from shuttle.app.core.time import to_naive_utc
from shuttle.app.models.transport import TransportType
from shuttle.app.schemas.activity import ActivityRead
from shuttle.app.schemas.base import CamelModel, require_text
from shuttle.app.schemas.vehicle import VehicleRead


class TransportVehicleCreate(CamelModel):
    parent_id: int
    available_seats: StrictInt


class TransportVehicleUpdate(CamelModel):
    available_seats: StrictInt


class TransportCreate(CamelModel):
    type: TransportType
    date_start: datetime
    date_end: datetime
    pickup_location: str
    activity_id: int
    vehicle: TransportVehicleCreate

    @field_validator("date_start", "date_end")
    @classmethod
    def normalize_dates(cls, value: datetime) -> datetime:
        return to_naive_utc(value)

    @field_validator("pickup_location")
    @classmethod
    def pickup_required(cls, value: str) -> str:
        return require_text(value, "Pickup location is required")


class TransportUpdate(CamelModel):
    type: Optional[TransportType] = None
    date_start: Optional[datetime] = None
    date_end: Optional[datetime] = None
    pickup_location: Optional[str] = None
    activity_id: Optional[int] = None
    vehicle: Optional[TransportVehicleUpdate] = None

    @field_validator("date_start", "date_end")
    @classmethod
    def normalize_dates(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value) if value is not None else None

    @field_validator("pickup_location")
    @classmethod
    def pickup_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return require_text(value, "Pickup location is required")


class TransportRead(CamelModel):
    id: int
    type: TransportType
    date_start: datetime
    date_end: datetime
    pickup_location: str
    activity_id: int
    vehicle_id: int
    activity: Optional[ActivityRead] = None
    vehicle: Optional[VehicleRead] = None
