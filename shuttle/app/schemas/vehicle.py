"""Vehicle schemas.

Seat counts are only type-checked here; positivity is enforced by the
capacity guard so that every write path applies the same rule.
"""

from typing import Optional

from pydantic import StrictInt

from shuttle.app.schemas.base import CamelModel
from shuttle.app.schemas.parent import ParentRead


class VehicleCreate(CamelModel):
    parent_id: int
    available_seats: StrictInt


class VehicleUpdate(CamelModel):
    parent_id: Optional[int] = None
    available_seats: Optional[StrictInt] = None


class VehicleRead(CamelModel):
    id: int
    parent_id: int
    available_seats: int
    parent: Optional[ParentRead] = None


class VehicleAvailability(CamelModel):
    vehicle_id: int
    required_seats: int
    available: bool
