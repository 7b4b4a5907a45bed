"""In-memory entity graph built by the hydrator.

These objects carry identity and associations only. Each one knows how to
build itself from the columns of a joined row that share a label prefix
(``a_id``, ``a_name`` ... for an activity), so one flat row can feed several
entities at once.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from shuttle.app.models.transport import TransportType


@dataclass
class Activity:
    id: int
    name: str
    address: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any], prefix: str = "a_") -> "Activity":
        return cls(id=row[f"{prefix}id"], name=row[f"{prefix}name"], address=row[f"{prefix}address"])


@dataclass
class Parent:
    id: int
    name: str
    email: str
    phone: str
    children: list["Child"] = field(default_factory=list)
    vehicles: list["Vehicle"] = field(default_factory=list)

    def add_child(self, child: "Child") -> None:
        self.children.append(child)

    def add_vehicle(self, vehicle: "Vehicle") -> None:
        self.vehicles.append(vehicle)

    @classmethod
    def from_row(cls, row: Mapping[str, Any], prefix: str = "p_") -> "Parent":
        return cls(
            id=row[f"{prefix}id"],
            name=row[f"{prefix}name"],
            email=row[f"{prefix}email"],
            phone=row[f"{prefix}phone"],
        )


@dataclass
class Child:
    id: int
    name: str
    parent: Optional[Parent] = None
    activities: list[Activity] = field(default_factory=list)

    def set_parent(self, parent: Optional[Parent]) -> None:
        self.parent = parent

    def add_activity(self, activity: Activity) -> None:
        self.activities.append(activity)

    @classmethod
    def from_row(cls, row: Mapping[str, Any], prefix: str = "c_") -> "Child":
        return cls(id=row[f"{prefix}id"], name=row[f"{prefix}name"])


@dataclass
class Vehicle:
    id: int
    parent_id: int
    available_seats: int
    parent: Optional[Parent] = None

    def set_parent(self, parent: Optional[Parent]) -> None:
        self.parent = parent

    @classmethod
    def from_row(cls, row: Mapping[str, Any], prefix: str = "v_") -> "Vehicle":
        return cls(
            id=row[f"{prefix}id"],
            parent_id=row[f"{prefix}parent_id"],
            available_seats=row[f"{prefix}available_seats"],
        )


@dataclass
class Transport:
    """A shuttle run. Exclusively owns its vehicle: deleting the run deletes the vehicle."""

    id: int
    type: TransportType
    date_start: datetime
    date_end: datetime
    pickup_location: str
    activity_id: int
    vehicle_id: int
    activity: Optional[Activity] = None
    vehicle: Optional[Vehicle] = None

    def set_activity(self, activity: Optional[Activity]) -> None:
        self.activity = activity

    def set_vehicle(self, vehicle: Optional[Vehicle]) -> None:
        self.vehicle = vehicle

    @classmethod
    def from_row(cls, row: Mapping[str, Any], prefix: str = "t_") -> "Transport":
        return cls(
            id=row[f"{prefix}id"],
            type=row[f"{prefix}type"],
            date_start=row[f"{prefix}date_start"],
            date_end=row[f"{prefix}date_end"],
            pickup_location=row[f"{prefix}pickup_location"],
            activity_id=row[f"{prefix}activity_id"],
            vehicle_id=row[f"{prefix}vehicle_id"],
        )
