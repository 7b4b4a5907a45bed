"""Parent schemas."""

import re

from pydantic import field_validator

from shuttle.app.schemas.activity import ActivityRead
from shuttle.app.schemas.base import CamelModel, require_text

PHONE_PATTERN = re.compile(r"^(06|07)[0-9]{8}$")


class ParentCreate(CamelModel):
    name: str
    email: str
    phone: str

    @field_validator("name")
    @classmethod
    def name_required(cls, value: str) -> str:
        return require_text(value, "Parent name is required")

    @field_validator("email")
    @classmethod
    def email_format(cls, value: str) -> str:
        value = require_text(value, "Parent email is required")
        if "@" not in value:
            raise ValueError("Invalid email format, must contain @")
        return value

    @field_validator("phone")
    @classmethod
    def phone_format(cls, value: str) -> str:
        value = require_text(value, "Parent phone is required")
        if not PHONE_PATTERN.match(value):
            raise ValueError("Invalid phone format, must start with 06 or 07 and contain 10 digits")
        return value


class ParentUpdate(ParentCreate):
    pass


class ParentRead(CamelModel):
    id: int
    name: str
    email: str
    phone: str


class ParentChildSummary(CamelModel):
    id: int
    name: str
    activities: list[ActivityRead] = []


class ParentVehicleSummary(CamelModel):
    id: int
    available_seats: int


class ParentWithChildren(ParentRead):
    children: list[ParentChildSummary] = []
    vehicles: list[ParentVehicleSummary] = []
