"""Activity schemas."""

from pydantic import field_validator

from shuttle.app.schemas.base import CamelModel, require_text


class ActivityCreate(CamelModel):
    name: str
    address: str

    @field_validator("name")
    @classmethod
    def name_required(cls, value: str) -> str:
        return require_text(value, "Activity name is required")

    @field_validator("address")
    @classmethod
    def address_required(cls, value: str) -> str:
        return require_text(value, "Activity address is required")


class ActivityUpdate(ActivityCreate):
    pass


class ActivityRead(CamelModel):
    id: int
    name: str
    address: str
