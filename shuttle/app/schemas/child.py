"""Child schemas. Updates replace the parent link and activity set wholesale."""

from typing import Optional

from pydantic import computed_field, field_validator

from shuttle.app.schemas.activity import ActivityRead
from shuttle.app.schemas.base import CamelModel, require_text
from shuttle.app.schemas.parent import ParentRead


class ChildCreate(CamelModel):
    name: str
    parent_id: Optional[int] = None
    activity_ids: list[int] = []

    @field_validator("name")
    @classmethod
    def name_required(cls, value: str) -> str:
        return require_text(value, "Child name is required")


class ChildUpdate(ChildCreate):
    pass


class ChildRead(CamelModel):
    id: int
    name: str
    parent: Optional[ParentRead] = None
    activities: list[ActivityRead] = []

    @computed_field(alias="parentId")
    @property
    def parent_id(self) -> Optional[int]:
        return self.parent.id if self.parent else None
