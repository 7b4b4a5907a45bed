"""Pure association tables keyed on both foreign ids."""

from sqlalchemy import Column, ForeignKey, Integer

from shuttle.app.db.base_class import Base


class ParentChild(Base):
    __tablename__ = "parent_child"

    parent_id = Column(Integer, ForeignKey("parents.id"), primary_key=True)
    child_id = Column(Integer, ForeignKey("children.id"), primary_key=True, index=True)


class ChildActivity(Base):
    __tablename__ = "child_activity"

    child_id = Column(Integer, ForeignKey("children.id"), primary_key=True)
    activity_id = Column(Integer, ForeignKey("activities.id"), primary_key=True, index=True)
