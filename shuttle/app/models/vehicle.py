"""Vehicle model. Owned by one parent; owned by at most one transport."""

from sqlalchemy import Column, ForeignKey, Integer

from shuttle.app.db.base_class import Base


class Vehicle(Base):
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, index=True)
    parent_id = Column(Integer, ForeignKey("parents.id"), nullable=False, index=True)
    available_seats = Column(Integer, nullable=False)
