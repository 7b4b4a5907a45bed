"""Transport model: one shuttle run to or from an activity."""

import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String

from shuttle.app.db.base_class import Base


class TransportType(str, enum.Enum):
    OUTWARD = "OUTWARD"
    RETURN = "RETURN"


class Transport(Base):
    __tablename__ = "transports"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(Enum(TransportType, name="transport_type"), nullable=False)
    date_start = Column(DateTime, nullable=False)
    date_end = Column(DateTime, nullable=False)
    pickup_location = Column(String(255), nullable=False)
    activity_id = Column(Integer, ForeignKey("activities.id"), nullable=False, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), nullable=False, unique=True)
