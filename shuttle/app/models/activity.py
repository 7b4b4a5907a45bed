"""Activity model: a place children are driven to."""

from sqlalchemy import Column, Integer, String

from shuttle.app.db.base_class import Base


class Activity(Base):
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
