"""Child model. Parent and activity links live in the association tables."""

from sqlalchemy import Column, Integer, String

from shuttle.app.db.base_class import Base


class Child(Base):
    __tablename__ = "children"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
