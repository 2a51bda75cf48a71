from sqlalchemy import Column, DateTime, Integer, String, Text

from .database import Base

class CollisionEventDB(Base):
    __tablename__ = "collision_events"

    seq = Column(Integer, primary_key=True, autoincrement=True)  # Insertion order
    event_id = Column(String, unique=True, index=True, nullable=False)
    timestamp = Column(DateTime, nullable=True, index=True)
    severity = Column(String, nullable=True)
    payload = Column(Text, nullable=False)  # Full event as camelCase JSON
