from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Integer,
    String,
    func,
)
from sqlalchemy.orm import relationship

from swaproom.database import Base


class RoomModel(Base):
    """SQLAlchemy model for rooms table."""

    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(6), nullable=False, unique=True)
    name = Column(String(100), nullable=False)
    # Participant id of the creator; 0 until the host row is flushed
    host_id = Column(Integer, nullable=False, default=0)
    max_participants = Column(Integer, nullable=False, default=8)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), default=func.now())
    updated_at = Column(
        DateTime(timezone=True), default=func.now(), onupdate=func.now()
    )

    # Relationships
    participants = relationship("ParticipantModel", back_populates="room")

    __table_args__ = (
        CheckConstraint(
            "max_participants BETWEEN 2 AND 8", name="ck_rooms_max_participants"
        ),
    )
