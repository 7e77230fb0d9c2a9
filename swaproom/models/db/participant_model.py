from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from swaproom.database import Base


class ParticipantModel(Base):
    """SQLAlchemy model for participants table."""

    __tablename__ = "participants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False, index=True)
    user_id = Column(Integer, nullable=True)
    guest_name = Column(String(50), nullable=False)
    is_ready = Column(Boolean, nullable=False, default=False)
    is_host = Column(Boolean, nullable=False, default=False)
    current_platform = Column(String(50), nullable=True)
    joined_at = Column(DateTime(timezone=True), default=func.now())
    last_active_at = Column(
        DateTime(timezone=True), default=func.now(), onupdate=func.now()
    )

    # Relationships
    room = relationship("RoomModel", back_populates="participants")
