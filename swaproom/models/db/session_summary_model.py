from sqlalchemy import JSON, Column, DateTime, Integer, String, func

from swaproom.database import Base


class SessionSummaryModel(Base):
    """SQLAlchemy model for session_summaries table."""

    __tablename__ = "session_summaries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    room_id = Column(Integer, nullable=False, index=True)
    host_name = Column(String(50), nullable=False)
    participant_count = Column(Integer, nullable=False)
    total_swaps = Column(Integer, nullable=False, default=0)
    total_messages = Column(Integer, nullable=False, default=0)
    session_duration = Column(Integer, nullable=False)  # seconds
    platforms_used = Column(JSON, default=list)
    started_at = Column(DateTime(timezone=True), default=func.now())
    ended_at = Column(DateTime(timezone=True), nullable=False)
