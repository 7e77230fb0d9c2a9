from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, func

from swaproom.database import Base


class SwapHistoryModel(Base):
    """SQLAlchemy model for swap_history table.

    Rows are append-only. Participant ids are plain integers rather than
    foreign keys: history outlives the participants it names.
    """

    __tablename__ = "swap_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    room_id = Column(Integer, nullable=False, index=True)
    from_participant_id = Column(Integer, nullable=False)
    to_participant_id = Column(Integer, nullable=False)
    from_label = Column(String(50), nullable=True)
    to_label = Column(String(50), nullable=True)
    swap_type = Column(String(10), nullable=False)
    created_at = Column(DateTime(timezone=True), default=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint(
            "swap_type IN ('manual', 'random')", name="ck_swap_history_swap_type"
        ),
    )
