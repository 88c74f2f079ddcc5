import uuid
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, func
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from planner.database import Base

class Review(Base):
    __tablename__ = "reviews"

    id = Column(UUID(as_uuid=False), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(UUID(as_uuid=False), index=True, nullable=False)
    type = Column(String, nullable=False)  # WEEKLY or MONTHLY
    period_start = Column(Date, nullable=False)
    period_end = Column(Date, nullable=False)

    # Free-text entries, one list per prompt category
    accomplishments = Column(ARRAY(Text), nullable=True)
    challenges = Column(ARRAY(Text), nullable=True)
    lessons_learned = Column(ARRAY(Text), nullable=True)
    next_period_focus = Column(ARRAY(Text), nullable=True)

    satisfaction_score = Column(Integer, nullable=True)  # 1–10
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
