from sqlalchemy import Column, Integer, ForeignKey, DateTime
from datetime import datetime, timezone
from quizmaster.db.base_class import Base

class QuizSession(Base):
    """One completed attempt. Rows are never updated after insert."""
    __tablename__ = "quiz_sessions"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    # No FK: history outlives a deleted theme
    theme_id = Column(Integer, index=True, nullable=False)
    score = Column(Integer, nullable=False)
    total_questions = Column(Integer, nullable=False)
    time_spent = Column(Integer, nullable=False)  # in seconds
    completed_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
