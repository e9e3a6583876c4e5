from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from quizmaster.db.base_class import Base

class UserStats(Base):
    __tablename__ = "user_stats"
    __table_args__ = (
        UniqueConstraint("user_id", "theme_id", name="uq_user_stats_user_theme"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    theme_id = Column(Integer, index=True, nullable=False)
    total_quizzes = Column(Integer, nullable=False, default=0)
    best_score = Column(Integer, nullable=False, default=0)
    average_score = Column(Integer, nullable=False, default=0)  # rounded running mean of raw scores
    total_time_spent = Column(Integer, nullable=False, default=0)
