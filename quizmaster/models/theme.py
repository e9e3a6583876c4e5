from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, JSON, Text
from quizmaster.db.base_class import Base

class Theme(Base):
    __tablename__ = "themes"
    # Ids are never reused; sessions and stats outlive a deleted theme
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, index=True, nullable=False)
    description = Column(String(500), nullable=False)
    icon = Column(String(100), nullable=False)
    color = Column(String(30), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

class Question(Base):
    __tablename__ = "questions"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    theme_id = Column(Integer, ForeignKey("themes.id"), index=True, nullable=False)
    question = Column(Text, nullable=False)
    options = Column(JSON, nullable=False)  # Store as JSON array of 4 strings
    correct_answer = Column(Integer, nullable=False)
    difficulty = Column(String(10), nullable=False, default="medium")
    explanation = Column(Text, nullable=True)
