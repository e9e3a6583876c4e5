from typing import List, Optional
from quizmaster.schemas.base import CamelModel
from quizmaster.schemas.quiz import QuizSessionOut

class UserStatsOut(CamelModel):
    id: int
    user_id: int
    theme_id: int
    total_quizzes: int
    best_score: int
    average_score: int
    total_time_spent: int

class MyStatsOut(CamelModel):
    stats: List[UserStatsOut]
    total_quizzes: int
    recent_sessions: List[QuizSessionOut]

class ThemeStatsOut(CamelModel):
    stats: Optional[UserStatsOut] = None
    sessions: List[QuizSessionOut]
