from quizmaster.models.user import User
from quizmaster.models.theme import Theme, Question
from quizmaster.models.quiz_session import QuizSession
from quizmaster.models.user_stats import UserStats

__all__ = ["User", "Theme", "Question", "QuizSession", "UserStats"]
