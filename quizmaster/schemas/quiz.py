from pydantic import Field, StrictInt
from typing import Dict, List, Optional
from datetime import datetime
from quizmaster.schemas.base import CamelModel

class QuizSubmission(CamelModel):
    theme_id: int = Field(gt=0)
    # questionId -> selected option index; unanswered questions may be omitted.
    # Keys arrive as JSON strings and are coerced, values must be real integers.
    answers: Dict[int, Optional[StrictInt]]
    time_spent: int = Field(ge=0, strict=True)

class QuizSessionOut(CamelModel):
    id: int
    user_id: int
    theme_id: int
    score: int
    total_questions: int
    time_spent: int
    completed_at: datetime

class QuestionResult(CamelModel):
    question_id: int
    correct: bool
    correct_answer: int

class QuizResultOut(CamelModel):
    session: QuizSessionOut
    score: int
    total_questions: int
    points_earned: int
    results: List[QuestionResult]
