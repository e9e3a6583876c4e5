from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from quizmaster.core.config import Settings
from quizmaster.core.security import get_current_user, get_settings
from quizmaster.db.session import get_db
from quizmaster.models.user import User
from quizmaster.schemas.quiz import QuizResultOut, QuizSubmission
from quizmaster.services.attempt import AttemptEngine

router = APIRouter()

@router.post("/quiz/submit", response_model=QuizResultOut)
async def submit_quiz(
    submission: QuizSubmission,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Score a finished quiz and reveal the correct answers."""
    engine = AttemptEngine(db, settings.POINTS_PER_CORRECT_ANSWER)
    return await engine.submit_attempt(submission, current_user)
