import logging
from typing import Dict, List, Optional, Tuple, Union

from sqlalchemy.ext.asyncio import AsyncSession

from quizmaster.core.errors import NotFound
from quizmaster.models.theme import Question, Theme
from quizmaster.models.user import User
from quizmaster.schemas.quiz import QuestionResult, QuizResultOut, QuizSessionOut, QuizSubmission
from quizmaster.schemas.theme import QuestionOut, QuestionPublic
from quizmaster.services.catalog import CatalogStore
from quizmaster.services.stats import StatisticsAggregator

logger = logging.getLogger(__name__)


def score_answers(
    questions: List[Question], answers: Dict[int, Optional[int]]
) -> Tuple[int, List[QuestionResult]]:
    """Count exact matches; a missing, null or out-of-range answer is just wrong."""
    score = 0
    results = []
    for question in questions:
        correct = answers.get(question.id) == question.correct_answer
        if correct:
            score += 1
        results.append(
            QuestionResult(
                question_id=question.id,
                correct=correct,
                correct_answer=question.correct_answer,
            )
        )
    return score, results


class AttemptEngine:
    def __init__(self, db: AsyncSession, points_per_correct_answer: int = 10):
        self.db = db
        self.catalog = CatalogStore(db)
        self.aggregator = StatisticsAggregator(db, points_per_correct_answer)

    async def _playable_theme(self, theme_id: int, user: User) -> Theme:
        theme = await self.catalog.get_theme(theme_id)
        if not theme or (not theme.is_active and not user.is_admin):
            raise NotFound(
                "Thème non trouvé",
                details=[{"field": "themeId", "message": f"Theme with ID {theme_id} does not exist"}],
            )
        return theme

    async def start_attempt(self, theme_id: int, user: User) -> List[Union[QuestionOut, QuestionPublic]]:
        """Questions of a theme in play order. Players never see answers here."""
        await self._playable_theme(theme_id, user)
        questions = await self.catalog.get_questions_by_theme(theme_id)
        schema = QuestionOut if user.is_admin else QuestionPublic
        return [schema.model_validate(q) for q in questions]

    async def submit_attempt(self, submission: QuizSubmission, user: User) -> QuizResultOut:
        """Score a submission, log the session, update stats and points, then commit.

        timeSpent is taken as reported by the client.
        """
        await self._playable_theme(submission.theme_id, user)
        questions = await self.catalog.get_questions_by_theme(submission.theme_id)
        score, results = score_answers(questions, submission.answers)

        try:
            session = await self.aggregator.create_quiz_session(
                user_id=user.id,
                theme_id=submission.theme_id,
                score=score,
                total_questions=len(questions),
                time_spent=submission.time_spent,
            )
            outcome = await self.aggregator.record_session(session, user)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(
            f"User {user.id} completed theme {submission.theme_id}: "
            f"{score}/{len(questions)} in {submission.time_spent}s (+{outcome.points_earned} points)"
        )
        return QuizResultOut(
            session=QuizSessionOut.model_validate(session),
            score=score,
            total_questions=len(questions),
            points_earned=outcome.points_earned,
            results=results,
        )
