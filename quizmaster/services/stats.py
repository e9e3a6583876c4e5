"""Session log and per-(user, theme) statistics.

Each completed QuizSession is folded into a single UserStats row with an
online update: the new average is computed from the previous *rounded*
average, not from the raw history, so it can drift from the exact mean
over many sessions. Replaying a session counts it again.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from quizmaster.models.quiz_session import QuizSession
from quizmaster.models.user import User
from quizmaster.models.user_stats import UserStats
from quizmaster.services.credentials import CredentialStore

logger = logging.getLogger(__name__)


def round_half_up(numerator: int, denominator: int) -> int:
    """Integer division rounded half up, for non-negative operands."""
    if denominator <= 0:
        return 0
    return (2 * numerator + denominator) // (2 * denominator)


def rounded_running_mean(prior_average: int, prior_count: int, score: int) -> int:
    return round_half_up(prior_average * prior_count + score, prior_count + 1)


@dataclass
class SessionOutcome:
    stats: UserStats
    points_earned: int


class StatisticsAggregator:
    def __init__(self, db: AsyncSession, points_per_correct_answer: int = 10):
        self.db = db
        self.points_per_correct_answer = points_per_correct_answer
        self.credentials = CredentialStore(db)

    # Session log

    async def create_quiz_session(
        self, user_id: int, theme_id: int, score: int, total_questions: int, time_spent: int
    ) -> QuizSession:
        session = QuizSession(
            user_id=user_id,
            theme_id=theme_id,
            score=score,
            total_questions=total_questions,
            time_spent=time_spent,
        )
        self.db.add(session)
        await self.db.flush()
        return session

    async def get_user_quiz_sessions(self, user_id: int, theme_id: Optional[int] = None) -> List[QuizSession]:
        """All sessions of a user, newest first."""
        stmt = select(QuizSession).where(QuizSession.user_id == user_id)
        if theme_id is not None:
            stmt = stmt.where(QuizSession.theme_id == theme_id)
        result = await self.db.execute(stmt.order_by(QuizSession.id.desc()))
        return list(result.scalars().all())

    async def get_recent_sessions(self, user_id: int, limit: int = 5) -> List[QuizSession]:
        result = await self.db.execute(
            select(QuizSession)
            .where(QuizSession.user_id == user_id)
            .order_by(QuizSession.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def get_theme_quiz_sessions(self, theme_id: int) -> List[QuizSession]:
        result = await self.db.execute(
            select(QuizSession).where(QuizSession.theme_id == theme_id).order_by(QuizSession.id)
        )
        return list(result.scalars().all())

    async def count_sessions(self, user_id: Optional[int] = None) -> int:
        stmt = select(func.count(QuizSession.id))
        if user_id is not None:
            stmt = stmt.where(QuizSession.user_id == user_id)
        result = await self.db.execute(stmt)
        return result.scalar_one()

    # Aggregates

    async def get_user_stats(self, user_id: int) -> List[UserStats]:
        result = await self.db.execute(
            select(UserStats).where(UserStats.user_id == user_id).order_by(UserStats.id)
        )
        return list(result.scalars().all())

    async def get_user_stats_by_theme(self, user_id: int, theme_id: int) -> Optional[UserStats]:
        result = await self.db.execute(
            select(UserStats).where(UserStats.user_id == user_id, UserStats.theme_id == theme_id)
        )
        return result.scalar_one_or_none()

    async def update_user_stats(self, user_id: int, theme_id: int, updates: Dict[str, Any]) -> UserStats:
        """Merge updates into the (user, theme) row, creating it on first use."""
        stats = await self.get_user_stats_by_theme(user_id, theme_id)
        if stats is None:
            stats = UserStats(
                user_id=user_id,
                theme_id=theme_id,
                total_quizzes=0,
                best_score=0,
                average_score=0,
                total_time_spent=0,
            )
            self.db.add(stats)
        for key, value in updates.items():
            setattr(stats, key, value)
        await self.db.flush()
        return stats

    async def record_session(self, session: QuizSession, user: User) -> SessionOutcome:
        """Fold a new session into its aggregate row and award the user's points."""
        existing = await self.get_user_stats_by_theme(session.user_id, session.theme_id)

        if existing:
            updates = {
                "total_quizzes": existing.total_quizzes + 1,
                "average_score": rounded_running_mean(
                    existing.average_score, existing.total_quizzes, session.score
                ),
                "best_score": max(existing.best_score, session.score),
                "total_time_spent": existing.total_time_spent + session.time_spent,
            }
        else:
            updates = {
                "total_quizzes": 1,
                "best_score": session.score,
                "average_score": session.score,
                "total_time_spent": session.time_spent,
            }
        stats = await self.update_user_stats(session.user_id, session.theme_id, updates)

        points_earned = session.score * self.points_per_correct_answer
        await self.credentials.add_points(user, points_earned)

        logger.debug(
            f"Stats for user {session.user_id} theme {session.theme_id}: "
            f"{stats.total_quizzes} quizzes, best {stats.best_score}, avg {stats.average_score}"
        )
        return SessionOutcome(stats=stats, points_earned=points_earned)
