from typing import List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from quizmaster.models.quiz_session import QuizSession
from quizmaster.models.user import User
from quizmaster.models.user_stats import UserStats
from quizmaster.schemas.auth import UserOut
from quizmaster.schemas.leaderboard import GlobalLeaderboardEntry, ThemeLeaderboardEntry


class LeaderboardService:
    """Rankings computed from the stored sessions and stats on every call.

    Ties keep insertion order (user id for the global board, first stats row
    for a theme board).
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def global_leaderboard(self) -> List[GlobalLeaderboardEntry]:
        total_score = func.coalesce(func.sum(QuizSession.score), 0).label("total_score")
        result = await self.db.execute(
            select(User, total_score)
            .outerjoin(QuizSession, QuizSession.user_id == User.id)
            .group_by(User.id)
            .order_by(total_score.desc(), User.id)
        )
        return [
            GlobalLeaderboardEntry(
                **UserOut.model_validate(user).model_dump(),
                rank=rank,
                total_score=score,
            )
            for rank, (user, score) in enumerate(result.all(), start=1)
        ]

    async def theme_leaderboard(self, theme_id: int) -> List[ThemeLeaderboardEntry]:
        # Only users with a stats row, i.e. at least one session on the theme
        result = await self.db.execute(
            select(User, UserStats.best_score)
            .join(UserStats, UserStats.user_id == User.id)
            .where(UserStats.theme_id == theme_id)
            .order_by(UserStats.best_score.desc(), UserStats.id)
        )
        return [
            ThemeLeaderboardEntry(
                **UserOut.model_validate(user).model_dump(),
                rank=rank,
                best_score=best_score,
            )
            for rank, (user, best_score) in enumerate(result.all(), start=1)
        ]
