from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from quizmaster.core.config import Settings
from quizmaster.core.security import get_current_user, get_settings
from quizmaster.db.session import get_db
from quizmaster.models.user import User
from quizmaster.schemas.quiz import QuizSessionOut
from quizmaster.schemas.stats import MyStatsOut, ThemeStatsOut, UserStatsOut
from quizmaster.services.stats import StatisticsAggregator

router = APIRouter()

@router.get("/users/me/stats", response_model=MyStatsOut)
async def my_stats(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    aggregator = StatisticsAggregator(db)
    stats = await aggregator.get_user_stats(current_user.id)
    recent = await aggregator.get_recent_sessions(current_user.id, settings.RECENT_SESSIONS_LIMIT)
    return MyStatsOut(
        stats=[UserStatsOut.model_validate(s) for s in stats],
        total_quizzes=await aggregator.count_sessions(current_user.id),
        recent_sessions=[QuizSessionOut.model_validate(s) for s in recent],
    )

@router.get("/users/me/stats/{theme_id}", response_model=ThemeStatsOut)
async def my_theme_stats(
    theme_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    aggregator = StatisticsAggregator(db)
    stats = await aggregator.get_user_stats_by_theme(current_user.id, theme_id)
    sessions = await aggregator.get_user_quiz_sessions(current_user.id, theme_id=theme_id)
    return ThemeStatsOut(
        stats=UserStatsOut.model_validate(stats) if stats else None,
        sessions=[QuizSessionOut.model_validate(s) for s in sessions],
    )
