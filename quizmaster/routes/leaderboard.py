from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from quizmaster.db.session import get_db
from quizmaster.schemas.leaderboard import GlobalLeaderboardEntry, ThemeLeaderboardEntry
from quizmaster.services.leaderboard import LeaderboardService

router = APIRouter()

@router.get("/leaderboard/global", response_model=List[GlobalLeaderboardEntry])
async def global_leaderboard(db: AsyncSession = Depends(get_db)):
    """Every user ranked by the sum of their session scores."""
    return await LeaderboardService(db).global_leaderboard()

@router.get("/leaderboard/theme/{theme_id}", response_model=List[ThemeLeaderboardEntry])
async def theme_leaderboard(theme_id: int, db: AsyncSession = Depends(get_db)):
    """Players of one theme ranked by their best score there."""
    return await LeaderboardService(db).theme_leaderboard(theme_id)
