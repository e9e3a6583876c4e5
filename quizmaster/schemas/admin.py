from pydantic import Field
from typing import List, Literal, Optional
from quizmaster.schemas.base import CamelModel

class AdminStatsOut(CamelModel):
    total_users: int
    total_themes: int
    active_themes: int
    total_questions: int
    total_sessions: int

class UserAdminUpdate(CamelModel):
    role: Optional[Literal["user", "admin"]] = None
    points: Optional[int] = Field(default=None, ge=0)
    streak: Optional[int] = Field(default=None, ge=0)
    badges: Optional[List[str]] = None
