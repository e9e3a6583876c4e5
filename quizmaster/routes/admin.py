import logging
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from quizmaster.core.errors import NotFound
from quizmaster.core.security import require_admin
from quizmaster.db.session import get_db
from quizmaster.models.user import User
from quizmaster.schemas.admin import AdminStatsOut, UserAdminUpdate
from quizmaster.schemas.auth import UserOut
from quizmaster.schemas.theme import ThemeOut
from quizmaster.services.catalog import CatalogStore
from quizmaster.services.credentials import CredentialStore
from quizmaster.services.stats import StatisticsAggregator

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("/admin/stats", response_model=AdminStatsOut)
async def admin_stats(
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    catalog = CatalogStore(db)
    return AdminStatsOut(
        total_users=await CredentialStore(db).count_users(),
        total_themes=await catalog.count_themes(),
        active_themes=await catalog.count_themes(active_only=True),
        total_questions=await catalog.count_questions(),
        total_sessions=await StatisticsAggregator(db).count_sessions(),
    )

@router.get("/admin/themes", response_model=List[ThemeOut])
async def admin_themes(
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """All themes, inactive ones included."""
    themes = await CatalogStore(db).get_all_themes(include_inactive=True)
    return [ThemeOut.model_validate(t) for t in themes]

@router.get("/admin/users", response_model=List[UserOut])
async def admin_users(
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    users = await CredentialStore(db).list_users()
    return [UserOut.model_validate(u) for u in users]

@router.put("/admin/users/{user_id}", response_model=UserOut)
async def admin_update_user(
    user_id: int,
    data: UserAdminUpdate,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    updates = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
    user = await CredentialStore(db).update_user(user_id, updates)
    if not user:
        raise NotFound(
            "Utilisateur non trouvé",
            details=[{"field": "userId", "message": f"User with ID {user_id} does not exist"}],
        )
    await db.commit()
    logger.info(f"Admin {admin.id} updated user {user_id}: {sorted(updates)}")
    return UserOut.model_validate(user)
