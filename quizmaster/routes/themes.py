import logging
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from quizmaster.core.errors import NotFound
from quizmaster.core.security import get_current_user, get_optional_user, require_admin
from quizmaster.db.session import get_db
from quizmaster.models.user import User
from quizmaster.schemas.auth import Message
from quizmaster.schemas.theme import QuestionCreate, QuestionOut, ThemeCreate, ThemeOut, ThemeUpdate
from quizmaster.services.attempt import AttemptEngine
from quizmaster.services.catalog import CatalogStore

router = APIRouter()
logger = logging.getLogger(__name__)

def theme_not_found(theme_id: int) -> NotFound:
    return NotFound(
        "Thème non trouvé",
        details=[{"field": "themeId", "message": f"Theme with ID {theme_id} does not exist"}],
    )

@router.get("/themes", response_model=List[ThemeOut])
async def list_themes(db: AsyncSession = Depends(get_db)):
    """Active themes only."""
    themes = await CatalogStore(db).get_all_themes()
    return [ThemeOut.model_validate(t) for t in themes]

@router.get("/themes/{theme_id}", response_model=ThemeOut)
async def get_theme(
    theme_id: int,
    current_user: Optional[User] = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db),
):
    theme = await CatalogStore(db).get_theme(theme_id)
    if not theme or (not theme.is_active and not (current_user and current_user.is_admin)):
        raise theme_not_found(theme_id)
    return ThemeOut.model_validate(theme)

@router.post("/themes", response_model=ThemeOut)
async def create_theme(
    data: ThemeCreate,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    theme = await CatalogStore(db).create_theme(data.model_dump())
    await db.commit()
    return ThemeOut.model_validate(theme)

@router.put("/themes/{theme_id}", response_model=ThemeOut)
async def update_theme(
    theme_id: int,
    data: ThemeUpdate,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    theme = await CatalogStore(db).update_theme(theme_id, data.model_dump(exclude_unset=True))
    if not theme:
        raise theme_not_found(theme_id)
    await db.commit()
    logger.info(f"Admin {admin.id} updated theme {theme_id}")
    return ThemeOut.model_validate(theme)

@router.delete("/themes/{theme_id}", response_model=Message)
async def delete_theme(
    theme_id: int,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    if not await CatalogStore(db).delete_theme(theme_id):
        raise theme_not_found(theme_id)
    await db.commit()
    logger.info(f"Admin {admin.id} deleted theme {theme_id}")
    return Message(message="Thème supprimé avec succès")

@router.get("/themes/{theme_id}/questions")
async def get_theme_questions(
    theme_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Questions in play order; answers and explanations are hidden from players."""
    questions = await AttemptEngine(db).start_attempt(theme_id, current_user)
    return [q.model_dump(mode="json", by_alias=True) for q in questions]

@router.post("/themes/{theme_id}/questions", response_model=QuestionOut)
async def create_question(
    theme_id: int,
    data: QuestionCreate,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    question = await CatalogStore(db).create_question(theme_id, data.model_dump())
    await db.commit()
    logger.info(f"Admin {admin.id} added question {question.id} to theme {theme_id}")
    return QuestionOut.model_validate(question)
