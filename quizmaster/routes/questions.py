import logging
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from quizmaster.core.errors import NotFound
from quizmaster.core.security import require_admin
from quizmaster.db.session import get_db
from quizmaster.models.user import User
from quizmaster.schemas.auth import Message
from quizmaster.schemas.theme import QuestionOut, QuestionUpdate
from quizmaster.services.catalog import CatalogStore

router = APIRouter()
logger = logging.getLogger(__name__)

def question_not_found(question_id: int) -> NotFound:
    return NotFound(
        "Question non trouvée",
        details=[{"field": "questionId", "message": f"Question with ID {question_id} does not exist"}],
    )

@router.put("/questions/{question_id}", response_model=QuestionOut)
async def update_question(
    question_id: int,
    data: QuestionUpdate,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    question = await CatalogStore(db).update_question(question_id, data.model_dump(exclude_unset=True))
    if not question:
        raise question_not_found(question_id)
    await db.commit()
    logger.info(f"Admin {admin.id} updated question {question_id}")
    return QuestionOut.model_validate(question)

@router.delete("/questions/{question_id}", response_model=Message)
async def delete_question(
    question_id: int,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    if not await CatalogStore(db).delete_question(question_id):
        raise question_not_found(question_id)
    await db.commit()
    logger.info(f"Admin {admin.id} deleted question {question_id}")
    return Message(message="Question supprimée avec succès")
