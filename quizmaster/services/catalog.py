import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from quizmaster.core.errors import NotFound, ValidationError
from quizmaster.models.theme import Question, Theme
from quizmaster.schemas.theme import OPTION_COUNT

logger = logging.getLogger(__name__)

DIFFICULTIES = ("easy", "medium", "hard")


def check_question(options: List[str], correct_answer: int, difficulty: str) -> None:
    """Raise ValidationError unless the question can be answered and scored."""
    if not isinstance(options, list) or len(options) != OPTION_COUNT:
        raise ValidationError(
            f"Une question doit avoir exactement {OPTION_COUNT} réponses", field="options"
        )
    if not isinstance(correct_answer, int) or not 0 <= correct_answer < len(options):
        raise ValidationError("Index de bonne réponse invalide", field="correctAnswer")
    if difficulty not in DIFFICULTIES:
        raise ValidationError("Difficulté invalide", field="difficulty")


class CatalogStore:
    """Themes and their questions. Mutations flush; the caller commits."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # Themes

    async def get_all_themes(self, include_inactive: bool = False) -> List[Theme]:
        stmt = select(Theme).order_by(Theme.id)
        if not include_inactive:
            stmt = stmt.where(Theme.is_active.is_(True))
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_theme(self, theme_id: int) -> Optional[Theme]:
        return await self.db.get(Theme, theme_id)

    async def get_theme_by_name(self, name: str) -> Optional[Theme]:
        result = await self.db.execute(select(Theme).where(Theme.name == name))
        return result.scalar_one_or_none()

    async def create_theme(self, data: Dict[str, Any]) -> Theme:
        if await self.get_theme_by_name(data["name"]):
            raise ValidationError("Un thème avec ce nom existe déjà", field="name")
        theme = Theme(
            name=data["name"],
            description=data["description"],
            icon=data["icon"],
            color=data["color"],
            is_active=data.get("is_active", True),
        )
        self.db.add(theme)
        await self.db.flush()
        logger.info(f"Theme {theme.id} created ({theme.name})")
        return theme

    async def update_theme(self, theme_id: int, updates: Dict[str, Any]) -> Optional[Theme]:
        theme = await self.get_theme(theme_id)
        if not theme:
            return None
        new_name = updates.get("name")
        if new_name and new_name != theme.name:
            if await self.get_theme_by_name(new_name):
                raise ValidationError("Un thème avec ce nom existe déjà", field="name")
        for key, value in updates.items():
            if value is not None:
                setattr(theme, key, value)
        await self.db.flush()
        return theme

    async def delete_theme(self, theme_id: int) -> bool:
        theme = await self.get_theme(theme_id)
        if not theme:
            return False
        await self.db.execute(delete(Question).where(Question.theme_id == theme_id))
        await self.db.delete(theme)
        await self.db.flush()
        logger.info(f"Theme {theme_id} deleted with its questions")
        return True

    async def count_themes(self, active_only: bool = False) -> int:
        stmt = select(func.count(Theme.id))
        if active_only:
            stmt = stmt.where(Theme.is_active.is_(True))
        result = await self.db.execute(stmt)
        return result.scalar_one()

    # Questions

    async def get_questions_by_theme(self, theme_id: int) -> List[Question]:
        result = await self.db.execute(
            select(Question).where(Question.theme_id == theme_id).order_by(Question.id)
        )
        return list(result.scalars().all())

    async def get_question(self, question_id: int) -> Optional[Question]:
        return await self.db.get(Question, question_id)

    async def create_question(self, theme_id: int, data: Dict[str, Any]) -> Question:
        if not await self.get_theme(theme_id):
            raise NotFound("Thème non trouvé", field="themeId")
        difficulty = data.get("difficulty") or "medium"
        check_question(data["options"], data["correct_answer"], difficulty)
        question = Question(
            theme_id=theme_id,
            question=data["question"],
            options=list(data["options"]),
            correct_answer=data["correct_answer"],
            difficulty=difficulty,
            explanation=data.get("explanation"),
        )
        self.db.add(question)
        await self.db.flush()
        return question

    async def update_question(self, question_id: int, updates: Dict[str, Any]) -> Optional[Question]:
        question = await self.get_question(question_id)
        if not question:
            return None
        merged = {
            "options": question.options,
            "correct_answer": question.correct_answer,
            "difficulty": question.difficulty,
        }
        merged.update({k: v for k, v in updates.items() if k in merged and v is not None})
        check_question(merged["options"], merged["correct_answer"], merged["difficulty"])

        for key, value in updates.items():
            if key == "explanation" or value is not None:
                setattr(question, key, list(value) if key == "options" else value)
        await self.db.flush()
        return question

    async def delete_question(self, question_id: int) -> bool:
        question = await self.get_question(question_id)
        if not question:
            return False
        await self.db.delete(question)
        await self.db.flush()
        return True

    async def count_questions(self) -> int:
        result = await self.db.execute(select(func.count(Question.id)))
        return result.scalar_one()
