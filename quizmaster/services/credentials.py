import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from quizmaster.core.errors import ValidationError
from quizmaster.core.security import hash_password_async, verify_password_async
from quizmaster.models.user import User

logger = logging.getLogger(__name__)

# Fields an administrator may change on an existing account
UPDATABLE_USER_FIELDS = {"first_name", "last_name", "role", "points", "streak", "badges"}


class CredentialStore:
    """User records and password checks. Mutations flush; the caller commits."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user(self, user_id: int) -> Optional[User]:
        return await self.db.get(User, user_id)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_user_by_username(self, username: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def list_users(self) -> List[User]:
        result = await self.db.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    async def count_users(self) -> int:
        result = await self.db.execute(select(func.count(User.id)))
        return result.scalar_one()

    async def create_user(
        self,
        username: str,
        email: str,
        first_name: str,
        last_name: str,
        password: Optional[str] = None,
        role: str = "user",
        points: int = 0,
        streak: int = 0,
        badges: Optional[List[str]] = None,
        hashed_password: Optional[str] = None,
    ) -> User:
        """Add an account. Pass either the plain password or a hash made beforehand."""
        if password is None and hashed_password is None:
            raise ValidationError("Mot de passe requis", field="password")
        if await self.get_user_by_email(email):
            raise ValidationError("Un utilisateur avec cet email existe déjà", field="email")
        if await self.get_user_by_username(username):
            raise ValidationError("Ce nom d'utilisateur est déjà pris", field="username")
        if hashed_password is None:
            hashed_password = await hash_password_async(password)

        user = User(
            username=username,
            email=email,
            hashed_password=hashed_password,
            first_name=first_name,
            last_name=last_name,
            role=role,
            points=points,
            streak=streak,
            badges=list(badges or []),
        )
        self.db.add(user)
        await self.db.flush()
        logger.info(f"User {user.id} created ({user.email}, role={user.role})")
        return user

    async def update_user(self, user_id: int, updates: Dict[str, Any]) -> Optional[User]:
        user = await self.get_user(user_id)
        if not user:
            return None

        unknown = set(updates) - UPDATABLE_USER_FIELDS
        if unknown:
            raise ValidationError(
                "Champs non modifiables",
                details=[{"field": name, "message": "Champ non modifiable"} for name in sorted(unknown)],
            )
        if updates.get("points") is not None and updates["points"] < 0:
            raise ValidationError("Les points ne peuvent pas être négatifs", field="points")

        for key, value in updates.items():
            if key == "badges":
                value = list(value)
            setattr(user, key, value)
        await self.db.flush()
        return user

    async def add_points(self, user: User, points: int) -> User:
        if points < 0:
            raise ValidationError("Les points ne peuvent pas être négatifs", field="points")
        user.points = (user.points or 0) + points
        await self.db.flush()
        return user

    async def validate_password(self, email: str, password: str) -> Optional[User]:
        user = await self.get_user_by_email(email)
        if not user:
            return None
        if not await verify_password_async(password, user.hashed_password):
            return None
        return user
