import logging
from fastapi import APIRouter, Depends, Response
from quizmaster.core.config import Settings
from quizmaster.core.errors import Unauthenticated
from quizmaster.core.security import (
    clear_session_cookie,
    get_current_user,
    get_settings,
    hash_password_async,
    set_session_cookie,
    verify_password_async,
)
from quizmaster.db.session import Database, get_database, locked_session
from quizmaster.models.user import User
from quizmaster.schemas.auth import LoginRequest, Message, RegisterRequest, UserEnvelope, UserOut
from quizmaster.services.credentials import CredentialStore

router = APIRouter()
logger = logging.getLogger(__name__)

# Password hashing runs outside the store lock.

@router.post("/auth/register", response_model=UserEnvelope)
async def register(
    data: RegisterRequest,
    response: Response,
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_settings),
):
    """Create a player account and open a session for it."""
    hashed_password = await hash_password_async(data.password)
    async with locked_session(database) as db:
        user = await CredentialStore(db).create_user(
            username=data.username,
            email=data.email,
            hashed_password=hashed_password,
            first_name=data.first_name,
            last_name=data.last_name,
        )
        await db.commit()

    set_session_cookie(response, user.id, settings)
    return UserEnvelope(user=UserOut.model_validate(user))

@router.post("/auth/login", response_model=UserEnvelope)
async def login(
    data: LoginRequest,
    response: Response,
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_settings),
):
    async with locked_session(database) as db:
        user = await CredentialStore(db).get_user_by_email(data.email)
    if not user or not await verify_password_async(data.password, user.hashed_password):
        logger.info(f"Failed login for {data.email}")
        raise Unauthenticated("Email ou mot de passe incorrect")

    set_session_cookie(response, user.id, settings)
    return UserEnvelope(user=UserOut.model_validate(user))

@router.post("/auth/logout", response_model=Message)
async def logout(response: Response, settings: Settings = Depends(get_settings)):
    clear_session_cookie(response, settings)
    return Message(message="Déconnexion réussie")

@router.get("/auth/me", response_model=UserEnvelope)
async def me(current_user: User = Depends(get_current_user)):
    return UserEnvelope(user=UserOut.model_validate(current_user))
