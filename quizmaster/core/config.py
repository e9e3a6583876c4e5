from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
import os
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    APP_NAME: str = os.getenv("APP_NAME", "QuizMaster API")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "quiz-master-secret-key")
    ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "quiz_session"
    SESSION_MAX_AGE_SECONDS: int = 24 * 60 * 60
    SESSION_COOKIE_SECURE: bool = False
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite://")
    SEED_DATA: bool = True
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    POINTS_PER_CORRECT_ANSWER: int = 10
    RECENT_SESSIONS_LIMIT: int = 5

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
