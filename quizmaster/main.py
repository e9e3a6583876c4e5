import logging
import time
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from quizmaster.core.config import Settings, settings as default_settings
from quizmaster.core.errors import register_exception_handlers
from quizmaster.core.logger import setup_logging
from quizmaster.db.session import Database
from quizmaster.routes import admin, auth, leaderboard, questions, quiz, themes, users
from quizmaster.seed import seed_database

logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)
    database = Database(settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await database.create_all()
        if settings.SEED_DATA:
            async with database.sessionmaker() as db:
                await seed_database(db)
        logger.info(f"{settings.APP_NAME} ready")
        yield
        await database.dispose()

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database

    # CORS middleware configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_api_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        if request.url.path.startswith("/api"):
            duration_ms = (time.perf_counter() - start) * 1000
            logger.info(f"{request.method} {request.url.path} {response.status_code} in {duration_ms:.0f}ms")
        return response

    register_exception_handlers(app)

    # Include routers
    app.include_router(auth.router, prefix="/api", tags=["auth"])
    app.include_router(themes.router, prefix="/api", tags=["themes"])
    app.include_router(questions.router, prefix="/api", tags=["questions"])
    app.include_router(quiz.router, prefix="/api", tags=["quiz"])
    app.include_router(users.router, prefix="/api", tags=["users"])
    app.include_router(leaderboard.router, prefix="/api", tags=["leaderboard"])
    app.include_router(admin.router, prefix="/api", tags=["admin"])

    return app
