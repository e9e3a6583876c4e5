import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from quizmaster.db.base_class import Base

logger = logging.getLogger(__name__)


class Database:
    """Process-local store handle: one engine, its sessionmaker and a write lock.

    The default URL is an in-memory SQLite database held on a single pooled
    connection, so its content lives exactly as long as this object.
    """

    def __init__(self, url: str = "sqlite+aiosqlite://"):
        self.url = url
        engine_kwargs = {}
        if url.startswith("sqlite"):
            engine_kwargs = {
                "connect_args": {"check_same_thread": False},
                "poolclass": StaticPool,
            }
        self.engine = create_async_engine(url, **engine_kwargs)
        self.sessionmaker = async_sessionmaker(self.engine, expire_on_commit=False)
        # Serialises request sessions; stats read-modify-write relies on it.
        self.lock = asyncio.Lock()

    async def create_all(self) -> None:
        # Register every table on the metadata before creating them
        from quizmaster import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema created")

    async def dispose(self) -> None:
        await self.engine.dispose()


@asynccontextmanager
async def locked_session(database: Database) -> AsyncIterator[AsyncSession]:
    """A session opened while holding the store lock, released on exit."""
    async with database.lock:
        async with database.sessionmaker() as db:
            yield db


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_db(database: Database = Depends(get_database)) -> AsyncIterator[AsyncSession]:
    async with locked_session(database) as db:
        yield db
