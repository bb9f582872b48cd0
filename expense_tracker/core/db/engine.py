import contextlib
import logging
from typing import Any, AsyncIterator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.engine import make_url
from sqlalchemy.pool import NullPool

from expense_tracker.core.config import config as settings
from expense_tracker.core.db.base import Base

logger = logging.getLogger(__name__)


def is_memory_database(host: str) -> bool:
    url = make_url(host)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


class DatabaseSessionManager:
    """
    Owns the async engine and the session factory for one database.
    Sessions are short-lived: one per store operation.
    """

    def __init__(
        self,
        host: str,
        engine_kwargs: Optional[dict[str, Any]] = None,
        pooled: Optional[bool] = None,
    ):
        engine_kwargs = dict(engine_kwargs or {})
        if pooled is None:
            pooled = settings.is_production
        # An in-memory SQLite database lives only as long as its connection,
        # so it keeps SQLAlchemy's single-connection default
        if not pooled and not is_memory_database(host):
            # Disable pooling in development
            engine_kwargs.setdefault("poolclass", NullPool)

        self._engine: Optional[AsyncEngine] = create_async_engine(host, **engine_kwargs)
        self._sessionmaker: Optional[async_sessionmaker[AsyncSession]] = (
            async_sessionmaker(
                self._engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,  # Manual control over flushing
            )
        )

    async def close(self) -> None:
        if self._engine is None:
            raise Exception("DatabaseSessionManager is not initialized")
        await self._engine.dispose()
        self._engine = None
        self._sessionmaker = None

    @contextlib.asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        if self._sessionmaker is None:
            raise Exception("DatabaseSessionManager is not initialized")

        session = self._sessionmaker()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_all(self) -> None:
        """Create every table known to Base.metadata that does not exist yet."""
        if self._engine is None:
            raise Exception("DatabaseSessionManager is not initialized")
        async with self._engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured")

    async def drop_all(self) -> None:
        if self._engine is None:
            raise Exception("DatabaseSessionManager is not initialized")
        async with self._engine.begin() as connection:
            await connection.run_sync(Base.metadata.drop_all)
