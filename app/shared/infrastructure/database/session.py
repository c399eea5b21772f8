# 📄 File: app/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Gives each request its own unit of work: a review write is saved when the request
# finishes cleanly and thrown away when anything fails.
#
# 🧪 Purpose (Technical Summary):
# DatabaseSessionManager wraps an async_sessionmaker; get_session() commits on a clean
# exit, rolls back otherwise and turns raw SQLAlchemy errors into StoreError.
# get_db_session() is the FastAPI dependency.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - app/shared/infrastructure/database/connection.py (database engine)
#
# 🔄 Connected Modules / Calls From:
# - Module presentation dependencies (repository wiring)
# - app/main.py (startup)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import exc
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.shared.core.exceptions import ReviewAppException, StoreError
from app.shared.infrastructure.database.connection import get_database_engine

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Session factory holder; one per process."""

    def __init__(self):
        self._session_factory: Optional[async_sessionmaker] = None
        self._initialized = False

    def initialize(self, engine: Optional[AsyncEngine] = None) -> None:
        """Bind the factory to an engine (the global one by default)."""
        self._session_factory = async_sessionmaker(
            engine or get_database_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=True,
        )
        self._initialized = True
        logger.info("Database session factory initialized successfully")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Yield a session that commits on a clean exit and rolls back otherwise.

        Application exceptions propagate unchanged; raw SQLAlchemy errors
        surface as StoreError.
        """
        if not self._initialized or self._session_factory is None:
            raise StoreError("Session manager not initialized", operation="session")

        session: AsyncSession = self._session_factory()

        try:
            yield session
            await session.commit()
            logger.debug("Database transaction committed successfully")

        except ReviewAppException:
            await session.rollback()
            raise

        except exc.SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error occurred, transaction rolled back: {e}")
            raise StoreError(f"Database operation failed: {e}", operation="commit") from e

        except Exception:
            await session.rollback()
            raise

        finally:
            await session.close()


session_manager = DatabaseSessionManager()


def initialize_sessions(engine: Optional[AsyncEngine] = None) -> None:
    session_manager.initialize(engine)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session; see DatabaseSessionManager.get_session."""
    async with session_manager.get_session() as session:
        yield session
