# 📄 File: app/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to our database, making sure we can talk to our data storage
# and closing connections cleanly when the app shuts down.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy engine lifecycle management with a connectivity health check,
# shared by the session manager and the health endpoint.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine)
# - app/shared/config/database.py (engine configuration)
#
# 🔄 Connected Modules / Calls From:
# - app/shared/infrastructure/database/session.py (session management)
# - app/api/v1/health.py (database health monitoring)
# - app/main.py (startup and shutdown)

import logging
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.shared.config.database import DatabaseBase, build_engine_kwargs
from app.shared.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class DatabaseConnectionManager:
    """
    Manages the async database engine and its connectivity checks.
    """

    def __init__(self):
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")

    async def initialize(self, settings: Optional[Settings] = None) -> None:
        """Initialize database engine with connection pooling."""
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        try:
            logger.info("Initializing database connection pool...")
            self._engine = create_async_engine(**build_engine_kwargs(settings or get_settings()))
            await self.health_check(raise_on_error=True)
            logger.info("Database connection pool initialized successfully")

        except Exception as e:
            logger.error(f"Failed to initialize database connection: {e}")
            if self._engine is not None:
                await self._engine.dispose()
                self._engine = None
            raise

    async def health_check(self, raise_on_error: bool = False) -> Dict[str, Any]:
        """Run a trivial query against the database."""
        if self._engine is None:
            return {"status": "unhealthy", "error": "Database engine not initialized"}

        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(self._health_check_query)
                result.scalar()

            return {
                "status": "healthy",
                "database_url": self._engine.url.render_as_string(hide_password=True),
            }

        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            if raise_on_error:
                raise
            return {"status": "unhealthy", "error": str(e), "type": type(e).__name__}

    async def create_tables(self) -> None:
        """Create all tables from model metadata (development and tests)."""
        if self._engine is None:
            raise RuntimeError("Database engine not initialized")

        async with self._engine.begin() as conn:
            await conn.run_sync(DatabaseBase.metadata.create_all)
        logger.info("Database tables created")

    async def close(self) -> None:
        """Dispose of the engine and all pooled connections."""
        if self._engine is None:
            logger.warning("Database not initialized, nothing to close")
            return

        await self._engine.dispose()
        self._engine = None
        logger.info("Database connection closed successfully")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        return self._engine


# Global connection manager instance
db_manager = DatabaseConnectionManager()


async def init_database(settings: Optional[Settings] = None) -> None:
    """Initialize the global database engine."""
    await db_manager.initialize(settings)


async def close_database() -> None:
    """Close the global database engine."""
    await db_manager.close()


def get_database_engine() -> AsyncEngine:
    """
    Get the initialized database engine.

    Raises:
        RuntimeError: If the engine has not been initialized
    """
    if db_manager.engine is None:
        raise RuntimeError("Database engine not initialized")
    return db_manager.engine


async def database_health_check() -> Dict[str, Any]:
    return await db_manager.health_check()
