# 📄 File: app/shared/config/database.py
#
# 🧭 Purpose (Layman Explanation):
# Configuration for connecting to our review database: which settings the connection
# uses and the common base every database table is built from.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy declarative base with a constraint naming convention and
# environment-specific async engine arguments (PostgreSQL via asyncpg, SQLite via aiosqlite).
#
# 🔗 Dependencies:
# - SQLAlchemy declarative base and metadata
# - app.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# - app.shared.infrastructure.database.connection
# - Module SQLAlchemy models
# - migrations/env.py

from typing import Any, Dict

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

from .settings import Settings, get_settings


# =============================================================================
# ENGINE CONFIGURATION
# =============================================================================

def build_engine_kwargs(settings: Settings = None) -> Dict[str, Any]:
    """
    Get SQLAlchemy engine configuration for the configured database.

    SQLite (used by tests and local development) does not accept pool sizing
    or asyncpg connect arguments, so only PostgreSQL gets the pooled config.
    """
    settings = settings or get_settings()

    if settings.is_sqlite:
        return {
            "url": settings.database_url,
            "echo": settings.DEBUG and settings.is_development,
        }

    return {
        "url": settings.database_url,
        "echo": settings.DEBUG and settings.is_development,
        "pool_pre_ping": True,
        "pool_recycle": settings.DB_POOL_RECYCLE,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
        "connect_args": {
            "server_settings": {
                "application_name": f"oyster_reviews_{settings.ENVIRONMENT}",
                "jit": "off",
            },
            "command_timeout": 60,
            "statement_cache_size": 0,
        },
    }


# =============================================================================
# DECLARATIVE BASE
# =============================================================================

convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


class DatabaseBase(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Provides the shared metadata (and constraint naming convention)
    for every table in the Oyster Review application.
    """
    metadata = metadata
