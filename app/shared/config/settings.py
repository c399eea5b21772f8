# 📄 File: app/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# One place that knows how the Oyster Review service is set up: which database to talk to,
# how tokens are signed, how fast clients may post reviews and where a remote store lives.
#
# 🧪 Purpose (Technical Summary):
# pydantic-settings model read from the process environment and an optional .env file.
# Field validators normalise enumerated values; computed properties derive the database
# URL and CORS list. get_settings() caches a single instance per process.
#
# 🔗 Dependencies:
# - pydantic-settings (BaseSettings, SettingsConfigDict)
# - python-dotenv (read by pydantic-settings for env_file)
#
# 🔄 Connected Modules / Calls From:
# - app.main (startup, middleware, uvicorn)
# - app.shared.config.database (engine options)
# - app.shared.core.security (JWT signing)
# - Review and profile HTTP store clients

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENVIRONMENTS = ("development", "staging", "production", "test")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
JWT_ALGORITHMS = ("HS256", "HS384", "HS512")


class Settings(BaseSettings):
    """
    Service configuration.

    Every field can be overridden by an environment variable of the same
    name; a .env file in the working directory is read as a fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # SERVICE
    # =========================================================================

    APP_NAME: str = Field(default="Oyster Review API", description="Service name shown in docs and health")
    APP_VERSION: str = Field(default="1.0.0", description="Reported service version")
    APP_DESCRIPTION: str = Field(
        default="Oyster reviews with duplicate resolution and privacy-aware profiles",
        description="OpenAPI description"
    )
    ENVIRONMENT: str = Field(default="development", description="One of development, staging, production, test")
    DEBUG: bool = Field(default=False, description="Expose docs and error internals")
    LOG_LEVEL: str = Field(default="INFO", description="Root log level")
    LOG_FORMAT: str = Field(default="json", description="json or text")
    LOG_FILE: Optional[str] = Field(None, description="Also write logs to this file")

    HOST: str = Field(default="0.0.0.0", description="Bind address for uvicorn")
    PORT: int = Field(default=8000, description="Bind port for uvicorn")
    RELOAD: bool = Field(default=False, description="uvicorn autoreload (development only)")
    WORKERS: int = Field(default=1, description="uvicorn worker processes")

    # =========================================================================
    # DATABASE
    # =========================================================================

    # DATABASE_URL wins; otherwise a Postgres URL is assembled from DB_*
    DATABASE_URL: Optional[str] = Field(None, description="Full SQLAlchemy async URL")
    DB_HOST: str = Field(default="localhost", description="Postgres host")
    DB_PORT: int = Field(default=5432, description="Postgres port")
    DB_NAME: str = Field(default="oyster_reviews", description="Postgres database")
    DB_USER: str = Field(default="postgres", description="Postgres role")
    DB_PASSWORD: str = Field(default="", description="Postgres password")

    DB_POOL_SIZE: int = Field(default=10, description="Pooled connections kept open")
    DB_MAX_OVERFLOW: int = Field(default=20, description="Extra connections allowed above the pool")
    DB_POOL_TIMEOUT: int = Field(default=30, description="Seconds to wait for a pooled connection")
    DB_POOL_RECYCLE: int = Field(default=3600, description="Seconds before a connection is recycled")

    # =========================================================================
    # AUTH & HTTP
    # =========================================================================

    JWT_SECRET_KEY: str = Field(
        default="development-only-secret-key-change-me",
        description="HMAC key for bearer tokens (32+ characters)"
    )
    JWT_ALGORITHM: str = Field(default="HS256", description="HMAC algorithm for bearer tokens")
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=30, description="Bearer token lifetime")

    CORS_ORIGINS: str = Field(
        default="http://localhost:3000,http://localhost:8081",
        description="Comma separated list of allowed origins"
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="Allow cookies on CORS requests")

    RATE_LIMIT_ENABLED: bool = Field(default=True, description="Per-client rate limiting on review writes")
    RATE_LIMIT_REVIEW_WRITES: str = Field(
        default="30/minute",
        description="slowapi limit for review submit and update"
    )

    # =========================================================================
    # REVIEWS
    # =========================================================================

    REVIEW_TEXT_MAX_LENGTH: int = Field(default=1000, description="Longest accepted tasting note")
    REVIEW_API_BASE_URL: str = Field(
        default="http://localhost:8000/api/v1",
        description="Base URL of the API used by the HTTP review and profile stores"
    )
    REVIEW_API_TIMEOUT: float = Field(default=10.0, description="HTTP store timeout in seconds")

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        v = v.lower()
        if v not in ENVIRONMENTS:
            raise ValueError(f"ENVIRONMENT must be one of {', '.join(ENVIRONMENTS)}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return v

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ("json", "text"):
            raise ValueError("LOG_FORMAT must be 'json' or 'text'")
        return v.lower()

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        if v not in JWT_ALGORITHMS:
            raise ValueError(f"JWT_ALGORITHM must be one of {', '.join(JWT_ALGORITHMS)}")
        return v

    @field_validator("JWT_SECRET_KEY")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        if len(v) < 32:
            raise ValueError("JWT_SECRET_KEY must be at least 32 characters long")
        return v

    @field_validator("CORS_ORIGINS")
    @classmethod
    def validate_cors_origins(cls, v: str) -> str:
        for origin in (item.strip() for item in v.split(",")):
            if origin != "*" and not origin.startswith(("http://", "https://")):
                raise ValueError(f"Invalid CORS origin: {origin}")
        return v

    # =========================================================================
    # DERIVED VALUES
    # =========================================================================

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    """Settings for this process, read once."""
    return Settings()
