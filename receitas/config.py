"""
Centralized configuration management using pydantic-settings.
This module provides a single source of truth for all application configuration.
"""


import os

from dotenv import load_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from receitas.utils.logger import setup_logger

load_dotenv(override=False)


logger = setup_logger("core_config")


class Settings(BaseSettings):
    """
    Application settings managed by pydantic-settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
        env_prefix="",
    )

    # ===== Database Configuration =====
    app_database_url: str = Field(
        default="sqlite+aiosqlite:///./receitas.db",
        alias="RECEITAS_DATABASE_URL",
        description="Async SQLAlchemy URL of the application database",
    )

    # ===== Account Rules =====
    password_min_length: int = Field(
        default=3,
        alias="PASSWORD_MIN_LENGTH",
        description="Minimum password length accepted at sign-up",
    )

    email_pattern: str = Field(
        default=r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
        alias="EMAIL_PATTERN",
        description="Regular expression an email must match at sign-up",
    )

    bcrypt_rounds: int = Field(
        default=10,
        ge=4,
        le=31,
        alias="BCRYPT_ROUNDS",
        description="bcrypt cost factor (log2 of the number of rounds)",
    )

    # ===== Session Configuration =====
    session_ttl_minutes: int | None = Field(
        default=None,
        alias="SESSION_TTL_MINUTES",
        description="Session lifetime in minutes; unset means sessions never expire",
    )

    # ===== Authorization Policy =====
    enforce_ownership_on_all_mutations: bool = Field(
        default=False,
        alias="ENFORCE_OWNERSHIP_ON_ALL_MUTATIONS",
        description=(
            "Require a bearer token and recipe ownership for delete and bulk "
            "endpoints as well, not only for create/update"
        ),
    )

    # ===== Server Configuration =====
    server_host: str = Field(
        default="0.0.0.0", alias="SERVER_HOST", description="Server host address"
    )

    server_port: int = Field(
        default=4000, alias="SERVER_PORT", description="Server port number"
    )

    server_workers: int = Field(
        default=1, alias="SERVER_WORKERS", description="Number of uvicorn workers"
    )

    # ===== CORS Configuration =====
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        alias="CORS_ALLOW_ORIGINS",
        description="CORS allowed origins",
    )

    cors_allow_credentials: bool = Field(
        default=False,
        alias="CORS_ALLOW_CREDENTIALS",
        description="Whether to allow credentials in CORS requests",
    )

    cors_allow_methods: list[str] = Field(
        default_factory=lambda: ["*"],
        alias="CORS_ALLOW_METHODS",
        description="CORS allowed methods",
    )

    cors_allow_headers: list[str] = Field(
        default_factory=lambda: ["*"],
        alias="CORS_ALLOW_HEADERS",
        description="CORS allowed headers",
    )

    # User-facing hint for database connection errors
    db_unavailable_hint: str = os.getenv(
        "DB_UNAVAILABLE_HINT",
        "Database connection failed. The server may be offline or network connectivity is down.",
    )

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Normalize the database URL and log warnings for risky configurations."""

        if self.app_database_url.startswith("postgresql://"):
            self.app_database_url = self.app_database_url.replace(
                "postgresql://", "postgresql+asyncpg://", 1
            )
        elif not self.app_database_url.startswith(
            ("postgresql+asyncpg://", "sqlite+aiosqlite://")
        ):
            raise ValueError(
                f"Unsupported RECEITAS_DATABASE_URL prefix: {self.app_database_url}"
            )

        if self.is_sqlite:
            logger.debug("Using SQLite application database.")

        if self.bcrypt_rounds < 10:
            logger.warning(
                f"BCRYPT_ROUNDS={self.bcrypt_rounds} is below the recommended minimum of 10."
            )

        if self.session_ttl_minutes is None:
            logger.debug("Sessions never expire (SESSION_TTL_MINUTES not set).")

        logger.debug(
            f"Ownership enforced on all mutations: {self.enforce_ownership_on_all_mutations}"
        )

        return self

    @property
    def is_sqlite(self) -> bool:
        return self.app_database_url.startswith("sqlite")


# Global settings instance
settings = Settings()
