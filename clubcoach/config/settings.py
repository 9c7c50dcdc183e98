import os
from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_database_url() -> str:
    """Get database URL, using absolute path for SQLite to avoid path resolution issues."""
    db_url = os.getenv("CLUBCOACH_DATABASE_URL", "")
    if db_url:
        logger.info(f"Using CLUBCOACH_DATABASE_URL from environment: {db_url}")
        return db_url

    db_path = Path(__file__).parent.parent.parent / "clubcoach.db"
    abs_path = db_path.resolve()
    db_url = f"sqlite:///{abs_path}"
    logger.debug(f"Using local SQLite database: {db_url}")
    return db_url


class Settings(BaseSettings):
    database_url: str = Field(
        default_factory=get_database_url,
        validation_alias="CLUBCOACH_DATABASE_URL",
    )
    log_level: str = Field(default="INFO", validation_alias="CLUBCOACH_LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="CLUBCOACH_LOG_FILE",
        description="Optional log file path (console only when unset)",
    )
    log_rotation: str = Field(default="10 MB", validation_alias="CLUBCOACH_LOG_ROTATION")
    log_retention: str = Field(default="7 days", validation_alias="CLUBCOACH_LOG_RETENTION")
    default_cycle_length_weeks: int = Field(
        default=12,
        ge=1,
        validation_alias="CLUBCOACH_DEFAULT_CYCLE_LENGTH_WEEKS",
        description="Mesocycle length used when a caller does not provide one",
    )
    default_session_duration_minutes: int = Field(
        default=60,
        gt=0,
        validation_alias="CLUBCOACH_DEFAULT_SESSION_DURATION_MINUTES",
        description="Nominal session duration used for workload when a class has none",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(valid_levels)}. Defaulting to INFO.")
            return "INFO"
        return upper_value


settings = Settings()
