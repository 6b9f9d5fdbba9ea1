"""Settings management for the tech news agent."""

from pathlib import Path
from typing import Annotated, List, Optional, Union

from croniter import croniter
from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_CRON_SCHEDULE = "0 9 * * 1"  # Every Monday at 9 AM
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_NEWS_CATEGORIES = ["technology", "science", "business"]


class ConfigurationError(Exception):
    """Raised when a required setting is missing or invalid."""
    pass


class Settings(BaseSettings):
    """Settings for the tech news agent.

    Loaded once at process start and never modified afterwards; every component
    receives the values it needs through its constructor.
    """

    gemini_api_key: str = Field(
        default="",
        description="API key for the Gemini generative AI service",
        validation_alias="GEMINI_API_KEY"
    )

    telegram_bot_token: str = Field(
        default="",
        description="Telegram Bot Token used to deliver summaries",
        validation_alias="TELEGRAM_BOT_TOKEN"
    )

    telegram_chat_id: int = Field(
        default=0,
        description="Telegram chat ID where the bot will post news summaries",
        validation_alias="TELEGRAM_CHAT_ID"
    )

    news_api_key: str = Field(
        default="",
        description="API key for NewsAPI",
        validation_alias="NEWS_API_KEY"
    )

    cron_schedule: str = Field(
        default=DEFAULT_CRON_SCHEDULE,
        description="Cron expression defining when the weekly summary is produced",
        validation_alias="CRON_SCHEDULE"
    )

    max_news_articles: int = Field(
        default=20,
        description="Maximum number of articles requested per run",
        validation_alias="MAX_NEWS_ARTICLES",
        gt=0
    )

    gemini_model: str = Field(
        default=DEFAULT_GEMINI_MODEL,
        description="Gemini model used to analyze the articles",
        validation_alias="GEMINI_MODEL"
    )

    news_categories: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_NEWS_CATEGORIES),
        description="Categories queried from NewsAPI",
        validation_alias="NEWS_CATEGORIES"
    )

    news_request_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for NewsAPI requests",
        validation_alias="NEWS_REQUEST_TIMEOUT",
        gt=0
    )

    analysis_timeout: float = Field(
        default=120.0,
        description="Time budget in seconds for the AI analysis stage",
        validation_alias="ANALYSIS_TIMEOUT",
        gt=0
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level name",
        validation_alias="LOG_LEVEL"
    )

    log_file: Optional[Path] = Field(
        default=None,
        description="Optional path to a log file",
        validation_alias="LOG_FILE"
    )

    log_use_utc: bool = Field(
        default=False,
        description="Whether log timestamps are rendered in UTC",
        validation_alias="LOG_USE_UTC"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        validate_default=True,
        frozen=True,
        extra="ignore"
    )

    @field_validator("news_categories", mode="before")
    def parse_news_categories(cls, v: Union[str, List[str]]) -> List[str]:
        """Parse comma-separated string of categories into a list."""
        if isinstance(v, str):
            return [cat.strip() for cat in v.split(",") if cat.strip()]
        return v

    @field_validator("cron_schedule")
    def check_cron_schedule(cls, v: str) -> str:
        if not croniter.is_valid(v):
            raise ValueError(f"'{v}' is not a valid cron expression")
        return v

    @field_validator("log_level")
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level '{v}'")
        return level

    @model_validator(mode="after")
    def check_required(self) -> "Settings":
        """Check that all required settings are present."""
        if not self.gemini_api_key:
            raise ValueError("GEMINI_API_KEY is required")
        if not self.telegram_bot_token:
            raise ValueError("TELEGRAM_BOT_TOKEN is required")
        if self.telegram_chat_id == 0:
            raise ValueError("TELEGRAM_CHAT_ID is required")
        if not self.news_api_key:
            raise ValueError("NEWS_API_KEY is required")
        if not self.news_categories:
            raise ValueError("NEWS_CATEGORIES must contain at least one category")
        return self


def load_settings(**overrides) -> Settings:
    """Load settings from the environment and the .env file.

    Args:
        **overrides: Values that take precedence over the environment (used by tests)

    Returns:
        Validated, immutable settings

    Raises:
        ConfigurationError: If a required setting is missing or a value is invalid
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or 'settings'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {problems}") from e
