"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from notion_issue_sync.utils.constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_CONFLICT_RETRY_DELAY,
    DEFAULT_GITHUB_API_URL,
    DEFAULT_MAX_CONFLICT_RETRIES,
)


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # GitHub settings
    GH_KEY: str | None = None
    GH_REPO_OWNER: str | None = None
    GH_REPO_NAME: str | None = None
    GITHUB_API_URL: str = DEFAULT_GITHUB_API_URL

    # Notion settings
    NOTION_KEY: str | None = None
    NOTION_DATABASE_ID: str | None = None

    # Write behavior
    BATCH_SIZE: int = DEFAULT_BATCH_SIZE
    MAX_CONFLICT_RETRIES: int = DEFAULT_MAX_CONFLICT_RETRIES
    CONFLICT_RETRY_DELAY: float = DEFAULT_CONFLICT_RETRY_DELAY


def get_settings() -> Settings:
    """Read settings from the environment and the `.env` file at call time."""
    return Settings()
