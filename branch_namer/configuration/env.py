"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from branch_namer.utils.constants import DEFAULT_ANTHROPIC_API_URL


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

    # Anthropic API settings
    ANTHROPIC_API_URL: str = DEFAULT_ANTHROPIC_API_URL

    # Claude credentials, either one is enough
    ANTHROPIC_API_KEY: str | None = None
    CLAUDE_CODE_OAUTH_TOKEN: str | None = None


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
