"""Pydantic Settings model for the GitHub Actions runner environment."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment variable settings for the action."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    # Set by the runner when the job is re-run with debug logging enabled.
    RUNNER_DEBUG: bool = False

    # GitHub API settings
    GITHUB_API_URL: str = "https://api.github.com"

    # Workflow run files
    GITHUB_EVENT_PATH: Path | None = None
    GITHUB_OUTPUT: Path | None = None


def get_settings() -> Settings:
    """Read the runner environment as it is at call time."""
    return Settings()
