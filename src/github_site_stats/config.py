"""Configuration management for GitHub Site Stats."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_OUTPUT_PATH = "_data/github-stats.json"


@dataclass
class Config:
    """Application configuration."""

    username: str | None = None
    github_token: str | None = None
    github_api_url: str = "https://api.github.com"
    user_agent: str = "GitHub-Stats-Updater"

    # Snapshot
    output_path: Path = Path(DEFAULT_OUTPUT_PATH)
    featured_count: int = 6
    recent_activity_count: int = 5

    # Pagination
    per_page: int = 100
    contribution_events_per_page: int = 100
    activity_events_per_page: int = 10

    # Live cache lifetime in seconds
    cache_ttl: float = 3600.0

    # No timeout unless explicitly configured
    request_timeout: float | None = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        # override=False ensures environment variables take precedence over .env
        load_dotenv(override=False)

        return cls(
            username=os.getenv("GITHUB_SITE_STATS_USERNAME") or os.getenv("GITHUB_USERNAME"),
            github_token=os.getenv("GITHUB_SITE_STATS_TOKEN") or os.getenv("GITHUB_TOKEN"),
            github_api_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
            output_path=Path(os.getenv("GITHUB_SITE_STATS_OUTPUT", DEFAULT_OUTPUT_PATH)),
        )

    @property
    def is_authenticated(self) -> bool:
        """Check if a GitHub token is configured."""
        return bool(self.github_token)


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def set_config(config: Config | None) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config
