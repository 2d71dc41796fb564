"""Repository data models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from github_site_stats.utils.formatting import format_timestamp, parse_datetime


class Repository(BaseModel):
    """GitHub repository data."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None
    html_url: str = ""
    stargazers_count: int = 0
    forks_count: int = 0
    size: int = 0  # Size in KB
    language: str | None = None
    updated_at: datetime | None = None
    is_fork: bool = False
    topics: list[str] = Field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Repository":
        """Create from GitHub REST API response."""
        return cls(
            name=data.get("name", ""),
            description=data.get("description"),
            html_url=data.get("html_url") or "",
            stargazers_count=data.get("stargazers_count") or 0,
            forks_count=data.get("forks_count") or 0,
            size=data.get("size") or 0,
            language=data.get("language") or None,
            updated_at=parse_datetime(data.get("updated_at")),
            is_fork=bool(data.get("fork", False)),
            topics=data.get("topics") or [],
        )


class LanguageCount(BaseModel):
    """How many repositories use a language as their primary language."""

    name: str
    count: int
    percentage: float  # share of all repositories, one decimal

    def to_snapshot(self) -> dict[str, Any]:
        return {"name": self.name, "count": self.count, "percentage": self.percentage}


class RepoStats(BaseModel):
    """Totals and language breakdown over a set of repositories."""

    total_stars: int = 0
    total_forks: int = 0
    total_size: int = 0
    top_languages: list[LanguageCount] = Field(default_factory=list)


class FeaturedRepository(BaseModel):
    """Lightweight projection of a repository picked for display."""

    name: str
    description: str | None = None
    url: str = ""
    stars: int = 0
    forks: int = 0
    language: str | None = None
    updated: datetime | None = None
    topics: list[str] = Field(default_factory=list)

    @classmethod
    def from_repository(cls, repo: Repository) -> "FeaturedRepository":
        return cls(
            name=repo.name,
            description=repo.description,
            url=repo.html_url,
            stars=repo.stargazers_count,
            forks=repo.forks_count,
            language=repo.language,
            updated=repo.updated_at,
            topics=list(repo.topics),
        )

    def to_snapshot(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "url": self.url,
            "stars": self.stars,
            "forks": self.forks,
            "language": self.language,
            "updated": format_timestamp(self.updated),
            "topics": self.topics,
        }
