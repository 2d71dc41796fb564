"""Snapshot document model."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from github_site_stats.models.activity import ActivityItem, ContributionEstimate
from github_site_stats.models.repository import FeaturedRepository, RepoStats
from github_site_stats.models.user import UserProfile


class Snapshot(BaseModel):
    """Everything one update run produces, serialized as a single JSON file."""

    last_updated: datetime
    user: UserProfile
    total_repos: int = 0
    stats: RepoStats = Field(default_factory=RepoStats)
    featured: list[FeaturedRepository] = Field(default_factory=list)
    contributions: ContributionEstimate = Field(default_factory=ContributionEstimate)
    recent_activity: list[ActivityItem] = Field(default_factory=list)

    def to_document(self) -> dict[str, Any]:
        """Build the JSON document consumed by the static site.

        Key order is fixed so identical inputs always serialize identically.
        """
        last_updated = self.last_updated.astimezone(timezone.utc)
        return {
            "lastUpdated": last_updated.isoformat(timespec="milliseconds").replace(
                "+00:00", "Z"
            ),
            "user": self.user.to_snapshot(),
            "repos": {
                "total": self.total_repos,
                "totalStars": self.stats.total_stars,
                "totalForks": self.stats.total_forks,
                "totalSize": self.stats.total_size,
                "topLanguages": [lang.to_snapshot() for lang in self.stats.top_languages],
                "featured": [repo.to_snapshot() for repo in self.featured],
            },
            "contributions": self.contributions.to_snapshot(),
            "recentActivity": [item.to_snapshot() for item in self.recent_activity],
        }
