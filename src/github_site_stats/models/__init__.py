"""Data models for GitHub Site Stats."""

from github_site_stats.models.activity import (
    ActivityItem,
    ContributionEstimate,
    EventType,
    GitHubEvent,
)
from github_site_stats.models.repository import (
    FeaturedRepository,
    LanguageCount,
    RepoStats,
    Repository,
)
from github_site_stats.models.snapshot import Snapshot
from github_site_stats.models.user import UserProfile

__all__ = [
    "UserProfile",
    "Repository",
    "LanguageCount",
    "RepoStats",
    "FeaturedRepository",
    "EventType",
    "GitHubEvent",
    "ActivityItem",
    "ContributionEstimate",
    "Snapshot",
]
