"""GitHub Site Stats - Public GitHub profile statistics for a personal website.

This SDK collects one user's public GitHub data and turns it into:
- A JSON snapshot file for a static site generator (build time)
- Rendered markup for named page slots, backed by a one-hour cache (live)

Example usage:
    ```python
    from github_site_stats import GitHubSiteStats

    async with GitHubSiteStats("octocat") as stats:
        snapshot = await stats.update()
    ```
"""

from github_site_stats.config import Config
from github_site_stats.exceptions import (
    FilesystemError,
    GitHubSiteStatsError,
    MalformedResponseError,
    NetworkError,
    UpstreamError,
)
from github_site_stats.models import (
    ActivityItem,
    ContributionEstimate,
    EventType,
    FeaturedRepository,
    GitHubEvent,
    LanguageCount,
    RepoStats,
    Repository,
    Snapshot,
    UserProfile,
)
from github_site_stats.output.page import Page, Slot
from github_site_stats.sdk import GitHubSiteStats

__version__ = "0.1.0"

__all__ = [
    # Main SDK class
    "GitHubSiteStats",
    # Configuration
    "Config",
    # Exceptions
    "GitHubSiteStatsError",
    "UpstreamError",
    "NetworkError",
    "MalformedResponseError",
    "FilesystemError",
    # Models
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
    # Live rendering
    "Page",
    "Slot",
]
