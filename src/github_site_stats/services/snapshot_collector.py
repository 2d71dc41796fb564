"""Build-time collection of everything the snapshot file contains."""

import asyncio
import logging
from datetime import datetime

from github_site_stats.config import Config
from github_site_stats.exceptions import GitHubSiteStatsError
from github_site_stats.models.activity import ActivityItem, ContributionEstimate, GitHubEvent
from github_site_stats.models.repository import Repository
from github_site_stats.models.snapshot import Snapshot
from github_site_stats.models.user import UserProfile
from github_site_stats.services.aggregator import (
    calculate_repo_stats,
    get_contributions,
    get_top_repositories,
    summarize_recent_activity,
)
from github_site_stats.services.github_rest_client import GitHubRestClient
from github_site_stats.utils.formatting import utc_now

logger = logging.getLogger(__name__)


class SnapshotCollector:
    """Fetches profile, repositories and events and aggregates them."""

    def __init__(self, rest_client: GitHubRestClient, config: Config | None = None):
        self.rest_client = rest_client
        self.config = config or rest_client.config

    async def collect_profile(self, username: str) -> UserProfile:
        logger.info("Fetching user info...")
        data = await self.rest_client.get_user(username)
        return UserProfile.from_api(data)

    async def collect_repos(self, username: str) -> list[Repository]:
        logger.info("Fetching repositories...")
        repos_data = await self.rest_client.get_user_repos(username)
        repos = [Repository.from_api(r) for r in repos_data]
        logger.debug("Found %d public repositories", len(repos))
        return repos

    async def collect_contributions(
        self,
        username: str,
        now: datetime | None = None,
    ) -> ContributionEstimate:
        """Estimate contributions from the public event feed.

        Failures degrade to a zero estimate.
        """
        try:
            events_data = await self.rest_client.get_user_events(
                username, per_page=self.config.contribution_events_per_page
            )
        except GitHubSiteStatsError as e:
            logger.warning("Error fetching contributions: %s", e)
            return ContributionEstimate()

        events = [GitHubEvent.from_api(e) for e in events_data]
        return get_contributions(events, now=now)

    async def collect_recent_activity(self, username: str) -> list[ActivityItem]:
        """Collect the latest public events for the activity list.

        Failures degrade to an empty list.
        """
        logger.info("Fetching recent activity...")
        try:
            events_data = await self.rest_client.get_user_events(
                username, per_page=self.config.activity_events_per_page
            )
        except GitHubSiteStatsError as e:
            logger.warning("Error fetching activity: %s", e)
            return []

        events = [GitHubEvent.from_api(e) for e in events_data]
        return summarize_recent_activity(events, limit=self.config.recent_activity_count)

    async def collect(self, username: str, now: datetime | None = None) -> Snapshot:
        """Collect a complete snapshot for ``username``.

        Profile and repository failures propagate; event failures do not.
        """
        profile, repos, contributions, recent_activity = await asyncio.gather(
            self.collect_profile(username),
            self.collect_repos(username),
            self.collect_contributions(username, now=now),
            self.collect_recent_activity(username),
        )

        return Snapshot(
            last_updated=now or utc_now(),
            user=profile,
            total_repos=len(repos),
            stats=calculate_repo_stats(repos),
            featured=get_top_repositories(repos, count=self.config.featured_count),
            contributions=contributions,
            recent_activity=recent_activity,
        )
