"""Cached data access for the live renderer."""

import logging
from typing import Any, Awaitable, Callable

from github_site_stats.exceptions import GitHubSiteStatsError
from github_site_stats.models.repository import Repository
from github_site_stats.models.user import UserProfile
from github_site_stats.services.cache import ResponseCache
from github_site_stats.services.github_rest_client import GitHubRestClient

logger = logging.getLogger(__name__)

USER_KEY = "user"
REPOS_KEY = "repos"


class LiveDataSource:
    """Profile and repository lookups for one user, behind a shared cache.

    Fetch failures are logged and reported as ``None``; callers treat that as
    "nothing to render".
    """

    def __init__(
        self,
        rest_client: GitHubRestClient,
        username: str,
        cache: ResponseCache | None = None,
    ):
        self.rest_client = rest_client
        self.username = username
        self.cache = cache or ResponseCache(ttl=rest_client.config.cache_ttl)

    async def _safe_fetch(self, fetch: Callable[[], Awaitable[Any]]) -> Any:
        try:
            return await fetch()
        except GitHubSiteStatsError as e:
            logger.error("GitHub API Error: %s", e)
            return None

    async def _load_user(self) -> UserProfile | None:
        data = await self._safe_fetch(lambda: self.rest_client.get_user(self.username))
        return UserProfile.from_api(data) if data is not None else None

    async def _load_repos(self) -> list[Repository] | None:
        data = await self._safe_fetch(lambda: self.rest_client.get_user_repos(self.username))
        return [Repository.from_api(r) for r in data] if data is not None else None

    async def fetch_user(self) -> UserProfile | None:
        """Get the user's profile, from cache while it is fresh."""
        return await self.cache.get_or_refresh(USER_KEY, self._load_user)

    async def fetch_repos(self) -> list[Repository] | None:
        """Get the user's repositories, from cache while they are fresh."""
        return await self.cache.get_or_refresh(REPOS_KEY, self._load_repos)
