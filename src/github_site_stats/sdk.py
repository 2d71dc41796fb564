"""GitHub Site Stats SDK - High-level API for building and rendering site stats."""

import logging
from datetime import datetime
from pathlib import Path

import httpx

from github_site_stats.config import Config
from github_site_stats.exceptions import GitHubSiteStatsError
from github_site_stats.models.snapshot import Snapshot
from github_site_stats.output.page import Page
from github_site_stats.output.renderer import LiveStatsRenderer
from github_site_stats.output.snapshot_writer import write_snapshot
from github_site_stats.services.github_rest_client import GitHubRestClient
from github_site_stats.services.live_data import LiveDataSource
from github_site_stats.services.snapshot_collector import SnapshotCollector

logger = logging.getLogger(__name__)


class GitHubSiteStats:
    """High-level SDK for one user's site statistics.

    Example usage:
        ```python
        from github_site_stats import GitHubSiteStats

        async with GitHubSiteStats("octocat", token="ghp_xxx") as stats:
            # Build-time: write the snapshot file
            snapshot = await stats.update(Path("_data/github-stats.json"))

            # Live: fill page slots, reusing cached responses for an hour
            page = Page.with_slots("total-repos", "total-stars")
            await stats.render(page)
        ```

    Args:
        username: GitHub login whose stats are collected
        token: GitHub personal access token (optional)
        config: Full configuration; ``token`` is ignored when given
        transport: Optional httpx transport (useful for testing)
    """

    def __init__(
        self,
        username: str,
        token: str | None = None,
        config: Config | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.username = username
        self._config = config or Config(username=username, github_token=token)
        self._transport = transport
        self._rest_client: GitHubRestClient | None = None
        self._live_data: LiveDataSource | None = None
        self._initialized = False

    @property
    def is_authenticated(self) -> bool:
        """Check if a token is configured."""
        return self._config.is_authenticated

    async def __aenter__(self) -> "GitHubSiteStats":
        """Async context manager entry."""
        self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    def _initialize(self) -> None:
        """Initialize clients."""
        if self._initialized:
            return

        self._rest_client = GitHubRestClient(config=self._config, transport=self._transport)
        self._live_data = LiveDataSource(self._rest_client, self.username)
        self._initialized = True
        logger.debug(
            "GitHubSiteStats initialized (authenticated=%s)",
            self.is_authenticated,
        )

    async def close(self) -> None:
        """Close all HTTP connections."""
        if self._rest_client:
            await self._rest_client.close()
        self._initialized = False
        logger.debug("GitHubSiteStats closed")

    def _ensure_initialized(self) -> None:
        """Ensure the client is initialized."""
        if not self._initialized:
            raise GitHubSiteStatsError(
                "Client not initialized. Use 'async with GitHubSiteStats(...) as stats:'"
            )

    async def collect_snapshot(self, now: datetime | None = None) -> Snapshot:
        """Fetch and aggregate everything the snapshot file contains.

        Raises:
            UpstreamError: If the profile or repository listing fails
            NetworkError: If the profile or repository listing is unreachable
        """
        self._ensure_initialized()
        logger.info("Collecting snapshot for %s", self.username)

        collector = SnapshotCollector(self._rest_client, self._config)
        return await collector.collect(self.username, now=now)

    async def update(self, output_path: Path | None = None) -> Snapshot:
        """Collect a snapshot and overwrite the snapshot file with it.

        Nothing is written when collection fails.

        Args:
            output_path: Destination (defaults to ``config.output_path``)

        Returns:
            The snapshot that was written
        """
        snapshot = await self.collect_snapshot()
        path = write_snapshot(snapshot, output_path or self._config.output_path)
        logger.info("Stats written to %s", path)
        return snapshot

    async def render(self, page: Page, animation_duration: float | None = None) -> bool:
        """Fill the page's slots from live (cached) data.

        Returns:
            Whether the page had the slots needed to render
        """
        self._ensure_initialized()

        renderer = LiveStatsRenderer(
            self._live_data,
            page,
            featured_count=self._config.featured_count,
        )
        if animation_duration is not None:
            renderer.animation_duration = animation_duration
        return await renderer.init()
