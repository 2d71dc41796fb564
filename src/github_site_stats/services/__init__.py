"""Services for GitHub data collection and aggregation."""

from github_site_stats.services.cache import ResponseCache
from github_site_stats.services.github_rest_client import GitHubRestClient
from github_site_stats.services.live_data import LiveDataSource
from github_site_stats.services.snapshot_collector import SnapshotCollector

__all__ = [
    "GitHubRestClient",
    "ResponseCache",
    "LiveDataSource",
    "SnapshotCollector",
]
