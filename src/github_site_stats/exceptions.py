"""Exceptions for GitHub Site Stats.

Exception Hierarchy:
    GitHubSiteStatsError (base)
    ├── UpstreamError (non-2xx HTTP response from the GitHub API)
    ├── NetworkError (request failed before a usable response was received)
    ├── MalformedResponseError (response body is not valid JSON)
    └── FilesystemError (snapshot directory creation or write failure)

Usage:
    - The build-time update treats any fetch error on the profile or repository
      listing as fatal; event fetches degrade to empty defaults.
    - The live data source catches every GitHubSiteStatsError and returns None.
"""

from pathlib import Path

__all__ = [
    "GitHubSiteStatsError",
    "UpstreamError",
    "NetworkError",
    "MalformedResponseError",
    "FilesystemError",
]


class GitHubSiteStatsError(Exception):
    """Base exception for all GitHub Site Stats errors."""

    pass


class UpstreamError(GitHubSiteStatsError):
    """Raised when the GitHub API answers with a non-success status code."""

    def __init__(
        self,
        status_code: int,
        status_text: str = "",
        endpoint: str | None = None,
    ):
        super().__init__(f"GitHub API error: {status_code} {status_text}".rstrip())
        self.status_code = status_code
        self.status_text = status_text
        self.endpoint = endpoint


class NetworkError(GitHubSiteStatsError):
    """Raised when a request fails before a usable HTTP response is received."""

    def __init__(self, message: str, endpoint: str | None = None):
        super().__init__(message)
        self.endpoint = endpoint


class MalformedResponseError(GitHubSiteStatsError):
    """Raised when a successful response cannot be decoded as JSON."""

    def __init__(self, message: str, endpoint: str | None = None):
        super().__init__(message)
        self.endpoint = endpoint


class FilesystemError(GitHubSiteStatsError):
    """Raised when the snapshot file or its directory cannot be written."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path
