"""GitHub REST API client."""

import logging
from typing import Any, Optional

import httpx

from github_site_stats.config import Config, get_config
from github_site_stats.exceptions import MalformedResponseError, NetworkError, UpstreamError

logger = logging.getLogger(__name__)

ACCEPT_HEADER = "application/vnd.github.v3+json"


class GitHubRestClient:
    """Async client for the handful of GitHub REST endpoints the site needs."""

    def __init__(
        self,
        config: Optional[Config] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or get_config()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_headers(self) -> dict[str, str]:
        """Get headers for API requests."""
        headers = {
            "Accept": ACCEPT_HEADER,
            "User-Agent": self.config.user_agent,
        }
        if self.config.github_token:
            headers["Authorization"] = f"token {self.config.github_token}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.github_api_url,
                headers=self._get_headers(),
                timeout=self.config.request_timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "GitHubRestClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def get(
        self,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Make a GET request and return the parsed JSON body.

        Raises:
            UpstreamError: The API answered with a non-success status
            NetworkError: No usable response was received
            MalformedResponseError: The response body is not valid JSON
        """
        client = await self._get_client()
        logger.debug("GET %s %s", endpoint, params or "")

        try:
            response = await client.get(endpoint, params=params)
        except httpx.RequestError as e:
            raise NetworkError(f"Request to {endpoint} failed: {e}", endpoint=endpoint) from e

        if not response.is_success:
            raise UpstreamError(
                response.status_code,
                response.reason_phrase,
                endpoint=endpoint,
            )

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(
                f"Invalid JSON from {endpoint}: {e}", endpoint=endpoint
            ) from e

    async def get_paginated(
        self,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
        per_page: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        """Fetch every page of a list endpoint.

        Pages are requested from 1 upwards until one comes back with fewer
        than ``per_page`` items. Items are concatenated in request order
        without deduplication.

        Args:
            endpoint: API endpoint
            params: Extra query parameters sent with every page
            per_page: Items per page (max 100)

        Returns:
            List of all items across all pages
        """
        per_page = per_page or self.config.per_page
        all_items: list[dict[str, Any]] = []
        page = 1

        while True:
            items = await self.get(
                endpoint,
                params={"per_page": per_page, "page": page, **(params or {})},
            )
            all_items.extend(items)
            if len(items) < per_page:
                break
            page += 1

        logger.debug("Fetched %d items from %s in %d page(s)", len(all_items), endpoint, page)
        return all_items

    # Convenience methods for common endpoints

    async def get_user(self, username: str) -> dict[str, Any]:
        """Get user profile data."""
        return await self.get(f"/users/{username}")

    async def get_user_repos(self, username: str) -> list[dict[str, Any]]:
        """Get all of a user's public repositories, most recently updated first."""
        return await self.get_paginated(
            f"/users/{username}/repos",
            params={"sort": "updated"},
        )

    async def get_user_events(
        self,
        username: str,
        per_page: int = 30,
    ) -> list[dict[str, Any]]:
        """Get the first page of a user's public events."""
        return await self.get(
            f"/users/{username}/events/public",
            params={"per_page": per_page},
        )
