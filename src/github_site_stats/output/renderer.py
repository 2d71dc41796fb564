"""Live rendering of GitHub stats into page slots."""

import asyncio
import logging
import math
from html import escape

from github_site_stats.models.repository import FeaturedRepository
from github_site_stats.output.page import Page
from github_site_stats.services.aggregator import (
    DEFAULT_FEATURED_COUNT,
    calculate_repo_stats,
    estimate_contributions_from_repos,
    get_top_repositories,
)
from github_site_stats.services.live_data import LiveDataSource
from github_site_stats.utils.formatting import language_color, time_ago

logger = logging.getLogger(__name__)

# Slot ids
TOTAL_REPOS = "total-repos"
TOTAL_FOLLOWERS = "total-followers"
TOTAL_STARS = "total-stars"
TOTAL_CONTRIBUTIONS = "total-contributions"
LANGUAGE_BARS = "language-bars"
REPOS_GRID = "repos-grid"

ALL_SLOTS = (
    TOTAL_REPOS,
    TOTAL_FOLLOWERS,
    TOTAL_STARS,
    TOTAL_CONTRIBUTIONS,
    LANGUAGE_BARS,
    REPOS_GRID,
)

ANIMATION_DURATION = 1.0  # seconds
ANIMATION_TICK = 0.016  # seconds


class LiveStatsRenderer:
    """Fetches stats through a :class:`LiveDataSource` and fills page slots."""

    def __init__(
        self,
        data_source: LiveDataSource,
        page: Page,
        animation_duration: float = ANIMATION_DURATION,
        animation_tick: float = ANIMATION_TICK,
        featured_count: int = DEFAULT_FEATURED_COUNT,
    ):
        self.data_source = data_source
        self.page = page
        self.animation_duration = animation_duration
        self.animation_tick = animation_tick
        self.featured_count = featured_count

    async def init(self) -> bool:
        """Run every display update concurrently.

        Does nothing unless the page has the ``total-repos`` slot. Each update
        is independent: one failing is logged and does not affect the others.

        Returns:
            Whether the updates ran
        """
        if TOTAL_REPOS not in self.page:
            return False

        tasks = {
            "basic stats": self.update_basic_stats(),
            "stars": self.update_stars_count(),
            "languages": self.update_language_stats(),
            "repositories": self.update_recent_repos(),
            "contributions": self.update_contributions(),
        }
        results = await asyncio.gather(*tasks.values(), return_exceptions=True)

        for name, result in zip(tasks, results):
            if isinstance(result, Exception):
                logger.warning("Failed to update %s: %s", name, result)

        return True

    async def update_basic_stats(self) -> None:
        user = await self.data_source.fetch_user()
        if user is None:
            return

        for slot_id, value in ((TOTAL_REPOS, user.public_repos), (TOTAL_FOLLOWERS, user.followers)):
            slot = self.page.get(slot_id)
            if slot is not None:
                slot.text = str(value)

        await asyncio.gather(
            self.animate_value(TOTAL_REPOS, 0, user.public_repos),
            self.animate_value(TOTAL_FOLLOWERS, 0, user.followers),
        )

    async def update_stars_count(self) -> None:
        repos = await self.data_source.fetch_repos()
        if repos is None:
            return

        total_stars = sum(repo.stargazers_count for repo in repos)
        await self.animate_value(TOTAL_STARS, 0, total_stars)

    async def update_language_stats(self) -> None:
        repos = await self.data_source.fetch_repos()
        if repos is None:
            return

        container = self.page.get(LANGUAGE_BARS)
        if container is None:
            return

        languages = calculate_repo_stats(repos).top_languages
        if not languages:
            return

        max_count = languages[0].count
        container.html = "".join(
            render_language_bar(lang.name, lang.count, lang.percentage, lang.count / max_count * 100)
            for lang in languages
        )

    async def update_recent_repos(self) -> None:
        repos = await self.data_source.fetch_repos()
        if repos is None:
            return

        container = self.page.get(REPOS_GRID)
        if container is None:
            return

        featured = get_top_repositories(repos, count=self.featured_count)
        container.html = "".join(render_repo_card(repo) for repo in featured)

    async def update_contributions(self) -> None:
        """Show the approximate contribution count (15 per repo updated this year)."""
        repos = await self.data_source.fetch_repos()
        if repos is None:
            return

        estimate = estimate_contributions_from_repos(repos)
        await self.animate_value(TOTAL_CONTRIBUTIONS, 0, estimate)

    async def animate_value(
        self,
        slot_id: str,
        start: int,
        end: int,
        duration: float | None = None,
    ) -> None:
        """Count a slot's text from ``start`` to ``end``.

        Steps linearly every tick, showing the floored value, and lands
        exactly on ``end``.
        """
        slot = self.page.get(slot_id)
        if slot is None:
            return

        duration = self.animation_duration if duration is None else duration
        steps = duration / self.animation_tick
        if end == start or steps <= 0:
            slot.text = str(end)
            return

        increment = (end - start) / steps
        current: float = start

        while True:
            current += increment
            done = (increment > 0 and current >= end) or (increment < 0 and current <= end)
            if done:
                current = end
            slot.text = str(math.floor(current))
            if done:
                return
            await asyncio.sleep(self.animation_tick)


def render_language_bar(name: str, count: int, repo_percent: float, bar_percent: float) -> str:
    """Markup for one language bar."""
    return (
        '<div class="language-bar">'
        '<div class="language-info">'
        f'<span class="language-name">{escape(name)}</span>'
        f'<span class="language-count">{count} repos ({repo_percent:.1f}%)</span>'
        "</div>"
        '<div class="bar-container">'
        f'<div class="bar-fill" style="width: {bar_percent:.1f}%; '
        f'background-color: {language_color(name)}"></div>'
        "</div>"
        "</div>"
    )


def render_repo_card(repo: FeaturedRepository) -> str:
    """Markup for one repository card."""
    stars = f'<span class="repo-stars">⭐ {repo.stars}</span>' if repo.stars > 0 else ""
    language = ""
    if repo.language:
        language = (
            '<span class="repo-language">'
            f'<span class="lang-dot" style="background-color: {language_color(repo.language)}"></span>'
            f"{escape(repo.language)}</span>"
        )
    forks = f'<span class="repo-forks">\U0001f531 {repo.forks}</span>' if repo.forks > 0 else ""
    description = escape(repo.description or "No description available")

    return (
        '<div class="repo-card">'
        '<div class="repo-header">'
        '<h4 class="repo-name">'
        f'<a href="{escape(repo.url)}" target="_blank" rel="noopener">{escape(repo.name)}</a>'
        "</h4>"
        f"{stars}"
        "</div>"
        f'<p class="repo-description">{description}</p>'
        '<div class="repo-footer">'
        f"{language}{forks}"
        f'<span class="repo-updated">Updated {time_ago(repo.updated)}</span>'
        "</div>"
        "</div>"
    )
