"""Aggregation of repository and event records into display statistics.

Everything here is a pure function of its inputs (plus an optional ``now``
for the calendar-year checks), so the build-time update and the live renderer
share one implementation.
"""

from collections import Counter
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

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
from github_site_stats.utils.formatting import utc_now

TOP_LANGUAGES_LIMIT = 5
DEFAULT_FEATURED_COUNT = 6
DEFAULT_RECENT_ACTIVITY_COUNT = 5

# Featured ranking weights
STAR_WEIGHT = 10
RECENCY_DIVISOR = 1_000_000_000

# Placeholder multipliers for the contribution estimate. These are rough
# guesses, not derived from GitHub's contribution calendar.
EVENTS_THIS_YEAR_MULTIPLIER = 2
EVENTS_TOTAL_MULTIPLIER = 10
REPOS_UPDATED_THIS_YEAR_MULTIPLIER = 15


def share_percentage(count: int, total: int) -> float:
    """Percentage of ``count`` in ``total`` to one decimal, halves rounded up."""
    exact = Decimal(count * 100) / Decimal(total)
    return float(exact.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def calculate_repo_stats(repos: Sequence[Repository]) -> RepoStats:
    """Sum stars, forks and size and rank primary languages.

    Languages are ranked by how many repositories use them, ties keeping
    first-seen order. Percentages are relative to all repositories,
    including those without a primary language.
    """
    stats = RepoStats(
        total_stars=sum(repo.stargazers_count for repo in repos),
        total_forks=sum(repo.forks_count for repo in repos),
        total_size=sum(repo.size for repo in repos),
    )

    languages = Counter(repo.language for repo in repos if repo.language)
    # sorted() is stable, so equal counts stay in insertion order
    ranked = sorted(languages.items(), key=lambda item: item[1], reverse=True)

    stats.top_languages = [
        LanguageCount(
            name=name,
            count=count,
            percentage=share_percentage(count, len(repos)),
        )
        for name, count in ranked[:TOP_LANGUAGES_LIMIT]
    ]
    return stats


def repository_score(repo: Repository) -> float:
    """Ranking score: ``stars * 10 + updated_epoch_millis / 1e9``."""
    recency = 0.0
    if repo.updated_at is not None:
        recency = repo.updated_at.timestamp() * 1000 / RECENCY_DIVISOR
    return repo.stargazers_count * STAR_WEIGHT + recency


def get_top_repositories(
    repos: Sequence[Repository],
    count: int = DEFAULT_FEATURED_COUNT,
) -> list[FeaturedRepository]:
    """Pick the repositories to feature, forks excluded."""
    candidates = [repo for repo in repos if not repo.is_fork]
    ranked = sorted(candidates, key=repository_score, reverse=True)
    return [FeaturedRepository.from_repository(repo) for repo in ranked[:count]]


def get_contributions(
    events: Sequence[GitHubEvent],
    now: datetime | None = None,
) -> ContributionEstimate:
    """Approximate contribution counts from the public event feed.

    This year's figure is twice the number of events created this calendar
    year; the all-time figure is ten times the number of events seen.
    """
    year = (now or utc_now()).year
    this_year_events = [event for event in events if event.created_at.year == year]
    return ContributionEstimate(
        this_year=len(this_year_events) * EVENTS_THIS_YEAR_MULTIPLIER,
        total=len(events) * EVENTS_TOTAL_MULTIPLIER,
    )


def estimate_contributions_from_repos(
    repos: Sequence[Repository],
    now: datetime | None = None,
) -> int:
    """Approximate this year's contributions from repository update dates.

    Fifteen per repository updated this calendar year.
    """
    year = (now or utc_now()).year
    updated_this_year = [
        repo for repo in repos if repo.updated_at is not None and repo.updated_at.year == year
    ]
    return len(updated_this_year) * REPOS_UPDATED_THIS_YEAR_MULTIPLIER


def format_event_action(event: GitHubEvent) -> str:
    """Describe an event in a few words, e.g. ``"Pushed 3 commit(s)"``."""
    payload = event.payload
    event_type = event.event_type

    if event_type is EventType.PUSH:
        size = payload.get("size")
        if size is None:
            size = len(payload.get("commits") or [])
        return f"Pushed {size} commit(s)"
    if event_type is EventType.CREATE:
        return f"Created {payload.get('ref_type', '')}"
    if event_type is EventType.ISSUES:
        return f"{payload.get('action', '')} issue"
    if event_type is EventType.PULL_REQUEST:
        return f"{payload.get('action', '')} pull request"
    if event_type is EventType.WATCH:
        return "Starred repository"
    if event_type is EventType.FORK:
        return "Forked repository"
    if event_type is EventType.ISSUE_COMMENT:
        return "Commented on issue"
    if event_type is EventType.PULL_REQUEST_REVIEW:
        return "Reviewed pull request"

    return event.type


def summarize_recent_activity(
    events: Sequence[GitHubEvent],
    limit: int = DEFAULT_RECENT_ACTIVITY_COUNT,
) -> list[ActivityItem]:
    """Reduce the most recent events to what the activity list shows."""
    return [
        ActivityItem(
            type=event.type,
            repo=event.repo,
            created=event.created_at,
            action=format_event_action(event),
        )
        for event in events[:limit]
    ]
