"""Activity and event data models."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from github_site_stats.utils.formatting import format_timestamp, parse_datetime, utc_now


class EventType(str, Enum):
    """GitHub event types the site knows how to describe."""

    PUSH = "PushEvent"
    CREATE = "CreateEvent"
    WATCH = "WatchEvent"
    FORK = "ForkEvent"
    ISSUES = "IssuesEvent"
    PULL_REQUEST = "PullRequestEvent"
    ISSUE_COMMENT = "IssueCommentEvent"
    PULL_REQUEST_REVIEW = "PullRequestReviewEvent"
    OTHER = "Other"


class GitHubEvent(BaseModel):
    """GitHub event from the public Events API."""

    type: str
    repo: str
    created_at: datetime
    payload: dict = Field(default_factory=dict)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "GitHubEvent":
        """Create from GitHub Events API response."""
        return cls(
            type=data.get("type") or "",
            repo=(data.get("repo") or {}).get("name", ""),
            created_at=parse_datetime(data.get("created_at")) or utc_now(),
            payload=data.get("payload") or {},
        )

    @property
    def event_type(self) -> EventType:
        """Get typed event type."""
        try:
            return EventType(self.type)
        except ValueError:
            return EventType.OTHER


class ActivityItem(BaseModel):
    """One entry of the recent activity list."""

    type: str
    repo: str
    created: datetime
    action: str

    def to_snapshot(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "repo": self.repo,
            "created": format_timestamp(self.created),
            "action": self.action,
        }


class ContributionEstimate(BaseModel):
    """Rough activity estimate.

    Derived from public events with fixed multipliers; it is not GitHub's
    contribution calendar and should be displayed as approximate.
    """

    this_year: int = 0
    total: int = 0

    def to_snapshot(self) -> dict[str, Any]:
        return {"thisYear": self.this_year, "total": self.total}
