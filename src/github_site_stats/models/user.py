"""User profile model."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from github_site_stats.utils.formatting import format_timestamp, parse_datetime


class UserProfile(BaseModel):
    """GitHub user profile data, as seen at fetch time."""

    model_config = ConfigDict(frozen=True)

    login: str
    name: str | None = None
    bio: str | None = None
    location: str | None = None
    followers: int = 0
    following: int = 0
    public_repos: int = 0
    public_gists: int = 0
    avatar_url: str = ""
    html_url: str = ""
    created_at: datetime | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "UserProfile":
        """Create from GitHub REST API response."""
        return cls(
            login=data.get("login", ""),
            name=data.get("name"),
            bio=data.get("bio"),
            location=data.get("location"),
            followers=data.get("followers") or 0,
            following=data.get("following") or 0,
            public_repos=data.get("public_repos") or 0,
            public_gists=data.get("public_gists") or 0,
            avatar_url=data.get("avatar_url") or "",
            html_url=data.get("html_url") or "",
            created_at=parse_datetime(data.get("created_at")),
        )

    def to_snapshot(self) -> dict[str, Any]:
        """Subset of the profile written to the snapshot file."""
        return {
            "login": self.login,
            "name": self.name,
            "bio": self.bio,
            "location": self.location,
            "followers": self.followers,
            "following": self.following,
            "publicRepos": self.public_repos,
            "publicGists": self.public_gists,
            "avatarUrl": self.avatar_url,
            "profileUrl": self.html_url,
            "createdAt": format_timestamp(self.created_at),
        }
