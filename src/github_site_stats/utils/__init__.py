"""Utility modules for GitHub Site Stats."""

from github_site_stats.utils.formatting import (
    format_timestamp,
    language_color,
    parse_datetime,
    time_ago,
    utc_now,
)

__all__ = [
    "parse_datetime",
    "format_timestamp",
    "utc_now",
    "time_ago",
    "language_color",
]
