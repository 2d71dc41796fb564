"""Date parsing and display formatting helpers."""

from datetime import datetime, timezone

# Seconds per display unit, largest first
TIME_INTERVALS: dict[str, int] = {
    "year": 31536000,
    "month": 2592000,
    "week": 604800,
    "day": 86400,
    "hour": 3600,
    "minute": 60,
}

LANGUAGE_COLORS: dict[str, str] = {
    "JavaScript": "#f1e05a",
    "TypeScript": "#3178c6",
    "Python": "#3572A5",
    "Java": "#b07219",
    "Go": "#00ADD8",
    "Ruby": "#701516",
    "PHP": "#4F5D95",
    "C++": "#f34b7d",
    "C": "#555555",
    "C#": "#178600",
    "Swift": "#ffac45",
    "Kotlin": "#A97BFF",
    "Rust": "#dea584",
    "HTML": "#e34c26",
    "CSS": "#563d7c",
    "Vue": "#41b883",
    "Shell": "#89e051",
    "Dart": "#00B4AB",
    "R": "#198CE7",
    "Scala": "#c22d40",
}

DEFAULT_LANGUAGE_COLOR = "#858585"


def parse_datetime(value: str | None) -> datetime | None:
    """Parse ISO datetime string."""
    if not value:
        return None
    try:
        # Handle ISO format with or without Z suffix
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        parsed = datetime.fromisoformat(value)
    except (ValueError, TypeError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: datetime | None) -> str | None:
    """Format a datetime the way the GitHub API does (UTC, ``Z`` suffix)."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def time_ago(value: datetime | str | None, now: datetime | None = None) -> str:
    """Describe how long ago ``value`` was, e.g. ``"3 days ago"``.

    Picks the largest unit with a count of at least one and falls back to
    ``"just now"`` for anything under a minute (or in the future).
    """
    if isinstance(value, str):
        value = parse_datetime(value)
    if value is None:
        return "just now"

    now = now or utc_now()
    seconds = int((now - value).total_seconds())

    for name, seconds_in_interval in TIME_INTERVALS.items():
        interval = seconds // seconds_in_interval
        if interval >= 1:
            return f"{interval} {name}{'s' if interval != 1 else ''} ago"

    return "just now"


def language_color(language: str | None) -> str:
    """Get the display color for a language."""
    if not language:
        return DEFAULT_LANGUAGE_COLOR
    return LANGUAGE_COLORS.get(language, DEFAULT_LANGUAGE_COLOR)
