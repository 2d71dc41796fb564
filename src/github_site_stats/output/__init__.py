"""Output handlers for GitHub Site Stats."""

from github_site_stats.output.console import Console
from github_site_stats.output.page import Page, Slot
from github_site_stats.output.renderer import LiveStatsRenderer
from github_site_stats.output.snapshot_writer import serialize_snapshot, write_snapshot

__all__ = [
    "write_snapshot",
    "serialize_snapshot",
    "Console",
    "Page",
    "Slot",
    "LiveStatsRenderer",
]
