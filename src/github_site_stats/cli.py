"""CLI interface for GitHub Site Stats."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from github_site_stats import __version__
from github_site_stats.config import Config, get_config
from github_site_stats.exceptions import GitHubSiteStatsError
from github_site_stats.output.console import Console as OutputConsole
from github_site_stats.output.page import Page
from github_site_stats.output.renderer import ALL_SLOTS
from github_site_stats.sdk import GitHubSiteStats

app = typer.Typer(
    name="github-site-stats",
    help="Collect public GitHub stats for a personal website",
    add_completion=False,
)

console = Console()


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"github-site-stats version {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool = False) -> None:
    """Route library logging through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _resolve_username(username: Optional[str], config: Config, output_console: OutputConsole) -> str:
    resolved = username or config.username
    if not resolved:
        output_console.print_error(
            "No username given. Pass one as an argument or set GITHUB_USERNAME."
        )
        raise typer.Exit(1)
    return resolved


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """GitHub Site Stats - Public GitHub profile statistics for a personal website."""
    pass


@app.command()
def update(
    username: Optional[str] = typer.Argument(None, help="GitHub username (default: from config)"),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Snapshot file path (default: _data/github-stats.json)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Minimal output",
    ),
):
    """Fetch stats and overwrite the snapshot file.

    Examples:
        github-site-stats update octocat
        github-site-stats update octocat -o site/_data/github-stats.json
    """
    setup_logging(verbose)
    output_console = OutputConsole(verbose=verbose, quiet=quiet)
    config = get_config()
    username = _resolve_username(username, config, output_console)
    output_path = output or config.output_path

    output_console.print_header(username, config.is_authenticated)

    try:
        document = asyncio.run(_run_update(username, config, output_path))
    except KeyboardInterrupt:
        output_console.print_warning("Update cancelled")
        raise typer.Exit(1)
    except GitHubSiteStatsError as e:
        output_console.print_error(f"Error updating GitHub stats: {e}")
        raise typer.Exit(1)

    output_console.print_snapshot_summary(document)
    output_console.print_output_path(str(output_path))


async def _run_update(username: str, config: Config, output_path: Path) -> dict:
    """Collect and write the snapshot, returning the written document."""
    async with GitHubSiteStats(username, config=config) as stats:
        snapshot = await stats.update(output_path)
    return snapshot.to_document()


@app.command()
def preview(
    username: Optional[str] = typer.Argument(None, help="GitHub username (default: from config)"),
    animate: bool = typer.Option(
        False,
        "--animate",
        help="Run counter animations at full length",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
):
    """Render the live stats into every slot and print the result."""
    setup_logging(verbose)
    output_console = OutputConsole(verbose=verbose)
    config = get_config()
    username = _resolve_username(username, config, output_console)

    page = Page.with_slots(*ALL_SLOTS)

    async def _render() -> None:
        async with GitHubSiteStats(username, config=config) as stats:
            await stats.render(page, animation_duration=None if animate else 0)

    try:
        asyncio.run(_render())
    except KeyboardInterrupt:
        output_console.print_warning("Preview cancelled")
        raise typer.Exit(1)

    output_console.print_page(page)


@app.command()
def check_token():
    """Check GitHub token configuration."""
    config = get_config()

    if config.is_authenticated:
        console.print("[green]GitHub token is configured[/green]")
    else:
        console.print("[yellow]No GitHub token configured[/yellow]")
        console.print()
        console.print("To configure a token:")
        console.print("  export GITHUB_TOKEN=your_token_here")
        console.print()
        console.print("No special scopes needed for public data access.")


if __name__ == "__main__":
    app()
