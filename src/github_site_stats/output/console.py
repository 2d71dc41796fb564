"""Rich console output for update runs."""

from typing import Any

from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.table import Table

from github_site_stats.output.page import Page


class Console:
    """Wrapper for rich console output."""

    def __init__(self, verbose: bool = False, quiet: bool = False):
        self.console = RichConsole()
        self.err_console = RichConsole(stderr=True)
        self.verbose = verbose
        self.quiet = quiet

    def print(self, *args, **kwargs):
        """Print to console (respects quiet mode)."""
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def print_error(self, message: str):
        """Print error message to stderr."""
        self.err_console.print(f"[red]Error:[/red] {message}")

    def print_warning(self, message: str):
        """Print warning message."""
        self.err_console.print(f"[yellow]Warning:[/yellow] {message}")

    def print_success(self, message: str):
        """Print success message."""
        if not self.quiet:
            self.console.print(f"[green]{message}[/green]")

    def print_header(self, username: str, authenticated: bool):
        """Print run header."""
        if self.quiet:
            return

        self.console.print(
            Panel(
                f"[bold blue]GitHub Stats Update[/bold blue]\n"
                f"[dim]Username: {username}[/dim]\n"
                f"[dim]Token available: {authenticated}[/dim]",
                expand=False,
            )
        )

    def print_snapshot_summary(self, document: dict[str, Any]):
        """Print the headline numbers of a snapshot document."""
        if self.quiet:
            return

        user = document.get("user", {})
        repos = document.get("repos", {})
        contributions = document.get("contributions", {})

        table = Table(title="Snapshot", show_header=False, expand=False)
        table.add_column("Metric", style="dim")
        table.add_column("Value")

        table.add_row("Name", user.get("name") or user.get("login", ""))
        table.add_row("Public Repos", str(user.get("publicRepos", 0)))
        table.add_row("Followers", str(user.get("followers", 0)))
        table.add_row("Total Stars", str(repos.get("totalStars", 0)))
        table.add_row("Total Forks", str(repos.get("totalForks", 0)))

        top_langs = repos.get("topLanguages", [])
        if top_langs:
            lang_str = ", ".join(f"{lang['name']} ({lang['percentage']:.1f}%)" for lang in top_langs)
            table.add_row("Top Languages", lang_str)

        table.add_row(
            "Contributions (approx.)",
            f"{contributions.get('thisYear', 0)} this year, {contributions.get('total', 0)} total",
        )

        self.console.print(table)

        featured = repos.get("featured", [])
        if featured and self.verbose:
            repo_table = Table(title="Featured Repositories", expand=False)
            repo_table.add_column("Repository")
            repo_table.add_column("Stars", justify="right")
            repo_table.add_column("Language")

            for repo in featured:
                repo_table.add_row(repo["name"], str(repo["stars"]), repo.get("language") or "-")

            self.console.print(repo_table)

    def print_page(self, page: Page):
        """Print the contents of every slot of a rendered page."""
        if self.quiet:
            return

        table = Table(title="Rendered Slots", expand=False)
        table.add_column("Slot", style="dim")
        table.add_column("Content", overflow="fold")

        for slot in page.slots.values():
            table.add_row(slot.id, slot.html or slot.text or "-")

        self.console.print(table)

    def print_output_path(self, path: str):
        """Print output file path."""
        if not self.quiet:
            self.console.print(f"\n[green]Stats written to:[/green] {path}")
