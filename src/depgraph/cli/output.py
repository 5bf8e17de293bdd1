"""Rich output helpers for the depgraph CLI.

Renderings that are meant to be diffed or piped (trees, lists, DOT) are
written to stdout verbatim with ``click.echo``. Everything decorative goes
through the consoles here: tables to stdout, status lines and errors to
stderr.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from depgraph.core.model import ModuleId
from depgraph.rendering.statistics import GraphStatistics

console = Console()
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_written(kind: str, path: Path | str) -> None:
    err_console.print(f"[green]Wrote {escape(kind)}[/green] {escape(str(path))}")


def print_nothing_to_show() -> None:
    err_console.print("[dim]Nothing to show: the graph is empty.[/dim]")


def print_statistics_table(stats: GraphStatistics) -> None:
    """Print graph counts as a summary line plus a per-organization table."""
    console.print(
        f"[bold]{stats.total}[/bold] modules: "
        f"[green]{stats.used} used[/green], "
        f"[yellow]{stats.evicted} evicted[/yellow], "
        f"[red]{stats.failed} failed[/red], "
        f"{stats.edges} edges, {stats.organization_count} organizations"
    )
    if not stats.organizations:
        return

    table = Table(title="Modules per organization", show_header=True, header_style="bold")
    table.add_column("Organization", style="bold")
    table.add_column("Total", justify="right")
    table.add_column("Used", justify="right", style="green")
    table.add_column("Evicted", justify="right", style="yellow")
    for counts in stats.organizations:
        table.add_row(
            escape(counts.organization),
            str(counts.total),
            str(counts.used),
            str(counts.evicted),
        )
    console.print(table)


def print_license_table(groups: list[tuple[str, list[ModuleId]]]) -> None:
    table = Table(title="Licenses of used modules", show_header=True, header_style="bold")
    table.add_column("License", style="bold")
    table.add_column("Modules", justify="right")
    for label, members in groups:
        table.add_row(escape(label), str(len(members)))
    console.print(table)
