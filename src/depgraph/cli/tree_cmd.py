"""``depgraph tree`` and ``depgraph ascii-graph`` -- text views of a graph.

Exit Codes:
    0 -- Rendering written (possibly empty).
    2 -- Unsupported report or malformed filter rule.
"""

from __future__ import annotations

from pathlib import Path

import click

from depgraph.cli.common import command_settings, fail, load_graph, report_options
from depgraph.cli.output import print_nothing_to_show, print_written
from depgraph.core.filters import parse_filter_rules
from depgraph.exceptions import DepGraphError
from depgraph.rendering.ascii_graph import render_ascii_graph
from depgraph.rendering.ascii_tree import render_tree


@click.command("tree")
@report_options
@click.argument("filters", nargs=-1)
@click.option(
    "--out", "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the tree to this file instead of stdout.",
)
@click.option(
    "--max-column",
    type=click.IntRange(min=10),
    default=None,
    help="Truncate lines longer than this many characters.",
)
@click.pass_context
def tree_command(
    ctx: click.Context,
    report: str,
    configuration: str | None,
    keep_platform_library: bool,
    filters: tuple[str, ...],
    out: str | None,
    max_column: int | None,
) -> None:
    """Print the dependency tree of REPORT.

    FILTERS are ``organization[:name[:version]]`` glob patterns; when given,
    only matching modules are shown.
    """
    settings = command_settings(ctx, configuration)
    try:
        rules = parse_filter_rules(filters)
        graph = load_graph(settings, report, keep_platform_library)
    except DepGraphError as exc:
        fail(exc)

    text = render_tree(graph, rules, max_column=max_column)
    if out is not None:
        path = Path(out)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text + "\n" if text else "", encoding="utf-8")
        print_written("dependency tree to", path)
    elif text:
        click.echo(text)
    else:
        print_nothing_to_show()


@click.command("ascii-graph")
@report_options
@click.argument("filters", nargs=-1)
@click.pass_context
def ascii_graph_command(
    ctx: click.Context,
    report: str,
    configuration: str | None,
    keep_platform_library: bool,
    filters: tuple[str, ...],
) -> None:
    """Print an overview of REPORT grouped by organization."""
    settings = command_settings(ctx, configuration)
    try:
        rules = parse_filter_rules(filters)
        graph = load_graph(settings, report, keep_platform_library)
    except DepGraphError as exc:
        fail(exc)

    click.echo(render_ascii_graph(graph, rules))
