"""``depgraph browse-graph`` and ``depgraph browse-tree`` -- HTML views.

Writes the pages into ``<target_dir>/browse-dependency-graph`` or
``<target_dir>/browse-dependency-tree`` (or ``--target``) and optionally
opens them in the default browser.

Exit Codes:
    0 -- Pages written.
    2 -- Unsupported report or malformed filter rule.
"""

from __future__ import annotations

import webbrowser

import click

from depgraph.cli.common import command_settings, fail, load_graph, report_options
from depgraph.cli.output import print_written
from depgraph.core.filters import parse_filter_rules
from depgraph.exceptions import DepGraphError
from depgraph.rendering.dot import LabelRendering, dot_graph
from depgraph.rendering.html import write_graph_html, write_tree_html
from depgraph.rendering.tree_view import render_tree_json

_target_option = click.option(
    "--target",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for the generated pages.",
)
_open_option = click.option(
    "--open", "open_browser",
    is_flag=True,
    default=False,
    help="Open the page in the default browser.",
)


def _finish(uri: str, open_browser: bool) -> None:
    print_written("page", uri)
    if open_browser:
        webbrowser.open(uri)


@click.command("browse-graph")
@report_options
@click.argument("filters", nargs=-1)
@_target_option
@_open_option
@click.pass_context
def browse_graph_command(
    ctx: click.Context,
    report: str,
    configuration: str | None,
    keep_platform_library: bool,
    filters: tuple[str, ...],
    target: str | None,
    open_browser: bool,
) -> None:
    """Write an interactive graph page for REPORT."""
    settings = command_settings(ctx, configuration)
    try:
        rules = parse_filter_rules(filters)
        graph = load_graph(settings, report, keep_platform_library)
    except DepGraphError as exc:
        fail(exc)

    dot_text = dot_graph(
        graph,
        header=settings.dot_header,
        node_label=settings.node_label,
        label_rendering=LabelRendering.LABEL_TYPE_HTML,
        rules=rules,
    )
    uri = write_graph_html(dot_text, target or settings.browse_graph_dir)
    _finish(uri, open_browser)


@click.command("browse-tree")
@report_options
@click.argument("filters", nargs=-1)
@_target_option
@_open_option
@click.pass_context
def browse_tree_command(
    ctx: click.Context,
    report: str,
    configuration: str | None,
    keep_platform_library: bool,
    filters: tuple[str, ...],
    target: str | None,
    open_browser: bool,
) -> None:
    """Write a collapsible tree page for REPORT."""
    settings = command_settings(ctx, configuration)
    try:
        rules = parse_filter_rules(filters)
        graph = load_graph(settings, report, keep_platform_library)
    except DepGraphError as exc:
        fail(exc)

    uri = write_tree_html(render_tree_json(graph, rules), target or settings.browse_tree_dir)
    _finish(uri, open_browser)
