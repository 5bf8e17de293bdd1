"""``depgraph dot`` and ``depgraph graphml`` -- write graph files.

Output paths default to ``<target_dir>/dependencies-<configuration>.dot``
and ``.graphml`` from the settings.

Exit Codes:
    0 -- File written.
    2 -- Unsupported report or malformed filter rule.
"""

from __future__ import annotations

from pathlib import Path

import click

from depgraph.cli.common import command_settings, fail, load_graph, report_options
from depgraph.cli.output import print_written
from depgraph.core.filters import parse_filter_rules
from depgraph.exceptions import DepGraphError
from depgraph.rendering.dot import LabelRendering, dot_graph
from depgraph.rendering.graphml import write_graphml

_LABEL_CHOICES = {mode.value: mode for mode in LabelRendering}


@click.command("dot")
@report_options
@click.argument("filters", nargs=-1)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output path (default: <target>/dependencies-<configuration>.dot).",
)
@click.option(
    "--labels",
    type=click.Choice(sorted(_LABEL_CHOICES)),
    default=LabelRendering.ANGLE_BRACKETS.value,
    show_default=True,
    help="How node labels are written.",
)
@click.pass_context
def dot_command(
    ctx: click.Context,
    report: str,
    configuration: str | None,
    keep_platform_library: bool,
    filters: tuple[str, ...],
    output: str | None,
    labels: str,
) -> None:
    """Write REPORT as a Graphviz DOT file."""
    settings = command_settings(ctx, configuration)
    try:
        rules = parse_filter_rules(filters)
        graph = load_graph(settings, report, keep_platform_library)
    except DepGraphError as exc:
        fail(exc)

    text = dot_graph(
        graph,
        header=settings.dot_header,
        node_label=settings.node_label,
        label_rendering=_LABEL_CHOICES[labels],
        rules=rules,
    )
    path = Path(output) if output else settings.dot_file
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n", encoding="utf-8")
    print_written("DOT graph to", path)


@click.command("graphml")
@report_options
@click.argument("filters", nargs=-1)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output path (default: <target>/dependencies-<configuration>.graphml).",
)
@click.pass_context
def graphml_command(
    ctx: click.Context,
    report: str,
    configuration: str | None,
    keep_platform_library: bool,
    filters: tuple[str, ...],
    output: str | None,
) -> None:
    """Write REPORT as a GraphML file."""
    settings = command_settings(ctx, configuration)
    try:
        rules = parse_filter_rules(filters)
        graph = load_graph(settings, report, keep_platform_library)
    except DepGraphError as exc:
        fail(exc)

    path = write_graphml(graph, Path(output) if output else settings.graphml_file, rules)
    print_written("GraphML to", path)
