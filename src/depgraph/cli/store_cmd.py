"""``depgraph store REPORT -o PATH`` -- persist the computed graph.

The stored JSON is accepted as REPORT by every other command, so a slow
report conversion runs once per build.

Exit Codes:
    0 -- Graph written.
    2 -- Unsupported report.
"""

from __future__ import annotations

import click

from depgraph.cli.common import command_settings, fail, load_graph, report_options
from depgraph.cli.output import print_written
from depgraph.core.store import write_graph
from depgraph.exceptions import DepGraphError


@click.command("store")
@report_options
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False),
    required=True,
    help="Where to write the graph (a .json file).",
)
@click.pass_context
def store_command(
    ctx: click.Context,
    report: str,
    configuration: str | None,
    keep_platform_library: bool,
    output: str,
) -> None:
    """Convert REPORT once and store the resulting graph as JSON."""
    settings = command_settings(ctx, configuration)
    try:
        graph = load_graph(settings, report, keep_platform_library)
    except DepGraphError as exc:
        fail(exc)

    path = write_graph(graph, output)
    print_written(f"graph ({graph.node_count} modules, {graph.edge_count} edges) to", path)
