"""depgraph CLI -- inspect, filter, and render resolved dependency graphs.

Entry point for the ``depgraph`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    tree            -- Indented dependency tree (optionally filtered).
    ascii-graph     -- Overview grouped by organization.
    dot             -- Write a Graphviz DOT file.
    graphml         -- Write a GraphML file.
    browse-graph    -- Write (and open) an interactive graph page.
    browse-tree     -- Write (and open) a collapsible tree page.
    list            -- Sorted list of module ids.
    stats           -- Module counts, or per-module sizes with --sizes.
    licenses        -- Used modules grouped by license.
    what-depends-on -- Everything that depends on a given module.
    store           -- Persist the computed graph for later commands.

Usage::

    depgraph tree target/resolution-cache/reports/com.example-app-compile.xml
    depgraph tree report.xml 'org.typelevel:*' --out tree.txt
    depgraph what-depends-on report.xml org.slf4j slf4j-api 1.7.36
    depgraph --config depgraph.yaml dot report.json -c runtime
    depgraph store report.xml -o graph.json && depgraph stats graph.json
"""

from __future__ import annotations

import logging

import click
from rich.logging import RichHandler

from depgraph import __version__
from depgraph.cli.browse_cmd import browse_graph_command, browse_tree_command
from depgraph.cli.common import fail
from depgraph.cli.depends_cmd import what_depends_on_command
from depgraph.cli.export_cmd import dot_command, graphml_command
from depgraph.cli.output import err_console
from depgraph.cli.report_cmd import licenses_command, list_command, stats_command
from depgraph.cli.store_cmd import store_command
from depgraph.cli.tree_cmd import ascii_graph_command, tree_command
from depgraph.config import load_settings
from depgraph.exceptions import ConfigError


def configure_logging(verbose: bool) -> None:
    """Route ``depgraph`` log records to a rich handler on stderr."""
    package_logger = logging.getLogger("depgraph")
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)
    handler = RichHandler(console=err_console, show_time=False, show_path=verbose)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log debug details (filtering, transformations, settings).",
)
@click.option(
    "--config", "config_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Settings file (default: $DEPGRAPH_CONFIG or ./depgraph.yaml).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_file: str | None) -> None:
    """depgraph: Inspect, filter, and render resolved dependency graphs.

    Every command reads a resolution report (Ivy XML, a native update
    report in JSON, or a graph written by ``depgraph store``) and renders
    it as text, a file, or a browsable page.
    """
    configure_logging(verbose)
    try:
        ctx.obj = load_settings(config_file)
    except ConfigError as exc:
        fail(exc)


# Register all subcommands
cli.add_command(tree_command)
cli.add_command(ascii_graph_command)
cli.add_command(dot_command)
cli.add_command(graphml_command)
cli.add_command(browse_graph_command)
cli.add_command(browse_tree_command)
cli.add_command(list_command)
cli.add_command(stats_command)
cli.add_command(licenses_command)
cli.add_command(what_depends_on_command)
cli.add_command(store_command)
