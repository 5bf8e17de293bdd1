"""Pieces shared by every depgraph command.

Each command takes the report path plus the same two options, loads the
graph the same way, and turns ``DepGraphError`` into a red message and an
exit code instead of a traceback:

    1 -- the requested module is unknown or ambiguous.
    2 -- the report, settings, filter rules, or stored graph are unusable.
"""

from __future__ import annotations

import sys
from typing import Callable, NoReturn

import click

from depgraph.backend import load_module_graph
from depgraph.cli.output import print_error
from depgraph.config import GraphSettings
from depgraph.core.model import ModuleGraph
from depgraph.core.transformations import ignore_platform_library
from depgraph.exceptions import DepGraphError, ModuleLookupError

EXIT_LOOKUP_ERROR = 1
EXIT_INPUT_ERROR = 2


def exit_code_for(error: DepGraphError) -> int:
    if isinstance(error, ModuleLookupError):
        return EXIT_LOOKUP_ERROR
    return EXIT_INPUT_ERROR


def fail(error: DepGraphError) -> NoReturn:
    print_error(str(error))
    sys.exit(exit_code_for(error))


def report_options(func: Callable) -> Callable:
    """Add the REPORT argument and the shared graph-loading options."""
    func = click.option(
        "--keep-platform-library",
        is_flag=True,
        default=False,
        help="Keep the platform runtime library in the graph.",
    )(func)
    func = click.option(
        "--configuration", "-c",
        type=str,
        default=None,
        help="Build configuration to read from the report (default: from settings).",
    )(func)
    func = click.argument("report", type=click.Path(dir_okay=False))(func)
    return func


def command_settings(ctx: click.Context, configuration: str | None) -> GraphSettings:
    """Settings from the group, with the command's ``--configuration`` applied."""
    settings = ctx.find_object(GraphSettings) or GraphSettings()
    return settings.with_overrides(configuration=configuration)


def load_graph(
    settings: GraphSettings, report: str, keep_platform_library: bool = False
) -> ModuleGraph:
    """Load ``report`` and drop the platform library unless asked to keep it.

    Raises:
        UnsupportedReportError: If ``report`` is not a supported report file.
    """
    graph = load_module_graph(report, settings.configuration)
    if settings.filter_platform_library and not keep_platform_library:
        graph = ignore_platform_library(
            settings.platform_version,
            graph,
            organization=settings.platform_organization,
            name=settings.platform_name,
        )
    return graph
