"""``depgraph list``, ``depgraph stats`` and ``depgraph licenses``.

Plain-text output is byte-stable for a given report so it can be diffed
across builds; ``--table`` switches to rich tables for reading.

Exit Codes:
    0 -- Report printed.
    2 -- Unsupported report or malformed filter rule.
"""

from __future__ import annotations

import click

from depgraph.cli.common import command_settings, fail, load_graph, report_options
from depgraph.cli.output import print_license_table, print_statistics_table
from depgraph.core.filters import parse_filter_rules
from depgraph.exceptions import DepGraphError
from depgraph.rendering.flat_list import render_dependency_list
from depgraph.rendering.licenses import license_info, render_license_info
from depgraph.rendering.statistics import (
    dependency_stats,
    render_module_stats_list,
    render_statistics,
)

_table_option = click.option(
    "--table",
    is_flag=True,
    default=False,
    help="Show a formatted table instead of plain text.",
)


@click.command("list")
@report_options
@click.argument("filters", nargs=-1)
@click.option(
    "--exclude-evicted",
    is_flag=True,
    default=False,
    help="Leave out modules that were evicted by another version.",
)
@click.pass_context
def list_command(
    ctx: click.Context,
    report: str,
    configuration: str | None,
    keep_platform_library: bool,
    filters: tuple[str, ...],
    exclude_evicted: bool,
) -> None:
    """List every module of REPORT, one id per line, sorted."""
    settings = command_settings(ctx, configuration)
    try:
        rules = parse_filter_rules(filters)
        graph = load_graph(settings, report, keep_platform_library)
    except DepGraphError as exc:
        fail(exc)

    text = render_dependency_list(graph, rules, exclude_evicted=exclude_evicted)
    if text:
        click.echo(text)


@click.command("stats")
@report_options
@click.argument("filters", nargs=-1)
@click.option(
    "--sizes",
    is_flag=True,
    default=False,
    help="Show artifact sizes and dependency counts per module instead.",
)
@_table_option
@click.pass_context
def stats_command(
    ctx: click.Context,
    report: str,
    configuration: str | None,
    keep_platform_library: bool,
    filters: tuple[str, ...],
    sizes: bool,
    table: bool,
) -> None:
    """Show module counts for REPORT by status and organization."""
    settings = command_settings(ctx, configuration)
    try:
        rules = parse_filter_rules(filters)
        graph = load_graph(settings, report, keep_platform_library)
    except DepGraphError as exc:
        fail(exc)

    if sizes:
        click.echo(render_module_stats_list(graph, rules))
    elif table:
        print_statistics_table(dependency_stats(graph, rules))
    else:
        click.echo(render_statistics(graph, rules))


@click.command("licenses")
@report_options
@click.argument("filters", nargs=-1)
@_table_option
@click.pass_context
def licenses_command(
    ctx: click.Context,
    report: str,
    configuration: str | None,
    keep_platform_library: bool,
    filters: tuple[str, ...],
    table: bool,
) -> None:
    """Group the used modules of REPORT by license."""
    settings = command_settings(ctx, configuration)
    try:
        rules = parse_filter_rules(filters)
        graph = load_graph(settings, report, keep_platform_library)
    except DepGraphError as exc:
        fail(exc)

    if table:
        print_license_table(license_info(graph, rules))
        return
    text = render_license_info(graph, rules)
    if text:
        click.echo(text)
