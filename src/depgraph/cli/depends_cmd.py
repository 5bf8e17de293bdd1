"""``depgraph what-depends-on REPORT ORG [NAME] [VERSION]`` -- reverse tree.

Resolves the typed tokens against the modules of the report and prints the
tree of every module that transitively depends on the match. ORG, NAME and
VERSION complete from the report in shells with click completion enabled.

Exit Codes:
    0 -- Tree printed.
    1 -- No module, or more than one, matches the tokens.
    2 -- Unsupported report.
"""

from __future__ import annotations

import logging

import click
from click.shell_completion import CompletionItem

from depgraph.cli.common import command_settings, fail, load_graph, report_options
from depgraph.cli.output import print_nothing_to_show
from depgraph.config import load_settings
from depgraph.core.matching import complete_module_tokens, match_module_id
from depgraph.core.transformations import reverse_graph_starting_at
from depgraph.exceptions import DepGraphError
from depgraph.rendering.ascii_tree import render_tree

logger = logging.getLogger(__name__)

_TOKEN_PARAMS = ("organization", "name", "version")


def _complete_token(
    ctx: click.Context, param: click.Parameter, incomplete: str
) -> list[CompletionItem]:
    """Offer the values known at this token position of the identity."""
    report = ctx.params.get("report")
    if not report:
        return []
    position = _TOKEN_PARAMS.index(param.name)
    previous = [ctx.params.get(name) for name in _TOKEN_PARAMS[:position]]
    if any(token is None for token in previous):
        return []

    try:
        settings = load_settings(ctx.find_root().params.get("config_file"))
        settings = settings.with_overrides(configuration=ctx.params.get("configuration"))
        graph = load_graph(
            settings, report, bool(ctx.params.get("keep_platform_library"))
        )
    except DepGraphError as exc:
        logger.debug("No completions for %s: %s", param.name, exc)
        return []

    candidates = complete_module_tokens(previous, incomplete, graph.modules)
    return [CompletionItem(value) for value in candidates]


@click.command("what-depends-on")
@report_options
@click.argument("organization", shell_complete=_complete_token)
@click.argument("name", required=False, default=None, shell_complete=_complete_token)
@click.argument("version", required=False, default=None, shell_complete=_complete_token)
@click.pass_context
def what_depends_on_command(
    ctx: click.Context,
    report: str,
    configuration: str | None,
    keep_platform_library: bool,
    organization: str,
    name: str | None,
    version: str | None,
) -> None:
    """Show every module of REPORT that depends on ORGANIZATION[:NAME[:VERSION]].

    Partial input is accepted as long as it matches exactly one module.
    """
    settings = command_settings(ctx, configuration)
    tokens = [t for t in (organization, name, version) if t is not None]
    try:
        graph = load_graph(settings, report, keep_platform_library)
        target = match_module_id(tokens, graph.modules)
    except DepGraphError as exc:
        fail(exc)

    text = render_tree(reverse_graph_starting_at(graph, target))
    if text:
        click.echo(text)
    else:
        print_nothing_to_show()
