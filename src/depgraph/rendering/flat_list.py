"""Flat, sorted listing of module ids."""

from __future__ import annotations

from typing import Callable, Sequence

from depgraph.core.filters import FilterRule
from depgraph.core.model import Module, ModuleGraph
from depgraph.core.transformations import apply_filter_rules


def dependency_list(
    graph: ModuleGraph,
    rules: Sequence[FilterRule] = (),
    display: Callable[[Module], str] = lambda m: m.id.id_string,
    exclude_evicted: bool = False,
) -> list[str]:
    """Distinct display lines of the in-scope modules, sorted.

    Args:
        graph: The module graph.
        rules: Filter rules applied first.
        display: Maps a module to its line.
        exclude_evicted: Leave out modules that lost version arbitration.

    Returns:
        The sorted, de-duplicated lines.
    """
    scoped = apply_filter_rules(rules, graph)
    return sorted(
        {display(m) for m in scoped.nodes if not (exclude_evicted and m.is_evicted)}
    )


def render_dependency_list(
    graph: ModuleGraph,
    rules: Sequence[FilterRule] = (),
    exclude_evicted: bool = False,
) -> str:
    return "\n".join(dependency_list(graph, rules, exclude_evicted=exclude_evicted))
