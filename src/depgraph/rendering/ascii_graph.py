"""Overview listing of a graph, grouped by organization.

Unlike the tree, this view does not follow the topology. Each organization
gets a heading, and each of its modules one aligned row with its status and
its direct fan-out (``deps``) and fan-in (``used by``)::

    org.slf4j (2 modules)
      slf4j-api     1.7.25  evicted by 1.7.36  deps 0  used by 1
      slf4j-api     1.7.36  used               deps 0  used by 2

    3 modules, 2 used, 1 evicted, 0 failed
"""

from __future__ import annotations

from itertools import groupby
from typing import Sequence

from depgraph.core.filters import FilterRule
from depgraph.core.model import Module, ModuleGraph
from depgraph.core.transformations import apply_filter_rules


def module_status(module: Module) -> str:
    if module.error is not None:
        return "failed"
    if module.resolved_version is not None:
        return f"evicted by {module.resolved_version}"
    return "used"


def render_ascii_graph(graph: ModuleGraph, rules: Sequence[FilterRule] = ()) -> str:
    """Render the organization-grouped overview of ``graph``.

    Args:
        graph: The module graph.
        rules: Filter rules applied before rendering.

    Returns:
        The overview text, ending with a one-line summary.
    """
    scoped = apply_filter_rules(rules, graph)
    rows = [
        (
            m,
            m.id.name,
            m.id.version,
            module_status(m),
            f"deps {len(scoped.dependencies_of(m.id))}",
            f"used by {len(scoped.dependents_of(m.id))}",
        )
        for m in scoped.nodes
    ]
    widths = [max((len(r[i]) for r in rows), default=0) for i in range(1, 5)]

    lines: list[str] = []
    for organization, group in groupby(rows, key=lambda r: r[0].id.organization):
        members = list(group)
        noun = "module" if len(members) == 1 else "modules"
        lines.append(f"{organization} ({len(members)} {noun})")
        for _, *cells in members:
            padded = [c.ljust(w) for c, w in zip(cells, widths)]
            lines.append(("  " + "  ".join(padded + [cells[-1]])).rstrip())
        lines.append("")

    used = sum(1 for m in scoped.nodes if m.is_used)
    evicted = sum(1 for m in scoped.nodes if m.is_evicted)
    failed = sum(1 for m in scoped.nodes if m.had_error)
    lines.append(
        f"{scoped.node_count} modules, {used} used, {evicted} evicted, {failed} failed"
    )
    return "\n".join(lines)
