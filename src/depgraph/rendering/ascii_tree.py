"""Indented ASCII dependency tree.

Layout::

    com.example:app:1.0
      +-org.typelevel:cats-core_2.13:2.9.0
      | +-org.typelevel:cats-kernel_2.13:2.9.0
      +-org.slf4j:slf4j-api:1.7.25 (evicted by: 1.7.36)

Every level is indented by two spaces; ``+-`` introduces a child and ``|``
continues the column of a parent that still has siblings to come. A module
already on the current path is printed once more as ``#-<module> (cycle)``
and not expanded again.

Top-level entries are the modules without incoming edges. Modules that are
not reachable from any of them (pure cycles, or cycles left over after
filtering) are rendered afterwards, taking the smallest unvisited id as a
synthetic root each time, until every module has been printed.
"""

from __future__ import annotations

from typing import Sequence

from depgraph.core.filters import FilterRule
from depgraph.core.model import Module, ModuleGraph, ModuleId
from depgraph.core.transformations import apply_filter_rules

_INDENT = "  "
_BAR = "| "
_CHILD = "+-"
_CYCLE = "#-"


def display_module(module: Module) -> str:
    """One-line description of a module for text renderings."""
    text = module.id.id_string + module.extra_info
    if module.error is not None:
        text += f" (error: {module.error})"
    if module.resolved_version is not None:
        text += f" (evicted by: {module.resolved_version})"
    return text


def _limit(line: str, max_column: int | None) -> str:
    if max_column is not None and len(line) > max_column:
        return line[: max(max_column - 2, 0)] + ".."
    return line


def _layout(
    graph: ModuleGraph,
    root: Module,
    visited: set[ModuleId],
    max_column: int | None,
) -> list[str]:
    lines: list[str] = []
    # (module, sibling-continuation flags per level, ids on the current path)
    stack: list[tuple[Module, tuple[bool, ...], frozenset[ModuleId]]] = [
        (root, (), frozenset())
    ]
    while stack:
        module, flags, path = stack.pop()
        prefix = ""
        if flags:
            prefix = _INDENT + "".join(_BAR if f else _INDENT for f in flags[:-1])

        if module.id in path:
            lines.append(_limit(f"{prefix}{_CYCLE}{display_module(module)} (cycle)", max_column))
            continue

        connector = _CHILD if flags else ""
        lines.append(_limit(f"{prefix}{connector}{display_module(module)}", max_column))
        visited.add(module.id)

        children = graph.dependencies_of(module.id)
        child_path = path | {module.id}
        for index in range(len(children) - 1, -1, -1):
            has_more = index < len(children) - 1
            stack.append((children[index], flags + (has_more,), child_path))
    return lines


def render_tree(
    graph: ModuleGraph,
    rules: Sequence[FilterRule] = (),
    max_column: int | None = None,
) -> str:
    """Render ``graph`` as an indented ASCII tree.

    Args:
        graph: The module graph.
        rules: Filter rules applied before rendering. Empty keeps everything.
        max_column: Truncate longer lines with ``..``. None disables truncation.

    Returns:
        The tree text; an empty string for an empty graph.
    """
    scoped = apply_filter_rules(rules, graph)
    visited: set[ModuleId] = set()
    blocks: list[list[str]] = []

    for root in scoped.roots():
        blocks.append(_layout(scoped, root, visited, max_column))

    for module in scoped.nodes:
        if module.id not in visited:
            blocks.append(_layout(scoped, module, visited, max_column))

    return "\n".join(line for block in blocks for line in block)
