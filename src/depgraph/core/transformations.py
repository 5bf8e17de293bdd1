"""Pure graph-to-graph transformations.

Each function takes a ``ModuleGraph`` and returns a new one; the input is
never modified. All traversals carry an explicit visited set, so cyclic
graphs terminate.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import replace
from typing import Sequence

from depgraph.core.filters import FilterRule, matches_any
from depgraph.core.model import Edge, Module, ModuleGraph, ModuleId

logger = logging.getLogger(__name__)

DEFAULT_PLATFORM_ORGANIZATION = "org.scala-lang"
DEFAULT_PLATFORM_NAME = "scala-library"
PLATFORM_LIBRARY_MARKER = " [S]"


def reverse_graph_starting_at(graph: ModuleGraph, root: ModuleId) -> ModuleGraph:
    """Extract ``root`` and every module that transitively depends on it.

    The traversal walks edges backwards (BFS over dependents), but the
    returned edges keep their original direction so a rendering still reads
    "X depends on Y". Only edges whose endpoints are both in the reachable
    set are kept, in their original order.

    Args:
        graph: The full module graph.
        root: The module whose dependents are wanted.

    Returns:
        The reverse subgraph, or an empty graph when ``root`` is unknown.
    """
    if root not in graph:
        logger.debug("Module %s not in graph, reverse graph is empty", root)
        return ModuleGraph.empty()

    visited: set[ModuleId] = {root}
    queue: deque[ModuleId] = deque([root])
    while queue:
        current = queue.popleft()
        for dependent in graph.dependents_of(current):
            if dependent.id not in visited:
                visited.add(dependent.id)
                queue.append(dependent.id)

    nodes = [m for m in graph.nodes if m.id in visited]
    edges = [e for e in graph.edges if e.source in visited and e.target in visited]
    logger.debug("Reverse graph for %s: %d modules, %d edges", root, len(nodes), len(edges))
    return ModuleGraph.of(nodes, edges)


def is_platform_library(
    module_id: ModuleId,
    organization: str = DEFAULT_PLATFORM_ORGANIZATION,
    name: str = DEFAULT_PLATFORM_NAME,
) -> bool:
    return module_id.organization == organization and module_id.name == name


def ignore_platform_library(
    platform_version: str | None,
    graph: ModuleGraph,
    organization: str = DEFAULT_PLATFORM_ORGANIZATION,
    name: str = DEFAULT_PLATFORM_NAME,
) -> ModuleGraph:
    """Remove the platform runtime library from the graph.

    Every node naming the platform artifact is dropped, whatever its
    version, together with every edge touching it. Modules that depended on
    it directly keep that fact visible through a ``" [S]"`` suffix on their
    ``extra_info``, so no dependency information is silently lost.

    Args:
        platform_version: Version the build pins the platform library to.
            A removed node with a different version is logged as a warning.
        graph: Input graph.
        organization: Organization of the platform artifact.
        name: Name of the platform artifact.

    Returns:
        A new graph without the platform library.
    """
    def _is_platform(module_id: ModuleId) -> bool:
        return is_platform_library(module_id, organization, name)

    dependents: set[ModuleId] = {
        e.source for e in graph.edges if _is_platform(e.target) and not _is_platform(e.source)
    }

    nodes: list[Module] = []
    for module in graph.nodes:
        if _is_platform(module.id):
            if platform_version is not None and module.id.version != platform_version:
                logger.warning(
                    "Platform library %s does not match pinned version %s",
                    module.id, platform_version,
                )
            continue
        if module.id in dependents:
            module = replace(module, extra_info=module.extra_info + PLATFORM_LIBRARY_MARKER)
        nodes.append(module)

    edges = [
        e for e in graph.edges if not _is_platform(e.source) and not _is_platform(e.target)
    ]
    return ModuleGraph.of(nodes, edges)


def apply_filter_rules(rules: Sequence[FilterRule], graph: ModuleGraph) -> ModuleGraph:
    """Return the subgraph induced by modules matching ``rules``.

    An empty rule set returns ``graph`` itself. Edges with a filtered-out
    endpoint are dropped; dangling edges of the input are dropped as well,
    since their missing endpoint cannot match.
    """
    if not rules:
        return graph
    kept = {m.id for m in graph.nodes if matches_any(rules, m.id)}
    nodes = [m for m in graph.nodes if m.id in kept]
    edges: list[Edge] = [e for e in graph.edges if e.source in kept and e.target in kept]
    logger.debug(
        "Filter rules kept %d of %d modules", len(nodes), graph.node_count,
    )
    return ModuleGraph.of(nodes, edges)
