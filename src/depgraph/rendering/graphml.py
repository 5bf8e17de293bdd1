"""GraphML rendering via networkx.

The graph is copied into a ``networkx.MultiDiGraph`` (edge multiplicity is
preserved) and serialized with ``networkx.generate_graphml``, which declares
every ``<key>`` before the ``<graph>`` element. Node ids are
``ModuleId.id_string``; edge ids are ``e0``, ``e1``, ... in edge order.

Node data keys: ``organization``, ``name``, ``version``, ``used`` and, when
present, ``license``, ``evicted_by``, ``error``. Absent optional fields are
omitted rather than written as empty strings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import networkx as nx

from depgraph.core.filters import FilterRule
from depgraph.core.model import ModuleGraph
from depgraph.core.transformations import apply_filter_rules

logger = logging.getLogger(__name__)


def to_networkx(graph: ModuleGraph) -> nx.MultiDiGraph:
    """Copy ``graph`` into a networkx multigraph, skipping dangling edges."""
    digraph = nx.MultiDiGraph()
    for module in graph.nodes:
        attributes = {
            "organization": module.id.organization,
            "name": module.id.name,
            "version": module.id.version,
            "license": module.license,
            "evicted_by": module.resolved_version,
            "error": module.error,
            "used": module.is_used,
        }
        digraph.add_node(
            module.id.id_string,
            **{k: v for k, v in attributes.items() if v is not None},
        )

    index = 0
    for edge in graph.edges:
        if graph.is_dangling(edge):
            continue
        digraph.add_edge(
            edge.source.id_string, edge.target.id_string, key=f"e{index}"
        )
        index += 1
    return digraph


def render_graphml(graph: ModuleGraph, rules: Sequence[FilterRule] = ()) -> str:
    """Render ``graph`` as a GraphML document.

    Args:
        graph: The module graph.
        rules: Filter rules applied before rendering.

    Returns:
        The GraphML XML text.
    """
    scoped = apply_filter_rules(rules, graph)
    return "\n".join(nx.generate_graphml(to_networkx(scoped)))


def write_graphml(
    graph: ModuleGraph, path: str | Path, rules: Sequence[FilterRule] = ()
) -> Path:
    """Render ``graph`` as GraphML and write it to ``path``.

    Parent directories are created if needed.

    Returns:
        The resolved path of the written file.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(render_graphml(graph, rules) + "\n", encoding="utf-8")
    logger.info("Wrote GraphML to %s", target)
    return target.resolve()
