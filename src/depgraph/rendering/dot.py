"""Graphviz DOT rendering.

Output shape::

    <header>
        "org:name:1.0"[label=<...>]
        ...
        "org:app:1.0" -> "org:name:1.0"
        "org:name:0.9" -> "org:name:1.0" [label="Evicted By" style="stroke-dasharray"]
    }

The header is caller-supplied raw text (it must open the ``digraph``
block); the renderer closes it. Node labels are produced by a caller
function ``(organization, name, version) -> label`` and wrapped according to
a ``LabelRendering`` mode. The id components are escaped for that mode
*before* the label function sees them, so a label function may add its own
markup (``<BR/>``, ``<B>``) while artifact names containing ``<``, ``&`` or
``"`` still produce a parseable file.

Evictions are drawn as a chain: an evicted module gets a dashed
``Evicted By`` edge to its replacement, its own outgoing edges are dropped,
and an edge ``X -> replacement`` is dropped when ``X -> evicted`` exists.
Edges whose endpoints are not in the graph are never emitted.
"""

from __future__ import annotations

import html
from enum import Enum
from typing import Callable, Sequence

from depgraph.core.filters import FilterRule
from depgraph.core.model import Edge, ModuleGraph
from depgraph.core.transformations import apply_filter_rules

NodeLabel = Callable[[str, str, str], str]

EVICTED_STYLE = "stroke-dasharray"

DEFAULT_DOT_HEADER = """digraph "dependency-graph" {
    graph[rankdir="LR"]
    edge [
        arrowtail="none"
    ]"""


def default_node_label(organization: str, name: str, version: str) -> str:
    return f"{organization}<BR/><B>{name}</B><BR/>{version}"


def plain_node_label(organization: str, name: str, version: str) -> str:
    return f"{organization}:{name}:{version}"


class LabelRendering(Enum):
    """How node labels are written into the DOT attribute list.

    - ``PLAIN``: ``label="..."``, a quoted string; no markup.
    - ``ANGLE_BRACKETS``: ``label=<...>``, a Graphviz HTML-like label.
    - ``LABEL_TYPE_HTML``: ``labelType="html" label="..."``, the dagre-d3
      convention where the quoted string holds HTML.
    """

    PLAIN = "plain"
    ANGLE_BRACKETS = "angle-brackets"
    LABEL_TYPE_HTML = "label-type-html"

    def escape_component(self, text: str) -> str:
        if self is LabelRendering.PLAIN:
            return text
        return html.escape(text, quote=True)

    def render_label(self, label: str) -> str:
        if self is LabelRendering.PLAIN:
            return f"label={quote_id(label)}"
        if self is LabelRendering.ANGLE_BRACKETS:
            return f"label=<{label}>"
        return f'labelType="html" label={quote_id(label)}'


def quote_id(text: str) -> str:
    """Quote a DOT identifier, escaping backslashes, quotes, and newlines."""
    escaped = (
        text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    )
    return f'"{escaped}"'


def _dot_edges(graph: ModuleGraph) -> list[tuple[Edge, bool]]:
    """Edges to draw, each paired with whether it is an eviction edge."""
    modules = graph.modules

    def evicted(module_id) -> bool:
        module = modules.get(module_id)
        return module is not None and module.is_evicted

    replaced_edges = {
        Edge(e.source, e.target.with_version(modules[e.target].resolved_version))
        for e in graph.edges
        if evicted(e.target)
    }
    edges = [
        (e, False)
        for e in graph.edges
        if not graph.is_dangling(e)
        and not evicted(e.source)
        and e not in replaced_edges
    ]
    for module in graph.nodes:
        if module.is_evicted:
            replacement = module.id.with_version(module.resolved_version)
            if replacement in modules and replacement != module.id:
                edges.append((Edge(module.id, replacement), True))
    return edges


def dot_graph(
    graph: ModuleGraph,
    header: str = DEFAULT_DOT_HEADER,
    node_label: NodeLabel = default_node_label,
    label_rendering: LabelRendering = LabelRendering.ANGLE_BRACKETS,
    rules: Sequence[FilterRule] = (),
) -> str:
    """Render ``graph`` as a complete DOT document.

    Args:
        graph: The module graph.
        header: Raw text opening the ``digraph`` block.
        node_label: Builds a label from escaped id components.
        label_rendering: How labels are written; see ``LabelRendering``.
        rules: Filter rules applied before rendering.

    Returns:
        DOT text: header, node statements, edge statements, closing brace.
    """
    scoped = apply_filter_rules(rules, graph)

    node_lines = []
    for module in scoped.nodes:
        mid = module.id
        label = node_label(
            label_rendering.escape_component(mid.organization),
            label_rendering.escape_component(mid.name),
            label_rendering.escape_component(mid.version),
        )
        node_lines.append(
            f"    {quote_id(mid.id_string)}[{label_rendering.render_label(label)}]"
        )

    edge_lines = []
    for edge, is_eviction in _dot_edges(scoped):
        extra = f' [label="Evicted By" style="{EVICTED_STYLE}"]' if is_eviction else ""
        edge_lines.append(
            f"    {quote_id(edge.source.id_string)} -> {quote_id(edge.target.id_string)}{extra}"
        )

    return "\n".join([header.rstrip("\n"), *node_lines, *edge_lines, "}"])
