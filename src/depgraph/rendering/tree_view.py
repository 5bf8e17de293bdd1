"""JSON structures for browser-side visualizations.

Two shapes are produced:

- A nested tree, one object per printed node::

      {"id": "org:name:1.0", "text": "org:name:1.0 (evicted by 1.1)", "children": [...]}

  Roots are chosen exactly as for the ASCII tree. A node already on the
  current path is emitted as a leaf whose text ends in ``" (cycle)"``.

- A flat node/edge list for dagre-style layout engines::

      {"nodes": [{"id": ..., "label": ..., "used": ...}],
       "edges": [{"id": "e0", "source": ..., "target": ...}]}
"""

from __future__ import annotations

import json
from typing import Any, Sequence

from depgraph.core.filters import FilterRule
from depgraph.core.model import Module, ModuleGraph, ModuleId
from depgraph.core.transformations import apply_filter_rules


def node_text(module: Module) -> str:
    text = module.id.id_string + module.extra_info
    if module.resolved_version is not None:
        text += f" (evicted by {module.resolved_version})"
    if module.error is not None:
        text += f" (errors: {module.error})"
    return text


def _tree_node(
    graph: ModuleGraph,
    root: Module,
    visited: set[ModuleId],
) -> dict[str, Any]:
    top: list[dict[str, Any]] = []
    # (module, list to append the node to, ids on the current path)
    stack: list[tuple[Module, list[dict[str, Any]], frozenset[ModuleId]]] = [
        (root, top, frozenset())
    ]
    while stack:
        module, siblings, path = stack.pop()
        if module.id in path:
            siblings.append(
                {"id": module.id.id_string, "text": node_text(module) + " (cycle)", "children": []}
            )
            continue

        visited.add(module.id)
        node: dict[str, Any] = {"id": module.id.id_string, "text": node_text(module), "children": []}
        siblings.append(node)
        child_path = path | {module.id}
        for child in reversed(graph.dependencies_of(module.id)):
            stack.append((child, node["children"], child_path))
    return top[0]


def create_tree(graph: ModuleGraph, rules: Sequence[FilterRule] = ()) -> list[dict[str, Any]]:
    """Build the nested tree structure for ``graph``.

    Args:
        graph: The module graph.
        rules: Filter rules applied first.

    Returns:
        One tree object per top-level entry; empty for an empty graph.
    """
    scoped = apply_filter_rules(rules, graph)
    visited: set[ModuleId] = set()
    trees = [_tree_node(scoped, root, visited) for root in scoped.roots()]
    for module in scoped.nodes:
        if module.id not in visited:
            trees.append(_tree_node(scoped, module, visited))
    return trees


def _dump_trees(trees: list[dict[str, Any]]) -> str:
    """``json.dumps(trees, indent=2, sort_keys=True)`` without recursing per level."""
    if not trees:
        return "[]"
    out = ["["]
    stack: list[Any] = ["\n]"]
    for index in range(len(trees) - 1, -1, -1):
        stack.append((trees[index], 1, "," if index < len(trees) - 1 else ""))
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
            continue
        node, depth, suffix = item
        pad = "  " * depth
        inner = pad + "  "
        tail = (
            f'\n{inner}"id": {json.dumps(node["id"])},'
            f'\n{inner}"text": {json.dumps(node["text"])}'
            f"\n{pad}}}{suffix}"
        )
        children = node["children"]
        if not children:
            out.append(f'\n{pad}{{\n{inner}"children": [],{tail}')
            continue
        out.append(f'\n{pad}{{\n{inner}"children": [')
        stack.append(f"\n{inner}],{tail}")
        for index in range(len(children) - 1, -1, -1):
            stack.append((children[index], depth + 2, "," if index < len(children) - 1 else ""))
    return "".join(out)


def render_tree_json(graph: ModuleGraph, rules: Sequence[FilterRule] = ()) -> str:
    """Serialize ``create_tree`` output as indented JSON.

    The layout matches ``json.dumps(..., indent=2, sort_keys=True)``; it is
    written iteratively so long dependency chains do not hit the recursion
    limit.
    """
    return _dump_trees(create_tree(graph, rules))


def create_edge_list(graph: ModuleGraph, rules: Sequence[FilterRule] = ()) -> dict[str, Any]:
    """Build the flat node/edge structure, skipping dangling edges."""
    scoped = apply_filter_rules(rules, graph)
    nodes = [
        {"id": m.id.id_string, "label": node_text(m), "used": m.is_used}
        for m in scoped.nodes
    ]
    live_edges = [e for e in scoped.edges if not scoped.is_dangling(e)]
    edges = [
        {"id": f"e{index}", "source": e.source.id_string, "target": e.target.id_string}
        for index, e in enumerate(live_edges)
    ]
    return {"nodes": nodes, "edges": edges}


def render_edge_list_json(graph: ModuleGraph, rules: Sequence[FilterRule] = ()) -> str:
    return json.dumps(create_edge_list(graph, rules), indent=2, sort_keys=True)
