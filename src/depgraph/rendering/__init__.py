"""Renderers: stateless functions from a ``ModuleGraph`` to an output format.

Every renderer accepts an optional sequence of filter rules, applied before
rendering, and tolerates dangling edges and cycles.

Submodules:
    ascii_tree   -- Indented tree with cycle markers.
    ascii_graph  -- Organization-grouped overview.
    dot          -- Graphviz DOT.
    graphml      -- GraphML via networkx.
    tree_view    -- Nested tree JSON and dagre node/edge lists.
    flat_list    -- Sorted list of module ids.
    statistics   -- Status counts and per-module size statistics.
    licenses     -- Used modules grouped by license.
    html         -- Browsable graph and tree pages.
"""

from depgraph.rendering.ascii_graph import render_ascii_graph
from depgraph.rendering.ascii_tree import display_module, render_tree
from depgraph.rendering.dot import (
    DEFAULT_DOT_HEADER,
    LabelRendering,
    default_node_label,
    dot_graph,
)
from depgraph.rendering.flat_list import dependency_list, render_dependency_list
from depgraph.rendering.graphml import render_graphml, write_graphml
from depgraph.rendering.html import write_graph_html, write_tree_html
from depgraph.rendering.licenses import NO_LICENSE, license_info, render_license_info
from depgraph.rendering.statistics import (
    GraphStatistics,
    ModuleStats,
    dependency_stats,
    module_stats,
    render_module_stats_list,
    render_statistics,
)
from depgraph.rendering.tree_view import (
    create_edge_list,
    create_tree,
    render_edge_list_json,
    render_tree_json,
)

__all__ = [
    "DEFAULT_DOT_HEADER",
    "GraphStatistics",
    "LabelRendering",
    "ModuleStats",
    "NO_LICENSE",
    "create_edge_list",
    "create_tree",
    "default_node_label",
    "dependency_list",
    "dependency_stats",
    "display_module",
    "dot_graph",
    "license_info",
    "module_stats",
    "render_ascii_graph",
    "render_dependency_list",
    "render_edge_list_json",
    "render_graphml",
    "render_license_info",
    "render_module_stats_list",
    "render_statistics",
    "render_tree",
    "render_tree_json",
    "write_graph_html",
    "write_graphml",
    "write_tree_html",
]
