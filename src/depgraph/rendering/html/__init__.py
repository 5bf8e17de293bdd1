"""Browsable HTML views of a dependency graph.

Submodules:
    template   -- HTML structure with placeholder markers.
    styles     -- Embedded CSS stylesheet.
    scripts    -- Embedded JavaScript for the graph and tree pages.
    generator  -- Writes pages and data files into a target directory.
"""

from depgraph.rendering.html.generator import (
    render_graph_page,
    render_tree_page,
    write_graph_html,
    write_tree_html,
)

__all__ = [
    "render_graph_page",
    "render_tree_page",
    "write_graph_html",
    "write_tree_html",
]
