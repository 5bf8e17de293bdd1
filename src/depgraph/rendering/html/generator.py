"""Write the browsable HTML graph and tree views into a target directory.

Graph view (``write_graph_html``)::

    <target>/graph.html            page (inline CSS/JS, d3 + dagre-d3 from CDN)
    <target>/dependencies.dot.js   window.__DEPGRAPH_DOT__ = "<dot text>";

Tree view (``write_tree_html``)::

    <target>/tree.html             page (inline CSS/JS, no external resources)
    <target>/tree.json             the tree structure
    <target>/tree.data.js          window.__DEPGRAPH_TREE__ = [...];

Both functions create the directory if needed and return the ``file://``
URI of the page, ready to hand to a browser.

Usage::

    from depgraph.rendering import dot_graph, write_graph_html
    from depgraph.rendering.dot import LabelRendering

    uri = write_graph_html(
        dot_graph(graph, label_rendering=LabelRendering.LABEL_TYPE_HTML),
        "target/browse-dependency-graph",
    )
"""

from __future__ import annotations

import html as html_mod
import json
import logging
from pathlib import Path

from depgraph.rendering.html.scripts import GRAPH_JS, TREE_JS
from depgraph.rendering.html.styles import BROWSE_CSS
from depgraph.rendering.html.template import GRAPH_HTML, TREE_HTML

logger = logging.getLogger(__name__)

GRAPH_PAGE = "graph.html"
GRAPH_DATA = "dependencies.dot.js"
TREE_PAGE = "tree.html"
TREE_JSON = "tree.json"
TREE_DATA = "tree.data.js"


def _fill(template: str, title: str, script: str) -> str:
    page = template
    page = page.replace("{{TITLE}}", html_mod.escape(title))
    page = page.replace("{{CSS}}", BROWSE_CSS)
    page = page.replace("{{JS}}", script)
    return page


def _js_assignment(name: str, payload: str) -> str:
    # Escape "</" so the payload can never close an enclosing script tag.
    safe = payload.replace("</", "<\\/")
    return f"window.{name} = {safe};\n"


def render_graph_page(title: str = "Dependency graph") -> str:
    """The graph page HTML; the DOT data comes from ``dependencies.dot.js``."""
    return _fill(GRAPH_HTML, title, GRAPH_JS)


def render_tree_page(title: str = "Dependency tree") -> str:
    """The tree page HTML; the tree data comes from ``tree.data.js``."""
    return _fill(TREE_HTML, title, TREE_JS)


def write_graph_html(
    dot_text: str, target_dir: str | Path, title: str = "Dependency graph"
) -> str:
    """Write the graph page and its DOT payload into ``target_dir``.

    Args:
        dot_text: DOT document, preferably rendered with
            ``LabelRendering.LABEL_TYPE_HTML`` for dagre-d3.
        target_dir: Output directory; created if missing.
        title: Page title.

    Returns:
        The ``file://`` URI of ``graph.html``.
    """
    target = Path(target_dir)
    target.mkdir(parents=True, exist_ok=True)
    (target / GRAPH_DATA).write_text(
        _js_assignment("__DEPGRAPH_DOT__", json.dumps(dot_text)), encoding="utf-8"
    )
    page = target / GRAPH_PAGE
    page.write_text(render_graph_page(title), encoding="utf-8")
    logger.info("Wrote graph view to %s", page)
    return page.resolve().as_uri()


def write_tree_html(
    tree_json: str, target_dir: str | Path, title: str = "Dependency tree"
) -> str:
    """Write the tree page, ``tree.json`` and its JS payload into ``target_dir``.

    Args:
        tree_json: JSON text as produced by ``render_tree_json``.
        target_dir: Output directory; created if missing.
        title: Page title.

    Returns:
        The ``file://`` URI of ``tree.html``.
    """
    target = Path(target_dir)
    target.mkdir(parents=True, exist_ok=True)
    (target / TREE_JSON).write_text(tree_json, encoding="utf-8")
    (target / TREE_DATA).write_text(
        _js_assignment("__DEPGRAPH_TREE__", tree_json), encoding="utf-8"
    )
    page = target / TREE_PAGE
    page.write_text(render_tree_page(title), encoding="utf-8")
    logger.info("Wrote tree view to %s", page)
    return page.resolve().as_uri()
