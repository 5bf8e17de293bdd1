"""Tests for the tree-JSON and dagre edge-list structures."""

from __future__ import annotations

import json

from depgraph.core.model import Edge, ModuleGraph
from depgraph.rendering.tree_view import (
    create_edge_list,
    create_tree,
    node_text,
    render_edge_list_json,
    render_tree_json,
)
from factories import A, B, SLF4J_OLD, graph, mid, module


def _texts(tree: dict) -> list[str]:
    """Depth-first list of every text in a tree."""
    out = [tree["text"]]
    for child in tree["children"]:
        out.extend(_texts(child))
    return out


class TestCreateTree:
    """Nested structure, roots and cycle guard."""

    def test_empty(self) -> None:
        assert create_tree(ModuleGraph.empty()) == []

    def test_chain(self, chain: ModuleGraph) -> None:
        assert create_tree(chain) == [
            {
                "id": "org:a:1.0",
                "text": "org:a:1.0",
                "children": [
                    {
                        "id": "org:b:1.0",
                        "text": "org:b:1.0",
                        "children": [{"id": "org:c:1.0", "text": "org:c:1.0", "children": []}],
                    }
                ],
            }
        ]

    def test_cycle_terminates(self, cycle: ModuleGraph) -> None:
        trees = create_tree(cycle)
        assert len(trees) == 1
        assert _texts(trees[0]) == ["org:a:1.0", "org:b:1.0", "org:c:1.0", "org:a:1.0 (cycle)"]

    def test_evicted_text(self, evicted: ModuleGraph) -> None:
        texts = _texts(create_tree(evicted)[0])
        assert f"{SLF4J_OLD} (evicted by 1.7.36)" in texts

    def test_json_is_deterministic(self, diamond: ModuleGraph) -> None:
        reordered = ModuleGraph.of(reversed(diamond.nodes), reversed(diamond.edges))
        assert render_tree_json(reordered) == render_tree_json(diamond)
        assert json.loads(render_tree_json(diamond))[0]["id"] == "org:a:1.0"


class TestNodeText:
    """Annotations appended to node text."""

    def test_eviction_and_error(self) -> None:
        m = module(A, extra_info=" [S]", resolved_version="2.0", error="boom")
        assert node_text(m) == "org:a:1.0 [S] (evicted by 2.0) (errors: boom)"


class TestEdgeList:
    """Flat node/edge structure for dagre."""

    def test_diamond(self, diamond: ModuleGraph) -> None:
        data = create_edge_list(diamond)
        assert [n["id"] for n in data["nodes"]] == ["org:a:1.0", "org:b:1.0", "org:c:1.0", "org:d:1.0"]
        assert data["edges"][0] == {"id": "e0", "source": "org:a:1.0", "target": "org:b:1.0"}
        assert len(data["edges"]) == 4

    def test_dangling_edges_skipped(self) -> None:
        g = ModuleGraph.of(graph([A]).nodes, [Edge(mid(A), mid(B))])
        assert create_edge_list(g)["edges"] == []

    def test_used_flag(self, evicted: ModuleGraph) -> None:
        nodes = {n["id"]: n["used"] for n in create_edge_list(evicted)["nodes"]}
        assert nodes[SLF4J_OLD] is False

    def test_json(self, chain: ModuleGraph) -> None:
        assert len(json.loads(render_edge_list_json(chain))["edges"]) == 2


class TestTreeJsonLayout:
    """Serialized layout and long chains."""

    def test_matches_json_dumps(self, diamond: ModuleGraph, cycle: ModuleGraph, evicted: ModuleGraph) -> None:
        for g in (diamond, cycle, evicted, ModuleGraph.empty()):
            assert render_tree_json(g) == json.dumps(create_tree(g), indent=2, sort_keys=True)

    def test_long_chain(self) -> None:
        ids = [f"org:m{i:04d}:1.0" for i in range(1200)]
        g = graph(ids, list(zip(ids, ids[1:])))

        node = create_tree(g)[0]
        depth = 1
        while node["children"]:
            node = node["children"][0]
            depth += 1
        assert depth == 1200
        assert node["id"] == ids[-1]

        text = render_tree_json(g)
        assert text.count('"id": ') == 1200
        assert text.startswith('[\n  {\n    "children": [')
        assert text.endswith("\n]")
