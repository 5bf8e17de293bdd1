"""Tests for the GraphML renderer."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from depgraph.core.model import Edge, Module, ModuleGraph
from depgraph.rendering.graphml import render_graphml, to_networkx, write_graphml
from factories import A, B, graph, mid

NS = {"g": "http://graphml.graphdrawing.org/xmlns"}


def _parse(text: str) -> ET.Element:
    return ET.fromstring(text)


class TestRenderGraphml:
    """Schema shape: keys first, then one graph with nodes and edges."""

    def test_keys_declared_before_graph(self, evicted: ModuleGraph) -> None:
        root = _parse(render_graphml(evicted))
        tags = [child.tag.split("}")[1] for child in root]
        assert tags[-1] == "graph"
        assert set(tags[:-1]) == {"key"}

    def test_key_names(self, evicted: ModuleGraph) -> None:
        root = _parse(render_graphml(evicted))
        names = {key.get("attr.name") for key in root.findall("g:key", NS)}
        assert {"organization", "name", "version", "license", "used", "evicted_by"} <= names

    def test_keys_declared_once(self, evicted: ModuleGraph) -> None:
        root = _parse(render_graphml(evicted))
        names = [(k.get("for"), k.get("attr.name")) for k in root.findall("g:key", NS)]
        assert len(names) == len(set(names))

    def test_nodes_and_edges(self, diamond: ModuleGraph) -> None:
        root = _parse(render_graphml(diamond))
        graph_el = root.find("g:graph", NS)
        assert graph_el.get("edgedefault") == "directed"
        node_ids = {n.get("id") for n in graph_el.findall("g:node", NS)}
        assert node_ids == {"org:a:1.0", "org:b:1.0", "org:c:1.0", "org:d:1.0"}
        edges = {(e.get("source"), e.get("target")) for e in graph_el.findall("g:edge", NS)}
        assert ("org:a:1.0", "org:b:1.0") in edges
        assert len(graph_el.findall("g:edge", NS)) == 4

    def test_node_data(self) -> None:
        g = graph([Module(mid(A), license="MIT")])
        root = _parse(render_graphml(g))
        key_ids = {k.get("attr.name"): k.get("id") for k in root.findall("g:key", NS)}
        node = root.find("g:graph/g:node", NS)
        data = {d.get("key"): d.text for d in node.findall("g:data", NS)}
        assert data[key_ids["organization"]] == "org"
        assert data[key_ids["license"]] == "MIT"

    def test_multiplicity_and_dangling(self) -> None:
        g = ModuleGraph.of(
            graph([A, B]).nodes,
            [Edge(mid(A), mid(B)), Edge(mid(A), mid(B)), Edge(mid(A), mid("x:y:1"))],
        )
        assert to_networkx(g).number_of_edges() == 2
        root = _parse(render_graphml(g))
        assert len(root.findall("g:graph/g:edge", NS)) == 2

    def test_empty_graph(self) -> None:
        root = _parse(render_graphml(ModuleGraph.empty()))
        assert root.find("g:graph", NS) is not None

    def test_cycle(self, cycle: ModuleGraph) -> None:
        root = _parse(render_graphml(cycle))
        assert len(root.findall("g:graph/g:edge", NS)) == 3


class TestWriteGraphml:
    """File output."""

    def test_write(self, tmp_path: Path, chain: ModuleGraph) -> None:
        path = write_graphml(chain, tmp_path / "out" / "deps.graphml")
        assert path.is_file()
        assert len(_parse(path.read_text(encoding="utf-8")).findall("g:graph/g:node", NS)) == 3
