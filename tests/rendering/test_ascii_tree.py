"""Tests for the indented ASCII tree renderer."""

from __future__ import annotations

from depgraph.core.filters import parse_filter_rules
from depgraph.core.model import ModuleGraph
from depgraph.rendering.ascii_tree import display_module, render_tree
from factories import A, B, C, graph, module


class TestRenderTree:
    """Layout, ordering and cycle handling."""

    def test_empty_graph(self) -> None:
        assert render_tree(ModuleGraph.empty()) == ""

    def test_single_node(self) -> None:
        assert render_tree(graph([A])) == "org:a:1.0"

    def test_chain(self, chain: ModuleGraph) -> None:
        assert render_tree(chain) == "\n".join(
            [
                "org:a:1.0",
                "  +-org:b:1.0",
                "    +-org:c:1.0",
            ]
        )

    def test_diamond_repeats_shared_dependency(self, diamond: ModuleGraph) -> None:
        assert render_tree(diamond) == "\n".join(
            [
                "org:a:1.0",
                "  +-org:b:1.0",
                "  | +-org:d:1.0",
                "  +-org:c:1.0",
                "    +-org:d:1.0",
            ]
        )

    def test_cycle_is_marked_and_not_expanded(self, cycle: ModuleGraph) -> None:
        assert render_tree(cycle) == "\n".join(
            [
                "org:a:1.0",
                "  +-org:b:1.0",
                "    +-org:c:1.0",
                "      #-org:a:1.0 (cycle)",
            ]
        )

    def test_self_loop(self) -> None:
        assert render_tree(graph([A], [(A, A)])) == "org:a:1.0\n  #-org:a:1.0 (cycle)"

    def test_evicted_annotation(self, evicted: ModuleGraph) -> None:
        assert render_tree(evicted) == "\n".join(
            [
                "com.example:app:1.0",
                "  +-ch.qos.logback:logback-classic:1.2.11",
                "  | +-org.slf4j:slf4j-api:1.7.36",
                "  +-org.slf4j:slf4j-api:1.7.25 (evicted by: 1.7.36)",
            ]
        )

    def test_several_roots_in_id_order(self) -> None:
        g = graph([B, A, C], [(B, C)])
        assert render_tree(g) == "org:a:1.0\norg:b:1.0\n  +-org:c:1.0"

    def test_unreachable_cycle_after_roots(self) -> None:
        d = "org:d:1.0"
        g = graph([A, B, C, d], [(B, C), (C, B)])
        lines = render_tree(g).splitlines()
        assert lines[:2] == ["org:a:1.0", "org:d:1.0"]
        assert lines[2:] == ["org:b:1.0", "  +-org:c:1.0", "    #-org:b:1.0 (cycle)"]

    def test_filter_rules(self, diamond: ModuleGraph) -> None:
        rules = parse_filter_rules(["org:b", "org:d"])
        assert render_tree(diamond, rules) == "org:b:1.0\n  +-org:d:1.0"

    def test_max_column(self, chain: ModuleGraph) -> None:
        lines = render_tree(chain, max_column=10).splitlines()
        assert lines == ["org:a:1.0", "  +-org:..", "    +-or.."]

    def test_deterministic(self, diamond: ModuleGraph) -> None:
        reordered = ModuleGraph.of(reversed(diamond.nodes), reversed(diamond.edges))
        assert render_tree(reordered) == render_tree(diamond)


class TestDisplayModule:
    """One-line module descriptions."""

    def test_extra_info(self) -> None:
        assert display_module(module(A, extra_info=" [S]")) == "org:a:1.0 [S]"

    def test_error_then_eviction(self) -> None:
        m = module(A, error="boom", resolved_version="2.0")
        assert display_module(m) == "org:a:1.0 (error: boom) (evicted by: 2.0)"
