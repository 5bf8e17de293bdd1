"""Tests for the organization-grouped overview renderer."""

from __future__ import annotations

from depgraph.core.filters import parse_filter_rules
from depgraph.core.model import ModuleGraph
from depgraph.rendering.ascii_graph import module_status, render_ascii_graph
from factories import A, graph, module


class TestRenderAsciiGraph:
    """Grouping, row content and the summary line."""

    def test_headings_and_summary(self, evicted: ModuleGraph) -> None:
        lines = render_ascii_graph(evicted).splitlines()
        assert "ch.qos.logback (1 module)" in lines
        assert "com.example (1 module)" in lines
        assert "org.slf4j (2 modules)" in lines
        assert lines[-1] == "4 modules, 3 used, 1 evicted, 0 failed"

    def test_rows(self, evicted: ModuleGraph) -> None:
        rows = [line.split() for line in render_ascii_graph(evicted).splitlines() if line.startswith("  ")]
        assert ["app", "1.0", "used", "deps", "2", "used", "by", "0"] in rows
        assert ["slf4j-api", "1.7.25", "evicted", "by", "1.7.36", "deps", "0", "used", "by", "1"] in rows

    def test_columns_are_aligned(self, evicted: ModuleGraph) -> None:
        rows = [line for line in render_ascii_graph(evicted).splitlines() if line.startswith("  ")]
        assert len({row.index("deps") for row in rows}) == 1

    def test_empty_graph(self) -> None:
        assert render_ascii_graph(ModuleGraph.empty()) == "0 modules, 0 used, 0 evicted, 0 failed"

    def test_filter_rules(self, evicted: ModuleGraph) -> None:
        text = render_ascii_graph(evicted, parse_filter_rules(["org.slf4j"]))
        assert text.splitlines()[0] == "org.slf4j (2 modules)"
        assert text.splitlines()[-1] == "2 modules, 1 used, 1 evicted, 0 failed"

    def test_terminates_on_cycle(self, cycle: ModuleGraph) -> None:
        assert render_ascii_graph(cycle).splitlines()[-1] == "3 modules, 3 used, 0 evicted, 0 failed"


class TestModuleStatus:
    """Status labels."""

    def test_labels(self) -> None:
        assert module_status(module(A)) == "used"
        assert module_status(module(A, resolved_version="2.0")) == "evicted by 2.0"
        assert module_status(module(A, error="boom", resolved_version="2.0")) == "failed"

    def test_failed_counted(self) -> None:
        text = render_ascii_graph(graph([module(A, error="boom")]))
        assert text.splitlines()[-1] == "1 modules, 0 used, 0 evicted, 1 failed"
