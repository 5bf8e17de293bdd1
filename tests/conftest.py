"""Shared fixtures for depgraph tests."""

from __future__ import annotations

import pathlib

import pytest

from depgraph.core.model import ModuleGraph
from factories import IVY_REPORT, chain_graph, cycle_graph, diamond_graph, evicted_graph


@pytest.fixture
def ivy_report(tmp_path: pathlib.Path) -> pathlib.Path:
    """Write a small Ivy report (with the platform library) to disk."""
    path = tmp_path / "com.example-app-compile.xml"
    path.write_text(IVY_REPORT, encoding="utf-8")
    return path


@pytest.fixture
def chain() -> ModuleGraph:
    return chain_graph()


@pytest.fixture
def diamond() -> ModuleGraph:
    return diamond_graph()


@pytest.fixture
def cycle() -> ModuleGraph:
    return cycle_graph()


@pytest.fixture
def evicted() -> ModuleGraph:
    return evicted_graph()
