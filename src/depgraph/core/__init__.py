"""Dependency graph model, filter rules, transformations, and persistence.

This package is the format-agnostic core: value types for the resolved
graph, the predicate language used to scope renderings, the pure
graph-to-graph transformations, identity matching for interactive queries,
and the store/load pair used to cache a graph between commands.

Graph Model
-----------
A ``ModuleGraph`` is a pair (N, E) where:

- **N** = set of ``Module`` nodes, unique by ``ModuleId``
- **E** = ordered sequence of ``Edge(source, target)``, "source depends on target"

Cycles and dangling edges are allowed; every algorithm tolerates both.
"""

from depgraph.core.filters import FilterRule, matches_any, parse_filter_rules
from depgraph.core.matching import complete_module_tokens, match_module_id
from depgraph.core.model import Edge, Module, ModuleGraph, ModuleId
from depgraph.core.store import read_graph, write_graph
from depgraph.core.transformations import (
    apply_filter_rules,
    ignore_platform_library,
    reverse_graph_starting_at,
)

__all__ = [
    "Edge",
    "FilterRule",
    "Module",
    "ModuleGraph",
    "ModuleId",
    "apply_filter_rules",
    "complete_module_tokens",
    "ignore_platform_library",
    "match_module_id",
    "matches_any",
    "parse_filter_rules",
    "read_graph",
    "reverse_graph_starting_at",
    "write_graph",
]
