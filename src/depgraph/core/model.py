"""Module graph value types: ModuleId, Module, Edge, and ModuleGraph.

The graph is stored arena-style: nodes live in a mapping keyed by
``ModuleId`` and edges are an explicit sequence of id pairs. Nodes never
hold references to each other, so cyclic and inconsistent graphs (edges
whose endpoints are missing) are representable without special cases.

Every type here is immutable. Transformations build a new ``ModuleGraph``;
the derived lookup maps are computed lazily and cached on the instance.

Determinism guarantee: nodes are kept sorted by ``ModuleId`` and adjacency
lists are sorted, so every traversal over a graph visits modules in the same
order on every run.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, replace
from functools import cached_property
from typing import Iterable


# ---------------------------------------------------------------------------
# ModuleId: organization / name / version identity
# ---------------------------------------------------------------------------


@dataclass(frozen=True, order=True)
class ModuleId:
    """Identity of one resolved artifact.

    Equality and ordering are structural and lexicographic by
    (organization, name, version).

    Attributes:
        organization: Publishing organization (Ivy ``organisation``).
        name: Artifact name.
        version: Resolved revision string.
    """

    organization: str
    name: str
    version: str

    @property
    def id_string(self) -> str:
        """Colon-joined ``organization:name:version`` form."""
        return f"{self.organization}:{self.name}:{self.version}"

    def with_version(self, version: str) -> ModuleId:
        return replace(self, version=version)

    def __str__(self) -> str:
        return self.id_string


# ---------------------------------------------------------------------------
# Module: a node in the graph
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Module:
    """A resolved module together with its resolution metadata.

    Attributes:
        id: The module identity.
        license: License name from the report, if any.
        extra_info: Free-form annotation appended to display text
            (configuration scope, platform-library marker, ...).
        resolved_version: Version that replaced this one during conflict
            resolution. ``None`` means this exact version is in use.
        artifact_path: Location of the resolved binary, if any.
        error: Resolution problem reported for this module, if any.
    """

    id: ModuleId
    license: str | None = None
    extra_info: str = ""
    resolved_version: str | None = None
    artifact_path: str | None = None
    error: str | None = None

    @property
    def is_evicted(self) -> bool:
        return self.resolved_version is not None

    @property
    def had_error(self) -> bool:
        return self.error is not None

    @property
    def is_used(self) -> bool:
        """True when the module was neither evicted nor failed to resolve."""
        return not self.is_evicted and not self.had_error


# ---------------------------------------------------------------------------
# Edge: "source depends on target"
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Edge:
    """Directed dependency edge: ``source`` depends on ``target``."""

    source: ModuleId
    target: ModuleId


# ---------------------------------------------------------------------------
# ModuleGraph
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ModuleGraph:
    """An immutable dependency graph: modules plus an ordered edge list.

    Node ids are unique; constructing a graph with two nodes sharing an id
    raises ``ValueError``. Edges may reference ids with no node (dangling
    edges); every derived view skips them instead of failing. Multiple edges
    between the same pair are preserved but collapse in the adjacency maps.

    Attributes:
        nodes: Modules sorted by id.
        edges: Edges in their original order.
    """

    nodes: tuple[Module, ...] = ()
    edges: tuple[Edge, ...] = ()

    def __post_init__(self) -> None:
        nodes = tuple(sorted(self.nodes, key=lambda m: m.id))
        for prev, cur in zip(nodes, nodes[1:]):
            if prev.id == cur.id:
                raise ValueError(f"Duplicate module id in graph: {cur.id.id_string}")
        object.__setattr__(self, "nodes", nodes)
        object.__setattr__(self, "edges", tuple(self.edges))

    @classmethod
    def empty(cls) -> ModuleGraph:
        return cls()

    @classmethod
    def of(cls, nodes: Iterable[Module], edges: Iterable[Edge] = ()) -> ModuleGraph:
        """Build a graph from arbitrary iterables."""
        return cls(tuple(nodes), tuple(edges))

    # -- Derived views ------------------------------------------------------

    @cached_property
    def modules(self) -> dict[ModuleId, Module]:
        """Mapping of id to module, in id order."""
        return {m.id: m for m in self.nodes}

    @cached_property
    def dependency_map(self) -> dict[ModuleId, list[Module]]:
        """Direct dependencies per module id, sorted by id, dangling edges skipped."""
        return self._adjacency(lambda e: (e.source, e.target))

    @cached_property
    def reverse_dependency_map(self) -> dict[ModuleId, list[Module]]:
        """Direct dependents per module id, sorted by id, dangling edges skipped."""
        return self._adjacency(lambda e: (e.target, e.source))

    def _adjacency(self, binding) -> dict[ModuleId, list[Module]]:
        known = self.modules
        linked: dict[ModuleId, set[ModuleId]] = defaultdict(set)
        for edge in self.edges:
            key, value = binding(edge)
            if key in known and value in known:
                linked[key].add(value)
        return {
            key: [known[v] for v in sorted(values)]
            for key, values in sorted(linked.items())
        }

    def module(self, module_id: ModuleId) -> Module | None:
        return self.modules.get(module_id)

    def dependencies_of(self, module_id: ModuleId) -> list[Module]:
        return self.dependency_map.get(module_id, [])

    def dependents_of(self, module_id: ModuleId) -> list[Module]:
        return self.reverse_dependency_map.get(module_id, [])

    def roots(self) -> list[Module]:
        """Modules with no incoming edge from any known module, sorted by id."""
        return [m for m in self.nodes if not self.dependents_of(m.id)]

    def is_dangling(self, edge: Edge) -> bool:
        return edge.source not in self.modules or edge.target not in self.modules

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def __contains__(self, module_id: object) -> bool:
        return module_id in self.modules

    def __len__(self) -> int:
        return len(self.nodes)


__all__ = ["ModuleId", "Module", "Edge", "ModuleGraph"]
