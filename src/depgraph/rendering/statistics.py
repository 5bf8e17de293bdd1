"""Aggregate statistics over a module graph.

Two reports live here:

- ``dependency_stats`` / ``render_statistics``: counts of modules by
  status, distinct organizations, and a per-organization breakdown.
- ``module_stats`` / ``render_module_stats_list``: for every module reached
  from the roots, the size of its own artifact, the size of everything it
  pulls in transitively, and its direct/transitive dependency counts.
  Evicted modules are not followed, since their artifacts are never on a
  classpath. Transitive sets are computed with a visited set, so cyclic
  graphs are counted once per member rather than recursed forever.

Both outputs are deterministic for a given graph so they can be diffed
across builds.
"""

from __future__ import annotations

import os
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Sequence

from depgraph.core.filters import FilterRule
from depgraph.core.model import Module, ModuleGraph, ModuleId
from depgraph.core.transformations import apply_filter_rules

SizeOf = Callable[[str], "int | None"]

MODULE_STATS_HEADER = "   TotSize    JarSize #TDe #Dep Module"

_BYTES_PER_MB = 1_000_000


# ---------------------------------------------------------------------------
# Graph-level counts
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OrganizationCounts:
    """Module counts for one organization."""

    organization: str
    total: int
    used: int
    evicted: int


@dataclass(frozen=True)
class GraphStatistics:
    """Counts over the in-scope modules of a graph.

    Attributes:
        total: Number of modules.
        used: Modules neither evicted nor failed.
        evicted: Modules replaced by another version.
        failed: Modules whose resolution reported an error.
        edges: Number of non-dangling edges.
        organizations: Per-organization counts, sorted by organization.
    """

    total: int
    used: int
    evicted: int
    failed: int
    edges: int
    organizations: tuple[OrganizationCounts, ...]

    @property
    def organization_count(self) -> int:
        return len(self.organizations)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "used": self.used,
            "evicted": self.evicted,
            "failed": self.failed,
            "edges": self.edges,
            "organizations": [
                {
                    "organization": o.organization,
                    "total": o.total,
                    "used": o.used,
                    "evicted": o.evicted,
                }
                for o in self.organizations
            ],
        }


def dependency_stats(graph: ModuleGraph, rules: Sequence[FilterRule] = ()) -> GraphStatistics:
    """Count the in-scope modules of ``graph`` by status and organization."""
    scoped = apply_filter_rules(rules, graph)
    totals: Counter[str] = Counter()
    used: Counter[str] = Counter()
    evicted: Counter[str] = Counter()
    for module in scoped.nodes:
        organization = module.id.organization
        totals[organization] += 1
        used[organization] += module.is_used
        evicted[organization] += module.is_evicted

    return GraphStatistics(
        total=scoped.node_count,
        used=sum(used.values()),
        evicted=sum(evicted.values()),
        failed=sum(1 for m in scoped.nodes if m.had_error),
        edges=sum(1 for e in scoped.edges if not scoped.is_dangling(e)),
        organizations=tuple(
            OrganizationCounts(org, totals[org], used[org], evicted[org])
            for org in sorted(totals)
        ),
    )


def render_statistics(graph: ModuleGraph, rules: Sequence[FilterRule] = ()) -> str:
    stats = dependency_stats(graph, rules)
    lines = [
        f"Modules:       {stats.total}",
        f"Used:          {stats.used}",
        f"Evicted:       {stats.evicted}",
        f"Failed:        {stats.failed}",
        f"Edges:         {stats.edges}",
        f"Organizations: {stats.organization_count}",
    ]
    if stats.organizations:
        width = max(len(o.organization) for o in stats.organizations)
        lines.append("")
        for counts in stats.organizations:
            lines.append(
                f"  {counts.organization.ljust(width)}  {counts.total:4d} total"
                f"  {counts.used:4d} used  {counts.evicted:4d} evicted"
            )
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Per-module size statistics
# ---------------------------------------------------------------------------


def file_size(path: str) -> int | None:
    """Size of ``path`` in bytes, or None when it is not an existing file."""
    if os.path.isfile(path):
        return os.path.getsize(path)
    return None


@dataclass(frozen=True)
class ModuleStats:
    """Size and fan-out figures for one module."""

    id: ModuleId
    num_direct_dependencies: int
    num_transitive_dependencies: int
    self_size: int | None
    transitive_size: int


def _live_dependencies(graph: ModuleGraph, module_id: ModuleId) -> list[Module]:
    return [
        m for m in graph.dependencies_of(module_id)
        if not m.is_evicted and m.id != module_id
    ]


def _transitive_dependencies(graph: ModuleGraph, module_id: ModuleId) -> set[ModuleId]:
    seen: set[ModuleId] = set()
    stack = [module_id]
    while stack:
        current = stack.pop()
        for dependency in _live_dependencies(graph, current):
            if dependency.id not in seen:
                seen.add(dependency.id)
                stack.append(dependency.id)
    seen.discard(module_id)
    return seen


def _reachable_from_roots(graph: ModuleGraph) -> list[Module]:
    """Roots plus every module reachable from them over live edges.

    Modules left over (cycles without an entry point) are picked up in id
    order, skipping evicted ones.
    """
    reached: set[ModuleId] = set()

    def visit(start: Module) -> None:
        reached.add(start.id)
        reached.update(_transitive_dependencies(graph, start.id))

    for root in graph.roots():
        visit(root)
    for module in graph.nodes:
        if module.id not in reached and not module.is_evicted:
            visit(module)
    return [m for m in graph.nodes if m.id in reached]


def module_stats(
    graph: ModuleGraph,
    rules: Sequence[FilterRule] = (),
    size_of: SizeOf = file_size,
) -> list[ModuleStats]:
    """Per-module statistics, largest transitive footprint first.

    Args:
        graph: The module graph.
        rules: Filter rules applied first.
        size_of: Maps an artifact path to its size in bytes, or None.

    Returns:
        Stats sorted by descending transitive size, then descending
        transitive dependency count, then id.
    """
    scoped = apply_filter_rules(rules, graph)

    self_sizes: dict[ModuleId, int | None] = {
        m.id: size_of(m.artifact_path) if m.artifact_path else None for m in scoped.nodes
    }

    stats = []
    for module in _reachable_from_roots(scoped):
        transitive = _transitive_dependencies(scoped, module.id)
        own = self_sizes[module.id]
        stats.append(
            ModuleStats(
                id=module.id,
                num_direct_dependencies=len(_live_dependencies(scoped, module.id)),
                num_transitive_dependencies=len(transitive),
                self_size=own,
                transitive_size=(own or 0) + sum(self_sizes[d] or 0 for d in transitive),
            )
        )
    stats.sort(
        key=lambda s: (-s.transitive_size, -s.num_transitive_dependencies, s.id)
    )
    return stats


def _mb(size: int) -> float:
    return size / _BYTES_PER_MB


def render_module_stats_list(
    graph: ModuleGraph,
    rules: Sequence[FilterRule] = (),
    size_of: SizeOf = file_size,
) -> str:
    """Tabular rendering of ``module_stats``, one module per line."""
    lines = [MODULE_STATS_HEADER]
    for s in module_stats(graph, rules, size_of):
        lines.append(
            f"{_mb(s.transitive_size):7.3f} MB {_mb(s.self_size or 0):7.3f} MB "
            f"{s.num_transitive_dependencies:4d} {s.num_direct_dependencies:4d} "
            f"{s.id.id_string}"
        )
    return "\n".join(lines)
