"""License report: used modules grouped by their declared license.

Evicted and failed modules are not shipped, so they are left out. Modules
without a license are collected under ``"No license specified"``, which is
listed before all named licenses.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Sequence

from depgraph.core.filters import FilterRule
from depgraph.core.model import ModuleGraph, ModuleId
from depgraph.core.transformations import apply_filter_rules

NO_LICENSE = "No license specified"


def license_info(
    graph: ModuleGraph, rules: Sequence[FilterRule] = ()
) -> list[tuple[str, list[ModuleId]]]:
    """Group the used modules of ``graph`` by license.

    Returns:
        ``(license label, member ids)`` pairs, unlicensed bucket first, then
        by license name. Members are sorted by id.
    """
    scoped = apply_filter_rules(rules, graph)
    groups: dict[str | None, list[ModuleId]] = defaultdict(list)
    for module in scoped.nodes:
        if module.is_used:
            groups[module.license or None].append(module.id)
    ordered = sorted(groups.items(), key=lambda item: (item[0] is not None, item[0] or ""))
    return [(name or NO_LICENSE, members) for name, members in ordered]


def render_license_info(graph: ModuleGraph, rules: Sequence[FilterRule] = ()) -> str:
    blocks = [
        "\n".join([label, *(f"\t {member.id_string}" for member in members)])
        for label, members in license_info(graph, rules)
    ]
    return "\n\n".join(blocks)
