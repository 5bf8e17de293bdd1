"""Build a ``ModuleGraph`` from a native update report.

The native report is the structured form a build tool exports after
resolution (usually as JSON). Either a single configuration::

    {
      "root": {"organization": "com.example", "name": "app", "version": "1.0"},
      "details": [
        {
          "organization": "org.slf4j",
          "name": "slf4j-api",
          "modules": [
            {
              "revision": "1.7.25",
              "evicted": true,
              "licenses": [{"name": "MIT License", "url": "..."}],
              "artifacts": [{"type": "jar", "extension": "jar", "path": "..."}],
              "problem": null,
              "callers": [{"organization": "com.example", "name": "app", "revision": "1.0"}]
            }
          ]
        }
      ]
    }

or several, keyed by configuration name under ``"configurations"`` with a
shared top-level ``"root"``.

Within one organization/name detail block, the non-evicted revision is the
version every evicted revision was replaced by.
"""

from __future__ import annotations

from typing import Any, Mapping

from depgraph.core.model import Edge, Module, ModuleGraph, ModuleId
from depgraph.exceptions import ReportError


def _id_from(entry: Mapping[str, Any], version_key: str = "version") -> ModuleId:
    parts = (
        [entry.get("organization"), entry.get("name"), entry.get(version_key)]
        if isinstance(entry, Mapping)
        else [None]
    )
    if any(p is None for p in parts):
        raise ReportError(f"Incomplete module reference in update report: {entry!r}")
    return ModuleId(*(str(p) for p in parts))


def _artifact_path(artifacts: list[Mapping[str, Any]]) -> str | None:
    """Prefer an artifact of type jar, then any artifact with a jar extension."""
    for artifact in artifacts:
        if not isinstance(artifact, Mapping):
            raise ReportError(f"Invalid artifact entry in update report: {artifact!r}")
    for predicate in (
        lambda a: a.get("type") == "jar",
        lambda a: a.get("extension") == "jar",
    ):
        for artifact in artifacts:
            if predicate(artifact) and artifact.get("path"):
                return str(artifact["path"])
    return None


def _license_name(licenses: list[Mapping[str, Any]]) -> str | None:
    if not licenses:
        return None
    if not isinstance(licenses, list) or not isinstance(licenses[0], Mapping):
        raise ReportError(f"Invalid license entry in update report: {licenses!r}")
    return licenses[0].get("name")


def _detail_modules(detail: Mapping[str, Any]) -> tuple[list[Module], list[Edge]]:
    organization = detail.get("organization")
    name = detail.get("name")
    reports = detail.get("modules") or []
    for report in reports:
        if not isinstance(report, Mapping):
            raise ReportError(f"Invalid module entry in update report: {report!r}")
    chosen = next(
        (str(r["revision"]) for r in reports if not r.get("evicted") and "revision" in r),
        None,
    )

    nodes: list[Module] = []
    edges: list[Edge] = []
    for report in reports:
        module_id = _id_from(
            {"organization": organization, "name": name, **report}, version_key="revision"
        )
        nodes.append(
            Module(
                id=module_id,
                license=_license_name(report.get("licenses") or []),
                resolved_version=chosen if report.get("evicted") else None,
                artifact_path=_artifact_path(report.get("artifacts") or []),
                error=report.get("problem"),
            )
        )
        edges.extend(
            Edge(_id_from(caller, version_key="revision"), module_id)
            for caller in report.get("callers") or []
        )
    return nodes, edges


def from_update_report(
    report: Mapping[str, Any], configuration: str | None = None
) -> ModuleGraph:
    """Convert a native update report into a graph.

    Args:
        report: The report mapping (see module docstring).
        configuration: Configuration to select when the report carries
            several under ``"configurations"``.

    Returns:
        The graph, rooted at the report's ``"root"`` module.

    Raises:
        ReportError: If the root is missing, the requested configuration is
            absent, or an entry is incomplete or has the wrong shape.
    """
    if "root" not in report:
        raise ReportError("Update report has no 'root' module")
    root = Module(_id_from(report["root"]))

    section: Mapping[str, Any] = report
    if "configurations" in report:
        configurations = report["configurations"] or {}
        if not isinstance(configurations, Mapping):
            raise ReportError("Update report 'configurations' must be an object")
        if configuration not in configurations:
            raise ReportError(
                f"Update report has no configuration {configuration!r} "
                f"(available: {', '.join(sorted(configurations)) or 'none'})"
            )
        section = configurations[configuration]
        if not isinstance(section, Mapping):
            raise ReportError(
                f"Invalid configuration {configuration!r} in update report: {section!r}"
            )

    nodes: dict[ModuleId, Module] = {root.id: root}
    edges: list[Edge] = []
    for detail in section.get("details") or []:
        if not isinstance(detail, Mapping):
            raise ReportError(f"Invalid detail entry in update report: {detail!r}")
        detail_nodes, detail_edges = _detail_modules(detail)
        for module in detail_nodes:
            nodes.setdefault(module.id, module)
        edges.extend(detail_edges)
    return ModuleGraph.of(nodes.values(), edges)
