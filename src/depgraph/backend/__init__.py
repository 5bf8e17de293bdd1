"""Report backends: turn a resolution report into a ``ModuleGraph``.

Supported sources:

- ``*.xml`` path: Ivy XML resolution report (``ivy_report``).
- ``*.json`` path: either a graph persisted by ``depgraph store`` or a
  native update report (``update_report``).
- ``Mapping``: an already-loaded native update report.

A report that is missing or cannot be parsed yields an empty graph and a
warning, so later commands still run and show nothing. A source of any
other kind raises ``UnsupportedReportError`` immediately.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from depgraph.backend.ivy_report import from_ivy_report_file, from_ivy_report_xml
from depgraph.backend.update_report import from_update_report
from depgraph.core.model import ModuleGraph
from depgraph.core.store import from_dict as stored_graph_from_dict, is_stored_graph
from depgraph.exceptions import GraphStoreError, ReportError, UnsupportedReportError

logger = logging.getLogger(__name__)

_SUFFIXES = (".xml", ".json")


def _load_json_report(path: Path, configuration: str | None) -> ModuleGraph:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ReportError(f"Cannot read report {path}: {exc}") from exc
    if is_stored_graph(data):
        try:
            return stored_graph_from_dict(data)
        except GraphStoreError as exc:
            raise ReportError(str(exc)) from exc
    if not isinstance(data, Mapping):
        raise ReportError(f"Report {path} is not a JSON object")
    return from_update_report(data, configuration)


def load_module_graph(source: Any, configuration: str | None = None) -> ModuleGraph:
    """Convert a report source into a graph.

    Args:
        source: A path (``str`` or ``Path``) to an ``.xml`` or ``.json``
            report, or a native update-report mapping.
        configuration: Configuration to select from multi-configuration
            update reports.

    Returns:
        The graph, or an empty graph if the report is missing or unparseable.

    Raises:
        UnsupportedReportError: If ``source`` is not a supported kind.
    """
    if isinstance(source, Mapping):
        try:
            return from_update_report(source, configuration)
        except ReportError as exc:
            logger.warning("Ignoring unusable update report: %s", exc)
            return ModuleGraph.empty()

    if not isinstance(source, (str, Path)):
        raise UnsupportedReportError(
            f"Unsupported report source of type {type(source).__name__}"
        )

    path = Path(source)
    suffix = path.suffix.lower()
    if suffix not in _SUFFIXES:
        raise UnsupportedReportError(
            f"Unsupported report file {path} (expected one of: {', '.join(_SUFFIXES)})"
        )
    if not path.is_file():
        logger.warning("Report %s not found, using an empty graph", path)
        return ModuleGraph.empty()

    try:
        if suffix == ".xml":
            return from_ivy_report_file(path)
        return _load_json_report(path, configuration)
    except ReportError as exc:
        logger.warning("Ignoring unusable report %s: %s", path, exc)
        return ModuleGraph.empty()


__all__ = [
    "from_ivy_report_file",
    "from_ivy_report_xml",
    "from_update_report",
    "load_module_graph",
]
