"""Persist a ``ModuleGraph`` between the compute and render steps.

The blob is a JSON document::

    {
      "format": "depgraph-module-graph",
      "format_version": 1,
      "nodes": [{"id": [org, name, version], "license": ..., ...}, ...],
      "edges": [[[org, name, version], [org, name, version]], ...]
    }

Ids are stored as three-element lists rather than ``org:name:version``
strings because nothing stops a component from containing a colon.

Determinism guarantee: ``store`` output is byte-identical for equal graphs
(nodes are already sorted, keys are sorted, edges keep their order).
Round-trip guarantee: ``load(store(g)) == g`` for every valid graph.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from depgraph.core.model import Edge, Module, ModuleGraph, ModuleId
from depgraph.exceptions import GraphStoreError

logger = logging.getLogger(__name__)

STORE_FORMAT = "depgraph-module-graph"
STORE_FORMAT_VERSION = 1

_OPTIONAL_FIELDS = ("license", "resolved_version", "artifact_path", "error")


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def _id_to_list(module_id: ModuleId) -> list[str]:
    return [module_id.organization, module_id.name, module_id.version]


def _module_to_dict(module: Module) -> dict[str, Any]:
    entry: dict[str, Any] = {"id": _id_to_list(module.id)}
    if module.extra_info:
        entry["extra_info"] = module.extra_info
    for name in _OPTIONAL_FIELDS:
        value = getattr(module, name)
        if value is not None:
            entry[name] = value
    return entry


def to_dict(graph: ModuleGraph) -> dict[str, Any]:
    """Serialize a graph to a JSON-compatible dict."""
    return {
        "format": STORE_FORMAT,
        "format_version": STORE_FORMAT_VERSION,
        "nodes": [_module_to_dict(m) for m in graph.nodes],
        "edges": [[_id_to_list(e.source), _id_to_list(e.target)] for e in graph.edges],
    }


def store(graph: ModuleGraph) -> str:
    """Serialize a graph to its opaque JSON blob."""
    return json.dumps(to_dict(graph), indent=2, sort_keys=True)


# ---------------------------------------------------------------------------
# Deserialization
# ---------------------------------------------------------------------------


def _id_from_list(raw: Any) -> ModuleId:
    if not isinstance(raw, list) or len(raw) != 3 or not all(isinstance(p, str) for p in raw):
        raise GraphStoreError(f"Invalid module id in stored graph: {raw!r}")
    return ModuleId(*raw)


def is_stored_graph(data: Any) -> bool:
    """True if ``data`` is a dict produced by ``to_dict``."""
    return isinstance(data, dict) and data.get("format") == STORE_FORMAT


def from_dict(data: dict[str, Any]) -> ModuleGraph:
    """Deserialize a graph from the dict produced by ``to_dict``.

    Raises:
        GraphStoreError: If the dict is not a stored graph, has an
            unsupported format version, or contains malformed entries.
    """
    if not is_stored_graph(data):
        raise GraphStoreError("Not a stored module graph")
    version = data.get("format_version")
    if version != STORE_FORMAT_VERSION:
        raise GraphStoreError(f"Unsupported stored graph version: {version!r}")

    try:
        nodes = [
            Module(
                id=_id_from_list(entry["id"]),
                extra_info=entry.get("extra_info", ""),
                **{name: entry.get(name) for name in _OPTIONAL_FIELDS},
            )
            for entry in data.get("nodes", [])
        ]
        edges = [
            Edge(_id_from_list(source), _id_from_list(target))
            for source, target in data.get("edges", [])
        ]
        return ModuleGraph.of(nodes, edges)
    except (KeyError, TypeError, ValueError) as exc:
        raise GraphStoreError(f"Corrupt stored graph: {exc}") from exc


def load(blob: str | bytes) -> ModuleGraph:
    """Deserialize a graph from its JSON blob.

    Raises:
        GraphStoreError: If the blob is not valid JSON or not a stored graph.
    """
    try:
        data = json.loads(blob)
    except json.JSONDecodeError as exc:
        raise GraphStoreError(f"Stored graph is not valid JSON: {exc}") from exc
    return from_dict(data)


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def write_graph(graph: ModuleGraph, path: Path) -> Path:
    """Atomically write the graph blob to ``path``.

    The blob goes to a temporary file in the destination directory, which
    then replaces ``path`` in one step; readers never see a partial file.
    Parent directories are created if needed.

    Returns:
        The resolved destination path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(store(graph))
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.info("Stored module graph (%d modules) to %s", graph.node_count, path)
    return path.resolve()


def read_graph(path: Path) -> ModuleGraph:
    """Read a graph previously written by ``write_graph``.

    Raises:
        GraphStoreError: If the file is missing or its content is invalid.
    """
    try:
        blob = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise GraphStoreError(f"Cannot read stored graph {path}: {exc}") from exc
    return load(blob)
