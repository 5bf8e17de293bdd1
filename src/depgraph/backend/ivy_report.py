"""Build a ``ModuleGraph`` from an Ivy XML resolution report.

Ivy writes one report per configuration
(``<org>-<module>-<conf>.xml`` under the resolution cache). The parts used
here::

    <ivy-report>
      <info organisation="com.example" module="app" revision="1.0" conf="compile"/>
      <dependencies>
        <module organisation="org.slf4j" name="slf4j-api">
          <revision name="1.7.25" evicted="latest-revision" error="...">
            <license name="MIT License" url="..."/>
            <evicted-by rev="1.7.30"/>
            <caller organisation="com.example" name="app" callerrev="1.0" .../>
            <artifacts><artifact ... location="/path/slf4j-api.jar"/></artifacts>
          </revision>
        </module>
      </dependencies>
    </ivy-report>

Each ``<revision>`` becomes a node, each ``<caller>`` an edge from the caller
to that revision, and ``<info>`` the root module.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from depgraph.core.model import Edge, Module, ModuleGraph, ModuleId
from depgraph.exceptions import ReportError

logger = logging.getLogger(__name__)


def _required(element: ET.Element, attribute: str) -> str:
    value = element.get(attribute)
    if value is None:
        raise ReportError(f"<{element.tag}> is missing attribute {attribute!r}")
    return value


def _first_attribute(element: ET.Element, path: str, attribute: str) -> str | None:
    child = element.find(path)
    return child.get(attribute) if child is not None else None


def _jar_location(revision_el: ET.Element) -> str | None:
    """Location of the jar artifact: type jar first, then extension jar."""
    artifacts = revision_el.findall("artifacts/artifact")
    for attribute in ("type", "ext"):
        for artifact in artifacts:
            if artifact.get(attribute) == "jar" and artifact.get("location"):
                return artifact.get("location")
    return None


def _module_from_revision(
    module_el: ET.Element, revision_el: ET.Element
) -> tuple[Module, list[Edge]]:
    module_id = ModuleId(
        _required(module_el, "organisation"),
        _required(module_el, "name"),
        _required(revision_el, "name"),
    )
    module = Module(
        id=module_id,
        license=_first_attribute(revision_el, "license", "name"),
        resolved_version=_first_attribute(revision_el, "evicted-by", "rev"),
        artifact_path=_jar_location(revision_el),
        error=revision_el.get("error"),
    )
    edges = [
        Edge(
            ModuleId(
                _required(caller, "organisation"),
                _required(caller, "name"),
                _required(caller, "callerrev"),
            ),
            module_id,
        )
        for caller in revision_el.findall("caller")
    ]
    return module, edges


def from_ivy_report_xml(xml_text: str | bytes) -> ModuleGraph:
    """Parse Ivy report XML text into a graph.

    Raises:
        ReportError: If the XML is malformed or lacks the ``<info>`` element
            or a required attribute.
    """
    try:
        root_el = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        raise ReportError(f"Malformed Ivy report: {exc}") from exc

    info = root_el.find("info")
    if info is None:
        raise ReportError("Ivy report has no <info> element")
    root = Module(
        ModuleId(
            _required(info, "organisation"),
            _required(info, "module"),
            _required(info, "revision"),
        )
    )

    nodes: dict[ModuleId, Module] = {root.id: root}
    edges: list[Edge] = []
    for module_el in root_el.findall("dependencies/module"):
        for revision_el in module_el.findall("revision"):
            module, module_edges = _module_from_revision(module_el, revision_el)
            if module.id in nodes and module.id != root.id:
                logger.warning("Duplicate revision %s in Ivy report, keeping first", module.id)
                continue
            nodes.setdefault(module.id, module)
            edges.extend(module_edges)

    return ModuleGraph.of(nodes.values(), edges)


def from_ivy_report_file(path: Path) -> ModuleGraph:
    """Read and parse an Ivy report file.

    Raises:
        ReportError: If the file cannot be read or parsed.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise ReportError(f"Cannot read Ivy report {path}: {exc}") from exc
    return from_ivy_report_xml(data)
