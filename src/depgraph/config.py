"""Settings for graph loading, filtering, and output locations.

Settings are read from a YAML file and then passed explicitly to whatever
needs them; nothing in ``depgraph`` reads ambient configuration on its own.
File lookup order for ``load_settings()`` without an explicit path:

1. ``$DEPGRAPH_CONFIG`` if set.
2. ``depgraph.yaml`` in the current working directory if present.
3. Built-in defaults.

Example ``depgraph.yaml``::

    configuration: runtime
    target_dir: build/reports
    platform_version: "2.13.12"
    dot_node_label: "{name}\\n{version}"
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from depgraph.core.transformations import DEFAULT_PLATFORM_NAME, DEFAULT_PLATFORM_ORGANIZATION
from depgraph.exceptions import ConfigError
from depgraph.rendering.dot import DEFAULT_DOT_HEADER

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DEPGRAPH_CONFIG"
DEFAULT_CONFIG_FILE = "depgraph.yaml"

DEFAULT_NODE_LABEL = "{organization}<BR/><B>{name}</B><BR/>{version}"


@dataclass(frozen=True)
class GraphSettings:
    """Resolved settings for one invocation.

    Attributes:
        configuration: Build configuration to select from a report.
        target_dir: Base directory for generated files.
        filter_platform_library: Remove the platform library node before
            rendering.
        platform_organization: Organization of the platform library.
        platform_name: Artifact name of the platform library.
        platform_version: Version the build runs on; used only to warn about
            a mismatched platform library. None disables the check.
        dot_header: Raw text opening the DOT ``digraph`` block.
        dot_node_label: ``str.format`` template with ``{organization}``,
            ``{name}`` and ``{version}`` fields.
    """

    configuration: str = "compile"
    target_dir: Path = Path("target")
    filter_platform_library: bool = True
    platform_organization: str = DEFAULT_PLATFORM_ORGANIZATION
    platform_name: str = DEFAULT_PLATFORM_NAME
    platform_version: str | None = None
    dot_header: str = DEFAULT_DOT_HEADER
    dot_node_label: str = DEFAULT_NODE_LABEL

    # -- Derived output locations -----------------------------------------

    @property
    def dot_file(self) -> Path:
        return self.target_dir / f"dependencies-{self.configuration}.dot"

    @property
    def graphml_file(self) -> Path:
        return self.target_dir / f"dependencies-{self.configuration}.graphml"

    @property
    def browse_graph_dir(self) -> Path:
        return self.target_dir / "browse-dependency-graph"

    @property
    def browse_tree_dir(self) -> Path:
        return self.target_dir / "browse-dependency-tree"

    def node_label(self, organization: str, name: str, version: str) -> str:
        """Node label for DOT output, built from ``dot_node_label``."""
        return self.dot_node_label.format(
            organization=organization, name=name, version=version
        )

    def with_overrides(self, **overrides: Any) -> GraphSettings:
        """Copy with every non-None override applied (CLI options win)."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


_FIELD_NAMES = {f.name for f in fields(GraphSettings)}
_STRING_FIELDS = _FIELD_NAMES - {"target_dir", "filter_platform_library", "platform_version"}


def settings_from_dict(data: dict[str, Any]) -> GraphSettings:
    """Build settings from a parsed mapping, validating keys and types.

    Raises:
        ConfigError: On unknown keys, wrongly typed values, or a node label
            template that references fields other than organization, name,
            and version.
    """
    unknown = sorted(set(data) - _FIELD_NAMES)
    if unknown:
        raise ConfigError(
            f"Unknown setting(s): {', '.join(unknown)} "
            f"(known: {', '.join(sorted(_FIELD_NAMES))})"
        )

    values = dict(data)
    for key in _STRING_FIELDS & set(values):
        if not isinstance(values[key], str):
            raise ConfigError(f"Setting {key!r} must be a string")
    if "filter_platform_library" in values and not isinstance(
        values["filter_platform_library"], bool
    ):
        raise ConfigError("Setting 'filter_platform_library' must be true or false")
    if values.get("platform_version") is not None:
        values["platform_version"] = str(values["platform_version"])
    if "target_dir" in values:
        if not isinstance(values["target_dir"], str):
            raise ConfigError("Setting 'target_dir' must be a path string")
        values["target_dir"] = Path(values["target_dir"])

    settings = GraphSettings(**values)
    try:
        settings.node_label("org", "name", "1.0")
    except (KeyError, IndexError, ValueError) as exc:
        raise ConfigError(
            f"Invalid dot_node_label template {settings.dot_node_label!r}: {exc}"
        ) from exc
    return settings


def _config_path(path: str | Path | None) -> Path | None:
    if path is not None:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    default = Path.cwd() / DEFAULT_CONFIG_FILE
    return default if default.is_file() else None


def load_settings(path: str | Path | None = None) -> GraphSettings:
    """Load settings from YAML, falling back to defaults when no file applies.

    Args:
        path: Explicit settings file. Overrides the environment variable and
            the working-directory default.

    Returns:
        The loaded settings.

    Raises:
        ConfigError: If an explicitly named file is missing or unreadable,
            is not valid YAML, is not a mapping, or has invalid settings.
    """
    config_path = _config_path(path)
    if config_path is None:
        return GraphSettings()

    try:
        raw = config_path.read_text(encoding="utf-8")
        data = yaml.safe_load(raw)
    except OSError as exc:
        raise ConfigError(f"Cannot read settings file {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in settings file {config_path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {config_path} must contain a mapping")

    logger.debug("Loaded settings from %s", config_path)
    return settings_from_dict(data)
