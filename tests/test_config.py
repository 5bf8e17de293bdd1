"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from depgraph.config import CONFIG_ENV_VAR, GraphSettings, load_settings, settings_from_dict
from depgraph.exceptions import ConfigError


@pytest.fixture(autouse=True)
def _isolated(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """No ambient settings file or environment variable."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)


class TestDefaults:
    """Built-in defaults and derived paths."""

    def test_no_file_gives_defaults(self) -> None:
        assert load_settings() == GraphSettings()

    def test_derived_paths(self) -> None:
        s = GraphSettings(configuration="runtime", target_dir=Path("out"))
        assert s.dot_file == Path("out/dependencies-runtime.dot")
        assert s.graphml_file == Path("out/dependencies-runtime.graphml")
        assert s.browse_graph_dir == Path("out/browse-dependency-graph")
        assert s.browse_tree_dir == Path("out/browse-dependency-tree")

    def test_node_label(self) -> None:
        s = GraphSettings(dot_node_label="{name}@{version}")
        assert s.node_label("org", "lib", "1.0") == "lib@1.0"

    def test_with_overrides_ignores_none(self) -> None:
        s = GraphSettings(configuration="test").with_overrides(configuration=None)
        assert s.configuration == "test"
        assert s.with_overrides(configuration="compile").configuration == "compile"


class TestLoadSettings:
    """YAML lookup order and validation."""

    def test_working_directory_file(self, tmp_path: Path) -> None:
        (tmp_path / "depgraph.yaml").write_text("configuration: runtime\n", encoding="utf-8")
        assert load_settings().configuration == "runtime"

    def test_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text("target_dir: build\nplatform_version: 2.13\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        settings = load_settings()
        assert settings.target_dir == Path("build")
        assert settings.platform_version == "2.13"

    def test_explicit_path_wins(self, tmp_path: Path) -> None:
        (tmp_path / "depgraph.yaml").write_text("configuration: runtime\n", encoding="utf-8")
        explicit = tmp_path / "other.yaml"
        explicit.write_text("configuration: test\n", encoding="utf-8")
        assert load_settings(explicit).configuration == "test"

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_settings(path) == GraphSettings()

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read settings file"):
            load_settings(tmp_path / "absent.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("configuration: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="must contain a mapping"):
            load_settings(path)


class TestSettingsFromDict:
    """Key and type validation."""

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigError, match="Unknown setting\\(s\\): colour"):
            settings_from_dict({"colour": "blue"})

    def test_wrong_type(self) -> None:
        with pytest.raises(ConfigError, match="'configuration' must be a string"):
            settings_from_dict({"configuration": 3})

    def test_flag_must_be_bool(self) -> None:
        with pytest.raises(ConfigError, match="true or false"):
            settings_from_dict({"filter_platform_library": "no"})

    def test_bad_label_template(self) -> None:
        with pytest.raises(ConfigError, match="Invalid dot_node_label"):
            settings_from_dict({"dot_node_label": "{group}"})

    def test_all_keys(self) -> None:
        s = settings_from_dict(
            {
                "configuration": "test",
                "target_dir": "out",
                "filter_platform_library": False,
                "platform_organization": "org.jetbrains.kotlin",
                "platform_name": "kotlin-stdlib",
                "platform_version": "1.9.22",
                "dot_header": "digraph x {",
                "dot_node_label": "{name}",
            }
        )
        assert s.filter_platform_library is False
        assert s.target_dir == Path("out")
        assert s.platform_name == "kotlin-stdlib"
