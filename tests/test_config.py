"""Tests for compdoc.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from compdoc.config import ConfigError, Conventions, GeneratorConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, GeneratorConfig)
    assert config.root == tmp_path.resolve()
    assert config.components_source_path is None
    assert config.include_components == []
    assert config.exclude_categories == ["node_modules", ".git", "dist", "coverage", "prefabs", "page"]
    assert config.exclude_components == []
    assert config.child_components == {}
    assert config.documentation.exclude_props == []
    assert config.documentation.component_overrides == {}
    assert config.conventions == Conventions()


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".compdoc.yml"
    config_file.write_text(
        """
components_source_path: "node_modules/@wavemaker/app-rn-runtime"
include_components: [button, label]
exclude_categories:
  - "page"
exclude_components: legacy
child_components:
  list:
    listItem: "list-item"
    ignored: 3
documentation:
  exclude_props: [key]
  exclude_inherited_props:
    - "id"
    - "name"
  exclude_methods: [componentWillReceiveProps]
  exclude_style_classes: ["app-button-hidden"]
  component_overrides:
    button:
      exclude_props: [caption]
      exclude_style_classes: ["btn-primary"]
conventions:
  name_prefix: "X"
  event_emitter: "emit"
  ancestor_search_dirs: [widgets]
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.components_source_path == (tmp_path / "node_modules" / "@wavemaker" / "app-rn-runtime").resolve()
    assert config.include_components == ["button", "label"]
    assert config.exclude_categories == ["page"]
    assert config.exclude_components == ["legacy"]
    assert config.child_components == {"list": {"listItem": "list-item"}}

    documentation = config.documentation
    assert documentation.exclude_props == ["key"]
    assert documentation.exclude_inherited_props == ["id", "name"]
    assert documentation.exclude_methods == ["componentWillReceiveProps"]
    assert documentation.exclude_style_classes == ["app-button-hidden"]
    override = documentation.component_overrides["button"]
    assert override.exclude_props == ["caption"]
    assert override.exclude_methods == []
    assert override.exclude_style_classes == ["btn-primary"]

    assert config.conventions.name_prefix == "X"
    assert config.conventions.event_emitter == "emit"
    assert config.conventions.ancestor_search_dirs == ["widgets"]
    assert config.conventions.root_props_name == "BaseProps"


def test_empty_exclude_categories_disables_defaults(tmp_path: Path) -> None:
    (tmp_path / ".compdoc.yml").write_text("exclude_categories: []\n", encoding="utf-8")

    assert load_config(tmp_path).exclude_categories == []


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    (tmp_path / ".compdoc.yml").write_text("\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.exclude_categories == ["node_modules", ".git", "dist", "coverage", "prefabs", "page"]


def test_invalid_yaml_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / ".compdoc.yml").write_text("include_components: [button\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_non_mapping_root_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / ".compdoc.yml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)
