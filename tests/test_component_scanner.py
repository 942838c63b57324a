"""Tests for compdoc.component_scanner."""

from __future__ import annotations

from pathlib import Path

import pytest

from compdoc.component_scanner import ComponentScanner, resolve_categories_root
from compdoc.config import GeneratorConfig
from tests._fixtures.component_builder import ComponentTreeBuilder


def _library(component_tree: ComponentTreeBuilder) -> ComponentTreeBuilder:
    component_tree.write(
        {
            "components/basic/button/index.tsx": "export default class WmButton {}\n",
            "components/basic/label/index.ts": "export default class WmLabel {}\n",
            "components/basic/README.md": "docs\n",
            "components/container/panel/panel.component.js": "compiled\n",
            "components/page/page/index.tsx": "export default class WmPage {}\n",
            "components/prefabs/custom/index.tsx": "export default class Custom {}\n",
            "components/basic/button/node_modules/dep/index.tsx": "export {};\n",
            "components/basic/.hidden/index.tsx": "export {};\n",
        }
    )
    component_tree.write_source_map("components/container/panel/panel.component.js.map", "class WmPanel {}\n")
    component_tree.write_source_map("components/data/list/list.props.js.map", "class WmListProps {}\n")
    return component_tree


def _names(locations) -> list[tuple[str, str]]:
    return [(location.category, Path(location.path).name) for location in locations]


def test_scan_groups_components_by_category(component_tree: ComponentTreeBuilder) -> None:
    library = _library(component_tree)
    config = GeneratorConfig(root=library.path())

    locations = ComponentScanner(config).scan(library.path())

    assert _names(locations) == [
        ("basic", "button"),
        ("basic", "label"),
        ("container", "panel"),
        ("data", "list"),
    ]


def test_scan_applies_include_and_exclude_lists(component_tree: ComponentTreeBuilder) -> None:
    library = _library(component_tree)
    config = GeneratorConfig(
        root=library.path(),
        include_components=["button", "label", "panel"],
        exclude_components=["label"],
    )

    locations = ComponentScanner(config).scan(library.path())

    assert _names(locations) == [("basic", "button"), ("container", "panel")]


def test_scan_without_config_keeps_every_category(component_tree: ComponentTreeBuilder) -> None:
    library = _library(component_tree)

    categories = {location.category for location in ComponentScanner().scan(library.path())}

    assert categories == {"basic", "container", "data", "page", "prefabs"}


def test_flat_layout_uses_root_as_categories(component_tree: ComponentTreeBuilder) -> None:
    component_tree.write({"basic/icon/index.tsx": "export default class WmIcon {}\n"})

    assert resolve_categories_root(component_tree.path()) == component_tree.path()
    assert _names(ComponentScanner().scan(component_tree.path())) == [("basic", "icon")]


def test_scan_rejects_missing_directory(tmp_path: Path) -> None:
    missing = tmp_path / "missing"

    with pytest.raises(FileNotFoundError) as excinfo:
        ComponentScanner().scan(missing)
    assert str(missing) in str(excinfo.value)


def test_scan_rejects_file_root(tmp_path: Path) -> None:
    file_root = tmp_path / "components.txt"
    file_root.write_text("", encoding="utf-8")

    with pytest.raises(NotADirectoryError):
        ComponentScanner().scan(file_root)
