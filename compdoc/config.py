"""Configuration loading for compdoc (.compdoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".compdoc.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ComponentOverride:
    """Per-component exclusions layered on top of the global lists."""

    exclude_props: List[str] = field(default_factory=list)
    exclude_methods: List[str] = field(default_factory=list)
    exclude_style_classes: List[str] = field(default_factory=list)


@dataclass
class DocumentationFilters:
    """Content filtering applied to every assembled component record."""

    exclude_props: List[str] = field(default_factory=list)
    exclude_inherited_props: List[str] = field(default_factory=list)
    exclude_methods: List[str] = field(default_factory=list)
    exclude_style_classes: List[str] = field(default_factory=list)
    component_overrides: Dict[str, ComponentOverride] = field(default_factory=dict)


@dataclass
class Conventions:
    """Names and locations the extraction engine matches on."""

    root_props_name: str = "BaseProps"
    ancestor_suffixes: List[str] = field(default_factory=lambda: ["Props", "Component"])
    name_prefix: str = "Wm"
    props_suffix: str = "Props"
    non_component_suffixes: List[str] = field(
        default_factory=lambda: ["Props", "Styles", "State"]
    )
    lifecycle_methods: List[str] = field(
        default_factory=lambda: [
            "constructor",
            "render",
            "componentDidMount",
            "componentWillUnmount",
            "shouldComponentUpdate",
            "componentDidUpdate",
        ]
    )
    default_class_constant: str = "DEFAULT_CLASS"
    style_registration: str = "addStyle"
    event_emitter: str = "invokeEventCallback"
    implicit_event_args: List[str] = field(
        default_factory=lambda: ["this.props.target", "target"]
    )
    internal_import_prefix: str = "@wavemaker/app-rn-runtime/"
    reference_dirs: List[str] = field(default_factory=lambda: ["core", "components"])
    ancestor_search_dirs: List[str] = field(default_factory=lambda: ["components", "core"])
    root_props_locations: List[str] = field(
        default_factory=lambda: [
            "core/base.component.js.map",
            "core/base.ts",
            "core/base.tsx",
            "common/base.ts",
            "common/base.tsx",
        ]
    )


_DEFAULT_EXCLUDED_CATEGORIES = ["node_modules", ".git", "dist", "coverage", "prefabs", "page"]


@dataclass
class GeneratorConfig:
    """Represents the settings defined in .compdoc.yml."""

    root: Path
    components_source_path: Optional[Path] = None
    include_components: List[str] = field(default_factory=list)
    exclude_categories: List[str] = field(
        default_factory=lambda: list(_DEFAULT_EXCLUDED_CATEGORIES)
    )
    exclude_components: List[str] = field(default_factory=list)
    child_components: Dict[str, Dict[str, str]] = field(default_factory=dict)
    documentation: DocumentationFilters = field(default_factory=DocumentationFilters)
    conventions: Conventions = field(default_factory=Conventions)


def load_config(config_path: Path) -> GeneratorConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return GeneratorConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = GeneratorConfig(root=root)

    source_path = _as_str(data.get("components_source_path"))
    if source_path:
        config.components_source_path = (root / source_path).resolve()

    config.include_components = _as_str_list(data.get("include_components"))
    if "exclude_categories" in data:
        config.exclude_categories = _as_str_list(data.get("exclude_categories"))
    config.exclude_components = _as_str_list(data.get("exclude_components"))
    config.child_components = _parse_child_components(data.get("child_components"))

    doc_data = _as_dict(data.get("documentation"))
    if doc_data:
        config.documentation = DocumentationFilters(
            exclude_props=_as_str_list(doc_data.get("exclude_props")),
            exclude_inherited_props=_as_str_list(doc_data.get("exclude_inherited_props")),
            exclude_methods=_as_str_list(doc_data.get("exclude_methods")),
            exclude_style_classes=_as_str_list(doc_data.get("exclude_style_classes")),
            component_overrides=_parse_overrides(doc_data.get("component_overrides")),
        )

    conventions_data = _as_dict(data.get("conventions"))
    if conventions_data:
        config.conventions = _parse_conventions(conventions_data)

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _parse_child_components(value: Any) -> Dict[str, Dict[str, str]]:
    result: Dict[str, Dict[str, str]] = {}
    for parent, mapping in _as_dict(value).items():
        children = {
            str(key): str(rel_path)
            for key, rel_path in _as_dict(mapping).items()
            if isinstance(rel_path, str)
        }
        if children:
            result[str(parent)] = children
    return result


def _parse_overrides(value: Any) -> Dict[str, ComponentOverride]:
    overrides: Dict[str, ComponentOverride] = {}
    for name, raw in _as_dict(value).items():
        entry = _as_dict(raw)
        overrides[str(name)] = ComponentOverride(
            exclude_props=_as_str_list(entry.get("exclude_props")),
            exclude_methods=_as_str_list(entry.get("exclude_methods")),
            exclude_style_classes=_as_str_list(entry.get("exclude_style_classes")),
        )
    return overrides


def _parse_conventions(data: Dict[str, Any]) -> Conventions:
    conventions = Conventions()
    for key in (
        "root_props_name",
        "name_prefix",
        "props_suffix",
        "default_class_constant",
        "style_registration",
        "event_emitter",
        "internal_import_prefix",
    ):
        if key in data:
            value = _as_str(data.get(key))
            setattr(conventions, key, value if value is not None else "")
    for key in (
        "ancestor_suffixes",
        "non_component_suffixes",
        "lifecycle_methods",
        "implicit_event_args",
        "reference_dirs",
        "ancestor_search_dirs",
        "root_props_locations",
    ):
        if key in data:
            setattr(conventions, key, _as_str_list(data.get(key)))
    return conventions


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ComponentOverride",
    "ConfigError",
    "Conventions",
    "DocumentationFilters",
    "GeneratorConfig",
    "load_config",
]
