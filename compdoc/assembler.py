"""Configured filtering of component records and child-component mapping."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Set, Tuple

from .config import ComponentOverride, DocumentationFilters
from .logging import get_logger
from .models import ComponentDoc


class DocFilter:
    """Applies the global, inherited and per-component exclusion lists."""

    def __init__(self, filters: DocumentationFilters | None = None) -> None:
        self.filters = filters or DocumentationFilters()

    def apply(self, doc: ComponentDoc) -> ComponentDoc:
        override = self.filters.component_overrides.get(doc.component_name, ComponentOverride())

        excluded_props: Set[str] = set(self.filters.exclude_props) | set(override.exclude_props)
        excluded_inherited = set(self.filters.exclude_inherited_props)
        props = [
            prop
            for prop in doc.props
            if prop.name not in excluded_props
            and not (prop.inherited and prop.name in excluded_inherited)
        ]

        excluded_methods = set(self.filters.exclude_methods) | set(override.exclude_methods)
        methods = [method for method in doc.methods if method.name not in excluded_methods]

        excluded_styles = set(self.filters.exclude_style_classes) | set(
            override.exclude_style_classes
        )
        styles = [style for style in doc.styles if style.class_name not in excluded_styles]

        return replace(doc, props=props, methods=methods, styles=styles)


class ChildComponentMap:
    """Resolves configured ``parent -> {child key: relative path}`` entries."""

    def __init__(self, mapping: Dict[str, Dict[str, str]] | None = None) -> None:
        self.mapping = mapping or {}
        self.logger = get_logger("assembler")

    def children_of(self, component_name: str, component_dir: Path) -> List[Tuple[str, Path]]:
        """Return existing child directories for ``component_name``, in configured order."""
        resolved: List[Tuple[str, Path]] = []
        for child_key, relative_path in self.mapping.get(component_name, {}).items():
            child_path = (Path(component_dir) / relative_path).resolve()
            if not child_path.exists():
                self.logger.warning(
                    "Child component path not found: %s (for %s in %s)",
                    child_path,
                    child_key,
                    component_name,
                )
                continue
            resolved.append((child_key, child_path))
        return resolved


__all__ = ["ChildComponentMap", "DocFilter"]
