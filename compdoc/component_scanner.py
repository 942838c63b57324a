"""Discovery of component directories under a components source root."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List, Sequence

from .config import GeneratorConfig
from .extractors.locator import has_component_marker
from .logging import get_logger
from .models import ComponentLocation

_EXCLUDED_DIRS = {
    "node_modules",
    "__pycache__",
}


def resolve_categories_root(root: Path) -> Path:
    """Return ``<root>/components`` when present, else ``root`` itself."""
    nested = root / "components"
    return nested if nested.is_dir() else root


def _iter_component_dirs(category_dir: Path) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(category_dir):
        dirnames[:] = sorted(
            name for name in dirnames if name not in _EXCLUDED_DIRS and not name.startswith(".")
        )
        if has_component_marker(filenames):
            yield Path(dirpath)


class ComponentScanner:
    """Walks the source tree to list documentable components by category."""

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = config
        self.logger = get_logger("scanner")

    def scan(self, root: str | Path) -> List[ComponentLocation]:
        """Return every included component directory, grouped in category order."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Components source path not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Components source path is not a directory: {root}")

        categories_root = resolve_categories_root(root_path)
        self.logger.debug("Scanning categories in %s", categories_root)

        excluded_categories = set(self.config.exclude_categories) if self.config else set()
        categories = sorted(
            entry.name
            for entry in categories_root.iterdir()
            if entry.is_dir() and entry.name not in excluded_categories
        )
        self.logger.info("Found %d categories: %s", len(categories), ", ".join(categories))

        components: List[ComponentLocation] = []
        for category in categories:
            before = len(components)
            for component_dir in _iter_component_dirs(categories_root / category):
                if self._is_included(component_dir.name):
                    components.append(ComponentLocation(path=str(component_dir), category=category))
            self.logger.debug("  %s: found %d components", category, len(components) - before)

        self.logger.info("Total components found: %d", len(components))
        if not components and self._include_list():
            self.logger.warning(
                "No components found; the include list may be filtering out every component"
            )
        return components

    def _include_list(self) -> Sequence[str]:
        return self.config.include_components if self.config else []

    def _is_included(self, name: str) -> bool:
        include = self._include_list()
        if include and name not in include:
            return False
        if self.config and name in self.config.exclude_components:
            return False
        return True


__all__ = ["ComponentScanner", "resolve_categories_root"]
