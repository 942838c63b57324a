"""Error taxonomy for component extraction."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class CompdocError(RuntimeError):
    """Base class for recoverable, per-component extraction failures."""


class MissingSourceError(CompdocError):
    """Raised when a component directory yields neither props nor behavior source."""

    def __init__(self, component_dir: Path) -> None:
        super().__init__(f"No source files found for {component_dir}")
        self.component_dir = component_dir


class MalformedArtifactError(CompdocError):
    """Raised when a compiled artifact cannot be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Malformed artifact {path}: {reason}")
        self.path = path
        self.reason = reason


class CycleDetected(CompdocError):
    """Raised when an ancestor chain loops back onto itself."""

    def __init__(self, chain: Sequence[str]) -> None:
        self.chain = tuple(chain)
        super().__init__("Ancestor cycle detected: " + " -> ".join(self.chain))


class UnresolvedInheritanceWarning(UserWarning):
    """Issued when no properties artifact matches a declared ancestor."""


__all__ = [
    "CompdocError",
    "CycleDetected",
    "MalformedArtifactError",
    "MissingSourceError",
    "UnresolvedInheritanceWarning",
]
