"""Name-to-artifact index of properties declarations under the search roots."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from ..logging import get_logger

PROPS_ARTIFACT_SUFFIXES = (".props.js.map", ".props.tsx", ".props.ts")

_EXCLUDED_DIRS = {".git", "node_modules", "__pycache__"}


class AncestorIndex:
    """Maps file stems to properties artifacts, one directory scan per root."""

    def __init__(self, roots: Sequence[Path]) -> None:
        self.roots = [Path(root) for root in roots]
        self._entries: Optional[List[Dict[str, Path]]] = None
        self.logger = get_logger("inheritance.index")

    @property
    def entries(self) -> List[Dict[str, Path]]:
        if self._entries is None:
            self._entries = [self._scan_root(root) for root in self.roots]
        return self._entries

    def find(self, candidates: Iterable[str]) -> Optional[Path]:
        """Return the first artifact matching a candidate stem, candidates outermost."""
        entries = self.entries
        for candidate in candidates:
            for root_entries in entries:
                found = root_entries.get(candidate)
                if found is not None:
                    return found
        return None

    def _scan_root(self, root: Path) -> Dict[str, Path]:
        mapping: Dict[str, Path] = {}
        if not root.is_dir():
            self.logger.debug("Ancestor search root %s does not exist; skipping", root)
            return mapping
        for path in _iter_files(root):
            stem = _artifact_stem(path.name)
            if stem is not None and stem not in mapping:
                mapping[stem] = path
        self.logger.debug("Indexed %d properties artifacts under %s", len(mapping), root)
        return mapping


def _artifact_stem(filename: str) -> Optional[str]:
    for suffix in PROPS_ARTIFACT_SUFFIXES:
        if filename.endswith(suffix) and len(filename) > len(suffix):
            return filename[: -len(suffix)]
    return None


def _iter_files(root: Path) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(
            name for name in dirnames if name not in _EXCLUDED_DIRS and not name.startswith(".")
        )
        current_dir = Path(dirpath)
        for filename in sorted(filenames):
            yield current_dir / filename


__all__ = ["AncestorIndex", "PROPS_ARTIFACT_SUFFIXES"]
