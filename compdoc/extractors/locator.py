"""Locates a component's properties, behavior and style source text."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from ..errors import MalformedArtifactError, MissingSourceError
from ..logging import get_logger
from .sourcemap import extract_source_content, source_file_name

_ENTRY_FILES = ("index.tsx", "index.ts")
_TYPES_FILES = ("types.ts", "types.tsx")
_TYPES_SUFFIXES = (".types.ts", ".types.tsx")
_STYLES_FILES = ("styles.ts", "styles.tsx")
_STYLES_SUFFIXES = (".styles.ts", ".styles.tsx")

_PROPS_ARTIFACT = ".props.js.map"
_COMPONENT_ARTIFACT = ".component.js.map"
_STYLES_ARTIFACT = ".styles.js.map"

DIRECT_SOURCE = "direct"
COMPILED_ARTIFACT = "compiled"


@dataclass
class SourceBundle:
    """Up to three source blobs recovered for a single component."""

    form: str
    props_source: Optional[str] = None
    behavior_source: Optional[str] = None
    style_source: Optional[str] = None
    props_path: Optional[Path] = None
    behavior_path: Optional[Path] = None
    style_path: Optional[Path] = None


def read_artifact_text(path: Path) -> str:
    """Return the original source carried by ``path``.

    Source maps are decoded to the embedded pre-compilation text; any other
    file is read verbatim.
    """
    path = Path(path)
    if path.name.endswith(".map"):
        return extract_source_content(path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedArtifactError(path, f"unreadable ({exc})") from exc


class SourceLocator:
    """Reads component sources from either supported on-disk representation."""

    def __init__(self) -> None:
        self.logger = get_logger("locator")

    def locate(self, component_dir: Path) -> SourceBundle:
        component_dir = Path(component_dir)
        try:
            files = sorted(entry.name for entry in component_dir.iterdir() if entry.is_file())
        except OSError as exc:
            raise MissingSourceError(component_dir) from exc

        entry = _first_named(files, _ENTRY_FILES)
        if entry is not None:
            bundle = self._locate_direct(component_dir, files, entry)
        else:
            bundle = self._locate_compiled(component_dir, files)

        if bundle.props_source is None and bundle.behavior_source is None:
            raise MissingSourceError(component_dir)
        self.logger.debug(
            "Located %s sources for %s (props=%s behavior=%s styles=%s)",
            bundle.form,
            component_dir.name,
            bundle.props_path.name if bundle.props_path else None,
            bundle.behavior_path.name if bundle.behavior_path else None,
            bundle.style_path.name if bundle.style_path else None,
        )
        return bundle

    def _locate_direct(self, component_dir: Path, files: List[str], entry: str) -> SourceBundle:
        entry_path = component_dir / entry
        content = read_artifact_text(entry_path)
        bundle = SourceBundle(
            form=DIRECT_SOURCE,
            props_source=content,
            behavior_source=content,
            props_path=entry_path,
            behavior_path=entry_path,
        )

        types_file = _first_named(files, _TYPES_FILES) or _first_suffixed(files, _TYPES_SUFFIXES)
        if types_file is not None:
            bundle.props_path = component_dir / types_file
            bundle.props_source = read_artifact_text(bundle.props_path)

        styles_file = _first_named(files, _STYLES_FILES) or _first_suffixed(files, _STYLES_SUFFIXES)
        if styles_file is not None:
            bundle.style_path = component_dir / styles_file
            bundle.style_source = read_artifact_text(bundle.style_path)
        return bundle

    def _locate_compiled(self, component_dir: Path, files: List[str]) -> SourceBundle:
        bundle = SourceBundle(form=COMPILED_ARTIFACT)

        props_map = _first_suffixed(files, (_PROPS_ARTIFACT,))
        if props_map is not None:
            bundle.props_path = component_dir / props_map
            bundle.props_source = self._read_source_map(bundle.props_path)

        component_map = _first_suffixed(files, (_COMPONENT_ARTIFACT,))
        if component_map is not None:
            bundle.behavior_path = component_dir / component_map
            bundle.behavior_source = self._read_source_map(bundle.behavior_path)

        styles_map = _first_suffixed(files, (_STYLES_ARTIFACT,))
        if styles_map is not None:
            bundle.style_path = component_dir / styles_map
            bundle.style_source = self._read_source_map(bundle.style_path)
        return bundle

    def _read_source_map(self, path: Path) -> str:
        content = extract_source_content(path)
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                "Recovered %s from %s", source_file_name(path) or "unnamed source", path.name
            )
        return content


def has_component_marker(filenames: Sequence[str]) -> bool:
    """Return True when a directory listing looks like a component folder."""
    for name in filenames:
        if name in _ENTRY_FILES:
            return True
        if name.endswith((_COMPONENT_ARTIFACT, _PROPS_ARTIFACT)):
            return True
    return False


def _first_named(files: Sequence[str], names: Sequence[str]) -> Optional[str]:
    for name in names:
        if name in files:
            return name
    return None


def _first_suffixed(files: Sequence[str], suffixes: Sequence[str]) -> Optional[str]:
    for name in files:
        if name.endswith(tuple(suffixes)):
            return name
    return None


__all__ = [
    "COMPILED_ARTIFACT",
    "DIRECT_SOURCE",
    "SourceBundle",
    "SourceLocator",
    "has_component_marker",
    "read_artifact_text",
]
