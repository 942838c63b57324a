"""Merges declared and emitted events, including those of referenced components."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol

from .analyzers import EmittedEventScanner, declared_events
from .config import Conventions
from .errors import MalformedArtifactError
from .extractors import read_artifact_text
from .logging import get_logger
from .models import EventDescriptor, PropDescriptor

_REFERENCE_SUFFIXES = (".js", ".js.map", ".tsx", ".ts")
_REFERENCE_ENTRY_FILES = ("index.tsx", "index.ts")


class ReferenceResolver(Protocol):
    """Finds the behavior sources of components statically referenced by a source."""

    def referenced_components(self, source: str) -> List[Path]:
        ...


class ImportReferenceScanner:
    """Resolves internal import specifiers textually against the components root."""

    def __init__(self, components_path: Path, conventions: Conventions | None = None) -> None:
        self.components_path = Path(components_path)
        self.conventions = conventions or Conventions()
        dirs = "|".join(re.escape(name) for name in self.conventions.reference_dirs)
        self._pattern = re.compile(
            r"from\s+['\"]"
            + re.escape(self.conventions.internal_import_prefix)
            + rf"((?:{dirs})/[^'\"]+)['\"]"
        )
        self.logger = get_logger("reconciler.imports")

    def referenced_components(self, source: str) -> List[Path]:
        paths: List[Path] = []
        for match in self._pattern.finditer(source):
            resolved = self._resolve(match.group(1))
            if resolved is None:
                self.logger.debug("Referenced component %s not found", match.group(1))
                continue
            if resolved not in paths:
                paths.append(resolved)
        return paths

    def _resolve(self, specifier: str) -> Optional[Path]:
        base = self.components_path / specifier
        for suffix in _REFERENCE_SUFFIXES:
            candidate = base.parent / f"{base.name}{suffix}"
            if candidate.is_file():
                return candidate
        for entry in _REFERENCE_ENTRY_FILES:
            candidate = base / entry
            if candidate.is_file():
                return candidate
        return None


class EventReconciler:
    """Builds the final, name-unique event list for one component."""

    def __init__(
        self,
        conventions: Conventions | None = None,
        *,
        emitted: EmittedEventScanner | None = None,
        references: ReferenceResolver | None = None,
    ) -> None:
        self.conventions = conventions or Conventions()
        self.emitted = emitted or EmittedEventScanner(self.conventions)
        self.references = references
        self.logger = get_logger("reconciler")

    def reconcile(
        self, props: Iterable[PropDescriptor], behavior_source: Optional[str]
    ) -> List[EventDescriptor]:
        events: Dict[str, EventDescriptor] = {}
        for event in declared_events(props):
            events[event.name] = event

        if behavior_source:
            # Call-site signatures are more accurate than declared prop types.
            for event in self.emitted.scan(behavior_source):
                events[event.name] = event

            if self.references is not None:
                for path in self.references.referenced_components(behavior_source):
                    for event in self._referenced_events(path):
                        events.setdefault(event.name, event)

        return list(events.values())

    def _referenced_events(self, path: Path) -> List[EventDescriptor]:
        try:
            source = read_artifact_text(path)
        except MalformedArtifactError as exc:
            self.logger.warning("Skipping referenced component: %s", exc)
            return []
        events = self.emitted.scan(source)
        self.logger.debug("Referenced component %s emits %d event(s)", path, len(events))
        return events


__all__ = ["EventReconciler", "ImportReferenceScanner", "ReferenceResolver"]
