"""Resolution of inherited props along a component's ancestor chain."""

from __future__ import annotations

import re
import warnings
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ..analyzers import SyntaxAnalyzer
from ..config import Conventions
from ..errors import CycleDetected, MalformedArtifactError, UnresolvedInheritanceWarning
from ..extractors import read_artifact_text
from ..logging import get_logger
from ..models import PropDescriptor
from .index import AncestorIndex

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


class RootPropertyCache:
    """Write-once lookup of the hierarchy root's own props.

    The first call to :meth:`get` reads the root declaration from the fixed
    locations in :class:`Conventions`; every later call returns the same tuple.
    """

    def __init__(
        self,
        components_path: Path,
        analyzer: SyntaxAnalyzer,
        conventions: Conventions | None = None,
    ) -> None:
        self.components_path = Path(components_path)
        self.analyzer = analyzer
        self.conventions = conventions or Conventions()
        self._props: Optional[Tuple[PropDescriptor, ...]] = None
        self.logger = get_logger("inheritance.root")

    def get(self) -> Tuple[PropDescriptor, ...]:
        if self._props is None:
            self._props = tuple(self._load())
        return self._props

    def _load(self) -> List[PropDescriptor]:
        root_name = self.conventions.root_props_name
        for location in self.conventions.root_props_locations:
            path = self.components_path / location
            if not path.is_file():
                continue
            try:
                source = read_artifact_text(path)
            except MalformedArtifactError as exc:
                self.logger.error("%s", exc)
                continue
            declaration = self.analyzer.extract_props(source)
            if declaration is not None and declaration.name == root_name:
                self.logger.debug(
                    "Loaded %d %s props from %s", len(declaration.props), root_name, path
                )
                return list(declaration.props)
            self.logger.debug("%s does not declare %s", path, root_name)
        self.logger.debug("%s not found locally; treating it as external", root_name)
        return []


class AncestorResolver:
    """Maps declared ancestor names to their props through file-name discovery."""

    def __init__(
        self,
        components_path: Path,
        analyzer: SyntaxAnalyzer | None = None,
        conventions: Conventions | None = None,
        index: AncestorIndex | None = None,
        root_cache: RootPropertyCache | None = None,
    ) -> None:
        self.components_path = Path(components_path)
        self.conventions = conventions or Conventions()
        self.analyzer = analyzer or SyntaxAnalyzer(self.conventions)
        self.index = index or AncestorIndex(
            [self.components_path / name for name in self.conventions.ancestor_search_dirs]
        )
        self.root_cache = root_cache or RootPropertyCache(
            self.components_path, self.analyzer, self.conventions
        )
        self.logger = get_logger("inheritance")

    def resolve(self, ancestor: str, *, chain: Sequence[str] = ()) -> List[PropDescriptor]:
        """Return every prop inherited through ``ancestor``, nearest level first.

        ``chain`` holds the declarations already being resolved; meeting one of
        them again raises :class:`CycleDetected`.
        """
        if ancestor in chain:
            raise CycleDetected([*chain, ancestor])

        if ancestor == self.conventions.root_props_name:
            return [prop.as_inherited(ancestor) for prop in self.root_cache.get()]

        artifact = self.find_props_artifact(ancestor)
        if artifact is None:
            message = f"Could not find props file for parent class: {ancestor}"
            self.logger.warning(message)
            warnings.warn(message, UnresolvedInheritanceWarning, stacklevel=2)
            return []
        self.logger.debug("Resolving parent %s -> %s", ancestor, artifact)

        try:
            source = read_artifact_text(artifact)
        except MalformedArtifactError as exc:
            self.logger.error("Error extracting %s: %s", ancestor, exc)
            return []

        declaration = self.analyzer.extract_props(source)
        if declaration is None:
            self.logger.debug("No props declaration in %s for %s", artifact, ancestor)
            return []

        inherited = [prop.as_inherited(ancestor) for prop in declaration.props]
        self.logger.debug(
            "Extracted %d props for %s (base: %s)",
            len(inherited),
            ancestor,
            declaration.ancestor,
        )
        if declaration.ancestor:
            inherited.extend(self.resolve(declaration.ancestor, chain=[*chain, ancestor]))
        return inherited

    def find_props_artifact(self, ancestor: str) -> Optional[Path]:
        return self.index.find(self.candidate_stems(ancestor))

    def candidate_stems(self, ancestor: str) -> List[str]:
        base = ancestor
        for suffix in self.conventions.ancestor_suffixes:
            if suffix and base.endswith(suffix) and len(base) > len(suffix):
                base = base[: -len(suffix)]

        variants = [base]
        prefix = self.conventions.name_prefix
        if prefix and base.startswith(prefix) and len(base) > len(prefix):
            variants.append(base[len(prefix) :])

        candidates: List[str] = []
        for variant in variants:
            for candidate in (variant.lower(), _to_kebab(variant)):
                if candidate not in candidates:
                    candidates.append(candidate)
        return candidates


def _to_kebab(name: str) -> str:
    return _CAMEL_BOUNDARY.sub(r"\1-\2", name).lower()


__all__ = ["AncestorResolver", "RootPropertyCache"]
