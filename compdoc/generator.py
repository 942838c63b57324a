"""Pipeline orchestration for single-component and batch documentation runs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .analyzers import SyntaxAnalyzer
from .assembler import ChildComponentMap, DocFilter
from .component_scanner import ComponentScanner
from .config import GeneratorConfig
from .errors import CycleDetected, MalformedArtifactError, MissingSourceError
from .extractors import SourceLocator
from .inheritance import AncestorResolver
from .logging import get_logger
from .models import ComponentDoc, ComponentLocation, MethodDescriptor, PropDescriptor, StyleDescriptor
from .reconciler import EventReconciler, ImportReferenceScanner


@dataclass
class ComponentFailure:
    """A component that could not be documented and why."""

    path: str
    reason: str


@dataclass
class BatchResult:
    """Outcome of documenting every discovered component."""

    docs: List[ComponentDoc] = field(default_factory=list)
    failures: List[ComponentFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.docs)

    @property
    def failed(self) -> int:
        return len(self.failures)


class ComponentDocGenerator:
    """Coordinates locate -> analyze -> resolve -> reconcile -> filter for components."""

    def __init__(
        self,
        components_path: str | Path,
        config: GeneratorConfig | None = None,
        *,
        analyzer: SyntaxAnalyzer | None = None,
        locator: SourceLocator | None = None,
        resolver: AncestorResolver | None = None,
        reconciler: EventReconciler | None = None,
        scanner: ComponentScanner | None = None,
    ) -> None:
        self.components_path = Path(components_path).expanduser().resolve()
        self.config = config or GeneratorConfig(root=self.components_path)
        conventions = self.config.conventions
        self.analyzer = analyzer or SyntaxAnalyzer(conventions)
        self.locator = locator or SourceLocator()
        self.resolver = resolver or AncestorResolver(
            self.components_path, self.analyzer, conventions
        )
        self.reconciler = reconciler or EventReconciler(
            conventions,
            references=ImportReferenceScanner(self.components_path, conventions),
        )
        self.doc_filter = DocFilter(self.config.documentation)
        self.child_map = ChildComponentMap(self.config.child_components)
        self.scanner = scanner or ComponentScanner(self.config)
        self.logger = get_logger("generator")

    # ------------------------------------------------------------------
    # Discovery

    def find_all_components(self) -> List[ComponentLocation]:
        return self.scanner.scan(self.components_path)

    def find_component(self, name: str) -> Optional[ComponentLocation]:
        wanted = name.lower()
        for location in self.find_all_components():
            if Path(location.path).name.lower() == wanted:
                return location
        return None

    # ------------------------------------------------------------------
    # Generation

    def generate_component_doc(
        self, component_path: str | Path, category: str
    ) -> Optional[ComponentDoc]:
        """Return the filtered record for one component, or None when it fails."""
        doc, _ = self._try_generate(Path(component_path), category, stack=())
        return doc

    def generate_all(self) -> BatchResult:
        """Document every discovered component sequentially, isolating failures."""
        components = self.find_all_components()
        result = BatchResult()
        for location in components:
            component_dir = Path(location.path)
            self.logger.info("Generating docs for %s/%s...", location.category, component_dir.name)
            doc, reason = self._try_generate(component_dir, location.category, stack=())
            if doc is not None:
                result.docs.append(doc)
            else:
                result.failures.append(
                    ComponentFailure(path=location.path, reason=reason or "unknown error")
                )
        self.logger.info(
            "Generated docs for %d component(s); %d failed", result.succeeded, result.failed
        )
        return result

    def build_component_doc(
        self, component_dir: Path, category: str, stack: Sequence[Path] = ()
    ) -> ComponentDoc:
        """Run the full pipeline for one directory, raising on per-component errors."""
        component_dir = Path(component_dir)
        sources = self.locator.locate(component_dir)
        component_name = component_dir.name

        props: List[PropDescriptor] = []
        base_class: Optional[str] = None
        props_parsed = None
        if sources.props_source:
            props_parsed = self.analyzer.parse(sources.props_source)
            declaration = self.analyzer.extract_props(props_parsed)
            if declaration is not None:
                props = list(declaration.props)
                base_class = declaration.ancestor
                if base_class:
                    props.extend(self.resolver.resolve(base_class, chain=[declaration.name]))

        methods: List[MethodDescriptor] = []
        if sources.behavior_source:
            if props_parsed is not None and sources.behavior_source == sources.props_source:
                behavior_parsed = props_parsed
            else:
                behavior_parsed = self.analyzer.parse(sources.behavior_source)
            methods_declaration = self.analyzer.extract_methods(behavior_parsed)
            if methods_declaration is not None:
                methods = list(methods_declaration.methods)

        events = self.reconciler.reconcile(props, sources.behavior_source)

        styles: List[StyleDescriptor] = []
        if sources.style_source:
            style_classes = self.analyzer.extract_styles(sources.style_source)
            if style_classes is not None:
                styles = style_classes.to_descriptors()

        doc = self.doc_filter.apply(
            ComponentDoc(
                component_name=component_name,
                component_path=str(component_dir),
                category=category,
                props=props,
                methods=methods,
                events=events,
                styles=styles,
                base_class=base_class,
            )
        )

        children = self._generate_children(
            component_name, component_dir, category, [*stack, component_dir.resolve()]
        )
        if children:
            doc.children = children
        return doc

    def _generate_children(
        self, component_name: str, component_dir: Path, category: str, stack: Sequence[Path]
    ) -> List[ComponentDoc]:
        children: List[ComponentDoc] = []
        for child_key, child_path in self.child_map.children_of(component_name, component_dir):
            if child_path in stack:
                self.logger.warning(
                    "Skipping child %s of %s: %s is already being documented",
                    child_key,
                    component_name,
                    child_path,
                )
                continue
            child_doc, _ = self._try_generate(child_path, category, stack=stack)
            if child_doc is not None:
                children.append(child_doc)
        return children

    def _try_generate(
        self, component_dir: Path, category: str, stack: Sequence[Path]
    ) -> Tuple[Optional[ComponentDoc], Optional[str]]:
        try:
            return self.build_component_doc(component_dir, category, stack), None
        except MissingSourceError as exc:
            self.logger.warning("%s", exc)
            return None, str(exc)
        except (MalformedArtifactError, CycleDetected) as exc:
            self.logger.error("Error generating docs for %s: %s", component_dir, exc)
            return None, str(exc)
        except Exception as exc:  # pragma: no cover - defensive guard
            self._log_exception(f"Error generating docs for {component_dir}", exc)
            return None, str(exc)

    def _log_exception(self, message: str, exc: Exception) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.exception("%s: %s", message, exc)
        else:
            self.logger.error("%s: %s", message, exc)


__all__ = ["BatchResult", "ComponentDocGenerator", "ComponentFailure"]
