"""Static analysis of component source text."""

from __future__ import annotations

from .declarations import MethodsDeclaration, PropsDeclaration, StyleClasses, SyntaxAnalyzer
from .events import EmittedEventScanner, declared_events, event_parameters
from .tree_sitter import ParsedSource, SourceParser

__all__ = [
    "EmittedEventScanner",
    "MethodsDeclaration",
    "ParsedSource",
    "PropsDeclaration",
    "SourceParser",
    "StyleClasses",
    "SyntaxAnalyzer",
    "declared_events",
    "event_parameters",
]
