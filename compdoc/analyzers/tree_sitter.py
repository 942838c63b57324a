"""Tree-sitter parsing helpers for TypeScript/TSX component sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

# The TSX dialect accepts both plain TypeScript declarations and JSX bodies.
TSX_LANGUAGE = Language(tree_sitter_typescript.language_tsx())

_SKIPPED_CHILD_TYPES = {"comment", "type_arguments"}
_ANNOTATION_TYPES = {"type_annotation", "asserts_annotation", "type_predicate_annotation"}


@dataclass
class ParsedSource:
    """A single static parse of one source blob."""

    text: str
    source_bytes: bytes
    tree: Tree

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def node_text(self, node: Optional[Node]) -> str:
        if node is None:
            return ""
        return self.source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="ignore")

    def walk(self, node: Optional[Node] = None) -> Iterator[Node]:
        """Yield every node below ``node`` in document (pre-)order."""
        stack: List[Node] = [node if node is not None else self.root]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))


class SourceParser:
    """Lazily constructed tree-sitter parser for the TSX grammar."""

    def __init__(self) -> None:
        self._parser: Optional[Parser] = None

    def parse(self, text: str) -> ParsedSource:
        if self._parser is None:
            self._parser = Parser(TSX_LANGUAGE)
        source_bytes = text.encode("utf-8")
        return ParsedSource(text=text, source_bytes=source_bytes, tree=self._parser.parse(source_bytes))


def first_named_child(node: Optional[Node]) -> Optional[Node]:
    """Return the first named child that is neither a comment nor type arguments."""
    if node is None:
        return None
    for child in node.named_children:
        if child.type not in _SKIPPED_CHILD_TYPES:
            return child
    return None


def has_token(node: Node, token: str) -> bool:
    """Return True when ``node`` has an anonymous child token equal to ``token``."""
    return any(not child.is_named and child.type == token for child in node.children)


def annotation_type(node: Optional[Node]) -> Optional[Node]:
    """Unwrap a ``: T`` annotation node to the type it holds."""
    if node is None:
        return None
    if node.type in _ANNOTATION_TYPES:
        return first_named_child(node)
    return node


__all__ = [
    "ParsedSource",
    "SourceParser",
    "TSX_LANGUAGE",
    "annotation_type",
    "first_named_child",
    "has_token",
]
