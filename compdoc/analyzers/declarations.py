"""Static extraction of props, methods and style classes from component source."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Union

from tree_sitter import Node

from ..config import Conventions
from ..logging import get_logger
from ..models import MethodDescriptor, ParameterDescriptor, PropDescriptor, StyleDescriptor
from .tree_sitter import ParsedSource, SourceParser, annotation_type, first_named_child, has_token

_CLASS_TYPES = {"class_declaration", "abstract_class_declaration", "class"}
_NAMED_TYPE_NODES = {"type_identifier", "nested_type_identifier", "generic_type"}
_PARAMETER_TYPES = {"required_parameter", "optional_parameter"}
_CAST_TYPES = {"as_expression", "satisfies_expression"}

DEFAULT_STYLE_DESCRIPTION = "Default style class"

SourceInput = Union[str, ParsedSource]


@dataclass
class PropsDeclaration:
    """The props type found in a source blob and the ancestor it extends."""

    name: str
    props: List[PropDescriptor] = field(default_factory=list)
    ancestor: Optional[str] = None


@dataclass
class MethodsDeclaration:
    """Public methods of the component class found in a source blob."""

    name: str
    methods: List[MethodDescriptor] = field(default_factory=list)


@dataclass
class StyleClasses:
    """Style classes registered by a styles source."""

    default_class: str
    class_names: List[str] = field(default_factory=list)

    def to_descriptors(self) -> List[StyleDescriptor]:
        """Return the default class first, then every other registered class.

        Without a default-class constant the first registered class is the default.
        """
        default = self.default_class or (self.class_names[0] if self.class_names else "")
        if not default:
            return []
        descriptors = [
            StyleDescriptor(
                class_name=default,
                description=DEFAULT_STYLE_DESCRIPTION,
                is_default=True,
            )
        ]
        descriptors.extend(
            StyleDescriptor(class_name=name) for name in self.class_names if name != default
        )
        return descriptors


class SyntaxAnalyzer:
    """Recovers typed declarations from TypeScript/TSX text without executing it."""

    def __init__(self, conventions: Conventions | None = None) -> None:
        self.conventions = conventions or Conventions()
        self._parser = SourceParser()
        self.logger = get_logger("analyzer")

    def parse(self, text: str) -> ParsedSource:
        return self._parser.parse(text)

    # ------------------------------------------------------------------
    # Properties

    def extract_props(self, source: SourceInput) -> Optional[PropsDeclaration]:
        """Return the last ``*Props`` class, interface or object alias in ``source``."""
        parsed = self._ensure_parsed(source)
        suffix = self.conventions.props_suffix
        result: Optional[PropsDeclaration] = None

        for node in parsed.walk():
            if node.type in _CLASS_TYPES and node.is_named:
                name = parsed.node_text(node.child_by_field_name("name"))
                if name.endswith(suffix):
                    body = node.child_by_field_name("body")
                    result = PropsDeclaration(
                        name=name,
                        props=self._member_props(body, parsed, "public_field_definition"),
                        ancestor=self._class_ancestor(node, parsed),
                    )
            elif node.type == "interface_declaration":
                name = parsed.node_text(node.child_by_field_name("name"))
                if name.endswith(suffix):
                    body = node.child_by_field_name("body")
                    result = PropsDeclaration(
                        name=name,
                        props=self._member_props(body, parsed, "property_signature"),
                        ancestor=self._interface_ancestor(node, parsed),
                    )
            elif node.type == "type_alias_declaration":
                name = parsed.node_text(node.child_by_field_name("name"))
                if name.endswith(suffix):
                    alias = self._alias_props(name, node.child_by_field_name("value"), parsed)
                    if alias is not None:
                        result = alias

        if result is None:
            self.logger.debug("No %s declaration found in source", suffix)
        return result

    def _member_props(
        self, body: Optional[Node], parsed: ParsedSource, member_type: str
    ) -> List[PropDescriptor]:
        props: List[PropDescriptor] = []
        if body is None:
            return props
        for member in body.named_children:
            if member.type != member_type:
                continue
            name = _member_name(member, parsed)
            if not name:
                continue
            type_node = annotation_type(member.child_by_field_name("type"))
            props.append(
                PropDescriptor(
                    name=name,
                    type=parsed.node_text(type_node) if type_node is not None else "any",
                    optional=has_token(member, "?"),
                    default_value=_default_value(member.child_by_field_name("value"), parsed),
                )
            )
        return props

    def _alias_props(
        self, name: str, value: Optional[Node], parsed: ParsedSource
    ) -> Optional[PropsDeclaration]:
        if value is None:
            return None
        if value.type == "object_type":
            return PropsDeclaration(
                name=name, props=self._member_props(value, parsed, "property_signature")
            )
        if value.type != "intersection_type":
            return None

        # `type XProps = BaseProps & { ... }` reads as an object alias with one ancestor.
        parts = list(_intersection_parts(value))
        literals = [part for part in parts if part.type == "object_type"]
        if not literals:
            return None
        props: List[PropDescriptor] = []
        for literal in literals:
            props.extend(self._member_props(literal, parsed, "property_signature"))
        ancestor = next(
            (_type_name(part, parsed) for part in parts if part.type in _NAMED_TYPE_NODES),
            None,
        )
        return PropsDeclaration(name=name, props=props, ancestor=ancestor)

    @staticmethod
    def _class_ancestor(node: Node, parsed: ParsedSource) -> Optional[str]:
        for child in node.children:
            if child.type != "class_heritage":
                continue
            for clause in child.children:
                if clause.type == "extends_clause":
                    value = clause.child_by_field_name("value") or first_named_child(clause)
                    return parsed.node_text(value) or None
        return None

    @staticmethod
    def _interface_ancestor(node: Node, parsed: ParsedSource) -> Optional[str]:
        for child in node.children:
            if child.type == "extends_type_clause":
                return _type_name(first_named_child(child), parsed)
        return None

    # ------------------------------------------------------------------
    # Methods

    def extract_methods(self, source: SourceInput) -> Optional[MethodsDeclaration]:
        """Return public methods of the last component class in ``source``."""
        parsed = self._ensure_parsed(source)
        skipped_suffixes = tuple(self.conventions.non_component_suffixes)
        result: Optional[MethodsDeclaration] = None

        for node in parsed.walk():
            if node.type not in _CLASS_TYPES or not node.is_named:
                continue
            name = parsed.node_text(node.child_by_field_name("name"))
            if not name or (skipped_suffixes and name.endswith(skipped_suffixes)):
                continue
            result = MethodsDeclaration(
                name=name, methods=self._class_methods(node.child_by_field_name("body"), parsed)
            )

        if result is None:
            self.logger.debug("No component class found in source")
        return result

    def _class_methods(self, body: Optional[Node], parsed: ParsedSource) -> List[MethodDescriptor]:
        methods: List[MethodDescriptor] = []
        if body is None:
            return methods
        lifecycle = set(self.conventions.lifecycle_methods)
        for member in body.named_children:
            if member.type != "method_definition":
                continue
            if has_token(member, "get") or has_token(member, "set"):
                continue
            name_node = member.child_by_field_name("name")
            name = parsed.node_text(name_node)
            if not name or name in lifecycle:
                continue
            if _visibility(member, name_node, parsed) != "public":
                continue
            return_node = annotation_type(member.child_by_field_name("return_type"))
            methods.append(
                MethodDescriptor(
                    name=name,
                    return_type=parsed.node_text(return_node) if return_node is not None else "void",
                    parameters=tuple(
                        _parameters(member.child_by_field_name("parameters"), parsed)
                    ),
                )
            )
        return methods

    # ------------------------------------------------------------------
    # Styles

    def extract_styles(self, source: SourceInput) -> Optional[StyleClasses]:
        """Return the default class and every registered style class name."""
        parsed = self._ensure_parsed(source)
        default_class = self._default_class(parsed)
        class_names: List[str] = []

        for node in parsed.walk():
            if node.type != "call_expression" or not self._is_registration(node, parsed):
                continue
            argument = first_named_child(node.child_by_field_name("arguments"))
            if argument is None:
                continue
            class_name = self._style_class_name(argument, parsed, default_class)
            if class_name and class_name not in class_names:
                class_names.append(class_name)

        if not default_class and not class_names:
            self.logger.debug("No style registrations found in source")
            return None
        return StyleClasses(default_class=default_class, class_names=class_names)

    def _default_class(self, parsed: ParsedSource) -> str:
        constant = self.conventions.default_class_constant
        for node in parsed.walk():
            if node.type != "variable_declarator":
                continue
            if parsed.node_text(node.child_by_field_name("name")) != constant:
                continue
            value = node.child_by_field_name("value")
            if value is not None and value.type == "string":
                return _string_value(value, parsed)
        return ""

    def _is_registration(self, node: Node, parsed: ParsedSource) -> bool:
        function = node.child_by_field_name("function")
        if function is None:
            return False
        if function.type == "identifier":
            return parsed.node_text(function) == self.conventions.style_registration
        if function.type == "member_expression":
            prop = function.child_by_field_name("property")
            return parsed.node_text(prop) == self.conventions.style_registration
        return False

    def _style_class_name(
        self, argument: Node, parsed: ParsedSource, default_class: str
    ) -> Optional[str]:
        if argument.type == "string":
            return _string_value(argument, parsed)
        if argument.type not in {"binary_expression", "parenthesized_expression"}:
            return None

        raw = parsed.node_text(argument)
        operands = _concat_operands(argument, parsed)
        if operands is None:
            return raw
        pieces: List[str] = []
        for operand in operands:
            if operand.type == "string":
                pieces.append(_string_value(operand, parsed))
            elif (
                operand.type == "identifier"
                and default_class
                and parsed.node_text(operand) == self.conventions.default_class_constant
            ):
                pieces.append(default_class)
            else:
                return raw
        return "".join(pieces)

    # ------------------------------------------------------------------

    def _ensure_parsed(self, source: SourceInput) -> ParsedSource:
        if isinstance(source, ParsedSource):
            return source
        return self.parse(source)


def _member_name(member: Node, parsed: ParsedSource) -> Optional[str]:
    name_node = member.child_by_field_name("name")
    if name_node is None or name_node.type == "computed_property_name":
        return None
    if name_node.type == "string":
        return _string_value(name_node, parsed) or None
    return parsed.node_text(name_node) or None


def _default_value(node: Optional[Node], parsed: ParsedSource) -> Optional[str]:
    if node is None:
        return None
    while node.type in _CAST_TYPES:
        inner = first_named_child(node)
        if inner is None:
            break
        node = inner
    return parsed.node_text(node)


def _visibility(member: Node, name_node: Optional[Node], parsed: ParsedSource) -> str:
    if name_node is not None and name_node.type == "private_property_identifier":
        return "private"
    for child in member.children:
        if child.type == "accessibility_modifier":
            return parsed.node_text(child).strip()
    return "public"


def _parameters(node: Optional[Node], parsed: ParsedSource) -> Iterator[ParameterDescriptor]:
    if node is None:
        return
    for param in node.named_children:
        if param.type not in _PARAMETER_TYPES:
            continue
        pattern = param.child_by_field_name("pattern")
        if pattern is not None and pattern.type == "rest_pattern":
            pattern = first_named_child(pattern)
        if pattern is None or pattern.type != "identifier":
            continue
        type_node = annotation_type(param.child_by_field_name("type"))
        yield ParameterDescriptor(
            name=parsed.node_text(pattern),
            type=parsed.node_text(type_node) if type_node is not None else "any",
            optional=param.type == "optional_parameter",
        )


def _type_name(node: Optional[Node], parsed: ParsedSource) -> Optional[str]:
    if node is None:
        return None
    if node.type == "generic_type":
        node = node.child_by_field_name("name") or first_named_child(node)
    return parsed.node_text(node) or None


def _intersection_parts(node: Node) -> Iterator[Node]:
    if node.type == "intersection_type":
        for child in node.named_children:
            yield from _intersection_parts(child)
    elif node.type == "parenthesized_type":
        inner = first_named_child(node)
        if inner is not None:
            yield from _intersection_parts(inner)
    elif node.type != "comment":
        yield node


def _concat_operands(node: Node, parsed: ParsedSource) -> Optional[List[Node]]:
    if node.type == "parenthesized_expression":
        inner = first_named_child(node)
        return _concat_operands(inner, parsed) if inner is not None else None
    if node.type != "binary_expression":
        return [node]
    if parsed.node_text(node.child_by_field_name("operator")) != "+":
        return None
    left = node.child_by_field_name("left")
    right = node.child_by_field_name("right")
    if left is None or right is None:
        return None
    left_operands = _concat_operands(left, parsed)
    right_operands = _concat_operands(right, parsed)
    if left_operands is None or right_operands is None:
        return None
    return left_operands + right_operands


def _string_value(node: Node, parsed: ParsedSource) -> str:
    text = parsed.node_text(node)
    if len(text) >= 2 and text[0] == text[-1] and text[0] in {"'", '"'}:
        return text[1:-1]
    return text


__all__ = [
    "DEFAULT_STYLE_DESCRIPTION",
    "MethodsDeclaration",
    "PropsDeclaration",
    "StyleClasses",
    "SyntaxAnalyzer",
]
