"""Core data models shared across compdoc components."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class PropDescriptor:
    """A single declared component property."""

    name: str
    type: str
    optional: bool
    default_value: Optional[str] = None
    inherited: bool = False
    inherited_from: Optional[str] = None

    def __post_init__(self) -> None:
        if self.inherited_from is not None and not self.inherited:
            raise ValueError(f"Own property '{self.name}' cannot carry inherited_from")

    def as_inherited(self, ancestor: str) -> "PropDescriptor":
        return replace(self, inherited=True, inherited_from=ancestor)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "optional": self.optional,
        }
        if self.default_value is not None:
            data["defaultValue"] = self.default_value
        data["inherited"] = self.inherited
        if self.inherited_from is not None:
            data["inheritedFrom"] = self.inherited_from
        return data

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "PropDescriptor":
        return cls(
            name=str(payload["name"]),
            type=str(payload.get("type", "any")),
            optional=bool(payload.get("optional", False)),
            default_value=payload.get("defaultValue"),
            inherited=bool(payload.get("inherited", False)),
            inherited_from=payload.get("inheritedFrom"),
        )


@dataclass(frozen=True)
class ParameterDescriptor:
    """One parameter of a public method."""

    name: str
    type: str
    optional: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "type": self.type, "optional": self.optional}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ParameterDescriptor":
        return cls(
            name=str(payload["name"]),
            type=str(payload.get("type", "any")),
            optional=bool(payload.get("optional", False)),
        )


@dataclass(frozen=True)
class MethodDescriptor:
    """A public method exposed by a component class."""

    name: str
    return_type: str = "void"
    parameters: Tuple[ParameterDescriptor, ...] = ()
    visibility: str = "public"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "visibility": self.visibility,
            "returnType": self.return_type,
            "parameters": [param.to_dict() for param in self.parameters],
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "MethodDescriptor":
        return cls(
            name=str(payload["name"]),
            return_type=str(payload.get("returnType", "void")),
            parameters=tuple(
                ParameterDescriptor.from_dict(item) for item in payload.get("parameters", [])
            ),
            visibility=str(payload.get("visibility", "public")),
        )


@dataclass(frozen=True)
class EventDescriptor:
    """An event a component can raise."""

    name: str
    type: str = "Function"
    parameters: str = "()"

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "type": self.type, "parameters": self.parameters}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "EventDescriptor":
        return cls(
            name=str(payload["name"]),
            type=str(payload.get("type", "Function")),
            parameters=str(payload.get("parameters", "()")),
        )


@dataclass(frozen=True)
class StyleDescriptor:
    """A style class registered by a component."""

    class_name: str
    description: Optional[str] = None
    is_default: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"className": self.class_name}
        if self.description is not None:
            data["description"] = self.description
        if self.is_default:
            data["isDefault"] = True
        return data

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "StyleDescriptor":
        return cls(
            class_name=str(payload["className"]),
            description=payload.get("description"),
            is_default=bool(payload.get("isDefault", False)),
        )


@dataclass
class ComponentDoc:
    """Assembled documentation record for one component."""

    component_name: str
    component_path: str
    category: str
    props: List[PropDescriptor] = field(default_factory=list)
    methods: List[MethodDescriptor] = field(default_factory=list)
    events: List[EventDescriptor] = field(default_factory=list)
    styles: List[StyleDescriptor] = field(default_factory=list)
    base_class: Optional[str] = None
    children: Optional[List["ComponentDoc"]] = None
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "componentName": self.component_name,
            "componentPath": self.component_path,
            "category": self.category,
            "props": [prop.to_dict() for prop in self.props],
            "methods": [method.to_dict() for method in self.methods],
            "events": [event.to_dict() for event in self.events],
            "styles": [style.to_dict() for style in self.styles],
        }
        if self.base_class is not None:
            data["baseClass"] = self.base_class
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        if self.description is not None:
            data["description"] = self.description
        return data

    def to_json(self, *, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ComponentDoc":
        children_payload = payload.get("children")
        children = None
        if children_payload:
            children = [cls.from_dict(item) for item in children_payload]
        return cls(
            component_name=str(payload["componentName"]),
            component_path=str(payload["componentPath"]),
            category=str(payload["category"]),
            props=[PropDescriptor.from_dict(item) for item in payload.get("props", [])],
            methods=[MethodDescriptor.from_dict(item) for item in payload.get("methods", [])],
            events=[EventDescriptor.from_dict(item) for item in payload.get("events", [])],
            styles=[StyleDescriptor.from_dict(item) for item in payload.get("styles", [])],
            base_class=payload.get("baseClass"),
            children=children,
            description=payload.get("description"),
        )

    @classmethod
    def from_json(cls, text: str) -> "ComponentDoc":
        return cls.from_dict(json.loads(text))


@dataclass
class ComponentLocation:
    """A discovered component directory and the category it belongs to."""

    path: str
    category: str
