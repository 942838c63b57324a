"""Component metadata extraction for UI component libraries."""

from .generator import BatchResult, ComponentDocGenerator
from .models import (
    ComponentDoc,
    EventDescriptor,
    MethodDescriptor,
    ParameterDescriptor,
    PropDescriptor,
    StyleDescriptor,
)

__all__ = [
    "BatchResult",
    "ComponentDoc",
    "ComponentDocGenerator",
    "EventDescriptor",
    "MethodDescriptor",
    "ParameterDescriptor",
    "PropDescriptor",
    "StyleDescriptor",
]
