"""Inherited property resolution across the component hierarchy."""

from .index import AncestorIndex
from .resolver import AncestorResolver, RootPropertyCache

__all__ = ["AncestorIndex", "AncestorResolver", "RootPropertyCache"]
