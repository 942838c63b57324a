"""Event discovery from declared props and explicit emission call sites."""

from __future__ import annotations

import re
from typing import Iterable, List, Sequence, Set

from ..config import Conventions
from ..models import EventDescriptor, PropDescriptor

FUNCTION_TYPE = "Function"
_ARROW_PARAMS = re.compile(r"\((.*?)\)\s*=>", re.DOTALL)


def declared_events(props: Iterable[PropDescriptor]) -> List[EventDescriptor]:
    """Return event descriptors for every ``on*`` prop with a function-shaped type."""
    events: List[EventDescriptor] = []
    for prop in props:
        if not prop.name.startswith("on"):
            continue
        if prop.type != FUNCTION_TYPE and "=>" not in prop.type:
            continue
        events.append(
            EventDescriptor(
                name=prop.name,
                type=prop.type,
                parameters=event_parameters(prop.type),
            )
        )
    return events


def event_parameters(type_text: str) -> str:
    """Derive a ``(a, b)`` parameter signature from a declared event type."""
    if type_text == FUNCTION_TYPE:
        return "()"
    match = _ARROW_PARAMS.search(type_text)
    if match:
        return f"({match.group(1)})"
    return type_text


class EmittedEventScanner:
    """Finds ``emit('onEvent', [args])`` style call sites in raw source text."""

    def __init__(self, conventions: Conventions | None = None) -> None:
        self.conventions = conventions or Conventions()
        self._pattern = re.compile(
            re.escape(self.conventions.event_emitter)
            + r"\s*\(\s*['\"](\w+)['\"]\s*,\s*\[([^\]]*)\]\s*\)"
        )
        self._implicit_args = set(self.conventions.implicit_event_args)

    def scan(self, source: str) -> List[EventDescriptor]:
        events: List[EventDescriptor] = []
        seen: Set[str] = set()
        for match in self._pattern.finditer(source):
            name = match.group(1)
            if name in seen:
                continue
            seen.add(name)
            events.append(
                EventDescriptor(
                    name=name,
                    type=FUNCTION_TYPE,
                    parameters=self._signature(match.group(2).split(",")),
                )
            )
        return events

    def _signature(self, raw_args: Sequence[str]) -> str:
        args = [arg.strip() for arg in raw_args]
        kept = [arg for arg in args if arg and arg not in self._implicit_args]
        return f"({', '.join(kept)})"


__all__ = ["EmittedEventScanner", "FUNCTION_TYPE", "declared_events", "event_parameters"]
