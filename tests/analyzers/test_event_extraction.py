"""Tests for declared and emitted event extraction."""

from __future__ import annotations

from compdoc.analyzers import EmittedEventScanner, declared_events, event_parameters
from compdoc.config import Conventions
from compdoc.models import EventDescriptor, PropDescriptor


def test_declared_events_require_on_prefix_and_function_type() -> None:
    props = [
        PropDescriptor(name="onTap", type="Function", optional=True),
        PropDescriptor(
            name="onChange",
            type="(event: any, widget: any, newVal: any, oldVal: any) => void",
            optional=True,
        ),
        PropDescriptor(name="onlyLabel", type="string", optional=False),
        PropDescriptor(name="handler", type="Function", optional=True),
        PropDescriptor(name="onBlur", type="Function", optional=True, inherited=True, inherited_from="BaseProps"),
    ]

    events = declared_events(props)

    assert events == [
        EventDescriptor(name="onTap", type="Function", parameters="()"),
        EventDescriptor(
            name="onChange",
            type="(event: any, widget: any, newVal: any, oldVal: any) => void",
            parameters="(event: any, widget: any, newVal: any, oldVal: any)",
        ),
        EventDescriptor(name="onBlur", type="Function", parameters="()"),
    ]


def test_event_parameters_falls_back_to_type_text() -> None:
    assert event_parameters("Function") == "()"
    assert event_parameters("() => void") == "()"
    assert event_parameters("EventHandler") == "EventHandler"


def test_emitted_events_drop_implicit_targets_and_keep_first() -> None:
    source = """
    onPress(e) {
      this.invokeEventCallback('onTap', [e, this.proxy]);
      this.invokeEventCallback('onTap', [e]);
      invokeEventCallback("onLongTap", [ e , target ]);
      this.invokeEventCallback('onDoubleTap', [e, this.props.target]);
      this.invokeEventCallback('onFocus', []);
    }
    """

    events = EmittedEventScanner().scan(source)

    assert events == [
        EventDescriptor(name="onTap", type="Function", parameters="(e, this.proxy)"),
        EventDescriptor(name="onLongTap", type="Function", parameters="(e)"),
        EventDescriptor(name="onDoubleTap", type="Function", parameters="(e)"),
        EventDescriptor(name="onFocus", type="Function", parameters="()"),
    ]


def test_emitter_name_is_configurable() -> None:
    scanner = EmittedEventScanner(Conventions(event_emitter="emit"))

    events = scanner.scan("this.emit('onSelect', [item, index]);")

    assert [(event.name, event.parameters) for event in events] == [("onSelect", "(item, index)")]
