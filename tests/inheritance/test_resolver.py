"""Tests for ancestor chain resolution."""

from __future__ import annotations

import pytest

from compdoc.config import Conventions
from compdoc.errors import CycleDetected, UnresolvedInheritanceWarning
from compdoc.inheritance import AncestorResolver
from compdoc.models import PropDescriptor
from tests._fixtures.component_builder import ComponentTreeBuilder

_BASE_PROPS = """
export class BaseProps {
  id: string;
  name?: string = null as any;
}
"""


@pytest.fixture
def library(component_tree: ComponentTreeBuilder) -> ComponentTreeBuilder:
    component_tree.write_source_map("core/base.component.js.map", _BASE_PROPS)
    component_tree.write_source_map(
        "components/input/baseinput.props.js.map",
        """
        export default class BaseInputProps extends BaseProps {
          datavalue: any;
          readonly?: boolean = false;
        }
        """,
    )
    component_tree.write_source_map(
        "components/input/text/text.props.js.map",
        """
        export default class WmTextProps extends BaseInputProps {
          placeholder: string;
        }
        """,
    )
    return component_tree


def test_candidate_stems() -> None:
    resolver = AncestorResolver("/nonexistent")

    assert resolver.candidate_stems("WmPieChartProps") == [
        "wmpiechart",
        "wm-pie-chart",
        "piechart",
        "pie-chart",
    ]
    assert resolver.candidate_stems("BaseChartComponentProps") == ["basechart", "base-chart"]
    assert resolver.candidate_stems("BaseInputProps") == ["baseinput", "base-input"]


def test_root_ancestor_uses_root_props(library: ComponentTreeBuilder) -> None:
    resolver = AncestorResolver(library.path())

    props = resolver.resolve("BaseProps")

    assert props == [
        PropDescriptor(name="id", type="string", optional=False, inherited=True, inherited_from="BaseProps"),
        PropDescriptor(
            name="name",
            type="string",
            optional=True,
            default_value="null",
            inherited=True,
            inherited_from="BaseProps",
        ),
    ]


def test_resolves_chain_up_to_root(library: ComponentTreeBuilder) -> None:
    resolver = AncestorResolver(library.path())

    props = resolver.resolve("WmTextProps")

    assert [(prop.name, prop.inherited_from) for prop in props] == [
        ("placeholder", "WmTextProps"),
        ("datavalue", "BaseInputProps"),
        ("readonly", "BaseInputProps"),
        ("id", "BaseProps"),
        ("name", "BaseProps"),
    ]
    assert all(prop.inherited for prop in props)


def test_resolution_is_repeatable(library: ComponentTreeBuilder) -> None:
    resolver = AncestorResolver(library.path())

    first = resolver.resolve("BaseInputProps")
    second = resolver.resolve("BaseInputProps")

    assert first == second
    assert [prop.to_dict() for prop in first] == [prop.to_dict() for prop in second]


def test_unresolved_ancestor_warns_and_returns_empty(library: ComponentTreeBuilder) -> None:
    resolver = AncestorResolver(library.path())

    with pytest.warns(UnresolvedInheritanceWarning):
        assert resolver.resolve("ExternalWidgetProps") == []


def test_cycle_is_detected(component_tree: ComponentTreeBuilder) -> None:
    component_tree.write(
        {
            "components/a/a.props.ts": "export interface AProps extends BProps { a: string; }\n",
            "components/b/b.props.ts": "export interface BProps extends AProps { b: string; }\n",
        }
    )
    resolver = AncestorResolver(component_tree.path())

    with pytest.raises(CycleDetected) as excinfo:
        resolver.resolve("AProps")
    assert excinfo.value.chain == ("AProps", "BProps", "AProps")


def test_chain_argument_seeds_cycle_detection(component_tree: ComponentTreeBuilder) -> None:
    component_tree.write(
        {"components/b/b.props.ts": "export interface BProps extends WmAProps { b: string; }\n"}
    )
    resolver = AncestorResolver(component_tree.path())

    with pytest.raises(CycleDetected):
        resolver.resolve("BProps", chain=["WmAProps"])


def test_root_cache_is_written_once(library: ComponentTreeBuilder) -> None:
    resolver = AncestorResolver(library.path())
    first = resolver.root_cache.get()

    library.write_source_map("core/base.component.js.map", "export class BaseProps { changed: string; }\n")

    assert resolver.root_cache.get() is first
    assert [prop.name for prop in resolver.resolve("BaseProps")] == ["id", "name"]


def test_root_declaration_name_must_match(component_tree: ComponentTreeBuilder) -> None:
    component_tree.write({"core/base.ts": "export interface OtherProps { id: string; }\n"})
    resolver = AncestorResolver(component_tree.path())

    assert resolver.resolve("BaseProps") == []


def test_custom_search_roots_and_prefix(component_tree: ComponentTreeBuilder) -> None:
    component_tree.write(
        {"widgets/charts/pie-chart.props.tsx": "export interface XPieChartProps { radius: number; }\n"}
    )
    conventions = Conventions(name_prefix="X", ancestor_search_dirs=["widgets"])
    resolver = AncestorResolver(component_tree.path(), conventions=conventions)

    props = resolver.resolve("XPieChartProps")

    assert [(prop.name, prop.inherited_from) for prop in props] == [("radius", "XPieChartProps")]
