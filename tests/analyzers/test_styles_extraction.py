"""Tests for style class extraction."""

from __future__ import annotations

from compdoc.analyzers import SyntaxAnalyzer
from compdoc.config import Conventions
from compdoc.models import StyleDescriptor

_STYLES = """
import BASE_THEME from '@wavemaker/app-rn-runtime/styles/theme';

export const DEFAULT_CLASS = 'app-button';

BASE_THEME.registerStyle((themeVariables, addStyle) => {
  addStyle(DEFAULT_CLASS, '', {});
  addStyle(DEFAULT_CLASS + '-disabled', '', {});
  addStyle('btn-primary', DEFAULT_CLASS, {});
  addStyle(DEFAULT_CLASS + '-' + 'rounded', '', {});
  addStyle('btn-primary', '', {});
  addStyle(DEFAULT_CLASS + size, '', {});
});
"""


def test_resolves_default_class_concatenations() -> None:
    styles = SyntaxAnalyzer().extract_styles(_STYLES)

    assert styles is not None
    assert styles.default_class == "app-button"
    assert styles.class_names == [
        "app-button-disabled",
        "btn-primary",
        "app-button-rounded",
        "DEFAULT_CLASS + size",
    ]


def test_descriptors_mark_exactly_one_default() -> None:
    styles = SyntaxAnalyzer().extract_styles(_STYLES)
    assert styles is not None

    descriptors = styles.to_descriptors()

    assert descriptors[0] == StyleDescriptor(
        class_name="app-button", description="Default style class", is_default=True
    )
    assert sum(1 for descriptor in descriptors if descriptor.is_default) == 1
    assert len({descriptor.class_name for descriptor in descriptors}) == len(descriptors)


def test_member_access_registration_with_custom_name() -> None:
    source = """
const DEFAULT_CLASS = "app-button";
theme.register(DEFAULT_CLASS + '-disabled', {});
"""
    analyzer = SyntaxAnalyzer(Conventions(style_registration="register"))

    styles = analyzer.extract_styles(source)

    assert styles is not None
    assert [descriptor.class_name for descriptor in styles.to_descriptors()] == [
        "app-button",
        "app-button-disabled",
    ]


def test_constant_declared_after_use_is_still_resolved() -> None:
    source = """
function register(addStyle) {
  addStyle(DEFAULT_CLASS + '-focused', '', {});
}
const DEFAULT_CLASS = 'app-text';
"""
    styles = SyntaxAnalyzer().extract_styles(source)

    assert styles is not None
    assert styles.class_names == ["app-text-focused"]


def test_concatenation_without_known_default_keeps_raw_text() -> None:
    source = """
addStyle(PREFIX + '-x', '', {});
"""
    styles = SyntaxAnalyzer().extract_styles(source)

    assert styles is not None
    assert styles.default_class == ""
    assert styles.class_names == ["PREFIX + '-x'"]
    assert [descriptor.is_default for descriptor in styles.to_descriptors()] == [True]


def test_no_styles_returns_none() -> None:
    assert SyntaxAnalyzer().extract_styles("export const x = 1;\n") is None


def test_first_registration_is_default_without_constant() -> None:
    source = """
addStyle('app-x', '', {});
addStyle('app-x-disabled', '', {});
"""
    styles = SyntaxAnalyzer().extract_styles(source)
    assert styles is not None

    descriptors = styles.to_descriptors()

    assert [(descriptor.class_name, descriptor.is_default) for descriptor in descriptors] == [
        ("app-x", True),
        ("app-x-disabled", False),
    ]
    assert descriptors[0].description == "Default style class"
