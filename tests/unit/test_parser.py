"""
Tests for component file parsing.

Validates:
1. All four sections are extracted
2. Missing optional sections become empty strings
3. Missing required sections and bad config raise ComponentError
4. "transition" classes are rewritten to "thumbnail" inside <main>
"""

from __future__ import annotations

import pytest

from canvascomponents.components.parser import parse_component_source
from canvascomponents.errors import ComponentError
from tests.fixtures.sample_components import BANNER_COMPONENT, CARD_COMPONENT


def test_extracts_all_sections():
    source = parse_component_source(CARD_COMPONENT, "card.html")

    assert source.filename == "card.html"
    assert source.config == {"name": "Card", "description": "A simple card"}
    assert source.name == "Card"
    assert ".card" in source.style
    assert "padding: 8px;" in source.style
    assert 'console.log( "hi" );' in source.script
    assert '<div class="card">' in source.markup
    assert "<p>Hello</p>" in source.markup


def test_optional_sections_default_to_empty():
    source = parse_component_source(BANNER_COMPONENT, "banner.html")
    assert source.style == ""
    assert source.script == ""


def test_config_keeps_extra_keys_in_order():
    text = "<config>\nname: Tabs\ncategory: Layout\ncount: 3\n</config><main></main>"
    source = parse_component_source(text, "tabs.html")
    assert list(source.config) == ["name", "category", "count"]
    assert source.config["count"] == 3


def test_config_values_keep_markup_and_entities():
    text = "<config>\nname: Tip\ndescription: Use <b>bold</b> &amp; more\n</config><main>x</main>"
    source = parse_component_source(text, "tip.html")
    assert source.config["description"] == "Use <b>bold</b> &amp; more"


def test_tags_named_in_config_are_not_sections():
    text = (
        "<config>\nname: Wrap\ndescription: wraps a <main> element\n</config>"
        "<main><p>real</p></main>"
    )
    source = parse_component_source(text, "wrap.html")
    assert source.markup == "<p>real</p>"


def test_missing_config():
    with pytest.raises(ComponentError, match="missing <config> section") as exc_info:
        parse_component_source("<main><p>x</p></main>", "nocfg.html")
    assert exc_info.value.filename == "nocfg.html"


def test_missing_main():
    with pytest.raises(ComponentError, match="missing <main> section"):
        parse_component_source("<config>\nname: X\n</config>", "nomain.html")


def test_invalid_yaml():
    with pytest.raises(ComponentError, match="invalid YAML"):
        parse_component_source("<config>\nname: [unclosed\n</config><main></main>", "bad.html")


def test_config_must_be_mapping():
    with pytest.raises(ComponentError, match="must be a YAML mapping"):
        parse_component_source("<config>\n- a\n- b\n</config><main></main>", "list.html")


def test_config_requires_name():
    with pytest.raises(ComponentError, match="name"):
        parse_component_source("<config>\ndescription: x\n</config><main></main>", "anon.html")


def test_config_rejects_blank_name():
    with pytest.raises(ComponentError, match="must not be blank"):
        parse_component_source('<config>\nname: "  "\n</config><main></main>', "blank.html")


class TestClassRewrite:
    """transition -> thumbnail inside <main>"""

    def test_rewrites_class_tokens(self):
        text = (
            "<config>\nname: Fx\n</config>"
            '<main><div class="box transition-fade">x</div>'
            '<span class="transition">y</span></main>'
        )
        source = parse_component_source(text, "fx.html")
        assert 'class="box thumbnail-fade"' in source.markup
        assert 'class="thumbnail"' in source.markup
        assert "transition" not in source.markup

    def test_other_attributes_untouched(self):
        text = '<config>\nname: Fx\n</config><main><div id="transition" class="a">x</div></main>'
        source = parse_component_source(text, "fx.html")
        assert 'id="transition"' in source.markup

    def test_banner_fixture_rewritten(self):
        source = parse_component_source(BANNER_COMPONENT, "banner.html")
        assert 'class="banner thumbnail"' in source.markup
