#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_serializer.py
"""Unit tests for HtmlSerializer.

Tests cover:
- Tag primitives and attribute escaping
- Content escaping versus raw writes
- Stack balance enforcement
- Finalization

"""

import pytest

from knots.exceptions import RenderingError, SerializerFinalizedError, TagStackError
from knots.renderers.serializer import HtmlSerializer


@pytest.mark.unit
class TestTagPrimitives:
    """Tests for start/end/orphan/inline tags."""

    def test_start_and_end_tag(self):
        s = HtmlSerializer()
        s.start_tag("div", [("class", "box")])
        s.end_tag()
        assert s.into_result() == '<div class="box"></div>'

    def test_nested_tags_close_in_lifo_order(self):
        s = HtmlSerializer()
        s.start_tag("ul")
        s.start_tag("li")
        s.write_content("item")
        s.end_tag()
        s.end_tag()
        assert s.into_result() == "<ul><li>item</li></ul>"

    def test_attributes_keep_order(self):
        s = HtmlSerializer()
        s.orphan_tag("meta", [("name", "viewport"), ("content", "width=device-width")])
        assert s.into_result() == '<meta name="viewport" content="width=device-width">'

    def test_attribute_values_are_escaped(self):
        s = HtmlSerializer()
        s.inline_tag("a", [("href", 'x"y&z<')], "link")
        assert s.into_result() == '<a href="x&quot;y&amp;z&lt;">link</a>'

    def test_orphan_tag_does_not_touch_stack(self):
        s = HtmlSerializer()
        s.start_tag("div")
        s.orphan_tag("hr")
        assert s.depth == 1
        s.end_tag()
        assert s.into_result() == "<div><hr></div>"

    def test_doctype_orphan(self):
        s = HtmlSerializer()
        s.orphan_tag("!DOCTYPE html")
        assert s.into_result() == "<!DOCTYPE html>"

    def test_inline_tag_escapes_content(self):
        s = HtmlSerializer()
        s.inline_tag("p", [], "1 < 2 & 3 > 2")
        assert s.into_result() == "<p>1 &lt; 2 &amp; 3 &gt; 2</p>"

    def test_open_tags_reports_outermost_first(self):
        s = HtmlSerializer()
        s.start_tag("html")
        s.start_tag("body")
        assert s.open_tags == ("html", "body")
        assert s.depth == 2


@pytest.mark.unit
@pytest.mark.security
class TestEscaping:
    """Tests for the escaped and raw write paths."""

    def test_write_content_escapes_script(self):
        s = HtmlSerializer()
        s.write_content("<script>")
        assert s.into_result() == "&lt;script&gt;"

    def test_write_content_escapes_quotes(self):
        s = HtmlSerializer()
        s.write_content("\"it's\"")
        assert s.into_result() == "&quot;it&#x27;s&quot;"

    def test_write_raw_is_verbatim(self):
        raw = '<svg viewBox="0 0 1 1"><path d="M0 0"/></svg> & "quotes"'
        s = HtmlSerializer()
        s.write_raw(raw)
        assert s.into_result() == raw


@pytest.mark.unit
class TestBalance:
    """Tests for tag stack enforcement."""

    def test_end_tag_on_empty_stack_raises(self):
        s = HtmlSerializer()
        with pytest.raises(TagStackError, match="no open tag"):
            s.end_tag()

    def test_extra_end_tag_raises(self):
        s = HtmlSerializer()
        s.start_tag("p")
        s.end_tag()
        with pytest.raises(TagStackError):
            s.end_tag()

    def test_into_result_with_open_tags_raises(self):
        s = HtmlSerializer()
        s.start_tag("html")
        s.start_tag("body")
        with pytest.raises(TagStackError) as exc_info:
            s.into_result()
        assert exc_info.value.open_tags == ("html", "body")
        assert "<html>, <body>" in str(exc_info.value)

    def test_tag_stack_error_is_rendering_error(self):
        assert issubclass(TagStackError, RenderingError)


@pytest.mark.unit
class TestFinalization:
    """Tests for use after into_result()."""

    def test_empty_serializer_returns_empty_string(self):
        assert HtmlSerializer().into_result() == ""

    @pytest.mark.parametrize(
        "operation",
        [
            lambda s: s.start_tag("p"),
            lambda s: s.end_tag(),
            lambda s: s.orphan_tag("hr"),
            lambda s: s.inline_tag("p", [], "x"),
            lambda s: s.write_content("x"),
            lambda s: s.write_raw("x"),
            lambda s: s.into_result(),
        ],
    )
    def test_operations_after_finalization_raise(self, operation):
        s = HtmlSerializer()
        s.into_result()
        with pytest.raises(SerializerFinalizedError):
            operation(s)

    def test_failed_finalization_allows_closing(self):
        s = HtmlSerializer()
        s.start_tag("p")
        with pytest.raises(TagStackError):
            s.into_result()
        s.end_tag()
        assert s.into_result() == "<p></p>"
