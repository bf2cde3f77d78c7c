#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_html_renderer.py
"""Unit tests for HtmlRenderer.

Tests cover:
- Rendering every node kind to HTML
- Summary accumulation in document order
- Feature flag, Prism plugin and KaTeX buffer side effects
- Link safety and option validation

"""

import logging

import pytest

from knots.ast import (
    BlockQuote,
    CodeBlock,
    Container,
    Diagram,
    Emphasis,
    Heading,
    InlineCode,
    Link,
    List,
    ListItem,
    MathExpr,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
)
from knots.exceptions import InvalidOptionsError, MissingAssetError
from knots.options import BaseRendererOptions, HtmlRendererOptions
from knots.renderers.html import HtmlRenderer
from knots.renderers.state import RenderState, SummaryEntry


def render(*children, options=None):
    renderer = HtmlRenderer(options)
    return renderer.render_to_string(Container(children=list(children))), renderer.state


@pytest.mark.unit
class TestHeadingRendering:
    """Tests for headings and the summary."""

    def test_heading_with_anchor(self):
        result, _ = render(Heading(level=1, anchor="intro", title="Intro"))
        assert result == '<h1 id="intro">Intro</h1>'

    def test_heading_children_are_nested_one_level_deeper(self):
        result, _ = render(
            Heading(level=1, anchor="a", title="A", children=[Paragraph(children=[Text(content="body")])])
        )
        assert result == '<h1 id="a">A</h1><div class="container-lvl2"><p>body</p></div>'

    def test_heading_title_is_escaped(self):
        result, state = render(Heading(level=2, anchor="x", title="A & <B>"))
        assert result == '<h2 id="x">A &amp; &lt;B&gt;</h2>'
        assert state.summary[0].name == "A & <B>"

    def test_deep_heading_uses_h6_but_keeps_level(self):
        result, state = render(Heading(level=8, anchor="deep", title="Deep"))
        assert result == '<h6 id="deep">Deep</h6>'
        assert state.summary == [SummaryEntry(level=8, anchor="deep", name="Deep")]

    def test_summary_follows_document_order(self):
        _, state = render(
            Heading(level=1, anchor="a", title="A", children=[
                Heading(level=2, anchor="b", title="B"),
                Heading(level=2, anchor="c", title="C"),
            ]),
            Heading(level=1, anchor="d", title="D"),
        )
        assert [(e.level, e.anchor) for e in state.summary] == [(1, "a"), (2, "b"), (2, "c"), (1, "d")]

    def test_duplicate_anchors_are_kept_as_given(self):
        _, state = render(
            Heading(level=1, anchor="same", title="One"),
            Heading(level=1, anchor="same", title="Two"),
        )
        assert [e.anchor for e in state.summary] == ["same", "same"]


@pytest.mark.unit
class TestCodeBlockRendering:
    """Tests for code blocks and Prism registration."""

    def test_code_block_markup(self):
        result, state = render(CodeBlock(language="python", source="x = 1 < 2"))
        assert result == '<pre><code class="language-python">x = 1 &lt; 2</code></pre>'
        assert state.features.prism is True
        assert state.prism_plugins == ["python"]

    def test_languages_recorded_once_in_first_seen_order(self):
        _, state = render(
            CodeBlock(language="rust", source=""),
            CodeBlock(language="python", source=""),
            CodeBlock(language="rust", source=""),
            CodeBlock(language="py", source=""),
        )
        assert state.prism_plugins == ["rust", "python"]

    def test_alias_keeps_authored_class(self):
        result, _ = render(CodeBlock(language="py", source="pass"))
        assert 'class="language-py"' in result

    def test_blank_language(self):
        result, state = render(CodeBlock(language="", source="plain"))
        assert result == '<pre><code class="language-none">plain</code></pre>'
        assert state.features.prism is True
        assert state.prism_plugins == []

    def test_unknown_language_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="knots"):
            _, state = render(
                CodeBlock(language="cobol", source=""),
                CodeBlock(language="cobol", source=""),
            )
        assert state.prism_plugins == ["cobol"]
        warnings = [r for r in caplog.records if "No Prism plugin" in r.getMessage()]
        assert len(warnings) == 1

    def test_unknown_language_raises_when_strict(self):
        options = HtmlRendererOptions(fail_on_missing_plugin=True)
        with pytest.raises(MissingAssetError) as exc_info:
            render(CodeBlock(language="cobol", source=""), options=options)
        assert exc_info.value.asset_name == "cobol"


@pytest.mark.unit
class TestMathRendering:
    """Tests for math placeholders and the KaTeX buffer."""

    def test_inline_math_placeholder(self):
        result, state = render(MathExpr(source="x^2"))
        assert result == '<span class="katex-math" data-katex-index="1">x^2</span>'
        assert state.features.katex is True
        assert state.katex_buffer == [
            "katex.render(\"x^2\", document.querySelector('[data-katex-index=\"1\"]'), "
            "{displayMode: false, throwOnError: false});"
        ]

    def test_display_math_placeholder(self):
        result, state = render(MathExpr(source="a"), MathExpr(source="b", display_mode=True))
        assert '<div class="katex-math katex-display" data-katex-index="2">b</div>' in result
        assert "displayMode: true" in state.katex_buffer[1]

    def test_placeholders_do_not_claim_ids(self):
        result, state = render(
            Heading(level=1, anchor="katex-expr-1", title="Anchor"),
            Heading(level=1, anchor="1", title="Numeric"),
            MathExpr(source="x"),
        )
        assert result.count('id="katex-expr-1"') == 1
        assert result.count('id="1"') == 1
        assert "getElementById" not in state.katex_content

    def test_math_source_is_escaped_for_script(self):
        _, state = render(MathExpr(source='</script><script>alert("x")'))
        statement = state.katex_buffer[0]
        assert "</script>" not in statement
        assert "\\u003c/script\\u003e" in statement
        assert '\\"x\\"' in statement

    def test_throw_on_error_option(self):
        _, state = render(MathExpr(source="x"), options=HtmlRendererOptions(katex_throw_on_error=True))
        assert "throwOnError: true" in state.katex_buffer[0]

    def test_katex_content_joins_statements(self):
        _, state = render(MathExpr(source="a"), MathExpr(source="b"))
        assert state.katex_content.count("\n") == 2
        assert state.katex_content.index('"1"') < state.katex_content.index('"2"')


@pytest.mark.unit
class TestDiagramRendering:
    """Tests for Mermaid diagrams."""

    def test_diagram_container(self):
        result, state = render(Diagram(source="graph TD; A-->B"))
        assert result == '<div class="mermaid">graph TD; A--&gt;B</div>'
        assert state.features.mermaid is True
        assert state.features.katex is False
        assert state.features.prism is False


@pytest.mark.unit
class TestProseRendering:
    """Tests for containers, paragraphs, lists and inline markup."""

    def test_inline_markup(self):
        result, _ = render(Paragraph(children=[
            Text(content="a "),
            Emphasis(children=[Text(content="em")]),
            Strong(children=[Text(content="strong")]),
            InlineCode(content="c<d"),
            Link(url="https://example.com/?a=1&b=2", children=[Text(content="link")]),
        ]))
        assert result == (
            "<p>a <em>em</em><strong>strong</strong><code>c&lt;d</code>"
            '<a href="https://example.com/?a=1&amp;b=2">link</a></p>'
        )

    def test_inline_code_does_not_require_prism(self):
        _, state = render(Paragraph(children=[InlineCode(content="x")]))
        assert state.features.prism is False

    @pytest.mark.security
    def test_dangerous_link_is_neutralized(self, caplog):
        with caplog.at_level(logging.WARNING, logger="knots"):
            result, _ = render(Link(url="javascript:alert(1)", children=[Text(content="x")]))
        assert result == '<a href="#">x</a>'
        assert any("unsafe scheme" in r.getMessage() for r in caplog.records)

    @pytest.mark.security
    def test_control_character_prefix_is_neutralized(self):
        result, _ = render(Link(url="\x01javascript:alert(1)", children=[Text(content="x")]))
        assert result == '<a href="#">x</a>'

    def test_lists(self):
        result, _ = render(
            List(children=[ListItem(children=[Text(content="one")])]),
            List(ordered=True, children=[ListItem(children=[Text(content="two")])]),
        )
        assert result == "<ul><li>one</li></ul><ol><li>two</li></ol>"

    def test_block_quote_and_break(self):
        result, _ = render(BlockQuote(children=[Paragraph(children=[Text(content="q")])]), ThematicBreak())
        assert result == "<blockquote><p>q</p></blockquote><hr>"

    def test_container_without_class_has_no_markup(self):
        result, _ = render(Container(children=[Paragraph(children=[Text(content="x")])]))
        assert result == "<p>x</p>"

    def test_container_with_class_is_wrapped(self):
        result, _ = render(Container(css_class="note", children=[Paragraph(children=[Text(content="x")])]))
        assert result == '<div class="note"><p>x</p></div>'

    def test_no_features_leaves_flags_false(self):
        _, state = render(Heading(level=1, anchor="a", title="A"), Paragraph(children=[Text(content="x")]))
        assert not state.features.any()
        assert state.prism_plugins == []
        assert state.katex_buffer == []


@pytest.mark.unit
class TestRendererSetup:
    """Tests for renderer construction and state handling."""

    def test_rejects_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError):
            HtmlRenderer(BaseRendererOptions())

    def test_uses_supplied_state(self):
        state = RenderState()
        HtmlRenderer(state=state).render_to_string(Container(children=[Diagram(source="x")]))
        assert state.features.mermaid is True

    def test_each_renderer_has_its_own_state(self):
        first = HtmlRenderer()
        first.render_to_string(Container(children=[MathExpr(source="x")]))
        second = HtmlRenderer()
        assert second.state.katex_buffer == []
        assert second.state.features.katex is False
