#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/knots/renderers/html.py
"""HTML rendering of Knots document trees.

:class:`HtmlRenderer` walks a tree depth-first, pre-order, and writes markup
through an :class:`~knots.renderers.serializer.HtmlSerializer`. As a side
effect it fills a :class:`~knots.renderers.state.RenderState`:

- headings are appended to the summary in reading order;
- code blocks, math expressions and diagrams raise the Prism, KaTeX and
  Mermaid feature flags;
- code languages are recorded for Prism grammar plugins;
- math sources are buffered as KaTeX calls run once after page load.

The renderer produces a body fragment only. The full page, including the
trailer blocks that depend on the accumulated state, is assembled by
:class:`~knots.renderers.document.DocumentRenderer`.

"""

from __future__ import annotations

import logging

from knots.assets import ASSETS, canonical_language
from knots.ast.nodes import (
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
    Node,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
)
from knots.ast.visitors import NodeVisitor
from knots.constants import (
    CODE_LANGUAGE_NONE,
    CODE_LANGUAGE_PREFIX,
    CONTAINER_CLASS_PREFIX,
    KATEX_CLASS,
    KATEX_DISPLAY_CLASS,
    KATEX_INDEX_ATTR,
    MAX_HTML_HEADING_LEVEL,
    MERMAID_CLASS,
)
from knots.exceptions import MissingAssetError
from knots.options.html import HtmlRendererOptions
from knots.renderers.base import BaseRenderer
from knots.renderers.serializer import HtmlSerializer
from knots.renderers.state import RenderState
from knots.utils.html_utils import escape_script_string, sanitize_url

logger = logging.getLogger(__name__)


class HtmlRenderer(NodeVisitor, BaseRenderer):
    """Render a Knots tree to an HTML fragment.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        Rendering options
    state : RenderState or None, default = None
        Accumulators to fill. A new one is created when omitted.

    Examples
    --------
        >>> from knots.ast import Container, Heading
        >>> renderer = HtmlRenderer()
        >>> renderer.render_to_string(Container(children=[Heading(level=1, anchor="a", title="A")]))
        '<h1 id="a">A</h1>'
        >>> renderer.state.summary[0].anchor
        'a'

    Notes
    -----
    The state keeps accumulating if the same renderer renders several trees.
    Use one renderer per document.

    """

    def __init__(self, options: HtmlRendererOptions | None = None, state: RenderState | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self.state = state if state is not None else RenderState()
        self._serializer = HtmlSerializer()

    def render_to_string(self, node: Node) -> str:
        """Render a subtree to a balanced HTML fragment.

        Parameters
        ----------
        node : Node
            Root of the subtree, usually the document's root Container

        Returns
        -------
        str
            HTML fragment

        Raises
        ------
        TagStackError
            If a visit method left tags unbalanced
        MissingAssetError
            If a code language has no Prism plugin and
            ``fail_on_missing_plugin`` is set

        """
        self._serializer = HtmlSerializer()
        node.accept(self)
        fragment = self._serializer.into_result()
        logger.debug(
            "Rendered fragment: %d summary entries, features %s, prism languages %s",
            len(self.state.summary),
            self.state.features,
            self.state.prism_plugins,
        )
        return fragment

    def _wrap_children(self, tag: str, node: Node, attrs: list[tuple[str, str]] | None = None) -> None:
        self._serializer.start_tag(tag, attrs or [])
        self.visit_children(node)
        self._serializer.end_tag()

    # Block-level nodes

    def visit_container(self, node: Container) -> None:
        """Render children in order, wrapped in a div if a class is set."""
        if node.css_class:
            self._wrap_children("div", node, [("class", node.css_class)])
        else:
            self.visit_children(node)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node and record it in the summary.

        The section content follows in a ``container-lvl{level + 1}`` div.
        """
        tag = f"h{min(node.level, MAX_HTML_HEADING_LEVEL)}"
        self._serializer.inline_tag(tag, [("id", node.anchor)], node.title)
        self.state.add_summary_entry(node.level, node.anchor, node.title)

        if node.children:
            self._wrap_children("div", node, [("class", f"{CONTAINER_CLASS_PREFIX}{node.level + 1}")])

    def visit_paragraph(self, node: Paragraph) -> None:
        self._wrap_children("p", node)

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node and register its Prism grammar."""
        language = canonical_language(node.language)
        if self.state.register_prism_language(language) and ASSETS.prism_plugin(language) is None:
            if self.options.fail_on_missing_plugin:
                raise MissingAssetError(f"No Prism plugin is bundled for language {node.language!r}", language)
            logger.warning("No Prism plugin for language %r; code will not be highlighted", node.language)

        code_class = f"{CODE_LANGUAGE_PREFIX}{node.language.strip()}" if language else CODE_LANGUAGE_NONE
        self._serializer.start_tag("pre")
        self._serializer.inline_tag("code", [("class", code_class)], node.source)
        self._serializer.end_tag()

    def visit_math_expr(self, node: MathExpr) -> None:
        """Render a placeholder for a MathExpr node and buffer its KaTeX call.

        The placeholder holds the escaped source, shown until KaTeX replaces it.
        It is located through a ``data-`` attribute rather than an ``id``, since
        ids belong to heading anchors chosen by the document author.
        """
        index = str(self.state.next_math_id())
        tag = "div" if node.display_mode else "span"
        css_class = KATEX_DISPLAY_CLASS if node.display_mode else KATEX_CLASS
        self._serializer.inline_tag(tag, [("class", css_class), (KATEX_INDEX_ATTR, index)], node.source)

        display = "true" if node.display_mode else "false"
        throw = "true" if self.options.katex_throw_on_error else "false"
        self.state.register_math(
            f"katex.render({escape_script_string(node.source)}, "
            f"document.querySelector('[{KATEX_INDEX_ATTR}=\"{index}\"]'), "
            f"{{displayMode: {display}, throwOnError: {throw}}});"
        )

    def visit_diagram(self, node: Diagram) -> None:
        # Mermaid reads the element's text content, so escaping is undone by the browser.
        self.state.register_diagram()
        self._serializer.inline_tag("div", [("class", MERMAID_CLASS)], node.source)

    def visit_block_quote(self, node: BlockQuote) -> None:
        self._wrap_children("blockquote", node)

    def visit_list(self, node: List) -> None:
        self._wrap_children("ol" if node.ordered else "ul", node)

    def visit_list_item(self, node: ListItem) -> None:
        self._wrap_children("li", node)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        self._serializer.orphan_tag("hr")

    # Inline nodes

    def visit_text(self, node: Text) -> None:
        self._serializer.write_content(node.content)

    def visit_emphasis(self, node: Emphasis) -> None:
        self._wrap_children("em", node)

    def visit_strong(self, node: Strong) -> None:
        self._wrap_children("strong", node)

    def visit_inline_code(self, node: InlineCode) -> None:
        self._serializer.inline_tag("code", [], node.content)

    def visit_link(self, node: Link) -> None:
        self._wrap_children("a", node, [("href", sanitize_url(node.url))])


__all__ = ["HtmlRenderer"]
