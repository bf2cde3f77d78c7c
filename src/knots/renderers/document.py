#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/knots/renderers/document.py
"""Assembly of complete, self-contained HTML pages.

Rendering runs in two phases:

1. :class:`~knots.renderers.html.HtmlRenderer` renders the document root to a
   fragment and fills a :class:`~knots.renderers.state.RenderState`.
2. :class:`DocumentRenderer` writes the page around that fragment: head,
   header, main content, license, summary, then the KaTeX, Prism and Mermaid
   trailers selected by the state.

The trailers follow the content, rather than sitting in ``<head>``, because
whether they are needed is only known once the whole tree has been visited.
All assets are inlined; the page references no external resources.

"""

from __future__ import annotations

import json
import logging

from knots.assets import ASSETS
from knots.ast.nodes import Document
from knots.constants import (
    AUTHOR_SEPARATOR,
    CONTAINER_CLASS_PREFIX,
    DOCINFO_CLASS,
    DOCTITLE_ID,
    FLEX_CONTAINER_CLASS,
    LICENSE_CLASS,
    LICENSE_ID,
    LICENSE_SENTENCE_TEMPLATE,
    MAIN_CONTENT_CLASS,
    SUMMARY_CLASS,
    SUMMARY_CONTAINER_CLASS,
    SUMMARY_CONTENT_CLASS,
    SUMMARY_LEVEL_CLASS_PREFIX,
)
from knots.options.html import HtmlRendererOptions
from knots.renderers.base import BaseRenderer
from knots.renderers.html import HtmlRenderer
from knots.renderers.serializer import HtmlSerializer
from knots.renderers.state import RenderState

logger = logging.getLogger(__name__)


def join_authors(authors: list[str]) -> str:
    """Join author names with ``", "``, first author unprefixed."""
    joined = authors[0]
    for author in authors[1:]:
        joined = f"{joined}{AUTHOR_SEPARATOR}{author}"
    return joined


class DocumentRenderer(BaseRenderer):
    """Render a :class:`~knots.ast.nodes.Document` to a standalone HTML page.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        Rendering options

    Examples
    --------
        >>> from knots.ast import Document
        >>> html = DocumentRenderer().render_to_string(Document(title="Empty"))
        >>> html.startswith("<!DOCTYPE html><html><head>")
        True

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the document renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "document")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options

    def render_to_string(self, document: Document) -> str:
        """Render a document to a complete HTML page.

        Parameters
        ----------
        document : Document
            Parsed document

        Returns
        -------
        str
            HTML5 page with every stylesheet and script inlined

        Raises
        ------
        TagStackError
            If the renderer produced unbalanced markup (internal defect)
        MissingAssetError
            If a code language has no Prism plugin and
            ``fail_on_missing_plugin`` is set

        """
        state = RenderState()
        main_content = HtmlRenderer(self.options, state=state).render_to_string(document.root)

        out = HtmlSerializer()
        out.orphan_tag("!DOCTYPE html")
        out.start_tag("html")
        self._write_head(out, document)

        out.start_tag("body")
        self._write_header(out, document)

        out.start_tag("div", [("class", FLEX_CONTAINER_CLASS)])
        out.start_tag("div", [("class", MAIN_CONTENT_CLASS)])
        out.start_tag("div", [("class", f"{CONTAINER_CLASS_PREFIX}1")])
        out.write_raw(main_content)
        out.end_tag()  # </div> .container-lvl1

        if document.license is not None:
            self._write_license(out, document.license)
        out.end_tag()  # </div> .main-content

        if self.options.summary and state.summary:
            self._write_summary(out, state)
        out.end_tag()  # </div> .flex-container

        if state.features.katex:
            self._warn_if_placeholder("katex_css", "katex_js")
            self._write_katex(out, state)
        if state.features.prism:
            self._warn_if_placeholder("prism_js")
            self._write_prism(out, state)
        if state.features.mermaid:
            self._warn_if_placeholder("mermaid_js")
            self._write_mermaid(out)

        out.end_tag()  # </body>
        out.end_tag()  # </html>

        logger.debug(
            "Rendered document %r: %d heading(s), katex=%s prism=%s mermaid=%s",
            document.title,
            len(state.summary),
            state.features.katex,
            state.features.prism,
            state.features.mermaid,
        )
        return out.into_result()

    def _write_head(self, out: HtmlSerializer, document: Document) -> None:
        out.start_tag("head")
        out.orphan_tag("meta", [("charset", "utf-8")])
        out.orphan_tag("meta", [("name", "viewport"), ("content", "width=device-width, initial-scale=1")])
        out.inline_tag("title", [], document.title)
        self._write_style(out, ASSETS.normalize_css)
        self._write_style(out, ASSETS.style_css)
        out.end_tag()  # </head>

    def _write_header(self, out: HtmlSerializer, document: Document) -> None:
        out.start_tag("header")
        out.inline_tag("p", [("id", DOCTITLE_ID)], document.title)
        if document.authors:
            out.start_tag("div", [("class", DOCINFO_CLASS)])
            out.write_raw(ASSETS.author_icon)
            out.write_content(join_authors(document.authors))
            out.end_tag()  # </div> .docinfo
        out.end_tag()  # </header>

    def _write_license(self, out: HtmlSerializer, license_name: str) -> None:
        out.start_tag("div", [("class", LICENSE_CLASS), ("id", LICENSE_ID)])
        out.orphan_tag("hr")
        out.write_raw(ASSETS.license_icon)
        out.write_content(LICENSE_SENTENCE_TEMPLATE.format(license=license_name))
        out.end_tag()  # </div> #license

    def _write_summary(self, out: HtmlSerializer, state: RenderState) -> None:
        out.start_tag("div", [("class", SUMMARY_CONTAINER_CLASS)])
        out.start_tag("div", [("class", SUMMARY_CLASS)])
        out.inline_tag("p", [], self.options.summary_title)
        out.start_tag("div", [("class", SUMMARY_CONTENT_CLASS)])
        for entry in state.summary:
            out.inline_tag(
                "a",
                [("href", f"#{entry.anchor}"), ("class", f"{SUMMARY_LEVEL_CLASS_PREFIX}{entry.level}")],
                entry.name,
            )
        out.end_tag()  # </div> .summary-content
        out.end_tag()  # </div> .summary
        out.end_tag()  # </div> .summary-container

    def _write_katex(self, out: HtmlSerializer, state: RenderState) -> None:
        self._write_style(out, ASSETS.katex_css)
        out.start_tag("script")
        out.write_raw(ASSETS.katex_js)
        # Source strings in the buffer are already encoded as script-safe literals.
        out.write_raw(state.katex_content)
        out.end_tag()  # </script>

    def _write_prism(self, out: HtmlSerializer, state: RenderState) -> None:
        self._write_style(out, ASSETS.prism_css)
        out.start_tag("script")
        out.write_raw(ASSETS.prism_js)
        for language in state.prism_plugins:
            plugin = ASSETS.prism_plugin(language)
            if plugin is not None:
                out.write_raw(plugin)
        out.end_tag()  # </script>

    def _write_mermaid(self, out: HtmlSerializer) -> None:
        out.start_tag("script")
        out.write_raw(ASSETS.mermaid_js)
        out.end_tag()  # </script>

        dark = json.dumps(self.options.mermaid_dark_theme)
        light = json.dumps(self.options.mermaid_light_theme)
        out.start_tag("script")
        out.write_raw(
            "mermaid.initialize({theme: window.matchMedia('(prefers-color-scheme: dark)').matches"
            f" ? {dark} : {light}}})"
        )
        out.end_tag()  # </script>

    @staticmethod
    def _warn_if_placeholder(*asset_names: str) -> None:
        placeholders = ASSETS.placeholder_runtimes
        for name in asset_names:
            if name in placeholders:
                logger.warning("Asset %s is a placeholder; the page will load without that library", name)

    @staticmethod
    def _write_style(out: HtmlSerializer, css: str) -> None:
        out.start_tag("style")
        out.write_raw(css)
        out.end_tag()  # </style>


__all__ = ["DocumentRenderer", "join_authors"]
