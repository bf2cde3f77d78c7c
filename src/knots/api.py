#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/knots/api.py
"""Public rendering entry point."""

from __future__ import annotations

from typing import Any

from knots.ast.nodes import Document
from knots.options.html import HtmlRendererOptions
from knots.renderers.document import DocumentRenderer


def render_document(document: Document, options: HtmlRendererOptions | None = None, **kwargs: Any) -> str:
    """Render a parsed Knots document to a self-contained HTML page.

    Parameters
    ----------
    document : Document
        Parsed document
    options : HtmlRendererOptions or None, default = None
        Rendering options; defaults are used when omitted
    **kwargs : Any
        Individual option overrides applied on top of ``options``,
        e.g. ``summary=False``

    Returns
    -------
    str
        Complete HTML5 document

    Raises
    ------
    TypeError
        If a keyword argument is not an option name
    InvalidOptionsError
        If ``options`` is not an HtmlRendererOptions instance
    RenderingError
        If rendering fails

    Examples
    --------
        >>> from knots import Container, Document, Heading, render_document
        >>> doc = Document(
        ...     title="Notes",
        ...     authors=["Alice", "Bob"],
        ...     license="MIT",
        ...     root=Container(children=[Heading(level=1, anchor="intro", title="Intro")]),
        ... )
        >>> html = render_document(doc, summary=False)

    """
    options = options or HtmlRendererOptions()
    if kwargs:
        options = options.create_updated(**kwargs)
    return DocumentRenderer(options).render_to_string(document)


__all__ = ["render_document"]
