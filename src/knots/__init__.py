#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/knots/__init__.py
"""knots - render parsed Knots documents to self-contained HTML pages.

The renderer turns a :class:`~knots.ast.nodes.Document` tree into a single
HTML page with every stylesheet and script inlined. Math (KaTeX), code
highlighting (Prism) and diagram (Mermaid) support is embedded only when the
document uses it.

Examples
--------
    >>> from knots import CodeBlock, Container, Document, Heading, render_document
    >>> doc = Document(
    ...     title="Release notes",
    ...     authors=["Alice"],
    ...     root=Container(children=[
    ...         Heading(level=1, anchor="usage", title="Usage", children=[
    ...             CodeBlock(language="python", source="print('hi')"),
    ...         ]),
    ...     ]),
    ... )
    >>> html = render_document(doc)

"""

from knots.api import render_document
from knots.ast import (
    BlockQuote,
    CodeBlock,
    Container,
    Diagram,
    Document,
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
from knots.exceptions import (
    InvalidOptionsError,
    KnotsError,
    MissingAssetError,
    RenderingError,
    SerializerFinalizedError,
    TagStackError,
    ValidationError,
)
from knots.options import HtmlRendererOptions
from knots.renderers import DocumentRenderer, HtmlRenderer, HtmlSerializer

__version__ = "0.4.0"

__all__ = [
    "__version__",
    "render_document",
    # Options
    "HtmlRendererOptions",
    # Renderers
    "DocumentRenderer",
    "HtmlRenderer",
    "HtmlSerializer",
    # Nodes
    "Node",
    "Document",
    "Container",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "MathExpr",
    "Diagram",
    "BlockQuote",
    "List",
    "ListItem",
    "ThematicBreak",
    "Text",
    "Emphasis",
    "Strong",
    "InlineCode",
    "Link",
    # Exceptions
    "KnotsError",
    "ValidationError",
    "InvalidOptionsError",
    "RenderingError",
    "TagStackError",
    "SerializerFinalizedError",
    "MissingAssetError",
]
