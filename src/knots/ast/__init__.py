#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/knots/ast/__init__.py
"""Document tree module for parsed Knots documents.

- nodes: Document wrapper and node kinds
- visitors: abstract visitor with one method per node kind
- serialization: dict/JSON interchange with the Knots parser

Examples
--------
    >>> from knots.ast import Container, Document, Heading, Paragraph, Text
    >>> doc = Document(
    ...     title="Field notes",
    ...     authors=["Alice"],
    ...     root=Container(children=[
    ...         Heading(level=1, anchor="intro", title="Intro", children=[
    ...             Paragraph(children=[Text(content="Hello world")]),
    ...         ]),
    ...     ]),
    ... )

"""

from __future__ import annotations

from knots.ast.nodes import (
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
from knots.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from knots.ast.visitors import NodeVisitor

__all__ = [
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
    # Visitors
    "NodeVisitor",
    # Serialization
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
