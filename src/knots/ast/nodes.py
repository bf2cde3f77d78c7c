#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/knots/ast/nodes.py
"""Node classes for the parsed Knots document tree.

The tree is produced by the Knots markup parser and consumed by the HTML
renderers. Every node kind supports the visitor pattern through ``accept``,
which dispatches to exactly one ``visit_*`` method of a
:class:`~knots.ast.visitors.NodeVisitor`.

Node Hierarchy
--------------
Block-level nodes:
    - Container, Heading, Paragraph, CodeBlock, MathExpr, Diagram
    - BlockQuote, List, ListItem, ThematicBreak

Inline nodes:
    - Text, Emphasis, Strong, InlineCode, Link

``MathExpr`` is used both inline and as a block, depending on
``display_mode``.

The :class:`Document` wrapper carries the title, authors and license next to
the root container. It is not itself a node.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


class Node(ABC):
    """Base class for all Knots tree nodes.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary parser metadata associated with this node. The renderer
        ignores it.

    """

    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Container(Node):
    """Ordered group of nodes with no markup of its own.

    The root of every document is a Container. When ``css_class`` is set the
    children are wrapped in a ``div`` carrying that class.

    Parameters
    ----------
    children : list of Node, default = empty list
        Nodes rendered in order
    css_class : str or None, default = None
        Optional class for a wrapping ``div``
    metadata : dict, default = empty dict
        Container metadata

    """

    children: list[Node] = field(default_factory=list)
    css_class: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_container``."""
        return visitor.visit_container(self)


@dataclass
class Heading(Node):
    """Section heading with an anchor and nested section content.

    Parameters
    ----------
    level : int
        Heading level, 1 being the most important. Levels deeper than 6 are
        allowed; they render as ``h6`` but keep their level in the summary.
    anchor : str
        Fragment identifier, unique per document (guaranteed by the parser)
    title : str
        Plain heading text
    children : list of Node, default = empty list
        Content of the section introduced by this heading
    metadata : dict, default = empty dict
        Heading metadata

    """

    level: int
    anchor: str
    title: str
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is a positive integer."""
        if not isinstance(self.level, int) or isinstance(self.level, bool):
            raise ValueError(f"Heading level must be an integer, got {type(self.level).__name__}")
        if self.level < 1:
            raise ValueError(f"Heading level must be >= 1, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline nodes representing paragraph content
    metadata : dict, default = empty dict
        Paragraph metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self)


@dataclass
class CodeBlock(Node):
    """Fenced code block highlighted client-side by Prism.

    Parameters
    ----------
    language : str
        Language name selecting the Prism grammar plugin. May be empty.
    source : str
        Raw source code
    metadata : dict, default = empty dict
        Code block metadata

    """

    language: str
    source: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_code_block``."""
        return visitor.visit_code_block(self)


@dataclass
class MathExpr(Node):
    """LaTeX math expression typeset client-side by KaTeX.

    Parameters
    ----------
    source : str
        LaTeX source without delimiters
    display_mode : bool, default = False
        Render as a centered block instead of inline
    metadata : dict, default = empty dict
        Math metadata

    """

    source: str
    display_mode: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_math_expr``."""
        return visitor.visit_math_expr(self)


@dataclass
class Diagram(Node):
    """Mermaid diagram description, interpreted client-side.

    Parameters
    ----------
    source : str
        Raw Mermaid grammar
    metadata : dict, default = empty dict
        Diagram metadata

    """

    source: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_diagram``."""
        return visitor.visit_diagram(self)


@dataclass
class BlockQuote(Node):
    """Block quotation containing block-level nodes."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_block_quote``."""
        return visitor.visit_block_quote(self)


@dataclass
class List(Node):
    """Ordered or unordered list of ListItem nodes.

    Parameters
    ----------
    ordered : bool, default = False
        Numbered list when True
    children : list of ListItem, default = empty list
        List items
    metadata : dict, default = empty dict
        List metadata

    """

    ordered: bool = False
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list``."""
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """Single list item containing inline or block nodes."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self)


@dataclass
class ThematicBreak(Node):
    """Horizontal rule between blocks."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_thematic_break``."""
        return visitor.visit_thematic_break(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text content.

    Parameters
    ----------
    content : str
        Literal text, escaped when rendered
    metadata : dict, default = empty dict
        Text metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)


@dataclass
class Emphasis(Node):
    """Emphasized inline content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_emphasis``."""
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strongly emphasized inline content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_strong``."""
        return visitor.visit_strong(self)


@dataclass
class InlineCode(Node):
    """Inline code span. Not highlighted, so it does not require Prism."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_inline_code``."""
        return visitor.visit_inline_code(self)


@dataclass
class Link(Node):
    """Hyperlink around inline content.

    Parameters
    ----------
    url : str
        Link target
    children : list of Node, default = empty list
        Inline nodes representing link text
    metadata : dict, default = empty dict
        Link metadata

    """

    url: str
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self)


# ============================================================================
# Document
# ============================================================================


@dataclass
class Document:
    """A parsed Knots document.

    Parameters
    ----------
    title : str
        Document title, shown in the page title and header
    authors : list of str, default = empty list
        Author names in display order
    license : str or None, default = None
        License name, e.g. ``"CC BY 4.0"``
    root : Container, default = empty Container
        Root of the document body

    """

    title: str
    authors: list[str] = field(default_factory=list)
    license: Optional[str] = None
    root: Container = field(default_factory=Container)
