#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/knots/ast/visitors.py
"""Visitor pattern base class for Knots tree traversal.

Every node kind has one abstract ``visit_*`` method here. Concrete visitors
cannot be instantiated until they implement all of them, so adding a node
kind to :mod:`knots.ast.nodes` forces every visitor to handle it.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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


class NodeVisitor(ABC):
    """Abstract base class for Knots tree visitors.

    Examples
    --------
    Counting code blocks:

        >>> class CodeBlockCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def visit_code_block(self, node):
        ...         self.count += 1
        ...     # ... every other visit_* method must be implemented too

    """

    def visit_children(self, node: Node) -> None:
        """Visit each child of ``node`` in order, if it has children."""
        for child in getattr(node, "children", ()):
            child.accept(self)

    # Block-level nodes

    @abstractmethod
    def visit_container(self, node: Container) -> Any:
        """Visit a Container node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node.

        Parameters
        ----------
        node : Heading
            The heading node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_math_expr(self, node: MathExpr) -> Any:
        """Visit a MathExpr node, inline or display."""
        pass

    @abstractmethod
    def visit_diagram(self, node: Diagram) -> Any:
        """Visit a Diagram node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""
        pass

    # Inline nodes

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_inline_code(self, node: InlineCode) -> Any:
        """Visit an InlineCode node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass


__all__ = ["NodeVisitor"]
