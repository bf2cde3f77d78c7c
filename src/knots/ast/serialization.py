#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/knots/ast/serialization.py
"""JSON interchange format for Knots document trees.

The Knots parser runs outside this package. It hands documents over either as
Python objects or in the ``node_type``-tagged JSON form produced here, which
also makes rendered fixtures easy to store next to tests.

Examples
--------
Serialize a document to JSON:

    >>> from knots.ast import Container, Document, Heading
    >>> from knots.ast.serialization import ast_to_json
    >>> doc = Document(title="Notes", root=Container(children=[
    ...     Heading(level=1, anchor="intro", title="Intro")
    ... ]))
    >>> json_str = ast_to_json(doc, indent=2)

Load it back:

    >>> from knots.ast.serialization import json_to_ast
    >>> json_to_ast(json_str).root.children[0].anchor
    'intro'

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Union, cast

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
from knots.constants import AST_SCHEMA_VERSION

logger = logging.getLogger(__name__)

Serializable = Union[Node, Document]


def _serialize_children(node: Any) -> list[dict[str, Any]]:
    return [ast_to_dict(child) for child in node.children]


def _serialize_children_node(node: Node, node_type: str) -> dict[str, Any]:
    """Serialize nodes whose only payload is ``children``."""
    return {"node_type": node_type, "children": _serialize_children(node), "metadata": node.metadata}


def _serialize_text_node(node: Text | InlineCode, node_type: str) -> dict[str, Any]:
    return {"node_type": node_type, "content": node.content, "metadata": node.metadata}


def _serialize_container(node: Container) -> dict[str, Any]:
    result = _serialize_children_node(node, "Container")
    if node.css_class is not None:
        result["css_class"] = node.css_class
    return result


def _serialize_heading(node: Heading) -> dict[str, Any]:
    return {
        "node_type": "Heading",
        "level": node.level,
        "anchor": node.anchor,
        "title": node.title,
        "children": _serialize_children(node),
        "metadata": node.metadata,
    }


def _serialize_code_block(node: CodeBlock) -> dict[str, Any]:
    return {"node_type": "CodeBlock", "language": node.language, "source": node.source, "metadata": node.metadata}


def _serialize_math_expr(node: MathExpr) -> dict[str, Any]:
    return {
        "node_type": "MathExpr",
        "source": node.source,
        "display_mode": node.display_mode,
        "metadata": node.metadata,
    }


def _serialize_diagram(node: Diagram) -> dict[str, Any]:
    return {"node_type": "Diagram", "source": node.source, "metadata": node.metadata}


def _serialize_list(node: List) -> dict[str, Any]:
    result = _serialize_children_node(node, "List")
    result["ordered"] = node.ordered
    return result


def _serialize_link(node: Link) -> dict[str, Any]:
    result = _serialize_children_node(node, "Link")
    result["url"] = node.url
    return result


def _serialize_document(node: Document) -> dict[str, Any]:
    return {
        "node_type": "Document",
        "title": node.title,
        "authors": list(node.authors),
        "license": node.license,
        "root": ast_to_dict(node.root),
    }


# Dispatch table mapping node types to their serialization functions
_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    Document: _serialize_document,
    Container: _serialize_container,
    Heading: _serialize_heading,
    Paragraph: lambda n: _serialize_children_node(n, "Paragraph"),
    CodeBlock: _serialize_code_block,
    MathExpr: _serialize_math_expr,
    Diagram: _serialize_diagram,
    BlockQuote: lambda n: _serialize_children_node(n, "BlockQuote"),
    List: _serialize_list,
    ListItem: lambda n: _serialize_children_node(n, "ListItem"),
    ThematicBreak: lambda n: {"node_type": "ThematicBreak", "metadata": n.metadata},
    Text: lambda n: _serialize_text_node(n, "Text"),
    Emphasis: lambda n: _serialize_children_node(n, "Emphasis"),
    Strong: lambda n: _serialize_children_node(n, "Strong"),
    InlineCode: lambda n: _serialize_text_node(n, "InlineCode"),
    Link: _serialize_link,
}


def ast_to_dict(node: Serializable) -> dict[str, Any]:
    """Convert a node or Document to its dictionary representation.

    Parameters
    ----------
    node : Node or Document
        The tree to convert

    Returns
    -------
    dict
        Dictionary with a ``node_type`` key at every level

    Raises
    ------
    ValueError
        If the object is not a known node type

    """
    serializer = _SERIALIZATION_DISPATCH.get(type(node))
    if serializer is None:
        raise ValueError(f"Unknown node type for serialization: {type(node).__name__}")
    return serializer(node)


# Deserialization


def _reject(message: str, strict_mode: bool) -> Text:
    """Raise in strict mode, otherwise warn and return an empty Text placeholder."""
    if strict_mode:
        raise ValueError(message)
    logger.warning("%s, replacing with empty text", message)
    return Text(content="")


def _deserialize_children(data: dict[str, Any], strict_mode: bool) -> list[Node]:
    children = data.get("children", [])
    if not isinstance(children, list):
        _reject(f"{data.get('node_type')} children must be a list, got {type(children).__name__}", strict_mode)
        return []

    nodes: list[Node] = []
    for child in children:
        node = dict_to_ast(child, strict_mode=strict_mode)
        if isinstance(node, Document):
            node = _reject("Document is only valid at the top level, not as a child node", strict_mode)
        nodes.append(node)
    return nodes


def _deserialize_document(data: dict[str, Any], strict_mode: bool) -> Document:
    root = dict_to_ast(data.get("root", {"node_type": "Container"}), strict_mode=strict_mode)
    if not isinstance(root, Container):
        raise ValueError(f"Document root must be a Container, got {type(root).__name__}")
    return Document(
        title=data["title"],
        authors=list(data.get("authors", [])),
        license=data.get("license"),
        root=root,
    )


def _deserialize_container(data: dict[str, Any], strict_mode: bool) -> Container:
    return Container(
        children=_deserialize_children(data, strict_mode),
        css_class=data.get("css_class"),
        metadata=data.get("metadata", {}),
    )


def _deserialize_heading(data: dict[str, Any], strict_mode: bool) -> Heading:
    return Heading(
        level=data["level"],
        anchor=data["anchor"],
        title=data["title"],
        children=_deserialize_children(data, strict_mode),
        metadata=data.get("metadata", {}),
    )


def _deserialize_code_block(data: dict[str, Any], strict_mode: bool) -> CodeBlock:
    return CodeBlock(language=data.get("language", ""), source=data["source"], metadata=data.get("metadata", {}))


def _deserialize_math_expr(data: dict[str, Any], strict_mode: bool) -> MathExpr:
    return MathExpr(
        source=data["source"],
        display_mode=bool(data.get("display_mode", False)),
        metadata=data.get("metadata", {}),
    )


def _deserialize_diagram(data: dict[str, Any], strict_mode: bool) -> Diagram:
    return Diagram(source=data["source"], metadata=data.get("metadata", {}))


def _deserialize_list(data: dict[str, Any], strict_mode: bool) -> List:
    return List(
        ordered=bool(data.get("ordered", False)),
        children=_deserialize_children(data, strict_mode),
        metadata=data.get("metadata", {}),
    )


def _deserialize_link(data: dict[str, Any], strict_mode: bool) -> Link:
    return Link(url=data["url"], children=_deserialize_children(data, strict_mode), metadata=data.get("metadata", {}))


def _children_deserializer(node_class: type) -> Callable[[dict[str, Any], bool], Node]:
    def deserialize(data: dict[str, Any], strict_mode: bool) -> Node:
        return cast(Node, node_class(children=_deserialize_children(data, strict_mode), metadata=data.get("metadata", {})))

    return deserialize


def _text_deserializer(node_class: type) -> Callable[[dict[str, Any], bool], Node]:
    def deserialize(data: dict[str, Any], strict_mode: bool) -> Node:
        return cast(Node, node_class(content=data["content"], metadata=data.get("metadata", {})))

    return deserialize


# Dispatch table mapping node type strings to deserializer functions
_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any], bool], Serializable]] = {
    "Document": _deserialize_document,
    "Container": _deserialize_container,
    "Heading": _deserialize_heading,
    "Paragraph": _children_deserializer(Paragraph),
    "CodeBlock": _deserialize_code_block,
    "MathExpr": _deserialize_math_expr,
    "Diagram": _deserialize_diagram,
    "BlockQuote": _children_deserializer(BlockQuote),
    "List": _deserialize_list,
    "ListItem": _children_deserializer(ListItem),
    "ThematicBreak": lambda data, strict_mode: ThematicBreak(metadata=data.get("metadata", {})),
    "Text": _text_deserializer(Text),
    "Emphasis": _children_deserializer(Emphasis),
    "Strong": _children_deserializer(Strong),
    "InlineCode": _text_deserializer(InlineCode),
    "Link": _deserialize_link,
}


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> Serializable:
    """Convert a dictionary representation back to a node or Document.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise ValueError on unknown, non-object or misplaced nodes.
        If False, replace them with empty Text nodes and log a warning.

    Returns
    -------
    Node or Document
        Reconstructed tree

    Raises
    ------
    ValueError
        If the data is not a node object or its type is unknown (strict mode),
        or a required field is missing

    """
    if not isinstance(data, dict):
        return _reject(f"Expected a node object, got {type(data).__name__}", strict_mode)

    node_type = data.get("node_type")
    deserializer = _DESERIALIZATION_DISPATCH.get(node_type) if isinstance(node_type, str) else None
    if deserializer is None:
        return _reject(f"Unknown node type: {node_type!r}", strict_mode)

    try:
        return deserializer(data, strict_mode)
    except KeyError as exc:
        raise ValueError(f"{node_type} node is missing required field {exc.args[0]!r}") from exc


def ast_to_json(node: Serializable, indent: int | None = None) -> str:
    """Serialize a node or Document to a JSON string with a schema version.

    Parameters
    ----------
    node : Node or Document
        The tree to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON text of the form ``{"schema_version": 1, "node_type": ...}``

    """
    versioned = {"schema_version": AST_SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, strict_mode: bool = True) -> Serializable:
    """Deserialize a JSON string produced by :func:`ast_to_json`.

    JSON without a ``schema_version`` is read as version 1.

    Raises
    ------
    ValueError
        If the schema version is unsupported or the tree is invalid
    json.JSONDecodeError
        If the JSON text is malformed

    """
    data = json.loads(json_str)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

    schema_version = data.pop("schema_version", AST_SCHEMA_VERSION)
    if schema_version != AST_SCHEMA_VERSION:
        raise ValueError(
            f"Unsupported schema version: {schema_version}. Only version {AST_SCHEMA_VERSION} is supported."
        )
    return dict_to_ast(data, strict_mode=strict_mode)


__all__ = [
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
