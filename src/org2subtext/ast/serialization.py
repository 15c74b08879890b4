#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2subtext/ast/serialization.py
"""JSON serialization for AST nodes.

This module converts a document tree into plain dictionaries and JSON text.
It backs the ``--debug`` tree dump of the command line tool.

Examples
--------
    >>> from org2subtext.ast import Document, Heading, Text
    >>> from org2subtext.ast.serialization import ast_to_json
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")])
    ... ])
    >>> print(ast_to_json(doc, indent=2))

"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from typing import Any

from org2subtext.ast.nodes import Node, SourceLocation


def _serialize_source_location(location: SourceLocation) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "SourceLocation", "format": location.format}
    if location.line is not None:
        result["line"] = location.line
    if location.column is not None:
        result["column"] = location.column
    if location.metadata:
        result["metadata"] = location.metadata
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, (Node, SourceLocation)):
        return ast_to_dict(value)
    if isinstance(value, list):
        return [_serialize_value(item) for item in value]
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _serialize_value(item) for key, item in value.items()}
    return value


def ast_to_dict(node: Node | SourceLocation) -> dict[str, Any]:
    """Convert an AST node to a dictionary.

    Every dataclass field of the node is included. Child nodes are converted
    recursively, and ``source_location`` is omitted when unset.

    Parameters
    ----------
    node : Node or SourceLocation
        Node to serialize

    Returns
    -------
    dict
        Dictionary with a ``node_type`` key naming the node class

    Raises
    ------
    TypeError
        If ``node`` is not an AST node

    """
    if isinstance(node, SourceLocation):
        return _serialize_source_location(node)
    if not isinstance(node, Node) or not is_dataclass(node):
        raise TypeError(f"Cannot serialize object of type {type(node).__name__}")

    result: dict[str, Any] = {"node_type": type(node).__name__}
    for node_field in fields(node):
        value = getattr(node, node_field.name)
        if node_field.name == "source_location" and value is None:
            continue
        result[node_field.name] = _serialize_value(value)
    return result


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Convert an AST node to a JSON string.

    Parameters
    ----------
    node : Node
        Node to serialize
    indent : int or None, default = None
        JSON indentation level (None for compact output)

    Returns
    -------
    str
        JSON text

    """
    return json.dumps(ast_to_dict(node), indent=indent, ensure_ascii=False, default=str)
