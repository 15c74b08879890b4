#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2subtext/ast/__init__.py
"""Abstract Syntax Tree for org documents.

This package provides the node classes that represent a parsed org
document, the traversal driver used by renderers, and JSON serialization
of trees.
"""

from org2subtext.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Drawer,
    Emphasis,
    Heading,
    Headline,
    Keyword,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Section,
    SourceLocation,
    SpecialBlock,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
    Underline,
    get_node_children,
)
from org2subtext.ast.serialization import ast_to_dict, ast_to_json
from org2subtext.ast.visitors import CONTEXT_KINDS, ContextStack, NodePath, NodeVisitor, TreeWalker, WalkAction

__all__ = [
    "Node",
    "SourceLocation",
    "Document",
    "Headline",
    "Heading",
    "Section",
    "Paragraph",
    "Keyword",
    "Drawer",
    "BlockQuote",
    "List",
    "ListItem",
    "CodeBlock",
    "SpecialBlock",
    "ThematicBreak",
    "Text",
    "Code",
    "Link",
    "Emphasis",
    "Strong",
    "Underline",
    "Strikethrough",
    "get_node_children",
    "CONTEXT_KINDS",
    "ContextStack",
    "NodePath",
    "NodeVisitor",
    "TreeWalker",
    "WalkAction",
    "ast_to_dict",
    "ast_to_json",
]
