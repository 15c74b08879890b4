#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2subtext/ast/nodes.py
"""AST node classes for org document representation.

This module defines the node hierarchy used to represent an org-mode
document as an Abstract Syntax Tree. Each node represents a structural or
inline element of the outline.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support double dispatch
through ``accept`` (enter event) and ``depart`` (leave event).

Block-level nodes represent structural document elements:
    - Document, Headline, Heading, Section, Paragraph, Keyword
    - Drawer, BlockQuote, List, ListItem
    - CodeBlock, SpecialBlock, ThematicBreak

Inline nodes represent text and formatting:
    - Text, Code, Link
    - Emphasis, Strong, Underline, Strikethrough

Nodes are plain containers: they hold no parent pointers. Positional
context (parent, siblings, ancestors) is provided during a walk by
``org2subtext.ast.visitors.NodePath``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class SourceLocation:
    """Source location information for AST nodes.

    Parameters
    ----------
    format : str
        Source format (e.g., 'org')
    line : int or None, default = None
        Line number in source document
    column : int or None, default = None
        Column number in source document
    metadata : dict, default = empty dict
        Additional format-specific location information

    """

    format: str
    line: Optional[int] = None
    column: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)


class Node(ABC):
    """Base class for all AST nodes.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node
    source_location : SourceLocation or None, default = None
        Information about where this node came from in the source

    """

    metadata: dict[str, Any]
    source_location: Optional[SourceLocation]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Dispatch the enter event for this node to ``visitor``.

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

    @abstractmethod
    def depart(self, visitor: Any) -> Any:
        """Dispatch the leave event for this node to ``visitor``.

        Parameters
        ----------
        visitor : Any
            A visitor object with depart_* methods

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
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document: the preamble Section followed by
        top-level Headlines
    metadata : dict, default = empty dict
        Document-level metadata (title, author, date, id, filetags)
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_document(self)."""
        return visitor.visit_document(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_document(self)."""
        return visitor.depart_document(self)


@dataclass
class Headline(Node):
    """One outline entry: its heading, its body, and its sub-entries.

    A Headline is an inert grouping node; renderers act on the Heading and
    Section it contains.

    Parameters
    ----------
    children : list of Node, default = empty list
        A Heading, an optional Section, then nested Headlines
    metadata : dict, default = empty dict
        Headline metadata (todo state, tags, properties)
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_headline(self)."""
        return visitor.visit_headline(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_headline(self)."""
        return visitor.depart_headline(self)


@dataclass
class Heading(Node):
    """Heading node (title line of a Headline).

    Represents an outline heading with a level and inline content. Org
    outlines have no fixed depth, so any level of 1 or more is accepted.

    Parameters
    ----------
    level : int
        Heading level (number of leading stars, 1 is the top level)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    metadata : dict, default = empty dict
        Heading metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        """Validate heading level is at least 1."""
        if self.level < 1:
            raise ValueError(f"Heading level must be >= 1, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_heading(self)."""
        return visitor.visit_heading(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_heading(self)."""
        return visitor.depart_heading(self)


@dataclass
class Section(Node):
    """Body of a Headline, or the document preamble before the first heading.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the section
    metadata : dict, default = empty dict
        Section metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_section(self)."""
        return visitor.visit_section(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_section(self)."""
        return visitor.depart_section(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes representing paragraph content
    metadata : dict, default = empty dict
        Paragraph metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_paragraph(self)."""
        return visitor.visit_paragraph(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_paragraph(self)."""
        return visitor.depart_paragraph(self)


@dataclass
class Keyword(Node):
    """In-buffer setting line (``#+KEY: value``).

    Parameters
    ----------
    key : str
        Keyword name as written (case is preserved)
    value : str
        Raw value after the colon
    metadata : dict, default = empty dict
        Keyword metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    key: str
    value: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_keyword(self)."""
        return visitor.visit_keyword(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_keyword(self)."""
        return visitor.depart_keyword(self)


@dataclass
class Drawer(Node):
    """Drawer node (``:NAME:`` ... ``:END:``).

    Drawers hold metadata such as properties or clock entries. Their lines
    are kept as paragraphs so the tree stays lossless, but renderers are
    expected to treat the drawer as a context that suppresses output.

    Parameters
    ----------
    name : str
        Drawer name (e.g., 'PROPERTIES', 'LOGBOOK')
    children : list of Node, default = empty list
        One Paragraph per drawer line
    metadata : dict, default = empty dict
        Drawer metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    name: str
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_drawer(self)."""
        return visitor.visit_drawer(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_drawer(self)."""
        return visitor.depart_drawer(self)


@dataclass
class BlockQuote(Node):
    """Block quote node (``#+begin_quote`` ... ``#+end_quote``).

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the quote
    metadata : dict, default = empty dict
        Block quote metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_block_quote(self)."""
        return visitor.visit_block_quote(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_block_quote(self)."""
        return visitor.depart_block_quote(self)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    items : list of ListItem, default = empty list
        List items
    metadata : dict, default = empty dict
        List metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_list(self)."""
        return visitor.visit_list(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_list(self)."""
        return visitor.depart_list(self)


@dataclass
class ListItem(Node):
    """List item node containing block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the list item (normally one Paragraph)
    metadata : dict, default = empty dict
        List item metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_list_item(self)."""
        return visitor.visit_list_item(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_list_item(self)."""
        return visitor.depart_list_item(self)


@dataclass
class CodeBlock(Node):
    """Source or example block (``#+begin_src`` ... ``#+end_src``).

    Parameters
    ----------
    content : str
        Block content, not parsed
    language : str or None, default = None
        Language given after ``#+begin_src``
    metadata : dict, default = empty dict
        Code block metadata (block type, header arguments)
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_code_block(self)."""
        return visitor.visit_code_block(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_code_block(self)."""
        return visitor.depart_code_block(self)


@dataclass
class SpecialBlock(Node):
    """Any other ``#+begin_NAME`` block (center, verse, comment, ...).

    Parameters
    ----------
    name : str
        Lower-cased block name
    children : list of Node, default = empty list
        Block-level nodes in the block
    metadata : dict, default = empty dict
        Block metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    name: str
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_special_block(self)."""
        return visitor.visit_special_block(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_special_block(self)."""
        return visitor.depart_special_block(self)


@dataclass
class ThematicBreak(Node):
    """Horizontal rule (five or more dashes on a line)."""

    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_thematic_break(self)."""
        return visitor.visit_thematic_break(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_thematic_break(self)."""
        return visitor.depart_thematic_break(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    content : str
        Raw text, including any embedded newlines
    metadata : dict, default = empty dict
        Text metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_text(self)."""
        return visitor.visit_text(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_text(self)."""
        return visitor.depart_text(self)


@dataclass
class Code(Node):
    """Inline code or verbatim span (``~code~`` or ``=verbatim=``).

    Parameters
    ----------
    content : str
        Raw span content
    metadata : dict, default = empty dict
        Code metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_code(self)."""
        return visitor.visit_code(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_code(self)."""
        return visitor.depart_code(self)


@dataclass
class Link(Node):
    """Link node.

    Represents ``[[target]]``, ``[[target][description]]`` or a bare URL.

    Parameters
    ----------
    url : str
        Link target as written (e.g., 'id:1234', 'https://example.com')
    description : str or None, default = None
        Raw description text, or None for a bare link
    content : list of Node, default = empty list
        Inline nodes parsed from the description
    metadata : dict, default = empty dict
        Link metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    url: str
    description: Optional[str] = None
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_link(self)."""
        return visitor.visit_link(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_link(self)."""
        return visitor.depart_link(self)


@dataclass
class Emphasis(Node):
    """Italic span (``/text/``)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_emphasis(self)."""
        return visitor.visit_emphasis(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_emphasis(self)."""
        return visitor.depart_emphasis(self)


@dataclass
class Strong(Node):
    """Bold span (``*text*``)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_strong(self)."""
        return visitor.visit_strong(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_strong(self)."""
        return visitor.depart_strong(self)


@dataclass
class Underline(Node):
    """Underlined span (``_text_``)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_underline(self)."""
        return visitor.visit_underline(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_underline(self)."""
        return visitor.depart_underline(self)


@dataclass
class Strikethrough(Node):
    """Struck-through span (``+text+``)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to visitor.visit_strikethrough(self)."""
        return visitor.visit_strikethrough(self)

    def depart(self, visitor: Any) -> Any:
        """Dispatch to visitor.depart_strikethrough(self)."""
        return visitor.depart_strikethrough(self)


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    This is a helper function for traversal code. It returns the ordered
    children of any node regardless of whether the node stores them as
    ``children``, ``content`` or ``items``.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list if node has no children)

    Examples
    --------
    >>> heading = Heading(level=1, content=[Text("Hello"), Strong(content=[Text("world")])])
    >>> len(get_node_children(heading))
    2

    """
    # Block nodes with 'children' attribute
    if isinstance(node, (Document, Headline, Section, Drawer, BlockQuote, ListItem, SpecialBlock)):
        return list(node.children)

    # Nodes with inline 'content'
    if isinstance(node, (Heading, Paragraph, Link, Emphasis, Strong, Underline, Strikethrough)):
        return list(node.content)

    if isinstance(node, List):
        return list(node.items)

    # Leaf nodes (no children)
    return []

