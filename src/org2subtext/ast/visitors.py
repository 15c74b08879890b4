#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2subtext/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class and the depth-first traversal
driver used by renderers. The driver produces two events per node:

- an *enter* event, ``node.accept(walker)``, dispatched to ``visit_<kind>``
- a *leave* event, ``node.depart(walker)``, dispatched to ``depart_<kind>``

Enter handlers steer the walk by returning a ``WalkAction``. While walking,
the driver keeps a ``NodePath`` for the current node (parent, index,
siblings) and a ``ContextStack`` of the container nodes that are open
around it.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional

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
    SpecialBlock,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
    Underline,
    get_node_children,
)

#: Node kinds that are tracked on the context stack during a walk.
CONTEXT_KINDS: tuple[type[Node], ...] = (BlockQuote, List, ListItem, Drawer)


class WalkAction(Enum):
    """Traversal control returned by enter handlers.

    ``None`` returned from a handler is treated as ``CONTINUE``.
    """

    CONTINUE = "continue"
    SKIP_CHILDREN = "skip_children"
    SKIP_LEAVE = "skip_leave"
    SKIP_NODE = "skip_node"

    @property
    def visits_children(self) -> bool:
        return self in (WalkAction.CONTINUE, WalkAction.SKIP_LEAVE)

    @property
    def calls_leave(self) -> bool:
        return self in (WalkAction.CONTINUE, WalkAction.SKIP_CHILDREN)


@dataclass(frozen=True)
class NodePath:
    """Position of a node within the tree during a walk.

    Nodes carry no parent pointers; a NodePath links a node to the path of
    its parent, which is enough to answer every ancestor and sibling query.

    Parameters
    ----------
    node : Node
        The node at this position
    parent : NodePath or None, default = None
        Path of the parent node (None for the root)
    index : int, default = 0
        Position of ``node`` among its parent's children

    """

    node: Node
    parent: Optional[NodePath] = None
    index: int = 0

    def child(self, index: int, node: Node) -> NodePath:
        """Create the path of a child of this node."""
        return NodePath(node=node, parent=self, index=index)

    def siblings(self) -> list[Node]:
        """Return the children of the parent node, including this node."""
        if self.parent is None:
            return [self.node]
        return get_node_children(self.parent.node)

    def next_sibling(self) -> Node | None:
        if self.parent is None:
            return None
        siblings = self.siblings()
        if self.index + 1 < len(siblings):
            return siblings[self.index + 1]
        return None


class ContextStack:
    """Stack of open container nodes during a walk.

    Only nodes whose type is listed in ``kinds`` are tracked. The walker
    pushes a container after its enter event and pops it before its leave
    event, so during any node's own events the stack holds exactly that
    node's tracked ancestors.

    Parameters
    ----------
    kinds : tuple of type, default = CONTEXT_KINDS
        Node types to track

    """

    def __init__(self, kinds: tuple[type[Node], ...] = CONTEXT_KINDS):
        self.kinds = kinds
        self._stack: list[Node] = []

    def push(self, node: Node) -> bool:
        """Push ``node`` if it is a tracked kind.

        Returns
        -------
        bool
            True if the node was pushed

        """
        if isinstance(node, self.kinds):
            self._stack.append(node)
            return True
        return False

    def pop(self) -> Node:
        return self._stack.pop()

    def inside(self, *kinds: type[Node]) -> bool:
        """Return True if any open container is an instance of one of ``kinds``."""
        return any(isinstance(node, kinds) for node in self._stack)

    def clear(self) -> None:
        self._stack.clear()

    def __len__(self) -> int:
        return len(self._stack)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._stack)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses must implement a ``visit_*`` method for every node kind, so a
    visitor that forgets one cannot be instantiated. ``depart_*`` methods
    are optional and default to doing nothing.

    Examples
    --------
    Visitor that collects link targets:

        >>> class LinkCollector(TreeWalker):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.urls = []
        ...
        ...     def visit_link(self, node):
        ...         self.urls.append(node.url)
        ...         return WalkAction.SKIP_CHILDREN
        ...
        ...     # remaining visit_* methods return self.generic_visit(node)

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            A WalkAction or None when driven by a TreeWalker

        """
        pass

    @abstractmethod
    def visit_headline(self, node: Headline) -> Any:
        """Visit a Headline node."""
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
            A WalkAction or None when driven by a TreeWalker

        """
        pass

    @abstractmethod
    def visit_section(self, node: Section) -> Any:
        """Visit a Section node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node.

        Parameters
        ----------
        node : Paragraph
            The paragraph node to visit

        Returns
        -------
        Any
            A WalkAction or None when driven by a TreeWalker

        """
        pass

    @abstractmethod
    def visit_keyword(self, node: Keyword) -> Any:
        """Visit a Keyword node."""
        pass

    @abstractmethod
    def visit_drawer(self, node: Drawer) -> Any:
        """Visit a Drawer node."""
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
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_special_block(self, node: SpecialBlock) -> Any:
        """Visit a SpecialBlock node."""
        pass

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node.

        Parameters
        ----------
        node : Text
            The text node to visit

        Returns
        -------
        Any
            A WalkAction or None when driven by a TreeWalker

        """
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit an inline Code node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node.

        Parameters
        ----------
        node : Link
            The link node to visit

        Returns
        -------
        Any
            A WalkAction or None when driven by a TreeWalker

        """
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
    def visit_underline(self, node: Underline) -> Any:
        """Visit an Underline node."""
        pass

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""
        pass

    def generic_visit(self, node: Node) -> Any:
        """Fallback for node kinds a visitor treats as inert.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None, i.e. descend normally)

        """
        return None

    def generic_depart(self, node: Node) -> Any:
        return None

    def depart_document(self, node: Document) -> Any:
        return self.generic_depart(node)

    def depart_headline(self, node: Headline) -> Any:
        return self.generic_depart(node)

    def depart_heading(self, node: Heading) -> Any:
        return self.generic_depart(node)

    def depart_section(self, node: Section) -> Any:
        return self.generic_depart(node)

    def depart_paragraph(self, node: Paragraph) -> Any:
        return self.generic_depart(node)

    def depart_keyword(self, node: Keyword) -> Any:
        return self.generic_depart(node)

    def depart_drawer(self, node: Drawer) -> Any:
        return self.generic_depart(node)

    def depart_block_quote(self, node: BlockQuote) -> Any:
        return self.generic_depart(node)

    def depart_list(self, node: List) -> Any:
        return self.generic_depart(node)

    def depart_list_item(self, node: ListItem) -> Any:
        return self.generic_depart(node)

    def depart_code_block(self, node: CodeBlock) -> Any:
        return self.generic_depart(node)

    def depart_special_block(self, node: SpecialBlock) -> Any:
        return self.generic_depart(node)

    def depart_thematic_break(self, node: ThematicBreak) -> Any:
        return self.generic_depart(node)

    def depart_text(self, node: Text) -> Any:
        return self.generic_depart(node)

    def depart_code(self, node: Code) -> Any:
        return self.generic_depart(node)

    def depart_link(self, node: Link) -> Any:
        return self.generic_depart(node)

    def depart_emphasis(self, node: Emphasis) -> Any:
        return self.generic_depart(node)

    def depart_strong(self, node: Strong) -> Any:
        return self.generic_depart(node)

    def depart_underline(self, node: Underline) -> Any:
        return self.generic_depart(node)

    def depart_strikethrough(self, node: Strikethrough) -> Any:
        return self.generic_depart(node)


class TreeWalker(NodeVisitor):
    """Depth-first traversal driver with ancestor context.

    Subclasses implement the ``visit_*``/``depart_*`` handlers and call
    ``walk(root)``. During any handler, ``self.path`` is the NodePath of the
    node being handled and ``self.context`` holds its open containers.

    Parameters
    ----------
    context_kinds : tuple of type, default = CONTEXT_KINDS
        Node types tracked on the context stack

    """

    def __init__(self, context_kinds: tuple[type[Node], ...] = CONTEXT_KINDS):
        self.context = ContextStack(context_kinds)
        self.path: NodePath | None = None

    def walk(self, root: Node) -> None:
        """Traverse ``root`` and all its descendants.

        Parameters
        ----------
        root : Node
            Node to start from; it is treated as the tree root

        """
        self.context.clear()
        try:
            self._walk(NodePath(root))
        finally:
            self.path = None

    def _walk(self, path: NodePath) -> None:
        node = path.node
        self.path = path
        action = node.accept(self)
        if action is None:
            action = WalkAction.CONTINUE
        elif not isinstance(action, WalkAction):
            raise TypeError(f"{type(self).__name__}.visit_* for {type(node).__name__} returned {action!r}")

        if action is WalkAction.SKIP_NODE:
            return

        pushed = self.context.push(node)
        if action.visits_children:
            for index, child in enumerate(get_node_children(node)):
                self._walk(path.child(index, child))
        if pushed:
            self.context.pop()

        self.path = path
        if action.calls_leave:
            node.depart(self)

    def inside(self, *kinds: type[Node]) -> bool:
        """Return True if the current node is nested in a container of ``kinds``."""
        return self.context.inside(*kinds)
