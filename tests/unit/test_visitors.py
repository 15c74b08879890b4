#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_visitors.py
"""Unit tests for AST nodes, paths, context tracking and the tree walker."""

import pytest

from org2subtext.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    ContextStack,
    Document,
    Drawer,
    Emphasis,
    Heading,
    Headline,
    Keyword,
    Link,
    List,
    ListItem,
    NodePath,
    NodeVisitor,
    Paragraph,
    Section,
    SpecialBlock,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
    TreeWalker,
    Underline,
    WalkAction,
    get_node_children,
)


class RecordingWalker(TreeWalker):
    """Walker that records enter/leave events and open containers."""

    def __init__(self, actions=None):
        super().__init__()
        self.events = []
        self.actions = actions or {}

    def _enter(self, node):
        name = type(node).__name__
        self.events.append(("enter", name, tuple(type(c).__name__ for c in self.context)))
        return self.actions.get(name)

    def generic_depart(self, node):
        self.events.append(("leave", type(node).__name__, tuple(type(c).__name__ for c in self.context)))

    def visit_document(self, node):
        return self._enter(node)

    def visit_headline(self, node):
        return self._enter(node)

    def visit_heading(self, node):
        return self._enter(node)

    def visit_section(self, node):
        return self._enter(node)

    def visit_paragraph(self, node):
        return self._enter(node)

    def visit_keyword(self, node):
        return self._enter(node)

    def visit_drawer(self, node):
        return self._enter(node)

    def visit_block_quote(self, node):
        return self._enter(node)

    def visit_list(self, node):
        return self._enter(node)

    def visit_list_item(self, node):
        return self._enter(node)

    def visit_code_block(self, node):
        return self._enter(node)

    def visit_special_block(self, node):
        return self._enter(node)

    def visit_thematic_break(self, node):
        return self._enter(node)

    def visit_text(self, node):
        return self._enter(node)

    def visit_code(self, node):
        return self._enter(node)

    def visit_link(self, node):
        return self._enter(node)

    def visit_emphasis(self, node):
        return self._enter(node)

    def visit_strong(self, node):
        return self._enter(node)

    def visit_underline(self, node):
        return self._enter(node)

    def visit_strikethrough(self, node):
        return self._enter(node)


def _names(events, kind):
    return [name for event, name, _ in events if event == kind]


@pytest.mark.unit
class TestNodes:
    """Tests for node construction and child access."""

    def test_heading_level_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            Heading(level=0)

    def test_node_is_abstract(self) -> None:
        from org2subtext.ast import Node

        with pytest.raises(TypeError):
            Node()  # type: ignore[abstract]

    def test_get_node_children(self) -> None:
        items = [ListItem(children=[Paragraph(content=[Text(content="x")])])]
        assert get_node_children(List(ordered=False, items=items)) == items
        assert get_node_children(Heading(level=1, content=[Text(content="t")]))[0].content == "t"
        assert get_node_children(Text(content="leaf")) == []
        assert get_node_children(CodeBlock(content="x")) == []
        assert get_node_children(Keyword(key="title", value="T")) == []

    def test_link_children_are_description_tokens(self) -> None:
        link = Link(url="id:1", content=[Text(content="desc")])
        assert len(get_node_children(link)) == 1

    def test_accept_dispatches_by_kind(self) -> None:
        walker = RecordingWalker()
        for node in [Underline(), Strikethrough(), Emphasis(), ThematicBreak(), SpecialBlock(name="center")]:
            node.accept(walker)
        assert _names(walker.events, "enter") == [
            "Underline",
            "Strikethrough",
            "Emphasis",
            "ThematicBreak",
            "SpecialBlock",
        ]

    def test_depart_dispatches_by_kind(self) -> None:
        walker = RecordingWalker()
        Code(content="x").depart(walker)
        assert walker.events == [("leave", "Code", ())]


@pytest.mark.unit
class TestNodeVisitor:
    """Tests for the visitor base class."""

    def test_incomplete_visitor_cannot_be_instantiated(self) -> None:
        class Incomplete(NodeVisitor):
            def visit_document(self, node):
                return None

        with pytest.raises(TypeError):
            Incomplete()

    def test_complete_visitor_instantiates(self) -> None:
        assert isinstance(RecordingWalker(), NodeVisitor)


@pytest.mark.unit
class TestNodePath:
    """Tests for NodePath parent and sibling queries."""

    def setup_method(self) -> None:
        self.first = Paragraph(content=[Text(content="a")])
        self.second = Paragraph(content=[Text(content="b")])
        self.quote = BlockQuote(children=[self.first, self.second])
        self.doc = Document(children=[self.quote])

        root = NodePath(self.doc)
        self.quote_path = root.child(0, self.quote)
        self.first_path = self.quote_path.child(0, self.first)
        self.second_path = self.quote_path.child(1, self.second)

    def test_root(self) -> None:
        root = NodePath(self.doc)
        assert root.parent is None
        assert root.next_sibling() is None
        assert root.siblings() == [self.doc]

    def test_siblings(self) -> None:
        assert self.first_path.next_sibling() is self.second
        assert self.second_path.next_sibling() is None

    def test_parent_chain(self) -> None:
        assert self.first_path.parent.node is self.quote
        assert self.first_path.parent.parent.node is self.doc
        assert self.first_path.parent.parent.parent is None
        assert self.second_path.index == 1


@pytest.mark.unit
class TestContextStack:
    """Tests for the container context stack."""

    def test_only_tracked_kinds_are_pushed(self) -> None:
        stack = ContextStack()
        assert stack.push(BlockQuote()) is True
        assert stack.push(Paragraph()) is False
        assert len(stack) == 1

    def test_inside(self) -> None:
        stack = ContextStack()
        outer = BlockQuote()
        item = ListItem()
        stack.push(outer)
        stack.push(List(ordered=False))
        stack.push(item)

        assert stack.inside(ListItem)
        assert stack.inside(Drawer, BlockQuote)
        assert not stack.inside(Drawer)

    def test_pop_and_clear(self) -> None:
        stack = ContextStack()
        quote = BlockQuote()
        stack.push(quote)
        stack.push(Drawer(name="NOTES"))
        stack.pop()
        assert list(stack) == [quote]
        stack.clear()
        assert len(stack) == 0

    def test_custom_kinds(self) -> None:
        stack = ContextStack(kinds=(Paragraph,))
        assert stack.push(Paragraph())
        assert not stack.push(BlockQuote())


@pytest.mark.unit
class TestTreeWalker:
    """Tests for traversal order, context tracking and walk actions."""

    def _tree(self) -> Document:
        return Document(
            children=[
                BlockQuote(children=[Paragraph(content=[Text(content="q")])]),
                List(ordered=False, items=[ListItem(children=[Paragraph(content=[Text(content="i")])])]),
            ]
        )

    def test_depth_first_order(self) -> None:
        walker = RecordingWalker()
        walker.walk(self._tree())
        order = [(event, name) for event, name, _ in walker.events]
        assert order == [
            ("enter", "Document"),
            ("enter", "BlockQuote"),
            ("enter", "Paragraph"),
            ("enter", "Text"),
            ("leave", "Text"),
            ("leave", "Paragraph"),
            ("leave", "BlockQuote"),
            ("enter", "List"),
            ("enter", "ListItem"),
            ("enter", "Paragraph"),
            ("enter", "Text"),
            ("leave", "Text"),
            ("leave", "Paragraph"),
            ("leave", "ListItem"),
            ("leave", "List"),
            ("leave", "Document"),
        ]

    def test_container_is_not_its_own_context(self) -> None:
        walker = RecordingWalker()
        walker.walk(self._tree())
        quote_events = [ctx for _, name, ctx in walker.events if name == "BlockQuote"]
        assert quote_events == [(), ()]

    def test_context_holds_open_containers(self) -> None:
        walker = RecordingWalker()
        walker.walk(self._tree())
        text_contexts = [ctx for event, name, ctx in walker.events if name == "Text" and event == "enter"]
        assert text_contexts == [("BlockQuote",), ("List", "ListItem")]

    def test_skip_children(self) -> None:
        walker = RecordingWalker(actions={"BlockQuote": WalkAction.SKIP_CHILDREN})
        walker.walk(self._tree())
        assert "Text" not in _names(walker.events, "enter")[:3]
        assert _names(walker.events, "leave").count("BlockQuote") == 1

    def test_skip_leave(self) -> None:
        walker = RecordingWalker(actions={"Paragraph": WalkAction.SKIP_LEAVE})
        walker.walk(self._tree())
        assert "Paragraph" not in _names(walker.events, "leave")
        assert _names(walker.events, "enter").count("Text") == 2

    def test_skip_node(self) -> None:
        walker = RecordingWalker(actions={"List": WalkAction.SKIP_NODE})
        walker.walk(self._tree())
        assert "ListItem" not in _names(walker.events, "enter")
        assert "List" not in _names(walker.events, "leave")

    def test_path_during_leave(self) -> None:
        class PathWalker(RecordingWalker):
            def generic_depart(self, node):
                self.events.append(("leave", self.path.node is node, ()))

        walker = PathWalker()
        walker.walk(self._tree())
        assert all(flag is True for event, flag, _ in walker.events if event == "leave")
        assert walker.path is None

    def test_invalid_action_raises(self) -> None:
        walker = RecordingWalker(actions={"Document": "skip"})
        with pytest.raises(TypeError):
            walker.walk(Document())

    def test_walk_is_repeatable(self) -> None:
        tree = self._tree()
        walker = RecordingWalker()
        walker.walk(tree)
        first = list(walker.events)
        walker.events.clear()
        walker.walk(tree)
        assert walker.events == first
        assert len(walker.context) == 0

    def test_headline_structure(self) -> None:
        doc = Document(
            children=[
                Headline(
                    children=[
                        Heading(level=1, content=[Strong(content=[Text(content="H")])]),
                        Section(children=[Paragraph(content=[Link(url="id:1")])]),
                    ]
                )
            ]
        )
        walker = RecordingWalker()
        walker.walk(doc)
        assert _names(walker.events, "enter") == [
            "Document",
            "Headline",
            "Heading",
            "Strong",
            "Text",
            "Section",
            "Paragraph",
            "Link",
        ]
