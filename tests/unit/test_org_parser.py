#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_org_parser.py
"""Unit tests for the Org-Mode parser.

Tests cover:
- Outline structure (headlines, sections, nesting)
- Headline metadata (TODO state, priority, tags, properties)
- Body blocks (paragraphs, keywords, drawers, blocks, lists, rules)
- Inline markup (links, code, emphasis)
- Input handling and errors

"""

from pathlib import Path

import pytest

from org2subtext.ast import (
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
    Paragraph,
    Section,
    SpecialBlock,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
    Underline,
)
from org2subtext.exceptions import FileNotFoundError as OrgFileNotFoundError
from org2subtext.exceptions import InvalidOptionsError, ParsingError
from org2subtext.options import OrgParserOptions, SubtextRendererOptions
from org2subtext.parsers.org import OrgParser


def _text(paragraph: Paragraph) -> str:
    return "".join(node.content for node in paragraph.content if isinstance(node, Text))


@pytest.mark.unit
class TestOutline:
    """Tests for headline structure."""

    def test_heading_only(self) -> None:
        doc = OrgParser().parse("* Heading\n")
        assert isinstance(doc, Document)
        assert len(doc.children) == 1
        headline = doc.children[0]
        assert isinstance(headline, Headline)
        heading = headline.children[0]
        assert isinstance(heading, Heading)
        assert heading.level == 1
        assert heading.content == [Text(content="Heading")]
        assert heading.source_location is not None
        assert heading.source_location.format == "org"

    def test_heading_with_body(self) -> None:
        doc = OrgParser().parse("* Heading\nBody text.\n")
        headline = doc.children[0]
        assert isinstance(headline.children[1], Section)
        paragraph = headline.children[1].children[0]
        assert _text(paragraph) == "Body text."

    def test_nested_headlines(self) -> None:
        doc = OrgParser().parse("* One\n** Two\n*** Three\n* Four\n")
        assert len(doc.children) == 2
        one = doc.children[0]
        two = one.children[1]
        assert isinstance(two, Headline)
        assert two.children[0].level == 2
        three = two.children[1]
        assert three.children[0].level == 3
        assert doc.children[1].children[0].content == [Text(content="Four")]

    def test_preamble_section(self) -> None:
        doc = OrgParser().parse("Intro paragraph.\n\n* Heading\n")
        preamble = doc.children[0]
        assert isinstance(preamble, Section)
        assert _text(preamble.children[0]) == "Intro paragraph."
        assert isinstance(doc.children[1], Headline)

    def test_empty_document(self) -> None:
        doc = OrgParser().parse("\n")
        assert doc.children == []


@pytest.mark.unit
class TestHeadlineMetadata:
    """Tests for TODO state, priority, tags and properties."""

    def test_todo_priority_tags(self) -> None:
        doc = OrgParser().parse("* TODO [#A] Write report :work:urgent:\n")
        heading = doc.children[0].children[0]
        assert heading.content == [Text(content="Write report")]
        assert heading.metadata["org_todo_state"] == "TODO"
        assert heading.metadata["org_priority"] == "A"
        assert heading.metadata["org_tags"] == ["urgent", "work"]
        assert doc.children[0].metadata == heading.metadata

    def test_custom_todo_keyword(self) -> None:
        parser = OrgParser(OrgParserOptions(todo_keywords=["TODO", "WAITING", "DONE"]))
        doc = parser.parse("* WAITING Reply to email\n")
        heading = doc.children[0].children[0]
        assert heading.metadata["org_todo_state"] == "WAITING"
        assert heading.content == [Text(content="Reply to email")]

    def test_tags_disabled(self) -> None:
        doc = OrgParser(OrgParserOptions(parse_tags=False)).parse("* Heading :tag:\n")
        assert "org_tags" not in doc.children[0].children[0].metadata

    def test_properties_drawer(self) -> None:
        org = "* Note\n:PROPERTIES:\n:ID: abc-123\n:END:\nText.\n"
        doc = OrgParser().parse(org)
        headline = doc.children[0]
        assert headline.children[0].metadata["org_properties"] == {"ID": "abc-123"}

        section = headline.children[1]
        drawer = section.children[0]
        assert isinstance(drawer, Drawer)
        assert drawer.name == "PROPERTIES"
        assert _text(drawer.children[0]) == ":ID: abc-123"
        assert _text(section.children[1]) == "Text."

    def test_properties_disabled(self) -> None:
        org = "* Note\n:PROPERTIES:\n:ID: abc-123\n:END:\nText.\n"
        doc = OrgParser(OrgParserOptions(parse_properties=False)).parse(org)
        headline = doc.children[0]
        assert "org_properties" not in headline.children[0].metadata
        assert not any(isinstance(node, Drawer) for node in headline.children[1].children)


@pytest.mark.unit
class TestBody:
    """Tests for the body line scanner."""

    def setup_method(self) -> None:
        self.parser = OrgParser()

    def test_paragraph_lines_are_joined(self) -> None:
        nodes = self.parser._process_body("Line one\n   Line two\n\nSecond paragraph")
        assert len(nodes) == 2
        assert _text(nodes[0]) == "Line one\nLine two"
        assert _text(nodes[1]) == "Second paragraph"

    def test_keyword(self) -> None:
        nodes = self.parser._process_body("#+title: My Note\n#+filetags: :a:b:")
        assert nodes == [Keyword(key="title", value="My Note"), Keyword(key="filetags", value=":a:b:")]

    def test_comment_lines_are_dropped(self) -> None:
        nodes = self.parser._process_body("# a comment\nText")
        assert len(nodes) == 1
        assert _text(nodes[0]) == "Text"

    def test_comment_block_is_dropped(self) -> None:
        nodes = self.parser._process_body("#+begin_comment\nhidden\n#+end_comment\nshown")
        assert len(nodes) == 1
        assert _text(nodes[0]) == "shown"

    def test_quote_block(self) -> None:
        nodes = self.parser._process_body("#+begin_quote\nA\nB\n\nC\n#+end_quote")
        assert len(nodes) == 1
        quote = nodes[0]
        assert isinstance(quote, BlockQuote)
        assert [_text(p) for p in quote.children] == ["A\nB", "C"]

    def test_src_block(self) -> None:
        nodes = self.parser._process_body("#+BEGIN_SRC python :results output\nprint(1)\n\nprint(2)\n#+END_SRC")
        block = nodes[0]
        assert isinstance(block, CodeBlock)
        assert block.content == "print(1)\n\nprint(2)"
        assert block.language == "python"
        assert block.metadata == {"org_block_type": "src", "org_header_args": ":results output"}

    def test_example_block(self) -> None:
        block = self.parser._process_body("#+begin_example\n*not bold*\n#+end_example")[0]
        assert isinstance(block, CodeBlock)
        assert block.language is None
        assert block.content == "*not bold*"
        assert block.metadata["org_block_type"] == "example"

    def test_special_block(self) -> None:
        block = self.parser._process_body("#+begin_center\nMiddle\n#+end_center")[0]
        assert isinstance(block, SpecialBlock)
        assert block.name == "center"
        assert _text(block.children[0]) == "Middle"

    def test_unterminated_block_is_text(self) -> None:
        nodes = self.parser._process_body("#+begin_quote\ntext")
        assert len(nodes) == 1
        assert _text(nodes[0]) == "#+begin_quote\ntext"

    def test_drawer(self) -> None:
        nodes = self.parser._process_body(':LOGBOOK:\n- State "DONE" from "TODO"\n:END:\nAfter')
        drawer = nodes[0]
        assert isinstance(drawer, Drawer)
        assert drawer.name == "LOGBOOK"
        assert _text(drawer.children[0]) == '- State "DONE" from "TODO"'
        assert _text(nodes[1]) == "After"

    def test_horizontal_rule(self) -> None:
        nodes = self.parser._process_body("Above\n-----\nBelow")
        assert isinstance(nodes[1], ThematicBreak)
        assert len(nodes) == 3

    def test_unordered_list(self) -> None:
        nodes = self.parser._process_body("- one\n- two\n  continued\n\n- three\n\nafter")
        lst = nodes[0]
        assert isinstance(lst, List)
        assert lst.ordered is False
        assert [_text(item.children[0]) for item in lst.items] == ["one", "two\ncontinued", "three"]
        assert _text(nodes[1]) == "after"

    def test_ordered_list(self) -> None:
        lst = self.parser._process_body("1. first\n2) second")[0]
        assert lst.ordered is True
        assert len(lst.items) == 2

    def test_nested_items_are_flattened(self) -> None:
        lst = self.parser._process_body("- parent\n  - child\n- sibling")[0]
        assert [_text(item.children[0]) for item in lst.items] == ["parent", "child", "sibling"]


@pytest.mark.unit
class TestInline:
    """Tests for inline markup."""

    def setup_method(self) -> None:
        self.parser = OrgParser()

    def test_plain_text(self) -> None:
        assert self.parser._parse_inline("just text") == [Text(content="just text")]

    def test_link_with_description(self) -> None:
        nodes = self.parser._parse_inline("see [[id:5678][other note]] now")
        assert nodes[0] == Text(content="see ")
        link = nodes[1]
        assert isinstance(link, Link)
        assert link.url == "id:5678"
        assert link.description == "other note"
        assert link.content == [Text(content="other note")]
        assert nodes[2] == Text(content=" now")

    def test_link_without_description(self) -> None:
        nodes = self.parser._parse_inline("[[https://example.com]]")
        assert nodes == [Link(url="https://example.com")]

    def test_bare_url(self) -> None:
        nodes = self.parser._parse_inline("visit https://example.com today")
        assert nodes[1] == Link(url="https://example.com")
        assert nodes[2] == Text(content=" today")

    def test_verbatim_and_code(self) -> None:
        nodes = self.parser._parse_inline("use =make= and ~ls -l~")
        assert nodes == [Text(content="use "), Code(content="make"), Text(content=" and "), Code(content="ls -l")]

    def test_emphasis_kinds(self) -> None:
        nodes = self.parser._parse_inline("*b* /i/ _u_ +s+")
        kinds = [type(node) for node in nodes if not isinstance(node, Text)]
        assert kinds == [Strong, Emphasis, Underline, Strikethrough]

    def test_nested_emphasis(self) -> None:
        nodes = self.parser._parse_inline("*bold /italic/*")
        strong = nodes[0]
        assert isinstance(strong, Strong)
        assert strong.content[0] == Text(content="bold ")
        assert isinstance(strong.content[1], Emphasis)

    def test_markers_inside_words_are_text(self) -> None:
        assert self.parser._parse_inline("a/b/c") == [Text(content="a/b/c")]

    def test_multiline_text_is_one_token(self) -> None:
        assert self.parser._parse_inline("one\ntwo") == [Text(content="one\ntwo")]


@pytest.mark.unit
class TestMetadata:
    """Tests for document metadata."""

    def test_file_keywords(self) -> None:
        org = "#+TITLE: My Note\n#+author: Someone\n#+filetags: :alpha:beta:\n\nText.\n"
        doc = OrgParser().parse(org)
        assert doc.metadata["title"] == "My Note"
        assert doc.metadata["author"] == "Someone"
        assert doc.metadata["filetags"] == ["alpha", "beta"]

    def test_metadata_disabled(self) -> None:
        doc = OrgParser(OrgParserOptions(extract_metadata=False)).parse("#+title: T\n\nText\n")
        assert doc.metadata == {}

    def test_keywords_stay_in_tree(self) -> None:
        doc = OrgParser().parse("#+title: My Note\n\nText\n")
        preamble = doc.children[0]
        assert preamble.children[0] == Keyword(key="title", value="My Note")


@pytest.mark.unit
class TestInput:
    """Tests for input handling."""

    def test_parse_bytes(self) -> None:
        doc = OrgParser().parse("* Héading\n".encode("utf-8"))
        assert doc.children[0].children[0].content == [Text(content="Héading")]

    def test_parse_bom(self) -> None:
        doc = OrgParser().parse(b"\xef\xbb\xbf* Heading\n")
        assert doc.children[0].children[0].content == [Text(content="Heading")]

    def test_parse_path(self, tmp_path: Path) -> None:
        path = tmp_path / "note.org"
        path.write_text("* From file\n", encoding="utf-8")
        doc = OrgParser().parse(path)
        assert doc.children[0].children[0].content == [Text(content="From file")]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(OrgFileNotFoundError):
            OrgParser().parse(tmp_path / "missing.org")

    def test_invalid_utf8(self) -> None:
        with pytest.raises(ParsingError):
            OrgParser().parse(b"* \xff\xfe broken\n")

    def test_wrong_options_type(self) -> None:
        with pytest.raises(InvalidOptionsError):
            OrgParser(SubtextRendererOptions())  # type: ignore[arg-type]
