#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2subtext/parsers/org.py
"""Org-Mode to AST converter.

This module provides conversion from Org-Mode documents to AST
representation. orgparse splits the outline into headlines and extracts
headline data (level, TODO state, tags, properties); the block and inline
structure of each body is parsed here.

"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import IO, Any, Union

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
)
from org2subtext.constants import DEPS_ORG, ORG_COMMENT_BLOCKS, ORG_VERBATIM_BLOCKS
from org2subtext.exceptions import ParsingError
from org2subtext.options.org import OrgParserOptions
from org2subtext.parsers.base import BaseParser
from org2subtext.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

_BLOCK_BEGIN_RE = re.compile(r"^\s*#\+begin_(\w+)(?:[ \t]+(.*))?$", re.IGNORECASE)
_KEYWORD_RE = re.compile(r"^\s*#\+(\w[\w-]*):[ \t]*(.*)$")
_DRAWER_BEGIN_RE = re.compile(r"^\s*:([A-Za-z][\w-]*):\s*$")
_DRAWER_END_RE = re.compile(r"^\s*:END:\s*$", re.IGNORECASE)
_COMMENT_RE = re.compile(r"^\s*#(?:\s|$)")
_HRULE_RE = re.compile(r"^\s*-{5,}\s*$")
_LIST_ITEM_RE = re.compile(r"^(\s*)([-+]|\s\*|\d+[.)])\s+(.*)$")
_ORDERED_BULLET_RE = re.compile(r"^\d+[.)]$")

# Emphasis markers must sit at a word boundary and hug their content
_PRE = r"(?<![^\s\-({'\"])"
_POST = r"(?=[\s\-.,:;!?'\")}\]]|$)"

_INLINE_RE = re.compile(
    r"\[\[([^\]]+?)(?:\]\[([^\]]+))?\]\]|"  # [[url]] or [[url][desc]]
    + _PRE + r"=([^\s=](?:[^=]*?[^\s=])?)=" + _POST + "|"  # =verbatim=
    + _PRE + r"~([^\s~](?:[^~]*?[^\s~])?)~" + _POST + "|"  # ~code~
    + _PRE + r"\*([^\s*](?:[^*]*?[^\s*])?)\*" + _POST + "|"  # *bold*
    + _PRE + r"/([^\s/](?:[^/]*?[^\s/])?)/" + _POST + "|"  # /italic/
    + _PRE + r"_([^\s_](?:[^_]*?[^\s_])?)_" + _POST + "|"  # _underline_
    + _PRE + r"\+([^\s+](?:[^+]*?[^\s+])?)\+" + _POST + "|"  # +strike+
    r"(?:https?|ftp)://[^\s<>\"{}|\\^`\[\]]+"  # Plain URLs
)


class OrgParser(BaseParser):
    r"""Convert Org-Mode to AST representation.

    The resulting tree has this shape::

        Document
          Section            (preamble: file keywords, property drawer, text)
          Headline
            Heading          (inline title content)
            Section          (body: paragraphs, lists, blocks, drawers)
            Headline ...     (sub-entries)

    Parameters
    ----------
    options : OrgParserOptions or None, default = None
        Parser configuration options

    Notes
    -----
    - Lists are kept at a single depth: nested items become siblings.
    - Tables, footnotes and math are kept as plain paragraph text.
    - ``#+begin_comment`` blocks and ``#`` comment lines are dropped.

    Examples
    --------
        >>> parser = OrgParser()
        >>> doc = parser.parse("#+title: Note\n\n* Heading\nSome text.")

    """

    def __init__(self, options: OrgParserOptions | None = None):
        """Initialize the Org parser with options."""
        BaseParser._validate_options_type(options, OrgParserOptions, "org")
        options = options or OrgParserOptions()
        super().__init__(options)
        self.options: OrgParserOptions = options

    @requires_dependencies("org", DEPS_ORG)
    def parse(self, input_data: Union[str, Path, IO[bytes], bytes]) -> Document:
        """Parse Org-Mode input into AST Document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], or bytes
            Org-Mode input to parse

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        DependencyError
            If orgparse is not installed
        ParsingError
            If parsing fails

        """
        org_content = self._load_text_content(input_data)

        import orgparse

        try:
            root = orgparse.loads(org_content)
        except Exception as e:
            raise ParsingError(f"Failed to parse Org-Mode: {e}", parsing_stage="outline", original_error=e) from e

        metadata = self.extract_metadata(root) if self.options.extract_metadata else {}

        children: list[Node] = []

        # Root body: everything before the first headline
        preamble: list[Node] = []
        drawer = self._properties_drawer(root)
        if drawer is not None:
            preamble.append(drawer)
        preamble.extend(self._process_body(self._get_body(root)))
        if preamble:
            children.append(Section(children=preamble))

        for node in root.children:
            children.append(self._process_node(node))

        logger.debug("Parsed org document: %d top-level headline(s)", len(root.children))
        return Document(children=children, metadata=metadata)

    @staticmethod
    def _get_body(node: Any) -> str:
        # format='raw' keeps link syntax intact
        if hasattr(node, "get_body"):
            return node.get_body(format="raw") or ""
        return node.body or ""

    def _process_node(self, node: Any) -> Headline:
        """Process an orgparse node and its sub-tree into a Headline.

        Parameters
        ----------
        node : orgparse.OrgNode
            Orgparse node to process

        Returns
        -------
        Headline
            Headline holding the heading, its body section, and sub-headlines

        """
        heading = self._process_headline(node)
        children: list[Node] = [heading]

        body: list[Node] = []
        drawer = self._properties_drawer(node)
        if drawer is not None:
            body.append(drawer)
        body.extend(self._process_body(self._get_body(node)))
        if body:
            children.append(Section(children=body))

        for child in node.children:
            children.append(self._process_node(child))

        return Headline(children=children, metadata=dict(heading.metadata))

    def _process_headline(self, node: Any) -> Heading:
        """Process an orgparse headline node.

        Parameters
        ----------
        node : orgparse.OrgNode
            Orgparse node representing a headline

        Returns
        -------
        Heading
            Heading AST node with metadata for TODO state, priority, and tags

        """
        heading_text = node.heading or ""

        # orgparse only knows its own TODO keywords; catch the configured ones
        todo_state = None
        if node.todo and node.todo in self.options.todo_keywords:
            todo_state = node.todo
        elif not node.todo:
            heading_parts = heading_text.split(None, 1)
            if heading_parts and heading_parts[0] in self.options.todo_keywords:
                todo_state = heading_parts[0]
                heading_text = heading_text[len(todo_state) :].lstrip()

        heading_metadata: dict[str, Any] = {}
        if todo_state:
            heading_metadata["org_todo_state"] = todo_state
        if getattr(node, "priority", None):
            heading_metadata["org_priority"] = node.priority
        if self.options.parse_tags and getattr(node, "tags", None):
            heading_metadata["org_tags"] = sorted(node.tags)
        if self.options.parse_properties and getattr(node, "properties", None):
            heading_metadata["org_properties"] = {key: str(value) for key, value in node.properties.items()}

        location = SourceLocation(format="org", line=getattr(node, "linenumber", None))
        return Heading(
            level=node.level,
            content=self._parse_inline(heading_text),
            metadata=heading_metadata,
            source_location=location,
        )

    def _properties_drawer(self, node: Any) -> Drawer | None:
        """Rebuild the property drawer orgparse consumed from the body."""
        if not self.options.parse_properties:
            return None
        properties = getattr(node, "properties", None)
        if not properties:
            return None
        lines: list[Node] = [Paragraph(content=[Text(content=f":{key}: {value}")]) for key, value in properties.items()]
        return Drawer(name="PROPERTIES", children=lines)

    def _process_body(self, body_text: str) -> list[Node]:  # noqa: C901
        """Process body text into AST nodes.

        The body is scanned line by line so that blocks and drawers may span
        blank lines.

        Parameters
        ----------
        body_text : str
            Body text content

        Returns
        -------
        list[Node]
            List of AST nodes (paragraphs, lists, blocks, drawers, keywords)

        """
        result: list[Node] = []
        lines = body_text.split("\n")
        paragraph_lines: list[str] = []

        def flush_paragraph() -> None:
            if paragraph_lines:
                result.append(self._parse_paragraph("\n".join(paragraph_lines)))
                paragraph_lines.clear()

        i = 0
        while i < len(lines):
            line = lines[i]
            stripped = line.strip()

            if not stripped:
                flush_paragraph()
                i += 1
                continue

            block_match = _BLOCK_BEGIN_RE.match(line)
            if block_match:
                end = self._find_block_end(lines, i + 1, block_match.group(1))
                if end is not None:
                    flush_paragraph()
                    block = self._parse_block(block_match.group(1).lower(), block_match.group(2), lines[i + 1 : end])
                    if block is not None:
                        result.append(block)
                    i = end + 1
                    continue

            drawer_match = _DRAWER_BEGIN_RE.match(line)
            if drawer_match and not _DRAWER_END_RE.match(line):
                end = self._find_drawer_end(lines, i + 1)
                if end is not None:
                    flush_paragraph()
                    result.append(self._parse_drawer(drawer_match.group(1), lines[i + 1 : end]))
                    i = end + 1
                    continue

            keyword_match = _KEYWORD_RE.match(line)
            if keyword_match:
                flush_paragraph()
                result.append(Keyword(key=keyword_match.group(1), value=keyword_match.group(2)))
                i += 1
                continue

            if _COMMENT_RE.match(line):
                flush_paragraph()
                i += 1
                continue

            if _HRULE_RE.match(line):
                flush_paragraph()
                result.append(ThematicBreak())
                i += 1
                continue

            if _LIST_ITEM_RE.match(line):
                flush_paragraph()
                list_node, i = self._parse_list(lines, i)
                result.append(list_node)
                continue

            paragraph_lines.append(stripped)
            i += 1

        flush_paragraph()
        return result

    @staticmethod
    def _find_block_end(lines: list[str], start: int, name: str) -> int | None:
        end_re = re.compile(r"^\s*#\+end_" + re.escape(name) + r"\s*$", re.IGNORECASE)
        for index in range(start, len(lines)):
            if end_re.match(lines[index]):
                return index
        return None

    @staticmethod
    def _find_drawer_end(lines: list[str], start: int) -> int | None:
        for index in range(start, len(lines)):
            if _DRAWER_END_RE.match(lines[index]):
                return index
        return None

    def _parse_paragraph(self, text: str) -> Paragraph:
        """Parse a paragraph of text.

        Parameters
        ----------
        text : str
            Paragraph text

        Returns
        -------
        Paragraph
            Paragraph AST node

        """
        return Paragraph(content=self._parse_inline(text))

    def _parse_block(self, name: str, parameters: str | None, content_lines: list[str]) -> Node | None:
        """Parse a ``#+begin_NAME`` ... ``#+end_NAME`` block.

        Parameters
        ----------
        name : str
            Lower-cased block name
        parameters : str or None
            Text after the block name on the begin line
        content_lines : list[str]
            Lines between the begin and end lines

        Returns
        -------
        Node or None
            BlockQuote, CodeBlock or SpecialBlock; None for comment blocks

        """
        content = "\n".join(content_lines)
        parameters = (parameters or "").strip()

        if name in ORG_COMMENT_BLOCKS:
            return None

        if name == "quote":
            return BlockQuote(children=self._process_body(content))

        if name in ORG_VERBATIM_BLOCKS:
            language = None
            header_args = None
            if parameters:
                # Format: #+BEGIN_SRC language :arg1 value1 :arg2 value2
                parts = parameters.split(None, 1)
                language = parts[0]
                if len(parts) > 1 and parts[1].strip().startswith(":"):
                    header_args = parts[1].strip()
            metadata: dict[str, Any] = {"org_block_type": name}
            if header_args:
                metadata["org_header_args"] = header_args
            return CodeBlock(content=content, language=language if name == "src" else None, metadata=metadata)

        return SpecialBlock(name=name, children=self._process_body(content))

    def _parse_drawer(self, name: str, content_lines: list[str]) -> Drawer:
        children: list[Node] = [
            Paragraph(content=[Text(content=line.strip())]) for line in content_lines if line.strip()
        ]
        return Drawer(name=name, children=children)

    def _parse_list(self, lines: list[str], start: int) -> tuple[List, int]:
        """Parse a plain list starting at ``lines[start]``.

        Nested items are flattened into the same list, and indented
        continuation lines are joined to the item above them. A blank line
        ends the list unless the next line is another item.

        Parameters
        ----------
        lines : list[str]
            All body lines
        start : int
            Index of the first item line

        Returns
        -------
        tuple[List, int]
            List AST node and the index of the first line after the list

        """
        first = _LIST_ITEM_RE.match(lines[start])
        assert first is not None
        ordered = bool(_ORDERED_BULLET_RE.match(first.group(2).strip()))

        items: list[ListItem] = []
        item_lines: list[str] = []

        def flush_item() -> None:
            if item_lines:
                items.append(ListItem(children=[self._parse_paragraph("\n".join(item_lines))]))
                item_lines.clear()

        i = start
        while i < len(lines):
            line = lines[i]
            if not line.strip():
                if i + 1 < len(lines) and _LIST_ITEM_RE.match(lines[i + 1]):
                    i += 1
                    continue
                break

            item_match = _LIST_ITEM_RE.match(line)
            if item_match:
                flush_item()
                item_lines.append(item_match.group(3).strip())
            elif line[:1].isspace() and item_lines:
                item_lines.append(line.strip())
            else:
                break
            i += 1

        flush_item()
        return List(ordered=ordered, items=items), i

    def _parse_inline(self, text: str) -> list[Node]:
        r"""Parse inline formatting in text.

        Handles Org-Mode inline formatting:
        - [[url][description]] or [[url]] -> Link
        - =verbatim= or ~code~ -> Code
        - *bold* -> Strong
        - /italic/ -> Emphasis
        - _underline_ -> Underline
        - +strikethrough+ -> Strikethrough
        - bare http(s)/ftp URLs -> Link

        Parameters
        ----------
        text : str
            Text with inline formatting

        Returns
        -------
        list[Node]
            List of inline AST nodes

        """
        result: list[Node] = []
        pos = 0

        for match in _INLINE_RE.finditer(text):
            if match.start() > pos:
                result.append(Text(content=text[pos : match.start()]))

            groups = match.groups()
            if groups[0]:  # [[link]] with optional description
                description = groups[1]
                content = self._parse_inline(description) if description else []
                result.append(Link(url=groups[0], description=description, content=content))
            elif groups[2]:  # =verbatim=
                result.append(Code(content=groups[2]))
            elif groups[3]:  # ~code~
                result.append(Code(content=groups[3]))
            elif groups[4]:  # *bold*
                result.append(Strong(content=self._parse_inline(groups[4])))
            elif groups[5]:  # /italic/
                result.append(Emphasis(content=self._parse_inline(groups[5])))
            elif groups[6]:  # _underline_
                result.append(Underline(content=self._parse_inline(groups[6])))
            elif groups[7]:  # +strikethrough+
                result.append(Strikethrough(content=self._parse_inline(groups[7])))
            else:  # Plain URL
                result.append(Link(url=match.group(0)))

            pos = match.end()

        if pos < len(text):
            result.append(Text(content=text[pos:]))

        return result

    def extract_metadata(self, document: Any) -> dict[str, Any]:
        """Extract metadata from orgparse document.

        Parameters
        ----------
        document : orgparse.node.OrgRootNode
            Parsed orgparse document

        Returns
        -------
        dict
            Title, author, date and filetags from file keywords, plus the
            file-level ``ID`` property of org-roam notes

        """
        metadata: dict[str, Any] = {}

        # orgparse keys file keywords by their spelling, so "#+title" and
        # "#+TITLE" land apart; read the preamble lines directly instead
        filetags: list[str] = []
        for line in self._get_body(document).split("\n"):
            match = _KEYWORD_RE.match(line)
            if not match:
                continue
            key = match.group(1).lower()
            value = match.group(2).strip()
            if key in ("title", "author", "date") and key not in metadata:
                metadata[key] = value
            elif key == "filetags":
                filetags.extend(tag for tag in value.split(":") if tag.strip())
        if filetags:
            metadata["filetags"] = filetags

        properties = getattr(document, "properties", None) or {}
        for key, value in properties.items():
            if key.upper() == "ID":
                metadata["id"] = str(value)
            elif key.upper() == "TITLE" and "title" not in metadata:
                metadata["title"] = str(value)

        return metadata
