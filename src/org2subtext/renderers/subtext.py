#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2subtext/renderers/subtext.py
"""Subtext rendering from AST.

This module implements the renderer that turns an org document tree into
subtext, a line-oriented plain-text markup::

    # Heading
    Plain paragraph text with a [[Note Title]] and an <https://example.com>
    - list item
    > quoted line

The renderer walks the tree depth first. Each node produces an enter and a
leave event, and what a handler writes depends on the containers that are
open around the node: text inside a quote is re-prefixed, a paragraph that
forms a list item body defers its line end to the item, and anything
inside a drawer is dropped.

Internal ``id:`` links are resolved to note titles through a
``LinkResolver``. A failed lookup is logged and rendered as ``[[]]``.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Union

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
)
from org2subtext.constants import (
    ID_PROPERTY_MARKER,
    SUBTEXT_CODE_DELIMITER,
    SUBTEXT_HEADING_MARKER,
    SUBTEXT_LIST_MARKER,
    SUBTEXT_QUOTE_BLANK_LINE,
    SUBTEXT_QUOTE_PREFIX,
    TITLE_KEYWORD,
    UNRESOLVED_LINK_TITLE,
)
from org2subtext.exceptions import LinkResolutionError, RenderingError
from org2subtext.links.base import LinkResolver, MappingLinkResolver, wikify
from org2subtext.options.subtext import SubtextRendererOptions
from org2subtext.renderers.base import BaseRenderer
from org2subtext.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


class SubtextRenderer(TreeWalker, BaseRenderer):
    """Render AST nodes to subtext.

    Parameters
    ----------
    options : SubtextRendererOptions or None, default = None
        Subtext rendering options
    link_resolver : LinkResolver or None, default = None
        Resolver for internal links. Without one, every internal link is
        unresolved.

    Attributes
    ----------
    unresolved_links : list[str]
        Identifiers that could not be resolved during the last render

    Examples
    --------
        >>> from org2subtext.ast import Document, Heading, Text
        >>> doc = Document(children=[Heading(level=2, content=[Text(content="Notes")])])
        >>> SubtextRenderer().render_to_string(doc)
        '## Notes\\n'

    """

    def __init__(
        self,
        options: SubtextRendererOptions | None = None,
        link_resolver: LinkResolver | None = None,
    ):
        """Initialize the subtext renderer with options and a link resolver."""
        BaseRenderer._validate_options_type(options, SubtextRendererOptions, "subtext")
        options = options or SubtextRendererOptions()
        BaseRenderer.__init__(self, options)
        TreeWalker.__init__(self)
        self.options: SubtextRendererOptions = options
        self.link_resolver: LinkResolver = link_resolver if link_resolver is not None else MappingLinkResolver()
        self._output: list[str] = []
        self._quote_prefix_pending = False
        self.unresolved_links: list[str] = []

    def render_to_string(self, doc: Document) -> str:
        """Render a document to a subtext string.

        Parameters
        ----------
        doc : Document
            Document to render

        Returns
        -------
        str
            Subtext output

        Raises
        ------
        RenderingError
            If ``fail_on_resource_errors`` is set and a link cannot be resolved

        """
        self._output = []
        self._quote_prefix_pending = False
        self.unresolved_links = []
        with debug_timer(logger, "Rendering (subtext)"):
            self.walk(doc)
        return "".join(self._output)

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST to a subtext file or stream.

        Parameters
        ----------
        doc : Document
            AST Document to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        """
        self.write_text_output(self.render_to_string(doc), output)

    def _emit(self, text: str) -> None:
        if text:
            self._output.append(text)

    def _in_drawer(self) -> bool:
        return self.inside(Drawer)

    def _at_line_start(self) -> bool:
        return not self._output or self._output[-1].endswith("\n")

    def _open_quoted_line(self) -> None:
        """Start a line of block content inside a quote.

        The quote writes the prefix of its first content line itself; every
        later line opened by a paragraph, list item or block writes its own.
        """
        if not self.inside(BlockQuote):
            return
        if self._quote_prefix_pending:
            self._quote_prefix_pending = False
        else:
            self._emit(SUBTEXT_QUOTE_PREFIX)

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        return None

    def visit_headline(self, node: Headline) -> None:
        return None

    def visit_heading(self, node: Heading) -> None:
        self._emit(SUBTEXT_HEADING_MARKER * node.level + " ")

    def depart_heading(self, node: Heading) -> None:
        self._emit("\n")

    def visit_section(self, node: Section) -> None:
        return None

    def depart_section(self, node: Section) -> None:
        self._emit("\n")

    def visit_paragraph(self, node: Paragraph) -> WalkAction | None:
        """Open a paragraph.

        A list item writes its own line end, so the body paragraph skips
        its leave. In a quote, the first content line is prefixed by the
        quote itself and later ones prefix themselves.
        """
        if self.inside(ListItem):
            return WalkAction.SKIP_LEAVE
        self._open_quoted_line()
        return None

    def depart_paragraph(self, node: Paragraph) -> None:
        """Close a paragraph.

        Drawer lines end silently. Inside a quote, paragraphs are separated
        by a quoted blank line and the last one is ended by the quote.
        """
        if self._in_drawer():
            return
        if self.inside(BlockQuote):
            if self.path is not None and self.path.next_sibling() is not None:
                self._emit("\n" + SUBTEXT_QUOTE_BLANK_LINE + "\n")
            return
        self._emit("\n")

    def visit_keyword(self, node: Keyword) -> WalkAction:
        if node.key.lower() == TITLE_KEYWORD:
            self._emit(f"{SUBTEXT_HEADING_MARKER} {node.value.strip()}\n")
        return WalkAction.SKIP_CHILDREN

    def visit_drawer(self, node: Drawer) -> None:
        return None

    def visit_block_quote(self, node: BlockQuote) -> None:
        self._open_quoted_line()
        self._emit(SUBTEXT_QUOTE_PREFIX)
        self._quote_prefix_pending = True

    def depart_block_quote(self, node: BlockQuote) -> None:
        # Lists and blocks end their own lines; a trailing paragraph does not
        self._quote_prefix_pending = False
        if not self._at_line_start():
            self._emit("\n")

    def visit_list(self, node: List) -> None:
        return None

    def visit_list_item(self, node: ListItem) -> None:
        self._open_quoted_line()
        self._emit(SUBTEXT_LIST_MARKER)

    def depart_list_item(self, node: ListItem) -> None:
        self._emit("\n")

    def visit_code_block(self, node: CodeBlock) -> WalkAction:
        self._open_quoted_line()
        self._emit(self.options.source_block_placeholder + "\n")
        return WalkAction.SKIP_CHILDREN

    def visit_special_block(self, node: SpecialBlock) -> None:
        return self.generic_visit(node)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        return self.generic_visit(node)

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        if self._in_drawer():
            return
        text = node.content
        if self.options.strip_id_text and ID_PROPERTY_MARKER in text.lower():
            return
        if self.inside(BlockQuote):
            text = text.replace("\n", "\n" + SUBTEXT_QUOTE_PREFIX)
        self._emit(text)

    def visit_code(self, node: Code) -> None:
        if self._in_drawer():
            return
        self._emit(f"{SUBTEXT_CODE_DELIMITER}{node.content}{SUBTEXT_CODE_DELIMITER}")

    def visit_link(self, node: Link) -> WalkAction:
        """Write a link and skip its description tokens.

        Internal links become ``[[Title]]``; anything else is written as
        ``description <url>`` or ``<url>``.
        """
        if self._in_drawer():
            return WalkAction.SKIP_CHILDREN

        prefix = self.options.internal_link_prefix
        if node.url.startswith(prefix):
            title = self._resolve_title(node.url[len(prefix) :])
            self._emit(f"[[{title}]]")
        elif node.description:
            self._emit(f"{node.description} <{node.url}>")
        else:
            self._emit(f"<{node.url}>")
        return WalkAction.SKIP_CHILDREN

    def _resolve_title(self, identifier: str) -> str:
        """Look up the title for an internal link.

        Parameters
        ----------
        identifier : str
            Identifier with the internal prefix removed

        Returns
        -------
        str
            Resolved title, or an empty string if the lookup failed

        Raises
        ------
        RenderingError
            If the lookup failed and ``fail_on_resource_errors`` is set

        """
        try:
            title = self.link_resolver.resolve(identifier)
        except LinkResolutionError as e:
            if self.options.fail_on_resource_errors:
                raise RenderingError(
                    f"Unable to find link {identifier}: {e.message}",
                    rendering_stage="link_resolution",
                    original_error=e,
                ) from e
            logger.warning("Unable to find link %s due to error: %s", identifier, e.message)
            self.unresolved_links.append(identifier)
            return UNRESOLVED_LINK_TITLE

        if self.options.normalize_link_titles:
            return wikify(title)
        return title

    def visit_emphasis(self, node: Emphasis) -> None:
        return self.generic_visit(node)

    def visit_strong(self, node: Strong) -> None:
        return self.generic_visit(node)

    def visit_underline(self, node: Underline) -> None:
        return self.generic_visit(node)

    def visit_strikethrough(self, node: Strikethrough) -> None:
        return self.generic_visit(node)
