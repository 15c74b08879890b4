#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_api_functions.py
"""Integration tests for the public API functions: to_ast and to_subtext.

Tests cover input types, option routing through keyword arguments,
pre-parsed documents and output destinations.
"""

import logging
from io import BytesIO, StringIO
from pathlib import Path

import pytest

from org2subtext import OrgParserOptions, SubtextRendererOptions, to_ast, to_subtext
from org2subtext.ast import Document, Headline, Keyword, Section
from org2subtext.exceptions import RenderingError
from org2subtext.links import MappingLinkResolver


@pytest.mark.integration
class TestToAst:
    """Tests for to_ast."""

    def test_from_text(self) -> None:
        doc = to_ast("#+title: T\n\n* Heading\nBody\n")
        assert isinstance(doc, Document)
        assert isinstance(doc.children[0], Section)
        assert isinstance(doc.children[0].children[0], Keyword)
        assert isinstance(doc.children[1], Headline)
        assert doc.metadata["title"] == "T"

    def test_from_path(self, sample_note: Path) -> None:
        doc = to_ast(sample_note)
        assert doc.metadata["title"] == "My Note"

    def test_from_path_string(self, sample_note: Path) -> None:
        assert to_ast(str(sample_note)).metadata["title"] == "My Note"

    def test_from_stream(self, sample_note_text: str) -> None:
        doc = to_ast(BytesIO(sample_note_text.encode("utf-8")))
        assert len(doc.children) == 2

    def test_keyword_overrides(self) -> None:
        doc = to_ast("* NEXT Call\n", parser_options=OrgParserOptions(), todo_keywords=["NEXT"])
        heading = doc.children[0].children[0]
        assert heading.metadata["org_todo_state"] == "NEXT"


@pytest.mark.integration
class TestToSubtext:
    """Tests for to_subtext."""

    def test_sample_note(self, sample_note: Path, resolver: MappingLinkResolver, sample_note_subtext: str) -> None:
        assert to_subtext(sample_note, link_resolver=resolver) == sample_note_subtext

    def test_from_document(self, sample_note_text: str, resolver: MappingLinkResolver) -> None:
        doc = to_ast(sample_note_text)
        first = to_subtext(doc, link_resolver=resolver)
        second = to_subtext(doc, link_resolver=resolver)
        assert first == second

    def test_without_resolver(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="org2subtext"):
            result = to_subtext("See [[id:5678][other]].\n")
        assert result == "See [[]].\n\n"
        assert any("could not be resolved" in record.getMessage() for record in caplog.records)

    def test_quote_with_attribute_keyword(self) -> None:
        result = to_subtext("#+begin_quote\n#+attr_html: :class x\nQuoted text\n#+end_quote\n")
        assert result == "> Quoted text\n\n"

    def test_quote_with_list(self) -> None:
        result = to_subtext("#+begin_quote\n- a\n- b\n#+end_quote\n")
        assert result == "> - a\n> - b\n\n"

    def test_renderer_kwargs(self) -> None:
        result = to_subtext("Loose :id: text\n", strip_id_text=False)
        assert result == "Loose :id: text\n\n"

    def test_renderer_options_object(self, resolver: MappingLinkResolver) -> None:
        options = SubtextRendererOptions(normalize_link_titles=True)
        result = to_subtext("[[id:abcd-ef]]\n", link_resolver=resolver, renderer_options=options)
        assert result == "[[ReadingList2025]]\n\n"

    def test_mixed_kwargs(self, resolver: MappingLinkResolver) -> None:
        result = to_subtext(
            "* NEXT Task\n#+begin_src sh\nls\n#+end_src\n",
            link_resolver=resolver,
            todo_keywords=["NEXT"],
            source_block_placeholder="...",
        )
        assert result == "# Task\n...\n\n"

    def test_unknown_kwarg(self) -> None:
        with pytest.raises(ValueError, match="Unknown option"):
            to_subtext("text\n", no_such_option=True)

    def test_fail_on_resource_errors(self) -> None:
        with pytest.raises(RenderingError):
            to_subtext("[[id:missing]]\n", fail_on_resource_errors=True)

    def test_output_path(self, tmp_path: Path) -> None:
        target = tmp_path / "out.sub"
        result = to_subtext("* Title\n", output=target)
        assert target.read_text(encoding="utf-8") == result == "# Title\n"

    def test_output_stream(self) -> None:
        buffer = StringIO()
        to_subtext("* Title\n", output=buffer)
        assert buffer.getvalue() == "# Title\n"
