"""Pytest configuration and shared fixtures for the org2subtext test suite."""

from pathlib import Path

import pytest

from org2subtext.links import MappingLinkResolver


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def resolver() -> MappingLinkResolver:
    """Provide a resolver that knows two notes."""
    return MappingLinkResolver(
        {
            "5678": "Other Note",
            "abcd-ef": "reading list, 2025",
        }
    )


SAMPLE_NOTE = """:PROPERTIES:
:ID:       1234
:END:
#+title: My Note

Some intro text with [[id:5678][other note]].

* Heading One
Paragraph under heading.

#+begin_quote
Quoted line one
line two

Second para
#+end_quote

- item one
- item [[https://example.com][Example]]

#+begin_src python
print("hi")
#+end_src
"""

SAMPLE_NOTE_SUBTEXT = (
    "# My Note\n"
    "Some intro text with [[Other Note]].\n"
    "\n"
    "# Heading One\n"
    "Paragraph under heading.\n"
    "> Quoted line one\n"
    "> line two\n"
    ">\n"
    "> Second para\n"
    "- item one\n"
    "- item Example <https://example.com>\n"
    "[source block omitted]\n"
    "\n"
)


@pytest.fixture
def sample_note_text() -> str:
    """Org-roam style note exercising every emission rule."""
    return SAMPLE_NOTE


@pytest.fixture
def sample_note_subtext() -> str:
    """Expected subtext for ``sample_note_text`` rendered with ``resolver``."""
    return SAMPLE_NOTE_SUBTEXT


@pytest.fixture
def sample_note(tmp_path: Path, sample_note_text: str) -> Path:
    """Write the sample note to a temporary file."""
    path = tmp_path / "note.org"
    path.write_text(sample_note_text, encoding="utf-8")
    return path
