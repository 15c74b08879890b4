#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2subtext/options/org.py
"""Configuration options for the org parser."""

from __future__ import annotations

from dataclasses import dataclass, field

from org2subtext.constants import (
    DEFAULT_ORG_PARSE_PROPERTIES,
    DEFAULT_ORG_PARSE_TAGS,
    DEFAULT_ORG_TODO_KEYWORDS,
)
from org2subtext.options.base import BaseParserOptions


@dataclass(frozen=True)
class OrgParserOptions(BaseParserOptions):
    """Options controlling how org text becomes a document tree.

    orgparse supplies the outline; these settings decide which headline
    data is kept.

    Parameters
    ----------
    parse_properties : bool, default True
        Whether to keep property drawers. When True, properties are stored
        in heading metadata and the drawer is kept in the tree as a
        ``Drawer`` node (which renderers never print).
    parse_tags : bool, default True
        Store heading tags (``:work:urgent:``) in heading metadata.
    todo_keywords : list[str], default ["TODO", "DONE"]
        List of TODO keywords to recognize in headings. Recognized keywords
        are removed from the heading text and stored in metadata.

    Examples
    --------
    Custom TODO keywords:
        >>> options = OrgParserOptions(
        ...     todo_keywords=["TODO", "WAITING", "DONE"]
        ... )

    """

    parse_properties: bool = field(
        default=DEFAULT_ORG_PARSE_PROPERTIES,
        metadata={
            "help": "Parse Org properties within drawers",
            "importance": "core",
        },
    )
    parse_tags: bool = field(
        default=DEFAULT_ORG_PARSE_TAGS,
        metadata={
            "help": "Parse heading tags",
            "importance": "core",
        },
    )
    todo_keywords: list[str] = field(
        default_factory=lambda: list(DEFAULT_ORG_TODO_KEYWORDS),
        metadata={
            "help": "List of TODO keywords to recognize in headings",
            "importance": "advanced",
        },
    )
