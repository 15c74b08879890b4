#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2subtext/options/subtext.py
"""Configuration options for subtext rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from org2subtext.constants import (
    DEFAULT_INTERNAL_LINK_PREFIX,
    DEFAULT_NORMALIZE_LINK_TITLES,
    DEFAULT_SOURCE_BLOCK_PLACEHOLDER,
    DEFAULT_STRIP_ID_TEXT,
)
from org2subtext.options.base import BaseRendererOptions


@dataclass(frozen=True)
class SubtextRendererOptions(BaseRendererOptions):
    """Configuration options for rendering the document tree to subtext.

    Parameters
    ----------
    normalize_link_titles : bool, default False
        Pass resolved note titles through ``wikify`` before writing them
        (``"my note, v2"`` becomes ``"MyNoteV2"``).
    strip_id_text : bool, default True
        Drop any text token that contains ``:id:`` (case-insensitive). Drawer
        contents are always suppressed; this catches property lines that
        appear outside a drawer.
    internal_link_prefix : str, default "id:"
        Link targets starting with this prefix are looked up in the link
        index; all other targets are written as external links.
    source_block_placeholder : str, default "[source block omitted]"
        Literal written in place of each source or example block.

    """

    normalize_link_titles: bool = field(
        default=DEFAULT_NORMALIZE_LINK_TITLES,
        metadata={
            "help": "Normalize resolved link titles into CamelCase wiki words",
            "importance": "core",
        },
    )
    strip_id_text: bool = field(
        default=DEFAULT_STRIP_ID_TEXT,
        metadata={
            "help": "Drop text containing ':id:' property lines",
            "cli_name": "keep-id-text",
            "importance": "advanced",
        },
    )
    internal_link_prefix: str = field(
        default=DEFAULT_INTERNAL_LINK_PREFIX,
        metadata={
            "help": "Link target prefix that marks an internal note link",
            "importance": "advanced",
        },
    )
    source_block_placeholder: str = field(
        default=DEFAULT_SOURCE_BLOCK_PLACEHOLDER,
        metadata={
            "help": "Text written in place of source blocks",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If the internal link prefix is empty.

        """
        if not self.internal_link_prefix:
            raise ValueError("internal_link_prefix must be a non-empty string")
