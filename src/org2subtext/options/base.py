#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2subtext/options/base.py
"""Base classes for parser and renderer options.

This module defines the foundation classes for the options objects used
throughout the org2subtext conversion pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from org2subtext.constants import DEFAULT_FAIL_ON_RESOURCE_ERRORS


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    fail_on_resource_errors : bool, default=False
        Whether to raise RenderingError when an external resource (for
        example a note title in the link index) cannot be resolved.
        If False (default), a warning is logged and rendering continues.

    """

    fail_on_resource_errors: bool = field(
        default=DEFAULT_FAIL_ON_RESOURCE_ERRORS,
        metadata={
            "help": "Raise RenderingError on unresolved links instead of logging warnings",
            "cli_name": "fail-on-unresolved",
            "importance": "advanced",
        },
    )


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parameters
    ----------
    extract_metadata : bool
        Whether to extract document metadata (file keywords such as
        ``#+title``) into ``Document.metadata``

    """

    extract_metadata: bool = field(
        default=True,
        metadata={"help": "Extract document metadata from file keywords", "importance": "core"},
    )
