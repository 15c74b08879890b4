#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for org2subtext parsing and rendering.

This module provides dataclass-based configuration options for the org
parser and the subtext renderer. Using dataclasses provides type safety,
default values, and a clean API for configuring conversion behavior.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any

from org2subtext.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from org2subtext.options.org import OrgParserOptions
from org2subtext.options.subtext import SubtextRendererOptions


def split_options_kwargs(kwargs: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Route keyword arguments to parser and renderer option fields.

    Parameters
    ----------
    kwargs : dict
        Flat keyword arguments, e.g. ``{"todo_keywords": [...], "strip_id_text": False}``

    Returns
    -------
    tuple[dict, dict]
        Parser keyword arguments and renderer keyword arguments

    Raises
    ------
    ValueError
        If a keyword matches neither options class

    """
    parser_fields = {f.name for f in fields(OrgParserOptions)}
    renderer_fields = {f.name for f in fields(SubtextRendererOptions)}

    parser_kwargs: dict[str, Any] = {}
    renderer_kwargs: dict[str, Any] = {}
    for key, value in kwargs.items():
        if key in parser_fields:
            parser_kwargs[key] = value
        elif key in renderer_fields:
            renderer_kwargs[key] = value
        else:
            raise ValueError(f"Unknown option: {key}")
    return parser_kwargs, renderer_kwargs


__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "OrgParserOptions",
    "SubtextRendererOptions",
    "split_options_kwargs",
]
