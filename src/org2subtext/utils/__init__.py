#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2subtext/utils/__init__.py
"""Utility modules for the org2subtext package."""

from org2subtext.utils.decorators import debug_timer, requires_dependencies

__all__ = ["debug_timer", "requires_dependencies"]
