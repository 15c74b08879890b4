#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers that turn the AST into output text."""

from org2subtext.renderers.base import BaseRenderer
from org2subtext.renderers.subtext import SubtextRenderer

__all__ = ["BaseRenderer", "SubtextRenderer"]
