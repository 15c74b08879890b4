#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers that turn source documents into the org2subtext AST."""

from org2subtext.parsers.base import BaseParser
from org2subtext.parsers.org import OrgParser

__all__ = ["BaseParser", "OrgParser"]
