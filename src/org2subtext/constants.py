#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for org2subtext.

This module centralizes the hardcoded values and default configuration
constants used across the package.

Constants are organized by category:
1. Subtext Output - Markers written by the subtext renderer
2. Link Resolution - Internal link and link index settings
3. Org-Mode Parsing - Defaults for the org parser
4. Command Line - Exit codes and environment variables
5. Dependencies - Packages required by optional components
"""

from __future__ import annotations

# =============================================================================
# Subtext Output
# =============================================================================

SUBTEXT_HEADING_MARKER = "#"
SUBTEXT_QUOTE_PREFIX = "> "
SUBTEXT_QUOTE_BLANK_LINE = ">"
SUBTEXT_LIST_MARKER = "- "
SUBTEXT_CODE_DELIMITER = "`"

DEFAULT_SOURCE_BLOCK_PLACEHOLDER = "[source block omitted]"
DEFAULT_STRIP_ID_TEXT = True
DEFAULT_NORMALIZE_LINK_TITLES = False
DEFAULT_FAIL_ON_RESOURCE_ERRORS = False

# Keyword whose value becomes the top-level heading of the note
TITLE_KEYWORD = "title"

# Case-insensitive marker of org-roam property lines (":ID: ...")
ID_PROPERTY_MARKER = ":id:"

# =============================================================================
# Link Resolution
# =============================================================================

DEFAULT_INTERNAL_LINK_PREFIX = "id:"
UNRESOLVED_LINK_TITLE = ""

# org-roam keeps one row per node in this table
ORG_ROAM_NODES_TABLE = "nodes"
ORG_ROAM_TITLE_QUERY = "SELECT title FROM nodes WHERE id = :id LIMIT 1"
DEFAULT_QUOTE_IDENTIFIERS = True

# Quote characters org-roam wraps around stored string values
ORG_ROAM_QUOTE_CHARS = ('"',)

# =============================================================================
# Org-Mode Parsing
# =============================================================================

DEFAULT_ORG_TODO_KEYWORDS = ["TODO", "DONE"]
DEFAULT_ORG_PARSE_PROPERTIES = True
DEFAULT_ORG_PARSE_TAGS = True

# Blocks whose content is kept verbatim and never parsed as org markup
ORG_VERBATIM_BLOCKS = frozenset({"src", "example", "export"})

# Blocks dropped entirely by the parser
ORG_COMMENT_BLOCKS = frozenset({"comment"})

# =============================================================================
# Command Line
# =============================================================================

ENV_DATABASE_URL = "DATABASE_URL"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7
EXIT_LINK_INDEX_ERROR = 11

# =============================================================================
# Dependencies
# =============================================================================

# (install name, import name)
DEPS_ORG = [("orgparse", "orgparse")]
DEPS_ORG_ROAM = [("SQLAlchemy", "sqlalchemy")]
