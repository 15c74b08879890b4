#  Copyright (c) 2025 Tom Villani, Ph.D.
"""org2subtext - convert org-mode notes to subtext.

The package parses an org-mode document into an AST and renders it as
subtext, a small line-oriented plain-text markup. Internal ``id:`` links of
an org-roam note collection are resolved to note titles through a link
resolver, usually backed by the org-roam database.

Basic usage:

    >>> from org2subtext import to_subtext
    >>> from org2subtext.links import OrgRoamLinkResolver
    >>> with OrgRoamLinkResolver("sqlite:~/.emacs.d/org-roam.db") as resolver:
    ...     text = to_subtext("note.org", link_resolver=resolver)

Working with the AST:

    >>> from org2subtext import to_ast
    >>> from org2subtext.renderers import SubtextRenderer
    >>> doc = to_ast("note.org", todo_keywords=["TODO", "WAITING", "DONE"])
    >>> text = SubtextRenderer().render_to_string(doc)

"""

from org2subtext.api import to_ast, to_subtext
from org2subtext.exceptions import (
    DependencyError,
    FileError,
    LinkIndexError,
    LinkNotFoundError,
    LinkResolutionError,
    Org2SubtextError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from org2subtext.options import OrgParserOptions, SubtextRendererOptions

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "to_ast",
    "to_subtext",
    "OrgParserOptions",
    "SubtextRendererOptions",
    "Org2SubtextError",
    "ValidationError",
    "FileError",
    "ParsingError",
    "RenderingError",
    "LinkResolutionError",
    "LinkNotFoundError",
    "LinkIndexError",
    "DependencyError",
]
