#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2subtext/api.py
"""Public API for converting org documents to subtext.

Examples
--------
    >>> from org2subtext import to_subtext
    >>> to_subtext("#+title: Reading list\\n\\n- [[https://example.com][Example]]")
    '# Reading list\\n- Example <https://example.com>\\n\\n'

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Optional, Union

from org2subtext.ast import Document
from org2subtext.links.base import LinkResolver
from org2subtext.options import OrgParserOptions, SubtextRendererOptions, split_options_kwargs
from org2subtext.parsers.org import OrgParser
from org2subtext.renderers.subtext import SubtextRenderer
from org2subtext.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def to_ast(
    source: Union[str, Path, IO[bytes], bytes],
    *,
    parser_options: Optional[OrgParserOptions] = None,
    **kwargs: Any,
) -> Document:
    """Parse an org document into an AST.

    Parameters
    ----------
    source : str, Path, IO[bytes], or bytes
        Org text, a path to an org file, a file-like object, or raw bytes
    parser_options : OrgParserOptions, optional
        Pre-configured parser options
    kwargs : Any
        Individual parser options that override settings in parser_options

    Returns
    -------
    Document
        AST Document node representing the document structure

    Raises
    ------
    ParsingError
        If parsing fails
    FileError
        If the source file cannot be read

    """
    parser_options = parser_options or OrgParserOptions()
    if kwargs:
        parser_options = parser_options.create_updated(**kwargs)

    with debug_timer(logger, "Parsing (org)"):
        return OrgParser(parser_options).parse(source)


def to_subtext(
    source: Union[str, Path, IO[bytes], bytes, Document],
    *,
    link_resolver: Optional[LinkResolver] = None,
    parser_options: Optional[OrgParserOptions] = None,
    renderer_options: Optional[SubtextRendererOptions] = None,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    **kwargs: Any,
) -> str:
    """Convert an org document to subtext.

    Parameters
    ----------
    source : str, Path, IO[bytes], bytes, or Document
        Org input, or an already parsed Document
    link_resolver : LinkResolver, optional
        Resolver for ``id:`` links. Without one, every internal link
        renders as ``[[]]``.
    parser_options : OrgParserOptions, optional
        Pre-configured parser options
    renderer_options : SubtextRendererOptions, optional
        Pre-configured renderer options
    output : str, Path, IO[bytes], IO[str], optional
        Where to write the result, in addition to returning it
    kwargs : Any
        Individual parser or renderer options (e.g. ``strip_id_text=False``);
        each is routed to the options class that defines it

    Returns
    -------
    str
        Subtext text

    Raises
    ------
    ValueError
        If a keyword argument matches no option
    ParsingError
        If parsing fails
    RenderingError
        If rendering fails

    Examples
    --------
        >>> from org2subtext.links import MappingLinkResolver
        >>> resolver = MappingLinkResolver({"abc": "My Note"})
        >>> to_subtext("See [[id:abc][this]].", link_resolver=resolver)
        'See [[My Note]].\\n\\n'

    """
    parser_kwargs, renderer_kwargs = split_options_kwargs(kwargs)

    if isinstance(source, Document):
        doc = source
    else:
        doc = to_ast(source, parser_options=parser_options, **parser_kwargs)

    renderer_options = renderer_options or SubtextRendererOptions()
    if renderer_kwargs:
        renderer_options = renderer_options.create_updated(**renderer_kwargs)

    renderer = SubtextRenderer(renderer_options, link_resolver=link_resolver)
    text = renderer.render_to_string(doc)
    if renderer.unresolved_links:
        logger.info("%d link(s) could not be resolved", len(renderer.unresolved_links))

    if output is not None:
        renderer.write_text_output(text, output)
    return text
