#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2subtext/cli.py
"""Command-line interface for org2subtext.

Usage::

    org2subtext -f note.org -o note.sub --database-url sqlite:~/.emacs.d/org-roam.db

The link index location defaults to the ``DATABASE_URL`` environment
variable. Without one, internal links cannot be resolved and render as
``[[]]``.

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from org2subtext import __version__
from org2subtext.api import to_ast
from org2subtext.ast import Document
from org2subtext.ast.serialization import ast_to_json
from org2subtext.constants import (
    ENV_DATABASE_URL,
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_LINK_INDEX_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from org2subtext.exceptions import (
    DependencyError,
    FileError,
    LinkIndexError,
    Org2SubtextError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from org2subtext.links import CachingLinkResolver, LinkResolver, MappingLinkResolver, OrgRoamLinkResolver
from org2subtext.logging_utils import configure_logging
from org2subtext.options import SubtextRendererOptions
from org2subtext.renderers.subtext import SubtextRenderer

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Parser for the ``org2subtext`` command

    """
    parser = argparse.ArgumentParser(
        prog="org2subtext",
        description="Convert an org-mode note to subtext, resolving org-roam id: links to note titles.",
    )
    parser.add_argument("-f", "--filename", required=True, help="Org file to convert")
    parser.add_argument("-o", "--output", help="Output file (default: standard output)")
    parser.add_argument(
        "--database-url",
        default=os.environ.get(ENV_DATABASE_URL),
        help=f"org-roam database, e.g. sqlite:~/.emacs.d/org-roam.db (default: ${ENV_DATABASE_URL})",
    )
    parser.add_argument(
        "--normalize-link-titles",
        action="store_true",
        help="Write resolved link titles as CamelCase wiki words",
    )
    parser.add_argument(
        "--keep-id-text",
        action="store_true",
        help="Keep text containing ':id:' instead of dropping it",
    )
    parser.add_argument(
        "--fail-on-unresolved",
        action="store_true",
        help="Fail instead of writing [[]] when a link cannot be resolved",
    )
    parser.add_argument(
        "--source-block-placeholder",
        help="Text written in place of source blocks",
    )
    parser.add_argument("--debug", action="store_true", help="Dump the parsed document tree to standard error")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    # --trace takes precedence over --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, LinkIndexError):
        return EXIT_LINK_INDEX_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def build_renderer_options(parsed_args: argparse.Namespace) -> SubtextRendererOptions:
    """Build renderer options from parsed arguments."""
    options = SubtextRendererOptions(
        normalize_link_titles=parsed_args.normalize_link_titles,
        strip_id_text=not parsed_args.keep_id_text,
        fail_on_resource_errors=parsed_args.fail_on_unresolved,
    )
    if parsed_args.source_block_placeholder is not None:
        options = options.create_updated(source_block_placeholder=parsed_args.source_block_placeholder)
    return options


def open_link_resolver(database_url: str | None) -> LinkResolver:
    """Open the link index named by ``database_url``.

    Parameters
    ----------
    database_url : str or None
        Database location; None or empty means no index

    Returns
    -------
    LinkResolver
        A verified, caching org-roam resolver, or an empty mapping resolver

    Raises
    ------
    LinkIndexError
        If the database cannot be opened or is not an org-roam database

    """
    if not database_url:
        logger.info("No database URL given (set --database-url or $%s); id: links will not resolve", ENV_DATABASE_URL)
        return MappingLinkResolver()

    resolver = OrgRoamLinkResolver(database_url)
    try:
        resolver.verify()
    except LinkIndexError:
        resolver.close()
        raise
    return CachingLinkResolver(resolver)


def dump_tree(doc: Document) -> None:
    """Pretty-print the document tree as JSON on standard error."""
    from rich.console import Console

    Console(stderr=True).print_json(ast_to_json(doc))


def convert_file(parsed_args: argparse.Namespace) -> int:
    """Run one conversion described by the parsed arguments.

    Returns
    -------
    int
        Exit code

    Raises
    ------
    Org2SubtextError
        On any library failure

    """
    input_path = Path(parsed_args.filename)
    renderer_options = build_renderer_options(parsed_args)

    with open_link_resolver(parsed_args.database_url) as resolver:
        doc = to_ast(input_path)
        if parsed_args.debug:
            dump_tree(doc)

        renderer = SubtextRenderer(renderer_options, link_resolver=resolver)
        text = renderer.render_to_string(doc)

    if parsed_args.output:
        renderer.write_text_output(text, parsed_args.output)
    else:
        sys.stdout.write(text)
        sys.stdout.flush()

    logger.info("Converted %s: %d unresolved link(s)", input_path, len(renderer.unresolved_links))
    return EXIT_SUCCESS


def main(args: list[str] | None = None) -> int:
    """Execute the command-line entry point.

    Parameters
    ----------
    args : list[str] or None, default = None
        Arguments to parse (default: ``sys.argv[1:]``)

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        return convert_file(parsed_args)
    except Org2SubtextError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
