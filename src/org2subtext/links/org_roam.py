#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2subtext/links/org_roam.py
"""Link resolver backed by an org-roam database.

org-roam keeps an SQLite cache of every note it knows about. The ``nodes``
table maps a node identifier to its title; both columns hold printed elisp
strings, so values are stored with their surrounding double quotes.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from org2subtext.constants import (
    DEFAULT_QUOTE_IDENTIFIERS,
    DEPS_ORG_ROAM,
    ORG_ROAM_NODES_TABLE,
    ORG_ROAM_TITLE_QUERY,
)
from org2subtext.exceptions import LinkIndexError, LinkNotFoundError, LinkResolutionError
from org2subtext.links.base import LinkResolver, unquote
from org2subtext.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

_SQLITE_MEMORY = "sqlite://"


def _sqlite_path(url: str) -> str | None:
    """Return the database path of an SQLite URL, or None for other URLs."""
    if url.startswith("sqlite:///"):
        return url[len("sqlite:///") :]
    if url.startswith("sqlite://"):
        return url[len("sqlite://") :]
    if url.startswith("sqlite:"):
        return url[len("sqlite:") :]
    if "://" in url:
        return None
    return url


def normalize_database_url(url: str) -> str:
    """Normalize a link index location into an SQLAlchemy URL.

    Accepted forms:

    - SQLAlchemy URLs (``sqlite:////home/me/org-roam.db``,
      ``postgresql://...``); non-SQLite URLs are returned unchanged
    - sqlx-style SQLite URLs (``sqlite:~/.emacs.d/org-roam.db``,
      ``sqlite://org-roam.db``)
    - bare file paths (``~/.emacs.d/org-roam.db``)

    Parameters
    ----------
    url : str
        Database location

    Returns
    -------
    str
        SQLAlchemy database URL

    Raises
    ------
    LinkIndexError
        If the URL is empty or names an SQLite file that does not exist.
        SQLite would otherwise create an empty database silently.

    """
    url = url.strip()
    if not url:
        raise LinkIndexError("Database URL is empty")

    path = _sqlite_path(url)
    if path is None:
        return url

    path, _, query = path.partition("?")
    if path in ("", ":memory:"):
        return _SQLITE_MEMORY

    db_file = Path(path).expanduser()
    if not db_file.is_file():
        raise LinkIndexError(f"org-roam database not found: {db_file}", database_url=url)

    normalized = f"sqlite:///{db_file.resolve()}"
    return f"{normalized}?{query}" if query else normalized


class OrgRoamLinkResolver(LinkResolver):
    """Resolve ``id:`` links against the org-roam ``nodes`` table.

    Parameters
    ----------
    database_url : str
        Location of the org-roam database (see ``normalize_database_url``)
    quote_identifiers : bool, default True
        Wrap identifiers in double quotes before the lookup, matching how
        org-roam stores them

    Raises
    ------
    DependencyError
        If SQLAlchemy is not installed
    LinkIndexError
        If the database location is invalid

    Examples
    --------
        >>> with OrgRoamLinkResolver("sqlite:~/.emacs.d/org-roam.db") as resolver:
        ...     resolver.verify()
        ...     resolver.resolve("9f3c1c2e-1a5e-4b65-9d39-1c1e0d6a2f10")
        'My Note'

    """

    @requires_dependencies("org-roam", DEPS_ORG_ROAM)
    def __init__(self, database_url: str, quote_identifiers: bool = DEFAULT_QUOTE_IDENTIFIERS):
        from sqlalchemy import create_engine
        from sqlalchemy.engine import make_url
        from sqlalchemy.exc import SQLAlchemyError

        self.database_url = normalize_database_url(database_url)
        self.quote_identifiers = quote_identifiers
        try:
            self._display_url = make_url(self.database_url).render_as_string(hide_password=True)
            self._engine: Any = create_engine(self.database_url)
        except (SQLAlchemyError, ImportError) as e:
            raise LinkIndexError(
                f"Cannot open link index: {e}", database_url=database_url, original_error=e
            ) from e
        logger.debug("Opened link index %s", self._display_url)

    def verify(self) -> None:
        """Check that the index is reachable and has a ``nodes`` table.

        Raises
        ------
        LinkIndexError
            If the database cannot be opened or the table is missing

        """
        from sqlalchemy import inspect
        from sqlalchemy.exc import SQLAlchemyError

        try:
            with self._engine.connect() as connection:
                tables = inspect(connection).get_table_names()
        except SQLAlchemyError as e:
            raise LinkIndexError(
                f"Cannot read link index {self._display_url}: {e}", database_url=self._display_url, original_error=e
            ) from e

        if ORG_ROAM_NODES_TABLE not in tables:
            raise LinkIndexError(
                f"{self._display_url} is not an org-roam database (no '{ORG_ROAM_NODES_TABLE}' table)",
                database_url=self._display_url,
            )

    def resolve(self, identifier: str) -> str:
        """Look up the title of the node with ``identifier``.

        Raises
        ------
        LinkNotFoundError
            If no node has the identifier
        LinkResolutionError
            If the query fails

        """
        from sqlalchemy import text
        from sqlalchemy.exc import SQLAlchemyError

        key = f'"{identifier}"' if self.quote_identifiers else identifier
        try:
            with self._engine.connect() as connection:
                row = connection.execute(text(ORG_ROAM_TITLE_QUERY), {"id": key}).first()
        except SQLAlchemyError as e:
            raise LinkResolutionError(identifier, original_error=e) from e

        if row is None or row[0] is None:
            raise LinkNotFoundError(identifier)
        return unquote(str(row[0]))

    def close(self) -> None:
        self._engine.dispose()
