#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2subtext/links/base.py
"""Link resolvers: identifier to note title lookup.

A link resolver answers one question for the renderer: given the identifier
of an internal link (``id:<identifier>``), what is the title of the note it
points to? Resolvers raise ``LinkNotFoundError`` for unknown identifiers and
``LinkResolutionError`` when the backing index fails for one lookup.

"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import Mapping

from org2subtext.constants import ORG_ROAM_QUOTE_CHARS
from org2subtext.exceptions import LinkNotFoundError, LinkResolutionError

logger = logging.getLogger(__name__)

_PUNCTUATION_RE = re.compile(r"[^\w\s]")


def unquote(value: str, quote_chars: tuple[str, ...] = ORG_ROAM_QUOTE_CHARS) -> str:
    """Strip one pair of surrounding quote characters.

    org-roam stores string columns as printed elisp strings, so a title
    comes back from the database as ``"My Note"`` including the quotes.

    Parameters
    ----------
    value : str
        Possibly quoted value
    quote_chars : tuple of str, default = ('"',)
        Characters accepted as quotes

    Returns
    -------
    str
        ``value`` without its first and last character when both are the
        same quote character, otherwise ``value`` unchanged

    Examples
    --------
        >>> unquote('"My Note"')
        'My Note'
        >>> unquote('My Note')
        'My Note'

    """
    if len(value) >= 2 and value[0] in quote_chars and value[-1] == value[0]:
        return value[1:-1]
    return value


def wikify(title: str) -> str:
    """Turn a note title into a single CamelCase wiki word.

    Punctuation is removed, the first letter of every word is upper-cased
    (the rest of the word is left alone) and the words are joined.

    Parameters
    ----------
    title : str
        Note title

    Returns
    -------
    str
        Wiki word

    Examples
    --------
        >>> wikify("my note, v2")
        'MyNoteV2'
        >>> wikify("org-roam DB")
        'OrgroamDB'

    """
    words = _PUNCTUATION_RE.sub("", title).split()
    return "".join(word[:1].upper() + word[1:] for word in words)


class LinkResolver(ABC):
    """Abstract base class for link resolvers.

    Subclasses implement ``resolve``. Resolvers may be used as context
    managers; ``close`` releases any resources and defaults to a no-op.

    """

    @abstractmethod
    def resolve(self, identifier: str) -> str:
        """Return the title of the note with ``identifier``.

        Parameters
        ----------
        identifier : str
            Identifier with the internal link prefix already removed

        Returns
        -------
        str
            Display title of the note

        Raises
        ------
        LinkNotFoundError
            If the identifier is not known to the index
        LinkResolutionError
            If the lookup itself fails

        """
        raise NotImplementedError

    def close(self) -> None:
        return None

    def __enter__(self) -> LinkResolver:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class MappingLinkResolver(LinkResolver):
    """Resolve identifiers from an in-memory mapping.

    Parameters
    ----------
    mapping : Mapping[str, str] or None, default = None
        Identifier to title mapping. An empty resolver rejects every
        identifier, which is what the command line uses when no database
        is configured.

    """

    def __init__(self, mapping: Mapping[str, str] | None = None):
        self._mapping = dict(mapping or {})

    def resolve(self, identifier: str) -> str:
        try:
            return self._mapping[identifier]
        except KeyError:
            raise LinkNotFoundError(identifier) from None

    def __len__(self) -> int:
        return len(self._mapping)


class CachingLinkResolver(LinkResolver):
    """Memoize another resolver.

    Titles and not-found results are cached per identifier. Other
    ``LinkResolutionError`` failures are not cached, so a transient index
    error is retried on the next lookup.

    Parameters
    ----------
    inner : LinkResolver
        Resolver to delegate to on a cache miss

    """

    def __init__(self, inner: LinkResolver):
        self.inner = inner
        self._titles: dict[str, str] = {}
        self._missing: set[str] = set()
        self.hits = 0
        self.misses = 0

    def resolve(self, identifier: str) -> str:
        if identifier in self._titles:
            self.hits += 1
            return self._titles[identifier]
        if identifier in self._missing:
            self.hits += 1
            raise LinkNotFoundError(identifier)

        self.misses += 1
        try:
            title = self.inner.resolve(identifier)
        except LinkNotFoundError:
            self._missing.add(identifier)
            raise
        except LinkResolutionError:
            logger.debug("Not caching failed lookup for %s", identifier)
            raise
        self._titles[identifier] = title
        return title

    def clear(self) -> None:
        self._titles.clear()
        self._missing.clear()

    def close(self) -> None:
        self.inner.close()
