#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Resolvers that turn internal link identifiers into note titles."""

from org2subtext.links.base import CachingLinkResolver, LinkResolver, MappingLinkResolver, unquote, wikify
from org2subtext.links.org_roam import OrgRoamLinkResolver, normalize_database_url

__all__ = [
    "LinkResolver",
    "MappingLinkResolver",
    "CachingLinkResolver",
    "OrgRoamLinkResolver",
    "normalize_database_url",
    "unquote",
    "wikify",
]
