"""Fixtures for integration tests that need an org-roam database."""

from pathlib import Path

import pytest
from sqlalchemy import create_engine, text


def build_org_roam_db(path: Path, nodes: dict[str, str]) -> Path:
    """Create a minimal org-roam database at ``path``.

    Identifiers and titles are stored as printed elisp strings, quotes
    included, the way org-roam writes them.
    """
    engine = create_engine(f"sqlite:///{path}")
    with engine.begin() as connection:
        connection.execute(text("CREATE TABLE nodes (id TEXT NOT NULL PRIMARY KEY, file TEXT, title TEXT)"))
        for identifier, title in nodes.items():
            connection.execute(
                text("INSERT INTO nodes (id, file, title) VALUES (:id, :file, :title)"),
                {"id": f'"{identifier}"', "file": '"/notes/x.org"', "title": f'"{title}"'},
            )
    engine.dispose()
    return path


@pytest.fixture
def org_roam_db(tmp_path: Path) -> Path:
    """Provide an org-roam database that knows the sample note's links."""
    return build_org_roam_db(
        tmp_path / "org-roam.db",
        {
            "1234": "My Note",
            "5678": "Other Note",
            "abcd-ef": "reading list, 2025",
        },
    )


@pytest.fixture
def not_org_roam_db(tmp_path: Path) -> Path:
    """Provide an SQLite database without a ``nodes`` table."""
    path = tmp_path / "other.db"
    engine = create_engine(f"sqlite:///{path}")
    with engine.begin() as connection:
        connection.execute(text("CREATE TABLE files (file TEXT)"))
    engine.dispose()
    return path
