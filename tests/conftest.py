"""Shared fixtures for Bookmark Analyzer tests."""

import sqlite3
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Redirect config dir to a temp directory for all tests."""
    config_dir = tmp_path / ".bookmark_analyzer"
    config_dir.mkdir()
    monkeypatch.setattr(
        "bookmark_analyzer.utils.config.get_config_dir",
        lambda: config_dir,
    )
    return config_dir


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    """Point $HOME at a temp directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def temp_dir(tmp_path, isolate_config):
    """Send the Gecko database copy to a directory the test can inspect."""
    copy_dir = tmp_path / "tmp"
    copy_dir.mkdir()
    (isolate_config / "config.toml").write_text(f'[extract]\ntemp_dir = "{copy_dir}"\n')
    return copy_dir


@pytest.fixture
def sample_chrome_data():
    """Return sample Chrome bookmark JSON data."""
    return {
        "checksum": "",
        "roots": {
            "bookmark_bar": {
                "children": [
                    {
                        "date_added": "13345678901234567",
                        "guid": "00000000-0000-0000-0000-000000000001",
                        "id": "1",
                        "name": "Example",
                        "type": "url",
                        "url": "https://example.com",
                    },
                    {
                        "children": [
                            {
                                "date_added": "13345678901234567",
                                "guid": "00000000-0000-0000-0000-000000000003",
                                "id": "3",
                                "name": "GitHub",
                                "type": "url",
                                "url": "https://github.com",
                            }
                        ],
                        "date_added": "13345678901234567",
                        "date_modified": "13345678901234567",
                        "guid": "00000000-0000-0000-0000-000000000002",
                        "id": "2",
                        "name": "Dev",
                        "type": "folder",
                    },
                ],
                "id": "0",
                "name": "Bookmarks bar",
                "type": "folder",
            },
            "other": {
                "children": [
                    {
                        "id": "5",
                        "name": "Python",
                        "type": "url",
                        "url": "https://python.org",
                    },
                ],
                "id": "4",
                "name": "Other bookmarks",
                "type": "folder",
            },
            "synced": {
                "children": [
                    {
                        "id": "7",
                        "name": "Phone",
                        "type": "url",
                        "url": "https://m.example.com",
                    },
                ],
                "id": "6",
                "name": "Mobile bookmarks",
                "type": "folder",
            },
        },
        "version": 1,
    }


def create_places_db(db_path: Path) -> None:
    """Create a minimal Firefox places.sqlite for testing.

    Four url bookmarks reach a place: Example, GitHub, one with a NULL
    title and one whose place has a NULL url.
    """
    conn = sqlite3.connect(str(db_path))
    cursor = conn.cursor()

    cursor.execute("""
        CREATE TABLE moz_places (
            id INTEGER PRIMARY KEY,
            url TEXT,
            title TEXT
        )
    """)
    cursor.execute("""
        CREATE TABLE moz_bookmarks (
            id INTEGER PRIMARY KEY,
            type INTEGER,
            fk INTEGER,
            parent INTEGER,
            position INTEGER,
            title TEXT
        )
    """)

    cursor.executemany("INSERT INTO moz_places VALUES (?, ?, ?)", [
        (1, "https://example.com", "Example"),
        (2, "https://github.com", "GitHub"),
        (3, "https://notitle.example.com", None),
        (4, None, "Broken"),
    ])

    cursor.executemany("INSERT INTO moz_bookmarks VALUES (?, ?, ?, ?, ?, ?)", [
        # Root and toolbar folders
        (1, 2, None, 0, 0, ""),
        (3, 2, None, 1, 1, "Bookmarks Toolbar"),
        (7, 1, 1, 3, 0, "Example"),
        (8, 2, None, 3, 1, "Dev"),
        (9, 1, 2, 8, 0, "GitHub"),
        (10, 1, 3, 3, 2, None),
        (11, 1, 4, 3, 3, "Broken"),
        # Separator
        (12, 3, None, 3, 4, ""),
        # Bookmark pointing at a missing place
        (13, 1, 99, 3, 5, "Dangling"),
    ])

    conn.commit()
    conn.close()


@pytest.fixture
def places_profile(tmp_path):
    """A profile directory containing a test places.sqlite."""
    profile = tmp_path / "profile"
    profile.mkdir()
    create_places_db(profile / "places.sqlite")
    return profile
