"""Firefox/Zen bookmark reader using SQLite."""

import logging
import shutil
import sqlite3
from pathlib import Path
from typing import List, Optional

from ..errors import BookmarkFileNotFoundError, BookmarkReadError, BookmarkStoreError
from ..models.bookmark import Bookmark, UNTITLED
from ..utils.config import get_temp_dir
from .browser_detect import Browser, get_home

logger = logging.getLogger(__name__)

PLACES_DB_NAME = "places.sqlite"
# Fixed name: a copy leaked by one run is overwritten by the next.
TEMP_DB_NAME = "places_temp.sqlite"

# Firefox bookmark type constants
_MOZ_TYPE_BOOKMARK = 1

_BOOKMARKS_QUERY = """
    SELECT mb.title, mp.url
    FROM moz_bookmarks mb
    JOIN moz_places mp ON mb.fk = mp.id
    WHERE mb.type = ? AND mp.url IS NOT NULL
"""


def get_profiles_dir(browser: Browser) -> Optional[Path]:
    """Get the directory holding profiles.ini for a Gecko browser."""
    home = get_home()
    if home is None:
        return None
    if browser == Browser.ZEN:
        return home / ".zen"
    if browser == Browser.FIREFOX:
        return home / ".mozilla" / "firefox"
    return None


def find_firefox_profile(browser: Browser) -> Optional[Path]:
    """Find the profile directory listed in profiles.ini.

    The last Path= line in the file wins; Default= markers are ignored.
    """
    profiles_dir = get_profiles_dir(browser)
    if profiles_dir is None:
        return None

    profiles_ini = profiles_dir / "profiles.ini"
    if not profiles_ini.exists():
        logger.debug("No profiles.ini at %s", profiles_ini)
        return None

    try:
        content = profiles_ini.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning("Cannot read %s: %s", profiles_ini, e)
        return None

    profile_path = None
    for line in content.splitlines():
        if line.startswith("Path="):
            profile_path = line[len("Path="):]

    if profile_path is None:
        return None
    return profiles_dir / profile_path


def _read_bookmarks_from_db(db_path: Path) -> List[Bookmark]:
    """Query url bookmarks from a places.sqlite copy."""
    try:
        conn = sqlite3.connect(str(db_path))
    except sqlite3.Error as e:
        raise BookmarkStoreError(f"Cannot open bookmark database copy {db_path}: {e}") from e

    try:
        rows = conn.execute(_BOOKMARKS_QUERY, (_MOZ_TYPE_BOOKMARK,)).fetchall()
    except sqlite3.Error as e:
        raise BookmarkStoreError(f"Failed querying Firefox bookmarks: {e}") from e
    finally:
        conn.close()

    bookmarks = []
    for title, url in rows:
        if not isinstance(url, str) or not url:
            logger.debug("Skipping bookmark row without url (title=%r)", title)
            continue
        name = title if isinstance(title, str) else UNTITLED
        bookmarks.append(Bookmark(name=name, url=url))
    return bookmarks


def parse_firefox_bookmarks(profile_path: Path,
                            temp_dir: Optional[Path] = None) -> List[Bookmark]:
    """Read bookmarks from a Gecko profile's places.sqlite.

    The browser may hold a lock on the live database, so it is copied to a
    temporary file first and the copy is queried. The copy is removed
    before returning, whether or not the query succeeded.

    Args:
        profile_path: Firefox or Zen profile directory.
        temp_dir: Directory for the copy. Taken from config if None.

    Returns:
        One Bookmark per url bookmark row.

    Raises:
        BookmarkFileNotFoundError: places.sqlite is missing.
        BookmarkReadError: The database could not be copied.
        BookmarkStoreError: The copy could not be opened or queried.
    """
    places_db = Path(profile_path) / PLACES_DB_NAME
    if not places_db.exists():
        raise BookmarkFileNotFoundError(f"places.sqlite not found at {places_db}")

    if temp_dir is None:
        temp_dir = get_temp_dir()
    temp_db = Path(temp_dir) / TEMP_DB_NAME
    try:
        try:
            # Drop any leftover first so copy2 never writes through a planted symlink
            temp_db.unlink(missing_ok=True)
            shutil.copy2(places_db, temp_db)
        except OSError as e:
            raise BookmarkReadError(f"Cannot copy {places_db} to {temp_db}: {e}") from e
        return _read_bookmarks_from_db(temp_db)
    finally:
        try:
            temp_db.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not remove temporary copy %s: %s", temp_db, e)
