"""Extraction orchestrator - detect the default browser and read its bookmarks."""

import logging
from typing import List, Optional

from ..errors import BookmarkFileNotFoundError, BookmarkPathError, BrowserDetectionError
from ..models.bookmark import Bookmark
from .browser_detect import (
    Browser,
    PROCESS_NAMES,
    detect_browser,
    get_bookmark_path,
    is_browser_running,
)
from .chrome import parse_chromium_bookmarks
from .firefox import find_firefox_profile, parse_firefox_bookmarks

logger = logging.getLogger(__name__)


def get_bookmarks(browser: Optional[Browser] = None) -> List[Bookmark]:
    """Extract bookmarks from the default browser.

    Args:
        browser: Browser to read from. Detected from the desktop if None.

    Returns:
        Flat list of bookmarks, possibly empty.

    Raises:
        BookmarkError: Any failure; nothing is retried.
    """
    if browser is None:
        browser = detect_browser()
    logger.info("Detected browser: %s", browser.display_name)

    if browser.is_chromium:
        path = get_bookmark_path(browser)
        if path is None:
            raise BookmarkPathError("Could not determine bookmark path")
        if not path.exists():
            raise BookmarkFileNotFoundError(f"Bookmark file not found at {path}")
        bookmarks = parse_chromium_bookmarks(path)

    elif browser.is_gecko:
        profile_path = find_firefox_profile(browser)
        if profile_path is None:
            raise BookmarkPathError("Could not find Firefox/Zen profile")
        logger.info("Using profile: %s", profile_path)
        if is_browser_running(PROCESS_NAMES[browser]):
            logger.info("%s is running; reading from a copy of its database",
                        browser.display_name)
        bookmarks = parse_firefox_bookmarks(profile_path)

    else:
        raise BrowserDetectionError("Could not detect browser")

    logger.info("Found %d bookmarks", len(bookmarks))
    return bookmarks
