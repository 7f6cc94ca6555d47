"""Chromium bookmark reader (Chrome, Brave, Edge)."""

import json
import logging
from pathlib import Path
from typing import List

from ..errors import BookmarkParseError, BookmarkReadError
from ..models.bookmark import Bookmark

logger = logging.getLogger(__name__)

ROOT_KEYS = ("bookmark_bar", "other", "synced")


def _extract_bookmarks(node, bookmarks: List[Bookmark]) -> None:
    """Walk a Chromium bookmark node depth-first, collecting url nodes."""
    if not isinstance(node, dict):
        return

    node_type = node.get("type")
    if node_type == "url":
        name = node.get("name")
        url = node.get("url")
        if isinstance(name, str) and isinstance(url, str) and url:
            bookmarks.append(Bookmark(name=name, url=url))
        else:
            logger.debug("Skipping url node %s without name/url", node.get("id", "?"))
    elif node_type == "folder":
        children = node.get("children")
        if isinstance(children, list):
            for child in children:
                _extract_bookmarks(child, bookmarks)


def parse_chromium_bookmarks(path: Path) -> List[Bookmark]:
    """Read a Chromium Bookmarks JSON file into a flat bookmark list.

    Args:
        path: Path to the Bookmarks file.

    Returns:
        Bookmarks from the bookmark bar, other and synced roots, in that
        order. A file without a "roots" object yields an empty list.

    Raises:
        BookmarkReadError: The file could not be read.
        BookmarkParseError: The file is not valid JSON.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise BookmarkReadError(f"Cannot read bookmark file {path}: {e}") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise BookmarkParseError(f"Invalid bookmark JSON in {path}: {e}") from e

    bookmarks: List[Bookmark] = []
    roots = data.get("roots") if isinstance(data, dict) else None
    if not isinstance(roots, dict):
        logger.warning("No bookmark roots in %s", path)
        return bookmarks

    for key in ROOT_KEYS:
        if key in roots:
            _extract_bookmarks(roots[key], bookmarks)

    return bookmarks
