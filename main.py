"""Entry point for Bookmark Analyzer."""

import argparse
import json
import logging
import sys

from bookmark_analyzer.errors import BookmarkError
from bookmark_analyzer.operations.browser_detect import Browser
from bookmark_analyzer.operations.extractor import get_bookmarks
from bookmark_analyzer.utils.config import (
    create_default_config,
    get_browser_override,
    get_log_level,
)
from bookmark_analyzer.utils.logging_setup import setup_logging
from bookmark_analyzer.version import __version__

logger = logging.getLogger("bookmark_analyzer")

BROWSER_CHOICES = [b.value for b in Browser if b != Browser.UNKNOWN]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookmark-analyzer",
        description="Read bookmarks from the default web browser.",
    )
    parser.add_argument("--browser", choices=BROWSER_CHOICES,
                        help="read this browser instead of the detected default")
    parser.add_argument("--json", action="store_true",
                        help="print bookmarks as a JSON array")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _resolve_browser(name):
    """Turn a CLI or config browser name into a Browser, or None to detect."""
    if name is None:
        return None
    try:
        browser = Browser(name)
    except ValueError:
        logger.warning("Ignoring unknown browser %r in config", name)
        return None
    return None if browser == Browser.UNKNOWN else browser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    create_default_config()
    setup_logging("DEBUG" if args.verbose else get_log_level())

    browser = _resolve_browser(args.browser or get_browser_override())

    try:
        bookmarks = get_bookmarks(browser)
    except BookmarkError as e:
        logger.error("Error reading bookmarks: %s", e)
        return 1

    if args.json:
        json.dump([b.to_dict() for b in bookmarks], sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
    else:
        for bookmark in bookmarks:
            print(f"{bookmark.name}\t{bookmark.url}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
