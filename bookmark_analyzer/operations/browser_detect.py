"""Browser detection - default browser, running processes, bookmark paths."""

import logging
import os
import subprocess
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

import psutil

logger = logging.getLogger(__name__)


class Browser(str, Enum):
    CHROME = "chrome"
    FIREFOX = "firefox"
    BRAVE = "brave"
    EDGE = "edge"
    ZEN = "zen"
    UNKNOWN = "unknown"

    @property
    def is_chromium(self) -> bool:
        return self in (Browser.CHROME, Browser.BRAVE, Browser.EDGE)

    @property
    def is_gecko(self) -> bool:
        return self in (Browser.FIREFOX, Browser.ZEN)

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    Browser.CHROME: "Google Chrome",
    Browser.FIREFOX: "Mozilla Firefox",
    Browser.BRAVE: "Brave",
    Browser.EDGE: "Microsoft Edge",
    Browser.ZEN: "Zen Browser",
    Browser.UNKNOWN: "Unknown",
}

# Order matters: Zen desktop entries can mention firefox.
_DETECTION_ORDER = [
    Browser.ZEN,
    Browser.CHROME,
    Browser.FIREFOX,
    Browser.BRAVE,
    Browser.EDGE,
]

DEFAULT_BROWSER_COMMAND = ["xdg-settings", "get", "default-web-browser"]

# Bookmark file locations relative to $HOME
CHROMIUM_BOOKMARK_PATHS = {
    Browser.CHROME: Path(".config") / "google-chrome" / "Default" / "Bookmarks",
    Browser.BRAVE: Path(".config") / "BraveSoftware" / "Brave-Browser" / "Default" / "Bookmarks",
    Browser.EDGE: Path(".config") / "microsoft-edge" / "Default" / "Bookmarks",
}

CHROME_PROCESS_NAMES = ["chrome", "google-chrome", "google-chrome-stable"]
BRAVE_PROCESS_NAMES = ["brave", "brave-browser", "brave-browser-stable"]
EDGE_PROCESS_NAMES = ["msedge", "microsoft-edge", "microsoft-edge-stable"]
FIREFOX_PROCESS_NAMES = ["firefox", "firefox-esr", "firefox-bin"]
ZEN_PROCESS_NAMES = ["zen", "zen-bin", "zen-browser"]

PROCESS_NAMES: Dict[Browser, List[str]] = {
    Browser.CHROME: CHROME_PROCESS_NAMES,
    Browser.BRAVE: BRAVE_PROCESS_NAMES,
    Browser.EDGE: EDGE_PROCESS_NAMES,
    Browser.FIREFOX: FIREFOX_PROCESS_NAMES,
    Browser.ZEN: ZEN_PROCESS_NAMES,
    Browser.UNKNOWN: [],
}


def get_home() -> Optional[Path]:
    """Get the user's home directory from $HOME, or None if unset."""
    home = os.environ.get("HOME")
    if not home:
        return None
    return Path(home)


def classify_browser(identifier: str) -> Browser:
    """Map a default-browser identifier (e.g. 'firefox.desktop') to a Browser."""
    lowered = identifier.lower()
    for browser in _DETECTION_ORDER:
        if browser.value in lowered:
            return browser
    return Browser.UNKNOWN


def detect_browser() -> Browser:
    """Ask the desktop for its default web browser.

    Any failure to run the query yields Browser.UNKNOWN.
    """
    try:
        result = subprocess.run(
            DEFAULT_BROWSER_COMMAND,
            capture_output=True,
            timeout=5,
        )
    except (subprocess.TimeoutExpired, OSError) as e:
        logger.debug("Default browser query failed: %s", e)
        return Browser.UNKNOWN

    if result.returncode != 0:
        logger.debug("Default browser query exited with status %d", result.returncode)
        return Browser.UNKNOWN

    identifier = result.stdout.decode("utf-8", errors="replace").strip()
    browser = classify_browser(identifier)
    logger.debug("Default browser %r classified as %s", identifier, browser.value)
    return browser


def get_bookmark_path(browser: Browser) -> Optional[Path]:
    """Get the bookmark storage location for a browser.

    Chromium browsers resolve to their Bookmarks file. Gecko browsers
    resolve to the home directory; their profile is located separately.
    """
    home = get_home()
    if home is None:
        return None

    if browser.is_chromium:
        return home / CHROMIUM_BOOKMARK_PATHS[browser]
    if browser.is_gecko:
        return home
    return None


def is_browser_running(process_names: List[str]) -> bool:
    """Check if any process matching the given names is running."""
    wanted = [p.lower() for p in process_names]
    for proc in psutil.process_iter(["name"]):
        try:
            name = proc.info["name"]
            if name and name.lower() in wanted:
                return True
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            continue
    return False
