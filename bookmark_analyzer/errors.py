"""Exception hierarchy for bookmark extraction."""


class BookmarkError(Exception):
    """Base exception for all bookmark extraction errors."""


class BrowserDetectionError(BookmarkError):
    """No recognizable default browser."""


class BookmarkPathError(BookmarkError):
    """Bookmark storage location could not be resolved."""


class BookmarkFileNotFoundError(BookmarkError):
    """Expected bookmark storage file does not exist."""


# Storage access
class BookmarkReadError(BookmarkError):
    """Failed to read or copy a bookmark file."""


class BookmarkParseError(BookmarkError):
    """Bookmark file content is malformed."""


class BookmarkStoreError(BookmarkError):
    """Failed to open or query a bookmark database."""
