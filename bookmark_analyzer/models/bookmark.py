"""Bookmark data model."""

from dataclasses import dataclass

UNTITLED = "Untitled"


@dataclass
class Bookmark:
    name: str
    url: str

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.name,
            "url": self.url,
        }
