"""
Song value type.

Rendered as "<artist> - <title> (<album>) [<genre>]".
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Song:
    """Immutable container for one track's tags. No validation is applied."""

    title: str
    artist: str
    album: str
    genre: str

    def matches_title(self, title: str) -> bool:
        """Case-insensitive title comparison used for removal."""
        return self.title.lower() == title.lower()

    def __str__(self) -> str:
        return f"{self.artist} - {self.title} ({self.album}) [{self.genre}]"
