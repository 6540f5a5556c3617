"""
Playlist: a named, ordered collection of songs.

Duplicates are allowed. Order is insertion order until shuffle() is called.
"""

import logging
import random
from typing import List, Optional, Tuple

from .search import SongPredicate
from .song import Song

logger = logging.getLogger(__name__)


class Playlist:
    """Ordered mutable song collection with an immutable name."""

    def __init__(self, name: str):
        self._name = name
        self._songs: List[Song] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def songs(self) -> Tuple[Song, ...]:
        """Snapshot of the songs; mutating it cannot touch the playlist."""
        return tuple(self._songs)

    def add_song(self, song: Song) -> None:
        """Append a song to the end of the playlist."""
        self._songs.append(song)
        logger.debug(f"Added '{song.title}' to {self._name}")

    def remove_song(self, title: str) -> bool:
        """
        Remove every song whose title matches case-insensitively.

        Args:
            title: Title to remove

        Returns:
            True if at least one song was removed.
        """
        kept = [song for song in self._songs if not song.matches_title(title)]
        removed = len(self._songs) - len(kept)
        self._songs = kept

        if removed:
            logger.debug(f"Removed {removed} song(s) titled '{title}' from {self._name}")
        return removed > 0

    def search(self, predicate: SongPredicate) -> List[Song]:
        """Return the songs satisfying predicate, in playlist order."""
        return [song for song in self._songs if predicate(song)]

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """
        Reorder songs into a random permutation in place.

        Args:
            rng: Random source; module-level random if None
        """
        (rng or random).shuffle(self._songs)
        logger.debug(f"Shuffled {self._name} ({len(self._songs)} songs)")

    def __len__(self) -> int:
        return len(self._songs)

    def __str__(self) -> str:
        return f"{self._name} ({len(self._songs)} songs)"

    def __repr__(self) -> str:
        return f"Playlist(name={self._name!r}, songs={len(self._songs)})"
