"""
Playlist store: process-lifetime mapping from playlist name to Playlist.

- Names are exact, case-sensitive keys
- Every check runs before any mutation, so a rejected call leaves the store untouched
- Playlists are visited in creation order
"""

import logging
import random
from typing import Dict, List, Optional

from .library.playlist import Playlist
from .library.search import SearchField, build_predicate
from .library.song import Song

logger = logging.getLogger(__name__)

# Display-only hint shown during song entry; never validated against.
POPULAR_ARTISTS = (
    "Kendrick Lamar",
    "Drake",
    "Beyoncé",
    "J. Cole",
    "Travis Scott",
    "Nicki Minaj",
    "Lil Wayne",
    "Jay-Z",
)

SONG_INDENT = "  "


class PlaylistError(Exception):
    """Base class for rejected store operations. str() is the user-facing message."""

    default_message = "Playlist operation failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class PlaylistExistsError(PlaylistError):
    default_message = "Playlist already exists!"


class PlaylistNotFoundError(PlaylistError):
    default_message = "Playlist not found!"


class NoPlaylistsError(PlaylistError):
    default_message = "No playlists exist yet!"


class PlaylistStore:
    """Owns every Playlist and exposes the operations driven by the menu."""

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random source for shuffling; a fresh unseeded one if None
        """
        self._playlists: Dict[str, Playlist] = {}
        self._rng = rng or random.Random()

    def is_empty(self) -> bool:
        return not self._playlists

    def playlists(self) -> List[Playlist]:
        return list(self._playlists.values())

    def require_playlists(self) -> None:
        """
        Raises:
            NoPlaylistsError: If the store is empty.
        """
        if self.is_empty():
            logger.warning("No playlists exist")
            raise NoPlaylistsError()

    def get_playlist(self, name: str) -> Playlist:
        """
        Look up a playlist by exact name.

        Raises:
            PlaylistNotFoundError: If no playlist has that name.
        """
        playlist = self._playlists.get(name)
        if playlist is None:
            logger.warning(f"Playlist not found: {name!r}")
            raise PlaylistNotFoundError()
        return playlist

    def create_playlist(self, name: str) -> Playlist:
        """
        Create an empty playlist.

        Raises:
            PlaylistExistsError: If the name is already taken.
        """
        if name in self._playlists:
            logger.warning(f"Rejected duplicate playlist: {name!r}")
            raise PlaylistExistsError()

        playlist = Playlist(name)
        self._playlists[name] = playlist
        logger.info(f"Created playlist {name!r}")
        return playlist

    def add_song(self, playlist_name: str, song: Song) -> Playlist:
        """
        Append a song to a named playlist.

        Raises:
            NoPlaylistsError: If the store is empty.
            PlaylistNotFoundError: If the playlist does not exist.
        """
        self.require_playlists()
        playlist = self.get_playlist(playlist_name)
        playlist.add_song(song)
        logger.info(f"Added {song} to {playlist_name!r}")
        return playlist

    def search_songs(self, field: SearchField, term: str) -> Dict[str, List[Song]]:
        """
        Search every playlist on one field.

        Args:
            field: Field to match; SearchField.INVALID matches nothing
            term: Case-insensitive substring

        Returns:
            Playlist name -> matching songs in playlist order. Playlists
            without a match are omitted.
        """
        predicate = build_predicate(field, term)
        results: Dict[str, List[Song]] = {}

        for playlist in self._playlists.values():
            matches = playlist.search(predicate)
            if matches:
                results[playlist.name] = matches

        logger.info(
            f"Search {field.value}={term!r}: "
            f"{sum(len(m) for m in results.values())} match(es) in {len(results)} playlist(s)"
        )
        return results

    def remove_song(self, playlist_name: str, title: str) -> bool:
        """
        Remove every song with a matching title from a playlist.

        Returns:
            True if anything was removed.

        Raises:
            PlaylistNotFoundError: If the playlist does not exist.
        """
        playlist = self.get_playlist(playlist_name)
        removed = playlist.remove_song(title)

        if removed:
            logger.info(f"Removed {title!r} from {playlist_name!r}")
        else:
            logger.warning(f"No song titled {title!r} in {playlist_name!r}")
        return removed

    def view_playlists(self) -> List[str]:
        """
        Render every playlist followed by its songs, indented.

        Raises:
            NoPlaylistsError: If the store is empty.
        """
        if self.is_empty():
            raise NoPlaylistsError("No playlists yet!")

        lines: List[str] = []
        for playlist in self._playlists.values():
            lines.append(str(playlist))
            lines.extend(f"{SONG_INDENT}{song}" for song in playlist.songs)
        return lines

    def shuffle_playlist(self, playlist_name: str) -> Playlist:
        """
        Shuffle a playlist in place.

        Raises:
            PlaylistNotFoundError: If the playlist does not exist.
        """
        playlist = self.get_playlist(playlist_name)
        playlist.shuffle(self._rng)
        logger.info(f"Shuffled {playlist_name!r}")
        return playlist

    def __len__(self) -> int:
        return len(self._playlists)

    def __contains__(self, name: object) -> bool:
        return name in self._playlists

    def __repr__(self) -> str:
        return f"PlaylistStore(playlists={len(self._playlists)})"
