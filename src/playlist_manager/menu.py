"""
Text menu loop over a PlaylistStore.

Reads one line per prompt, dispatches menu codes 1-7 and prints results.
Rejected operations print their message and the loop carries on; only
option 7 (or end of input, raised as EOFError) leaves the loop.
"""

import logging
import re
from typing import Callable, Dict, Optional

from .config import DEFAULT_TITLE
from .library.search import SearchField
from .library.song import Song
from .store import POPULAR_ARTISTS, PlaylistError, PlaylistStore

logger = logging.getLogger(__name__)

EXIT_CHOICE = 7

# Signed decimal that fits a 32-bit int; no whitespace or underscores
INTEGER_PATTERN = re.compile(r"[+-]?\d+")
INT_MIN, INT_MAX = -2**31, 2**31 - 1

MENU_LINES = (
    "\nMain Menu:",
    "1. Create playlist",
    "2. Add song",
    "3. Search songs",
    "4. Remove song",
    "5. View playlists",
    "6. Shuffle playlist",
    "7. Exit",
)

SEARCH_LINES = (
    "\nSearch by:",
    "1. Title",
    "2. Artist",
    "3. Genre",
)


def parse_int(line: str) -> Optional[int]:
    """Parse a raw line as a 32-bit integer, or None if it is not one."""
    if not INTEGER_PATTERN.fullmatch(line):
        return None
    value = int(line)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value

class MenuLoop:
    """Line-oriented request/response loop."""

    def __init__(
        self,
        store: PlaylistStore,
        read_line: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
        title: str = DEFAULT_TITLE,
    ):
        """
        Args:
            store: Store the menu operates on
            read_line: Shows a prompt and returns one raw line (builtin input by default)
            write: Prints one line of output
            title: Banner printed once when the loop starts
        """
        self.store = store
        self._read_line = read_line or input
        self._write = write or print
        self.title = title
        self._actions: Dict[int, Callable[[], None]] = {
            1: self.create_playlist,
            2: self.add_song,
            3: self.search_songs,
            4: self.remove_song,
            5: self.view_playlists,
            6: self.shuffle_playlist,
        }

    def run(self) -> None:
        """Run until the exit option is chosen."""
        self._write(self.title)

        while True:
            self._print_menu()
            choice = self.read_int("Choose an option: ")

            if choice == EXIT_CHOICE:
                self._write("Goodbye!")
                logger.info("Exit requested")
                return

            action = self._actions.get(choice)
            if action is None:
                self._write("Invalid choice")
                continue

            try:
                action()
            except PlaylistError as e:
                self._write(str(e))

    def read_int(self, prompt: str) -> int:
        """Prompt until the line parses as an integer. No retry limit."""
        while True:
            line = self._read_line(prompt)
            value = parse_int(line)
            if value is None:
                logger.debug(f"Rejected non-integer input: {line!r}")
                self._write("Please enter a valid number")
            else:
                return value

    def read_str(self, prompt: str) -> str:
        return self._read_line(prompt)

    def _print_menu(self) -> None:
        for line in MENU_LINES:
            self._write(line)

    def create_playlist(self) -> None:
        name = self.read_str("Enter playlist name: ")
        self.store.create_playlist(name)
        self._write(f"Playlist created: {name}")

    def add_song(self) -> None:
        # Checked before any prompt
        self.store.require_playlists()

        playlist_name = self.read_str("Enter playlist name: ")
        self.store.get_playlist(playlist_name)

        self._write("\nPopular Artists:")
        for artist in POPULAR_ARTISTS:
            self._write(f"- {artist}")

        artist = self.read_str("\nArtist: ")
        title = self.read_str("Title: ")
        album = self.read_str("Album: ")
        genre = self.read_str("Genre: ")

        self.store.add_song(playlist_name, Song(title, artist, album, genre))
        self._write("Song added!")

    def search_songs(self) -> None:
        for line in SEARCH_LINES:
            self._write(line)

        field = SearchField.from_choice(self.read_int("Your choice: "))
        term = self.read_str("Search term: ")

        for playlist_name, songs in self.store.search_songs(field, term).items():
            self._write(f"\nFound in {playlist_name}:")
            for song in songs:
                self._write(str(song))

    def remove_song(self) -> None:
        playlist_name = self.read_str("Enter playlist name: ")
        self.store.get_playlist(playlist_name)

        title = self.read_str("Enter song title to remove: ")
        if self.store.remove_song(playlist_name, title):
            self._write("Song removed successfully")
        else:
            self._write("Song not found in playlist")

    def view_playlists(self) -> None:
        lines = self.store.view_playlists()
        self._write("\nYour Playlists:")
        for line in lines:
            self._write(line)

    def shuffle_playlist(self) -> None:
        playlist_name = self.read_str("Enter playlist name to shuffle: ")
        self.store.shuffle_playlist(playlist_name)
        self._write("Playlist shuffled!")

