"""
Search predicates over songs.

The numeric search codes only exist at the menu boundary; everything
past SearchField.from_choice works on the enum.
"""

import logging
from enum import Enum
from typing import Callable

from .song import Song

logger = logging.getLogger(__name__)

SongPredicate = Callable[[Song], bool]


class SearchField(Enum):
    """Song field a search term is matched against."""

    TITLE = "title"
    ARTIST = "artist"
    GENRE = "genre"
    INVALID = "invalid"

    @classmethod
    def from_choice(cls, choice: int) -> "SearchField":
        """
        Map a menu code to a field.

        Args:
            choice: 1 (title), 2 (artist) or 3 (genre)

        Returns:
            Matching SearchField, or SearchField.INVALID for any other code.
        """
        field = _CHOICES.get(choice, cls.INVALID)
        if field is cls.INVALID:
            logger.warning(f"Unknown search field choice: {choice}")
        return field


_CHOICES = {
    1: SearchField.TITLE,
    2: SearchField.ARTIST,
    3: SearchField.GENRE,
}


def _match_nothing(song: Song) -> bool:
    return False


def build_predicate(field: SearchField, term: str) -> SongPredicate:
    """
    Build a case-insensitive "contains" predicate for a field.

    Args:
        field: Field to match against
        term: Search term; lower-cased once here

    Returns:
        Predicate over Song. SearchField.INVALID matches nothing.
    """
    if field is SearchField.INVALID:
        return _match_nothing

    needle = term.lower()
    attribute = field.value

    def predicate(song: Song) -> bool:
        return needle in getattr(song, attribute).lower()

    return predicate
