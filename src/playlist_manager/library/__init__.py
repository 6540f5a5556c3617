"""
Library Module: Songs, playlists and search predicates.

- Song is an immutable value
- Playlist keeps insertion order until shuffled
- Search fields map to pure matching functions
"""

__all__ = ["song", "playlist", "search"]
