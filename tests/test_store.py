"""
Unit tests for PlaylistStore.

Tests creation, lookup, add/remove, cross-playlist search, view and shuffle,
and that rejected operations never mutate the store.
"""

import random
from unittest.mock import patch

import pytest
from playlist_manager.library.search import SearchField
from playlist_manager.library.song import Song
from playlist_manager.store import (
    POPULAR_ARTISTS,
    NoPlaylistsError,
    PlaylistError,
    PlaylistExistsError,
    PlaylistNotFoundError,
    PlaylistStore,
)


@pytest.fixture
def money_trees():
    return Song("Money Trees", "Kendrick Lamar", "good kid, m.A.A.d city", "Hip-Hop")


@pytest.fixture
def store():
    return PlaylistStore(rng=random.Random(0))


@pytest.fixture
def hits_store(store, money_trees):
    """Store with 'Hits' holding one song."""
    store.create_playlist("Hits")
    store.add_song("Hits", money_trees)
    return store


class TestPopularArtists:
    def test_eight_artists(self):
        assert len(POPULAR_ARTISTS) == 8
        assert POPULAR_ARTISTS[0] == "Kendrick Lamar"
        assert isinstance(POPULAR_ARTISTS, tuple)


class TestCreatePlaylist:
    """Test playlist creation."""

    def test_create(self, store):
        playlist = store.create_playlist("Hits")
        assert playlist.name == "Hits"
        assert "Hits" in store
        assert len(store) == 1
        assert not store.is_empty()

    def test_duplicate_rejected_without_mutation(self, hits_store, money_trees):
        original = hits_store.get_playlist("Hits")

        with pytest.raises(PlaylistExistsError) as exc_info:
            hits_store.create_playlist("Hits")

        assert str(exc_info.value) == "Playlist already exists!"
        assert len(hits_store) == 1
        assert hits_store.get_playlist("Hits") is original
        assert original.songs == (money_trees,)

    def test_names_are_case_sensitive(self, store):
        store.create_playlist("Hits")
        store.create_playlist("hits")
        assert len(store) == 2

    def test_errors_share_base(self):
        assert issubclass(PlaylistExistsError, PlaylistError)
        assert issubclass(PlaylistNotFoundError, PlaylistError)
        assert issubclass(NoPlaylistsError, PlaylistError)


class TestAddSong:
    """Test adding songs through the store."""

    def test_add(self, hits_store, money_trees):
        assert hits_store.get_playlist("Hits").songs == (money_trees,)

    def test_add_to_empty_store(self, store, money_trees):
        with pytest.raises(NoPlaylistsError) as exc_info:
            store.add_song("Hits", money_trees)
        assert str(exc_info.value) == "No playlists exist yet!"
        assert store.is_empty()

    def test_add_to_missing_playlist(self, hits_store, money_trees):
        with pytest.raises(PlaylistNotFoundError) as exc_info:
            hits_store.add_song("Missing", money_trees)
        assert str(exc_info.value) == "Playlist not found!"
        assert len(hits_store) == 1
        assert len(hits_store.get_playlist("Hits")) == 1

    def test_add_count_matches_calls(self, hits_store):
        for i in range(10):
            hits_store.add_song("Hits", Song(f"Track {i}", "Drake", "Views", "Hip-Hop"))
        titles = [s.title for s in hits_store.get_playlist("Hits").songs]
        assert titles == ["Money Trees"] + [f"Track {i}" for i in range(10)]


class TestSearchSongs:
    """Test search across playlists."""

    def test_search_by_artist(self, hits_store, money_trees):
        results = hits_store.search_songs(SearchField.ARTIST, "kendrick")
        assert results == {"Hits": [money_trees]}

    def test_term_lowercased(self, hits_store, money_trees):
        results = hits_store.search_songs(SearchField.TITLE, "MONEY")
        assert results == {"Hits": [money_trees]}

    def test_playlists_without_matches_omitted(self, hits_store):
        hits_store.create_playlist("Chill")
        hits_store.add_song("Chill", Song("Formation", "Beyoncé", "Lemonade", "R&B"))

        results = hits_store.search_songs(SearchField.GENRE, "r&b")
        assert list(results) == ["Chill"]

    def test_search_spans_all_playlists(self, hits_store, money_trees):
        hits_store.create_playlist("Also")
        hits_store.add_song("Also", money_trees)

        results = hits_store.search_songs(SearchField.GENRE, "hip")
        assert results == {"Hits": [money_trees], "Also": [money_trees]}

    def test_invalid_field_matches_nothing(self, hits_store):
        assert hits_store.search_songs(SearchField.INVALID, "money") == {}

    def test_search_empty_store(self, store):
        assert store.search_songs(SearchField.TITLE, "x") == {}


class TestRemoveSong:
    """Test song removal."""

    def test_remove_case_mismatched(self, hits_store):
        assert hits_store.remove_song("Hits", "money trees") is True
        assert len(hits_store.get_playlist("Hits")) == 0

    def test_remove_missing_song(self, hits_store, money_trees):
        assert hits_store.remove_song("Hits", "Swimming Pools") is False
        assert hits_store.get_playlist("Hits").songs == (money_trees,)

    def test_remove_missing_playlist(self, hits_store):
        with pytest.raises(PlaylistNotFoundError):
            hits_store.remove_song("Missing", "Money Trees")


class TestViewPlaylists:
    """Test the rendered playlist listing."""

    def test_view(self, hits_store):
        assert hits_store.view_playlists() == [
            "Hits (1 songs)",
            "  Kendrick Lamar - Money Trees (good kid, m.A.A.d city) [Hip-Hop]",
        ]

    def test_view_empty_playlist(self, store):
        store.create_playlist("Empty")
        assert store.view_playlists() == ["Empty (0 songs)"]

    def test_view_empty_store(self, store):
        with pytest.raises(NoPlaylistsError) as exc_info:
            store.view_playlists()
        assert str(exc_info.value) == "No playlists yet!"


class TestShufflePlaylist:
    """Test shuffling through the store."""

    def test_shuffle_uses_store_rng(self, hits_store):
        playlist = hits_store.get_playlist("Hits")
        with patch.object(playlist, "shuffle") as mock_shuffle:
            hits_store.shuffle_playlist("Hits")
            mock_shuffle.assert_called_once_with(hits_store._rng)

    def test_shuffle_is_permutation(self, hits_store):
        for i in range(20):
            hits_store.add_song("Hits", Song(f"Track {i}", "Drake", "Views", "Hip-Hop"))
        before = sorted(hits_store.get_playlist("Hits").songs, key=str)

        hits_store.shuffle_playlist("Hits")

        after = hits_store.get_playlist("Hits").songs
        assert len(after) == 21
        assert sorted(after, key=str) == before

    def test_shuffle_missing_playlist(self, store):
        with pytest.raises(PlaylistNotFoundError):
            store.shuffle_playlist("Missing")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
