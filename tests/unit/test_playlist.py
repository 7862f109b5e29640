"""Tests for the Playlist model."""

import pytest
from unittest.mock import MagicMock

from playlist_manager.exceptions import StorageError
from playlist_manager.models.exceptions import IndexOutOfRange, UnresolvedVideoReference
from playlist_manager.models.playlist import Playlist
from playlist_manager.models.user import User


def _bound(name="Mix", videos=None):
    playlist = Playlist(name=name, videos=videos, id_factory=lambda: "pl-1")
    save = MagicMock()
    playlist.bind("user-1", save)
    return playlist, save


class TestPlaylistCreation:
    """Tests for playlist construction."""

    def test_generates_identity(self):
        playlist = Playlist(name="Mix", videos=[1], id_factory=lambda: "fresh-id")
        assert playlist.id == "fresh-id"
        assert playlist.owner_id is None

    def test_default_identities_are_unique(self):
        assert Playlist(name="A").id != Playlist(name="B").id

    def test_none_videos_means_empty(self):
        assert Playlist(name="Empty", videos=None).videos == []

    def test_videos_are_copied(self):
        source = [1, 2]
        playlist = Playlist(name="Copy", videos=source)
        source.append(3)
        playlist.videos.append(4)
        assert playlist.videos == [1, 2]


class TestPlaylistAdd:
    """Tests for add."""

    def test_appends_and_saves(self):
        playlist, save = _bound(videos=[1])
        playlist.add([2, 2, 3])
        assert playlist.videos == [1, 2, 2, 3]
        save.assert_called_once()

    def test_unbound_playlist_does_not_save(self):
        playlist = Playlist(name="Loose")
        playlist.add([1])
        assert playlist.videos == [1]


class TestPlaylistRemoveAt:
    """Tests for remove_at."""

    def test_removes_and_shifts(self):
        playlist, save = _bound(videos=[10, 20, 30])
        assert playlist.remove_at(1) == 20
        assert playlist.videos == [10, 30]
        save.assert_called_once()

    @pytest.mark.parametrize("index", [3, -1, 100])
    def test_rejects_out_of_range(self, index):
        playlist, save = _bound(videos=[10, 20, 30])
        with pytest.raises(IndexOutOfRange):
            playlist.remove_at(index)
        assert playlist.videos == [10, 20, 30]
        save.assert_not_called()

    def test_out_of_range_is_index_error(self):
        playlist, _ = _bound(videos=[])
        with pytest.raises(IndexError):
            playlist.remove_at(0)


class TestPlaylistReorder:
    """Tests for reorder."""

    def test_permutation(self):
        """reorder([2, 0, 1]) gives [old[2], old[0], old[1]]."""
        playlist, save = _bound(videos=["a", "b", "c"])
        playlist.reorder([2, 0, 1])
        assert playlist.videos == ["c", "a", "b"]
        save.assert_called_once()

    def test_subset_drops_entries(self):
        """Indices are mapped through literally: omitted entries are dropped."""
        playlist, _ = _bound(videos=["a", "b", "c"])
        playlist.reorder([2, 0])
        assert playlist.videos == ["c", "a"]

    def test_repeated_index_duplicates_entry(self):
        """Indices are mapped through literally: repeated entries are duplicated."""
        playlist, _ = _bound(videos=["a", "b"])
        playlist.reorder([1, 1, 0])
        assert playlist.videos == ["b", "b", "a"]

    @pytest.mark.parametrize("indices", [[0, 3], [-1, 0], [0, 1, 2, 5]])
    def test_rejects_out_of_range_without_mutation(self, indices):
        playlist, save = _bound(videos=["a", "b", "c"])
        with pytest.raises(IndexOutOfRange):
            playlist.reorder(indices)
        assert playlist.videos == ["a", "b", "c"]
        save.assert_not_called()

    def test_accepts_iterator(self):
        """Indices may come from any iterable, consumed once."""
        playlist, save = _bound(videos=["a", "b", "c"])
        playlist.reorder(iter([2, 1, 0]))
        assert playlist.videos == ["c", "b", "a"]
        save.assert_called_once()

    def test_iterator_with_bad_index_leaves_playlist_untouched(self):
        playlist, save = _bound(videos=["a", "b"])
        with pytest.raises(IndexOutOfRange):
            playlist.reorder(index for index in [1, 9])
        assert playlist.videos == ["a", "b"]
        save.assert_not_called()


class TestPlaylistRename:
    def test_rename_saves(self):
        playlist, save = _bound()
        playlist.rename("Road trip")
        assert playlist.name == "Road trip"
        save.assert_called_once()


class TestPlaylistFailedSave:
    """A rejected save leaves the playlist as it was."""

    @pytest.fixture
    def failing(self):
        playlist = Playlist(name="Mix", videos=[1, 2], id_factory=lambda: "pl-1")
        playlist.bind("user-1", MagicMock(side_effect=StorageError("store is closed")))
        return playlist

    def test_add(self, failing):
        with pytest.raises(StorageError):
            failing.add([3])
        assert failing.videos == [1, 2]

    def test_remove_at(self, failing):
        with pytest.raises(StorageError):
            failing.remove_at(0)
        assert failing.videos == [1, 2]

    def test_reorder(self, failing):
        with pytest.raises(StorageError):
            failing.reorder([1, 0])
        assert failing.videos == [1, 2]

    def test_rename(self, failing):
        with pytest.raises(StorageError):
            failing.rename("Other")
        assert failing.name == "Mix"

    def test_closed_store(self, store):
        """Closing the store under a bound playlist keeps memory and store in agreement."""
        user = User.load(store, "alice")
        playlist = Playlist(name="Mix", videos=[1, 2], playlist_id="p1")
        user.playlist_collection.add(playlist)
        store.close()

        with pytest.raises(StorageError):
            playlist.add([3])

        assert playlist.videos == [1, 2]


class TestPlaylistResolution:
    """Tests for resolving entries through the catalog."""

    def test_each_with_index(self, catalog):
        playlist, _ = _bound(videos=[2, "1", 2])
        seen = []

        playlist.each_with_index(catalog, lambda video, index: seen.append((video.id, index)))

        assert seen == [(2, 0), (1, 1), (2, 2)]

    def test_unresolved_reference_raises(self, catalog):
        playlist, _ = _bound(videos=[1, 99])
        with pytest.raises(UnresolvedVideoReference) as excinfo:
            list(playlist.iter_videos(catalog))
        assert excinfo.value.video_id == 99
        assert excinfo.value.index == 1

    def test_unresolved_reference_skipped(self, catalog):
        playlist, _ = _bound(videos=[99, 1])
        entries = list(playlist.iter_videos(catalog, skip_unresolved=True))
        assert [(video.id, index) for video, index in entries] == [(1, 1)]

    def test_video_at(self, catalog):
        playlist, _ = _bound(videos=[2, 1])
        assert playlist.video_at(catalog, 1).title == "Go Tutorial"
        with pytest.raises(IndexOutOfRange):
            playlist.video_at(catalog, 2)

    def test_video_at_unresolved(self, catalog):
        playlist, _ = _bound(videos=[42])
        with pytest.raises(UnresolvedVideoReference):
            playlist.video_at(catalog, 0)


class TestPlaylistSnapshot:
    def test_round_trip(self):
        playlist = Playlist(name="Mix", videos=[3, 1, 3], playlist_id="abc")
        restored = Playlist.from_dict(playlist.to_dict())
        assert restored.id == "abc"
        assert restored.name == "Mix"
        assert restored.videos == [3, 1, 3]
