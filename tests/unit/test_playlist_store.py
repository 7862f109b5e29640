"""Tests for the SQLite playlist store."""

import pytest

from playlist_manager.exceptions import StorageError
from playlist_manager.storage.playlist_store import PlaylistStore


class TestPlaylistStore:
    """Tests for the PlaylistStore class."""

    def test_creates_file_and_table(self, tmp_path):
        """Opening the store creates the database and its table."""
        db_path = tmp_path / "nested" / "store.db"
        store = PlaylistStore(db_path)

        assert db_path.exists()
        cursor = store.conn.cursor()
        cursor.execute("SELECT name FROM sqlite_master WHERE type='table'")
        assert "user_playlists" in {row[0] for row in cursor.fetchall()}
        store.close()

    def test_read_missing_returns_none(self, store):
        assert store.read("nobody") is None

    def test_write_then_read(self, store):
        snapshot = {"id": "u1", "playlists": {}}
        store.write("u1", snapshot)
        assert store.read("u1") == snapshot

    def test_write_replaces(self, store):
        store.write("u1", {"version": 1})
        store.write("u1", {"version": 2})
        assert store.read("u1") == {"version": 2}

    def test_exists(self, store):
        assert store.exists("u1") is False
        store.write("u1", {})
        assert store.exists("u1") is True

    def test_visible_from_another_connection(self, tmp_path):
        """A committed write is visible to a second store on the same file."""
        db_path = tmp_path / "shared.db"
        with PlaylistStore(db_path) as writer, PlaylistStore(db_path) as reader:
            writer.write("u1", {"id": "u1"})
            assert reader.read("u1") == {"id": "u1"}

    def test_persists_across_reopen(self, tmp_path):
        db_path = tmp_path / "persist.db"
        with PlaylistStore(db_path) as store:
            store.write("u1", {"id": "u1", "playlists": {"p": {"id": "p", "name": "n", "videos": [1]}}})
        with PlaylistStore(db_path) as store:
            assert store.read("u1")["playlists"]["p"]["videos"] == [1]

    def test_closed_store_raises(self, tmp_path):
        store = PlaylistStore(tmp_path / "closed.db")
        store.close()
        assert store.conn is None
        with pytest.raises(StorageError):
            store.read("u1")
        with pytest.raises(StorageError):
            store.write("u1", {})

    def test_failed_write_leaves_previous_value(self, store):
        """A write failing inside the transaction is rolled back."""
        store.write("u1", {"version": 1})
        store.conn.execute(
            "CREATE TRIGGER reject BEFORE INSERT ON user_playlists "
            "BEGIN SELECT RAISE(ABORT, 'rejected'); END"
        )

        with pytest.raises(StorageError):
            store.write("u1", {"version": 2})

        assert store.read("u1") == {"version": 1}
        assert not store.conn.in_transaction

    def test_corrupted_snapshot(self, store):
        store.conn.execute(
            "INSERT INTO user_playlists (user_id, snapshot, updated_at) VALUES (?, ?, ?)",
            ("u1", "{not json", 0)
        )
        with pytest.raises(StorageError):
            store.read("u1")

    def test_unopenable_path(self, tmp_path):
        """A directory in place of the database file cannot be opened."""
        target = tmp_path / "dir.db"
        target.mkdir()
        with pytest.raises(StorageError):
            PlaylistStore(target)
