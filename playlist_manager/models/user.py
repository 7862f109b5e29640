"""User and per-user playlist collection.

Persistence follows a write-through policy: every mutation of the collection,
or of one of its playlists, synchronously re-saves the whole user snapshot
before returning. A rejected save restores the in-memory state the mutation
started from. There is no transaction spanning several mutations.
"""

from typing import Any, Dict, List, Optional

from loguru import logger

from playlist_manager.models.exceptions import PlaylistNotFoundError
from playlist_manager.models.playlist import Playlist
from playlist_manager.storage.playlist_store import PlaylistStore


class PlaylistCollection:
    """
    Playlists of one user, keyed by playlist identity.

    Every playlist held here is bound to the owning user.
    """

    def __init__(self, user: "User", playlists: Optional[Dict[str, Playlist]] = None) -> None:
        self._user = user
        self._playlists: Dict[str, Playlist] = {}
        for playlist in (playlists or {}).values():
            self._attach(playlist)

    def _attach(self, playlist: Playlist) -> None:
        playlist.bind(self._user.id, self._user.save)
        self._playlists[playlist.id] = playlist

    def _save_or_restore(self, playlists: Dict[str, Playlist]) -> None:
        # A rejected save puts the previous playlists back
        try:
            self._user.save()
        except Exception:
            self._playlists = playlists
            raise

    def add(self, playlist: Playlist) -> None:
        """Bind ``playlist`` to the user, store it (replacing a same-id entry) and save."""
        previous = dict(self._playlists)
        self._attach(playlist)
        self._save_or_restore(previous)
        logger.info(f"User {self._user.id}: added playlist {playlist.id} ({playlist.name!r})")

    def delete(self, playlist: Playlist) -> None:
        """Remove ``playlist`` if present, then save."""
        previous = dict(self._playlists)
        removed = self._playlists.pop(playlist.id, None)
        self._save_or_restore(previous)
        if removed is not None:
            logger.info(f"User {self._user.id}: deleted playlist {playlist.id}")

    def get(self, playlist_id: str) -> Optional[Playlist]:
        """Return the playlist with this identity, or None."""
        return self._playlists.get(playlist_id)

    def require(self, playlist_id: str) -> Playlist:
        """
        Return the playlist with this identity.

        Raises:
            PlaylistNotFoundError: If the user has no such playlist.
        """
        playlist = self.get(playlist_id)
        if playlist is None:
            raise PlaylistNotFoundError(playlist_id)
        return playlist

    def get_all(self, first: Optional[str] = None) -> List[Playlist]:
        """
        Return every playlist.

        Args:
            first: Identity of a playlist to list first (most recently used).
        """
        playlists = list(self._playlists.values())
        if first is not None:
            playlists.sort(key=lambda p: p.id != first)
        return playlists

    def __len__(self) -> int:
        return len(self._playlists)

    def __contains__(self, playlist_id: object) -> bool:
        return playlist_id in self._playlists

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {playlist_id: p.to_dict() for playlist_id, p in self._playlists.items()}


class User:
    """
    Owner of one playlist collection.

    Use User.load rather than the constructor: it creates and persists
    unseen users and rebuilds known ones from their snapshot.

    Attributes:
        id: Opaque user identity.
        playlist_collection: The user's playlists.
    """

    def __init__(self, user_id: str, store: PlaylistStore) -> None:
        self.id = user_id
        self._store = store
        self.playlist_collection = PlaylistCollection(self)

    @classmethod
    def load(cls, store: PlaylistStore, user_id: str) -> "User":
        """
        Load a user, creating and persisting it on first reference.

        Args:
            store: Playlist store holding user snapshots.
            user_id: User identity.

        Returns:
            The loaded or newly created User.
        """
        snapshot = store.read(user_id)
        if snapshot is None:
            user = cls(user_id, store)
            logger.info(f"Created user {user_id}")
            user.save()
            return user
        return cls.from_dict(store, snapshot)

    @classmethod
    def from_dict(cls, store: PlaylistStore, data: Dict[str, Any]) -> "User":
        """Rebuild a user and its bound playlists from a snapshot."""
        user = cls(data['id'], store)
        playlists = {
            playlist_id: Playlist.from_dict(playlist_data)
            for playlist_id, playlist_data in (data.get('playlists') or {}).items()
        }
        user.playlist_collection = PlaylistCollection(user, playlists)
        return user

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot: identity plus every playlist's id, name and videos."""
        return {'id': self.id, 'playlists': self.playlist_collection.to_dict()}

    def save(self) -> None:
        """Write the full snapshot to the store."""
        self._store.write(self.id, self.to_dict())
