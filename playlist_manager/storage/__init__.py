"""Durable storage for user playlists."""

from playlist_manager.storage.playlist_store import PlaylistStore

__all__ = ["PlaylistStore"]
