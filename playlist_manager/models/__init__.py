"""Data models for videos, playlists and users."""

from playlist_manager.models.exceptions import (
    IndexOutOfRange,
    PlaylistNotFoundError,
    UnresolvedVideoReference,
    VideoNotFoundError,
)
from playlist_manager.models.playlist import Playlist
from playlist_manager.models.user import PlaylistCollection, User
from playlist_manager.models.video import Video

__all__ = [
    "Video",
    "Playlist",
    "PlaylistCollection",
    "User",
    "IndexOutOfRange",
    "PlaylistNotFoundError",
    "UnresolvedVideoReference",
    "VideoNotFoundError",
]
