"""Base exception for the playlist_manager package."""


class PlaylistManagerError(Exception):
    """Base class for every error raised by playlist_manager."""

    pass


class NotFoundError(PlaylistManagerError):
    """A video or playlist identity is absent."""

    pass


class StorageError(PlaylistManagerError):
    """The playlist store could not complete a read or write."""

    pass
