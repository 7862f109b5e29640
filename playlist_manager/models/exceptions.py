"""Exceptions raised by the playlist and catalog models."""

from typing import Union

from playlist_manager.exceptions import NotFoundError, PlaylistManagerError


class VideoNotFoundError(NotFoundError):
    """No cached video has the requested identity."""

    def __init__(self, video_id: Union[int, str]) -> None:
        self.video_id = video_id
        super().__init__(f"Unable to find video {video_id}")


class PlaylistNotFoundError(NotFoundError):
    """The user's collection has no playlist with the requested identity."""

    def __init__(self, playlist_id: str) -> None:
        self.playlist_id = playlist_id
        super().__init__(f"Unable to find playlist {playlist_id}")


class UnresolvedVideoReference(NotFoundError):
    """
    A playlist entry points to a video the catalog no longer has.

    Attributes:
        video_id: The dangling video identity.
        index: Position of the entry in the playlist.
    """

    def __init__(self, video_id: Union[int, str], index: int) -> None:
        self.video_id = video_id
        self.index = index
        super().__init__(f"Playlist entry {index} references unknown video {video_id}")


class IndexOutOfRange(PlaylistManagerError, IndexError):
    """A playlist position is outside the current sequence."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Index {index} is out of range for a playlist of {length} video(s)")
