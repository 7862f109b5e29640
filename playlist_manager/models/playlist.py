"""Playlist model: a named, ordered list of video identities."""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from loguru import logger

from playlist_manager.models.exceptions import IndexOutOfRange, UnresolvedVideoReference
from playlist_manager.models.video import Video
from playlist_manager.utils.identifiers import IdentifierFactory, new_identifier

VideoRef = Union[int, str]
SaveCallback = Callable[[], None]


class Playlist:
    """
    Ordered sequence of video identities with a fixed identity.

    Duplicated entries are allowed and order is meaningful. A playlist only
    becomes durable once added to a PlaylistCollection, which binds it to
    its owner; from then on every mutation calls the owner's save callback.

    Attributes:
        id: Identity generated at creation, never changed.
        name: Display name.
        owner_id: Identity of the owning user, or None while unattached.
    """

    def __init__(
        self,
        name: str,
        videos: Optional[Iterable[VideoRef]] = None,
        playlist_id: Optional[str] = None,
        id_factory: IdentifierFactory = new_identifier,
    ) -> None:
        """
        Create a playlist in memory.

        Args:
            name: Display name.
            videos: Initial video identities (may be empty or None).
            playlist_id: Existing identity, used when loading a snapshot.
            id_factory: Generator of fresh identities.
        """
        self._id = playlist_id or id_factory()
        self.name = name
        self._videos: List[VideoRef] = list(videos or [])
        self.owner_id: Optional[str] = None
        self._on_change: Optional[SaveCallback] = None

    @property
    def id(self) -> str:
        return self._id

    @property
    def videos(self) -> List[VideoRef]:
        """Copy of the ordered video identities."""
        return list(self._videos)

    def __len__(self) -> int:
        return len(self._videos)

    def __repr__(self) -> str:
        return f"Playlist(id={self._id!r}, name={self.name!r}, videos={self._videos!r})"

    def bind(self, owner_id: str, on_change: SaveCallback) -> None:
        """
        Attach the playlist to its owner.

        Args:
            owner_id: Identity of the owning user.
            on_change: Callback persisting the owner after a mutation.
        """
        self.owner_id = owner_id
        self._on_change = on_change

    def _commit(self, name: str, videos: List[VideoRef]) -> None:
        """
        Apply a new state and save it through the owner.

        When the save fails the previous state is restored before the error
        propagates, so memory never holds a change the store rejected.
        """
        previous = self.name, self._videos
        self.name, self._videos = name, videos
        if self._on_change is None:
            return
        try:
            self._on_change()
        except Exception:
            self.name, self._videos = previous
            logger.warning(f"Playlist {self._id}: save failed, change reverted")
            raise

    def add(self, video_ids: Iterable[VideoRef]) -> None:
        """Append video identities to the end of the playlist."""
        added = list(video_ids)
        self._commit(self.name, self._videos + added)
        logger.debug(f"Playlist {self._id}: appended {len(added)} video(s)")

    def rename(self, name: str) -> None:
        """Change the display name."""
        self._commit(name, self._videos)

    def remove_at(self, index: int) -> VideoRef:
        """
        Delete the entry at ``index``, shifting later entries left.

        Returns:
            The removed video identity.

        Raises:
            IndexOutOfRange: If ``index`` is not a position of the playlist.
        """
        self._check_index(index)
        removed = self._videos[index]
        self._commit(self.name, self._videos[:index] + self._videos[index + 1:])
        return removed

    def reorder(self, old_indices: Iterable[int]) -> None:
        """
        Rebuild the sequence from old positions.

        Entry ``n`` of the new sequence is the old entry at ``old_indices[n]``.
        The indices are mapped through as given: omitting an index drops that
        entry and repeating one duplicates it.

        Raises:
            IndexOutOfRange: If any index is out of bounds. The playlist is
                left untouched.
        """
        indices = list(old_indices)
        for index in indices:
            self._check_index(index)
        self._commit(self.name, [self._videos[index] for index in indices])

    def _check_index(self, index: int) -> None:
        # Negative positions are rejected, not counted from the end
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self._videos):
            raise IndexOutOfRange(index, len(self._videos))

    def iter_videos(self, catalog, skip_unresolved: bool = False) -> Iterator[Tuple[Video, int]]:
        """
        Resolve each entry through the catalog, in order.

        Args:
            catalog: CatalogCache used to resolve identities.
            skip_unresolved: Skip dangling entries instead of raising.

        Yields:
            (video, index) pairs.

        Raises:
            UnresolvedVideoReference: For a dangling entry, unless skipped.
        """
        for index, video_id in enumerate(list(self._videos)):
            video = catalog.get_video(video_id)
            if video is None:
                if skip_unresolved:
                    logger.warning(f"Playlist {self._id}: skipping unknown video {video_id}")
                    continue
                raise UnresolvedVideoReference(video_id, index)
            yield video, index

    def each_with_index(
        self,
        catalog,
        callback: Callable[[Video, int], Any],
        skip_unresolved: bool = False
    ) -> None:
        """Call ``callback(video, index)`` for every resolved entry."""
        for video, index in self.iter_videos(catalog, skip_unresolved):
            callback(video, index)

    def video_at(self, catalog, index: int) -> Video:
        """
        Resolve the entry at ``index``.

        Raises:
            IndexOutOfRange: If ``index`` is not a position of the playlist.
            UnresolvedVideoReference: If the entry no longer resolves.
        """
        self._check_index(index)
        video = catalog.get_video(self._videos[index])
        if video is None:
            raise UnresolvedVideoReference(self._videos[index], index)
        return video

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot used by the playlist store."""
        return {'id': self._id, 'name': self.name, 'videos': list(self._videos)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Playlist":
        """Rebuild an unattached playlist from a snapshot."""
        return cls(name=data['name'], videos=data.get('videos') or [], playlist_id=data['id'])
