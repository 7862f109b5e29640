"""In-memory cache of the upstream video catalog."""

import threading
from typing import Dict, List, Optional, Union

from loguru import logger

from playlist_manager.api.catalog_client import CatalogClient
from playlist_manager.config.settings import FIRST_PAGE
from playlist_manager.models.exceptions import VideoNotFoundError
from playlist_manager.models.video import Video

VideoKey = Union[int, str]


class CatalogCache:
    """
    Identity-keyed cache of catalog videos.

    The cache lives as long as its owner (see AppContext) and is never
    cleared. Once populated it is not refreshed implicitly, so reads may
    be stale until the next explicit fetch.

    Attributes:
        client: Fetcher used to retrieve catalog pages.
    """

    def __init__(self, client: CatalogClient) -> None:
        """
        Initialize an empty cache.

        Args:
            client: CatalogClient used for every upstream request.
        """
        self.client = client
        self._videos: Dict[int, Video] = {}
        self._populated = False
        self._lock = threading.RLock()

    @property
    def populated(self) -> bool:
        """True once any fetch has completed successfully."""
        return self._populated

    def fetch_all(self) -> List[Video]:
        """
        Drain the catalog page by page and replace the cache contents.

        Stops on the first empty page or as soon as the number of retrieved
        videos reaches the total reported by the upstream.

        Returns:
            Every retrieved video, in fetch order.

        Raises:
            CatalogAPIError: Any upstream failure, propagated as is.
        """
        videos: List[Video] = []
        page_number = FIRST_PAGE
        while True:
            page = self.client.fetch_page(page_number)
            if page.is_empty():
                break
            videos.extend(page.videos)
            page_number += 1
            if len(videos) >= page.total:
                break

        with self._lock:
            self._videos = {video.id: video for video in videos}
            self._populated = True
        logger.info(f"Catalog loaded: {len(videos)} videos from {page_number - 1} page(s)")
        return videos

    def fetch_page(self, page: int) -> List[Video]:
        """
        Fetch one page and merge it into the cache.

        Args:
            page: Page number, starting at 1.

        Returns:
            The videos of that page, or an empty list.

        Raises:
            CatalogAPIError: Any upstream failure, propagated as is.
        """
        result = self.client.fetch_page(page)
        with self._lock:
            for video in result.videos:
                self._videos[video.id] = video
            self._populated = True
        logger.debug(f"Catalog page {page} merged: {len(result.videos)} videos")
        return list(result.videos)

    def has_next_page(self, page: int) -> bool:
        """
        Check whether the page after ``page`` has any video.

        The probed page is merged into the cache like any other fetch.
        """
        return bool(self.fetch_page(page + 1))

    def get_video(self, video_id: VideoKey) -> Optional[Video]:
        """
        Look up a cached video.

        Loads the whole catalog first if nothing was ever fetched.

        Args:
            video_id: Video identity, as an int or its decimal string.

        Returns:
            The cached Video, or None if unknown.
        """
        if not self._populated:
            self.fetch_all()

        key = _coerce_key(video_id)
        if key is None:
            return None
        with self._lock:
            return self._videos.get(key)

    def require_video(self, video_id: VideoKey) -> Video:
        """
        Look up a cached video, failing if it is unknown.

        Raises:
            VideoNotFoundError: If no video has this identity.
        """
        video = self.get_video(video_id)
        if video is None:
            raise VideoNotFoundError(video_id)
        return video

    def videos(self) -> List[Video]:
        """Return a snapshot of every cached video."""
        with self._lock:
            return list(self._videos.values())

    def __len__(self) -> int:
        """Return the number of cached videos."""
        return len(self._videos)

    def __contains__(self, video_id: object) -> bool:
        key = _coerce_key(video_id)
        return key is not None and key in self._videos


def _coerce_key(video_id: object) -> Optional[int]:
    """Convert an id coming from user input or storage to the cache key type."""
    if isinstance(video_id, bool):
        return None
    if isinstance(video_id, int):
        return video_id
    try:
        return int(str(video_id).strip())
    except ValueError:
        return None
