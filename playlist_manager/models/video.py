"""Video data model for the playlist_manager package."""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from playlist_manager.config.settings import YOUTUBE_EMBED_URL

VIDEO_ATTRIBUTES: Tuple[str, ...] = (
    'id',
    'title',
    'video_id',
    'views',
    'likes',
    'comments',
    'description',
    'thumbnail_url',
    'created_at',
    'updated_at',
)


@dataclass(frozen=True)
class Video:
    """
    Immutable record of one video from the upstream catalog.

    A re-fetched video with the same id replaces the previous record,
    it is never merged into it.
    """

    id: int
    title: str = ''
    video_id: str = ''
    views: int = 0
    likes: int = 0
    comments: int = 0
    description: str = ''
    thumbnail_url: str = ''
    created_at: str = ''
    updated_at: str = ''

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Video":
        """
        Build a Video from an upstream JSON record.

        Unknown keys are ignored, missing optional keys keep their defaults.

        Args:
            record: Decoded JSON object for one video.

        Returns:
            The corresponding Video.

        Raises:
            KeyError: If the record has no 'id'.
            TypeError, ValueError: If a counter or the id is not numeric, or
                a counter is negative.
        """
        values = {name: record[name] for name in VIDEO_ATTRIBUTES if record.get(name) is not None}
        values['id'] = int(record['id'])
        for counter in ('views', 'likes', 'comments'):
            if counter in values:
                values[counter] = int(values[counter])
                if values[counter] < 0:
                    raise ValueError(f"Negative {counter} count for video {values['id']}: {values[counter]}")
        for text in ('title', 'video_id', 'description', 'thumbnail_url', 'created_at', 'updated_at'):
            if text in values:
                values[text] = str(values[text])
        return cls(**values)

    @property
    def embed_url(self) -> str:
        """Embeddable player URL for the external video."""
        return YOUTUBE_EMBED_URL.format(video_id=self.video_id)
