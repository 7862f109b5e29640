"""User interface components."""

from playlist_manager.ui.console import ConsoleUI
from playlist_manager.ui.display import (
    display_playlist,
    display_playlists,
    display_search_results,
    display_video,
    display_videos,
    format_result_count,
    format_views,
)

__all__ = [
    "ConsoleUI",
    "display_playlist",
    "display_playlists",
    "display_search_results",
    "display_video",
    "display_videos",
    "format_result_count",
    "format_views",
]
