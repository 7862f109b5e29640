"""Display functions for catalog and playlist output."""

from typing import Iterable, List, Sequence, Tuple

from rich.markup import escape

from playlist_manager.models.playlist import Playlist
from playlist_manager.models.video import Video
from playlist_manager.ui.console import ConsoleUI


def format_views(count: int) -> str:
    """
    Format a view counter.

    Examples:
        >>> format_views(1)
        '1 view'
        >>> format_views(12)
        '12 views'
    """
    return f"{count} view{'s' if count > 1 else ''}"


def format_result_count(count: int) -> str:
    """Format the number of search results."""
    return f"{count} result{'s' if count > 1 else ''}"


def display_videos(console: ConsoleUI, videos: Sequence[Video], title: str = "Videos") -> None:
    """
    Print videos as a table.

    Args:
        console: Console to print to.
        videos: Videos to list.
        title: Table title.
    """
    if not videos:
        console.print_warning("No results")
        return

    table = console.create_table(title, ["ID", "Title", "Views", "Likes"])
    for video in videos:
        table.add_row(str(video.id), escape(video.title), format_views(video.views), str(video.likes))
    console.print_table(table)


def display_search_results(console: ConsoleUI, keywords: List[str], videos: Sequence[Video]) -> None:
    """Print the closest matching keywords followed by the ranked videos."""
    if keywords:
        console.print(
            "Closest matching keywords: "
            + " ".join(f"[reverse]{escape(keyword)}[/reverse]" for keyword in keywords)
        )
        console.print(f"[bold]{format_result_count(len(videos))}[/bold]")
    display_videos(console, videos, title="Search results")


def display_video(console: ConsoleUI, video: Video) -> None:
    """Print the details of one video."""
    console.print_panel(
        f"[bold]{escape(video.title)}[/bold]\n"
        f"{format_views(video.views)} | {video.likes} likes | {video.comments} comments\n"
        f"Watch: [cyan]{video.embed_url}[/cyan]\n\n"
        f"{escape(video.description)}",
        title=f"Video {video.id}",
    )


def display_playlists(console: ConsoleUI, playlists: Iterable[Playlist]) -> None:
    """Print a user's playlists."""
    playlists = list(playlists)
    if not playlists:
        console.print_info("No playlists yet")
        return

    table = console.create_table("Playlists", ["ID", "Name", "Videos"])
    for playlist in playlists:
        table.add_row(playlist.id, escape(playlist.name), str(len(playlist)))
    console.print_table(table)


def display_playlist(
    console: ConsoleUI,
    playlist: Playlist,
    entries: Iterable[Tuple[Video, int]]
) -> None:
    """
    Print the resolved entries of a playlist.

    Args:
        console: Console to print to.
        playlist: Playlist being shown.
        entries: (video, index) pairs, as yielded by Playlist.iter_videos.
    """
    table = console.create_table(f"{escape(playlist.name)} ({playlist.id})", ["#", "Index", "Title", "Video ID"])
    for video, index in entries:
        table.add_row(str(index + 1), str(index), escape(video.title), str(video.id))
    console.print_table(table)
