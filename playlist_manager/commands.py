"""Command handlers behind the playlist-manager CLI."""

import argparse
from typing import Callable, Dict

from loguru import logger

from playlist_manager.config.context import AppContext
from playlist_manager.models.playlist import Playlist
from playlist_manager.ui import (
    ConsoleUI,
    display_playlist,
    display_playlists,
    display_search_results,
    display_video,
    display_videos,
)


def run_videos(ctx: AppContext, args: argparse.Namespace, console: ConsoleUI) -> None:
    """List one catalog page, or the whole catalog."""
    if args.page is None:
        videos = ctx.refresh_catalog()
        display_videos(console, videos, title="Catalog")
        return

    videos = ctx.browse_page(args.page)
    display_videos(console, videos, title=f"Catalog page {args.page}")
    if videos and ctx.has_next_page(args.page):
        console.print_info(f"More videos on page {args.page + 1}")


def run_search(ctx: AppContext, args: argparse.Namespace, console: ConsoleUI) -> None:
    """Search titles and print the ranked results."""
    query = " ".join(args.query)
    keywords, videos = ctx.search(query)
    display_search_results(console, keywords, videos)


def run_watch(ctx: AppContext, args: argparse.Namespace, console: ConsoleUI) -> None:
    """Show one video."""
    display_video(console, ctx.catalog.require_video(args.video_id))


def _playlist_list(ctx: AppContext, args: argparse.Namespace, console: ConsoleUI) -> None:
    user = ctx.load_user()
    display_playlists(console, user.playlist_collection.get_all())


def _playlist_create(ctx: AppContext, args: argparse.Namespace, console: ConsoleUI) -> None:
    user = ctx.load_user()
    playlist = Playlist(name=args.name, videos=args.video_ids, id_factory=ctx.id_factory)
    user.playlist_collection.add(playlist)
    console.print_success(f"Created playlist {playlist.name!r} ({playlist.id})")
    display_playlists(console, user.playlist_collection.get_all(first=playlist.id))


def _playlist_add(ctx: AppContext, args: argparse.Namespace, console: ConsoleUI) -> None:
    user = ctx.load_user()
    playlist = user.playlist_collection.require(args.playlist_id)
    playlist.add(args.video_ids)
    console.print_success(f"Added {len(args.video_ids)} video(s) to {playlist.name!r}")
    display_playlists(console, user.playlist_collection.get_all(first=playlist.id))


def _playlist_show(ctx: AppContext, args: argparse.Namespace, console: ConsoleUI) -> None:
    playlist = ctx.load_user().playlist_collection.require(args.playlist_id)
    entries = list(playlist.iter_videos(ctx.catalog, skip_unresolved=args.skip_missing))
    display_playlist(console, playlist, entries)


def _playlist_remove(ctx: AppContext, args: argparse.Namespace, console: ConsoleUI) -> None:
    playlist = ctx.load_user().playlist_collection.require(args.playlist_id)
    removed = playlist.remove_at(args.index)
    console.print_success(f"Removed video {removed} from {playlist.name!r}")


def _playlist_reorder(ctx: AppContext, args: argparse.Namespace, console: ConsoleUI) -> None:
    playlist = ctx.load_user().playlist_collection.require(args.playlist_id)
    if sorted(args.indices) != list(range(len(playlist))):
        console.print_warning("Indices are not a permutation: entries will be dropped or repeated")
    playlist.reorder(args.indices)
    console.print_success(f"Reordered {playlist.name!r}")


def _playlist_rename(ctx: AppContext, args: argparse.Namespace, console: ConsoleUI) -> None:
    playlist = ctx.load_user().playlist_collection.require(args.playlist_id)
    playlist.rename(args.name)
    console.print_success(f"Renamed playlist {playlist.id} to {playlist.name!r}")


def _playlist_delete(ctx: AppContext, args: argparse.Namespace, console: ConsoleUI) -> None:
    collection = ctx.load_user().playlist_collection
    playlist = collection.require(args.playlist_id)
    collection.delete(playlist)
    console.print_success(f"Deleted playlist {playlist.name!r}")


PLAYLIST_ACTIONS: Dict[str, Callable[[AppContext, argparse.Namespace, ConsoleUI], None]] = {
    'list': _playlist_list,
    'create': _playlist_create,
    'add': _playlist_add,
    'show': _playlist_show,
    'remove': _playlist_remove,
    'reorder': _playlist_reorder,
    'rename': _playlist_rename,
    'delete': _playlist_delete,
}


def run_playlists(ctx: AppContext, args: argparse.Namespace, console: ConsoleUI) -> None:
    """Dispatch a playlist sub-action."""
    logger.debug(f"Playlist action: {args.action}")
    PLAYLIST_ACTIONS[args.action](ctx, args, console)


COMMANDS: Dict[str, Callable[[AppContext, argparse.Namespace, ConsoleUI], None]] = {
    'videos': run_videos,
    'search': run_search,
    'watch': run_watch,
    'playlists': run_playlists,
}


def dispatch(ctx: AppContext, args: argparse.Namespace, console: ConsoleUI) -> None:
    """Run the handler of the parsed command."""
    COMMANDS[args.command](ctx, args, console)
