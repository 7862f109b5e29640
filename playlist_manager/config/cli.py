"""Command-line interface argument parsing."""

import argparse
import dataclasses
from pathlib import Path
from typing import List, Optional

from playlist_manager.config.settings import Settings


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='playlist-manager',
        description="""
        Browse and search a video catalog and manage personal playlists.
        """
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug logging"
    )
    parser.add_argument(
        '--user',
        help="user identity (default: remembered in the data directory)"
    )
    parser.add_argument(
        '--data-dir',
        help="directory holding the playlist store"
    )
    parser.add_argument(
        '--api-url',
        help="video catalog endpoint"
    )

    commands = parser.add_subparsers(dest='command', required=True)

    videos = commands.add_parser('videos', help='list catalog videos')
    videos.add_argument(
        '-p', '--page',
        type=int,
        help='only fetch this page (default: the whole catalog)'
    )

    search = commands.add_parser('search', help='search video titles')
    search.add_argument('query', nargs='+', help='title keywords')

    watch = commands.add_parser('watch', help='show one video')
    watch.add_argument('video_id', type=int)

    playlists = commands.add_parser('playlists', help='manage playlists')
    actions = playlists.add_subparsers(dest='action', required=True)

    actions.add_parser('list', help='list playlists')

    create = actions.add_parser('create', help='create a playlist')
    create.add_argument('name')
    create.add_argument('video_ids', nargs='*', type=int)

    add = actions.add_parser('add', help='append videos to a playlist')
    add.add_argument('playlist_id')
    add.add_argument('video_ids', nargs='+', type=int)

    show = actions.add_parser('show', help='show the videos of a playlist')
    show.add_argument('playlist_id')
    show.add_argument(
        '--skip-missing',
        action='store_true',
        help='skip videos no longer in the catalog'
    )

    remove = actions.add_parser('remove', help='remove the video at a position')
    remove.add_argument('playlist_id')
    remove.add_argument('index', type=int)

    reorder = actions.add_parser('reorder', help='reorder by listing old positions')
    reorder.add_argument('playlist_id')
    reorder.add_argument('indices', nargs='+', type=int)

    rename = actions.add_parser('rename', help='rename a playlist')
    rename.add_argument('playlist_id')
    rename.add_argument('name')

    delete = actions.add_parser('delete', help='delete a playlist')
    delete.add_argument('playlist_id')

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def apply_arguments(settings: Settings, namespace: argparse.Namespace) -> Settings:
    """
    Override settings with the global command-line options.

    Args:
        settings: Settings loaded from the environment.
        namespace: Parsed argparse Namespace.

    Returns:
        New Settings instance.
    """
    overrides = {}
    if namespace.user:
        overrides['user_id'] = namespace.user
    if namespace.data_dir:
        overrides['data_dir'] = Path(namespace.data_dir).expanduser()
    if namespace.api_url:
        overrides['api_url'] = namespace.api_url
    return dataclasses.replace(settings, **overrides)
