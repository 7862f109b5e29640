"""Entry point for the playlist_manager package.

Run with: python -m playlist_manager
"""

import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from playlist_manager.commands import dispatch
from playlist_manager.config.cli import apply_arguments, parse_arguments
from playlist_manager.config.context import open_context
from playlist_manager.config.settings import LOG_FILENAME, load_settings
from playlist_manager.exceptions import PlaylistManagerError
from playlist_manager.ui import ConsoleUI


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, enable debug-level logging on stderr.
        log_file: File sink path (default: playlist_manager.log).
    """
    logger.remove()
    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    logger.add(
        log_file or LOG_FILENAME,
        rotation="10 MB",
        retention="7 days",
        level="DEBUG",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the playlist manager.

    Returns:
        Exit code (0 for success, 1 when an operation failed).
    """
    namespace = parse_arguments(argv)
    settings = apply_arguments(load_settings(), namespace)

    setup_logging(namespace.debug, settings.data_dir / LOG_FILENAME)
    console = ConsoleUI()

    try:
        with open_context(settings) as ctx:
            dispatch(ctx, namespace, console)
    except PlaylistManagerError as e:
        logger.error(f"{namespace.command} failed: {e}")
        console.print_error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
