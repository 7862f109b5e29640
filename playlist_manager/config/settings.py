"""Configuration settings and constants for the playlist_manager package."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

# Upstream catalog
DEFAULT_API_URL: str = 'https://mock-youtube-api.herokuapp.com/api/videos'
FIRST_PAGE: int = 1
YOUTUBE_EMBED_URL: str = 'https://www.youtube.com/embed/{video_id}'

# Playlist storage
DEFAULT_DATA_DIR = Path.home() / '.playlist_manager'
STORE_FILENAME: str = 'user_playlists.db'
STORE_TABLE: str = 'user_playlists'
STORE_TIMEOUT_SECONDS: float = 10.0
USER_ID_FILENAME: str = 'user_id'

# Logging
LOG_FILENAME: str = 'playlist_manager.log'

# Environment variables
ENV_API_URL: str = 'PLAYLIST_MANAGER_API_URL'
ENV_REQUEST_TIMEOUT: str = 'PLAYLIST_MANAGER_REQUEST_TIMEOUT'
ENV_DATA_DIR: str = 'PLAYLIST_MANAGER_DATA_DIR'
ENV_USER: str = 'PLAYLIST_MANAGER_USER'


@dataclass
class Settings:
    """
    Runtime settings.

    Attributes:
        api_url: URL of the paginated video catalog endpoint.
        request_timeout: Seconds before an upstream request is abandoned,
            or None to block until the upstream answers.
        data_dir: Directory holding the playlist store and the user id file.
        user_id: Fixed user identity, or None to use the remembered one.
    """

    api_url: str = DEFAULT_API_URL
    request_timeout: Optional[float] = None
    data_dir: Path = DEFAULT_DATA_DIR
    user_id: Optional[str] = None

    @property
    def store_path(self) -> Path:
        """Path of the SQLite playlist store."""
        return self.data_dir / STORE_FILENAME

    @property
    def user_id_path(self) -> Path:
        """Path of the file remembering the generated user identity."""
        return self.data_dir / USER_ID_FILENAME


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {ENV_REQUEST_TIMEOUT} value: {raw!r}")
        return None


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Build Settings from a .env file and the process environment.

    Args:
        env_file: Explicit .env path. Defaults to python-dotenv's lookup.

    Returns:
        Populated Settings instance.
    """
    load_dotenv(dotenv_path=env_file)

    data_dir = os.getenv(ENV_DATA_DIR)
    return Settings(
        api_url=os.getenv(ENV_API_URL) or DEFAULT_API_URL,
        request_timeout=_parse_timeout(os.getenv(ENV_REQUEST_TIMEOUT)),
        data_dir=Path(data_dir).expanduser() if data_dir else DEFAULT_DATA_DIR,
        user_id=os.getenv(ENV_USER) or None,
    )
