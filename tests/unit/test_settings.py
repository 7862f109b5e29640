"""Tests for settings loading."""

from unittest.mock import patch

from playlist_manager.config.settings import (
    DEFAULT_API_URL,
    DEFAULT_DATA_DIR,
    Settings,
    load_settings,
)


class TestSettings:
    """Tests for the Settings dataclass."""

    def test_defaults(self):
        settings = Settings()
        assert settings.api_url == DEFAULT_API_URL
        assert settings.request_timeout is None
        assert settings.user_id is None

    def test_derived_paths(self, tmp_path):
        settings = Settings(data_dir=tmp_path)
        assert settings.store_path == tmp_path / "user_playlists.db"
        assert settings.user_id_path == tmp_path / "user_id"


class TestLoadSettings:
    """Tests for load_settings."""

    def test_reads_environment(self, tmp_path):
        env = {
            "PLAYLIST_MANAGER_API_URL": "https://catalog.test/videos",
            "PLAYLIST_MANAGER_REQUEST_TIMEOUT": "3.5",
            "PLAYLIST_MANAGER_DATA_DIR": str(tmp_path),
            "PLAYLIST_MANAGER_USER": "alice",
        }
        with patch.dict("os.environ", env, clear=True):
            settings = load_settings(env_file=tmp_path / "missing.env")

        assert settings.api_url == "https://catalog.test/videos"
        assert settings.request_timeout == 3.5
        assert settings.data_dir == tmp_path
        assert settings.user_id == "alice"

    def test_defaults_when_unset(self, tmp_path):
        with patch.dict("os.environ", {}, clear=True):
            settings = load_settings(env_file=tmp_path / "missing.env")

        assert settings.api_url == DEFAULT_API_URL
        assert settings.request_timeout is None
        assert settings.data_dir == DEFAULT_DATA_DIR
        assert settings.user_id is None

    def test_invalid_timeout_ignored(self, tmp_path):
        with patch.dict("os.environ", {"PLAYLIST_MANAGER_REQUEST_TIMEOUT": "soon"}, clear=True):
            settings = load_settings(env_file=tmp_path / "missing.env")
        assert settings.request_timeout is None

    def test_reads_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("PLAYLIST_MANAGER_USER=from-file\n")
        with patch.dict("os.environ", {}, clear=True):
            settings = load_settings(env_file=env_file)
        assert settings.user_id == "from-file"
