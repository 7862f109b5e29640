"""Pytest configuration and fixtures."""

import pytest

from playlist_manager.api.catalog_client import CatalogPage
from playlist_manager.catalog.cache import CatalogCache
from playlist_manager.models.video import Video
from playlist_manager.storage.playlist_store import PlaylistStore


def make_record(video_id, title, **extra):
    """Build an upstream video record."""
    record = {
        "id": video_id,
        "title": title,
        "video_id": f"yt{video_id}",
        "views": 10,
        "likes": 2,
        "comments": 1,
        "description": f"About {title}",
        "thumbnail_url": f"https://img.example/{video_id}.jpg",
        "created_at": "2020-01-01T00:00:00Z",
        "updated_at": "2020-01-02T00:00:00Z",
    }
    record.update(extra)
    return record


class FakeCatalogClient:
    """In-memory stand-in for CatalogClient that records requested pages."""

    def __init__(self, pages, total=None):
        self.pages = pages
        self.total = total if total is not None else sum(len(v) for v in pages.values())
        self.requested = []

    def fetch_page(self, page):
        self.requested.append(page)
        return CatalogPage(page=page, videos=list(self.pages.get(page, [])), total=self.total)


@pytest.fixture
def mock_catalog_response():
    """Mock catalog API response for page 1."""
    return {
        "videos": [make_record(1, "Go Tutorial"), make_record(2, "Rust Tutorial")],
        "meta": {"total": 2},
    }


@pytest.fixture
def tutorial_videos():
    """The two-video catalog used by the search scenarios."""
    return [
        Video.from_record(make_record(1, "Go Tutorial")),
        Video.from_record(make_record(2, "Rust Tutorial")),
    ]


@pytest.fixture
def catalog(tutorial_videos):
    """CatalogCache over a single page holding the tutorial videos."""
    return CatalogCache(FakeCatalogClient({1: tutorial_videos}))


@pytest.fixture
def store(tmp_path):
    """PlaylistStore on a temporary SQLite file."""
    playlist_store = PlaylistStore(tmp_path / "playlists.db")
    yield playlist_store
    playlist_store.close()


@pytest.fixture
def record_factory():
    """Factory building upstream video records."""
    return make_record


@pytest.fixture
def fake_client_factory():
    """Factory building FakeCatalogClient instances."""
    return FakeCatalogClient
