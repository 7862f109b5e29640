"""Application context owning the catalog services and the playlist store."""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generator, List, Optional

from loguru import logger

from playlist_manager.api.catalog_client import CatalogClient
from playlist_manager.catalog.cache import CatalogCache
from playlist_manager.catalog.search import SearchIndex, SearchResult
from playlist_manager.config.settings import Settings
from playlist_manager.models.user import User
from playlist_manager.models.video import Video
from playlist_manager.storage.playlist_store import PlaylistStore
from playlist_manager.utils.identifiers import IdentifierFactory, new_identifier


@dataclass
class AppContext:
    """
    Services shared by every operation of one process.

    Replaces process-wide globals: callers receive the context and reach
    the catalog, the search index and the store through it.

    Attributes:
        settings: Runtime settings.
        catalog: Cache of the upstream catalog.
        index: Title search index built from the catalog.
        store: Durable playlist store.
        id_factory: Generator of user and playlist identities.
    """

    settings: Settings
    catalog: CatalogCache
    index: SearchIndex
    store: PlaylistStore
    id_factory: IdentifierFactory = new_identifier

    @classmethod
    def create(cls, settings: Settings) -> "AppContext":
        """Build every service from settings and open the store."""
        client = CatalogClient(api_url=settings.api_url, timeout=settings.request_timeout)
        return cls(
            settings=settings,
            catalog=CatalogCache(client),
            index=SearchIndex(),
            store=PlaylistStore(settings.store_path),
        )

    def refresh_catalog(self) -> List[Video]:
        """Load the whole catalog and add it to the search index."""
        videos = self.catalog.fetch_all()
        self.index.build_index(videos)
        return videos

    def ensure_index(self) -> None:
        """Populate the catalog and the index on first use only."""
        if not self.index.is_built:
            if self.catalog.populated:
                self.index.build_index(self.catalog.videos())
            else:
                self.refresh_catalog()

    def browse_page(self, page: int) -> List[Video]:
        """Fetch one catalog page and add its videos to the index."""
        videos = self.catalog.fetch_page(page)
        self.index.build_index(videos)
        return videos

    def has_next_page(self, page: int) -> bool:
        """Probe the page after ``page``; its videos are cached and indexed like a browsed page."""
        return bool(self.browse_page(page + 1))

    def search(self, query: str) -> SearchResult:
        """Search titles, building the index first if needed."""
        self.ensure_index()
        return self.index.search(query)

    def resolve_user_id(self) -> str:
        """
        Return the configured user identity.

        Falls back to the identity remembered in the data directory, and
        generates and remembers a new one when there is none.
        """
        if self.settings.user_id:
            return self.settings.user_id

        path = self.settings.user_id_path
        if path.exists():
            remembered = path.read_text(encoding='utf-8').strip()
            if remembered:
                return remembered

        user_id = self.id_factory()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(user_id, encoding='utf-8')
        logger.info(f"Generated new user identity {user_id}")
        return user_id

    def load_user(self, user_id: Optional[str] = None) -> User:
        """Load (or create) the given user, defaulting to the resolved one."""
        return User.load(self.store, user_id or self.resolve_user_id())

    def close(self) -> None:
        """Release the playlist store."""
        self.store.close()


@contextmanager
def open_context(settings: Settings) -> Generator[AppContext, None, None]:
    """
    Context manager building an AppContext and closing it on exit.

    Example:
        with open_context(load_settings()) as ctx:
            user = ctx.load_user()
    """
    ctx = AppContext.create(settings)
    try:
        yield ctx
    finally:
        ctx.close()
