"""
Playlist Manager - personal video playlists over a paginated video catalog.

Provides:
- A cached view of the upstream video catalog
- Keyword search with nearest-token matching over video titles
- Durable per-user playlists with insertion, reordering and deletion
"""

__version__ = "0.1.0"
