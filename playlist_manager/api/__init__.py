"""Client for the upstream video catalog API."""

from playlist_manager.api.catalog_client import CatalogClient, CatalogPage
from playlist_manager.api.exceptions import (
    CatalogAPIError,
    UpstreamError,
    UpstreamProtocolError,
    UpstreamUnavailable,
)

__all__ = [
    "CatalogClient",
    "CatalogPage",
    "CatalogAPIError",
    "UpstreamError",
    "UpstreamProtocolError",
    "UpstreamUnavailable",
]
