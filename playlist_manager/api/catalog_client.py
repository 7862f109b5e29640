"""Client for the paginated upstream video catalog."""

from dataclasses import dataclass, field
from typing import Any, List, Optional

import requests
from loguru import logger

from playlist_manager.api.exceptions import (
    UpstreamError,
    UpstreamProtocolError,
    UpstreamUnavailable,
)
from playlist_manager.config.settings import DEFAULT_API_URL
from playlist_manager.models.video import Video


@dataclass
class CatalogPage:
    """
    One page of the upstream catalog.

    Attributes:
        page: Page number (1-indexed).
        videos: Videos returned on this page, in upstream order.
        total: Total number of videos the upstream reports.
    """

    page: int
    videos: List[Video] = field(default_factory=list)
    total: int = 0

    def is_empty(self) -> bool:
        """Check if the page carried no videos."""
        return not self.videos


class CatalogClient:
    """
    Client for the video catalog API.

    Fetches a single page at a time and maps every failure to one of
    UpstreamUnavailable, UpstreamError or UpstreamProtocolError.

    Attributes:
        api_url: Catalog endpoint, queried with a ``page`` parameter.
        timeout: Request timeout in seconds, or None to block indefinitely.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: Optional[float] = None
    ) -> None:
        """
        Initialize the catalog client.

        Args:
            api_url: Catalog endpoint URL.
            timeout: Request timeout in seconds (None: no timeout).
        """
        self.api_url = api_url
        self.timeout = timeout

    def fetch_page(self, page: int) -> CatalogPage:
        """
        Fetch one page of videos.

        Args:
            page: Page number, starting at 1.

        Returns:
            The decoded CatalogPage.

        Raises:
            UpstreamUnavailable: The host could not be reached.
            UpstreamError: The upstream answered with a non-success status.
            UpstreamProtocolError: Any other failure while fetching or decoding.
        """
        logger.debug(f"Fetching catalog page {page} from {self.api_url}")
        try:
            response = requests.get(
                self.api_url,
                params={'page': page},
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.ConnectionError as e:
            logger.error(f"Unable to connect to catalog API: {e}")
            raise UpstreamUnavailable('Unable to connect to API') from e
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            body = e.response.text if e.response is not None else ''
            logger.warning(f"Catalog API error on page {page}: {status_code}")
            raise UpstreamError(page, status_code, body) from e
        except requests.RequestException as e:
            logger.warning(f"Catalog request error on page {page}: {e}")
            raise UpstreamProtocolError(f'Unable to process videos of page {page}') from e

        try:
            return self._decode(page, response.json())
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Malformed catalog payload on page {page}: {e}")
            raise UpstreamProtocolError(f'Unable to process videos of page {page}') from e

    @staticmethod
    def _decode(page: int, body: Any) -> CatalogPage:
        videos = [Video.from_record(record) for record in body['videos']]
        meta = body.get('meta') or {}
        try:
            total = int(meta.get('total') or 0)
        except (TypeError, ValueError):
            total = 0
        return CatalogPage(page=page, videos=videos, total=total)
