"""Exceptions raised while talking to the upstream video catalog."""

from typing import Optional

from playlist_manager.exceptions import PlaylistManagerError


class CatalogAPIError(PlaylistManagerError):
    """Base class for all upstream catalog errors."""

    pass


class UpstreamUnavailable(CatalogAPIError):
    """The catalog host could not be reached (network, DNS, refused connection)."""

    pass


class UpstreamError(CatalogAPIError):
    """
    The catalog answered with a non-success HTTP status.

    Attributes:
        page: Page number that was requested.
        status_code: HTTP status code, when the response carried one.
        body: Raw response body.
    """

    def __init__(self, page: int, status_code: Optional[int], body: str) -> None:
        self.page = page
        self.status_code = status_code
        self.body = body
        message = f"Unable to fetch catalog page {page}."
        if status_code is not None:
            message += f" Status code: {status_code}."
        message += f" Error provided: {body}"
        super().__init__(message)


class UpstreamProtocolError(CatalogAPIError):
    """Any other failure while fetching or decoding a catalog page."""

    pass
