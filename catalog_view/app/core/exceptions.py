"""
Error types raised by the fetch layer, the services and the renderer.

Endpoints translate these into HTTP status codes; nothing below the
endpoint layer knows about HTTP responses.
"""

from typing import Optional


class CatalogError(Exception):
    """Base class for all errors raised by the catalog view service."""


class FetchError(CatalogError):
    """The upstream API could not be read."""


class TransportError(FetchError):
    """The upstream API could not be reached."""


class DecodeError(FetchError):
    """The upstream body is not JSON of the expected shape."""


class UpstreamStatusError(FetchError):
    """The upstream API answered with a non-success status code."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(UpstreamStatusError):
    """A single vehicle lookup failed."""


class BadRequestError(CatalogError):
    """Request parameters are missing or malformed."""


class RenderError(CatalogError):
    """A page template could not be loaded or rendered."""
