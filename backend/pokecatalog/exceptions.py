# backend/pokecatalog/exceptions.py
from typing import Optional


class CatalogError(Exception):
    """Base error for anything that goes wrong talking to the catalog."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ResourceNotFoundError(CatalogError):
    """The catalog has no resource at the requested key (HTTP 404)."""


class UpstreamError(CatalogError):
    """Any other non-success status, timeout or transport failure."""


class MalformedResponseError(CatalogError):
    """Success status, but the body doesn't have the expected shape."""


class InvalidKeyError(ValueError):
    """Caller passed a key, bound or category name that can never match anything."""
