"""Failure kinds raised while searching for GIFs."""

from __future__ import annotations


class GifGridError(Exception):
    """Base class for every gifgrid error."""


class UserInputError(GifGridError):
    """The search term was blank and the empty-term policy forbids a request."""


class GifFetchError(GifGridError):
    """A search request failed somewhere between dispatch and extraction."""


class TransportError(GifFetchError):
    """No response arrived at all (connectivity, DNS, TLS, timeout)."""


class HTTPStatusError(GifFetchError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code


class DecodeError(GifFetchError):
    """The body is not JSON, or has no top-level ``data`` array."""
