"""Exceptions raised by the Hue bridge client."""

from __future__ import annotations

from typing import Optional


class HueError(Exception):
    """Base class for Hue bridge errors."""


class DiscoveryError(HueError):
    """No bridge could be located through the discovery endpoint."""


class UpstreamError(HueError):
    """The bridge answered a read request with a failure."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.status_code}: {self.message}"


class MalformedResponseError(HueError):
    """The bridge returned a body that does not have the expected shape."""
