"""Custom exception hierarchy for pymediatracker."""

from __future__ import annotations

from typing import Any


class MediaTrackerError(Exception):
    """Base exception for all pymediatracker errors."""


class MediaTrackerConfigError(MediaTrackerError):
    """Invalid or missing configuration."""


class MediaTrackerTransportError(MediaTrackerError):
    """Request failed before a usable response was obtained.

    ``status_code`` is ``None`` when no response reached the server
    (connection refused, DNS failure, timeout).
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class MediaTrackerHttpError(MediaTrackerTransportError):
    """Server answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        endpoint: str = "",
        data: Any = None,
    ) -> None:
        self.data = data
        super().__init__(message, status_code=status_code, endpoint=endpoint)


class MediaTrackerDecodeError(MediaTrackerTransportError):
    """Response body was not valid JSON or did not match the item model."""
