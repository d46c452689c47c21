"""Static registry of Media Tracker collection endpoints.

Paths end with ``/`` so item-scoped requests are built by plain
concatenation (``endpoint + id``). Stores receive a path from here as
configuration; nothing is discovered at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pymediatracker.exceptions import MediaTrackerConfigError

_API_PREFIX = "/media-tracker/v1"

YOUTUBE_VIDEOS = "youtube.videos"
YOUTUBE_CHANNELS = "youtube.channels"
YOUTUBE_VISUALIZATIONS = "youtube.visualizations"

ENDPOINTS: Mapping[str, str] = MappingProxyType(
    {
        YOUTUBE_VIDEOS: f"{_API_PREFIX}/youtube/videos/",
        YOUTUBE_CHANNELS: f"{_API_PREFIX}/youtube/channels/",
        YOUTUBE_VISUALIZATIONS: f"{_API_PREFIX}/youtube/visualizations/",
    }
)


def endpoint_for(key: str) -> str:
    """Return the collection path registered under *key*."""
    try:
        return ENDPOINTS[key]
    except KeyError:
        known = ", ".join(sorted(ENDPOINTS))
        raise MediaTrackerConfigError(f"Unknown endpoint key {key!r} (known: {known})") from None
