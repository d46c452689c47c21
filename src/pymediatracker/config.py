"""Client configuration for pymediatracker."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pymediatracker._constants import (
    API_KEY_HEADER,
    DEFAULT_TIMEOUT_S,
    ENV_API_KEY,
    ENV_BASE_URL,
    ENV_TIMEOUT,
)
from pymediatracker.exceptions import MediaTrackerConfigError


@dataclasses.dataclass(frozen=True)
class MediaTrackerConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        API base URL (e.g. ``"http://localhost:8000"``). Endpoint paths are
        appended verbatim, so no trailing slash is expected.
    api_key : str
        Static API key sent with every request.
    timeout : float
        Total per-request timeout in seconds. A timed-out request surfaces
        as a transport failure with no status.
    api_key_header : str
        Header name carrying ``api_key``.
    """

    base_url: str
    api_key: str = ""
    timeout: float = DEFAULT_TIMEOUT_S
    api_key_header: str = API_KEY_HEADER

    @classmethod
    def from_env(cls, **overrides: Any) -> MediaTrackerConfig:
        """Create configuration from environment variables.

        Reads ``MEDIA_TRACKER_API_BASE_URL``, ``MEDIA_TRACKER_API_KEY`` and
        the optional ``MEDIA_TRACKER_TIMEOUT``. Explicit keyword arguments
        override environment values.

        Raises
        ------
        MediaTrackerConfigError
            When no base URL is available from either source.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        base_url = env.get(ENV_BASE_URL)
        if base_url is not None:
            config_kwargs["base_url"] = base_url.rstrip("/")
        api_key = env.get(ENV_API_KEY)
        if api_key is not None:
            config_kwargs["api_key"] = api_key

        timeout_env = env.get(ENV_TIMEOUT)
        if timeout_env is not None and "timeout" not in overrides:
            try:
                config_kwargs["timeout"] = float(timeout_env)
            except ValueError as exc:
                raise MediaTrackerConfigError(f"{ENV_TIMEOUT} must be a number, got {timeout_env!r}") from exc

        config_kwargs.update(overrides)

        if not config_kwargs.get("base_url"):
            raise MediaTrackerConfigError(f"{ENV_BASE_URL} is not set")

        return cls(**config_kwargs)
