"""High-level async client for the Media Tracker API."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from pymediatracker._transport import ApiPipeline
from pymediatracker.config import MediaTrackerConfig
from pymediatracker.endpoints import (
    YOUTUBE_CHANNELS,
    YOUTUBE_VIDEOS,
    YOUTUBE_VISUALIZATIONS,
    endpoint_for,
)
from pymediatracker.exceptions import MediaTrackerError
from pymediatracker.models.visualization import YTVideoVisualization
from pymediatracker.models.youtube import YTChannel, YTVideo
from pymediatracker.store import ResourceStore

_logger = logging.getLogger(__name__)


class MediaTrackerClient:
    """Async client for the Media Tracker API.

    Builds one :class:`ApiPipeline` and one store per resource, all
    sharing the same HTTP session. The stores live as long as the client.

    Usage::

        async with MediaTrackerClient(MediaTrackerConfig.from_env()) as client:
            result = await client.videos.list(ListParams(limit=10))
            for video in client.videos.items:
                ...
    """

    def __init__(
        self,
        config: MediaTrackerConfig,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._pipeline: ApiPipeline | None = None
        self._videos: ResourceStore[YTVideo] | None = None
        self._channels: ResourceStore[YTChannel] | None = None
        self._visualizations: ResourceStore[YTVideoVisualization] | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> MediaTrackerClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        pipeline = ApiPipeline(self._config, self._http_session)
        self._pipeline = pipeline
        self._videos = ResourceStore(pipeline, endpoint_for(YOUTUBE_VIDEOS), YTVideo, resource="video")
        self._channels = ResourceStore(pipeline, endpoint_for(YOUTUBE_CHANNELS), YTChannel, resource="channel")
        self._visualizations = ResourceStore(
            pipeline,
            endpoint_for(YOUTUBE_VISUALIZATIONS),
            YTVideoVisualization,
            resource="visualization",
        )
        _logger.debug("Media Tracker client ready for %s", self._config.base_url)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._pipeline = None
        self._videos = None
        self._channels = None
        self._visualizations = None

    # ------------------------------------------------------------------
    # Stores
    # ------------------------------------------------------------------

    @property
    def pipeline(self) -> ApiPipeline:
        if self._pipeline is None:
            raise MediaTrackerError("Client not initialized. Use 'async with MediaTrackerClient(...) as client:'")
        return self._pipeline

    @property
    def videos(self) -> ResourceStore[YTVideo]:
        if self._videos is None:
            raise MediaTrackerError("Client not initialized. Use 'async with MediaTrackerClient(...) as client:'")
        return self._videos

    @property
    def channels(self) -> ResourceStore[YTChannel]:
        if self._channels is None:
            raise MediaTrackerError("Client not initialized. Use 'async with MediaTrackerClient(...) as client:'")
        return self._channels

    @property
    def visualizations(self) -> ResourceStore[YTVideoVisualization]:
        if self._visualizations is None:
            raise MediaTrackerError("Client not initialized. Use 'async with MediaTrackerClient(...) as client:'")
        return self._visualizations
