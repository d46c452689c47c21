"""YouTube channel and video models.

Both live in one module because each can embed the other depending on
the ``view`` requested when listing (see :class:`~pymediatracker.models.params.VideoView`
and :class:`~pymediatracker.models.params.ChannelView`).
"""

from __future__ import annotations

from pymediatracker.models._base import MediaTrackerBaseModel
from pymediatracker.models.visualization import YTVideoVisualization


class YTChannel(MediaTrackerBaseModel):
    """A tracked YouTube channel."""

    id: str
    name: str
    description: str | None = None
    url: str | None = None
    created_at: str | None = None
    """ISO 8601 timestamp of registration in the tracker."""
    videos: list[YTVideo] | None = None
    """Only populated by the ``with_videos`` view."""


class YTVideo(MediaTrackerBaseModel):
    """A tracked YouTube video."""

    id: str
    channel_id: str
    title: str
    published_at: str | None = None
    description: str | None = None
    url: str | None = None
    channel: YTChannel | None = None
    """Populated by the ``with_channel`` and ``full`` views."""
    visualizations: list[YTVideoVisualization] | None = None
    """Populated by the ``with_visualizations`` and ``full`` views."""


YTChannel.model_rebuild()
YTVideo.model_rebuild()
