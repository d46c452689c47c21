"""Data models for Media Tracker resources."""

from pymediatracker.models._base import MediaTrackerBaseModel
from pymediatracker.models.params import ChannelView, ListParams, SortOrder, VideoView
from pymediatracker.models.visualization import YTVideoVisualization
from pymediatracker.models.youtube import YTChannel, YTVideo

__all__ = [
    "ChannelView",
    "ListParams",
    "MediaTrackerBaseModel",
    "SortOrder",
    "VideoView",
    "YTChannel",
    "YTVideo",
    "YTVideoVisualization",
]
