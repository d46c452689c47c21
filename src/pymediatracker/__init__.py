"""pymediatracker - Async Python client for the Media Tracker API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pymediatracker")
except PackageNotFoundError:
    __version__ = "0+local"
from pymediatracker._casing import CaseDirection, to_local_key, to_wire_key, transcode_deep
from pymediatracker._transport import ApiPipeline, ApiRequest, ApiResponse, Transport
from pymediatracker.client import MediaTrackerClient
from pymediatracker.config import MediaTrackerConfig
from pymediatracker.endpoints import ENDPOINTS, endpoint_for
from pymediatracker.exceptions import (
    MediaTrackerConfigError,
    MediaTrackerDecodeError,
    MediaTrackerError,
    MediaTrackerHttpError,
    MediaTrackerTransportError,
)
from pymediatracker.models import (
    ChannelView,
    ListParams,
    SortOrder,
    VideoView,
    YTChannel,
    YTVideo,
    YTVideoVisualization,
)
from pymediatracker.store import ResourceStore, ResultEnvelope

__all__ = [
    "__version__",
    "ApiPipeline",
    "ApiRequest",
    "ApiResponse",
    "CaseDirection",
    "ChannelView",
    "ENDPOINTS",
    "ListParams",
    "MediaTrackerClient",
    "MediaTrackerConfig",
    "MediaTrackerConfigError",
    "MediaTrackerDecodeError",
    "MediaTrackerError",
    "MediaTrackerHttpError",
    "MediaTrackerTransportError",
    "ResourceStore",
    "ResultEnvelope",
    "SortOrder",
    "Transport",
    "VideoView",
    "YTChannel",
    "YTVideo",
    "YTVideoVisualization",
    "endpoint_for",
    "to_local_key",
    "to_wire_key",
    "transcode_deep",
]
