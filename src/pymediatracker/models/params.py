"""Query parameter models for collection listing."""

from __future__ import annotations

import enum
from typing import Any

from pymediatracker.models._base import MediaTrackerBaseModel


class SortOrder(enum.StrEnum):
    ASC = "asc"
    DESC = "desc"


class VideoView(enum.StrEnum):
    """Detail level for video listings."""

    BASIC = "basic"
    WITH_CHANNEL = "with_channel"
    WITH_VISUALIZATIONS = "with_visualizations"
    FULL = "full"


class ChannelView(enum.StrEnum):
    """Detail level for channel listings."""

    BASIC = "basic"
    WITH_VIDEOS = "with_videos"


class ListParams(MediaTrackerBaseModel):
    """Pagination, view and sort options for ``list()``.

    All fields are optional and opaque to the store; the backend decides
    what they mean.
    """

    offset: int | None = None
    limit: int | None = None
    view: str | None = None
    order_by: SortOrder | None = None

    def to_query(self) -> dict[str, Any]:
        """Return the set parameters keyed in local casing."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
