"""YouTube video visualization model."""

from __future__ import annotations

from pymediatracker.models._base import MediaTrackerBaseModel


class YTVideoVisualization(MediaTrackerBaseModel):
    """One recorded viewing of a video.

    ``resume`` is the playback position in seconds where viewing stopped,
    if it was left unfinished.
    """

    id: int
    video_id: str
    visualization_date: str
    """ISO 8601 timestamp, kept as the string the backend sends."""
    resume: int | None = None
