"""Tests for resource model parsing from local-casing payloads."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pymediatracker.models.params import ChannelView, ListParams, SortOrder
from pymediatracker.models.visualization import YTVideoVisualization
from pymediatracker.models.youtube import YTChannel, YTVideo


class TestYTVideo:
    def test_parses_camel_case_payload(self) -> None:
        video = YTVideo.model_validate(
            {
                "id": "dQw4w9WgXcQ",
                "channelId": "UC123456789",
                "title": "How to Learn TypeScript Fast",
                "publishedAt": "2025-02-15T10:00:00Z",
                "unknownField": 1,
            }
        )

        assert video.channel_id == "UC123456789"
        assert video.published_at == "2025-02-15T10:00:00Z"
        assert video.description is None
        assert video.channel is None

    def test_full_view_embeds_channel_and_visualizations(self) -> None:
        video = YTVideo.model_validate(
            {
                "id": "v1",
                "channelId": "c1",
                "title": "T",
                "channel": {"id": "c1", "name": "Tech Tutorials", "createdAt": "2025-01-10T08:45:00Z"},
                "visualizations": [
                    {"id": 42, "videoId": "v1", "visualizationDate": "2025-11-07T14:30:00Z", "resume": 120}
                ],
            }
        )

        assert video.channel is not None
        assert video.channel.created_at == "2025-01-10T08:45:00Z"
        assert video.visualizations == [
            YTVideoVisualization(id=42, video_id="v1", visualization_date="2025-11-07T14:30:00Z", resume=120)
        ]

    def test_missing_required_field(self) -> None:
        with pytest.raises(ValidationError):
            YTVideo.model_validate({"id": "v1", "title": "no channel"})

    def test_dump_by_alias_is_local_casing(self) -> None:
        video = YTVideo(id="v1", channel_id="c1", title="T")

        assert video.model_dump(by_alias=True, exclude_unset=True) == {"id": "v1", "channelId": "c1", "title": "T"}

    def test_models_are_frozen(self) -> None:
        video = YTVideo(id="v1", channel_id="c1", title="T")

        with pytest.raises(ValidationError):
            video.title = "changed"  # type: ignore[misc]


class TestYTChannel:
    def test_with_videos_view(self) -> None:
        channel = YTChannel.model_validate(
            {
                "id": "c1",
                "name": "Tech",
                "videos": [{"id": "v1", "channelId": "c1", "title": "Intro"}],
            }
        )

        assert channel.videos is not None
        assert channel.videos[0].title == "Intro"


class TestListParams:
    def test_to_query_skips_unset_values(self) -> None:
        assert ListParams(limit=10).to_query() == {"limit": 10}

    def test_to_query_uses_local_casing_and_plain_values(self) -> None:
        params = ListParams(offset=0, view=ChannelView.WITH_VIDEOS, order_by=SortOrder.ASC)

        assert params.to_query() == {"offset": 0, "view": "with_videos", "orderBy": "asc"}

    def test_order_by_accepts_plain_string(self) -> None:
        assert ListParams(order_by="desc").order_by is SortOrder.DESC

    def test_invalid_sort_order(self) -> None:
        with pytest.raises(ValidationError):
            ListParams(order_by="sideways")
