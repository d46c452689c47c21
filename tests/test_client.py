"""End-to-end tests: client -> stores -> pipeline -> in-process aiohttp backend."""

from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from typing import Any

import aiohttp
import pytest
import pytest_asyncio
from aiohttp import test_utils, web

from pymediatracker.client import MediaTrackerClient
from pymediatracker.config import MediaTrackerConfig
from pymediatracker.exceptions import MediaTrackerError
from pymediatracker.models.params import ListParams, SortOrder, VideoView

_VIDEOS = "/media-tracker/v1/youtube/videos/"
_API_KEY = "test-key"


@dataclass
class FakeMediaTrackerBackend:
    """In-memory videos collection speaking snake_case JSON."""

    videos: dict[str, dict[str, Any]] = field(default_factory=dict)
    last_query: dict[str, str] = field(default_factory=dict)
    next_id: int = 1

    def _authorized(self, request: web.Request) -> bool:
        return request.headers.get("X-API-Key") == _API_KEY

    async def list_videos(self, request: web.Request) -> web.Response:
        if not self._authorized(request):
            return web.json_response({"detail": "Invalid API key"}, status=401)
        self.last_query = dict(request.query)
        items = sorted(self.videos.values(), key=lambda v: v["id"], reverse=request.query.get("order_by") == "desc")
        return web.json_response(items)

    async def create_video(self, request: web.Request) -> web.Response:
        body = await request.json()
        if "channel_id" not in body or "title" not in body:
            return web.json_response({"detail": "channel_id and title are required"}, status=422)
        video = {"id": f"v{self.next_id}", "published_at": None, **body}
        self.next_id += 1
        self.videos[video["id"]] = video
        return web.json_response(video, status=201)

    async def get_video(self, request: web.Request) -> web.Response:
        video = self.videos.get(request.match_info["video_id"])
        if video is None:
            return web.json_response({"detail": "Video not found"}, status=404)
        return web.json_response(video)

    async def update_video(self, request: web.Request) -> web.Response:
        video = self.videos.get(request.match_info["video_id"])
        if video is None:
            return web.json_response({"detail": "Video not found"}, status=404)
        video.update(await request.json())
        return web.json_response(video)

    async def delete_video(self, request: web.Request) -> web.Response:
        if self.videos.pop(request.match_info["video_id"], None) is None:
            return web.json_response({"detail": "Video not found"}, status=404)
        return web.Response(status=204)

    def app(self) -> web.Application:
        app = web.Application()
        app.router.add_get(_VIDEOS, self.list_videos)
        app.router.add_post(_VIDEOS, self.create_video)
        app.router.add_get(_VIDEOS + "{video_id}", self.get_video)
        app.router.add_put(_VIDEOS + "{video_id}", self.update_video)
        app.router.add_delete(_VIDEOS + "{video_id}", self.delete_video)
        return app


@pytest.fixture
def backend() -> FakeMediaTrackerBackend:
    return FakeMediaTrackerBackend()


@pytest_asyncio.fixture
async def base_url(backend: FakeMediaTrackerBackend) -> AsyncIterator[str]:
    async with test_utils.TestServer(backend.app()) as server:
        yield f"http://{server.host}:{server.port}"


@pytest.mark.asyncio
async def test_video_crud_round_trip(backend: FakeMediaTrackerBackend, base_url: str) -> None:
    config = MediaTrackerConfig(base_url=base_url, api_key=_API_KEY)

    async with MediaTrackerClient(config) as client:
        videos = client.videos

        created = await videos.create({"channelId": "UC1", "title": "Intro", "publishedAt": "2025-02-15"})
        assert created.status == 201
        assert created.data is not None
        assert backend.videos["v1"]["channel_id"] == "UC1"
        assert backend.videos["v1"]["published_at"] == "2025-02-15"

        await videos.create({"channelId": "UC1", "title": "Part 2"})
        listed = await videos.list(ListParams(order_by=SortOrder.DESC, view=VideoView.BASIC))
        assert listed.status == 200
        assert backend.last_query == {"order_by": "desc", "view": "basic"}
        assert [video.id for video in videos.items] == ["v2", "v1"]

        updated = await videos.update("v1", {"title": "Intro (edited)"})
        assert updated.status == 200
        assert videos.items[1].title == "Intro (edited)"

        fetched = await videos.get_by_id("v1")
        assert fetched.data is not None and fetched.data.published_at == "2025-02-15"

        removed = await videos.remove("v2")
        assert removed.status == 204
        assert [video.id for video in videos.items] == ["v1"]

        again = await videos.remove("v2")
        assert again.status == 404
        assert again.data is None
        assert videos.error == "Video not found"
        assert [video.id for video in videos.items] == ["v1"]


@pytest.mark.asyncio
async def test_validation_error_from_server_is_captured(base_url: str) -> None:
    async with MediaTrackerClient(MediaTrackerConfig(base_url=base_url, api_key=_API_KEY)) as client:
        result = await client.videos.create({"title": "no channel"})

        assert result.status == 422
        assert client.videos.error == "channel_id and title are required"
        assert client.videos.items == ()


@pytest.mark.asyncio
async def test_wrong_api_key_surfaces_401(base_url: str) -> None:
    async with MediaTrackerClient(MediaTrackerConfig(base_url=base_url, api_key="wrong")) as client:
        result = await client.videos.list()

        assert result.status == 401
        assert result.data == []
        assert client.videos.error == "Invalid API key"
        assert client.videos.loading is False


@pytest.mark.asyncio
async def test_external_session_is_not_closed(base_url: str) -> None:
    async with aiohttp.ClientSession() as session:
        async with MediaTrackerClient(MediaTrackerConfig(base_url=base_url, api_key=_API_KEY), session=session) as client:
            assert client.pipeline.config.base_url == base_url
            await client.videos.list()
        assert not session.closed


def test_stores_unavailable_outside_context() -> None:
    client = MediaTrackerClient(MediaTrackerConfig(base_url="http://localhost"))

    with pytest.raises(MediaTrackerError):
        _ = client.videos
    with pytest.raises(MediaTrackerError):
        _ = client.channels


@pytest.mark.asyncio
async def test_stores_share_one_pipeline(base_url: str) -> None:
    async with MediaTrackerClient(MediaTrackerConfig(base_url=base_url, api_key=_API_KEY)) as client:
        assert client.channels.endpoint == "/media-tracker/v1/youtube/channels/"
        assert client.visualizations.endpoint == "/media-tracker/v1/youtube/visualizations/"
        assert client.videos._transport is client.pipeline  # noqa: SLF001
        assert client.channels._transport is client.pipeline  # noqa: SLF001
