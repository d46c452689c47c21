"""HTTP transport pipeline with key-casing conversion and API key injection.

A request passes through three explicit stages:

1. the request transforms, in order (body/params to wire casing, API key header)
2. dispatch over the shared ``aiohttp.ClientSession``
3. the response transforms, in order (body back to local casing)

Any failure raised by dispatch is handed to every error hook (by default
just :func:`log_transport_error`) and then re-raised unchanged. The
pipeline never swallows errors and knows nothing about resources.
"""

from __future__ import annotations

import asyncio
import dataclasses
import datetime
import decimal
import enum
import json
import logging
import uuid
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol

import aiohttp
from pydantic import BaseModel

from pymediatracker._casing import to_local, to_wire
from pymediatracker._constants import USER_AGENT
from pymediatracker._redact import redact_for_log
from pymediatracker.config import MediaTrackerConfig
from pymediatracker.exceptions import (
    MediaTrackerDecodeError,
    MediaTrackerHttpError,
    MediaTrackerTransportError,
)

_logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class ApiRequest:
    """An outgoing request as seen by the request transforms."""

    method: str
    path: str
    params: Mapping[str, Any] | None = None
    json: Any = None
    headers: Mapping[str, str] = dataclasses.field(default_factory=dict)


@dataclasses.dataclass(frozen=True, slots=True)
class ApiResponse:
    """A decoded 2xx response as seen by the response transforms."""

    status: int
    data: Any = None
    headers: Mapping[str, str] = dataclasses.field(default_factory=dict)


RequestTransform = Callable[[ApiRequest], ApiRequest]
ResponseTransform = Callable[[ApiResponse], ApiResponse]
ErrorHook = Callable[[ApiRequest, MediaTrackerTransportError], None]


class Transport(Protocol):
    """Structural transport interface used by resource stores.

    Stores only depend on this protocol, so tests can pass a fake that
    returns canned :class:`ApiResponse` objects or raises transport errors.
    """

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> ApiResponse:
        ...


# ---------------------------------------------------------------------------
# Default pipeline stages
# ---------------------------------------------------------------------------


def transcode_request_body(request: ApiRequest) -> ApiRequest:
    """Convert the JSON body keys to wire casing."""
    if request.json is None:
        return request
    return dataclasses.replace(request, json=to_wire(request.json))


def transcode_request_params(request: ApiRequest) -> ApiRequest:
    """Convert the query parameter keys to wire casing."""
    if request.params is None:
        return request
    return dataclasses.replace(request, params=to_wire(request.params))


def api_key_header(config: MediaTrackerConfig) -> RequestTransform:
    """Build a transform attaching the configured API key header."""

    def _attach(request: ApiRequest) -> ApiRequest:
        headers = dict(request.headers)
        headers[config.api_key_header] = config.api_key
        return dataclasses.replace(request, headers=headers)

    return _attach


def transcode_response_body(response: ApiResponse) -> ApiResponse:
    """Convert the decoded body keys back to local casing."""
    if response.data is None:
        return response
    return dataclasses.replace(response, data=to_local(response.data))


def log_transport_error(request: ApiRequest, error: MediaTrackerTransportError) -> None:
    """Log a failed request once, centrally."""
    _logger.error(
        "API error: %s %s status=%s: %s body=%s",
        request.method,
        request.path,
        error.status_code,
        error,
        redact_for_log(getattr(error, "data", None), max_string=200),
    )


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


def _encode_query(params: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Flatten query parameters into the pairs aiohttp accepts.

    ``None`` values are dropped, booleans become ``true``/``false`` and
    list/tuple values repeat the key.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        values: Sequence[Any] = value if isinstance(value, (list, tuple)) else (value,)
        for item in values:
            if item is None:
                continue
            if isinstance(item, bool):
                pairs.append((key, "true" if item else "false"))
            else:
                pairs.append((key, str(item)))
    return pairs


def _json_default(value: Any) -> Any:
    """Serialize the opaque values the transcoder passes through untouched."""
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, (decimal.Decimal, uuid.UUID)):
        return str(value)
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, BaseModel):
        return to_wire(value.model_dump(mode="json", by_alias=True, exclude_unset=True))
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _error_message(status: int, data: Any) -> str:
    """Prefer the server-provided message, fall back to a generic one."""
    if isinstance(data, Mapping):
        for key in ("detail", "message", "error"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
    return f"Request failed with status code {status}"


class ApiPipeline:
    """Shared HTTP client for the Media Tracker backend.

    Create once per process (or per :class:`~pymediatracker.client.MediaTrackerClient`)
    and inject into every store. The transform lists are fixed at
    construction time.
    """

    def __init__(
        self,
        config: MediaTrackerConfig,
        http_session: aiohttp.ClientSession,
        *,
        request_transforms: Sequence[RequestTransform] | None = None,
        response_transforms: Sequence[ResponseTransform] | None = None,
        error_hooks: Sequence[ErrorHook] | None = None,
    ) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.timeout)
        if request_transforms is None:
            request_transforms = (
                transcode_request_body,
                transcode_request_params,
                api_key_header(config),
            )
        if response_transforms is None:
            response_transforms = (transcode_response_body,)
        if error_hooks is None:
            error_hooks = (log_transport_error,)
        self._request_transforms: tuple[RequestTransform, ...] = tuple(request_transforms)
        self._response_transforms: tuple[ResponseTransform, ...] = tuple(response_transforms)
        self._error_hooks: tuple[ErrorHook, ...] = tuple(error_hooks)

    @property
    def config(self) -> MediaTrackerConfig:
        return self._config

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> ApiResponse:
        """Run one request through the pipeline.

        Raises
        ------
        MediaTrackerTransportError
            On network failure or timeout (``status_code`` is ``None``).
        MediaTrackerHttpError
            On a non-2xx response.
        MediaTrackerDecodeError
            When a response body is not valid JSON.
        """
        request = ApiRequest(method=method.upper(), path=path, params=params, json=json)
        for transform in self._request_transforms:
            request = transform(request)

        try:
            response = await self._dispatch(request)
        except MediaTrackerTransportError as exc:
            for hook in self._error_hooks:
                try:
                    hook(request, exc)
                except Exception:
                    _logger.exception("Error hook %r failed for %s %s", hook, request.method, request.path)
            raise

        for response_transform in self._response_transforms:
            response = response_transform(response)
        return response

    async def get(self, path: str, *, params: Mapping[str, Any] | None = None) -> ApiResponse:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> ApiResponse:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any = None) -> ApiResponse:
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> ApiResponse:
        return await self.request("DELETE", path)

    async def _dispatch(self, request: ApiRequest) -> ApiResponse:
        url = f"{self._config.base_url}{request.path}"
        headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": USER_AGENT,
        }
        headers.update(request.headers)
        query = _encode_query(request.params) if request.params is not None else None

        body: str | None = None
        if request.json is not None:
            try:
                body = json.dumps(request.json, default=_json_default)
            except (TypeError, ValueError) as exc:
                raise MediaTrackerTransportError(
                    f"Request body for {request.path} is not JSON serializable: {exc}",
                    endpoint=request.path,
                ) from exc
            headers["content-type"] = "application/json"

        _logger.debug(
            "%s %s params=%s body=%s headers=%s",
            request.method,
            url,
            redact_for_log(request.params),
            redact_for_log(request.json),
            redact_for_log(headers),
        )

        try:
            async with self._http.request(
                request.method,
                url,
                params=query,
                data=body,
                headers=headers,
                timeout=self._timeout,
            ) as resp:
                status = resp.status
                raw = await resp.read()
                charset = resp.charset or "utf-8"
                response_headers = dict(resp.headers)
        except aiohttp.ClientError as exc:
            raise MediaTrackerTransportError(
                f"Request to {request.path} failed: {exc}",
                endpoint=request.path,
            ) from exc
        except asyncio.TimeoutError as exc:
            raise MediaTrackerTransportError(
                f"Request to {request.path} timed out after {self._config.timeout}s",
                endpoint=request.path,
            ) from exc

        is_success = 200 <= status < 300
        try:
            text = raw.decode(charset, errors="strict" if is_success else "replace")
        except (UnicodeDecodeError, LookupError) as exc:
            raise MediaTrackerDecodeError(
                f"Response from {request.path} is not valid {charset} text",
                status_code=status,
                endpoint=request.path,
            ) from exc

        data: Any = None
        if text.strip():
            try:
                data = json.loads(text)
            except json.JSONDecodeError as exc:
                if not is_success:
                    data = text
                else:
                    raise MediaTrackerDecodeError(
                        f"Invalid JSON from {request.path}: {text[:200]}",
                        status_code=status,
                        endpoint=request.path,
                    ) from exc

        _logger.debug("%s %s -> %s %s", request.method, url, status, redact_for_log(data, max_string=200))

        if not is_success:
            raise MediaTrackerHttpError(
                _error_message(status, data),
                status_code=status,
                endpoint=request.path,
                data=data,
            )

        return ApiResponse(status=status, data=data, headers=response_headers)
