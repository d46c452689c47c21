"""Generic resource store: reactive CRUD state for one REST collection.

One :class:`ResourceStore` is created per backend resource (videos,
channels, ...) by instantiation, never by subclassing. Each store owns:

* ``items``: the last fetched list, kept in fetch order and updated in
  place by ``create``/``update``/``remove``
* ``loading``: ``True`` only while a ``list()`` call is in flight
* ``error``: the last failure message, cleared at the start of ``list()``

State is readable through properties; the five actions are the only
writers. Every action resolves to a :class:`ResultEnvelope` and never
raises transport errors to the caller.

Concurrent actions are neither serialized nor deduplicated: mutations
apply in the order responses arrive, so two overlapping ``list()`` calls
leave ``items`` holding whichever response landed last.
"""

from __future__ import annotations

import builtins
import dataclasses
import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from pymediatracker._transport import ApiResponse, Transport
from pymediatracker.exceptions import MediaTrackerDecodeError, MediaTrackerTransportError
from pymediatracker.models.params import ListParams

_logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=BaseModel)
DataT = TypeVar("DataT")

ItemId = str | int


@dataclasses.dataclass(frozen=True, slots=True)
class ResultEnvelope(Generic[DataT]):
    """Uniform return value of every store action.

    ``status`` is the HTTP status of the response, or ``None`` when the
    request never got one (network failure, timeout).
    """

    data: DataT
    status: int | None

    @property
    def ok(self) -> bool:
        return self.status is not None and 200 <= self.status < 300


def _dump_payload(payload: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    """Turn a model or mapping into a local-casing dict body."""
    if isinstance(payload, BaseModel):
        return payload.model_dump(by_alias=True, exclude_unset=True)
    return dict(payload)


def _query(params: ListParams | Mapping[str, Any] | None) -> dict[str, Any] | None:
    if params is None:
        return None
    if isinstance(params, ListParams):
        return params.to_query()
    return dict(params)


class ResourceStore(Generic[ItemT]):
    """CRUD store bound to one collection endpoint.

    Parameters
    ----------
    transport : Transport
        Shared pipeline, injected by reference.
    endpoint : str
        Collection path ending with ``/``; item paths are ``endpoint + id``.
    item_type : type
        Pydantic model used to validate response items. Must expose ``id``.
    resource : str
        Singular name used in fallback error messages (``"video"``).
    plural : str or None
        Plural name for ``list()`` messages. Defaults to ``resource + "s"``.
    """

    def __init__(
        self,
        transport: Transport,
        endpoint: str,
        item_type: type[ItemT],
        *,
        resource: str,
        plural: str | None = None,
    ) -> None:
        self._transport = transport
        self._endpoint = endpoint
        self._item_type = item_type
        self._resource = resource
        self._plural = plural or f"{resource}s"
        self._items: list[ItemT] = []
        self._loading = False
        self._error: str | None = None

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def items(self) -> tuple[ItemT, ...]:
        """Snapshot of the current items, in fetch order."""
        return tuple(self._items)

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def resource(self) -> str:
        return self._resource

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(resource={self._resource!r}, endpoint={self._endpoint!r}, "
            f"items={len(self._items)}, loading={self._loading}, error={self._error!r})"
        )

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    async def list(self, params: ListParams | Mapping[str, Any] | None = None) -> ResultEnvelope[builtins.list[ItemT]]:
        """Fetch the whole collection and replace ``items`` with it."""
        self._loading = True
        self._error = None
        try:
            response = await self._transport.request("GET", self._endpoint, params=_query(params))
            items = self._parse_items(response)
            self._items = items
            _logger.debug("Fetched %d %s", len(items), self._plural)
            return ResultEnvelope(data=list(items), status=response.status)
        except MediaTrackerTransportError as exc:
            return self._fail(exc, f"Failed to fetch {self._plural}", [])
        finally:
            self._loading = False

    async def get_by_id(self, item_id: ItemId) -> ResultEnvelope[ItemT | None]:
        """Fetch a single item. ``items`` is left untouched."""
        try:
            response = await self._transport.request("GET", self._item_path(item_id))
            item = self._parse_item(response)
            return ResultEnvelope(data=item, status=response.status)
        except MediaTrackerTransportError as exc:
            return self._fail(exc, f"Failed to fetch {self._resource}", None)

    async def create(self, payload: BaseModel | Mapping[str, Any]) -> ResultEnvelope[ItemT | None]:
        """Create an item and append the server's copy to ``items``."""
        try:
            response = await self._transport.request("POST", self._endpoint, json=_dump_payload(payload))
            item = self._parse_item(response)
            self._items.append(item)
            return ResultEnvelope(data=item, status=response.status)
        except MediaTrackerTransportError as exc:
            return self._fail(exc, f"Failed to create {self._resource}", None)

    async def update(
        self,
        item_id: ItemId,
        payload: BaseModel | Mapping[str, Any],
    ) -> ResultEnvelope[ItemT | None]:
        """Update an item and replace the local copy in place, if present."""
        try:
            response = await self._transport.request("PUT", self._item_path(item_id), json=_dump_payload(payload))
            item = self._parse_item(response)
            index = self._index_of(item_id)
            if index is not None:
                self._items[index] = item
            else:
                _logger.debug("Updated %s %s is not in the local list", self._resource, item_id)
            return ResultEnvelope(data=item, status=response.status)
        except MediaTrackerTransportError as exc:
            return self._fail(exc, f"Failed to update {self._resource}", None)

    async def remove(self, item_id: ItemId) -> ResultEnvelope[None]:
        """Delete an item and drop every local copy with that id."""
        try:
            response = await self._transport.request("DELETE", self._item_path(item_id))
            self._items[:] = [item for item in self._items if getattr(item, "id", None) != item_id]
            return ResultEnvelope(data=None, status=response.status)
        except MediaTrackerTransportError as exc:
            return self._fail(exc, f"Failed to delete {self._resource}", None)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _item_path(self, item_id: ItemId) -> str:
        return f"{self._endpoint}{item_id}"

    def _index_of(self, item_id: ItemId) -> int | None:
        for index, item in enumerate(self._items):
            if getattr(item, "id", None) == item_id:
                return index
        return None

    def _fail(self, exc: MediaTrackerTransportError, fallback: str, data: DataT) -> ResultEnvelope[DataT]:
        self._error = str(exc) or fallback
        return ResultEnvelope(data=data, status=exc.status_code)

    def _parse_item(self, response: ApiResponse) -> ItemT:
        try:
            return self._item_type.model_validate(response.data)
        except ValidationError as exc:
            raise MediaTrackerDecodeError(
                f"Unexpected {self._resource} payload from {self._endpoint}: {exc.error_count()} validation error(s)",
                status_code=response.status,
                endpoint=self._endpoint,
            ) from exc

    def _parse_items(self, response: ApiResponse) -> builtins.list[ItemT]:
        if not isinstance(response.data, list):
            raise MediaTrackerDecodeError(
                f"Expected a list of {self._plural} from {self._endpoint}, got {type(response.data).__name__}",
                status_code=response.status,
                endpoint=self._endpoint,
            )
        return [self._parse_item(dataclasses.replace(response, data=raw)) for raw in response.data]
