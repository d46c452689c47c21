"""Base model for Media Tracker resources.

Responses reach the models already converted to local (camelCase) keys
by the transport pipeline. :class:`MediaTrackerBaseModel` maps those
keys onto snake_case attributes through ``alias_generator=to_camel``
and dumps back to camelCase with ``by_alias=True``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MediaTrackerBaseModel(BaseModel):
    """Base for every resource and parameter model."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )
