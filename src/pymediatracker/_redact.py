"""Redaction of secrets and oversized strings in logged requests and responses.

Every request carries the API key header, and bodies may be logged in
either casing (``apiKey`` locally, ``api_key`` on the wire,
``X-API-Key`` as a header). Keys are compared after lower-casing and
stripping separators, so one entry covers all spellings.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

_SENSITIVE_KEYS: frozenset[str] = frozenset(
    {
        "xapikey",
        "apikey",
        "authorization",
        "cookie",
        "password",
        "token",
        "accesstoken",
        "refreshtoken",
    }
)

_SEPARATORS_RE = re.compile(r"[^a-z0-9]")


def _normalize_key(key: str) -> str:
    return _SEPARATORS_RE.sub("", key.lower())


def is_sensitive_key(key: str) -> bool:
    """Return ``True`` when *key* names a secret in any casing."""
    return _normalize_key(key) in _SENSITIVE_KEYS


def redact_for_log(value: Any, *, max_string: int = 512) -> Any:
    """Return a copy of a JSON-like *value* that is safe to log.

    Secret values are replaced by ``<redacted>`` and strings longer than
    *max_string* are truncated. Values that are not JSON types are shown
    by ``repr``.
    """
    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value
    if value is None or isinstance(value, (int, float)):
        return value
    if isinstance(value, Mapping):
        return {
            str(k): "<redacted>" if is_sensitive_key(str(k)) else redact_for_log(v, max_string=max_string)
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [redact_for_log(item, max_string=max_string) for item in value]
    return repr(value)
