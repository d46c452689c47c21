"""Key-casing conversion between the wire (snake_case) and local (camelCase) conventions.

Only mapping keys are rewritten. Values are left alone except that
mappings, lists and tuples are walked recursively, so a nested payload
such as ``{"items": [{"video_id": 1}]}`` is converted at every depth.

Anything that is not a mapping, list or tuple is returned as the very
same object. That includes ``datetime``/``date`` values, ``Decimal``,
``UUID``, sets and pydantic models: they are treated as opaque scalars
and are never destructured into dicts.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Callable, Mapping
from typing import Any

_UPPER_RE = re.compile(r"[A-Z]")
_SEPARATOR_RE = re.compile(r"_([a-z])")


class CaseDirection(enum.Enum):
    """Which way :func:`transcode_deep` rewrites keys."""

    TO_WIRE = "to_wire"
    TO_LOCAL = "to_local"


def to_wire_key(name: str) -> str:
    """Convert a camelCase key to snake_case.

    ``firstName`` -> ``first_name``. Keys with no capitals come back unchanged.
    """
    return _UPPER_RE.sub(lambda m: f"_{m.group(0).lower()}", name)


def to_local_key(name: str) -> str:
    """Convert a snake_case key to camelCase.

    ``first_name`` -> ``firstName``. Only a separator followed by a
    lower-case letter is collapsed; ``video_2`` and trailing underscores
    are kept as they are.
    """
    return _SEPARATOR_RE.sub(lambda m: m.group(1).upper(), name)


_KEY_FUNCS: dict[CaseDirection, Callable[[str], str]] = {
    CaseDirection.TO_WIRE: to_wire_key,
    CaseDirection.TO_LOCAL: to_local_key,
}


def _transcode(value: Any, key_func: Callable[[str], str]) -> Any:
    if isinstance(value, Mapping):
        return {
            (key_func(k) if isinstance(k, str) else k): _transcode(v, key_func)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [_transcode(item, key_func) for item in value]
    if isinstance(value, tuple):
        return tuple(_transcode(item, key_func) for item in value)
    return value


def transcode_deep(value: Any, direction: CaseDirection) -> Any:
    """Return a copy of *value* with every mapping key rewritten for *direction*.

    Lists stay lists, tuples stay tuples and mappings come back as plain
    dicts. The input is never mutated. Never raises.
    """
    return _transcode(value, _KEY_FUNCS[direction])


def to_wire(value: Any) -> Any:
    """Shorthand for ``transcode_deep(value, CaseDirection.TO_WIRE)``."""
    return transcode_deep(value, CaseDirection.TO_WIRE)


def to_local(value: Any) -> Any:
    """Shorthand for ``transcode_deep(value, CaseDirection.TO_LOCAL)``."""
    return transcode_deep(value, CaseDirection.TO_LOCAL)
