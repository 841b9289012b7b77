"""Structural encoder: arbitrary values to a generic JSON-like tree.

The tree contains only ``dict`` (string keys, insertion order), ``list``,
``str``, ``int``, ``float``, ``bool`` and ``None``. There is no fixed
schema; any field without a directly encodable value is stored as its
string form.
"""

from __future__ import annotations

import dataclasses
import inspect
import math
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import Any, Protocol, runtime_checkable
from uuid import UUID

from pydantic import BaseModel

from boxlog.core.exceptions import PayloadEncodingError
from boxlog.formatting.payload import describe

MAX_DEPTH = 64

_BUILTIN_CONTAINERS = (dict, list, tuple, set, frozenset)


@runtime_checkable
class Describable(Protocol):
    """Values that describe their own fields for logging.

    Example:
        class Button:
            def __log_fields__(self) -> dict[str, Any]:
                return {"title": self.title, "enabled": self.enabled}
    """

    def __log_fields__(self) -> Mapping[str, Any]: ...


def encode_tree(value: Any) -> Any:
    """Encode a value into a generic tree.

    Args:
        value: Any Python value

    Returns:
        A tree of dicts, lists and scalars

    Raises:
        PayloadEncodingError: On reference cycles, nesting deeper than
            MAX_DEPTH or non-finite floats
    """
    return _encode(value, 0, set())


def _encode(value: Any, depth: int, active: set[int]) -> Any:
    if depth > MAX_DEPTH:
        raise PayloadEncodingError(f"nesting deeper than {MAX_DEPTH}", type(value).__name__)

    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise PayloadEncodingError(f"non-finite float {value!r}", "float")
        return value
    if isinstance(value, Enum):
        return _encode(value.value, depth + 1, active)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (UUID, Decimal, PurePath, bytes, bytearray, complex)):
        return describe(value)

    marker = id(value)
    if marker in active:
        raise PayloadEncodingError("reference cycle", type(value).__name__)
    active.add(marker)
    try:
        try:
            fields = _fields_of(value)
        except Exception as e:
            raise PayloadEncodingError(f"fields unavailable: {e}", type(value).__name__) from e
        if fields is not None:
            return {
                str(key): _encode(item, depth + 1, active) for key, item in fields.items()
            }
        if isinstance(value, (list, tuple)):
            return [_encode(item, depth + 1, active) for item in value]
        if isinstance(value, (set, frozenset)):
            items = [_encode(item, depth + 1, active) for item in value]
            return sorted(items, key=describe)
    finally:
        active.discard(marker)

    return describe(value)


def _fields_of(value: Any) -> Mapping[Any, Any] | None:
    """Key/value view of a keyed value, or None if it has no fields."""
    if isinstance(value, Mapping):
        return value
    if isinstance(value, Describable) and not isinstance(value, type):
        return value.__log_fields__()
    if isinstance(value, BaseModel):
        return {name: getattr(value, name) for name in type(value).model_fields}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if _is_plain_object(value):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    return None


def _is_plain_object(value: Any) -> bool:
    if isinstance(value, _BUILTIN_CONTAINERS):
        return False
    if inspect.isroutine(value) or inspect.isclass(value) or inspect.ismodule(value):
        return False
    return hasattr(value, "__dict__")


def derive_type_name(payload: Any) -> str | None:
    """Short runtime type name used to label records in model output.

    For a sequence the first element's type is used. Module qualifiers
    and generic suffixes (from the first ``<`` or ``[``) are stripped.
    Built-in containers and scalars have no record name.

    Args:
        payload: The original (un-encoded) payload

    Returns:
        Type name, or None when the record should render as ``{ }``
    """
    target = payload
    if isinstance(payload, (list, tuple)):
        if not payload:
            return None
        target = payload[0]

    if target is None or isinstance(target, (*_BUILTIN_CONTAINERS, str, int, float, bool)):
        return None

    name = getattr(type(target), "__qualname__", None) or type(target).__name__
    name = name.rsplit(".", 1)[-1]
    for marker in "<[":
        cut = name.find(marker)
        if cut != -1:
            name = name[:cut]
    return name or None
