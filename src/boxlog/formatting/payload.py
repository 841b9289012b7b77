"""Boundary classification of log payloads.

A payload is resolved once into text, a structured value or an opaque
scalar so the printers work on concrete variants.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

logger = logging.getLogger(__name__)

_OPAQUE_TYPES = (bool, int, float, complex, Decimal, bytes, bytearray, type(None))


@dataclass(frozen=True)
class TextPayload:
    text: str


@dataclass(frozen=True)
class StructuredPayload:
    value: Any


@dataclass(frozen=True)
class OpaquePayload:
    text: str


Payload = TextPayload | StructuredPayload | OpaquePayload


def describe(value: Any) -> str:
    """Generic string form of any value. Never raises."""
    try:
        return str(value)
    except Exception as e:
        logger.debug(f"str() failed for {type(value).__name__}: {e}")
        return f"<{type(value).__name__} instance>"


def classify(message: Any) -> Payload:
    """Resolve an arbitrary message into one payload variant."""
    if isinstance(message, str):
        return TextPayload(message)
    if isinstance(message, _OPAQUE_TYPES):
        return OpaquePayload(describe(message))
    return StructuredPayload(message)
