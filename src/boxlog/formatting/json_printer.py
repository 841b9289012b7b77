"""JSON format: canonical, 2-space-indented JSON with sorted keys."""

import json
import logging
from typing import Any

from boxlog.core.exceptions import PayloadEncodingError
from boxlog.formatting.encoder import encode_tree

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard constant {name}")


_decoder = json.JSONDecoder(parse_constant=_reject_constant)


def canonical_json(tree: dict[str, Any] | list[Any]) -> str:
    """Serialize a parsed document in canonical form."""
    return json.dumps(tree, indent=2, sort_keys=True, ensure_ascii=False)


def format_json_text(text: str) -> str | None:
    """Pretty-print JSON embedded in text.

    Everything before the first ``{`` or ``[`` is kept as a prefix, less
    its trailing whitespace. Only whitespace may follow the document.
    ``NaN`` and ``Infinity`` are not JSON and are rejected.

    Args:
        text: Raw message text

    Returns:
        Prefix (if not blank) and canonical JSON joined by a newline,
        or None if no JSON object or array can be parsed
    """
    starts = [i for i in (text.find("{"), text.find("[")) if i != -1]
    if not starts:
        return None
    start = min(starts)
    prefix = text[:start]

    try:
        document, end = _decoder.raw_decode(text, start)
    except (ValueError, RecursionError) as e:
        logger.debug(f"JSON format unavailable: {e}")
        return None
    if text[end:].strip():
        logger.debug("JSON format unavailable: trailing text after document")
        return None
    if not isinstance(document, (dict, list)):
        return None

    try:
        pretty = canonical_json(document)
    except RecursionError:
        logger.debug("JSON format unavailable: document nested too deeply")
        return None
    if prefix.strip():
        # Trailing whitespace is dropped so formatting the result again is a no-op
        return f"{prefix.rstrip()}\n{pretty}"
    return pretty


def format_json_value(payload: Any) -> str | None:
    """Pretty-print a structured value as JSON.

    Returns:
        Canonical JSON, or None if the value cannot be encoded into a
        JSON object or array
    """
    try:
        tree = encode_tree(payload)
    except PayloadEncodingError as e:
        logger.debug(f"JSON format unavailable: {e.message}")
        return None
    if not isinstance(tree, (dict, list)):
        logger.debug(f"JSON format unavailable: {type(payload).__name__} is a scalar")
        return None
    return canonical_json(tree)
