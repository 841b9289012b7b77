"""Structured payload pretty-printing.

``format_message`` picks the printer for the requested format and falls
back one tier whenever the preferred representation is unavailable:

    model -> re-indented string form
    json  -> re-indented string form
"""

from typing import Any

from boxlog.formatting.encoder import Describable, derive_type_name, encode_tree
from boxlog.formatting.json_printer import canonical_json, format_json_text, format_json_value
from boxlog.formatting.model_printer import ModelPrinter
from boxlog.formatting.payload import (
    OpaquePayload,
    StructuredPayload,
    TextPayload,
    classify,
    describe,
)
from boxlog.formatting.reindent import reindent_description
from boxlog.models.record import RenderFormat


def format_message(
    message: Any,
    fmt: RenderFormat | str = RenderFormat.PLAIN,
    max_width: int | None = None,
) -> str:
    """Turn a payload into body text for the requested format.

    Args:
        message: Any payload
        fmt: Render format
        max_width: Column budget used to wrap long model-format fields

    Returns:
        Body text. Never raises for any payload.
    """
    fmt = RenderFormat.resolve(fmt)
    payload = classify(message)

    if fmt == RenderFormat.PLAIN:
        return payload.text if not isinstance(payload, StructuredPayload) else describe(message)

    if isinstance(payload, TextPayload):
        if fmt == RenderFormat.MODEL:
            return reindent_description(payload.text)
        result = format_json_text(payload.text)
    elif isinstance(payload, OpaquePayload):
        return reindent_description(payload.text) if fmt == RenderFormat.JSON else payload.text
    elif fmt == RenderFormat.MODEL:
        result = ModelPrinter(max_width=max_width).format(payload.value)
    else:
        result = format_json_value(payload.value)

    if result is None:
        return reindent_description(describe(message))
    return result


__all__ = [
    "Describable",
    "ModelPrinter",
    "OpaquePayload",
    "StructuredPayload",
    "TextPayload",
    "canonical_json",
    "classify",
    "derive_type_name",
    "describe",
    "encode_tree",
    "format_json_text",
    "format_json_value",
    "format_message",
    "reindent_description",
]
