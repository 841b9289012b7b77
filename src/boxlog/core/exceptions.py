"""Custom exception hierarchy for boxlog."""

from typing import Any


class BoxlogError(Exception):
    """Base exception for all boxlog errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class PayloadEncodingError(BoxlogError):
    """Payload cannot be converted into a generic encodable tree.

    Raised inside the structural encoder and always caught by the
    pretty-printers, which then fall back to the generic string form.
    """

    def __init__(self, reason: str, type_name: str | None = None):
        super().__init__(
            code="PAYLOAD_NOT_ENCODABLE",
            message=f"Cannot encode payload: {reason}",
            details={"reason": reason, "type_name": type_name},
        )


class InvalidWidthError(BoxlogError):
    """Unknown table width preset."""

    def __init__(self, width: object):
        super().__init__(
            code="INVALID_WIDTH",
            message=f"Unknown table width '{width}', expected small, medium, large or an int",
            details={"width": repr(width)},
        )


class InvalidFormatError(BoxlogError):
    """Unknown render format name."""

    def __init__(self, name: object):
        super().__init__(
            code="INVALID_FORMAT",
            message=f"Unknown render format '{name}', expected plain, model or json",
            details={"format": repr(name)},
        )
