"""Log record models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from boxlog.core.exceptions import InvalidFormatError, InvalidWidthError

ANSI_RESET = "\x1b[0m"


class Severity(str, Enum):
    """Severity of a log entry."""

    VERBOSE = "verbose"
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"

    @property
    def symbol(self) -> str:
        """Text shown in the table's level row."""
        return _SYMBOLS[self]

    def color_code(self, enabled: bool = True) -> tuple[str, str]:
        """ANSI (open, close) pair, or empty strings when colour is off."""
        if not enabled:
            return ("", "")
        return (_COLORS[self], ANSI_RESET)


_SYMBOLS: dict[Severity, str] = {
    Severity.VERBOSE: "VERBOSE",
    Severity.DEBUG: "DEBUG",
    Severity.INFO: "INFO",
    Severity.WARNING: "WARNING",
    Severity.ERROR: "ERROR",
    Severity.FATAL: "WTF",
}

_COLORS: dict[Severity, str] = {
    Severity.VERBOSE: "\x1b[37m",
    Severity.DEBUG: "\x1b[32m",
    Severity.INFO: "\x1b[34m",
    Severity.WARNING: "\x1b[33m",
    Severity.ERROR: "\x1b[31m",
    Severity.FATAL: "\x1b[31m",
}


class RenderFormat(str, Enum):
    """How the payload is turned into body text before wrapping."""

    PLAIN = "plain"
    MODEL = "model"
    JSON = "json"

    @classmethod
    def resolve(cls, value: "RenderFormat | str") -> "RenderFormat":
        """Accept an enum member or its (case-insensitive) name.

        ``"codable"`` is kept as an alias of the model format.

        Raises:
            InvalidFormatError: If the name is not a known format
        """
        if isinstance(value, RenderFormat):
            return value
        name = str(value).strip().lower()
        if name == "codable":
            return cls.MODEL
        try:
            return cls(name)
        except ValueError:
            raise InvalidFormatError(value) from None


class TableWidth(BaseModel):
    """Total outer table width in columns, borders included."""

    model_config = ConfigDict(frozen=True)

    columns: int
    name: str = "custom"

    @classmethod
    def small(cls) -> "TableWidth":
        return cls(columns=80, name="small")

    @classmethod
    def medium(cls) -> "TableWidth":
        return cls(columns=120, name="medium")

    @classmethod
    def large(cls) -> "TableWidth":
        return cls(columns=160, name="large")

    @classmethod
    def custom(cls, columns: int) -> "TableWidth":
        """Arbitrary width; non-positive values yield a minimal table."""
        return cls(columns=columns)

    @classmethod
    def resolve(cls, value: "TableWidth | str | int") -> "TableWidth":
        """Build a width from a preset name, an int or an existing width.

        Raises:
            InvalidWidthError: If a string is not a known preset
        """
        if isinstance(value, TableWidth):
            return value
        if isinstance(value, bool):
            raise InvalidWidthError(value)
        if isinstance(value, int):
            return cls.custom(value)
        preset = _PRESETS.get(str(value).strip().lower())
        if preset is None:
            raise InvalidWidthError(value)
        return preset()

    @property
    def inner_budget(self) -> int:
        """Content budget once the two border characters are removed."""
        return max(0, self.columns - 2)


_PRESETS = {
    "small": TableWidth.small,
    "medium": TableWidth.medium,
    "large": TableWidth.large,
}


class LogRecord(BaseModel):
    """Everything needed to render one table. Built per call, then dropped."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    message: Any
    level: Severity = Severity.DEBUG
    width: TableWidth = Field(default_factory=TableWidth.medium)
    format: RenderFormat = RenderFormat.PLAIN
    source_label: str = ""
    function_label: str = ""
    line_number: int = 0
    timestamp: str = ""
