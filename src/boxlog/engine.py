"""Log engine - caller metadata, timestamps and the console sink.

Collects everything a table needs (source label, function label, line,
timestamp), renders it and writes it to the console in one piece.
"""

import sys
import threading
from dataclasses import dataclass
from datetime import datetime
from pathlib import PurePath
from typing import Any, TextIO

from boxlog.config import Settings, configure_logging, settings
from boxlog.models.record import RenderFormat, Severity, TableWidth
from boxlog.render.table import TableRenderer, get_renderer

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class CallerInfo:
    """Where a log call came from."""

    file: str
    function: str
    line: int


def extract_class_name(file: str) -> str:
    """File stem used as the table's class label.

    Example:
        extract_class_name("/tmp/SampleService.py") -> "SampleService"
    """
    if not file:
        return ""
    return PurePath(file.replace("\\", "/")).stem


def current_timestamp(now: datetime | None = None) -> str:
    """Local time formatted as ``yyyy-MM-dd HH:mm:ss``."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


def capture_caller(depth: int = 1) -> CallerInfo:
    """Describe the frame ``depth`` levels above the caller.

    Args:
        depth: 0 is the function calling capture_caller(), 1 its caller...

    Returns:
        CallerInfo with a ``name()`` function label, or ``<module>`` for
        module-level code
    """
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return CallerInfo(file="", function="<unknown>", line=0)

    code = frame.f_code
    function = code.co_name if code.co_name.startswith("<") else f"{code.co_name}()"
    return CallerInfo(file=code.co_filename, function=function, line=frame.f_lineno)


class ConsoleSink:
    """Writes whole tables to a text stream, one call at a time.

    Tables from concurrent threads never interleave.
    """

    def __init__(self, stream: TextIO | None = None):
        """Initialize the sink.

        Args:
            stream: Target stream. None means sys.stdout, looked up at
                write time so redirection (and pytest capture) works.
        """
        self._stream = stream
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, table: str) -> None:
        with self._lock:
            stream = self.stream
            stream.write(table)
            stream.flush()


class LogEngine:
    """Does the heavy lifting for every level function.

    Example:
        engine = LogEngine()
        engine.log("Fetched 3 users", Severity.INFO, file=__file__, line=12)
    """

    def __init__(
        self,
        config: Settings | None = None,
        renderer: TableRenderer | None = None,
        sink: ConsoleSink | None = None,
    ):
        self.config = config or settings
        configure_logging(self.config)
        self.renderer = renderer or get_renderer()
        self.sink = sink or ConsoleSink()

    def log(
        self,
        message: Any,
        level: Severity,
        *,
        width: TableWidth | str | int | None = None,
        format: RenderFormat | str | None = None,
        file: str = "",
        function: str = "",
        line: int = 0,
        source_label: str | None = None,
    ) -> str | None:
        """Render one entry and write it to the sink.

        Args:
            message: Payload for the table body
            level: Severity of the entry
            width: Table width, defaults to the configured width
            format: Render format, defaults to the configured format
            file: Source file path of the call
            function: Function label of the call
            line: Line number of the call
            source_label: Overrides the label derived from ``file``

        Returns:
            The table that was written, or None when logging is disabled
        """
        if not self.config.enabled:
            return None

        table = self.renderer.render(
            message,
            format=format if format is not None else self.config.default_format,
            level=level,
            source_label=source_label if source_label is not None else extract_class_name(file),
            function_label=function,
            line_number=line,
            timestamp=current_timestamp(),
            width=width if width is not None else self.config.table_width,
            colorize=self.config.colorization_enabled,
        )
        self.sink.write(table)
        return table


# =============================================================================
# Module-level engine
# =============================================================================

_default_engine: LogEngine | None = None


def get_engine() -> LogEngine:
    """Shared engine built from the global settings."""
    global _default_engine
    if _default_engine is None:
        _default_engine = LogEngine()
    return _default_engine


def set_engine(engine: LogEngine | None) -> None:
    """Replace the shared engine; None restores the default on next use."""
    global _default_engine
    _default_engine = engine
