"""Data models - severities, table widths, render formats and log records."""

from boxlog.models.record import LogRecord, RenderFormat, Severity, TableWidth

__all__ = [
    "LogRecord",
    "RenderFormat",
    "Severity",
    "TableWidth",
]
