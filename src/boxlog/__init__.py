"""boxlog - console log tables with structured payload pretty-printing."""

from boxlog.api import (
    Log,
    Loggable,
    Loggy,
    d,
    debug,
    e,
    error,
    fatal,
    i,
    info,
    v,
    verbose,
    w,
    warning,
    wtf,
)
from boxlog.config import Settings, configure_logging, settings
from boxlog.formatting import Describable, format_message
from boxlog.handler import TableFormatter
from boxlog.models.record import LogRecord, RenderFormat, Severity, TableWidth
from boxlog.render.table import TableConfig, TableRenderer, render_table

__version__ = "0.1.0"

__all__ = [
    # Level functions
    "Log",
    "Loggable",
    "Loggy",
    "d",
    "debug",
    "e",
    "error",
    "fatal",
    "i",
    "info",
    "v",
    "verbose",
    "w",
    "warning",
    "wtf",
    # Rendering
    "Describable",
    "LogRecord",
    "RenderFormat",
    "Severity",
    "TableConfig",
    "TableRenderer",
    "TableWidth",
    "TableFormatter",
    "format_message",
    "render_table",
    # Configuration
    "Settings",
    "configure_logging",
    "settings",
]
