"""Render stdlib ``logging`` records as tables.

Example:
    handler = logging.StreamHandler()
    handler.setFormatter(TableFormatter(width="small"))
    logging.getLogger("app").addHandler(handler)
"""

import logging
from datetime import datetime

from boxlog.engine import current_timestamp, extract_class_name
from boxlog.models.record import RenderFormat, Severity, TableWidth
from boxlog.render.table import TableRenderer, get_renderer


def severity_for(levelno: int) -> Severity:
    """Map a stdlib logging level number to a severity."""
    if levelno >= logging.CRITICAL:
        return Severity.FATAL
    if levelno >= logging.ERROR:
        return Severity.ERROR
    if levelno >= logging.WARNING:
        return Severity.WARNING
    if levelno >= logging.INFO:
        return Severity.INFO
    if levelno >= logging.DEBUG:
        return Severity.DEBUG
    return Severity.VERBOSE


class TableFormatter(logging.Formatter):
    """logging.Formatter that renders each record as a bordered table.

    The returned text has no trailing newline; handlers add their own
    terminator.
    """

    def __init__(
        self,
        width: TableWidth | str | int = "medium",
        format: RenderFormat | str = RenderFormat.PLAIN,
        colorize: bool = False,
        renderer: TableRenderer | None = None,
    ):
        super().__init__()
        self.width = TableWidth.resolve(width)
        self.render_format = RenderFormat.resolve(format)
        self.colorize = colorize
        self.renderer = renderer or get_renderer()

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            message = f"{message}\n{record.exc_text}"
        if record.stack_info:
            message = f"{message}\n{self.formatStack(record.stack_info)}"

        table = self.renderer.render(
            message,
            format=self.render_format,
            level=severity_for(record.levelno),
            source_label=extract_class_name(record.pathname),
            function_label=f"{record.funcName}()" if record.funcName else "",
            line_number=record.lineno,
            timestamp=current_timestamp(datetime.fromtimestamp(record.created)),
            width=self.width,
            colorize=self.colorize,
        )
        return table.rstrip("\n")
