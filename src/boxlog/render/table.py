"""Bordered log table rendering.

Lays out a log entry as a fixed-width ASCII table whose borders stay
aligned with wide and zero-width characters in the content.

Example Output:
    +------------------------------------------------------------+
    | Level:  DEBUG                    Time: 2025-01-01 12:00:00 |
    | Class:  YourClass                                          |
    | Method: anyMethod()                                        |
    | Line:   36                                                 |
    | ---------------------------------------------------------- |
    | Debug message from Loggy                                   |
    +------------------------------------------------------------+
"""

from dataclasses import dataclass
from typing import Any

from boxlog.formatting import format_message
from boxlog.models.record import LogRecord, RenderFormat, Severity, TableWidth
from boxlog.utils.display_width import display_width, pad_end
from boxlog.utils.text_wrap import wrap_text


@dataclass
class TableConfig:
    """Configuration for table rendering."""

    label_width: int = 8

    BOX_CORNER: str = "+"
    BOX_H: str = "-"
    BOX_V: str = "|"


class TableRenderer:
    """Renders log entries as bordered tables.

    The inner width is the larger of the requested width's budget and the
    widest header or body line, so content never overflows its border.

    Example:
        renderer = TableRenderer()
        output = renderer.render(
            "Debug message",
            level=Severity.DEBUG,
            source_label="YourClass",
            function_label="anyMethod()",
            line_number=36,
            timestamp="2025-01-01 12:00:00",
        )
        print(output, end="")
    """

    def __init__(self, config: TableConfig | None = None):
        """Initialize the renderer.

        Args:
            config: Optional configuration. Uses defaults if not provided.
        """
        self.config = config or TableConfig()

    # =========================================================================
    # Public Rendering Methods
    # =========================================================================

    def render(
        self,
        message: Any,
        *,
        format: RenderFormat | str = RenderFormat.PLAIN,
        level: Severity = Severity.DEBUG,
        source_label: str = "",
        function_label: str = "",
        line_number: int = 0,
        timestamp: str = "",
        width: TableWidth | str | int = "medium",
        colorize: bool = False,
    ) -> str:
        """Render a complete table.

        Args:
            message: Payload for the table body
            format: How the payload becomes body text
            level: Severity shown in the level row and used for colour
            source_label: Class or file name for the class row
            function_label: Call signature for the method row
            line_number: Printed as-is, negative values included
            timestamp: Pre-formatted time text
            width: Requested outer width (preset, int or TableWidth)
            colorize: Wrap the table in the level's ANSI codes

        Returns:
            Multi-line table string ending with a newline.
        """
        fmt = RenderFormat.resolve(format)
        level = Severity(level)
        base_inner = TableWidth.resolve(width).inner_budget

        body = self._body_lines(message, fmt, base_inner)
        inner_width = max(base_inner, self._widest(body))

        header_fields = (level, source_label, function_label, line_number, timestamp)
        headers = self._header_lines(*header_fields, inner_width)
        # header text (a long signature, say) can widen the table further
        inner_width = max(inner_width, self._widest(headers))
        headers = self._header_lines(*header_fields, inner_width)

        lines: list[str] = [self._border(inner_width)]
        lines.extend(self._box_row(header, inner_width) for header in headers)
        lines.append(self._box_row(self.config.BOX_H * inner_width, inner_width))
        lines.extend(self._box_row(line, inner_width) for line in body)
        lines.append(self._border(inner_width))

        color_open, color_close = level.color_code(colorize)
        table = "\n".join(lines)
        return f"{color_open}{table}{color_close}\n"

    def render_record(self, record: LogRecord, colorize: bool = False) -> str:
        """Render a LogRecord.

        Args:
            record: The entry to render
            colorize: Wrap the table in the level's ANSI codes

        Returns:
            Multi-line table string ending with a newline.
        """
        return self.render(
            record.message,
            format=record.format,
            level=record.level,
            source_label=record.source_label,
            function_label=record.function_label,
            line_number=record.line_number,
            timestamp=record.timestamp,
            width=record.width,
            colorize=colorize,
        )

    # =========================================================================
    # Private Helper Methods - Content
    # =========================================================================

    def _body_lines(self, message: Any, fmt: RenderFormat, base_inner: int) -> list[str]:
        """Body rows before padding.

        Plain text is wrapped to the budget. Structured output keeps its
        own line breaks.
        """
        if fmt == RenderFormat.PLAIN:
            return wrap_text(format_message(message, fmt), base_inner, keep_unsplit=True)
        text = format_message(message, fmt, max_width=base_inner or None)
        return text.split("\n")

    def _header_lines(
        self,
        level: Severity,
        source_label: str,
        function_label: str,
        line_number: int,
        timestamp: str,
        inner_width: int,
    ) -> list[str]:
        """Level, class, method and line rows, unpadded.

        The time text is right-aligned on the level row with at least one
        space before it.
        """
        label_width = self.config.label_width
        symbol = level.symbol
        time_text = f"Time: {self._single_line(timestamp)}"
        gap = max(1, inner_width - label_width - display_width(symbol) - display_width(time_text))

        return [
            pad_end("Level:", label_width) + symbol + " " * gap + time_text,
            pad_end("Class:", label_width) + self._single_line(source_label),
            pad_end("Method:", label_width) + self._single_line(function_label),
            pad_end("Line:", label_width) + str(line_number),
        ]

    @staticmethod
    def _single_line(value: object) -> str:
        """Header fields occupy one row, so line breaks become spaces."""
        return str(value).replace("\r\n", " ").replace("\n", " ").replace("\r", " ")

    @staticmethod
    def _widest(lines: list[str]) -> int:
        return max((display_width(line) for line in lines), default=0)

    # =========================================================================
    # Private Helper Methods - Box Drawing
    # =========================================================================

    def _border(self, width: int) -> str:
        """Top/bottom border: +--------+ spanning the padded content."""
        c = self.config
        return f"{c.BOX_CORNER}{c.BOX_H * (width + 2)}{c.BOX_CORNER}"

    def _box_row(self, content: str, width: int) -> str:
        """Content row: | content   |, padded by display width."""
        c = self.config
        return f"{c.BOX_V} {pad_end(content, width)} {c.BOX_V}"


# =============================================================================
# Module-level convenience instance
# =============================================================================

# Default renderer instance for simple usage
_default_renderer: TableRenderer | None = None


def get_renderer(config: TableConfig | None = None) -> TableRenderer:
    """Get a TableRenderer instance.

    Args:
        config: Optional configuration. If None, returns cached default.

    Returns:
        TableRenderer instance
    """
    global _default_renderer
    if config is not None:
        return TableRenderer(config)
    if _default_renderer is None:
        _default_renderer = TableRenderer()
    return _default_renderer


def render_table(message: Any, **kwargs: Any) -> str:
    """Convenience function to render one table.

    Args:
        message: Payload for the table body
        **kwargs: Passed to TableRenderer.render()

    Returns:
        Formatted table string
    """
    return get_renderer().render(message, **kwargs)
