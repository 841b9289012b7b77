"""Public level functions.

Each function renders its message as a table and writes it to the
console. Caller file, function and line are captured automatically
unless given.

Example:
    import boxlog

    boxlog.debug("User logged in successfully")
    boxlog.w("API response took longer than expected", width="large")
    boxlog.d(users, format="model")
"""

from typing import Any

from boxlog.engine import capture_caller, get_engine
from boxlog.models.record import RenderFormat, Severity, TableWidth

WidthArg = TableWidth | str | int | None
FormatArg = RenderFormat | str | None


def _dispatch(
    message: Any,
    level: Severity,
    width: WidthArg,
    format: FormatArg,
    file: str | None,
    function: str | None,
    line: int | None,
    source_label: str | None = None,
) -> None:
    # depth 2: _dispatch <- level function <- user code
    if file is None or function is None or line is None:
        caller = capture_caller(2)
        file = caller.file if file is None else file
        function = caller.function if function is None else function
        line = caller.line if line is None else line

    get_engine().log(
        message,
        level,
        width=width,
        format=format,
        file=file,
        function=function,
        line=line,
        source_label=source_label,
    )


def verbose(
    message: Any,
    *,
    width: WidthArg = None,
    format: FormatArg = None,
    file: str | None = None,
    function: str | None = None,
    line: int | None = None,
) -> None:
    """Log detailed diagnostic information."""
    _dispatch(message, Severity.VERBOSE, width, format, file, function, line)


def debug(
    message: Any,
    *,
    width: WidthArg = None,
    format: FormatArg = None,
    file: str | None = None,
    function: str | None = None,
    line: int | None = None,
) -> None:
    """Log general debugging information.

    Args:
        message: Text or any structured value
        width: "small", "medium", "large", an int or a TableWidth
        format: "plain", "model" or "json"
        file: Source file (captured if omitted)
        function: Function label (captured if omitted)
        line: Line number (captured if omitted)
    """
    _dispatch(message, Severity.DEBUG, width, format, file, function, line)


def info(
    message: Any,
    *,
    width: WidthArg = None,
    format: FormatArg = None,
    file: str | None = None,
    function: str | None = None,
    line: int | None = None,
) -> None:
    """Log an important runtime event."""
    _dispatch(message, Severity.INFO, width, format, file, function, line)


def warning(
    message: Any,
    *,
    width: WidthArg = None,
    format: FormatArg = None,
    file: str | None = None,
    function: str | None = None,
    line: int | None = None,
) -> None:
    """Log a recoverable, unexpected condition."""
    _dispatch(message, Severity.WARNING, width, format, file, function, line)


def error(
    message: Any,
    *,
    width: WidthArg = None,
    format: FormatArg = None,
    file: str | None = None,
    function: str | None = None,
    line: int | None = None,
) -> None:
    """Log a failed operation."""
    _dispatch(message, Severity.ERROR, width, format, file, function, line)


def fatal(
    message: Any,
    *,
    width: WidthArg = None,
    format: FormatArg = None,
    file: str | None = None,
    function: str | None = None,
    line: int | None = None,
) -> None:
    """Log a condition that should never happen."""
    _dispatch(message, Severity.FATAL, width, format, file, function, line)


# Short aliases
v = verbose
d = debug
i = info
w = warning
e = error
wtf = fatal


class Loggy:
    """Namespace for the level functions: ``Loggy.d("message")``."""

    v = staticmethod(verbose)
    d = staticmethod(debug)
    i = staticmethod(info)
    w = staticmethod(warning)
    e = staticmethod(error)
    wtf = staticmethod(fatal)


class Log(Loggy):
    """Shorter name for Loggy."""


class Loggable:
    """Mixin giving instances level methods labelled with their class name.

    Example:
        class UserListViewModel(Loggable):
            def fetch(self):
                self.log_d("Starting data fetch")
    """

    @property
    def class_name(self) -> str:
        return type(self).__name__

    def _log(self, message: Any, level: Severity, width: WidthArg, format: FormatArg) -> None:
        caller = capture_caller(2)
        _dispatch(
            message,
            level,
            width,
            format,
            caller.file,
            caller.function,
            caller.line,
            source_label=self.class_name,
        )

    def log_v(self, message: Any, *, width: WidthArg = None, format: FormatArg = None) -> None:
        self._log(message, Severity.VERBOSE, width, format)

    def log_d(self, message: Any, *, width: WidthArg = None, format: FormatArg = None) -> None:
        self._log(message, Severity.DEBUG, width, format)

    def log_i(self, message: Any, *, width: WidthArg = None, format: FormatArg = None) -> None:
        self._log(message, Severity.INFO, width, format)

    def log_w(self, message: Any, *, width: WidthArg = None, format: FormatArg = None) -> None:
        self._log(message, Severity.WARNING, width, format)

    def log_e(self, message: Any, *, width: WidthArg = None, format: FormatArg = None) -> None:
        self._log(message, Severity.ERROR, width, format)

    def log_wtf(self, message: Any, *, width: WidthArg = None, format: FormatArg = None) -> None:
        self._log(message, Severity.FATAL, width, format)
