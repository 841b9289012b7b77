"""Table rendering."""

from boxlog.render.table import TableConfig, TableRenderer, get_renderer, render_table

__all__ = [
    "TableConfig",
    "TableRenderer",
    "get_renderer",
    "render_table",
]
