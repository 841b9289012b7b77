"""Model format: structured values as indented, type-annotated literals.

Example:
    User(
      id: 1,
      name: "Alex",
      tags: [
        "admin"
      ]
    )
"""

import json
import logging
from typing import Any

from boxlog.core.exceptions import PayloadEncodingError
from boxlog.formatting.encoder import derive_type_name, encode_tree
from boxlog.formatting.reindent import INDENT_UNIT
from boxlog.utils.display_width import display_width
from boxlog.utils.text_wrap import wrap_text

logger = logging.getLogger(__name__)


class ModelPrinter:
    """Renders a generic tree in model format.

    Keys are sorted, strings are double-quoted and nested values are
    indented two spaces per level. When ``max_width`` is set, string
    fields that would overflow it are wrapped, with continuation lines
    aligned under the field.
    """

    def __init__(self, max_width: int | None = None, indent_unit: str = INDENT_UNIT):
        self.max_width = max_width
        self.indent_unit = indent_unit

    def format(self, payload: Any) -> str | None:
        """Pretty-print a non-text payload.

        Args:
            payload: Any structured value

        Returns:
            The rendered text, or None if the payload cannot be encoded
        """
        try:
            tree = encode_tree(payload)
        except PayloadEncodingError as e:
            logger.debug(f"Model format unavailable: {e.message}")
            return None
        return self.render(tree, derive_type_name(payload))

    def render(self, tree: Any, type_name: str | None = None) -> str:
        """Render an already-encoded tree.

        Args:
            tree: Output of encode_tree()
            type_name: Label for the outermost records

        Returns:
            Multi-line text
        """
        if isinstance(tree, list):
            child_budget = self._child_budget(self.max_width)
            items = [self._render_node(item, child_budget, type_name) for item in tree]
            return self._block("[", items, "]")
        return self._render_node(tree, self.max_width, type_name)

    def _render_node(self, node: Any, budget: int | None, type_name: str | None = None) -> str:
        if isinstance(node, dict):
            return self._render_record(node, budget, type_name)
        if isinstance(node, list):
            items = [self._render_node(item, self._child_budget(budget)) for item in node]
            return self._block("[", items, "]")
        return self._scalar(node)

    def _render_record(
        self,
        record: dict[str, Any],
        budget: int | None,
        type_name: str | None,
    ) -> str:
        opener, closer = (f"{type_name}(", ")") if type_name else ("{", "}")
        child_budget = self._child_budget(budget)
        entries: list[str] = []
        for key in sorted(record):
            value = record[key]
            if isinstance(value, str):
                entries.append(self._string_field(key, value, child_budget))
            else:
                rendered = self._render_node(value, child_budget)
                entries.append(f"{key}: {rendered}")
        return self._block(opener, entries, closer)

    def _string_field(self, key: str, value: str, budget: int | None) -> str:
        line = f"{key}: {self._scalar(value)}"
        # one column stays free for the separating comma
        limit = (budget or 0) - 1
        if limit <= 0 or display_width(line) <= limit:
            return line
        return "\n".join(wrap_text(line, limit))

    def _block(self, opener: str, entries: list[str], closer: str) -> str:
        if not entries:
            return f"{opener}{closer}"
        body = ",\n".join(self._indent(entry) for entry in entries)
        return f"{opener}\n{body}\n{closer}"

    def _indent(self, text: str) -> str:
        """Re-indent every line of a (possibly multi-line) value."""
        return "\n".join(self.indent_unit + line for line in text.split("\n"))

    def _child_budget(self, budget: int | None) -> int | None:
        if budget is None:
            return None
        return budget - display_width(self.indent_unit)

    @staticmethod
    def _scalar(value: Any) -> str:
        if isinstance(value, str):
            return json.dumps(value, ensure_ascii=False)
        return str(value)
