"""Heuristic re-flow of textual descriptions of composite values.

Turns ``User(id: 1, tags: [a, b])`` into an indented, one-item-per-line
form. This is a bracket scanner, not a parser: brackets inside quoted
strings count too, and unbalanced input drifts instead of failing.
"""

INDENT_UNIT = "  "

_OPENERS = "[("
_CLOSERS = "])"


def reindent_description(text: str, indent_unit: str = INDENT_UNIT) -> str:
    """Insert line breaks and indentation around brackets and commas.

    Args:
        text: Description text, e.g. the str() of a nested value
        indent_unit: Indentation added per nesting level

    Returns:
        The re-flowed text. Never raises.
    """
    out: list[str] = []
    level = 0
    skip_space = False

    for char in text:
        if skip_space:
            skip_space = False
            if char == " ":
                continue

        if char in _OPENERS:
            level += 1
            out.append(char)
            out.append("\n" + indent_unit * level)
        elif char == ",":
            out.append(",")
            out.append("\n" + indent_unit * level)
            skip_space = True
        elif char in _CLOSERS:
            level = max(0, level - 1)
            out.append("\n" + indent_unit * level)
            out.append(char)
        else:
            out.append(char)

    return "".join(out)
