"""Greedy word wrapping measured in display columns."""

from boxlog.utils.display_width import display_width, iter_characters


def wrap_text(text: str, max_width: int, *, keep_unsplit: bool = False) -> list[str]:
    """Wrap text into lines no wider than ``max_width`` columns.

    Words are split on single spaces (empty tokens are kept, so runs of
    spaces survive). A word wider than the budget is hard-split by
    character. Newlines start a new paragraph.

    Args:
        text: Text to wrap
        max_width: Column budget per line
        keep_unsplit: With a non-positive budget, return each paragraph
            as one unsplit line instead of a single empty line

    Returns:
        At least one line; never an empty list.
    """
    if max_width <= 0:
        return text.split("\n") if keep_unsplit else [""]

    lines: list[str] = []
    for paragraph in text.split("\n"):
        lines.extend(_wrap_paragraph(paragraph, max_width))
    return lines or [""]


def _wrap_paragraph(text: str, max_width: int) -> list[str]:
    lines: list[str] = []
    current = ""

    for word in text.split(" "):
        candidate = word if not current else f"{current} {word}"
        if display_width(candidate) <= max_width:
            current = candidate
            continue

        if current:
            lines.append(current)

        if display_width(word) > max_width:
            chunks = _hard_split(word, max_width)
            lines.extend(chunks[:-1])
            current = chunks[-1]
        else:
            current = word

    if current:
        lines.append(current)
    return lines or [""]


def _hard_split(word: str, max_width: int) -> list[str]:
    """Cut a word into chunks of at most ``max_width`` columns.

    A single character wider than the budget gets a chunk of its own.
    """
    chunks: list[str] = []
    buffer = ""
    for character in iter_characters(word):
        if buffer and display_width(buffer + character) > max_width:
            chunks.append(buffer)
            buffer = character
        else:
            buffer += character
    chunks.append(buffer)
    return chunks
