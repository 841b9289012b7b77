"""Display width utilities for terminal rendering.

Measures how many monospace columns a string occupies so table borders
stay aligned when messages contain emoji, symbols, wide CJK text or
zero-width format characters.

A "character" here is a user-perceived character: a base code point plus
any combining marks, variation selectors, emoji modifiers and ZWJ-joined
code points that follow it.
"""

import unicodedata
from collections.abc import Iterator

import wcwidth

ZWJ = "\u200d"
ZWNJ = "\u200c"

_EMOJI_MODIFIERS = range(0x1F3FB, 0x1F400)
_REGIONAL_INDICATORS = range(0x1F1E6, 0x1F200)
_VARIATION_SELECTORS = range(0xFE00, 0xFE10)


def _extends_cluster(code_point: str) -> bool:
    """True if the code point attaches to the preceding character."""
    value = ord(code_point)
    if code_point in (ZWJ, ZWNJ):
        return True
    if value in _VARIATION_SELECTORS or value in _EMOJI_MODIFIERS:
        return True
    return unicodedata.category(code_point) in ("Mn", "Me", "Mc")


def iter_characters(text: str) -> Iterator[str]:
    """Split text into user-perceived characters.

    Args:
        text: Any string

    Yields:
        Clusters of one or more code points
    """
    cluster = ""
    for code_point in text:
        if cluster:
            joined = cluster[-1] == ZWJ
            paired_flag = (
                ord(code_point) in _REGIONAL_INDICATORS
                and len(cluster) == 1
                and ord(cluster) in _REGIONAL_INDICATORS
            )
            if joined or paired_flag or _extends_cluster(code_point):
                cluster += code_point
                continue
            yield cluster
        cluster = code_point
    if cluster:
        yield cluster


def _is_double_width(code_point: str) -> bool:
    if unicodedata.category(code_point) == "So":
        return True
    # Emoji presentation and East Asian wide code points
    return wcwidth.wcwidth(code_point) == 2


def char_width(character: str) -> int:
    """Column width of a single user-perceived character.

    Rules, in order:
        1. every code point is a format character (``Cf``) -> 0
        2. any code point is a symbol (``So``) or double-width -> 2
        3. otherwise -> 1

    Args:
        character: One cluster as produced by iter_characters()

    Returns:
        0, 1 or 2
    """
    if not character:
        return 0
    if all(unicodedata.category(cp) == "Cf" for cp in character):
        return 0
    if any(_is_double_width(cp) for cp in character):
        return 2
    return 1


def display_width(text: str) -> int:
    """Total column width of a string."""
    if text.isascii():
        return len(text)
    return sum(char_width(character) for character in iter_characters(text))


def pad_end(text: str, width: int) -> str:
    """Right-pad with spaces up to a display width. Never truncates.

    Args:
        text: The string to pad
        width: Target display width

    Returns:
        The padded string
    """
    padding = max(0, width - display_width(text))
    return text + " " * padding
