"""Utility modules - display width measurement and text wrapping."""

from boxlog.utils.display_width import char_width, display_width, iter_characters, pad_end
from boxlog.utils.text_wrap import wrap_text

__all__ = [
    # Display width
    "char_width",
    "display_width",
    "iter_characters",
    "pad_end",
    # Wrapping
    "wrap_text",
]
