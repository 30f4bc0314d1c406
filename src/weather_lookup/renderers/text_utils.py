"""Text helpers for renderers.

Pure string functions with no external dependencies.
"""

from __future__ import annotations


def title_case(text: str) -> str:
    """Upper-case the first character of each space-separated word.

    The rest of each word is left untouched, runs of spaces collapse to one
    and leading/trailing spaces are dropped: ``"rain and  drizzle"`` ->
    ``"Rain And Drizzle"``.
    """
    return " ".join(word[0].upper() + word[1:] for word in text.split(" ") if word)


def format_hour_label(four_digits: str) -> str:
    """``"1430"`` -> ``"14:30"``; any other length is returned unchanged."""
    if len(four_digits) == 4:
        return f"{four_digits[:2]}:{four_digits[2:]}"
    return four_digits
