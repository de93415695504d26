"""Fixed-width layout helpers for the text reporter.

Every helper is a pure function that returns a new string, so no fill,
width or alignment setting carries over from one cell to the next.
"""

from __future__ import annotations

from enum import Enum

LINE_WIDTH = 80


class Align(str, Enum):
    """Placement of text inside a fixed-width cell."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


def pad(text: str, width: int, align: Align = Align.LEFT, fill: str = " ") -> str:
    """Place text in a cell of exactly ``width`` characters.

    Text longer than the cell is cut to its first ``width`` characters.
    When centering leaves an odd number of fill characters, the extra one
    goes after the text.

    Args:
        text: The cell content.
        width: Cell width in characters.
        align: Where to place the text.
        fill: Single character used for padding.

    Returns:
        The padded cell.
    """
    text = text[:width]
    if align == Align.LEFT:
        return text.ljust(width, fill)
    if align == Align.RIGHT:
        return text.rjust(width, fill)
    left = (width - len(text)) // 2
    return (fill * left + text).ljust(width, fill)


def rule(fill: str, width: int = LINE_WIDTH) -> str:
    """Render a full-width line of one repeated character."""
    return fill * width


def crop_path(path: str) -> str:
    """Return the file name after the last ``/`` or ``\\`` in ``path``."""
    cut = max(path.rfind("/"), path.rfind("\\"))
    return path[cut + 1 :]


def insert_separators(value: int) -> str:
    """Group the digits of ``value`` in thousands, e.g. ``1234567`` -> ``1,234,567``.

    The sign of a negative value stays in front of the grouped digits.
    """
    return f"{value:,}"
