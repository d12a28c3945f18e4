"""Text helpers for fixed-width table columns."""

import unicodedata
from typing import List

_ZERO_WIDTH_JOINER = "\u200d"


def _clusters(text: str) -> List[str]:
    """Split text into user-perceived characters.

    Combining marks, variation selectors and zero-width-joiner sequences
    stay attached to the character before them.
    """
    clusters: List[str] = []
    for ch in text:
        attach = (
            unicodedata.combining(ch)
            or unicodedata.category(ch) == "Me"
            or "\ufe00" <= ch <= "\ufe0f"
            or ch == _ZERO_WIDTH_JOINER
            or (clusters and clusters[-1].endswith(_ZERO_WIDTH_JOINER))
        )
        if attach and clusters:
            clusters[-1] += ch
        else:
            clusters.append(ch)
    return clusters


def get_column_string(text: str, width: int) -> str:
    """Fit text into a column of the given width.

    Text longer than ``width`` characters is cut to ``width`` characters and
    ellipsized; a zero width always yields an empty string. A character and
    its combining marks count as one and are never split.

    Args:
        text: Cell content
        width: Column width in characters

    Returns:
        The cell string
    """
    if width <= 0:
        return ""
    clusters = _clusters(text)
    if len(clusters) <= width:
        return text
    return "".join(clusters[:width]) + "..."
