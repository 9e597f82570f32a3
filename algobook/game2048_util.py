"""Text helpers for drawing the 2048 board."""

NBSP = "\u00a0"


def fill_num(text: str, fill_len: int) -> str:
    """Left-pad ``text`` with non-breaking spaces up to ``fill_len`` characters."""
    if len(text) >= fill_len:
        return text
    return NBSP * (fill_len - len(text)) + text