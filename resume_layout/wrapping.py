"""Greedy word wrapping against measured glyph widths."""

from resume_layout.fonts import measure as default_measure


def wrap_text(text: str, font_name: str, size: float, max_width: float,
              measure=default_measure) -> list:
    """Pack whitespace-separated words into lines no wider than ``max_width``.

    A word wider than ``max_width`` on its own is emitted alone on its line,
    never split. Returns an empty list for empty or blank text.
    """
    lines = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and measure(candidate, font_name, size) > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines
