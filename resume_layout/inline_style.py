"""Inline bold runs delimited by ``**`` markers.

``Built **Redis** caching.`` becomes three runs: plain ``Built ``, bold
``Redis``, plain `` caching.``. Unpaired markers stay literal text. A span
broken across two wrapped lines is not re-paired and renders with its markers.
"""

import re
from dataclasses import dataclass

from resume_layout.fonts import measure as default_measure

BOLD_SPAN = re.compile(r"(\*\*[^*]+\*\*)")


@dataclass(frozen=True)
class StyledRun:
    text: str
    bold: bool = False


@dataclass(frozen=True)
class Fragment:
    """One run placed at a horizontal offset."""
    text: str
    x: float
    font_name: str


def split_runs(text: str) -> list:
    """Split a line into alternating plain/bold runs, preserving adjacency."""
    runs = []
    for part in BOLD_SPAN.split(text):
        if not part:
            continue
        if BOLD_SPAN.fullmatch(part):
            runs.append(StyledRun(part[2:-2], bold=True))
        else:
            runs.append(StyledRun(part))
    return runs or [StyledRun(text)]


def layout_runs(text: str, x: float, font_name: str, bold_font_name: str,
                size: float, measure=default_measure) -> list:
    """Place each run of ``text`` after the measured width of the previous one."""
    fragments = []
    offset = x
    for run in split_runs(text):
        font = bold_font_name if run.bold else font_name
        fragments.append(Fragment(run.text, offset, font))
        offset += measure(run.text, font, size)
    return fragments
