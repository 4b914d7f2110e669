"""Font registration and text measurement (reportlab metrics).

Helvetica and Helvetica-Bold are built into reportlab and always available.
A TrueType regular/bold pair can be registered instead; if either file is
missing or fails to load, the built-in pair is used.
"""

import logging
import os

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from resume_layout.config import FONT_BOLD, FONT_REGULAR

logger = logging.getLogger(__name__)

_REGISTERED = {}
# Registered font name -> TTF path it is bound to
_BOUND = {}


def measure(text: str, font_name: str, size: float) -> float:
    """Width of ``text`` in points when set in ``font_name`` at ``size``."""
    return pdfmetrics.stringWidth(text, font_name, size)


def font_name_for(path: str) -> str:
    """Registration name for a TTF file: its stem, e.g. ``Arial Bold.ttf`` -> ``Arial-Bold``.

    A stem already bound to a different file gets a numeric suffix so an
    earlier registration is never rebound.
    """
    stem = os.path.splitext(os.path.basename(path))[0].replace(" ", "-")
    name = stem
    n = 2
    while name in _BOUND and _BOUND[name] != path:
        name = f"{stem}-{n}"
        n += 1
    return name


def _register(path: str) -> str:
    name = font_name_for(path)
    if name not in _BOUND:
        pdfmetrics.registerFont(TTFont(name, path))
        _BOUND[name] = path
    return name


def register_fonts(regular_path: str = None, bold_path: str = None) -> tuple:
    """Register a TrueType pair and return the (regular, bold) font names to use.

    With no paths, or when the regular file cannot be loaded, returns the
    built-in Helvetica pair. A missing bold file falls back to the regular
    TTF for both weights.
    """
    if not regular_path:
        return FONT_REGULAR, FONT_BOLD

    key = (regular_path, bold_path)
    if key in _REGISTERED:
        return _REGISTERED[key]

    if not os.path.exists(regular_path):
        logger.warning("Font file not found: %s; using %s", regular_path, FONT_REGULAR)
        return FONT_REGULAR, FONT_BOLD

    try:
        regular = _register(regular_path)
        if bold_path and os.path.exists(bold_path):
            bold = _register(bold_path)
        else:
            if bold_path:
                logger.warning("Bold font file not found: %s; using regular weight", bold_path)
            bold = regular
    except Exception as e:
        logger.warning("Font registration failed (%s); using %s", e, FONT_REGULAR)
        return FONT_REGULAR, FONT_BOLD

    _REGISTERED[key] = (regular, bold)
    logger.debug("Registered fonts %s / %s", regular, bold)
    return _REGISTERED[key]
