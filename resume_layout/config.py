"""Layout configuration: page geometry, palette, type sizes and spacing.

The module constants are the house defaults. A ``LayoutConfig`` is built from
them once per layout call and passed down explicitly; nothing in the layout
path reads the constants directly.
"""

import os
from dataclasses import dataclass
from pathlib import Path

# Project root (resume_layout/..)
PROJECT_ROOT = Path(__file__).resolve().parents[1]
OUTPUT_DIR = Path(os.environ.get("RESUME_OUTPUT_DIR") or PROJECT_ROOT / "output")

# Optional TrueType pair; built-in Helvetica is used when unset
FONT_REGULAR_PATH = os.environ.get("RESUME_FONT_REGULAR") or None
FONT_BOLD_PATH = os.environ.get("RESUME_FONT_BOLD") or None

# --- Page geometry (points) ---
PAGE_W, PAGE_H = 595, 842  # A4, whole points
MARGIN_TOP = 72  # 1 inch
MARGIN_BOTTOM = 50
MARGIN_LEFT = 50
MARGIN_RIGHT = 50

# --- Colors (RGB, 0..1) ---
BLACK = (0, 0, 0)
DARK_BLUE = (0.1, 0.2, 0.4)  # name, section headers, divider
MEDIUM_BLUE = (0.2, 0.4, 0.6)  # job titles, skills categories
GRAY = (0.4, 0.4, 0.4)  # company names and periods
DARK_GRAY = (0.2, 0.2, 0.2)  # contact line

# --- Fonts ---
FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"

# --- Font sizes ---
NAME_SIZE = 24
CONTACT_SIZE = 9
SECTION_HEADER_SIZE = 14
BODY_SIZE = 11

# --- Line heights ---
NAME_LINE_HEIGHT = NAME_SIZE * 0.8
CONTACT_LINE_HEIGHT = CONTACT_SIZE * 1.5
SECTION_LINE_HEIGHT = SECTION_HEADER_SIZE * 1.5
BODY_LINE_HEIGHT = BODY_SIZE * 1.4

# --- Spacing ---
GAP_AFTER_NAME = 2
GAP_AFTER_CONTACT = 4
GAP_AFTER_DIVIDER = 16
GAP_BLANK_LINE = 6
GAP_BEFORE_SECTION = 12
GAP_BEFORE_JOB = 8
GAP_AFTER_JOB = 4
DIVIDER_THICKNESS = 1.5
BODY_INDENT = 10
BODY_WRAP_INSET = 10
SKILLS_WRAP_INSET = 20
CONTACT_SEPARATOR = " • "


@dataclass(frozen=True)
class LayoutConfig:
    """Immutable geometry and style settings for one layout call."""

    page_width: float = PAGE_W
    page_height: float = PAGE_H
    margin_top: float = MARGIN_TOP
    margin_bottom: float = MARGIN_BOTTOM
    margin_left: float = MARGIN_LEFT
    margin_right: float = MARGIN_RIGHT

    font_regular: str = FONT_REGULAR
    font_bold: str = FONT_BOLD

    name_size: float = NAME_SIZE
    contact_size: float = CONTACT_SIZE
    section_header_size: float = SECTION_HEADER_SIZE
    body_size: float = BODY_SIZE

    name_line_height: float = NAME_LINE_HEIGHT
    contact_line_height: float = CONTACT_LINE_HEIGHT
    section_line_height: float = SECTION_LINE_HEIGHT
    body_line_height: float = BODY_LINE_HEIGHT

    gap_after_name: float = GAP_AFTER_NAME
    gap_after_contact: float = GAP_AFTER_CONTACT
    gap_after_divider: float = GAP_AFTER_DIVIDER
    gap_blank_line: float = GAP_BLANK_LINE
    gap_before_section: float = GAP_BEFORE_SECTION
    gap_before_job: float = GAP_BEFORE_JOB
    gap_after_job: float = GAP_AFTER_JOB
    divider_thickness: float = DIVIDER_THICKNESS
    body_indent: float = BODY_INDENT
    body_wrap_inset: float = BODY_WRAP_INSET
    skills_wrap_inset: float = SKILLS_WRAP_INSET
    contact_separator: str = CONTACT_SEPARATOR

    black: tuple = BLACK
    dark_blue: tuple = DARK_BLUE
    medium_blue: tuple = MEDIUM_BLUE
    gray: tuple = GRAY
    dark_gray: tuple = DARK_GRAY

    def __post_init__(self):
        if self.top_y < self.margin_bottom:
            raise ValueError(
                f"Page geometry leaves no room: top y {self.top_y} is below "
                f"bottom margin {self.margin_bottom}"
            )

    @property
    def content_width(self) -> float:
        return self.page_width - self.margin_left - self.margin_right

    @property
    def left(self) -> float:
        return self.margin_left

    @property
    def right(self) -> float:
        return self.page_width - self.margin_right

    @property
    def top_y(self) -> float:
        return self.page_height - self.margin_top
