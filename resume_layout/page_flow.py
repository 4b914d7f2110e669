"""Page flow: the vertical cursor, page allocation and the finished Document.

The engine is the only owner of the cursor and the page list. Callers place
content through ``place_line`` / ``place_text`` / ``place_rule`` and move the
cursor with ``advance``. Whenever the cursor falls below the bottom
margin after a line or a gap, a new page is started with the cursor back at
the top margin, so the next gap is spent on the new page. Every draw checks
the cursor again first. A final page left without content is dropped by
``finish``.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from resume_layout.config import LayoutConfig
from resume_layout.header import HeaderRecord
from resume_layout.inline_style import Fragment

logger = logging.getLogger(__name__)


class LayoutInvariantError(Exception):
    """Raised when content would be drawn below the bottom margin."""
    def __init__(self, message: str, page_number: int, y: float):
        super().__init__(message)
        self.page_number = page_number
        self.y = y


@dataclass(frozen=True)
class TextOp:
    x: float
    y: float
    text: str
    font_name: str
    size: float
    color: tuple


@dataclass(frozen=True)
class RuleOp:
    x_start: float
    x_end: float
    y: float
    thickness: float
    color: tuple


@dataclass(frozen=True)
class Page:
    width: float
    height: float
    ops: tuple = ()

    @property
    def text_ops(self) -> list:
        return [op for op in self.ops if isinstance(op, TextOp)]


@dataclass(frozen=True)
class Document:
    pages: tuple
    header: HeaderRecord = field(default_factory=HeaderRecord)
    sections: tuple = ()

    @property
    def page_count(self) -> int:
        return len(self.pages)


class PageFlowEngine:
    def __init__(self, config: Optional[LayoutConfig] = None):
        self.config = config or LayoutConfig()
        self._pages = []
        self.y = self.config.top_y
        self._new_page()

    @property
    def page_number(self) -> int:
        return len(self._pages)

    def _new_page(self):
        self._pages.append([])
        self.y = self.config.top_y
        if len(self._pages) > 1:
            logger.debug("Page %d started, cursor at %.1f", len(self._pages), self.y)

    def _roll_if_below(self):
        if self.y < self.config.margin_bottom:
            logger.debug("Cursor %.1f below bottom margin %s on page %d",
                         self.y, self.config.margin_bottom, self.page_number)
            self._new_page()

    def _ensure_room(self):
        self._roll_if_below()
        if self.y < self.config.margin_bottom:
            raise LayoutInvariantError(
                f"Cursor {self.y} below bottom margin {self.config.margin_bottom} "
                f"on page {self.page_number} after roll-over",
                page_number=self.page_number,
                y=self.y,
            )

    def advance(self, distance: float):
        """Move the cursor down by ``distance`` without drawing."""
        self.y -= distance
        self._roll_if_below()

    def place_line(self, fragments: list, size: float, color: tuple, line_height: float):
        """Draw one line made of positioned fragments, then advance by ``line_height``."""
        self._ensure_room()
        page = self._pages[-1]
        for frag in fragments:
            page.append(TextOp(frag.x, self.y, frag.text, frag.font_name, size, color))
        self.y -= line_height
        self._roll_if_below()

    def place_text(self, text: str, x: float, font_name: str, size: float,
                   color: tuple, line_height: float):
        self.place_line([Fragment(text, x, font_name)], size, color, line_height)

    def place_rule(self, x_start: float, x_end: float, thickness: float, color: tuple):
        """Draw a horizontal rule at the cursor. The cursor does not move."""
        self._ensure_room()
        self._pages[-1].append(RuleOp(x_start, x_end, self.y, thickness, color))

    def finish(self, header: Optional[HeaderRecord] = None, sections=()) -> Document:
        """Freeze the pages into a Document, dropping an empty final page."""
        page_ops = self._pages
        if len(page_ops) > 1 and not page_ops[-1]:
            page_ops = page_ops[:-1]
        pages = tuple(
            Page(self.config.page_width, self.config.page_height, tuple(ops))
            for ops in page_ops
        )
        return Document(pages=pages, header=header or HeaderRecord(), sections=tuple(sections))
