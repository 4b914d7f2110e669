"""Resume layout: document text in, paginated Document out.

One linear pass:
  1. Header   - candidate name, upper-cased, large bold dark blue
  2. Contact  - location • phone • email • link, unset fields dropped
  3. Divider  - one horizontal rule across the content width
  4. Body     - every body line classified and drawn with its category's
                spacing, indent and style; nothing is revisited once drawn

Every wrapped sub-line goes through the PageFlowEngine, which rolls to a new
page before any draw that would land below the bottom margin.
"""

import logging
from typing import Optional

from resume_layout.classifier import (
    Blank,
    JobEntry,
    PlainBody,
    SectionHeader,
    SkillsCategory,
    classify_line,
)
from resume_layout.config import LayoutConfig
from resume_layout.dates import format_period
from resume_layout.fonts import measure as default_measure
from resume_layout.header import HeaderRecord, extract_header
from resume_layout.inline_style import layout_runs
from resume_layout.page_flow import Document, PageFlowEngine
from resume_layout.wrapping import wrap_text

logger = logging.getLogger(__name__)


class ResumeLayoutDriver:
    def __init__(self, config: Optional[LayoutConfig] = None, measure=default_measure):
        self.config = config or LayoutConfig()
        self.measure = measure
        self.flow = PageFlowEngine(self.config)
        self.sections = []
        self.in_skills_section = False
        self._handlers = {
            Blank: self._draw_blank,
            SectionHeader: self._draw_section_header,
            JobEntry: self._draw_job_entry,
            SkillsCategory: self._draw_skills_category,
            PlainBody: self._draw_plain_body,
        }

    def _draw_wrapped(self, text: str, x: float, font_name: str, size: float,
                      max_width: float, color: tuple, line_height: float):
        for line in wrap_text(text, font_name, size, max_width, measure=self.measure):
            self.flow.place_text(line, x, font_name, size, color, line_height)

    # --- Header block ---

    def _draw_name(self, header: HeaderRecord):
        cfg = self.config
        if not header.name:
            self.flow.advance(cfg.name_line_height)
            return
        self._draw_wrapped(
            header.name.upper(), cfg.left, cfg.font_bold, cfg.name_size,
            cfg.content_width, cfg.dark_blue, cfg.name_line_height,
        )
        self.flow.advance(cfg.gap_after_name)

    def _draw_contact_line(self, header: HeaderRecord):
        cfg = self.config
        parts = header.contact_parts()
        if not parts:
            return
        self._draw_wrapped(
            cfg.contact_separator.join(parts), cfg.left, cfg.font_regular,
            cfg.contact_size, cfg.content_width, cfg.dark_gray, cfg.contact_line_height,
        )
        self.flow.advance(cfg.gap_after_contact)

    def _draw_divider(self):
        cfg = self.config
        self.flow.place_rule(cfg.left, cfg.right, cfg.divider_thickness, cfg.dark_blue)
        self.flow.advance(cfg.gap_after_divider)

    # --- Body lines ---

    def _draw_blank(self, _line: Blank):
        self.flow.advance(self.config.gap_blank_line)

    def _draw_section_header(self, line: SectionHeader):
        cfg = self.config
        self.flow.advance(cfg.gap_before_section)
        self._draw_wrapped(
            line.text, cfg.left, cfg.font_bold, cfg.section_header_size,
            cfg.content_width, cfg.dark_blue, cfg.section_line_height,
        )
        self.sections.append(line.title)
        if line.is_skills:
            self.in_skills_section = True
            logger.debug("Entered skills section")

    def _draw_job_entry(self, line: JobEntry):
        cfg = self.config
        x = cfg.left + cfg.body_indent
        width = cfg.content_width - cfg.body_wrap_inset
        self.flow.advance(cfg.gap_before_job)
        self._draw_wrapped(
            line.title, x, cfg.font_bold, cfg.body_size + 1,
            width, cfg.medium_blue, cfg.body_line_height + 2,
        )
        self._draw_wrapped(
            line.company, x, cfg.font_regular, cfg.body_size,
            width, cfg.gray, cfg.body_line_height,
        )
        self._draw_wrapped(
            format_period(line.period), x, cfg.font_regular, cfg.body_size - 1,
            width, cfg.gray, cfg.body_line_height - 2,
        )
        self.flow.advance(cfg.gap_after_job)

    def _draw_skills_category(self, line: SkillsCategory):
        cfg = self.config
        self._draw_wrapped(
            line.text, cfg.left + cfg.body_indent, cfg.font_bold, cfg.body_size + 1,
            cfg.content_width - cfg.skills_wrap_inset, cfg.medium_blue,
            cfg.body_line_height + 2,
        )

    def _draw_plain_body(self, line: PlainBody):
        cfg = self.config
        x = cfg.left + cfg.body_indent
        # Wrapped on the raw text, markers included, in the regular font
        wrapped = wrap_text(
            line.text, cfg.font_regular, cfg.body_size,
            cfg.content_width - cfg.body_wrap_inset, measure=self.measure,
        )
        for sub_line in wrapped:
            fragments = layout_runs(
                sub_line, x, cfg.font_regular, cfg.font_bold, cfg.body_size,
                measure=self.measure,
            )
            self.flow.place_line(fragments, cfg.body_size, cfg.black, cfg.body_line_height)

    # --- Entry point ---

    def layout(self, text: str) -> Document:
        header, body = extract_header(text)
        self._draw_name(header)
        self._draw_contact_line(header)
        self._draw_divider()

        body_lines = body.split("\n") if body else []
        for raw_line in body_lines:
            classified = classify_line(raw_line)
            self._handlers[type(classified)](classified)

        document = self.flow.finish(header=header, sections=self.sections)
        logger.info(
            "Laid out %d page(s), %d section(s)", document.page_count, len(document.sections)
        )
        return document


def layout_resume(text: str, config: Optional[LayoutConfig] = None,
                  measure=default_measure) -> Document:
    """Lay out one resume document. Each call owns its own cursor and pages."""
    return ResumeLayoutDriver(config, measure=measure).layout(text)
