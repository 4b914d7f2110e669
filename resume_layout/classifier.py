"""Body line classification.

Rules run in order and the first match wins:
  1. ends with ``:``                        -> SectionHeader
  2. ``<title> at <company>: <period>``      -> JobEntry
  3. starts with the ``·`` bullet           -> SkillsCategory
  4. anything else                          -> PlainBody
Lines that are empty after trimming are Blank and never reach the rules.
"""

import re
from dataclasses import dataclass

SKILLS_BULLET = "·"
JOB_ENTRY = re.compile(r"^(.+?) at (.+?):\s*(.+)$")


@dataclass(frozen=True)
class Blank:
    pass


@dataclass(frozen=True)
class SectionHeader:
    text: str

    @property
    def title(self) -> str:
        return self.text[:-1].strip()

    @property
    def is_skills(self) -> bool:
        return self.text.lower() == "skills:"


@dataclass(frozen=True)
class JobEntry:
    title: str
    company: str
    period: str


@dataclass(frozen=True)
class SkillsCategory:
    # The bullet glyph is kept; see DESIGN.md
    text: str


@dataclass(frozen=True)
class PlainBody:
    text: str


def _section_header(line: str):
    if line.endswith(":"):
        return SectionHeader(line)
    return None


def _job_entry(line: str):
    # A line with " at " that misses the colon falls through to PlainBody
    m = JOB_ENTRY.match(line)
    if m:
        title, company, period = m.groups()
        return JobEntry(title.strip(), company.strip(), period.strip())
    return None


def _skills_category(line: str):
    if line.startswith(SKILLS_BULLET):
        return SkillsCategory(line)
    return None


RULES = (_section_header, _job_entry, _skills_category)


def classify_line(raw_line: str):
    """Classify one body line into a ClassifiedLine variant."""
    line = raw_line.strip()
    if not line:
        return Blank()
    for rule in RULES:
        classified = rule(line)
        if classified is not None:
            return classified
    return PlainBody(line)
