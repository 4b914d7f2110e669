"""Header extraction: the six-line preamble at the top of the document text.

The first six non-blank lines map, in order, to headline, name, email, phone,
location and link. Nothing about their content is validated. Everything after
the sixth line (leading blank lines skipped) is the body.
"""

from dataclasses import dataclass
from typing import Optional

HEADER_FIELDS = ("headline", "name", "email", "phone", "location", "link")


@dataclass(frozen=True)
class HeaderRecord:
    headline: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    link: Optional[str] = None

    def contact_parts(self) -> list:
        """Contact fields in display order, unset fields dropped."""
        return [p for p in (self.location, self.phone, self.email, self.link) if p]


def extract_header(text: str) -> tuple:
    """Split document text into ``(HeaderRecord, body)``.

    With fewer than six non-blank lines the available fields are filled in
    order and the body is the whole text, so no content is dropped.
    """
    lines = (text or "").split("\n")
    info = []
    body_start = 0
    for idx, line in enumerate(lines):
        stripped = line.strip()
        if stripped:
            info.append(stripped)
        if len(info) == len(HEADER_FIELDS):
            body_start = idx + 1
            break

    while body_start < len(lines) and not lines[body_start].strip():
        body_start += 1

    header = HeaderRecord(**dict(zip(HEADER_FIELDS, info)))
    return header, "\n".join(lines[body_start:])
