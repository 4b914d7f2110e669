"""Job period reformatting: ``MM/YYYY`` tokens become ``Mon YYYY``."""

import logging
import re

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

MONTH_YEAR = re.compile(r"^(\d{2})/(\d{4})$")
RANGE_SEPARATOR = re.compile(r"[–-]")


def _format_token(token: str) -> str:
    m = MONTH_YEAR.match(token)
    if not m:
        logger.debug("Date token %r is not MM/YYYY; left unchanged", token)
        return token
    month = int(m.group(1))
    if not 1 <= month <= 12:
        logger.debug("Month out of range in %r; left unchanged", token)
        return token
    return f"{MONTH_NAMES[month - 1]} {m.group(2)}"


def format_period(period: str) -> str:
    """Reformat a job period such as ``06/2022 - Current``.

    Ranges split on an en dash or hyphen are rejoined with `` – `` whether or
    not any token was recognised. Unrecognised shapes come back unchanged.
    """
    if RANGE_SEPARATOR.search(period):
        parts = [part.strip() for part in RANGE_SEPARATOR.split(period)]
        return " – ".join(_format_token(part) for part in parts)
    return _format_token(period)
