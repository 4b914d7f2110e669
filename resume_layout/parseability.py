"""Post-render check: can the text be extracted back out of the PDF?"""

import io
import logging

import pdfplumber

logger = logging.getLogger(__name__)

MIN_EXTRACTED_CHARS = 50
MAX_GARBLED_CHARS = 5


def check_parseability(pdf_bytes: bytes, expected_sections=()) -> dict:
    """Extract text from rendered PDF bytes and report what came back.

    Never raises for a bad PDF; parse failures are listed under ``issues``.
    """
    result = {
        "text_extractable": False,
        "total_chars": 0,
        "page_count": 0,
        "sections_found": [],
        "issues": [],
    }
    try:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            result["page_count"] = len(pdf.pages)
            full_text = "\n".join(page.extract_text() or "" for page in pdf.pages)
    except Exception as e:
        result["issues"].append(f"PDF parse error: {e}")
        logger.warning("Parseability check failed: %s", e)
        return result

    result["text_extractable"] = len(full_text.strip()) > MIN_EXTRACTED_CHARS
    result["total_chars"] = len(full_text)
    if not result["text_extractable"]:
        result["issues"].append(f"Only {len(full_text.strip())} characters extracted")

    lowered = full_text.lower()
    for section in expected_sections:
        if section.lower() in lowered:
            result["sections_found"].append(section)
        else:
            result["issues"].append(f"Section '{section}' not found in extracted text")

    garbled_count = sum(1 for ch in full_text if ord(ch) > 0xFFFF)
    if garbled_count > MAX_GARBLED_CHARS:
        result["issues"].append(f"Found {garbled_count} potentially garbled characters")

    return result
