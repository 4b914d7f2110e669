"""Resume Layout — plain-text resume to paginated PDF

Runs the layout pipeline:
  1. Header extraction (six-line preamble)
  2. Body classification and layout with automatic page breaks
  3. PDF rendering
  4. Optional parseability check (text extracted back out of the PDF)

Usage:
    python main.py --input resume.txt
    python main.py --input resume.txt --output out/resume.pdf --check
    python main.py --input resume.txt --font-regular Arial.ttf --font-bold "Arial Bold.ttf"
"""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger("resume-layout")


def run_layout(
    resume_text: str,
    output_path: str,
    font_regular: str = None,
    font_bold: str = None,
    check: bool = False,
) -> dict:
    """Lay out ``resume_text`` and write the PDF to ``output_path``.

    Returns:
        dict with output_path, page_count, sections and (when check=True) parseability.
    """
    from resume_layout.config import LayoutConfig
    from resume_layout.driver import layout_resume
    from resume_layout.fonts import register_fonts
    from resume_layout.parseability import check_parseability
    from resume_layout.renderer import save_pdf

    regular, bold = register_fonts(font_regular, font_bold)
    config = LayoutConfig(font_regular=regular, font_bold=bold)

    document = layout_resume(resume_text, config=config)
    pdf_bytes = save_pdf(document, output_path)

    result = {
        "output_path": output_path,
        "page_count": document.page_count,
        "sections": list(document.sections),
    }
    if check:
        report = check_parseability(pdf_bytes, document.sections)
        for issue in report["issues"]:
            logger.warning("Parseability: %s", issue)
        result["parseability"] = report
    return result


def main():
    from resume_layout import config

    parser = argparse.ArgumentParser(description="Resume Layout — text to paginated PDF")
    parser.add_argument("--input", type=str, required=True, help="Path to the resume text file")
    parser.add_argument(
        "--output", type=str,
        help="PDF path (default: <RESUME_OUTPUT_DIR>/<input name>.pdf)",
    )
    parser.add_argument(
        "--check", action="store_true",
        help="Extract text back out of the PDF and report missing sections",
    )
    parser.add_argument("--font-regular", type=str, default=config.FONT_REGULAR_PATH,
                        help="TrueType file for body text (default: built-in Helvetica)")
    parser.add_argument("--font-bold", type=str, default=config.FONT_BOLD_PATH,
                        help="TrueType file for bold text")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose/debug logging")

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not os.path.exists(args.input):
        logger.error("Input file not found: %s", args.input)
        sys.exit(1)
    with open(args.input, "r", encoding="utf-8") as f:
        resume_text = f.read()
    if not resume_text.strip():
        logger.error("Input file is empty: %s", args.input)
        sys.exit(1)

    output_path = args.output
    if not output_path:
        stem = os.path.splitext(os.path.basename(args.input))[0]
        output_path = os.path.join(str(config.OUTPUT_DIR), f"{stem}.pdf")

    from resume_layout.page_flow import LayoutInvariantError

    try:
        run_layout(
            resume_text,
            output_path,
            font_regular=args.font_regular,
            font_bold=args.font_bold,
            check=args.check,
        )
    except LayoutInvariantError as e:
        logger.error("Layout failed on page %d: %s", e.page_number, e)
        sys.exit(1)


if __name__ == "__main__":
    main()
