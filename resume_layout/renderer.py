"""PDF output: replay a laid-out Document onto a reportlab canvas."""

import io
import logging
import os

from reportlab.pdfgen import canvas

from resume_layout.page_flow import Document, RuleOp, TextOp

logger = logging.getLogger(__name__)


def _draw_op(c: canvas.Canvas, op):
    if isinstance(op, TextOp):
        c.setFont(op.font_name, op.size)
        c.setFillColorRGB(*op.color)
        c.drawString(op.x, op.y, op.text)
    elif isinstance(op, RuleOp):
        c.saveState()
        c.setStrokeColorRGB(*op.color)
        c.setLineWidth(op.thickness)
        c.line(op.x_start, op.y, op.x_end, op.y)
        c.restoreState()
    else:
        raise TypeError(f"Unknown draw operation: {op!r}")


def render_pdf(document: Document) -> bytes:
    """Serialize every page of ``document`` into PDF bytes."""
    buffer = io.BytesIO()
    first = document.pages[0] if document.pages else None
    c = canvas.Canvas(buffer, pagesize=(first.width, first.height) if first else None)

    header = document.header
    if header.name:
        c.setTitle(header.name)
        c.setAuthor(header.name)
    if header.headline:
        c.setSubject(header.headline)

    for page in document.pages:
        c.setPageSize((page.width, page.height))
        for op in page.ops:
            _draw_op(c, op)
        c.showPage()
    c.save()

    pdf_bytes = buffer.getvalue()
    buffer.close()
    return pdf_bytes


def save_pdf(document: Document, output_path: str) -> bytes:
    """Render ``document`` to ``output_path``, creating parent folders.

    Returns the bytes written.
    """
    pdf_bytes = render_pdf(document)
    folder = os.path.dirname(os.path.abspath(output_path))
    os.makedirs(folder, exist_ok=True)
    with open(output_path, "wb") as f:
        f.write(pdf_bytes)
    logger.info("PDF generated: %s (%d page(s))", output_path, document.page_count)
    return pdf_bytes
