"""Tests for renderer.py and parseability.py — PDF output read back with pdfplumber."""

import io

import pdfplumber
import pytest

from resume_layout.driver import layout_resume
from resume_layout.parseability import check_parseability
from resume_layout.renderer import render_pdf, save_pdf


@pytest.fixture
def document(sample_resume):
    return layout_resume(sample_resume)


@pytest.fixture
def long_document(resume_factory):
    body = "\n".join(f"Delivered project number {i} on time." for i in range(120))
    return layout_resume(resume_factory(body))


class TestRenderPdf:
    def test_produces_pdf_bytes(self, document):
        pdf_bytes = render_pdf(document)
        assert pdf_bytes.startswith(b"%PDF")

    def test_page_count_matches_document(self, long_document):
        assert long_document.page_count > 1
        with pdfplumber.open(io.BytesIO(render_pdf(long_document))) as pdf:
            assert len(pdf.pages) == long_document.page_count
            assert round(float(pdf.pages[0].width)) == 595
            assert round(float(pdf.pages[0].height)) == 842

    def test_text_is_extractable(self, document):
        with pdfplumber.open(io.BytesIO(render_pdf(document))) as pdf:
            text = pdf.pages[0].extract_text()
        assert "JANE DOE" in text
        assert "Professional Experience:" in text
        assert "Jun 2022 – Current" in text

    def test_metadata_from_header(self, document):
        with pdfplumber.open(io.BytesIO(render_pdf(document))) as pdf:
            assert pdf.metadata.get("Title") == "Jane Doe"
            assert pdf.metadata.get("Subject") == "Senior Software Engineer"

    def test_save_pdf_creates_folders(self, document, tmp_path):
        path = tmp_path / "nested" / "out" / "resume.pdf"
        pdf_bytes = save_pdf(document, str(path))
        assert path.exists()
        assert path.read_bytes() == pdf_bytes


class TestParseability:
    def test_clean_report_for_sample(self, document):
        report = check_parseability(render_pdf(document), document.sections)
        assert report["issues"] == [], f"Unexpected issues: {report['issues']}"
        assert report["text_extractable"]
        assert report["sections_found"] == list(document.sections)
        assert report["page_count"] == document.page_count

    def test_missing_section_is_reported(self, document):
        report = check_parseability(render_pdf(document), ["Certifications"])
        assert report["sections_found"] == []
        assert "Section 'Certifications' not found in extracted text" in report["issues"]

    def test_short_document_is_not_extractable(self):
        document = layout_resume("Al")
        report = check_parseability(render_pdf(document))
        assert not report["text_extractable"]
        assert any(issue.startswith("Only ") for issue in report["issues"])

    def test_garbage_bytes_do_not_raise(self):
        report = check_parseability(b"not a pdf at all")
        assert not report["text_extractable"]
        assert report["issues"] and report["issues"][0].startswith("PDF parse error")
