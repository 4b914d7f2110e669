"""Tests for fonts.py — measurement and font registration fallbacks."""

import logging
import os
import shutil

import pytest
import reportlab

from resume_layout.fonts import font_name_for, measure, register_fonts


class TestMeasure:
    def test_width_scales_with_size(self):
        assert measure("Redis", "Helvetica", 22) == pytest.approx(2 * measure("Redis", "Helvetica", 11))

    def test_bold_is_wider(self):
        assert measure("Redis", "Helvetica-Bold", 11) > measure("Redis", "Helvetica", 11)

    def test_empty_text_has_no_width(self):
        assert measure("", "Helvetica", 11) == 0


class TestRegisterFonts:
    def test_no_paths_uses_builtin_pair(self):
        assert register_fonts() == ("Helvetica", "Helvetica-Bold")

    def test_missing_file_falls_back_with_warning(self, tmp_path, caplog):
        missing = str(tmp_path / "missing.ttf")
        with caplog.at_level(logging.WARNING, logger="resume_layout.fonts"):
            assert register_fonts(missing) == ("Helvetica", "Helvetica-Bold")
        assert "Font file not found" in caplog.text

    def test_unloadable_file_falls_back(self, tmp_path, caplog):
        bogus = tmp_path / "bogus.ttf"
        bogus.write_bytes(b"this is not a font")
        with caplog.at_level(logging.WARNING, logger="resume_layout.fonts"):
            assert register_fonts(str(bogus)) == ("Helvetica", "Helvetica-Bold")
        assert "Font registration failed" in caplog.text


VERA_DIR = os.path.join(os.path.dirname(reportlab.__file__), "fonts")


@pytest.fixture
def vera_pair(tmp_path):
    """Two different TTF files that share the stem ``Resume``."""
    regular, bold = os.path.join(VERA_DIR, "Vera.ttf"), os.path.join(VERA_DIR, "VeraBd.ttf")
    if not (os.path.exists(regular) and os.path.exists(bold)):
        pytest.skip("reportlab bundled Vera fonts not available")
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()
    first = tmp_path / "a" / "Resume Sans.ttf"
    second = tmp_path / "b" / "Resume Sans.ttf"
    shutil.copy(regular, first)
    shutil.copy(bold, second)
    return str(first), str(second)


class TestFontNames:
    def test_name_comes_from_file_stem(self):
        assert font_name_for("/fonts/Arial Bold.ttf") == "Arial-Bold"

    def test_second_file_with_same_stem_gets_its_own_name(self, vera_pair):
        first, second = vera_pair
        regular, bold = register_fonts(first, second)
        assert regular.startswith("Resume-Sans")
        assert bold.startswith("Resume-Sans")
        assert regular != bold, "Earlier registration is not rebound"
        assert measure("Redis", bold, 11) > measure("Redis", regular, 11)

    def test_missing_bold_uses_regular_for_both(self, vera_pair):
        first, _ = vera_pair
        regular, bold = register_fonts(first, first + ".missing")
        assert regular == bold
