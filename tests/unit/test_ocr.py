from unittest.mock import MagicMock, patch

import pytest

from trapfinder.ocr.exceptions import OcrError
from trapfinder.ocr.factory import OcrEngineFactory
from trapfinder.ocr.pymupdf_adapter import PyMuPdfOcrAdapter


def _make_settings(ocr_engine: str):  # type: ignore[no-untyped-def]
    with patch("trapfinder.config.settings.Settings") as mock_cls:
        settings = mock_cls.return_value
        settings.ocr_engine = ocr_engine
        settings.ocr_languages = "jpn+eng"
        settings.ocr_dpi = 300
        return settings


def _make_ocr_document(text: str) -> MagicMock:
    page = MagicMock()
    page.get_text.return_value = text
    doc = MagicMock()
    doc.__enter__.return_value = doc
    doc.__iter__.return_value = iter([page])
    return doc


class TestPyMuPdfOcrAdapter:
    def test_returns_trimmed_non_empty_lines(self) -> None:
        with patch("trapfinder.ocr.pymupdf_adapter.pymupdf") as mock_pymupdf:
            mock_pymupdf.Pixmap.return_value.alpha = False
            mock_pymupdf.open.return_value = _make_ocr_document("  第1条  \n\n 解約料 \n")
            text = PyMuPdfOcrAdapter().extract_text(b"png")
        assert text == "第1条\n解約料"

    def test_passes_languages_and_dpi(self) -> None:
        with patch("trapfinder.ocr.pymupdf_adapter.pymupdf") as mock_pymupdf:
            pixmap = mock_pymupdf.Pixmap.return_value
            pixmap.alpha = False
            mock_pymupdf.open.return_value = _make_ocr_document("x")
            PyMuPdfOcrAdapter(languages="eng", dpi=150).extract_text(b"png")
        pixmap.set_dpi.assert_called_once_with(150, 150)
        pixmap.pdfocr_tobytes.assert_called_once_with(language="eng")

    def test_blank_page_returns_empty_string(self) -> None:
        with patch("trapfinder.ocr.pymupdf_adapter.pymupdf") as mock_pymupdf:
            mock_pymupdf.Pixmap.return_value.alpha = False
            mock_pymupdf.open.return_value = _make_ocr_document(" \n ")
            assert PyMuPdfOcrAdapter().extract_text(b"png") == ""

    def test_wraps_failures(self) -> None:
        with patch("trapfinder.ocr.pymupdf_adapter.pymupdf") as mock_pymupdf:
            mock_pymupdf.Pixmap.side_effect = RuntimeError("tesseract missing")
            with pytest.raises(OcrError, match="tesseract missing"):
                PyMuPdfOcrAdapter().extract_text(b"png")

    def test_invalid_image_bytes_raise_ocr_error(self) -> None:
        with pytest.raises(OcrError):
            PyMuPdfOcrAdapter().extract_text(b"not an image")


class TestOcrEngineFactory:
    def test_creates_pymupdf_engine(self) -> None:
        assert isinstance(OcrEngineFactory.create(_make_settings("pymupdf")), PyMuPdfOcrAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown OCR engine"):
            OcrEngineFactory.create(_make_settings("vision"))
