from unittest.mock import MagicMock, patch

import pymupdf
import pytest

from trapfinder.pdf.exceptions import PdfLoadError, PdfNoPagesError
from trapfinder.pdf.pymupdf_adapter import PyMuPdfRasterizer

_PNG_SIGNATURE = b"\x89PNG"


class TestPyMuPdfRasterizer:
    def test_renders_one_png_per_page(self, multi_page_pdf_bytes: bytes) -> None:
        images = PyMuPdfRasterizer().rasterize(multi_page_pdf_bytes)
        assert len(images) == 3
        assert all(image.startswith(_PNG_SIGNATURE) for image in images)

    def test_scale_controls_resolution(self, sample_pdf_bytes: bytes) -> None:
        image = PyMuPdfRasterizer(scale=2.0).rasterize(sample_pdf_bytes)[0]
        pixmap = pymupdf.Pixmap(image)
        assert (pixmap.width, pixmap.height) == (1224, 1584)

    def test_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(PdfLoadError):
            PyMuPdfRasterizer().rasterize(b"not a pdf")

    def test_raises_when_no_pages(self) -> None:
        doc = MagicMock()
        doc.page_count = 0
        doc.__enter__.return_value = doc
        with patch("trapfinder.pdf.pymupdf_adapter.pymupdf.open", return_value=doc):
            with pytest.raises(PdfNoPagesError):
                PyMuPdfRasterizer().rasterize(b"%PDF")

    def test_skips_pages_that_fail_to_render(self) -> None:
        good = MagicMock()
        good.get_pixmap.return_value.tobytes.return_value = b"png"
        bad = MagicMock()
        bad.get_pixmap.side_effect = RuntimeError("broken page")
        doc = MagicMock()
        doc.page_count = 2
        doc.__enter__.return_value = doc
        doc.__iter__.return_value = iter([bad, good])
        with patch("trapfinder.pdf.pymupdf_adapter.pymupdf.open", return_value=doc):
            assert PyMuPdfRasterizer().rasterize(b"%PDF") == [b"png"]

    def test_raises_when_every_page_fails(self) -> None:
        bad = MagicMock()
        bad.get_pixmap.side_effect = RuntimeError("broken page")
        doc = MagicMock()
        doc.page_count = 1
        doc.__enter__.return_value = doc
        doc.__iter__.return_value = iter([bad])
        with patch("trapfinder.pdf.pymupdf_adapter.pymupdf.open", return_value=doc):
            with pytest.raises(PdfLoadError, match="No PDF page"):
                PyMuPdfRasterizer().rasterize(b"%PDF")
