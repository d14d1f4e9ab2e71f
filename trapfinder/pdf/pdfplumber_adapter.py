import io

import pdfplumber
from pdfplumber.page import Page

from trapfinder.logging.logger import Log
from trapfinder.pdf.base import BasePdfRasterizer
from trapfinder.pdf.exceptions import PdfLoadError, PdfNoPagesError, PdfRasterizationError


class PdfPlumberRasterizer(BasePdfRasterizer):
    """Renders PDF pages to PNG using pdfplumber (pypdfium2 backend)."""

    _BASE_DPI = 72

    def __init__(self, scale: float = 2.0) -> None:
        self._resolution = int(self._BASE_DPI * scale)

    def rasterize(self, pdf_bytes: bytes) -> list[bytes]:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                if not pdf.pages:
                    raise PdfNoPagesError("PDF has no pages")
                images: list[bytes] = []
                for index, page in enumerate(pdf.pages):
                    rendered = self._render_page(page, index)
                    if rendered is not None:
                        images.append(rendered)
        except PdfRasterizationError:
            raise
        except Exception as exc:
            raise PdfLoadError(f"pdfplumber could not open PDF: {exc}") from exc
        if not images:
            raise PdfLoadError("No PDF page could be rendered")
        return images

    def _render_page(self, page: Page, index: int) -> bytes | None:
        try:
            page_image = page.to_image(resolution=self._resolution)
            buf = io.BytesIO()
            page_image.original.save(buf, format="PNG")
            return buf.getvalue()
        except Exception as exc:
            Log.warning(f"Skipping PDF page {index + 1}: {exc}")
            return None
