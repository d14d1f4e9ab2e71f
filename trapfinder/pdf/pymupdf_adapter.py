import pymupdf

from trapfinder.logging.logger import Log
from trapfinder.pdf.base import BasePdfRasterizer
from trapfinder.pdf.exceptions import PdfLoadError, PdfNoPagesError, PdfRasterizationError


class PyMuPdfRasterizer(BasePdfRasterizer):
    """Renders PDF pages to PNG using PyMuPDF."""

    def __init__(self, scale: float = 2.0) -> None:
        self._scale = scale

    def rasterize(self, pdf_bytes: bytes) -> list[bytes]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.page_count == 0:
                    raise PdfNoPagesError("PDF has no pages")
                return self._render_pages(doc)
        except PdfRasterizationError:
            raise
        except Exception as exc:
            raise PdfLoadError(f"pymupdf could not open PDF: {exc}") from exc

    def _render_pages(self, doc: pymupdf.Document) -> list[bytes]:
        matrix = pymupdf.Matrix(self._scale, self._scale)
        images: list[bytes] = []
        failed_pages: list[int] = []
        for index, page in enumerate(doc):
            try:
                pixmap = page.get_pixmap(matrix=matrix, alpha=False)
                images.append(pixmap.tobytes("png"))
            except Exception as exc:
                Log.warning(f"Skipping PDF page {index + 1}: {exc}")
                failed_pages.append(index + 1)
        if not images:
            raise PdfLoadError(f"No PDF page could be rendered (failed: {failed_pages})")
        return images
