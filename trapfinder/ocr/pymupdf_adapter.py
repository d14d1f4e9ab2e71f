import pymupdf

from trapfinder.ocr.base import BaseOcrEngine
from trapfinder.ocr.exceptions import OcrError


class PyMuPdfOcrAdapter(BaseOcrEngine):
    """Recognizes text with Tesseract through PyMuPDF's OCR bridge.

    The image is wrapped into a one-page OCR'd PDF, whose text layer is then
    read back line by line.
    """

    def __init__(self, languages: str = "jpn+eng", dpi: int = 300) -> None:
        self._languages = languages
        self._dpi = dpi

    def extract_text(self, image: bytes) -> str:
        try:
            pixmap = pymupdf.Pixmap(image)
            if pixmap.alpha:
                pixmap = pymupdf.Pixmap(pixmap, 0)
            pixmap.set_dpi(self._dpi, self._dpi)
            ocr_pdf = pixmap.pdfocr_tobytes(language=self._languages)
            with pymupdf.open(stream=ocr_pdf, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                raw = "\n".join(page.get_text() for page in doc)
        except Exception as exc:
            raise OcrError(f"OCR failed: {exc}") from exc
        lines = [line.strip() for line in raw.splitlines()]
        return "\n".join(line for line in lines if line)
