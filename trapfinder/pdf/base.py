from abc import ABC, abstractmethod


class BasePdfRasterizer(ABC):
    """Contract for all PDF rasterization adapters."""

    @abstractmethod
    def rasterize(self, pdf_bytes: bytes) -> list[bytes]:
        """Render every page of a PDF to an image.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            PNG-encoded page images in page order.

        Raises:
            PdfLoadError: if the document cannot be opened or no page renders.
            PdfNoPagesError: if the document has zero pages.
        """
