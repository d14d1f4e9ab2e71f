from trapfinder.scanner.exceptions import IngestionFatalError


class PdfRasterizationError(IngestionFatalError):
    """Raised when a PDF cannot be turned into page images."""


class PdfLoadError(PdfRasterizationError):
    """Raised when the PDF cannot be opened or no page could be rendered."""


class PdfNoPagesError(PdfRasterizationError):
    """Raised when the PDF opens but contains no pages."""
