from trapfinder.scanner.exceptions import IngestionError


class OcrError(IngestionError):
    """Raised when text recognition fails for one image."""
