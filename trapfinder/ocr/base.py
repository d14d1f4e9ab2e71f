from abc import ABC, abstractmethod


class BaseOcrEngine(ABC):
    """Contract for all text recognition adapters."""

    @abstractmethod
    def extract_text(self, image: bytes) -> str:
        """Recognize the text printed on one page image.

        Args:
            image: Encoded image bytes (PNG, JPEG, ...).

        Returns:
            Recognized lines joined with newlines; empty string for a blank page.

        Raises:
            OcrError: if recognition fails.
        """
