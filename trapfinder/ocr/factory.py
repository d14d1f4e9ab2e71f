from trapfinder.config.settings import Settings
from trapfinder.ocr.base import BaseOcrEngine
from trapfinder.ocr.pymupdf_adapter import PyMuPdfOcrAdapter


class OcrEngineFactory:
    """Creates the configured OCR engine."""

    ENGINES: dict[str, type[PyMuPdfOcrAdapter]] = {
        "pymupdf": PyMuPdfOcrAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrEngine:
        engine = settings.ocr_engine.lower()
        engine_cls = cls.ENGINES.get(engine)
        if engine_cls is None:
            raise ValueError(
                f"Unknown OCR engine '{engine}'. Choose from: {list(cls.ENGINES)}"
            )
        return engine_cls(languages=settings.ocr_languages, dpi=settings.ocr_dpi)
