class PipelineError(Exception):
    """Base exception for all scan-to-analysis pipeline errors."""


class IngestionError(PipelineError):
    """A single page could not be read; recorded in the document as a marker."""


class IngestionFatalError(PipelineError):
    """The whole input is unreadable: corrupt file, zero pages, or no text at all."""


class NoTextRecognizedError(IngestionFatalError):
    """Every page was processed but the assembled text is empty."""
