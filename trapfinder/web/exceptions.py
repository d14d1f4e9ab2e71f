from trapfinder.scanner.exceptions import IngestionFatalError, PipelineError


class WebFetchError(PipelineError):
    """Base exception for web page ingestion."""


class InvalidUrlError(WebFetchError):
    """Raised before dispatch when the URL is malformed or not http/https."""


class WebNetworkError(WebFetchError):
    """Raised when the request fails at the transport level."""


class WebTimeoutError(WebNetworkError):
    """Raised when the page does not respond within the fetch timeout."""


class WebHttpStatusError(WebFetchError):
    """Raised when the server answers outside 2xx."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP error {status_code}")
        self.status_code = status_code


class WebParseError(WebFetchError, IngestionFatalError):
    """Raised when the response body cannot be turned into text."""


class EmptyPageError(WebFetchError, IngestionFatalError):
    """Raised when the page yields no text at all."""
