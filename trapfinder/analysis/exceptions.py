class AnalysisError(Exception):
    """Raised when the analysis call fails."""


class MissingApiKeyError(AnalysisError):
    """Raised when no API key is configured for the provider."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class AnalysisTimeoutError(AnalysisNetworkError):
    """Raised when the AI provider does not answer in time; retrying may help."""


class HttpStatusError(AnalysisError):
    """Raised when the AI provider answers outside 2xx."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"AI provider returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class DecodingError(AnalysisError):
    """Raised when the response envelope or the embedded JSON cannot be decoded."""
