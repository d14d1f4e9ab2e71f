from abc import ABC, abstractmethod


class BaseWebFetcher(ABC):
    """Contract for fetching a web page as plain text."""

    @abstractmethod
    async def fetch_text(self, url: str) -> str:
        """Download *url* and return its visible text.

        Only one fetch is in flight at a time; a new call cancels the previous one.

        Raises:
            InvalidUrlError: for non-http(s) URLs, before any network activity.
            WebTimeoutError, WebNetworkError, WebHttpStatusError, WebParseError,
            EmptyPageError: on failure.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Abort the in-flight fetch, if any. Safe to call at any time."""
