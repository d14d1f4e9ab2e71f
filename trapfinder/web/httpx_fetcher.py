import asyncio

import httpx

from trapfinder.logging.logger import Log
from trapfinder.web.base import BaseWebFetcher
from trapfinder.web.exceptions import (
    EmptyPageError,
    InvalidUrlError,
    WebHttpStatusError,
    WebNetworkError,
    WebParseError,
    WebTimeoutError,
)
from trapfinder.web.html_text import clean_lines, html_to_text
from trapfinder.web.url import validate_url


class HttpxWebFetcher(BaseWebFetcher):
    """Fetches a page with httpx and reduces it to text."""

    def __init__(
        self,
        *,
        timeout_seconds: float = 30.0,
        user_agent: str = "",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout_seconds
        self._headers = {"User-Agent": user_agent} if user_agent else {}
        self._transport = transport
        self._task: asyncio.Task[str] | None = None

    async def fetch_text(self, url: str) -> str:
        validate_url(url)
        self.cancel()
        task = asyncio.create_task(self._fetch(url))
        self._task = task
        try:
            return await task
        finally:
            if self._task is task:
                self._task = None

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            Log.debug("Cancelling in-flight web fetch")
            self._task.cancel()
        self._task = None

    async def _fetch(self, url: str) -> str:
        Log.debug(f"Fetching {url}")
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                headers=self._headers,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
        except httpx.InvalidURL as exc:
            raise InvalidUrlError(f"Malformed URL: {url} ({exc})") from exc
        except httpx.TimeoutException as exc:
            raise WebTimeoutError(f"Timed out fetching {url}") from exc
        except httpx.HTTPError as exc:
            raise WebNetworkError(f"Network error fetching {url}: {exc}") from exc

        Log.debug(f"Fetched {url}: HTTP {response.status_code}, {len(response.content)} bytes")
        if not response.is_success:
            raise WebHttpStatusError(response.status_code)

        text = self._to_text(response)
        if not text:
            raise EmptyPageError(f"No text found at {url}")
        return text

    @staticmethod
    def _to_text(response: httpx.Response) -> str:
        content_type = response.headers.get("content-type", "").lower()
        try:
            body = response.text
            if "html" in content_type or not content_type:
                return html_to_text(body)
            if content_type.startswith("text/"):
                return clean_lines(body)
        except (UnicodeDecodeError, LookupError) as exc:
            raise WebParseError(f"Could not decode page: {exc}") from exc
        raise WebParseError(f"Unsupported content type: {content_type}")
