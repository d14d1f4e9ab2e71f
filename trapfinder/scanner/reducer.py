"""Folds per-page OCR results into one document, page by page."""

import asyncio
from collections.abc import Callable, Sequence

from trapfinder.i18n import strings
from trapfinder.i18n.language import Language
from trapfinder.logging.logger import Log
from trapfinder.ocr.base import BaseOcrEngine
from trapfinder.plan.models import PlanPolicy
from trapfinder.scanner.exceptions import NoTextRecognizedError
from trapfinder.scanner.limiter import limit_text
from trapfinder.scanner.state import ScannedDocument

PAGE_BREAK = "\n\n--- Page Break ---\n\n"

ProgressCallback = Callable[[int, int], None]


def page_marker(page_number: int, reason: str) -> str:
    """Placeholder written in place of a page's text."""
    return f"[Page {page_number}: {reason}]"


class PageReducer:
    """Runs OCR over pages strictly in order, never aborting on a bad page.

    A failed or timed-out page becomes a marker naming the page and the reason.
    Only a scan where no page yielded any text fails as a whole.
    """

    def __init__(
        self,
        ocr_engine: BaseOcrEngine,
        *,
        page_timeout_seconds: float = 60.0,
    ) -> None:
        self._ocr_engine = ocr_engine
        self._page_timeout = page_timeout_seconds

    async def reduce(
        self,
        images: Sequence[bytes],
        policy: PlanPolicy,
        *,
        on_progress: ProgressCallback | None = None,
        language: Language = Language.JAPANESE,
    ) -> ScannedDocument:
        total = len(images)
        fragments: list[str] = []
        blank_pages = 0
        for index, image in enumerate(images):
            page_number = index + 1
            if on_progress is not None:
                on_progress(page_number, total)
            # Cancellation checkpoint before the page is handed to OCR.
            await asyncio.sleep(0)
            Log.debug(f"Processing page {page_number}/{total}")
            text = await self._read_page(image, page_number, language)
            if text is None:
                blank_pages += 1
                text = page_marker(page_number, strings.BLANK_PAGE.text(language))
            fragments.append(text)

        full_text = PAGE_BREAK.join(fragments)
        if blank_pages == total:
            raise NoTextRecognizedError("No text recognized on any page")

        limited = limit_text(full_text, policy)
        Log.info(
            f"OCR completed: {total} pages, {len(full_text)} chars"
            + (f", truncated to {len(limited.text)}" if limited.truncated else "")
        )
        return ScannedDocument(text=limited.text, was_truncated=limited.truncated)

    async def _read_page(
        self, image: bytes, page_number: int, language: Language
    ) -> str | None:
        """Page text, a failure marker, or None for a blank page."""
        try:
            text = await asyncio.wait_for(
                asyncio.to_thread(self._ocr_engine.extract_text, image),
                timeout=self._page_timeout,
            )
        except TimeoutError:
            Log.warning(f"OCR timed out on page {page_number}")
            return page_marker(page_number, strings.PAGE_TIMEOUT.text(language))
        except Exception as exc:
            Log.warning(f"OCR error on page {page_number}: {exc}")
            return page_marker(page_number, str(exc) or type(exc).__name__)
        return text if text.strip() else None
