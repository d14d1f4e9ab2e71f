"""Scan-to-analysis orchestrator.

Every user action starts at most one asyncio task, "the current operation",
and returns it. Starting a new action, or calling ``cancel``, cancels the
previous operation first. All state is written from the event loop thread
only; OCR and PDF rendering run in worker threads and report back through
``await``.

Each operation ends in exactly one way:

* success: the document or result is stored, the state becomes ``Idle``
  (or ``Error`` carrying a truncation notice after an over-long ingestion);
* cancelled: nothing is written;
* failure: the state becomes ``Error`` with a localized message.
"""

import asyncio
from collections.abc import Callable, Coroutine, Sequence
from typing import Any

from trapfinder.analysis.lifecycle import AnalysisLifecycle
from trapfinder.analysis.models import AnalysisResult
from trapfinder.i18n import strings
from trapfinder.i18n.language import Language, LocalizedString
from trapfinder.logging.logger import Log
from trapfinder.pdf.base import BasePdfRasterizer
from trapfinder.plan.base import BasePlanService
from trapfinder.plan.models import PlanPolicy
from trapfinder.plan.policy import policy_for, resolve_model
from trapfinder.scanner.limiter import limit_text
from trapfinder.scanner.messages import error_message
from trapfinder.scanner.progress import ProgressTicker
from trapfinder.scanner.reducer import PageReducer
from trapfinder.scanner.state import (
    ActiveSheet,
    Analyzing,
    Error,
    Idle,
    PipelineState,
    ScannedDocument,
    Scanning,
)
from trapfinder.web.base import BaseWebFetcher
from trapfinder.web.exceptions import InvalidUrlError
from trapfinder.web.url import normalize_url


class ScannerSession:
    """Owns the pipeline state, the scanned document and the analysis result.

    Must be driven from a running event loop.
    """

    def __init__(
        self,
        *,
        reducer: PageReducer,
        pdf_rasterizer: BasePdfRasterizer,
        web_fetcher: BaseWebFetcher,
        analysis: AnalysisLifecycle,
        plan_service: BasePlanService,
        language: Language = Language.JAPANESE,
        include_error_details: bool = False,
        progress_interval_seconds: float = 1.0,
    ) -> None:
        self._reducer = reducer
        self._pdf_rasterizer = pdf_rasterizer
        self._web_fetcher = web_fetcher
        self._analysis = analysis
        self._plan_service = plan_service
        self.language = language
        self._include_error_details = include_error_details

        self._state: PipelineState = Idle()
        self._document: ScannedDocument | None = None
        self._result: AnalysisResult | None = None
        self._active_sheet: ActiveSheet | None = None
        self._progress_message = ""
        self._current: asyncio.Task[None] | None = None
        self._ticker = ProgressTicker(
            self._set_progress_message,
            lambda: self.language,
            interval_seconds=progress_interval_seconds,
        )

    # ------------------------------------------------------------------
    # Read-only observation
    # ------------------------------------------------------------------

    @property
    def state(self) -> PipelineState:
        return self._state

    @property
    def document(self) -> ScannedDocument | None:
        return self._document

    @property
    def result(self) -> AnalysisResult | None:
        return self._result

    @property
    def active_sheet(self) -> ActiveSheet | None:
        return self._active_sheet

    @property
    def progress_message(self) -> str:
        return self._progress_message

    @property
    def current_operation(self) -> asyncio.Task[None] | None:
        return self._current

    # ------------------------------------------------------------------
    # Ingestion actions
    # ------------------------------------------------------------------

    def scan_images(self, images: Sequence[bytes]) -> asyncio.Task[None] | None:
        """OCR camera captures or library photos, one page per image."""
        pages = list(images)
        if not pages:
            return None
        self._abort_current()
        self._set_state(Scanning(page=0, total=len(pages)))
        return self._launch(self._run_image_scan(pages))

    def scan_pdf(self, pdf_bytes: bytes) -> asyncio.Task[None]:
        """Rasterize a PDF, then OCR its pages."""
        self._abort_current()
        self._set_state(Scanning(page=0, total=0))
        return self._launch(self._run_pdf_scan(pdf_bytes))

    def scan_url(self, raw_url: str) -> asyncio.Task[None] | None:
        """Fetch a web page as text. Rejected URLs never reach the network."""
        self._abort_current()
        try:
            url = normalize_url(raw_url)
        except InvalidUrlError as exc:
            self._fail(exc)
            return None
        self._set_state(Scanning(page=0, total=0))
        return self._launch(self._run_url_scan(url))

    def submit_text(self, text: str) -> None:
        """Use pasted text as the document."""
        self._abort_current()
        if not text.strip():
            self._set_state(Idle())
            return
        self._store_document(text, self._policy(), strings.SCAN_TRUNCATED)

    # ------------------------------------------------------------------
    # Analysis actions
    # ------------------------------------------------------------------

    def analyze(self) -> asyncio.Task[None] | None:
        """Start the analysis, or ask for truncation when over the tier's cap."""
        if self._document is None or not self._document.text:
            return None
        policy = self._policy()
        if len(self._document.text) > policy.character_limit:
            Log.info(
                f"Document has {len(self._document.text)} chars, over the "
                f"{policy.character_limit} limit; asking for truncation"
            )
            self._abort_current()
            self._set_state(Idle())
            self._active_sheet = ActiveSheet.TOKEN_LIMIT_ALERT
            return None
        return self._start_analysis(self._document.text)

    def analyze_with_truncation(self) -> asyncio.Task[None] | None:
        """Analyze only the first characters allowed by the current tier."""
        if self._document is None or not self._document.text:
            return None
        if self._active_sheet is ActiveSheet.TOKEN_LIMIT_ALERT:
            self._active_sheet = None
        limited = limit_text(self._document.text, self._policy())
        return self._start_analysis(limited.text)

    # ------------------------------------------------------------------
    # Cancellation and housekeeping
    # ------------------------------------------------------------------

    def cancel(self) -> None:
        """Stop whatever is running and return to Idle. Idempotent."""
        self._abort_current()
        self._set_state(Idle())

    def clear(self) -> None:
        """Drop the scanned document and any result."""
        self.cancel()
        self._document = None
        self._result = None
        self._active_sheet = None

    def dismiss_sheet(self) -> None:
        self._active_sheet = None

    def dismiss_result(self) -> None:
        self._result = None
        if self._active_sheet is ActiveSheet.ANALYSIS_RESULT:
            self._active_sheet = None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def _run_image_scan(self, images: list[bytes]) -> None:
        policy = self._policy()
        try:
            document = await self._reducer.reduce(
                images,
                policy,
                on_progress=self._on_page_progress,
                language=self.language,
            )
        except Exception as exc:
            self._fail(exc)
            return
        self._finish_ingestion(document, policy, strings.SCAN_TRUNCATED)

    async def _run_pdf_scan(self, pdf_bytes: bytes) -> None:
        try:
            images = await asyncio.to_thread(self._pdf_rasterizer.rasterize, pdf_bytes)
            Log.debug(f"PDF converted to {len(images)} images")
            self._set_state(Scanning(page=0, total=len(images)))
            policy = self._policy()
            document = await self._reducer.reduce(
                images,
                policy,
                on_progress=self._on_page_progress,
                language=self.language,
            )
        except Exception as exc:
            self._fail(exc)
            return
        self._finish_ingestion(document, policy, strings.SCAN_TRUNCATED)

    async def _run_url_scan(self, url: str) -> None:
        try:
            text = await self._web_fetcher.fetch_text(url)
        except asyncio.CancelledError:
            if self._cancelled_from_outside():
                raise
            # The fetcher was cancelled on its own; treat it as a user cancel.
            self._set_state(Idle())
            return
        except Exception as exc:
            self._fail(exc)
            return
        self._store_document(text, self._policy(), strings.FETCH_TRUNCATED)

    async def _run_analysis(self, text: str) -> None:
        policy = self._policy()
        model = resolve_model(policy, self._plan_service.scans_today())
        if model != policy.model_id:
            Log.info(f"Daily limit reached for {policy.tier.value}; using {model}")
        try:
            result = await self._analysis.start(text, model, self.language)
        except asyncio.CancelledError:
            if self._cancelled_from_outside():
                raise
            self._set_state(Idle())
            return
        except Exception as exc:
            self._fail(exc)
            return
        self._set_state(Idle())
        self._result = result
        self._active_sheet = ActiveSheet.ANALYSIS_RESULT
        self._plan_service.record_analysis()
        Log.info(f"Analysis complete: {len(result.findings)} findings ({result.document_type})")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _start_analysis(self, text: str) -> asyncio.Task[None]:
        self._abort_current()
        self._set_state(Analyzing())
        self._progress_message = strings.ANALYZING.text(self.language)
        self._ticker.start()
        return self._launch(self._run_analysis(text))

    def _launch(self, operation: Coroutine[Any, Any, None]) -> asyncio.Task[None]:
        task = asyncio.create_task(operation)
        self._current = task
        task.add_done_callback(self._forget_task)
        return task

    def _forget_task(self, task: asyncio.Task[None]) -> None:
        if self._current is task:
            self._current = None

    def _abort_current(self) -> None:
        self._ticker.stop()
        self._analysis.cancel()
        self._web_fetcher.cancel()
        if self._current is not None and not self._current.done():
            Log.debug("Cancelling current operation")
            self._current.cancel()
        self._current = None

    @staticmethod
    def _cancelled_from_outside() -> bool:
        task = asyncio.current_task()
        return task is None or task.cancelling() > 0

    def _policy(self) -> PlanPolicy:
        return policy_for(self._plan_service.current_tier())

    def _on_page_progress(self, page: int, total: int) -> None:
        self._set_state(Scanning(page=page, total=total))

    def _store_document(self, text: str, policy: PlanPolicy, notice: LocalizedString) -> None:
        limited = limit_text(text, policy)
        self._finish_ingestion(
            ScannedDocument(text=limited.text, was_truncated=limited.truncated),
            policy,
            notice,
        )

    def _finish_ingestion(
        self, document: ScannedDocument, policy: PlanPolicy, notice: LocalizedString
    ) -> None:
        """Store *document*; the truncation notice names the limit *policy* applied."""
        self._document = document
        self._result = None
        self._active_sheet = None
        Log.info(f"Document ready: {len(document.text)} chars")
        if document.was_truncated:
            message = notice.format(self.language, limit=policy.character_limit)
            self._set_state(Error(message=message))
        else:
            self._set_state(Idle())

    def _fail(self, exc: Exception) -> None:
        Log.error(f"Pipeline operation failed: {type(exc).__name__}: {exc}")
        self._set_state(
            Error(
                message=error_message(
                    exc, self.language, include_details=self._include_error_details
                )
            )
        )

    def _set_state(self, state: PipelineState) -> None:
        if not isinstance(state, Analyzing):
            self._ticker.stop()
            self._progress_message = ""
        if state != self._state:
            Log.debug(f"State: {self._state} -> {state}")
        self._state = state

    def _set_progress_message(self, message: str) -> None:
        if isinstance(self._state, Analyzing):
            self._progress_message = message
