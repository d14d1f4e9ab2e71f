"""Owns the single outstanding analysis call."""

import asyncio

from trapfinder.analysis.client_base import BaseAnalysisClient
from trapfinder.analysis.decoder import decode_analysis_result
from trapfinder.analysis.exceptions import AnalysisTimeoutError
from trapfinder.analysis.models import AnalysisResult
from trapfinder.analysis.prompt_loader import load_prompt_template
from trapfinder.analysis.request_builder import DEFAULT_TEMPERATURE, build_request
from trapfinder.i18n.language import Language
from trapfinder.logging.logger import Log


class AnalysisLifecycle:
    """Builds, sends and decodes one analysis request at a time.

    ``start`` while a call is in flight cancels the earlier call; its awaiting
    caller gets ``asyncio.CancelledError``. ``cancel`` is idempotent.
    """

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        temperature: float = DEFAULT_TEMPERATURE,
        resource_timeout_seconds: float = 600.0,
        prompt_template: str | None = None,
    ) -> None:
        self._client = client
        self._temperature = temperature
        self._resource_timeout = resource_timeout_seconds
        self._template = prompt_template if prompt_template is not None else load_prompt_template()
        self._task: asyncio.Task[AnalysisResult] | None = None

    @property
    def in_flight(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(
        self,
        text: str,
        model: str,
        language: Language = Language.JAPANESE,
    ) -> AnalysisResult:
        """Analyze *text* with *model*, replacing any call still in flight."""
        self.cancel()
        task = asyncio.create_task(self._execute(text, model, language))
        self._task = task
        try:
            return await task
        finally:
            if self._task is task:
                self._task = None

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            Log.debug("Cancelling in-flight analysis request")
            self._task.cancel()
        self._task = None

    async def _execute(self, text: str, model: str, language: Language) -> AnalysisResult:
        request = build_request(
            text,
            model,
            language=language,
            template=self._template,
            temperature=self._temperature,
        )
        Log.debug(
            f"Analysis start: {len(text)} chars, model={model}, max_tokens={request.max_tokens}"
        )
        try:
            content = await asyncio.wait_for(
                self._client.create_chat_completion(request),
                timeout=self._resource_timeout,
            )
        except TimeoutError as exc:
            raise AnalysisTimeoutError(
                f"Analysis exceeded {self._resource_timeout:.0f}s"
            ) from exc
        Log.debug(f"Analysis content preview: {content[:200]}")
        result = decode_analysis_result(content, language)
        Log.info(f"Analysis decoded: {len(result.findings)} findings")
        return result
