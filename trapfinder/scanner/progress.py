"""Cosmetic phase messages shown while an analysis is outstanding."""

import asyncio
from collections.abc import Callable

from trapfinder.i18n import strings
from trapfinder.i18n.language import Language

_PHASES = (
    (5, strings.PHASE_READING),
    (15, strings.PHASE_DETECTING),
    (30, strings.PHASE_CHECKING),
    (60, strings.PHASE_ORGANIZING),
)


def phase_message(elapsed_seconds: int, language: Language) -> str:
    """Message for the given number of seconds since the analysis started."""
    for upper_bound, message in _PHASES:
        if elapsed_seconds < upper_bound:
            return message.text(language)
    return strings.PHASE_FINALIZING.text(language)


class ProgressTicker:
    """Calls ``on_message`` once per interval with the current phase message."""

    def __init__(
        self,
        on_message: Callable[[str], None],
        language: Callable[[], Language],
        interval_seconds: float = 1.0,
    ) -> None:
        self._on_message = on_message
        self._language = language
        self._interval = interval_seconds
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        self.stop()
        self._task = asyncio.create_task(self._run())

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _run(self) -> None:
        elapsed = 0
        while True:
            await asyncio.sleep(self._interval)
            elapsed += 1
            self._on_message(phase_message(elapsed, self._language()))
