import asyncio

import pytest

from trapfinder.i18n.language import Language
from trapfinder.scanner.progress import ProgressTicker, phase_message


class TestPhaseMessage:
    @pytest.mark.parametrize(
        ("elapsed", "expected"),
        [
            (0, "Reading document..."),
            (4, "Reading document..."),
            (5, "Detecting important points..."),
            (14, "Detecting important points..."),
            (15, "Checking details..."),
            (30, "Organizing items..."),
            (59, "Organizing items..."),
            (60, "Final check..."),
            (600, "Final check..."),
        ],
    )
    def test_phases(self, elapsed: int, expected: str) -> None:
        assert phase_message(elapsed, Language.ENGLISH) == expected

    def test_japanese(self) -> None:
        assert phase_message(0, Language.JAPANESE) == "文書を読み込んでいます..."


class TestProgressTicker:
    @pytest.mark.asyncio
    async def test_emits_messages_until_stopped(self) -> None:
        messages: list[str] = []
        ticker = ProgressTicker(messages.append, lambda: Language.ENGLISH, interval_seconds=0.01)
        ticker.start()
        await asyncio.sleep(0.05)
        assert ticker.running
        ticker.stop()
        count = len(messages)
        await asyncio.sleep(0.03)
        assert not ticker.running
        assert count >= 1
        assert len(messages) == count
        assert messages[0] == "Reading document..."

    @pytest.mark.asyncio
    async def test_stop_is_idempotent(self) -> None:
        ticker = ProgressTicker(lambda _: None, lambda: Language.ENGLISH)
        ticker.stop()
        ticker.start()
        ticker.stop()
        ticker.stop()
        assert not ticker.running
