import logging

import pytest

from trapfinder.logging.logger import Log


class TestLog:
    def test_configure_sets_level(self) -> None:
        Log.configure("debug")
        assert logging.getLogger("trapfinder").level == logging.DEBUG
        Log.configure("INFO")
        assert logging.getLogger("trapfinder").level == logging.INFO

    def test_library_loggers_quiet_without_diagnostics(self) -> None:
        Log.configure("INFO")
        assert logging.getLogger("httpx").level == logging.WARNING
        Log.configure("INFO", diagnostics=True)
        assert logging.getLogger("httpx").level == logging.DEBUG
        Log.configure("INFO")

    def test_messages_reach_trapfinder_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        Log.configure("DEBUG")
        with caplog.at_level(logging.DEBUG, logger="trapfinder"):
            Log.warning("page skipped")
            Log.debug("state change")
        assert [r.getMessage() for r in caplog.records] == ["page skipped", "state change"]
        Log.configure("INFO")
