import pytest
from pydantic import ValidationError

from trapfinder.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_ui_language_is_japanese(self) -> None:
        s = Settings()
        assert s.ui_language == "ja"

    def test_default_page_timeout(self) -> None:
        s = Settings()
        assert s.page_timeout_seconds == 60.0

    def test_default_web_fetch_timeout(self) -> None:
        s = Settings()
        assert s.web_fetch_timeout_seconds == 30.0

    def test_default_openai_timeouts(self) -> None:
        s = Settings()
        assert s.openai_request_timeout_seconds == 300.0
        assert s.openai_resource_timeout_seconds == 600.0

    def test_default_engines(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pymupdf"
        assert s.ocr_engine == "pymupdf"
        assert s.pdf_render_scale == 2.0


class TestSettingsFromEnv:
    def test_reads_plan_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CURRENT_PLAN", "pro")
        s = Settings()
        assert s.current_plan == "pro"

    def test_reads_timeout_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAGE_TIMEOUT_SECONDS", "5")
        s = Settings()
        assert s.page_timeout_seconds == 5.0

    def test_rejects_non_numeric_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_RESOURCE_TIMEOUT_SECONDS", "forever")
        with pytest.raises(ValidationError):
            Settings()
