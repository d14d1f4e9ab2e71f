import shutil

import pymupdf
import pytest

from trapfinder.config.settings import Settings


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(
        analysis_provider="example",
        ui_language="en",
        current_plan="standard",
        openai_api_key="",
    )


@pytest.fixture()
def require_tesseract() -> None:
    if shutil.which("tesseract") is None:
        pytest.skip("Tesseract OCR is not installed")
    try:
        pymupdf.get_tessdata()
    except RuntimeError as e:
        pytest.skip(f"Tesseract language data not available: {e}")
