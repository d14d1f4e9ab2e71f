from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    ui_language: str = "ja"
    debug_diagnostics: bool = False

    current_plan: str = "free"

    ocr_engine: str = "pymupdf"
    ocr_languages: str = "jpn+eng"
    ocr_dpi: int = 300
    page_timeout_seconds: float = 60.0

    pdf_engine: str = "pymupdf"
    pdf_render_scale: float = 2.0

    web_fetch_timeout_seconds: float = 30.0
    web_user_agent: str = (
        "Mozilla/5.0 (iPhone; CPU iPhone OS 16_0 like Mac OS X) AppleWebKit/605.1.15"
    )

    analysis_provider: str = "openai"
    openai_api_key: str = ""
    openai_base_url: str | None = None
    openai_request_timeout_seconds: float = 300.0
    openai_resource_timeout_seconds: float = 600.0
    openai_temperature: float = 0.3
