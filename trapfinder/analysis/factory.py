from typing import ClassVar

from trapfinder.analysis.client_base import BaseAnalysisClient
from trapfinder.analysis.example_client_adapter import ExampleClientAdapter
from trapfinder.analysis.openai_client_adapter import OpenAIClientAdapter
from trapfinder.config.settings import Settings


class AnalysisClientFactory:
    """Creates the configured analysis client adapter."""

    PROVIDERS: ClassVar[tuple[str, ...]] = ("example", "openai", "openai_compatible")

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalysisClient:
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        if provider not in cls.PROVIDERS:
            raise ValueError(
                f"Unknown analysis provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
            )
        return OpenAIClientAdapter(
            api_key=settings.openai_api_key,
            request_timeout_seconds=settings.openai_request_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        url = (settings.openai_base_url or "").strip()
        if not url:
            raise ValueError(
                "openai_base_url is required for analysis_provider=openai_compatible"
            )
        return url
