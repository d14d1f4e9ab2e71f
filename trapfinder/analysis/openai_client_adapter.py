import httpx
import openai

from trapfinder.analysis.client_base import BaseAnalysisClient
from trapfinder.analysis.exceptions import (
    AnalysisNetworkError,
    AnalysisTimeoutError,
    DecodingError,
    HttpStatusError,
    MissingApiKeyError,
)
from trapfinder.analysis.models import AnalysisRequest
from trapfinder.logging.logger import Log


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis client built on the OpenAI-compatible chat API.

    Retries are disabled: every failure surfaces to the user, who decides
    whether to run the analysis again.
    """

    def __init__(
        self,
        *,
        api_key: str,
        request_timeout_seconds: float = 300.0,
        base_url: str | None = None,
    ) -> None:
        self._api_key = api_key
        self._client = openai.AsyncOpenAI(
            api_key=api_key or "missing",
            timeout=httpx.Timeout(request_timeout_seconds, connect=30.0),
            base_url=base_url,
            max_retries=0,
        )

    async def create_chat_completion(self, request: AnalysisRequest) -> str:
        if not self._api_key:
            raise MissingApiKeyError("OpenAI API key is not configured")

        Log.debug(
            f"Sending analysis request: model={request.model}, "
            f"max_tokens={request.max_tokens}"
        )
        try:
            response = await self._client.chat.completions.create(
                model=request.model,
                messages=request.to_payload()["messages"],  # type: ignore[arg-type]
                response_format={"type": request.response_format},  # type: ignore[typeddict-item]
                temperature=request.temperature,
                max_tokens=request.max_tokens,
            )
        except openai.APITimeoutError as exc:
            raise AnalysisTimeoutError(f"AI provider timed out: {exc}") from exc
        except openai.APIConnectionError as exc:
            raise AnalysisNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIStatusError as exc:
            Log.debug(f"AI provider HTTP {exc.status_code}: {exc.response.text[:500]}")
            raise HttpStatusError(exc.status_code, exc.response.text) from exc
        except openai.APIResponseValidationError as exc:
            raise DecodingError(f"Malformed response envelope: {exc}") from exc
        except openai.APIError as exc:
            raise AnalysisNetworkError(f"AI provider API error: {exc}") from exc
        except ValueError as exc:
            raise DecodingError(f"Response envelope is not valid JSON: {exc}") from exc

        if not response.choices:
            raise DecodingError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise DecodingError("AI returned empty response")
        Log.debug(f"AI content: {len(content)} chars")
        return content
