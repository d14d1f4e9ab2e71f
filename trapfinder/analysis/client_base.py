from abc import ABC, abstractmethod

from trapfinder.analysis.models import AnalysisRequest


class BaseAnalysisClient(ABC):
    """Contract for provider-specific chat-completion clients."""

    @abstractmethod
    async def create_chat_completion(self, request: AnalysisRequest) -> str:
        """Send *request* and return ``choices[0].message.content``.

        Raises:
            AnalysisTimeoutError: the provider did not answer in time.
            AnalysisNetworkError: transport failure.
            HttpStatusError: non-2xx answer; never retried.
            DecodingError: the response envelope carries no usable content.
        """
