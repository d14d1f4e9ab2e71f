import asyncio
import json

import pytest

from trapfinder.analysis.client_base import BaseAnalysisClient
from trapfinder.analysis.exceptions import AnalysisTimeoutError, DecodingError
from trapfinder.analysis.lifecycle import AnalysisLifecycle
from trapfinder.analysis.models import AnalysisRequest
from trapfinder.i18n.language import Language

_TEMPLATE = "{finding_band}{language_instruction}{money_instruction}"

_VALID_CONTENT = json.dumps(
    {
        "contract_type": "bill",
        "summary": "Monthly bill.",
        "risks": [
            {
                "quote": "Late fee 10%",
                "severity": "medium",
                "description": "A late fee applies.",
                "suggestion": "Pay before the due date.",
            }
        ],
    }
)


class _GatedClient(BaseAnalysisClient):
    """Blocks every call until ``release`` is set; records requests."""

    def __init__(self, content: str = _VALID_CONTENT) -> None:
        self.content = content
        self.release = asyncio.Event()
        self.requests: list[AnalysisRequest] = []

    async def create_chat_completion(self, request: AnalysisRequest) -> str:
        self.requests.append(request)
        await self.release.wait()
        return self.content


def _make_lifecycle(client: BaseAnalysisClient, **kwargs: float) -> AnalysisLifecycle:
    return AnalysisLifecycle(client=client, prompt_template=_TEMPLATE, **kwargs)


class TestAnalysisLifecycle:
    @pytest.mark.asyncio
    async def test_returns_decoded_result(self) -> None:
        client = _GatedClient()
        client.release.set()
        lifecycle = _make_lifecycle(client)
        result = await lifecycle.start("text", "gpt-4o-mini", Language.ENGLISH)
        assert result.document_type == "bill"
        assert result.findings[0].title == "Detected risk"
        assert client.requests[0].model == "gpt-4o-mini"
        assert not lifecycle.in_flight

    @pytest.mark.asyncio
    async def test_new_start_cancels_previous_call(self) -> None:
        client = _GatedClient()
        lifecycle = _make_lifecycle(client)
        first = asyncio.create_task(lifecycle.start("first", "m"))
        await asyncio.sleep(0.01)
        assert lifecycle.in_flight

        second = asyncio.create_task(lifecycle.start("second", "m"))
        await asyncio.sleep(0.01)
        client.release.set()

        with pytest.raises(asyncio.CancelledError):
            await first
        result = await second
        assert result.summary == "Monthly bill."
        assert client.requests[0].messages[1].content.endswith("first")
        assert client.requests[1].messages[1].content.endswith("second")

    @pytest.mark.asyncio
    async def test_cancel_is_idempotent(self) -> None:
        lifecycle = _make_lifecycle(_GatedClient())
        lifecycle.cancel()
        lifecycle.cancel()
        assert not lifecycle.in_flight

    @pytest.mark.asyncio
    async def test_cancel_stops_in_flight_call(self) -> None:
        lifecycle = _make_lifecycle(_GatedClient())
        task = asyncio.create_task(lifecycle.start("text", "m"))
        await asyncio.sleep(0.01)
        lifecycle.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert not lifecycle.in_flight

    @pytest.mark.asyncio
    async def test_resource_timeout(self) -> None:
        lifecycle = _make_lifecycle(_GatedClient(), resource_timeout_seconds=0.05)
        with pytest.raises(AnalysisTimeoutError):
            await lifecycle.start("text", "m")

    @pytest.mark.asyncio
    async def test_decoding_failure_propagates(self) -> None:
        client = _GatedClient(content="not json")
        client.release.set()
        with pytest.raises(DecodingError):
            await _make_lifecycle(client).start("text", "m")
