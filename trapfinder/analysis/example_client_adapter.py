"""Offline analysis client.

Returns a fixed valid analysis JSON without network calls. Useful for local
development of the scan flow and as a template for new provider adapters.
"""

import json
from typing import ClassVar

from trapfinder.analysis.client_base import BaseAnalysisClient
from trapfinder.analysis.models import AnalysisRequest


class ExampleClientAdapter(BaseAnalysisClient):
    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "contract_type": "example",
        "summary": "Offline example analysis.",
        "risks": [
            {
                "title": "Example finding",
                "quote": "",
                "severity": "info",
                "description": "Produced by the offline example provider.",
                "suggestion": "Configure a real provider to analyze documents.",
            }
        ],
    }

    async def create_chat_completion(self, request: AnalysisRequest) -> str:
        _ = request
        return json.dumps(self.DEFAULT_RESPONSE)
