from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID, uuid4


class Severity(str, Enum):
    """Importance of one finding."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"


@dataclass(frozen=True)
class Finding:
    """One structured item of an analysis.

    ``id`` is minted on construction so identical findings stay distinct.
    """

    title: str
    quote: str
    severity: Severity
    description: str
    suggestion: str
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class AnalysisResult:
    """Output of a successful analysis call."""

    document_type: str
    summary: str
    findings: tuple[Finding, ...] = ()
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class ChatMessage:
    role: str
    content: str


@dataclass(frozen=True)
class AnalysisRequest:
    """Everything sent to the chat-completions endpoint for one analysis."""

    model: str
    messages: tuple[ChatMessage, ...]
    temperature: float
    max_tokens: int
    response_format: str = "json_object"

    def to_payload(self) -> dict[str, object]:
        """Wire representation of the request body."""
        return {
            "model": self.model,
            "messages": [{"role": m.role, "content": m.content} for m in self.messages],
            "response_format": {"type": self.response_format},
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }
