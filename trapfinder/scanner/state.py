"""Pipeline state and presentation state, kept as two independent models."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Idle:
    """Nothing in flight."""


@dataclass(frozen=True)
class Scanning:
    """Ingestion in progress; ``total == 0`` means indeterminate progress."""

    page: int = 0
    total: int = 0


@dataclass(frozen=True)
class Analyzing:
    """An analysis call is outstanding."""


@dataclass(frozen=True)
class Error:
    """The last operation ended abnormally; cleared by the next user action."""

    message: str


PipelineState = Idle | Scanning | Analyzing | Error


class ActiveSheet(str, Enum):
    """Which modal the UI should present, independent of PipelineState."""

    ANALYSIS_RESULT = "analysis_result"
    TOKEN_LIMIT_ALERT = "token_limit_alert"


@dataclass(frozen=True)
class ScannedDocument:
    """Plain text produced by one ingestion."""

    text: str
    was_truncated: bool = False
