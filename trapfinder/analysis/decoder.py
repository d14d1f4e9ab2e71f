"""Decodes the model's JSON content into an AnalysisResult."""

import json
from typing import Any

from trapfinder.analysis.exceptions import DecodingError
from trapfinder.analysis.models import AnalysisResult, Finding, Severity
from trapfinder.i18n import strings
from trapfinder.i18n.language import Language

_FINDING_TEXT_FIELDS = ("quote", "description", "suggestion")


def decode_analysis_result(content: str, language: Language = Language.JAPANESE) -> AnalysisResult:
    """Parse the ``content`` string of the first choice.

    A finding without ``title`` gets a generic localized title; every other
    missing or mistyped field is a DecodingError.
    """
    data = _parse_json(content)
    document_type = _require_str(data, "contract_type", "result")
    summary = _require_str(data, "summary", "result")
    raw_findings = data.get("risks")
    if not isinstance(raw_findings, list):
        raise DecodingError("'risks' must be a list")
    fallback_title = strings.DEFAULT_FINDING_TITLE.text(language)
    findings = tuple(
        _build_finding(item, index, fallback_title) for index, item in enumerate(raw_findings)
    )
    return AnalysisResult(document_type=document_type, summary=summary, findings=findings)


def _parse_json(raw: str) -> dict[str, Any]:
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise DecodingError(f"Invalid JSON content: {exc}") from exc

    if not isinstance(parsed, dict):
        raise DecodingError("JSON content must be an object")
    return parsed


def _build_finding(raw: Any, index: int, fallback_title: str) -> Finding:
    if not isinstance(raw, dict):
        raise DecodingError(f"Risk at index {index} must be an object")
    where = f"risk at index {index}"
    title = raw.get("title")
    if title is None:
        title = fallback_title
    elif not isinstance(title, str):
        raise DecodingError(f"{where}: 'title' must be a string")
    quote, description, suggestion = (
        _require_str(raw, name, where) for name in _FINDING_TEXT_FIELDS
    )
    return Finding(
        title=title,
        quote=quote,
        severity=_build_severity(raw.get("severity"), where),
        description=description,
        suggestion=suggestion,
    )


def _build_severity(raw: Any, where: str) -> Severity:
    try:
        return Severity(raw)
    except ValueError as exc:
        raise DecodingError(
            f"{where}: 'severity' must be one of {[s.value for s in Severity]}, got {raw!r}"
        ) from exc


def _require_str(data: dict[str, Any], name: str, where: str) -> str:
    value = data.get(name)
    if not isinstance(value, str):
        raise DecodingError(f"{where}: '{name}' must be a string")
    return value
