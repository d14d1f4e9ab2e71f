from pathlib import Path

from trapfinder.analysis.exceptions import AnalysisError

_DEFAULT_PROMPT_PATH = Path(__file__).parent / "prompts" / "analysis_prompt.txt"
_REQUIRED_PLACEHOLDERS = ("{finding_band}", "{language_instruction}", "{money_instruction}")


def load_prompt_template(path: Path | None = None) -> str:
    """Read the system prompt template used for every analysis.

    Args:
        path: Template file; the bundled analysis_prompt.txt when omitted.

    Raises:
        AnalysisError: if the file is unreadable or lacks a placeholder.
    """
    source = path or _DEFAULT_PROMPT_PATH
    try:
        template = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisError(f"Failed to load prompt template: {exc}") from exc
    missing = [p for p in _REQUIRED_PLACEHOLDERS if p not in template]
    if missing:
        raise AnalysisError(f"Prompt template {source.name} is missing {', '.join(missing)}")
    return template
