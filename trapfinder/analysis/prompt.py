"""System prompt templating: language, finding-count band, money emphasis."""

from enum import Enum

from trapfinder.i18n.language import Language, LocalizedString

SHORT_DOCUMENT_CHARS = 1_000
MEDIUM_DOCUMENT_CHARS = 5_000


class FindingBand(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


_BAND_INSTRUCTIONS: dict[FindingBand, str] = {
    FindingBand.SHORT: (
        "- This is a short document (under 1,000 characters): "
        "at least 10 findings, ideally 20-25."
    ),
    FindingBand.MEDIUM: (
        "- This is a medium-length document (1,000-5,000 characters): "
        "at least 20 findings, ideally 30-45."
    ),
    FindingBand.LONG: (
        "- This is a long document (over 5,000 characters): "
        "at least 40 findings, ideally 50-80."
    ),
}

_LANGUAGE_INSTRUCTION = LocalizedString(
    ja="- 言語: **必ず日本語で出力すること。**",
    en="- Language: **Output MUST be in English.**",
)

_MONEY_INSTRUCTION = LocalizedString(
    ja="- 金額やパーセンテージを検出したら、必ず数値・単位・条件をそのまま引用し、誤差や追加費用の可能性も説明してください。",
    en="- When monetary values or percentages appear, quote the exact numbers/units/conditions "
    "and explain hidden costs or uncertainties.",
)


def finding_band(text_length: int) -> FindingBand:
    if text_length < SHORT_DOCUMENT_CHARS:
        return FindingBand.SHORT
    if text_length <= MEDIUM_DOCUMENT_CHARS:
        return FindingBand.MEDIUM
    return FindingBand.LONG


def render_system_prompt(
    template: str,
    *,
    language: Language,
    band: FindingBand,
    money_emphasis: bool = True,
) -> str:
    return template.format(
        finding_band=_BAND_INSTRUCTIONS[band],
        language_instruction=_LANGUAGE_INSTRUCTION.text(language),
        money_instruction=_MONEY_INSTRUCTION.text(language) if money_emphasis else "",
    )
