from dataclasses import dataclass
from enum import Enum


class Language(str, Enum):
    """UI language; also selects the output language of the analysis."""

    JAPANESE = "ja"
    ENGLISH = "en"

    @classmethod
    def parse(cls, code: str) -> "Language":
        """Resolve a language code, falling back to Japanese for unknown codes."""
        try:
            return cls(code.strip().lower())
        except ValueError:
            return cls.JAPANESE


@dataclass(frozen=True)
class LocalizedString:
    """A user-facing string in every supported language."""

    ja: str
    en: str

    def text(self, language: Language) -> str:
        if language is Language.ENGLISH:
            return self.en
        return self.ja

    def format(self, language: Language, **kwargs: object) -> str:
        return self.text(language).format(**kwargs)
