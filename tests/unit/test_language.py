from trapfinder.i18n import strings
from trapfinder.i18n.language import Language, LocalizedString


class TestLanguage:
    def test_parses_known_codes(self) -> None:
        assert Language.parse("en") is Language.ENGLISH
        assert Language.parse(" JA ") is Language.JAPANESE

    def test_unknown_code_falls_back_to_japanese(self) -> None:
        assert Language.parse("fr") is Language.JAPANESE


class TestLocalizedString:
    def test_selects_language(self) -> None:
        s = LocalizedString(ja="はい", en="yes")
        assert s.text(Language.JAPANESE) == "はい"
        assert s.text(Language.ENGLISH) == "yes"

    def test_formats_placeholders(self) -> None:
        message = strings.HTTP_ERROR.format(Language.ENGLISH, status_code=429)
        assert message == "HTTP Error: 429"
