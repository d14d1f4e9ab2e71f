import pytest

from trapfinder.analysis.prompt import FindingBand, finding_band, render_system_prompt
from trapfinder.analysis.prompt_loader import load_prompt_template
from trapfinder.analysis.request_builder import build_request
from trapfinder.i18n.language import Language

_TEMPLATE = "{finding_band}|{language_instruction}|{money_instruction}"


class TestFindingBand:
    @pytest.mark.parametrize(
        ("length", "band"),
        [
            (0, FindingBand.SHORT),
            (999, FindingBand.SHORT),
            (1_000, FindingBand.MEDIUM),
            (5_000, FindingBand.MEDIUM),
            (5_001, FindingBand.LONG),
        ],
    )
    def test_bands(self, length: int, band: FindingBand) -> None:
        assert finding_band(length) is band


class TestRenderSystemPrompt:
    def test_english_instruction(self) -> None:
        prompt = render_system_prompt(_TEMPLATE, language=Language.ENGLISH, band=FindingBand.SHORT)
        assert "English" in prompt
        assert "short document" in prompt

    def test_money_emphasis_can_be_disabled(self) -> None:
        prompt = render_system_prompt(
            _TEMPLATE,
            language=Language.ENGLISH,
            band=FindingBand.LONG,
            money_emphasis=False,
        )
        assert prompt.endswith("|")

    def test_bundled_template_renders_json_braces(self) -> None:
        prompt = render_system_prompt(
            load_prompt_template(),
            language=Language.JAPANESE,
            band=FindingBand.MEDIUM,
        )
        assert '"contract_type"' in prompt
        assert "{{" not in prompt


class TestBuildRequest:
    def test_payload_shape(self) -> None:
        request = build_request(
            "本文", "gpt-4o-mini", language=Language.JAPANESE, template=_TEMPLATE
        )
        payload = request.to_payload()
        assert payload["model"] == "gpt-4o-mini"
        assert payload["response_format"] == {"type": "json_object"}
        assert payload["temperature"] == 0.3
        assert payload["max_tokens"] == 12_000
        messages = payload["messages"]
        assert [m["role"] for m in messages] == ["system", "user"]  # type: ignore[union-attr]

    def test_user_message_ends_with_raw_text(self) -> None:
        request = build_request(
            "The tenant pays all repairs.",
            "gpt-4o",
            language=Language.ENGLISH,
            template=_TEMPLATE,
        )
        user = request.messages[1].content
        assert user.startswith("Please analyze the following document.")
        assert user.endswith("\n\nThe tenant pays all repairs.")

    def test_budget_scales_with_length(self) -> None:
        request = build_request(
            "x" * 20_000, "gpt-4o", language=Language.ENGLISH, template=_TEMPLATE
        )
        assert request.max_tokens == 16_000
