from trapfinder.analysis.models import AnalysisRequest, ChatMessage
from trapfinder.analysis.prompt import finding_band, render_system_prompt
from trapfinder.analysis.token_budget import max_tokens_for
from trapfinder.i18n import strings
from trapfinder.i18n.language import Language

DEFAULT_TEMPERATURE = 0.3


def build_request(
    text: str,
    model: str,
    *,
    language: Language,
    template: str,
    temperature: float = DEFAULT_TEMPERATURE,
    money_emphasis: bool = True,
) -> AnalysisRequest:
    """Assemble the chat request for *text*.

    Model, output language and the length-scaled token budget are the only
    inputs besides the document itself.
    """
    system_prompt = render_system_prompt(
        template,
        language=language,
        band=finding_band(len(text)),
        money_emphasis=money_emphasis,
    )
    user_prompt = f"{strings.USER_PROMPT_PREFIX.text(language)}\n\n{text}"
    return AnalysisRequest(
        model=model,
        messages=(
            ChatMessage(role="system", content=system_prompt),
            ChatMessage(role="user", content=user_prompt),
        ),
        temperature=temperature,
        max_tokens=max_tokens_for(len(text), model),
    )
