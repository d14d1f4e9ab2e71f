"""Output-token ceilings by input length."""

MODEL_MAX_TOKENS: dict[str, int] = {
    "gpt-4o": 16_384,
    "gpt-4o-mini": 16_384,
}
DEFAULT_MODEL_MAX_TOKENS = 16_384

SHORT_INPUT_CHARS = 10_000
MEDIUM_INPUT_CHARS = 50_000

SHORT_INPUT_TOKENS = 12_000
MEDIUM_INPUT_TOKENS = 16_000
LONG_INPUT_TOKENS = 16_000


def model_max_tokens(model: str) -> int:
    return MODEL_MAX_TOKENS.get(model, DEFAULT_MODEL_MAX_TOKENS)


def max_tokens_for(text_length: int, model: str) -> int:
    """Return ``max_tokens`` for an input of *text_length* characters."""
    if text_length <= SHORT_INPUT_CHARS:
        budget = SHORT_INPUT_TOKENS
    elif text_length <= MEDIUM_INPUT_CHARS:
        budget = MEDIUM_INPUT_TOKENS
    else:
        budget = LONG_INPUT_TOKENS
    return min(budget, model_max_tokens(model))
