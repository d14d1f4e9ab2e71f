from typing import NamedTuple

from trapfinder.plan.models import PlanPolicy


class LimitedText(NamedTuple):
    text: str
    truncated: bool


def limit_text(text: str, policy: PlanPolicy) -> LimitedText:
    """Cut *text* to the policy's character cap.

    The cut is a plain prefix, not aligned to words or sentences.
    """
    limit = policy.character_limit
    if len(text) <= limit:
        return LimitedText(text, False)
    return LimitedText(text[:limit], True)
