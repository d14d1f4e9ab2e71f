"""Content-limit policy: tier -> character cap, model and daily cap."""

from trapfinder.plan.models import UNLIMITED, PlanPolicy, PlanTier

STANDARD_MODEL = "gpt-4o-mini"
PRO_MODEL = "gpt-4o"

# Model used once a capped tier has spent its daily allowance.
DOWNGRADE_MODEL = STANDARD_MODEL

_POLICIES: dict[PlanTier, PlanPolicy] = {
    PlanTier.FREE: PlanPolicy(
        tier=PlanTier.FREE,
        character_limit=10_000,
        model_id=STANDARD_MODEL,
        daily_limit=UNLIMITED,
    ),
    PlanTier.STANDARD: PlanPolicy(
        tier=PlanTier.STANDARD,
        character_limit=50_000,
        model_id=STANDARD_MODEL,
        daily_limit=UNLIMITED,
    ),
    PlanTier.PRO: PlanPolicy(
        tier=PlanTier.PRO,
        character_limit=50_000,
        model_id=PRO_MODEL,
        daily_limit=10,
    ),
}


def policy_for(tier: PlanTier) -> PlanPolicy:
    """Return the policy snapshot for *tier*."""
    return _POLICIES[tier]


def resolve_model(policy: PlanPolicy, scans_today: int) -> str:
    """Pick the model for a request about to be built.

    A tier with a numeric daily cap that has been reached is served by the
    cheaper model instead of being refused.
    """
    if policy.has_daily_limit and scans_today >= policy.daily_limit:
        return DOWNGRADE_MODEL
    return policy.model_id
