from collections.abc import Callable
from datetime import date

from trapfinder.logging.logger import Log
from trapfinder.plan.base import BasePlanService
from trapfinder.plan.models import PlanTier
from trapfinder.plan.policy import policy_for


class UsageTracker(BasePlanService):
    """In-memory tier selection and daily analysis counter.

    The counter resets when the calendar day changes and only moves for tiers
    that carry a numeric daily cap. Nothing is persisted.
    """

    def __init__(
        self,
        tier: PlanTier = PlanTier.FREE,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._tier = tier
        self._today = today
        self._count = 0
        self._count_date = today()

    def current_tier(self) -> PlanTier:
        return self._tier

    def set_tier(self, tier: PlanTier) -> None:
        Log.info(f"Plan changed: {self._tier.value} -> {tier.value}")
        self._tier = tier

    def scans_today(self) -> int:
        self._roll_day()
        return self._count

    def record_analysis(self) -> None:
        self._roll_day()
        if policy_for(self._tier).has_daily_limit:
            self._count += 1
            Log.debug(f"Analyses today: {self._count}")

    def remaining_scans(self) -> int | None:
        """Remaining capped analyses today, or None when the tier is unlimited."""
        policy = policy_for(self._tier)
        if not policy.has_daily_limit:
            return None
        return max(0, policy.daily_limit - self.scans_today())

    def _roll_day(self) -> None:
        today = self._today()
        if today != self._count_date:
            self._count = 0
            self._count_date = today
