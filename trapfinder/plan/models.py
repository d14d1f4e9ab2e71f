from dataclasses import dataclass
from enum import Enum

UNLIMITED = -1


class PlanTier(str, Enum):
    """Subscription level."""

    FREE = "free"
    STANDARD = "standard"
    PRO = "pro"


@dataclass(frozen=True)
class PlanPolicy:
    """Read-only snapshot of the limits a tier imposes on one pipeline run."""

    tier: PlanTier
    character_limit: int
    model_id: str
    daily_limit: int = UNLIMITED

    @property
    def has_daily_limit(self) -> bool:
        return self.daily_limit != UNLIMITED
