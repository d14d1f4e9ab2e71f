from abc import ABC, abstractmethod

from trapfinder.plan.models import PlanTier


class BasePlanService(ABC):
    """Contract for the subscription/usage collaborator consulted by the pipeline."""

    @abstractmethod
    def current_tier(self) -> PlanTier:
        """Return the tier active right now."""

    @abstractmethod
    def scans_today(self) -> int:
        """Return how many analyses succeeded today."""

    @abstractmethod
    def record_analysis(self) -> None:
        """Count one successful analysis against today's usage."""
