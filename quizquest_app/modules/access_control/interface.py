from typing import FrozenSet
from .services.plan_service import PlanService


class AccessControlInterface:
    """
    Public Gateway for Access Control Module.
    Pattern: Facade
    """

    @staticmethod
    def get_plan(user) -> str:
        return PlanService.get_plan(user)

    @staticmethod
    def accessible_tiers(user) -> FrozenSet[str]:
        """Tiers the user's plan can see."""
        return PlanService.get_accessible_tiers(user)

    @staticmethod
    def check(user, permission_key: str) -> bool:
        """Check if user has permission."""
        return PlanService.check_permission(user, permission_key)

    @staticmethod
    def enforce_permission(user, permission_key: str):
        """Raise PermissionDeniedError if the plan lacks the permission."""
        PlanService.ensure_permission(user, permission_key)

    @staticmethod
    def enforce_tier(user, tier: str):
        """Raise TierAccessDeniedError if the user's plan excludes the tier."""
        PlanService.ensure_tier_access(user, tier)

    @staticmethod
    def assign_plan(user_id: int, plan: str) -> bool:
        """Assign subscription plan to user."""
        return PlanService.assign_plan(user_id, plan)
