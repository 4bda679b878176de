from typing import FrozenSet

from flask import current_app

from quizquest_app.core.extensions import db
from quizquest_app.models import User
from ..logics.policies import (
    get_accessible_tiers,
    get_plan_policy,
    is_tier_accessible,
    normalize_plan,
    normalize_tier,
    PLAN_POLICIES,
)
from ..exceptions import PermissionDeniedError, TierAccessDeniedError
from ..signals import access_denied, plan_changed


class PlanService:
    """Service to handle subscription plans, tier gating and permission checks."""

    @staticmethod
    def get_plan(user) -> str:
        """Helper to get a user's plan safely."""
        plan = getattr(user, 'subscription_plan', None) if user else None
        return normalize_plan(plan)

    @classmethod
    def get_accessible_tiers(cls, user) -> FrozenSet[str]:
        return get_accessible_tiers(cls.get_plan(user))

    @classmethod
    def can_access_tier(cls, user, tier: str) -> bool:
        return is_tier_accessible(cls.get_plan(user), tier)

    @classmethod
    def check_permission(cls, user, permission_key: str) -> bool:
        """Check if a user's plan grants a specific permission."""
        if not user:
            return False

        policy = get_plan_policy(cls.get_plan(user))
        return policy.get('permissions', {}).get(permission_key, False)

    @classmethod
    def ensure_tier_access(cls, user, tier: str):
        """
        Enforce tier gating. Raises TierAccessDeniedError if the plan
        does not include the tier. Fires access_denied on failure.
        """
        if cls.can_access_tier(user, tier):
            return

        plan = cls.get_plan(user)
        access_denied.send(
            current_app._get_current_object(),
            user_id=getattr(user, 'user_id', None),
            key=f"tier:{normalize_tier(tier)}"
        )
        raise TierAccessDeniedError(normalize_tier(tier), plan)

    @classmethod
    def ensure_permission(cls, user, permission_key: str):
        """
        Enforce permission check. Raises PermissionDeniedError if fails.
        Fires access_denied signal on failure.
        """
        if not cls.check_permission(user, permission_key):
            access_denied.send(
                current_app._get_current_object(),
                user_id=getattr(user, 'user_id', None),
                key=permission_key
            )
            raise PermissionDeniedError(permission_key)

    @classmethod
    def assign_plan(cls, user_id: int, new_plan: str) -> bool:
        """
        Assign a subscription plan to a user.
        Updates DB and emits signal.
        """
        if new_plan not in PLAN_POLICIES:
            raise ValueError(f"Unknown subscription plan: {new_plan}")

        user = db.session.get(User, user_id)
        if not user:
            return False

        old_plan = user.subscription_plan
        if old_plan == new_plan:
            return True

        user.subscription_plan = new_plan
        db.session.commit()

        plan_changed.send(
            current_app._get_current_object(),
            user_id=user.user_id,
            old_plan=old_plan,
            new_plan=new_plan
        )

        current_app.logger.info(f"Plan changed for user {user_id}: {old_plan} -> {new_plan}")
        return True
