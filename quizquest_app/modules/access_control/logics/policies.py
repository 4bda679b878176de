from typing import Dict, FrozenSet, Any

# --- Constants: Subscription plans ---
PLAN_FREE = 'free'
PLAN_PRO = 'pro'
PLAN_ENTERPRISE = 'enterprise'

# --- Constants: Question tiers ---
TIER_FREE = 'free'
TIER_PRO = 'pro'
TIER_ENTERPRISE = 'enterprise'
ALL_TIERS = (TIER_FREE, TIER_PRO, TIER_ENTERPRISE)

# --- Constants: Permission Keys ---
CAN_VIEW_ANSWERS = 'can_view_answers'
CAN_CREATE_ASSIGNMENT = 'can_create_assignment'

# --- Policy Matrix ---
PLAN_POLICIES: Dict[str, Dict[str, Any]] = {
    PLAN_FREE: {
        'tiers': frozenset({TIER_FREE}),
        'permissions': {
            CAN_VIEW_ANSWERS: False,
            CAN_CREATE_ASSIGNMENT: True,
        },
    },
    PLAN_PRO: {
        'tiers': frozenset({TIER_FREE, TIER_PRO}),
        'permissions': {
            CAN_VIEW_ANSWERS: True,
            CAN_CREATE_ASSIGNMENT: True,
        },
    },
    PLAN_ENTERPRISE: {
        'tiers': frozenset({TIER_FREE, TIER_PRO, TIER_ENTERPRISE}),
        'permissions': {
            CAN_VIEW_ANSWERS: True,
            CAN_CREATE_ASSIGNMENT: True,
        },
    },
}


def normalize_plan(plan: str) -> str:
    """Lower-case a plan name; unknown or empty plans become ``free``."""
    value = (plan or '').strip().lower()
    return value if value in PLAN_POLICIES else PLAN_FREE


def normalize_tier(tier: str) -> str:
    """Untagged questions count as ``free``."""
    value = (tier or '').strip().lower()
    return value or TIER_FREE


def get_plan_policy(plan: str) -> Dict[str, Any]:
    """Retrieve the policy for a plan with fallback to FREE."""
    base_policy = PLAN_POLICIES[normalize_plan(plan)]
    return {
        'tiers': base_policy['tiers'],
        'permissions': dict(base_policy['permissions']),
    }


def get_accessible_tiers(plan: str) -> FrozenSet[str]:
    """Tiers whose questions a plan may see."""
    return PLAN_POLICIES[normalize_plan(plan)]['tiers']


def is_tier_accessible(plan: str, tier: str) -> bool:
    return normalize_tier(tier) in get_accessible_tiers(plan)
