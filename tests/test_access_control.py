import unittest
from unittest.mock import MagicMock, patch

from flask import Flask

from quizquest_app.modules.access_control.exceptions import (
    PermissionDeniedError,
    TierAccessDeniedError,
)
from quizquest_app.modules.access_control.logics.policies import (
    CAN_CREATE_ASSIGNMENT,
    CAN_VIEW_ANSWERS,
    PLAN_ENTERPRISE,
    PLAN_FREE,
    PLAN_PRO,
    TIER_ENTERPRISE,
    TIER_FREE,
    TIER_PRO,
    get_accessible_tiers,
    get_plan_policy,
    is_tier_accessible,
    normalize_plan,
)
from quizquest_app.modules.access_control.services.plan_service import PlanService


class TestPolicies(unittest.TestCase):

    def test_tier_ladder(self):
        self.assertEqual(get_accessible_tiers(PLAN_FREE), frozenset({TIER_FREE}))
        self.assertEqual(get_accessible_tiers(PLAN_PRO), frozenset({TIER_FREE, TIER_PRO}))
        self.assertEqual(
            get_accessible_tiers(PLAN_ENTERPRISE),
            frozenset({TIER_FREE, TIER_PRO, TIER_ENTERPRISE})
        )

    def test_normalize_plan(self):
        self.assertEqual(normalize_plan(' PRO '), PLAN_PRO)
        self.assertEqual(normalize_plan('gold'), PLAN_FREE)
        self.assertEqual(normalize_plan(None), PLAN_FREE)

    def test_untagged_tier_is_free(self):
        self.assertTrue(is_tier_accessible(PLAN_FREE, None))
        self.assertTrue(is_tier_accessible(PLAN_FREE, ''))
        self.assertFalse(is_tier_accessible(PLAN_FREE, TIER_PRO))

    def test_policy_copy_does_not_leak(self):
        policy = get_plan_policy(PLAN_FREE)
        policy['permissions'][CAN_VIEW_ANSWERS] = True
        self.assertFalse(get_plan_policy(PLAN_FREE)['permissions'][CAN_VIEW_ANSWERS])


class TestPlanService(unittest.TestCase):

    def setUp(self):
        ctx = Flask(__name__).app_context()
        ctx.push()
        self.addCleanup(ctx.pop)
        self.free_user = MagicMock(user_id=1, subscription_plan='free')
        self.pro_user = MagicMock(user_id=2, subscription_plan='pro')

    def test_get_plan_handles_missing_user(self):
        self.assertEqual(PlanService.get_plan(None), PLAN_FREE)

    def test_check_permission(self):
        self.assertFalse(PlanService.check_permission(self.free_user, CAN_VIEW_ANSWERS))
        self.assertTrue(PlanService.check_permission(self.pro_user, CAN_VIEW_ANSWERS))
        self.assertTrue(PlanService.check_permission(self.free_user, CAN_CREATE_ASSIGNMENT))
        self.assertFalse(PlanService.check_permission(None, CAN_CREATE_ASSIGNMENT))

    @patch('quizquest_app.modules.access_control.services.plan_service.current_app')
    @patch('quizquest_app.modules.access_control.services.plan_service.access_denied')
    def test_ensure_tier_access_denied(self, mock_signal, mock_app):
        with self.assertRaises(TierAccessDeniedError) as ctx:
            PlanService.ensure_tier_access(self.free_user, TIER_PRO)

        self.assertEqual(ctx.exception.tier, TIER_PRO)
        self.assertEqual(ctx.exception.plan, PLAN_FREE)
        mock_signal.send.assert_called_once()
        self.assertEqual(mock_signal.send.call_args.kwargs['key'], 'tier:pro')

    @patch('quizquest_app.modules.access_control.services.plan_service.access_denied')
    def test_ensure_tier_access_allowed(self, mock_signal):
        PlanService.ensure_tier_access(self.pro_user, TIER_PRO)
        mock_signal.send.assert_not_called()

    @patch('quizquest_app.modules.access_control.services.plan_service.current_app')
    @patch('quizquest_app.modules.access_control.services.plan_service.access_denied')
    def test_ensure_permission_denied(self, mock_signal, mock_app):
        with self.assertRaises(PermissionDeniedError) as ctx:
            PlanService.ensure_permission(self.free_user, CAN_VIEW_ANSWERS)
        self.assertEqual(ctx.exception.permission_key, CAN_VIEW_ANSWERS)

    def test_assign_unknown_plan_rejected(self):
        with self.assertRaises(ValueError):
            PlanService.assign_plan(1, 'platinum')


def test_plan_endpoint(app, client, make_user, login):
    make_user('bob', plan='pro')
    login('bob')

    data = client.get('/api/access-control/plan/me').get_json()
    assert data['success'] is True
    assert data['plan'] == 'pro'
    assert data['plan_label'] == 'Pro'
    assert data['accessible_tiers'] == ['free', 'pro']
    assert data['permissions'][CAN_VIEW_ANSWERS] is True


def test_plan_change_evicts_session_store(app, make_user):
    from quizquest_app.modules.access_control.interface import AccessControlInterface
    from quizquest_app.modules.quiz_session.services.session_store import get_store

    user_id = make_user('carol')
    with app.app_context():
        store = get_store(user_id)
        assert AccessControlInterface.assign_plan(user_id, 'enterprise') is True
        assert get_store(user_id) is not store
