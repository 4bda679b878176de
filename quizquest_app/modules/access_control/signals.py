from blinker import Namespace

_signals = Namespace()

# Signal fired when a tier or permission check fails
# Arguments: app, user_id, key
access_denied = _signals.signal('access-denied')

# Signal fired when a user's subscription plan is updated
# Arguments: app, user_id, old_plan, new_plan
plan_changed = _signals.signal('plan-changed')
