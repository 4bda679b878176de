"""Access Control module: subscription plans and question-tier gating."""


def setup_module(app):
    """
    Initialize the Access Control module.
    1. Register Error Handlers.
    2. Connect Signals/Events.
    """
    from .decorators import handle_access_control_error
    from .events import register_events
    from .exceptions import PermissionDeniedError, TierAccessDeniedError

    app.register_error_handler(PermissionDeniedError, handle_access_control_error)
    app.register_error_handler(TierAccessDeniedError, handle_access_control_error)

    register_events()

    app.logger.info("Access Control Module Initialized.")
