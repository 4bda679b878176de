from functools import wraps
from flask import abort, jsonify
from flask_login import current_user
from .interface import AccessControlInterface
from .exceptions import AccessControlError, PermissionDeniedError, TierAccessDeniedError


def require_permission(permission_key: str):
    """
    Route decorator to enforce permission check.
    If check fails, raises PermissionDeniedError (handled by error handlers).
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if not current_user.is_authenticated:
                abort(401)

            AccessControlInterface.enforce_permission(current_user, permission_key)

            return f(*args, **kwargs)
        return decorated_function
    return decorator


def handle_access_control_error(error: AccessControlError):
    """
    Standard error handler for access control exceptions.
    Returns structured JSON response.
    """
    response = {
        "success": False,
        "error": error.__class__.__name__,
        "message": str(error)
    }

    if isinstance(error, PermissionDeniedError):
        response["code"] = "PERMISSION_DENIED"
        response["permission_key"] = error.permission_key
        return jsonify(response), 403

    if isinstance(error, TierAccessDeniedError):
        response["code"] = "TIER_ACCESS_DENIED"
        response["tier"] = error.tier
        response["plan"] = error.plan
        return jsonify(response), 403

    response["code"] = "ACCESS_DENIED"
    return jsonify(response), 403
