class AccessControlError(Exception):
    """Base exception for access control module."""
    pass

class PermissionDeniedError(AccessControlError):
    """Raised when a user's plan lacks the required permission."""
    def __init__(self, permission_key: str, message: str = "Permission denied"):
        self.permission_key = permission_key
        self.message = message
        super().__init__(message)

class TierAccessDeniedError(AccessControlError):
    """Raised when a user's plan does not include a question tier."""
    def __init__(self, tier: str, plan: str, message: str = "Upgrade required to access this content"):
        self.tier = tier
        self.plan = plan
        self.message = message
        super().__init__(message)
