"""Request-scoped user context.

Exports:
    UserContext: Current-user data holder
    UserContextHolder: Context-local access to the current UserContext
    MissingUserContextError: Raised when a user is required but absent
"""

from adminkit.context.exceptions import MissingUserContextError
from adminkit.context.holder import UserContextHolder
from adminkit.context.models import UserContext

__all__ = ["UserContext", "UserContextHolder", "MissingUserContextError"]
