"""Context-local storage for the current UserContext.

Backed by a ContextVar, so each thread and each asyncio task sees its own
user. ``scope()`` also binds the user to the structlog request context.

Usage:
    with UserContextHolder.scope(UserContext(user_id=1, user_name="admin")):
        current = UserContextHolder.require()
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Generator, Optional

from adminkit.context.exceptions import MissingUserContextError
from adminkit.context.models import UserContext
from adminkit.logging import bind_request_context, get_correlation_id

_current_user: ContextVar[Optional[UserContext]] = ContextVar(
    "adminkit_user_context", default=None
)


class UserContextHolder:
    """Access point for the current request's UserContext."""

    @staticmethod
    def get() -> Optional[UserContext]:
        return _current_user.get()

    @staticmethod
    def require() -> UserContext:
        """Current UserContext.

        Raises:
            MissingUserContextError: If no user is bound.
        """
        user = _current_user.get()
        if user is None:
            raise MissingUserContextError("No user context bound to the current request")
        return user

    @staticmethod
    def set(user: Optional[UserContext]) -> None:
        _current_user.set(user)

    @staticmethod
    def clear() -> None:
        _current_user.set(None)

    @staticmethod
    @contextmanager
    def scope(user: UserContext) -> Generator[UserContext, None, None]:
        """Bind ``user`` for the duration of the block.

        The previous user (if any) and log context are restored on exit.
        """
        token = _current_user.set(user)
        try:
            with bind_request_context(
                correlation_id=get_correlation_id(),
                user_id=user.user_id,
                user_name=user.user_name,
                client_ip=user.client_ip,
            ):
                yield user
        finally:
            _current_user.reset(token)
