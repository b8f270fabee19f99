"""Exceptions for the user context package."""


class MissingUserContextError(RuntimeError):
    """Raised by UserContextHolder.require() when no user is bound."""

    pass
