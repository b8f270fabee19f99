"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core services.
"""

from functools import lru_cache

from adminkit.configuration import Settings
from adminkit.context import UserContext, UserContextHolder
from adminkit.i18n import MessageResolver, TranslationService, create_message_resolver


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Call ``get_settings.cache_clear()`` in tests after changing the environment.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_message_resolver() -> MessageResolver:
    """
    Get application-scoped MessageResolver singleton.

    Built from ``Settings.i18n``; catalogs are loaded once per process.

    Returns:
        MessageResolver: Cached resolver instance.

    Usage:
        @router.get("/labels/{key}")
        def label(key: str, resolver: MessageResolverDep):
            return {"text": resolver.resolve(key)}
    """
    return create_message_resolver()


@lru_cache
def get_translation_service() -> TranslationService:
    """
    Get application-scoped TranslationService singleton.

    Returns:
        TranslationService: Facade over the shared MessageResolver.
    """
    return TranslationService(resolver=get_message_resolver())


def get_user_context() -> UserContext:
    """
    Current request's UserContext.

    Not cached: the value is context-local.

    Raises:
        MissingUserContextError: If no user is bound to the request.
    """
    return UserContextHolder.require()
