"""Dependency injection for adminkit services.

Providers return process-wide singletons; the ``*Dep`` aliases wire them
into FastAPI route signatures.
"""

from adminkit.services.dependencies import (
    MessageResolverDep,
    SettingsDep,
    TranslationServiceDep,
    UserContextDep,
)
from adminkit.services.providers import (
    get_message_resolver,
    get_settings,
    get_translation_service,
    get_user_context,
)

__all__ = [
    "get_settings",
    "get_message_resolver",
    "get_translation_service",
    "get_user_context",
    "SettingsDep",
    "MessageResolverDep",
    "TranslationServiceDep",
    "UserContextDep",
]
