"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common dependencies.
"""

from typing import Annotated

from fastapi import Depends

from adminkit.configuration import Settings
from adminkit.context import UserContext
from adminkit.i18n import MessageResolver, TranslationService
from adminkit.services.providers import (
    get_message_resolver,
    get_settings,
    get_translation_service,
    get_user_context,
)

SettingsDep = Annotated[Settings, Depends(get_settings)]

MessageResolverDep = Annotated[MessageResolver, Depends(get_message_resolver)]

TranslationServiceDep = Annotated[TranslationService, Depends(get_translation_service)]

UserContextDep = Annotated[UserContext, Depends(get_user_context)]

__all__ = [
    "SettingsDep",
    "MessageResolverDep",
    "TranslationServiceDep",
    "UserContextDep",
]
