"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from enum import Enum
from typing import Any, Optional

from adminkit.i18n.factory import create_message_resolver
from adminkit.i18n.models import Locale
from adminkit.i18n.resolver import MessageResolver


class TranslationService:
    """Class-based translation service.

    Thin facade over a MessageResolver created by the factory.

    Usage:
        # Via dependency injection
        from adminkit.services import TranslationServiceDep

        @router.get("/user-types")
        def list_user_types(translation: TranslationServiceDep):
            return [translation.enum_message_of(t) for t in UserType]

        # Direct instantiation
        service = TranslationService()
        message = service.message_of("user.not_found", user_id)
    """

    def __init__(self, resolver: Optional[MessageResolver] = None):
        """Initialize translation service.

        Args:
            resolver: Optional pre-configured MessageResolver.
                If not provided, creates one via the factory.
        """
        self._resolver = resolver or create_message_resolver()

    def message_of(
        self, key: Optional[str], *args: Any, locale: Optional[Locale] = None
    ) -> Optional[str]:
        """Translated message for ``key``, or None when no entry exists."""
        return self._resolver.resolve(key, *args, locale=locale)

    def message_or_default(
        self,
        key: Optional[str],
        default: str,
        *args: Any,
        locale: Optional[Locale] = None,
    ) -> str:
        """Translated message for ``key``, or ``default`` when no entry exists."""
        return self._resolver.resolve_or_default(key, default, *args, locale=locale)

    def enum_message_of(
        self, member: Optional[Enum], *args: Any, locale: Optional[Locale] = None
    ) -> Optional[str]:
        """Display text for an enum member; None only for a None member."""
        return self._resolver.resolve_enum(member, *args, locale=locale)

    @property
    def default_locale(self) -> Locale:
        return self._resolver.default_locale

    def reload(self) -> None:
        """Re-read catalogs if the underlying catalog supports reloading.

        Raises:
            TypeError: If the catalog has no reload() method.
        """
        reload = getattr(self._resolver.catalog, "reload", None)
        if reload is None:
            raise TypeError(
                f"{type(self._resolver.catalog).__name__} does not support reload"
            )
        reload()

    @property
    def resolver(self) -> MessageResolver:
        """Access the underlying MessageResolver."""
        return self._resolver
