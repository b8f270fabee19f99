"""Message resolution: catalog lookup, fallback and template filling.

MessageResolver turns a message key or an enum member into display text.
Lookup misses are normal control flow and come back as None; nothing in
this module raises for an unknown key.
"""

from enum import Enum
from typing import Any, Optional

from adminkit.enums import HasLabel
from adminkit.i18n.catalog import CatalogLookup
from adminkit.i18n.models import Locale
from adminkit.i18n.template import format_template, has_placeholder
from adminkit.logging import get_module_logger

logger = get_module_logger()


class MessageResolver:
    """Resolve localized messages with "{}" template filling.

    Keys resolve against the supplied locale, or the default locale fixed at
    construction. Enum members fall back through a qualified key
    ("UserType.ADMIN"), a bare key ("ADMIN"), the member's label and finally
    the member name, so they always render as something.

    Attributes:
        catalog: CatalogLookup consulted for templates.
        default_locale: Locale used when a caller supplies none.
    """

    def __init__(self, catalog: CatalogLookup, default_locale: Locale):
        self._catalog = catalog
        self._default_locale = default_locale
        logger.info("initialized_message_resolver", default_locale=default_locale.tag)

    @property
    def catalog(self) -> CatalogLookup:
        return self._catalog

    @property
    def default_locale(self) -> Locale:
        return self._default_locale

    def resolve(
        self, key: Optional[str], *args: Any, locale: Optional[Locale] = None
    ) -> Optional[str]:
        """Look up ``key`` and fill its template with ``args``.

        Example: with "Nickname '{}' is taken, try '{}'?" stored under
        ``user.nickname_taken``, ``resolve("user.nickname_taken", "bob", "bob1")``
        gives "Nickname 'bob' is taken, try 'bob1'?".

        Args:
            key: Message key. None or "" resolves to None without a lookup.
            *args: Positional template values.
            locale: Locale to resolve in (default: default_locale).

        Returns:
            The message, "" for an entry deliberately translated to nothing,
            or None when no entry exists.
        """
        if not key:
            return None

        effective_locale = locale if locale is not None else self._default_locale
        result = self._catalog.lookup(effective_locale, key)
        if not result.is_found:
            logger.debug("message_not_found", key=key, locale=effective_locale.tag)
            return None

        template = result.template
        if not template:
            return template

        if has_placeholder(template):
            return format_template(template, *args)

        return template

    def resolve_or_default(
        self,
        key: Optional[str],
        default: str,
        *args: Any,
        locale: Optional[Locale] = None,
    ) -> str:
        """Same as resolve(), returning ``default`` when no entry exists."""
        message = self.resolve(key, *args, locale=locale)
        return default if message is None else message

    def resolve_enum(
        self, member: Optional[Enum], *args: Any, locale: Optional[Locale] = None
    ) -> Optional[str]:
        """Display text for an enum member.

        Tries, in order, stopping at the first non-empty text:
        1. "<EnumType>.<NAME>" through resolve()
        2. "<NAME>" through resolve()
        3. the member's label, if it has one
        4. the member name

        Empty catalog entries are skipped here, unlike in resolve().

        Args:
            member: Enum member. None resolves to None.
            *args: Positional template values.
            locale: Locale to resolve in (default: default_locale).

        Returns:
            Display text; None only when ``member`` is None.
        """
        if member is None:
            return None

        qualified_key = f"{type(member).__name__}.{member.name}"
        message = self.resolve(qualified_key, *args, locale=locale)
        if message:
            return message

        message = self.resolve(member.name, *args, locale=locale)
        if message:
            return message

        if isinstance(member, HasLabel):
            return member.label

        return member.name
