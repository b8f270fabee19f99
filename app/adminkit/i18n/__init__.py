"""i18n system - message catalogs and message resolution.

Main components:
- models: Locale, LookupResult, MessageCatalog
- template: positional "{}" template filling
- loader: TranslationLoader and YAMLTranslationLoader
- catalog: CatalogLookup protocol, CatalogRegistry, StaticCatalog
- resolver: MessageResolver (key and enum resolution with fallback)
- service: TranslationService facade for dependency injection
"""

from adminkit.i18n.catalog import CatalogLookup, CatalogRegistry, StaticCatalog
from adminkit.i18n.exceptions import CatalogLoadError, I18nError, InvalidLocaleError
from adminkit.i18n.factory import create_message_resolver
from adminkit.i18n.loader import TranslationLoader, YAMLTranslationLoader
from adminkit.i18n.models import (
    ROOT,
    Locale,
    LookupResult,
    LookupStatus,
    MessageCatalog,
)
from adminkit.i18n.resolver import MessageResolver
from adminkit.i18n.service import TranslationService
from adminkit.i18n.template import PLACEHOLDER, format_template

__all__ = [
    "Locale",
    "ROOT",
    "LookupResult",
    "LookupStatus",
    "MessageCatalog",
    "PLACEHOLDER",
    "format_template",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "CatalogLookup",
    "CatalogRegistry",
    "StaticCatalog",
    "MessageResolver",
    "TranslationService",
    "create_message_resolver",
    "I18nError",
    "InvalidLocaleError",
    "CatalogLoadError",
]
