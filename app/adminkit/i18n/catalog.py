"""Catalog lookup: the message source consulted by the MessageResolver.

Lookups walk the locale hierarchy: the requested locale and its parents,
then the fallback locale and its parents (when configured), then the root
catalog. A missing key comes back as ``LookupResult.not_found()``.
"""

import threading
from typing import Dict, FrozenSet, List, Mapping, Optional, Protocol

from adminkit.i18n.loader import TranslationLoader
from adminkit.i18n.models import ROOT, Locale, LookupResult, MessageCatalog
from adminkit.logging import get_module_logger

logger = get_module_logger()


class CatalogLookup(Protocol):
    """Read access to localized message templates.

    Implementations must be safe for concurrent readers.
    """

    def lookup(self, locale: Locale, key: str) -> LookupResult: ...


def lookup_chain(locale: Locale, fallback_locale: Optional[Locale] = None) -> List[Locale]:
    """Locales to consult for ``locale``, most specific first, root last."""
    chain = locale.candidates()
    if fallback_locale is not None:
        for candidate in fallback_locale.candidates():
            if candidate not in chain:
                chain.append(candidate)
    chain.append(ROOT)
    return chain


def _lookup_in(
    catalogs: Mapping[Locale, MessageCatalog],
    chain: List[Locale],
    key: str,
) -> LookupResult:
    for candidate in chain:
        catalog = catalogs.get(candidate)
        if catalog is None:
            continue
        template = catalog.get_message(key)
        if template is not None:
            return LookupResult.found(template, locale=candidate)
    return LookupResult.not_found()


class StaticCatalog:
    """In-memory CatalogLookup built from plain mappings.

    Example:
        catalog = StaticCatalog(
            {"en-US": {"greet": "Hello, {}!"}, "zh-CN": {"greet": "你好，{}！"}}
        )
    """

    def __init__(
        self,
        messages: Mapping[str, Mapping[str, str]],
        fallback_locale: Optional[Locale] = None,
    ):
        self.fallback_locale = fallback_locale
        self._catalogs: Dict[Locale, MessageCatalog] = {}
        for tag, entries in messages.items():
            locale = Locale.from_string(tag)
            self._catalogs[locale] = MessageCatalog(locale=locale, messages=dict(entries))

    def lookup(self, locale: Locale, key: str) -> LookupResult:
        return _lookup_in(self._catalogs, lookup_chain(locale, self.fallback_locale), key)


class CatalogRegistry:
    """CatalogLookup backed by a TranslationLoader.

    Holds one MessageCatalog per locale. A locale missing from the mapping
    is loaded the first time a lookup needs it. Writers (load, reload and
    first-use loads) serialise on a lock and publish a new mapping; readers
    use whichever mapping is current and never block.

    Attributes:
        loader: TranslationLoader providing catalogs.
        fallback_locale: Locale consulted after the requested locale chain.
    """

    def __init__(
        self,
        loader: TranslationLoader,
        fallback_locale: Optional[Locale] = None,
    ):
        self.loader = loader
        self.fallback_locale = fallback_locale
        self._catalogs: Dict[Locale, MessageCatalog] = {}
        self._lock = threading.Lock()
        self._absent: FrozenSet[Locale] = frozenset()
        logger.info(
            "initialized_catalog_registry",
            fallback_locale=fallback_locale.tag if fallback_locale else None,
        )

    @property
    def catalogs(self) -> Mapping[Locale, MessageCatalog]:
        return self._catalogs

    def load_all(self) -> None:
        """Load all available locales from the loader."""
        loaded = self.loader.load_all()
        with self._lock:
            self._catalogs = dict(loaded)
            self._absent = frozenset()
        logger.info("loaded_all_catalogs", locale_count=len(loaded))

    def load_locale(self, locale: Locale) -> None:
        """Load a specific locale from the loader.

        Args:
            locale: Locale to load.

        Raises:
            FileNotFoundError: If no catalog files exist for the locale.
        """
        catalog = self.loader.load(locale)
        with self._lock:
            catalogs = dict(self._catalogs)
            catalogs[locale] = catalog
            self._catalogs = catalogs
            self._absent = self._absent - {locale}
        logger.info("loaded_locale_catalog", locale=locale.tag)

    def reload(self) -> None:
        """Re-read every catalog from the loader, bypassing its cache."""
        self.loader.clear_cache()
        self.load_all()
        logger.info("reloaded_all_catalogs")

    def lookup(self, locale: Locale, key: str) -> LookupResult:
        chain = lookup_chain(locale, self.fallback_locale)
        for candidate in chain:
            self._ensure_loaded(candidate)
            catalog = self._catalogs.get(candidate)
            template = catalog.get_message(key) if catalog is not None else None
            if template is not None:
                return LookupResult.found(template, locale=candidate)
        return LookupResult.not_found()

    def _ensure_loaded(self, locale: Locale) -> None:
        """Load the catalog of ``locale`` on first use.

        A locale without catalog files is remembered as absent until the
        next load_all() or reload().
        """
        if locale in self._catalogs or locale in self._absent:
            return
        with self._lock:
            if locale in self._catalogs or locale in self._absent:
                return
            try:
                catalog = self.loader.load(locale)
            except FileNotFoundError:
                self._absent = self._absent | {locale}
                logger.debug("catalog_not_available", locale=locale.tag)
                return
            catalogs = dict(self._catalogs)
            catalogs[locale] = catalog
            self._catalogs = catalogs
        logger.info("lazy_loaded_locale_catalog", locale=locale.tag)

    def has_message(self, key: str, locale: Locale) -> bool:
        """Check if the catalog of exactly ``locale`` has ``key`` (no fallback)."""
        catalog = self._catalogs.get(locale)
        return catalog.has_message(key) if catalog else False

    def get_catalog(self, locale: Locale) -> Optional[MessageCatalog]:
        return self._catalogs.get(locale)

    def get_available_locales(self) -> List[Locale]:
        return list(self._catalogs.keys())
