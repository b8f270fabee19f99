"""Translation loading interface and implementations.

Defines the contract for loading message catalogs and provides the YAML loader.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml

from adminkit.i18n.exceptions import CatalogLoadError, InvalidLocaleError
from adminkit.i18n.models import ROOT, Locale, MessageCatalog
from adminkit.logging import get_module_logger

logger = get_module_logger()

YAML_SUFFIXES = (".yml", ".yaml")

YAML_BOOL_TAG = "tag:yaml.org,2002:bool"


class CatalogYAMLLoader(yaml.SafeLoader):
    """SafeLoader that reads yes/no/on/off/true/false as plain strings.

    Enum members such as ``YES`` and ``NO`` are catalog keys, and a value
    like ``Yes`` is display text.
    """


CatalogYAMLLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != YAML_BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations must define how to load and parse message catalogs
    for different locales.
    """

    @abstractmethod
    def load(self, locale: Locale) -> MessageCatalog:
        """Load messages for a specific locale.

        Args:
            locale: Locale to load messages for.

        Returns:
            MessageCatalog with loaded messages.

        Raises:
            FileNotFoundError: If no catalog files exist for the locale.
            CatalogLoadError: If a catalog file cannot be parsed.
        """
        pass

    @abstractmethod
    def load_all(self) -> Dict[Locale, MessageCatalog]:
        """Load messages for every locale the source provides.

        Returns:
            Dict mapping Locale to MessageCatalog.
        """
        pass

    def clear_cache(self) -> None:
        """Drop any cached catalogs. Loaders without a cache do nothing."""


def flatten_messages(data: Mapping[str, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten nested mappings into dotted keys.

    {"UserType": {"ADMIN": "Administrator"}} -> {"UserType.ADMIN": "Administrator"}

    Scalars are stringified; null values are skipped.
    """
    flat: Dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten_messages(value, full_key))
        elif value is None:
            logger.warning("null_message_skipped", key=full_key)
        elif isinstance(value, (list, tuple)):
            logger.warning("invalid_message_format", key=full_key, expected="scalar")
        else:
            flat[full_key] = str(value)
    return flat


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML catalog files.

    Expects files named ``<domain>.<locale>.yml`` (or ``.yaml``) in the
    translations directory. Files with a single-part stem such as
    ``messages.yml`` feed the root catalog, consulted after every locale.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        cache: Cache of loaded catalogs (locale -> catalog).
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML catalog files.
            use_cache: Whether to cache loaded catalogs in memory.

        Raises:
            ValueError: If translations_dir does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[Locale, MessageCatalog] = {}

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def _catalog_files(self) -> List[Path]:
        return sorted(
            path
            for path in self.translations_dir.iterdir()
            if path.is_file() and path.suffix in YAML_SUFFIXES
        )

    def _locale_of(self, path: Path) -> Locale:
        """Locale a catalog file belongs to.

        Raises:
            InvalidLocaleError: If the locale segment of the name is malformed.
        """
        parts = path.stem.split(".")
        if len(parts) < 2:
            return ROOT
        return Locale.from_string(parts[-1])

    def load(self, locale: Locale) -> MessageCatalog:
        """Load messages for a locale from YAML files.

        Merges every file for the locale into a single catalog, in file
        name order; later files override earlier ones.

        Args:
            locale: Locale to load (ROOT loads the locale-less files).

        Returns:
            MessageCatalog with loaded messages.

        Raises:
            FileNotFoundError: If no YAML files found for locale.
            CatalogLoadError: If YAML parsing fails.
        """
        if self.use_cache and locale in self.cache:
            logger.debug("loaded_from_cache", locale=locale.tag)
            return self.cache[locale]

        yaml_files = []
        for path in self._catalog_files():
            try:
                if self._locale_of(path) == locale:
                    yaml_files.append(path)
            except InvalidLocaleError:
                continue

        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale '{locale.tag}' in {self.translations_dir}"
            )

        catalog = MessageCatalog(
            locale=locale,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.load(f, Loader=CatalogYAMLLoader)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise CatalogLoadError(f"Failed to parse {yaml_file}: {e}") from e

            if data is None:
                continue
            if not isinstance(data, Mapping):
                logger.warning(
                    "invalid_yaml_format", file=str(yaml_file), expected="mapping"
                )
                continue
            catalog.messages.update(flatten_messages(data))

        logger.info(
            "loaded_translations",
            locale=locale.tag,
            file_count=len(yaml_files),
            message_count=len(catalog),
        )

        if self.use_cache:
            self.cache[locale] = catalog

        return catalog

    def load_all(self) -> Dict[Locale, MessageCatalog]:
        """Load every locale found in the translations directory.

        Returns:
            Dict mapping each Locale (ROOT included when present) to its catalog.

        Raises:
            ValueError: If no translation files found at all.
        """
        locales_found = set()
        for path in self._catalog_files():
            try:
                locales_found.add(self._locale_of(path))
            except InvalidLocaleError:
                logger.warning("unrecognized_catalog_file", file=str(path))

        if not locales_found:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        result = {}
        for locale in locales_found:
            try:
                result[locale] = self.load(locale)
            except FileNotFoundError:
                logger.warning("could_not_load_locale", locale=locale.tag)

        return result

    def clear_cache(self) -> None:
        """Clear all cached catalogs."""
        self.cache.clear()
        logger.info("cleared_translation_cache")
