"""Factory functions for creating i18n components."""

from pathlib import Path
from typing import Optional

from adminkit.i18n.catalog import CatalogRegistry
from adminkit.i18n.loader import YAMLTranslationLoader
from adminkit.i18n.models import Locale
from adminkit.i18n.resolver import MessageResolver
from adminkit.logging import get_module_logger

logger = get_module_logger()

BUNDLED_TRANSLATIONS_DIR = Path(__file__).resolve().parents[1] / "locales"


def create_message_resolver(
    translations_dir: Optional[Path] = None,
    default_locale: Optional[Locale] = None,
    fallback_locale: Optional[Locale] = None,
    use_cache: Optional[bool] = None,
    preload: Optional[bool] = None,
) -> MessageResolver:
    """Create and configure a MessageResolver backed by YAML catalogs.

    Arguments left as None are taken from ``Settings.i18n``.

    Args:
        translations_dir: Directory of YAML catalog files
            (default: I18N_TRANSLATIONS_DIR, else the catalogs bundled with adminkit)
        default_locale: Locale used when callers supply none (default: I18N_DEFAULT_LOCALE)
        fallback_locale: Locale consulted before the root catalog (default: I18N_FALLBACK_LOCALE)
        use_cache: Whether the loader caches parsed YAML (default: I18N_USE_CACHE)
        preload: Whether to load all locales immediately; otherwise each locale
            loads on its first lookup (default: I18N_PRELOAD)

    Returns:
        MessageResolver: Configured resolver instance

    Raises:
        ValueError: If translations_dir does not exist

    Usage:
        resolver = create_message_resolver()

        resolver = create_message_resolver(
            translations_dir=Path("/srv/locales"),
            default_locale=Locale.from_string("zh-CN"),
        )
    """
    from adminkit.services.providers import get_settings

    i18n_settings = get_settings().i18n

    if translations_dir is None:
        translations_dir = i18n_settings.translations_dir or BUNDLED_TRANSLATIONS_DIR
    if default_locale is None:
        default_locale = Locale.from_string(i18n_settings.default_locale)
    if fallback_locale is None and i18n_settings.fallback_locale:
        fallback_locale = Locale.from_string(i18n_settings.fallback_locale)
    if use_cache is None:
        use_cache = i18n_settings.use_cache
    if preload is None:
        preload = i18n_settings.preload

    loader = YAMLTranslationLoader(translations_dir=translations_dir, use_cache=use_cache)
    registry = CatalogRegistry(loader=loader, fallback_locale=fallback_locale)

    if preload:
        registry.load_all()
        logger.info(
            "message_resolver_created_with_preload",
            translations_dir=str(translations_dir),
            locale_count=len(registry.get_available_locales()),
        )
    else:
        logger.info(
            "message_resolver_created_lazy",
            translations_dir=str(translations_dir),
        )

    return MessageResolver(catalog=registry, default_locale=default_locale)
