"""Internationalization settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field

from adminkit.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Message catalog and locale configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Process default locale (default: en-US)
        I18N_FALLBACK_LOCALE: Secondary locale consulted before the root catalog
        I18N_TRANSLATIONS_DIR: Directory holding YAML catalogs
            (default: catalogs bundled with adminkit)
        I18N_USE_CACHE: Cache parsed YAML catalogs in the loader (default: True)
        I18N_PRELOAD: Load every available locale at start-up (default: True)

    Example:
        ```python
        from adminkit.services import get_settings

        settings = get_settings()
        default_locale = settings.i18n.default_locale
        ```
    """

    default_locale: str = Field(
        default="en-US",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale used when a caller supplies none",
    )
    fallback_locale: Optional[str] = Field(
        default=None,
        alias="I18N_FALLBACK_LOCALE",
        description="Locale consulted when the requested locale has no entry",
    )
    translations_dir: Optional[Path] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory with <domain>.<locale>.yml catalog files",
    )
    use_cache: bool = Field(
        default=True,
        alias="I18N_USE_CACHE",
        description="Cache parsed catalogs in the loader",
    )
    preload: bool = Field(
        default=True,
        alias="I18N_PRELOAD",
        description="Load all catalogs when the resolver is created",
    )
