"""Exceptions raised by the i18n package.

Message lookups never raise; these cover malformed input at the edges
(locale tags, catalog files).
"""


class I18nError(Exception):
    """Base exception for all i18n errors."""

    pass


class InvalidLocaleError(I18nError, ValueError):
    """Raised when a locale tag cannot be parsed.

    Example:
        >>> Locale.from_string("not a locale")
        Traceback (most recent call last):
        ...
        InvalidLocaleError: Unsupported locale: not a locale
    """

    pass


class CatalogLoadError(I18nError):
    """Raised when a catalog file exists but cannot be parsed."""

    pass
