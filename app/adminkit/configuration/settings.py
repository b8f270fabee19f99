"""adminkit configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from adminkit.configuration.i18n import I18nSettings


class Settings(BaseSettings):
    """adminkit configuration settings - main aggregator.

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        LOG_FORMAT: Log output format: console, json, or auto (json in production)

    Example:
        ```python
        from adminkit.configuration import settings

        if settings.is_production:
            ...
        locale = settings.i18n.default_locale
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "auto"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
