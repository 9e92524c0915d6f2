"""translatable configuration settings - main aggregator."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from translatable.configuration.observability import LoggingSettings
from translatable.configuration.translations import TranslationSettings


class Settings(BaseSettings):
    """translatable configuration settings - main aggregator.

    Aggregates the domain-specific settings into a single configuration
    object:

    - **logging**: Log level and output format
    - **translations**: Translation store location and merge policies

    Example:
        ```python
        from translatable.configuration.settings import get_settings

        settings = get_settings()

        translator = create_translator(settings=settings)
        if settings.translations.fallback_language:
            ...
        ```
    """

    logging: LoggingSettings
    translations: TranslationSettings

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "logging": LoggingSettings,
            "translations": TranslationSettings,
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


@lru_cache
def get_settings() -> Settings:
    """
    Get process-wide settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Tests that change the environment should call get_settings.cache_clear().

    Returns:
        Settings: Cached settings instance loaded from environment and
        translatable.toml.
    """
    return Settings()
