"""Configuration module - public API.

This module provides centralized configuration management for translatable
using Pydantic BaseSettings.

Exports:
    InfrastructureSettings: Base class for environment-driven settings
    LoggingSettings: Logging level and output format settings

The translation store settings and the Settings aggregator depend on the
i18n package and live in their own modules:

Example:
    ```python
    from translatable.configuration.settings import get_settings

    settings = get_settings()

    locales_path = settings.translations.locales_path
    overlap = settings.translations.overlap

    if settings.logging.is_production:
        # Production-specific logic...
    ```
"""

from translatable.configuration.base import InfrastructureSettings
from translatable.configuration.observability import LoggingSettings

__all__ = ["InfrastructureSettings", "LoggingSettings"]
