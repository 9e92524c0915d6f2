"""Logging infrastructure settings."""

from pydantic import Field

from translatable.configuration.base import InfrastructureSettings


class LoggingSettings(InfrastructureSettings):
    """Logging configuration.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: Deployment environment; "prod" or "production" switches
            logs to JSON output

    Example:
        ```python
        from translatable.configuration import LoggingSettings

        logging_settings = LoggingSettings()
        if logging_settings.is_production:
            ...
        ```
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    ENVIRONMENT: str = Field(
        default="development",
        description="Deployment environment name",
    )

    @property
    def is_production(self) -> bool:
        """Check whether logs should be rendered for production (JSON)."""
        return self.ENVIRONMENT.lower() in ("prod", "production")
