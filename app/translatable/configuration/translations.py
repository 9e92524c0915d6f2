"""Translation store settings."""

from pathlib import Path
from typing import Optional, Tuple, Type

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from translatable.configuration.base import InfrastructureSettings
from translatable.i18n.errors import InvalidLanguage
from translatable.i18n.languages import Language, validate
from translatable.i18n.merger import SeekMode, TranslationOverlap


class TranslationSettings(InfrastructureSettings):
    """Translation store configuration.

    Values are read, by priority, from constructor arguments, environment
    variables, the .env file, and a translatable.toml file in the working
    directory. Missing values fall back to the defaults below.

    Environment Variables / translatable.toml keys:
        TRANSLATABLE_LOCALES_PATH / locales_path: Store root (default: ./translations)
        TRANSLATABLE_SEEK_MODE / seek_mode: alphabetical or unalphabetical
            (default: alphabetical)
        TRANSLATABLE_OVERLAP / overlap: overwrite or ignore (default: ignore)
        TRANSLATABLE_FALLBACK_LANGUAGE / fallback_language: ISO 639-1 code
            used when a translation lacks the requested language (default: none)
        TRANSLATABLE_MAX_WORKERS / max_workers: Threads used to parse files
            (default: 1)

    Example:
        ```toml
        # translatable.toml
        locales_path = "./locales"
        seek_mode = "unalphabetical"
        overlap = "overwrite"
        fallback_language = "en"
        ```
    """

    model_config = SettingsConfigDict(toml_file="translatable.toml")

    locales_path: Path = Field(
        default=Path("./translations"),
        validation_alias=AliasChoices("TRANSLATABLE_LOCALES_PATH", "locales_path"),
        description="Root directory of the translation store",
    )
    seek_mode: SeekMode = Field(
        default=SeekMode.ALPHABETICAL,
        validation_alias=AliasChoices("TRANSLATABLE_SEEK_MODE", "seek_mode"),
        description="Order in which translation files are merged",
    )
    overlap: TranslationOverlap = Field(
        default=TranslationOverlap.IGNORE,
        validation_alias=AliasChoices("TRANSLATABLE_OVERLAP", "overlap"),
        description="Policy for texts defined by more than one file",
    )
    fallback_language: Optional[Language] = Field(
        default=None,
        validation_alias=AliasChoices(
            "TRANSLATABLE_FALLBACK_LANGUAGE", "fallback_language"
        ),
        description="Language used when a translation lacks the requested one",
    )
    max_workers: int = Field(
        default=1,
        ge=1,
        validation_alias=AliasChoices("TRANSLATABLE_MAX_WORKERS", "max_workers"),
        description="Threads used to parse translation files",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @field_validator("seek_mode", mode="before")
    @classmethod
    def parse_seek_mode(cls, value):
        if isinstance(value, str):
            return SeekMode.from_string(value)
        return value

    @field_validator("overlap", mode="before")
    @classmethod
    def parse_overlap(cls, value):
        if isinstance(value, str):
            return TranslationOverlap.from_string(value)
        return value

    @field_validator("fallback_language", mode="before")
    @classmethod
    def parse_fallback_language(cls, value):
        if value is None or value == "":
            return None
        try:
            return validate(value)
        except InvalidLanguage as e:
            raise ValueError(str(e)) from e
