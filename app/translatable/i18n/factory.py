"""Factory functions for creating i18n components.

Builds a Translator from configuration: load every file of the store,
merge them into the canonical tree, and wrap the tree in a Translator.
"""

from pathlib import Path
from typing import Optional

import structlog
from translatable.configuration.settings import Settings, get_settings
from translatable.i18n.errors import StoreError
from translatable.i18n.languages import Language
from translatable.i18n.loader import FileSystemTranslationLoader, TranslationLoader
from translatable.i18n.merger import SeekMode, TranslationMerger, TranslationOverlap
from translatable.i18n.translator import Translator

logger = structlog.get_logger()


def create_translator(
    settings: Optional[Settings] = None,
    translations_dir: Optional[Path] = None,
    seek_mode: Optional[SeekMode] = None,
    overlap: Optional[TranslationOverlap] = None,
    fallback_language: Optional[Language] = None,
    loader: Optional[TranslationLoader] = None,
    strict: bool = False,
) -> Translator:
    """Create and configure a Translator instance.

    Explicit arguments take precedence over the translation settings.

    Args:
        settings: Settings to read defaults from (default: get_settings()).
        translations_dir: Store root (default: settings locales_path).
        seek_mode: Merge order (default: settings seek_mode).
        overlap: Overlap policy (default: settings overlap).
        fallback_language: Fallback language (default: settings fallback_language).
        loader: Custom loader; replaces the file system loader.
        strict: Reject placeholder values a text does not use.

    Returns:
        Translator: Translator serving the merged tree.

    Raises:
        ValueError: If the translations directory does not exist.
        ParseError, SchemaViolation, ConflictError: If the store is invalid.

    Usage:
        # Use translatable.toml / TRANSLATABLE_* environment variables
        translator = create_translator()

        # Custom store
        translator = create_translator(
            translations_dir=Path("./locales"),
            overlap=TranslationOverlap.OVERWRITE,
        )
    """
    config = (settings or get_settings()).translations

    if loader is None:
        loader = FileSystemTranslationLoader(
            translations_dir=translations_dir or config.locales_path,
            max_workers=config.max_workers,
        )

    merger = TranslationMerger(
        seek_mode=seek_mode or config.seek_mode,
        overlap=overlap or config.overlap,
    )

    try:
        tree = merger.merge(loader.load())
    except StoreError as e:
        logger.error("translation_store_invalid", error=str(e))
        raise

    translator = Translator(
        tree,
        fallback_language=fallback_language or config.fallback_language,
        strict=strict,
    )

    logger.info(
        "translator_created",
        translations_dir=str(getattr(loader, "translations_dir", "")),
        translation_count=sum(1 for _ in tree.iter_leaves()),
        language_count=len(translator.get_available_languages()),
    )

    return translator
