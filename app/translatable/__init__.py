"""translatable - locale-keyed translation store with placeholder substitution.

Example:
    from translatable import create_translator

    translator = create_translator()

    # Language and path known ahead of time: validated once, raises early
    greeting = translator.bind("es", "common.greeting")
    greeting.render({"name": "john"})  # "¡Hola john!"

    # Language only known at call time: validated on every call
    result = translator.translate(user_language, "common.greeting", {"name": "john"})
    if result.is_success:
        print(result.data)
"""

from translatable.i18n import (
    Language,
    SeekMode,
    TranslatableError,
    TranslationContext,
    TranslationOverlap,
    TranslationPath,
    Translator,
    context_path,
    create_translator,
    substitute,
    validate,
)
from translatable.operations import OperationResult, OperationStatus

__all__ = [
    "Language",
    "SeekMode",
    "TranslatableError",
    "TranslationContext",
    "TranslationOverlap",
    "TranslationPath",
    "Translator",
    "context_path",
    "create_translator",
    "substitute",
    "validate",
    "OperationResult",
    "OperationStatus",
]
