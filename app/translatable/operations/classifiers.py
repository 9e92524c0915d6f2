"""Error classifiers for translation exceptions.

Converts ResolutionError exceptions raised by the translation pipeline
into standardized OperationResult objects, so every dynamic entry point
reports failures the same way.

Usage:
    from translatable.operations.classifiers import classify_translation_error

    try:
        text = pipeline(...)
    except ResolutionError as exc:
        return classify_translation_error(exc)
"""

from translatable.i18n.errors import (
    LanguageNotFound,
    PathNotFound,
    ResolutionError,
)
from translatable.operations.result import OperationResult


def classify_translation_error(exc: ResolutionError) -> OperationResult:
    """Classify a translation error into an OperationResult.

    Mapping:
    - PathNotFound, LanguageNotFound -> NOT_FOUND
    - InvalidLanguage, InvalidIdentifier, MissingValue,
      UnknownPlaceholder -> PERMANENT_ERROR

    The error_code is taken from the exception class and the exception
    itself is kept on the result.

    Args:
        exc: Exception raised while resolving a translation

    Returns:
        OperationResult with appropriate status, message and error_code
    """
    if isinstance(exc, (PathNotFound, LanguageNotFound)):
        return OperationResult.not_found(str(exc), error_code=exc.error_code, error=exc)

    return OperationResult.permanent_error(
        str(exc), error_code=exc.error_code, error=exc
    )
