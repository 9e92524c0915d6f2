"""Custom exceptions for the translation system.

Two families of errors exist:

- StoreError: raised while loading and merging the translation store. These
  are fatal at startup; no translator can be built from a broken store.
- ResolutionError: raised while resolving a single translation. These are
  recoverable and are returned to callers as OperationResult by the dynamic
  entry points of the Translator.

Every exception keeps the offending origin, path, code or identifier as
attributes so callers can render precise messages.
"""

from typing import Iterable, Optional


class TranslatableError(Exception):
    """Base exception for all translation-related errors.

    Example:
        try:
            translator = create_translator()
        except TranslatableError as e:
            logger.error("translator_unavailable", error=str(e))
    """

    pass


class StoreError(TranslatableError):
    """Base exception for errors found while building the translation store."""

    pass


class ParseError(StoreError):
    """Raised when a file under the store root is not a parseable document.

    Example:
        >>> list(loader.load())
        Traceback (most recent call last):
        ...
        ParseError: Failed to parse 'notes.txt': unsupported file type
    """

    def __init__(self, origin: str, reason: str):
        self.origin = origin
        self.reason = reason
        super().__init__(f"Failed to parse '{origin}': {reason}")


class SchemaViolation(StoreError):
    """Raised when a document breaks the translation tree structure rules."""

    def __init__(self, origin: str, path: str, reason: str):
        self.origin = origin
        self.path = path
        self.reason = reason
        location = f" at '{path}'" if path else ""
        super().__init__(f"Invalid translation structure in '{origin}'{location}: {reason}")


class ConflictError(StoreError):
    """Raised when two sources disagree on the shape of the same path.

    Overlap policies only decide between competing texts; a path that is a
    group in one file and a translation in another always fails.
    """

    def __init__(
        self,
        path: str,
        origin: str,
        previous_origin: Optional[str],
        reason: str,
    ):
        self.path = path
        self.origin = origin
        self.previous_origin = previous_origin
        self.reason = reason
        against = f" (previously defined in '{previous_origin}')" if previous_origin else ""
        super().__init__(f"Conflict at '{path}' in '{origin}'{against}: {reason}")


class ResolutionError(TranslatableError):
    """Base exception for per-call translation failures."""

    error_code = "RESOLUTION_ERROR"


class InvalidLanguage(ResolutionError):
    """Raised when a language code is not in the catalog.

    Example:
        >>> validate("zz")
        Traceback (most recent call last):
        ...
        InvalidLanguage: Invalid language code: 'zz'
    """

    error_code = "INVALID_LANGUAGE"

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Invalid language code: '{code}'")


class PathNotFound(ResolutionError):
    """Raised when no translation exists at a path."""

    error_code = "PATH_NOT_FOUND"

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"The path '{path}' could not be found")


class LanguageNotFound(ResolutionError):
    """Raised when a translation exists at a path but not for a language.

    Distinct from InvalidLanguage: the language is valid, there is just no
    text for it at this path.
    """

    error_code = "LANGUAGE_NOT_FOUND"

    def __init__(self, language, path: str):
        self.language = language
        self.path = path
        super().__init__(
            f"The language '{language}' is not available for the path '{path}'"
        )


class TemplateError(ResolutionError):
    """Base exception for placeholder substitution failures."""

    error_code = "TEMPLATE_ERROR"


class InvalidIdentifier(TemplateError):
    """Raised when a placeholder does not contain a valid identifier."""

    error_code = "INVALID_IDENTIFIER"

    def __init__(self, identifier: str, position: int):
        self.identifier = identifier
        self.position = position
        super().__init__(
            f"Invalid placeholder identifier '{identifier}' at position {position}"
        )


class MissingValue(TemplateError):
    """Raised when a placeholder has no value supplied."""

    error_code = "MISSING_VALUE"

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Missing value for placeholder '{identifier}'")


class UnknownPlaceholder(TemplateError):
    """Raised in strict mode when supplied values are not used by the text."""

    error_code = "UNKNOWN_PLACEHOLDER"

    def __init__(self, identifiers: Iterable[str]):
        self.identifiers = tuple(identifiers)
        names = ", ".join(f"'{name}'" for name in self.identifiers)
        super().__init__(f"Values supplied for unknown placeholders: {names}")
