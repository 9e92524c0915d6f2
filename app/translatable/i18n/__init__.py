"""i18n system - translation store loading, merging and resolution.

Loads locale-keyed text templates from a directory of TOML/YAML files,
merges them into one immutable tree, and resolves translations with
placeholder substitution.

Main components:
- languages: Language catalog (ISO 639-1) and validate()
- models: Group, Leaf, SourceUnit, TranslationPath
- loader: TranslationLoader and FileSystemTranslationLoader
- merger: TranslationMerger with SeekMode and TranslationOverlap
- resolver: find_leaf() and resolve()
- templating: Template and substitute()
- translator: Translator with dynamic and pre-validated entry points
- contexts: TranslationContext for groups of translations
- factory: create_translator() from settings
"""

from translatable.i18n.errors import (
    ConflictError,
    InvalidIdentifier,
    InvalidLanguage,
    LanguageNotFound,
    MissingValue,
    ParseError,
    PathNotFound,
    ResolutionError,
    SchemaViolation,
    StoreError,
    TemplateError,
    TranslatableError,
    UnknownPlaceholder,
)
from translatable.i18n.languages import Language, validate
from translatable.i18n.models import Group, Leaf, SourceUnit, TranslationPath
from translatable.i18n.loader import FileSystemTranslationLoader, TranslationLoader
from translatable.i18n.merger import (
    SeekMode,
    TranslationMerger,
    TranslationOverlap,
    merge,
)
from translatable.i18n.resolver import find_leaf, resolve
from translatable.i18n.templating import PlaceholderToken, Template, substitute
from translatable.i18n.contexts import ContextBinding, TranslationContext, context_path
from translatable.i18n.translator import (
    LanguageBinding,
    PathBinding,
    StaticTranslation,
    Translator,
)
from translatable.i18n.factory import create_translator

__all__ = [
    "Language",
    "validate",
    "Group",
    "Leaf",
    "SourceUnit",
    "TranslationPath",
    "TranslationLoader",
    "FileSystemTranslationLoader",
    "SeekMode",
    "TranslationOverlap",
    "TranslationMerger",
    "merge",
    "find_leaf",
    "resolve",
    "PlaceholderToken",
    "Template",
    "substitute",
    "TranslationContext",
    "ContextBinding",
    "context_path",
    "Translator",
    "StaticTranslation",
    "LanguageBinding",
    "PathBinding",
    "create_translator",
    "TranslatableError",
    "StoreError",
    "ParseError",
    "SchemaViolation",
    "ConflictError",
    "ResolutionError",
    "InvalidLanguage",
    "PathNotFound",
    "LanguageNotFound",
    "TemplateError",
    "InvalidIdentifier",
    "MissingValue",
    "UnknownPlaceholder",
]
