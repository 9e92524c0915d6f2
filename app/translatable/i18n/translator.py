"""Translation service for retrieving and interpolating translated messages.

The Translator serves a canonical translation tree in two modes:

- Dynamic: translate() takes the language and path at call time, runs the
  whole validate -> resolve -> substitute pipeline on every call and returns
  an OperationResult instead of raising.
- Bound: bind(), bind_language() and bind_path() validate whatever is known
  ahead of time once, raising immediately if it is wrong. The returned
  handles then only run the remaining steps per call.

Every entry point goes through Translator._run, which skips the steps whose
inputs arrive pre-validated.
"""

from typing import Any, Iterable, Mapping, Optional, Union

from translatable.i18n.contexts import ContextBinding
from translatable.i18n.errors import LanguageNotFound, ResolutionError
from translatable.i18n.languages import Language, validate
from translatable.i18n.models import Group, Leaf, TranslationPath
from translatable.i18n.resolver import as_path, find_leaf, select_text
from translatable.i18n.templating import Template
from translatable.logging import get_module_logger
from translatable.operations import OperationResult, classify_translation_error

logger = get_module_logger()

LanguageLike = Union[Language, str]
PathLike = Union[TranslationPath, str, Iterable[str]]


class Translator:
    """Resolves translations from an immutable translation tree.

    Attributes:
        tree: Canonical translation tree (root Group).
        fallback_language: Language used when a leaf lacks the requested one.
        strict: Whether unused placeholder values are an error.
    """

    def __init__(
        self,
        tree: Group,
        fallback_language: Optional[Language] = None,
        strict: bool = False,
    ):
        """Initialize Translator.

        Args:
            tree: Merged translation tree.
            fallback_language: Optional fallback language.
            strict: Reject placeholder values the text does not use.
        """
        self.tree = tree
        self.fallback_language = (
            validate(fallback_language) if fallback_language is not None else None
        )
        self.strict = strict
        logger.info(
            "initialized_translator",
            fallback_language=(
                self.fallback_language.value if self.fallback_language else None
            ),
            strict=strict,
        )

    def translate(
        self,
        language: LanguageLike,
        path: PathLike,
        values: Optional[Mapping[str, Any]] = None,
    ) -> OperationResult:
        """Translate with language and path only known at call time.

        Args:
            language: Language code or Language.
            path: Translation path ("common.greeting", segments or TranslationPath).
            values: Placeholder values.

        Returns:
            OperationResult with the translated string as data on success,
            or the classified error.
        """
        return self._attempt(language, path, values)

    def resolve(self, language: LanguageLike, path: PathLike) -> str:
        """Return the raw text at a path without substitution.

        Raises:
            InvalidLanguage: If the language is not in the catalog.
            PathNotFound: If there is no leaf at the path.
            LanguageNotFound: If neither the language nor the fallback has text.
        """
        path = as_path(path)
        return self._select(find_leaf(self.tree, path), validate(language), path)

    def has_message(self, language: LanguageLike, path: PathLike) -> bool:
        """Check if a translation exists for a path in a language.

        The fallback language is not considered.
        """
        try:
            leaf = find_leaf(self.tree, path)
            return leaf.get(validate(language)) is not None
        except ResolutionError:
            return False

    def bind(self, language: LanguageLike, path: PathLike) -> "StaticTranslation":
        """Pre-validate a translation whose language and path are both known.

        Raises:
            InvalidLanguage, PathNotFound, LanguageNotFound, InvalidIdentifier:
                Immediately, since a known-ahead translation must be valid
                before anything is served.
        """
        language = validate(language)
        path = as_path(path)
        return StaticTranslation(self, language, path, self._prepare(language, path))

    def bind_language(self, language: LanguageLike) -> "LanguageBinding":
        """Pre-validate a known language; the path is supplied per call.

        Raises:
            InvalidLanguage: If the language is not in the catalog.
        """
        return LanguageBinding(self, validate(language))

    def bind_path(self, path: PathLike) -> "PathBinding":
        """Pre-resolve a known path; the language is supplied per call.

        When a fallback language is configured, its presence at the path is
        checked here so per-call lookups cannot fail on language.

        Raises:
            PathNotFound: If there is no leaf at the path.
            LanguageNotFound: If the fallback language has no text at the path.
        """
        path = as_path(path)
        leaf = find_leaf(self.tree, path)
        self.check_fallback(leaf, path)
        return PathBinding(self, path, leaf)

    def bind_context(self, context_cls: type) -> "ContextBinding":
        """Pre-resolve every field path of a TranslationContext subclass.

        Raises:
            PathNotFound: For the first field path without a translation.
            LanguageNotFound: If the fallback language is missing for a field.
        """
        return ContextBinding(self, context_cls)

    def check_fallback(self, leaf: Leaf, path: TranslationPath) -> None:
        if self.fallback_language is not None and leaf.get(self.fallback_language) is None:
            raise LanguageNotFound(self.fallback_language, str(path))

    def get_available_languages(self) -> list:
        """Get every language that has at least one translation in the tree."""
        languages = []
        for _, leaf in self.tree.iter_leaves():
            for language in leaf.languages:
                if language not in languages:
                    languages.append(language)
        return sorted(languages, key=lambda language: language.value)

    def _select(self, leaf: Leaf, language: Language, path: TranslationPath) -> str:
        try:
            return select_text(leaf, language, path)
        except LanguageNotFound:
            if self.fallback_language is None or leaf.get(self.fallback_language) is None:
                raise

        logger.debug(
            "used_fallback_translation",
            path=str(path),
            requested_language=language.value,
            fallback_language=self.fallback_language.value,
        )
        return leaf.get(self.fallback_language)

    def _run(
        self,
        language: LanguageLike,
        path: PathLike,
        values: Optional[Mapping[str, Any]],
        leaf: Optional[Leaf] = None,
        template: Optional[Template] = None,
    ) -> str:
        """Single validate -> resolve -> substitute pipeline.

        A pre-built template skips straight to substitution.
        """
        if template is None:
            template = self._prepare(language, path, leaf)
        return template.render(values, strict=self.strict)

    def _prepare(
        self,
        language: LanguageLike,
        path: PathLike,
        leaf: Optional[Leaf] = None,
    ) -> Template:
        """Validate the language, find the text and scan it.

        validate() returns a Language unchanged and a pre-resolved leaf
        skips the tree walk.
        """
        language = validate(language)
        path = as_path(path)
        if leaf is None:
            leaf = find_leaf(self.tree, path)
        return Template(self._select(leaf, language, path))

    def _attempt(
        self,
        language: LanguageLike,
        path: PathLike,
        values: Optional[Mapping[str, Any]],
        leaf: Optional[Leaf] = None,
    ) -> OperationResult:
        try:
            return OperationResult.success(data=self._run(language, path, values, leaf))
        except ResolutionError as e:
            logger.warning(
                "translation_failed",
                language=str(language),
                path=str(path),
                error_code=e.error_code,
                error=str(e),
            )
            return classify_translation_error(e)


class StaticTranslation:
    """Translation whose language and path were validated ahead of time.

    render() cannot fail on language or path. It can only fail if the
    caller omits a placeholder value (or passes unknown ones in strict mode).
    Texts without placeholders are rendered once and the same string is
    returned on every call.
    """

    __slots__ = ("_translator", "language", "path", "template")

    def __init__(
        self,
        translator: Translator,
        language: Language,
        path: TranslationPath,
        template: Template,
    ):
        self._translator = translator
        self.language = language
        self.path = path
        self.template = template

    @property
    def text(self) -> str:
        """Raw text before substitution."""
        return self.template.text

    @property
    def is_constant(self) -> bool:
        return self.template.is_constant

    def render(self, values: Optional[Mapping[str, Any]] = None) -> str:
        """Substitute values and return the translated string.

        Raises:
            MissingValue: If a placeholder has no value.
            UnknownPlaceholder: In strict mode, for unused values.
        """
        return self._translator._run(
            self.language, self.path, values, template=self.template
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"StaticTranslation({self.language.value!r}, {str(self.path)!r})"


class LanguageBinding:
    """Translations in a pre-validated language; paths arrive per call."""

    __slots__ = ("_translator", "language")

    def __init__(self, translator: Translator, language: Language):
        self._translator = translator
        self.language = language

    def translate(
        self,
        path: PathLike,
        values: Optional[Mapping[str, Any]] = None,
    ) -> OperationResult:
        """Translate a path in the bound language.

        Returns:
            OperationResult with the translated string or the classified error.
        """
        return self._translator._attempt(self.language, path, values)


class PathBinding:
    """Translations at a pre-resolved path; languages arrive per call."""

    __slots__ = ("_translator", "path", "leaf")

    def __init__(self, translator: Translator, path: TranslationPath, leaf: Leaf):
        self._translator = translator
        self.path = path
        self.leaf = leaf

    @property
    def languages(self):
        return self.leaf.languages

    def translate(
        self,
        language: LanguageLike,
        values: Optional[Mapping[str, Any]] = None,
    ) -> OperationResult:
        """Translate the bound path into a language.

        Returns:
            OperationResult with the translated string or the classified error.
        """
        return self._translator._attempt(language, self.path, values, leaf=self.leaf)
