"""Translation contexts: groups of translations loaded together.

A context is a class whose str-annotated fields name translations:

    class Greetings(TranslationContext, base_path="greetings"):
        formal: str
        informal: str = context_path("casual.informal")

    binding = translator.bind_context(Greetings)
    result = binding.load("es", {"user": "John"})
    result.data.formal  # text at greetings.formal

Field paths default to the field name and are appended to base_path.
Every path is resolved once when the context is bound.
"""

import inspect
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from translatable.i18n.errors import ResolutionError
from translatable.i18n.languages import validate
from translatable.i18n.models import Leaf, TranslationPath
from translatable.i18n.resolver import find_leaf
from translatable.logging import get_module_logger
from translatable.operations import OperationResult, classify_translation_error

logger = get_module_logger()


@dataclass(frozen=True)
class ContextPath:
    """Marker overriding the sub-path of a context field."""

    path: TranslationPath


def context_path(path: str) -> Any:
    """Override the path of a context field, relative to the base path."""
    return ContextPath(TranslationPath.from_string(path))


class TranslationContext:
    """Base class for declarative translation contexts.

    Subclasses pass base_path in the class statement and declare str
    fields. The resolved paths are kept in __translation_paths__.

    Subclassing a context adds fields to those of its parents. A subclass
    without base_path inherits the base path of its parent.
    """

    __translation_paths__: Dict[str, TranslationPath] = {}
    __translation_base__: Optional[TranslationPath] = None

    def __init_subclass__(cls, base_path: Optional[str] = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if base_path:
            base = TranslationPath.of(base_path)
        else:
            base = getattr(cls, "__translation_base__", None)
        cls.__translation_base__ = base

        # Inherited fields keep the paths their own class resolved.
        paths: Dict[str, TranslationPath] = {}
        for parent in reversed(cls.__bases__):
            paths.update(getattr(parent, "__translation_paths__", {}))

        for name, annotation in inspect.get_annotations(cls).items():
            if name.startswith("_"):
                continue
            if annotation not in (str, "str"):
                raise TypeError(
                    f"Field '{name}' of {cls.__name__} must be annotated as str"
                )

            override = cls.__dict__.get(name)
            if isinstance(override, ContextPath):
                field_path = override.path
                delattr(cls, name)
            else:
                field_path = TranslationPath((name,))

            paths[name] = base.join(field_path) if base else field_path

        cls.__translation_paths__ = paths

    def __init__(self, **translations: str):
        missing = set(self.__translation_paths__) - set(translations)
        if missing:
            raise TypeError(f"Missing translations for fields: {sorted(missing)}")
        for name in self.__translation_paths__:
            setattr(self, name, translations[name])

    def as_dict(self) -> Dict[str, str]:
        return {name: getattr(self, name) for name in self.__translation_paths__}

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self.as_dict().items())
        return f"{type(self).__name__}({fields})"


class ContextBinding:
    """A TranslationContext whose paths were resolved against a translator.

    Attributes:
        context_cls: The bound TranslationContext subclass.
        fields: Field name -> (path, leaf) resolved at bind time.
    """

    def __init__(self, translator, context_cls: type):
        """Resolve every field path of context_cls.

        Raises:
            TypeError: If context_cls is not a TranslationContext subclass.
            PathNotFound: For the first field path without a translation.
            LanguageNotFound: If the fallback language is missing for a field.
        """
        if not (
            isinstance(context_cls, type) and issubclass(context_cls, TranslationContext)
        ):
            raise TypeError(f"{context_cls!r} is not a TranslationContext subclass")

        self._translator = translator
        self.context_cls = context_cls
        self.fields: Dict[str, Tuple[TranslationPath, Leaf]] = {}
        for name, path in context_cls.__translation_paths__.items():
            leaf = find_leaf(translator.tree, path)
            translator.check_fallback(leaf, path)
            self.fields[name] = (path, leaf)

    def load(
        self,
        language,
        values: Optional[Mapping[str, Any]] = None,
    ) -> OperationResult:
        """Translate every field of the context into a language.

        The same values are offered to every field; values a field does not
        use are ignored, even on a strict translator.

        Returns:
            OperationResult whose data is a context instance.
        """
        try:
            language = validate(language)
            translations = {
                name: self._translator._prepare(language, path, leaf).render(values)
                for name, (path, leaf) in self.fields.items()
            }
        except ResolutionError as e:
            logger.warning(
                "translation_failed",
                language=str(language),
                context=self.context_cls.__name__,
                error_code=e.error_code,
                error=str(e),
            )
            return classify_translation_error(e)
        return OperationResult.success(data=self.context_cls(**translations))
