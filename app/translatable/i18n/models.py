"""Translation models for i18n system.

Defines the translation tree (Group and Leaf nodes), the per-file SourceUnit
produced by loaders, and TranslationPath used to address leaves.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple, Union

from translatable.i18n.languages import Language

PATH_SEPARATOR = "."


@dataclass(frozen=True)
class Leaf:
    """Tree node mapping languages to raw translation texts.

    Attributes:
        translations: Read-only mapping of Language to text.
    """

    translations: Mapping[Language, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(
            self, "translations", MappingProxyType(dict(self.translations))
        )

    def get(self, language: Language) -> Optional[str]:
        return self.translations.get(language)

    @property
    def languages(self) -> Tuple[Language, ...]:
        return tuple(self.translations)


@dataclass(frozen=True)
class Group:
    """Tree node mapping keys to child nodes.

    Children are either all Group or all Leaf. The loader and merger enforce
    this before a Group is built; the constructor only freezes the mapping.

    Attributes:
        children: Read-only mapping of key to TranslationNode.
    """

    children: Mapping[str, "TranslationNode"] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    def get(self, key: str) -> Optional["TranslationNode"]:
        return self.children.get(key)

    @property
    def child_kind(self) -> Optional[type]:
        """Type shared by all children, or None for an empty group."""
        for child in self.children.values():
            return type(child)
        return None

    def iter_leaves(
        self, prefix: Tuple[str, ...] = ()
    ) -> Iterator[Tuple["TranslationPath", Leaf]]:
        """Yield every leaf below this group with its full path."""
        for key, child in self.children.items():
            segments = prefix + (key,)
            if isinstance(child, Leaf):
                yield TranslationPath(segments), child
            else:
                yield from child.iter_leaves(segments)


TranslationNode = Union[Group, Leaf]


@dataclass(frozen=True)
class SourceUnit:
    """One parsed translation file.

    Attributes:
        origin: File path relative to the store root, "/" separated.
        root: Root Group of the file.
    """

    origin: str
    root: Group


@dataclass(frozen=True)
class TranslationPath:
    """Non-empty sequence of keys addressing a leaf in the translation tree.

    Paths are written with dots ("common.greeting"); "::" is accepted as a
    separator too ("common::greeting").
    """

    segments: Tuple[str, ...]

    def __post_init__(self):
        segments = tuple(self.segments)
        if not segments:
            raise ValueError("Translation path must have at least one segment")
        for segment in segments:
            if not isinstance(segment, str) or not segment:
                raise ValueError(f"Invalid translation path segment: {segment!r}")
        object.__setattr__(self, "segments", segments)

    def __str__(self) -> str:
        return PATH_SEPARATOR.join(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self.segments)

    def join(self, other: "TranslationPath") -> "TranslationPath":
        """Append another path to this one."""
        return TranslationPath(self.segments + other.segments)

    @classmethod
    def from_string(cls, path: str) -> "TranslationPath":
        """Create a TranslationPath from "a.b.c" or "a::b::c".

        Raises:
            ValueError: If the path is empty or has empty segments.
        """
        return cls(tuple(path.replace("::", PATH_SEPARATOR).split(PATH_SEPARATOR)))

    @classmethod
    def of(cls, path: Union["TranslationPath", str, Iterable[str]]) -> "TranslationPath":
        """Coerce a string, a sequence of segments or a path into a path."""
        if isinstance(path, TranslationPath):
            return path
        if isinstance(path, str):
            return cls.from_string(path)
        return cls(tuple(path))
