"""Lookup of translation texts in a translation tree."""

from typing import Iterable, Union

from translatable.i18n.errors import LanguageNotFound, PathNotFound
from translatable.i18n.languages import Language
from translatable.i18n.models import PATH_SEPARATOR, Group, Leaf, TranslationPath

PathLike = Union[TranslationPath, str, Iterable[str]]


def as_path(path: PathLike) -> TranslationPath:
    """Coerce caller input into a TranslationPath.

    Raises:
        PathNotFound: If the path is empty or has empty segments.
    """
    try:
        return TranslationPath.of(path)
    except (TypeError, ValueError) as e:
        if isinstance(path, (list, tuple)):
            shown = PATH_SEPARATOR.join(map(str, path))
        else:
            shown = str(path)
        raise PathNotFound(shown) from e


def find_leaf(tree: Group, path: PathLike) -> Leaf:
    """Walk a path down to its leaf.

    Args:
        tree: Root of the translation tree.
        path: Path to the leaf.

    Returns:
        The Leaf at the path.

    Raises:
        PathNotFound: If a key is missing, a leaf is reached before the path
            ends, the path ends on a group, or the path is empty.
    """
    path = as_path(path)

    node = tree
    for segment in path.segments:
        if not isinstance(node, Group):
            raise PathNotFound(str(path))
        node = node.get(segment)
        if node is None:
            raise PathNotFound(str(path))

    if not isinstance(node, Leaf):
        raise PathNotFound(str(path))
    return node


def select_text(leaf: Leaf, language: Language, path: TranslationPath) -> str:
    """Get the text of a leaf for a language.

    Raises:
        LanguageNotFound: If the leaf has no text for the language.
    """
    text = leaf.get(language)
    if text is None:
        raise LanguageNotFound(language, str(path))
    return text


def resolve(tree: Group, path: PathLike, language: Language) -> str:
    """Resolve the raw, unsubstituted text at a path for a language.

    Example:
        >>> resolve(tree, ["common", "greeting"], Language.ES)
        '¡Hola {name}!'

    Raises:
        PathNotFound: If there is no leaf at the path.
        LanguageNotFound: If the leaf has no text for the language.
    """
    path = as_path(path)
    return select_text(find_leaf(tree, path), language, path)
