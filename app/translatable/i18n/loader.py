"""Translation loading interface and implementations.

Defines the contract for loading translation sources and provides a
file system loader that reads TOML and YAML documents.

Document format (TOML shown, YAML is equivalent):

    [common.greeting]
    en = "Hello {name}!"
    es = "¡Hola {name}!"

Every table holds either only nested tables (a group) or only
language -> text pairs (a leaf). The document root is always a group.
"""

import tomllib
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import yaml

from translatable.i18n.errors import InvalidLanguage, ParseError, SchemaViolation
from translatable.i18n.languages import Language, validate
from translatable.i18n.models import (
    PATH_SEPARATOR,
    Group,
    Leaf,
    SourceUnit,
    TranslationNode,
)
from translatable.logging import get_module_logger

logger = get_module_logger()

TOML_SUFFIXES = (".toml",)
YAML_SUFFIXES = (".yml", ".yaml")


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations produce one SourceUnit per source. The order of the
    produced units carries no meaning; merge ordering is applied afterwards.
    """

    @abstractmethod
    def load(self) -> Iterator[SourceUnit]:
        """Load every translation source.

        Returns:
            Iterator of SourceUnit, in no particular order.

        Raises:
            ParseError: If a source is not a parseable document.
            SchemaViolation: If a source breaks the tree structure rules.
        """
        pass


def parse_document(path: Path, origin: str) -> Any:
    """Parse a single file into a generic tree.

    Args:
        path: File to read.
        origin: Name used in error messages.

    Returns:
        The parsed document.

    Raises:
        ParseError: For unsupported suffixes, unreadable files, empty YAML
            documents or syntax errors.
    """
    suffix = path.suffix.lower()
    if suffix not in TOML_SUFFIXES + YAML_SUFFIXES:
        raise ParseError(origin, f"unsupported file type '{suffix or path.name}'")

    try:
        if suffix in TOML_SUFFIXES:
            with open(path, "rb") as f:
                return tomllib.load(f)

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except tomllib.TOMLDecodeError as e:
        logger.error("toml_parse_error", file=origin, error=str(e))
        raise ParseError(origin, str(e)) from e
    except yaml.YAMLError as e:
        logger.error("yaml_parse_error", file=origin, error=str(e))
        raise ParseError(origin, str(e)) from e
    except UnicodeDecodeError as e:
        raise ParseError(origin, f"file is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ParseError(origin, f"could not read file: {e}") from e

    if data is None:
        raise ParseError(origin, "document is empty")
    return data


def build_tree(data: Any, origin: str) -> Group:
    """Convert a parsed document into its root Group.

    Raises:
        SchemaViolation: If the document is not a table of tables.
    """
    if not isinstance(data, dict):
        raise SchemaViolation(
            origin, "", f"expected a table at the root, found {type(data).__name__}"
        )

    node = build_node(data, origin, ())
    if isinstance(node, Leaf):
        raise SchemaViolation(
            origin, "", "the document root must contain tables, not translations"
        )
    return node


def build_node(data: Dict, origin: str, path: Tuple[str, ...]) -> TranslationNode:
    """Convert a table into a Group or a Leaf, enforcing the structure rules.

    Args:
        data: Parsed table.
        origin: Source name for error messages.
        path: Keys leading to this table.

    Returns:
        Leaf if every value is a text, Group if every value is a table.
        An empty table is an empty Group.

    Raises:
        SchemaViolation: If the table mixes tables and texts, mixes empty
            tables with translation tables, contains values that are
            neither, or a leaf key is not a catalog language.
    """
    for key, value in data.items():
        if not isinstance(value, (dict, str)):
            raise SchemaViolation(
                origin,
                PATH_SEPARATOR.join(path + (str(key),)),
                f"expected a table or a text, found {type(value).__name__}",
            )

    has_tables = any(isinstance(value, dict) for value in data.values())
    has_texts = any(isinstance(value, str) for value in data.values())

    if has_tables and has_texts:
        raise SchemaViolation(
            origin,
            PATH_SEPARATOR.join(path),
            "a table cannot mix nested tables and translations",
        )

    if has_texts:
        return build_leaf(data, origin, path)

    children = {
        str(key): build_node(value, origin, path + (str(key),))
        for key, value in data.items()
    }

    # An empty table is a group, so a sibling leaf makes the parent mixed.
    kinds = {type(child) for child in children.values()}
    if len(kinds) > 1:
        raise SchemaViolation(
            origin,
            PATH_SEPARATOR.join(path),
            "a table cannot mix nested groups and translations",
        )

    return Group(children)


def build_leaf(data: Dict, origin: str, path: Tuple[str, ...]) -> Leaf:
    """Convert a language -> text table into a Leaf.

    Keys that are not catalog languages are rejected rather than ignored.

    Raises:
        SchemaViolation: If a key is not a catalog language or two keys
            normalize to the same language.
    """
    translations: Dict[Language, str] = {}
    for key, text in data.items():
        location = PATH_SEPARATOR.join(path + (str(key),))
        try:
            language = validate(key)
        except InvalidLanguage as e:
            raise SchemaViolation(
                origin, location, f"'{key}' is not a recognized language identifier"
            ) from e
        if language in translations:
            raise SchemaViolation(
                origin, location, f"language '{language}' is defined twice"
            )
        translations[language] = text
    return Leaf(translations)


class FileSystemTranslationLoader(TranslationLoader):
    """Loader for a directory tree of TOML and YAML translation files.

    Every file below translations_dir (recursively) must be a translation
    document. Hidden files and directories (starting with ".") are skipped.

    Attributes:
        translations_dir: Root directory of the store.
        use_cache: Whether to keep the units of the last load in memory.
        max_workers: Threads used to parse files; 1 parses sequentially.
        cache: Units from the last load when use_cache is enabled.
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = False,
        max_workers: int = 1,
    ):
        """Initialize file system translation loader.

        Args:
            translations_dir: Path to the translation store root.
            use_cache: Whether to cache loaded units in memory.
            max_workers: Number of threads used to parse files.

        Raises:
            ValueError: If translations_dir is not a directory.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.max_workers = max(1, max_workers)
        self.cache: Optional[List[SourceUnit]] = None

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_translation_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
            max_workers=self.max_workers,
        )

    def iter_files(self) -> Iterator[Tuple[str, Path]]:
        """Yield (origin, path) for every file in the store.

        The origin is the path relative to translations_dir with "/"
        separators.
        """
        for path in self.translations_dir.rglob("*"):
            relative = path.relative_to(self.translations_dir)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if path.is_file():
                yield relative.as_posix(), path

    def iter_documents(self) -> Iterator[Tuple[str, Any]]:
        """Lazily yield (origin, parsed document) for every file in the store.

        Raises:
            ParseError: If a file cannot be parsed.
        """
        for origin, path in self.iter_files():
            yield origin, parse_document(path, origin)

    def load(self) -> Iterator[SourceUnit]:
        """Load every file of the store as a SourceUnit.

        Returns:
            Iterator of SourceUnit in enumeration order (not meaningful).

        Raises:
            ParseError: If a file cannot be parsed.
            SchemaViolation: If a file breaks the structure rules.
        """
        if self.use_cache and self.cache is not None:
            logger.info("loaded_from_cache", unit_count=len(self.cache))
            return iter(self.cache)

        if self.max_workers > 1:
            units = self._load_parallel()
        else:
            units = [
                SourceUnit(origin=origin, root=build_tree(data, origin))
                for origin, data in self.iter_documents()
            ]

        logger.info(
            "loaded_translation_files",
            translations_dir=str(self.translations_dir),
            file_count=len(units),
        )

        if self.use_cache:
            self.cache = units

        return iter(units)

    def _load_parallel(self) -> List[SourceUnit]:
        def load_file(entry: Tuple[str, Path]) -> SourceUnit:
            origin, path = entry
            return SourceUnit(
                origin=origin, root=build_tree(parse_document(path, origin), origin)
            )

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            return list(executor.map(load_file, list(self.iter_files())))

    def clear_cache(self) -> None:
        """Clear cached units."""
        self.cache = None
        logger.info("cleared_translation_cache")
