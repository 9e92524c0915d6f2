"""Merging of per-file translation trees into the canonical tree.

Units are folded one after the other into an accumulator. The seek mode
decides the folding order and the overlap policy decides which text wins
when two units define the same language at the same path.
"""

from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from translatable.i18n.errors import ConflictError
from translatable.i18n.languages import Language
from translatable.i18n.models import PATH_SEPARATOR, Group, Leaf, SourceUnit
from translatable.logging import get_module_logger

logger = get_module_logger()


class SeekMode(str, Enum):
    """Order in which source files are folded into the tree."""

    ALPHABETICAL = "alphabetical"
    UNALPHABETICAL = "unalphabetical"

    @classmethod
    def from_string(cls, value: str) -> "SeekMode":
        """Parse a seek mode case-insensitively.

        Raises:
            ValueError: If the value is not a seek mode.
        """
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise ValueError(f"Unsupported seek mode: {value}") from e


class TranslationOverlap(str, Enum):
    """Policy for a text defined by more than one source file."""

    OVERWRITE = "overwrite"
    IGNORE = "ignore"

    @classmethod
    def from_string(cls, value: str) -> "TranslationOverlap":
        """Parse an overlap policy case-insensitively.

        Raises:
            ValueError: If the value is not an overlap policy.
        """
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise ValueError(f"Unsupported translation overlap: {value}") from e


def order_units(
    units: Iterable[SourceUnit],
    seek_mode: SeekMode = SeekMode.ALPHABETICAL,
) -> List[SourceUnit]:
    """Sort units by origin for folding.

    Units with the same origin keep their enumeration order. Unalphabetical
    order is the exact reverse of the alphabetical order.
    """
    indexed = sorted(enumerate(units), key=lambda item: (item[1].origin, item[0]))
    ordered = [unit for _, unit in indexed]
    if seek_mode == SeekMode.UNALPHABETICAL:
        ordered.reverse()
    return ordered


class _Accumulator:
    """Mutable mirror of the tree while units are folded in."""

    __slots__ = ("children", "texts", "origins", "is_leaf")

    def __init__(self, is_leaf: bool, origin: str):
        self.is_leaf = is_leaf
        self.children: Dict[str, "_Accumulator"] = {}
        self.texts: Dict[Language, str] = {}
        # First origin that shaped this node, or each text's origin for leaves.
        self.origins: Dict[Optional[Language], str] = {None: origin}

    def freeze(self):
        if self.is_leaf:
            return Leaf(self.texts)
        return Group({key: child.freeze() for key, child in self.children.items()})


class TranslationMerger:
    """Folds SourceUnits into one immutable tree.

    Attributes:
        seek_mode: Folding order.
        overlap: Policy for repeated texts.
    """

    def __init__(
        self,
        seek_mode: SeekMode = SeekMode.ALPHABETICAL,
        overlap: TranslationOverlap = TranslationOverlap.IGNORE,
    ):
        self.seek_mode = seek_mode
        self.overlap = overlap
        self.overlap_count = 0

    def merge(self, units: Iterable[SourceUnit]) -> Group:
        """Merge units into the canonical tree.

        Args:
            units: Parsed source files in any order.

        Returns:
            Root Group of the merged tree.

        Raises:
            ConflictError: If a path is a group in one unit and a leaf in
                another, or a group would mix groups and leaves.
        """
        ordered = order_units(units, self.seek_mode)
        root = _Accumulator(is_leaf=False, origin="")
        self.overlap_count = 0

        for unit in ordered:
            self._fold_group(root, unit.root, unit.origin, ())

        tree = root.freeze()
        logger.info(
            "translations_merged",
            unit_count=len(ordered),
            seek_mode=self.seek_mode.value,
            overlap=self.overlap.value,
            overlap_count=self.overlap_count,
        )
        return tree

    def _fold_group(
        self,
        target: _Accumulator,
        group: Group,
        origin: str,
        path: Tuple[str, ...],
    ) -> None:
        for key, node in group.children.items():
            child_path = path + (key,)
            is_leaf = isinstance(node, Leaf)
            existing = target.children.get(key)

            if existing is None:
                self._check_sibling_kind(target, is_leaf, origin, child_path)
                existing = _Accumulator(is_leaf=is_leaf, origin=origin)
                target.children[key] = existing
            elif existing.is_leaf != is_leaf:
                raise ConflictError(
                    PATH_SEPARATOR.join(child_path),
                    origin,
                    existing.origins[None],
                    "a path cannot be both a group and a translation",
                )

            if is_leaf:
                self._fold_leaf(existing, node, origin, child_path)
            else:
                self._fold_group(existing, node, origin, child_path)

    @staticmethod
    def _check_sibling_kind(
        target: _Accumulator,
        is_leaf: bool,
        origin: str,
        path: Tuple[str, ...],
    ) -> None:
        # Siblings are already uniform, so the first one stands for all.
        sibling = next(iter(target.children.values()), None)
        if sibling is not None and sibling.is_leaf != is_leaf:
            raise ConflictError(
                PATH_SEPARATOR.join(path),
                origin,
                sibling.origins[None],
                "a group cannot mix nested groups and translations",
            )

    def _fold_leaf(
        self,
        target: _Accumulator,
        leaf: Leaf,
        origin: str,
        path: Tuple[str, ...],
    ) -> None:
        for language, text in leaf.translations.items():
            if language not in target.texts:
                target.texts[language] = text
                target.origins[language] = origin
                continue

            self.overlap_count += 1
            previous_origin = target.origins[language]
            logger.debug(
                "translation_overlap",
                path=PATH_SEPARATOR.join(path),
                language=language.value,
                origin=origin,
                previous_origin=previous_origin,
                overlap=self.overlap.value,
            )
            if self.overlap == TranslationOverlap.OVERWRITE:
                target.texts[language] = text
                target.origins[language] = origin


def merge(
    units: Iterable[SourceUnit],
    seek_mode: SeekMode = SeekMode.ALPHABETICAL,
    overlap: TranslationOverlap = TranslationOverlap.IGNORE,
) -> Group:
    """Merge units into the canonical tree.

    Example:
        tree = merge(loader.load(), SeekMode.ALPHABETICAL, TranslationOverlap.OVERWRITE)
    """
    return TranslationMerger(seek_mode=seek_mode, overlap=overlap).merge(units)
