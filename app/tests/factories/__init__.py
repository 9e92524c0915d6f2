"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_group,
    make_leaf,
    make_source_unit,
    make_translation_path,
    make_tree,
)

__all__ = [
    "make_group",
    "make_leaf",
    "make_source_unit",
    "make_translation_path",
    "make_tree",
]
