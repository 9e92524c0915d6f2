"""Feature-level fixtures for i18n system tests.

Provides temporary translation stores and the loaders and translators
built from them.
"""

import pytest
import yaml

from translatable.i18n import (
    FileSystemTranslationLoader,
    Translator,
    merge,
)


COMMON_TOML = """\
[common.greeting]
en = "Hello {name}!"
es = "¡Hola {name}!"

[common.farewell]
en = "Goodbye"
es = "Adiós"
fr = "Au revoir"
"""


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary store with TOML and YAML translation files.

    Returns a directory structure like:
    - common.toml
    - errors.yml
    - admin/users.yaml
    """
    root = tmp_path / "translations"
    root.mkdir()

    (root / "common.toml").write_text(COMMON_TOML, encoding="utf-8")

    errors = {
        "errors": {
            "not_found": {
                "en": "{item} was not found",
                "es": "{item} no se encontró",
            },
            "escaped": {"en": "Use {{name}} to insert a name"},
        }
    }
    with open(root / "errors.yml", "w", encoding="utf-8") as f:
        yaml.dump(errors, f, allow_unicode=True)

    (root / "admin").mkdir()
    users = {"admin": {"users": {"created": {"en": "User {user} created"}}}}
    with open(root / "admin" / "users.yaml", "w", encoding="utf-8") as f:
        yaml.dump(users, f)

    return root


@pytest.fixture
def overlapping_translations_dir(tmp_path):
    """Create a store where a.toml and b.toml define the same text.

    a.toml also holds a text that only it defines, b.toml one that only
    it defines.
    """
    root = tmp_path / "overlap"
    root.mkdir()
    (root / "a.toml").write_text(
        '[common.greeting]\nen = "Hello from a"\nes = "Hola desde a"\n',
        encoding="utf-8",
    )
    (root / "b.toml").write_text(
        '[common.greeting]\nen = "Hello from b"\nfr = "Bonjour de b"\n',
        encoding="utf-8",
    )
    return root


@pytest.fixture
def fs_loader(temp_translations_dir):
    """Create FileSystemTranslationLoader for the temporary store."""
    return FileSystemTranslationLoader(temp_translations_dir)


@pytest.fixture
def fs_loader_with_cache(temp_translations_dir):
    """Create FileSystemTranslationLoader with caching enabled."""
    return FileSystemTranslationLoader(temp_translations_dir, use_cache=True)


@pytest.fixture
def translation_tree(fs_loader):
    """Merged tree of the temporary store."""
    return merge(fs_loader.load())


@pytest.fixture
def translator(translation_tree):
    """Translator without fallback over the temporary store."""
    return Translator(translation_tree)


@pytest.fixture
def fallback_translator(translation_tree):
    """Translator falling back to English."""
    return Translator(translation_tree, fallback_language="en")


@pytest.fixture
def strict_translator(translation_tree):
    """Translator rejecting unused placeholder values."""
    return Translator(translation_tree, strict=True)
