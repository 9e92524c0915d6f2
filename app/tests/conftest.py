"""Global test fixtures shared by every test package."""

import pytest

from translatable.configuration.settings import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset the cached settings so environment changes are picked up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run the test from an empty working directory.

    Keeps translatable.toml and .env files of the checkout out of the
    settings under test.
    """
    monkeypatch.chdir(tmp_path)
    for name in (
        "TRANSLATABLE_LOCALES_PATH",
        "TRANSLATABLE_SEEK_MODE",
        "TRANSLATABLE_OVERLAP",
        "TRANSLATABLE_FALLBACK_LANGUAGE",
        "TRANSLATABLE_MAX_WORKERS",
    ):
        monkeypatch.delenv(name, raising=False)
    return tmp_path
