"""End-to-end tests from a translation store on disk to rendered strings."""

import pytest
import yaml

from translatable import (
    Language,
    OperationStatus,
    TranslationContext,
    TranslationOverlap,
    context_path,
    create_translator,
)
from translatable.configuration.settings import Settings
from translatable.configuration.translations import TranslationSettings
from translatable.i18n import PathNotFound


@pytest.fixture
def store(tmp_path):
    """Store split over several files and formats, with a later override."""
    root = tmp_path / "locales"
    (root / "errors").mkdir(parents=True)

    (root / "common.toml").write_text(
        '[common.greeting]\nen = "Hello {name}!"\nes = "¡Hola {name}!"\n'
        '\n[common.cart]\nen = "{count} items in {{cart}}"\n',
        encoding="utf-8",
    )
    with open(root / "errors" / "http.yaml", "w", encoding="utf-8") as f:
        yaml.dump(
            {"errors": {"http": {"not_found": {"en": "Not found", "de": "Nicht gefunden"}}}},
            f,
        )
    (root / "overrides.toml").write_text(
        '[common.greeting]\nen = "Hi {name}!"\n', encoding="utf-8"
    )
    return root


def build(store, **overrides):
    settings = Settings(
        translations=TranslationSettings(locales_path=store, **overrides)
    )
    return create_translator(settings=settings)


class Page(TranslationContext, base_path="common"):
    greeting: str
    not_found: str = context_path("errors.http.not_found")


class Root(TranslationContext):
    greeting: str = context_path("common.greeting")


@pytest.mark.integration
class TestTranslationStore:
    """Tests loading a real store and serving translations from it."""

    def test_common_greeting(self, store):
        """The greeting is served in English and Spanish."""
        translator = build(store)

        assert translator.translate("en", "common.greeting", {"name": "john"}).data == (
            "Hello john!"
        )
        assert translator.translate("es", "common.greeting", {"name": "john"}).data == (
            "¡Hola john!"
        )

    def test_overrides_apply_with_overwrite(self, store):
        """A later file overrides earlier texts under overwrite."""
        translator = build(store, overlap="overwrite")

        assert translator.bind("en", "common.greeting").render({"name": "a"}) == "Hi a!"
        assert translator.bind("es", "common.greeting").render({"name": "a"}) == "¡Hola a!"

    def test_overrides_ignored_by_default(self, store):
        """The first text in merge order is kept by default."""
        translator = build(store)

        assert translator.resolve("en", "common.greeting") == "Hello {name}!"

    def test_escapes_and_values(self, store):
        """Escaped braces and non-string values render together."""
        translator = build(store)

        assert translator.bind("en", "common.cart").render({"count": 2}) == (
            "2 items in {cart}"
        )

    def test_missing_path(self, store):
        """Unknown paths are reported as not found."""
        result = build(store).translate("en", "no.such.path")

        assert result.status == OperationStatus.NOT_FOUND

    def test_contexts_need_every_field(self, store):
        """Binding a context fails on its first missing path."""
        with pytest.raises(PathNotFound):
            build(store).bind_context(Page)

    def test_contexts_with_fallback(self, store):
        """Contexts load with the fallback language filling the gaps."""
        translator = build(store, fallback_language="en")

        result = translator.bind_context(Root).load(Language.DE, {"name": "Ana"})

        assert result.data.greeting == "Hello Ana!"

    def test_every_translation_is_reachable(self, store):
        """Every leaf of the tree can be bound in its languages."""
        translator = build(store, overlap=TranslationOverlap.OVERWRITE.value)

        for path, leaf in translator.tree.iter_leaves():
            for language in leaf.languages:
                assert translator.bind(language, path).text == leaf.get(language)
