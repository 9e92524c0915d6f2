"""Unit tests for the Translator service."""

import pytest

from translatable.i18n import (
    InvalidIdentifier,
    InvalidLanguage,
    Language,
    LanguageNotFound,
    MissingValue,
    PathNotFound,
    StaticTranslation,
    Translator,
    UnknownPlaceholder,
)
from translatable.i18n.loader import build_tree
from translatable.operations import OperationStatus


@pytest.mark.unit
class TestTranslatorInitialization:
    """Tests for Translator construction."""

    def test_translator_initialization(self, translation_tree):
        """Translator keeps its tree and options."""
        translator = Translator(translation_tree)

        assert translator.tree is translation_tree
        assert translator.fallback_language is None
        assert translator.strict is False

    def test_fallback_language_is_validated(self, translation_tree):
        """The fallback language is normalized at construction."""
        assert Translator(translation_tree, "EN").fallback_language is Language.EN

        with pytest.raises(InvalidLanguage):
            Translator(translation_tree, "zz")

    def test_get_available_languages(self, translator):
        """Every language used in the tree is listed once, sorted."""
        assert translator.get_available_languages() == [
            Language.EN,
            Language.ES,
            Language.FR,
        ]


@pytest.mark.unit
class TestDynamicTranslation:
    """Tests for translate(), which reports failures as results."""

    def test_translate_english(self, translator):
        """Translate a text with a placeholder."""
        result = translator.translate("en", "common.greeting", {"name": "john"})

        assert result.is_success
        assert result.data == "Hello john!"

    def test_translate_spanish(self, translator):
        """Translate the same path in another language."""
        result = translator.translate("es", "common.greeting", {"name": "john"})

        assert result.unwrap() == "¡Hola john!"

    def test_translate_from_yaml_file(self, translator):
        """Texts from YAML files are served like TOML ones."""
        result = translator.translate("es", "errors.not_found", {"item": "El usuario"})

        assert result.data == "El usuario no se encontró"

    def test_translate_nested_file(self, translator):
        """Texts from nested directories are served."""
        result = translator.translate(
            Language.EN, ["admin", "users", "created"], {"user": "ana"}
        )

        assert result.data == "User ana created"

    def test_translate_escaped_braces(self, translator):
        """Escaped braces are rendered literally."""
        result = translator.translate("en", "errors.escaped")

        assert result.data == "Use {name} to insert a name"

    def test_translate_invalid_language(self, translator):
        """An unknown code is a permanent error."""
        result = translator.translate("zz", "common.greeting", {"name": "john"})

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "INVALID_LANGUAGE"
        assert isinstance(result.error, InvalidLanguage)

    def test_translate_path_not_found(self, translator):
        """A missing path is reported as not found."""
        result = translator.translate("en", "no.such.path")

        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == "PATH_NOT_FOUND"
        with pytest.raises(PathNotFound):
            result.unwrap()

    def test_translate_language_not_found(self, translator):
        """A valid language without text is reported as not found."""
        result = translator.translate("de", "common.greeting", {"name": "john"})

        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == "LANGUAGE_NOT_FOUND"

    def test_translate_missing_value(self, translator):
        """A missing placeholder value is a permanent error."""
        result = translator.translate("en", "common.greeting", {})

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "MISSING_VALUE"
        assert result.unwrap_or("fallback") == "fallback"

    def test_translate_ignores_unused_values(self, translator):
        """Extra values are ignored by a lenient translator."""
        result = translator.translate("en", "common.farewell", {"name": "john"})

        assert result.data == "Goodbye"

    def test_translate_strict_rejects_unused_values(self, strict_translator):
        """A strict translator reports unused values."""
        result = strict_translator.translate("en", "common.farewell", {"name": "john"})

        assert result.error_code == "UNKNOWN_PLACEHOLDER"

    def test_translate_invalid_identifier(self):
        """A malformed placeholder in the text is a permanent error."""
        translator = Translator(build_tree({"bad": {"en": "Hi {first name}"}}, "x"))

        result = translator.translate("en", "bad", {})

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "INVALID_IDENTIFIER"

    def test_resolve_returns_raw_text(self, translator):
        """resolve returns the text before substitution."""
        assert translator.resolve("es", "common.greeting") == "¡Hola {name}!"

    def test_has_message(self, translator):
        """has_message checks path and language without raising."""
        assert translator.has_message("fr", "common.farewell") is True
        assert translator.has_message("fr", "common.greeting") is False
        assert translator.has_message("zz", "common.greeting") is False
        assert translator.has_message("en", "no.such.path") is False


@pytest.mark.unit
class TestFallbackLanguage:
    """Tests for fallback language handling."""

    def test_fallback_used_for_missing_language(self, fallback_translator):
        """The fallback text is served when the language is missing."""
        result = fallback_translator.translate("de", "common.greeting", {"name": "ana"})

        assert result.data == "Hello ana!"

    def test_fallback_not_used_for_invalid_language(self, fallback_translator):
        """Invalid languages still fail."""
        result = fallback_translator.translate("zz", "common.greeting", {"name": "a"})

        assert result.error_code == "INVALID_LANGUAGE"

    def test_fallback_not_used_when_language_exists(self, fallback_translator):
        """The requested language wins over the fallback."""
        assert fallback_translator.resolve("fr", "common.farewell") == "Au revoir"

    def test_has_message_ignores_fallback(self, fallback_translator):
        """has_message reports only the requested language."""
        assert fallback_translator.has_message("de", "common.greeting") is False

    def test_fallback_missing_at_path(self, translation_tree):
        """A path without fallback text fails like a missing language."""
        translator = Translator(translation_tree, fallback_language="fr")

        result = translator.translate("de", "common.greeting", {"name": "ana"})

        assert result.error_code == "LANGUAGE_NOT_FOUND"


@pytest.mark.unit
class TestStaticTranslation:
    """Tests for bind(), where language and path are known ahead of time."""

    def test_bind_and_render(self, translator):
        """A bound translation renders with values."""
        greeting = translator.bind("es", "common.greeting")

        assert isinstance(greeting, StaticTranslation)
        assert greeting.language is Language.ES
        assert str(greeting.path) == "common.greeting"
        assert greeting.render({"name": "john"}) == "¡Hola john!"

    def test_bind_invalid_language_raises_early(self, translator):
        """An invalid language fails at bind time."""
        with pytest.raises(InvalidLanguage):
            translator.bind("zz", "common.greeting")

    def test_bind_missing_path_raises_early(self, translator):
        """A missing path fails at bind time."""
        with pytest.raises(PathNotFound):
            translator.bind("en", "no.such.path")

    def test_bind_missing_language_raises_early(self, translator):
        """A language without text fails at bind time."""
        with pytest.raises(LanguageNotFound):
            translator.bind("de", "common.greeting")

    def test_bind_invalid_identifier_raises_early(self):
        """Malformed placeholders fail at bind time."""
        translator = Translator(build_tree({"bad": {"en": "{"}}, "x"))

        with pytest.raises(InvalidIdentifier):
            translator.bind("en", "bad")

    def test_bind_uses_fallback(self, fallback_translator):
        """Binding a missing language uses the fallback text."""
        assert fallback_translator.bind("de", "common.farewell").render() == "Goodbye"

    def test_render_missing_value_raises(self, translator):
        """Rendering without a required value raises."""
        greeting = translator.bind("en", "common.greeting")

        with pytest.raises(MissingValue):
            greeting.render()

    def test_render_strict(self, strict_translator):
        """Strict translators reject unused values when rendering."""
        farewell = strict_translator.bind("en", "common.farewell")

        with pytest.raises(UnknownPlaceholder):
            farewell.render({"name": "john"})

    def test_constant_translation(self, translator):
        """A text without placeholders renders to the same string."""
        farewell = translator.bind("en", "common.farewell")

        assert farewell.is_constant
        assert farewell.text == "Goodbye"
        assert str(farewell) == "Goodbye"
        assert farewell.render() is farewell.render()


@pytest.mark.unit
class TestPartialBindings:
    """Tests for bind_language() and bind_path()."""

    def test_bind_language(self, translator):
        """A language binding translates paths supplied per call."""
        spanish = translator.bind_language(" ES ")

        assert spanish.language is Language.ES
        assert spanish.translate("common.farewell").data == "Adiós"
        assert spanish.translate("no.such.path").status == OperationStatus.NOT_FOUND

    def test_bind_language_invalid(self, translator):
        """An invalid language fails at bind time."""
        with pytest.raises(InvalidLanguage):
            translator.bind_language("zz")

    def test_bind_path(self, translator):
        """A path binding translates languages supplied per call."""
        greeting = translator.bind_path("common.greeting")

        assert greeting.languages == (Language.EN, Language.ES)
        assert greeting.translate("en", {"name": "a"}).data == "Hello a!"
        assert greeting.translate("zz", {"name": "a"}).error_code == "INVALID_LANGUAGE"
        assert greeting.translate("de", {"name": "a"}).error_code == "LANGUAGE_NOT_FOUND"

    def test_bind_path_missing(self, translator):
        """A missing path fails at bind time."""
        with pytest.raises(PathNotFound):
            translator.bind_path("no.such.path")

    def test_bind_path_checks_fallback(self, translation_tree):
        """A path without fallback text fails at bind time."""
        translator = Translator(translation_tree, fallback_language="fr")

        with pytest.raises(LanguageNotFound):
            translator.bind_path("common.greeting")

    def test_bind_path_uses_fallback(self, fallback_translator):
        """Per-call languages fall back once the path is bound."""
        greeting = fallback_translator.bind_path("common.greeting")

        assert greeting.translate("de", {"name": "a"}).data == "Hello a!"

    def test_modes_agree(self, translator):
        """Every mode returns the same text for the same inputs."""
        values = {"name": "john"}
        expected = translator.translate("es", "common.greeting", values).data

        assert translator.bind("es", "common.greeting").render(values) == expected
        assert translator.bind_language("es").translate(
            "common.greeting", values
        ).data == expected
        assert translator.bind_path("common.greeting").translate(
            "es", values
        ).data == expected
