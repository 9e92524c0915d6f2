"""Unit tests for translation error classification."""

import pytest

from translatable.i18n import (
    InvalidIdentifier,
    InvalidLanguage,
    Language,
    LanguageNotFound,
    MissingValue,
    PathNotFound,
    UnknownPlaceholder,
)
from translatable.operations.classifiers import classify_translation_error
from translatable.operations.status import OperationStatus


@pytest.mark.unit
class TestClassifyTranslationError:
    """Tests for classify_translation_error() function."""

    @pytest.mark.parametrize(
        "exc,error_code",
        [
            (PathNotFound("no.such.path"), "PATH_NOT_FOUND"),
            (LanguageNotFound(Language.DE, "common.greeting"), "LANGUAGE_NOT_FOUND"),
        ],
    )
    def test_missing_translations_are_not_found(self, exc, error_code):
        """Missing paths and languages map to NOT_FOUND."""
        result = classify_translation_error(exc)

        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == error_code
        assert result.error is exc

    @pytest.mark.parametrize(
        "exc,error_code",
        [
            (InvalidLanguage("zz"), "INVALID_LANGUAGE"),
            (InvalidIdentifier("first name", 3), "INVALID_IDENTIFIER"),
            (MissingValue("name"), "MISSING_VALUE"),
            (UnknownPlaceholder(["age"]), "UNKNOWN_PLACEHOLDER"),
        ],
    )
    def test_invalid_input_is_permanent(self, exc, error_code):
        """Invalid languages and template failures map to PERMANENT_ERROR."""
        result = classify_translation_error(exc)

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == error_code

    def test_message_is_the_error_text(self):
        """The result message is the exception message."""
        result = classify_translation_error(PathNotFound("no.such.path"))

        assert result.message == "The path 'no.such.path' could not be found"
