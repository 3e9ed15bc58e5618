"""Tests for pslint.strings."""

import pytest

from pslint import strings


class TestGetString:
    def test_plain_lookup(self) -> None:
        assert strings.get_string(strings.SOURCE_NAME) == "PS"

    def test_format_arguments(self) -> None:
        assert strings.get_string(strings.NAME_SPACE_FORMAT, "PS", "Rule") == "PSRule"

    def test_error_template_formatted(self) -> None:
        message = strings.get_string(strings.AVOID_LONG_LINES_ERROR, 80)
        assert message == "Line exceeds the configured maximum length of 80 characters"

    def test_language_fallback(self) -> None:
        assert strings.get_string(strings.SOURCE_NAME, culture="en-GB") == "PS"

    def test_unknown_culture_falls_back_to_default(self) -> None:
        assert strings.get_string(
            strings.AVOID_LONG_LINES_COMMON_NAME, culture="xx-YY"
        ) == "Avoid long lines"

    def test_unknown_key_raises(self) -> None:
        with pytest.raises(KeyError):
            strings.get_string("NoSuchKey")


class TestCurrentCulture:
    def test_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PSLINT_CULTURE", raising=False)
        assert strings.current_culture() == "en-US"

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PSLINT_CULTURE", "de-DE")
        assert strings.current_culture() == "de-DE"
        # No German table ships; lookups still succeed.
        assert strings.get_string(strings.SOURCE_NAME) == "PS"
