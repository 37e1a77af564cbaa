import json

import pytest

from wasl_links.core.i18n import (
    DEFAULT_LANGUAGE,
    Translator,
    get_translation,
    parse_accept_language,
    text_direction,
)


class TestParseAcceptLanguage:
    @pytest.mark.parametrize(
        "header, expected",
        [
            ("en-US,en;q=0.9", "en"),
            ("ar-SA", "ar"),
            ("fr-FR, en;q=0.8", "en"),
            ("de-DE", DEFAULT_LANGUAGE),
            ("", DEFAULT_LANGUAGE),
            (None, DEFAULT_LANGUAGE),
        ],
    )
    def test_first_supported_language_wins(self, header, expected):
        assert parse_accept_language(header) == expected


class TestTranslator:
    def test_format_parameters(self):
        assert get_translation("download_prompt", "en", app_name="Wasl") == (
            "For the best experience, download the Wasl app"
        )

    def test_unsupported_language_falls_back(self):
        assert get_translation("app_name", "tr") == get_translation("app_name", DEFAULT_LANGUAGE)

    def test_unknown_key_returns_key(self):
        assert get_translation("no_such_key", "en") == "no_such_key"

    def test_missing_language_file_falls_back_to_default(self, tmp_path):
        (tmp_path / "ar.json").write_text(json.dumps({"app_name": "وصل"}), encoding="utf-8")

        translator = Translator(translations_dir=tmp_path)

        assert translator.translations["en"] == {}
        assert translator.get("app_name", "en") == "وصل"

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Translations directory not found"):
            Translator(translations_dir=tmp_path / "missing")

    def test_text_direction(self):
        assert text_direction("ar") == "rtl"
        assert text_direction("en") == "ltr"
