import json
from pathlib import Path
from typing import Dict, Optional, Set
from functools import lru_cache
import logging
import re

logger = logging.getLogger(__name__)

# The landing page was written for an Arabic audience first
DEFAULT_LANGUAGE = "ar"
SUPPORTED_LANGUAGES: Set[str] = {"ar", "en"}
RTL_LANGUAGES: Set[str] = {"ar"}


class Translator:
    """Loads and serves the landing page strings for each supported language."""

    def __init__(self, translations_dir: Optional[Path] = None):
        self.translations_dir = translations_dir or Path(__file__).parent.parent / "translations"
        self.translations: Dict[str, Dict[str, str]] = {}
        self._load_translations()

    def _load_translations(self) -> None:
        if not self.translations_dir.exists():
            raise FileNotFoundError(f"Translations directory not found: {self.translations_dir}")

        for lang in SUPPORTED_LANGUAGES:
            lang_file = self.translations_dir / f"{lang}.json"
            if lang_file.exists():
                with open(lang_file, "r", encoding="utf-8") as f:
                    self.translations[lang] = json.load(f)
            else:
                logger.warning(f"Translation file not found for language: {lang}")
                self.translations[lang] = {}

    def get(self, key: str, language: str = DEFAULT_LANGUAGE, **kwargs) -> str:
        """
        Get a translation for a key in the specified language.

        Falls back to the default language, then to the key itself.
        """
        if language not in SUPPORTED_LANGUAGES:
            language = DEFAULT_LANGUAGE

        translation = self.translations.get(language, {}).get(key)
        if translation is None:
            translation = self.translations.get(DEFAULT_LANGUAGE, {}).get(key, key)

        if kwargs and isinstance(translation, str):
            return translation.format(**kwargs)

        return translation


@lru_cache()
def get_translator() -> Translator:
    """Get or create a cached translator instance."""
    return Translator()


def parse_accept_language(accept_language: Optional[str]) -> str:
    """
    Pick the first supported primary language from an Accept-Language header.
    """
    if accept_language:
        for lang in re.split(r",\s*", accept_language):
            lang_code = lang.split(";")[0].strip().lower()
            short_lang = lang_code.split("-")[0]  # "en" from "en-US"
            if short_lang in SUPPORTED_LANGUAGES:
                return short_lang

    return DEFAULT_LANGUAGE


def text_direction(language: str) -> str:
    return "rtl" if language in RTL_LANGUAGES else "ltr"


def get_translation(key: str, language: str = DEFAULT_LANGUAGE, **kwargs) -> str:
    translator = get_translator()
    return translator.get(key, language, **kwargs)
