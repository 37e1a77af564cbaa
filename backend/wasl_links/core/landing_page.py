from functools import lru_cache
from pathlib import Path

from jinja2 import Template

from wasl_links.core.i18n import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES, get_translation, text_direction

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
LANDING_PAGE_TEMPLATE = "landing_page.html"


@lru_cache()
def _load_template(template_name: str) -> Template:
    template_str = (TEMPLATES_DIR / template_name).read_text(encoding="utf-8")
    return Template(template_str, autoescape=True)


def render_landing_page(
    path: str,
    android_store_url: str,
    ios_store_url: str,
    language: str = DEFAULT_LANGUAGE,
) -> str:
    """
    Render the store download page shown to browsers that are neither
    Android nor iOS devices.

    Args:
        path: The app path that was requested, e.g. ``/store/abc``
        android_store_url: Google Play listing
        ios_store_url: App Store listing
        language: Language code for the page strings

    Returns:
        The full HTML document
    """
    if language not in SUPPORTED_LANGUAGES:
        language = DEFAULT_LANGUAGE

    app_name = get_translation("app_name", language)
    context = {
        "language": language,
        "direction": text_direction(language),
        "path": path,
        "app_name": app_name,
        "page_title": get_translation("page_title", language, app_name=app_name),
        "download_prompt": get_translation("download_prompt", language, app_name=app_name),
        "google_play_button": get_translation("google_play_button", language),
        "app_store_button": get_translation("app_store_button", language),
        "android_store_url": android_store_url,
        "ios_store_url": ios_store_url,
    }
    return _load_template(LANDING_PAGE_TEMPLATE).render(context)
