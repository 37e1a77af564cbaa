from dataclasses import dataclass
from typing import Optional

from wasl_links.core.platform_detection import Platform
from wasl_links.models.schemas.app_config import AppConfig

DEEP_LINK_SCHEME = "wasl"


@dataclass(frozen=True)
class RedirectTarget:
    """Either a native deep link URI, or no URI meaning "render the landing page"."""
    deep_link: Optional[str] = None

    @classmethod
    def landing_page(cls) -> "RedirectTarget":
        return cls(deep_link=None)

    @property
    def renders_landing_page(self) -> bool:
        return self.deep_link is None


def android_intent_uri(path: str, package: str) -> str:
    return f"intent://{path}#Intent;scheme={DEEP_LINK_SCHEME};package={package};end"


def ios_scheme_uri(path: str) -> str:
    return f"{DEEP_LINK_SCHEME}://{path}"


def compose(platform: Platform, path: str, cfg: AppConfig) -> RedirectTarget:
    """
    Build the redirect target for a classified request.

    The request path is embedded exactly as received, leading slash
    included and without percent-encoding, e.g. ``/store/abc`` becomes
    ``wasl:///store/abc``. Installed apps match on that exact form.
    """
    if platform is Platform.ANDROID:
        return RedirectTarget(deep_link=android_intent_uri(path, cfg.android_package))
    if platform is Platform.IOS:
        return RedirectTarget(deep_link=ios_scheme_uri(path))
    return RedirectTarget.landing_page()
