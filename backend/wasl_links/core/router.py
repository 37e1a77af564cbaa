"""
Path-prefix dispatch for every request the service receives.

The routing table is an ordered list of (predicate, handler) pairs; the
first predicate that matches the request path wins, and a request no
predicate matches is a 404.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from fastapi import HTTPException, status
from starlette.responses import HTMLResponse, Response

from wasl_links.core.deeplink import compose
from wasl_links.core.i18n import parse_accept_language
from wasl_links.core.landing_page import render_landing_page
from wasl_links.core.manifests import build_app_site_association, build_asset_links, dump_document
from wasl_links.core.platform_detection import classify
from wasl_links.models.schemas.app_config import AppConfig

logger = logging.getLogger(__name__)

ASSET_LINKS_PATH = "/.well-known/assetlinks.json"
APP_SITE_ASSOCIATION_PATH = "/.well-known/apple-app-site-association"
APP_PATH_PREFIXES = ("/store/", "/item/", "/combo/")

JSON_MEDIA_TYPE = "application/json"
PREFLIGHT_METHOD = "OPTIONS"


@dataclass(frozen=True)
class IncomingRequest:
    method: str
    path: str
    user_agent: Optional[str] = None
    accept_language: Optional[str] = None


Predicate = Callable[[str], bool]
Handler = Callable[[IncomingRequest, AppConfig], Response]


def _prefixed(*prefixes: str) -> Predicate:
    return lambda path: path.startswith(prefixes)


def serve_asset_links(request: IncomingRequest, cfg: AppConfig) -> Response:
    return Response(
        content=dump_document(build_asset_links(cfg)),
        media_type=JSON_MEDIA_TYPE,
    )


def serve_app_site_association(request: IncomingRequest, cfg: AppConfig) -> Response:
    return Response(
        content=dump_document(build_app_site_association(cfg)),
        media_type=JSON_MEDIA_TYPE,
    )


def resolve_deep_link(request: IncomingRequest, cfg: AppConfig) -> Response:
    """
    Send devices into the native app, everyone else to the store landing page.
    """
    platform = classify(request.user_agent)
    target = compose(platform, request.path, cfg)
    logger.debug(f"Resolved {request.path} for platform={platform.value}")

    if target.renders_landing_page:
        html = render_landing_page(
            request.path,
            cfg.android_store_url,
            cfg.ios_store_url,
            language=parse_accept_language(request.accept_language),
        )
        return HTMLResponse(content=html)

    return deep_link_redirect(target.deep_link)


def deep_link_redirect(uri: str) -> Response:
    """
    307 to a native URI. The path inside the URI is the decoded request
    path and may hold any Unicode, so the header is written as UTF-8 bytes
    rather than through Starlette's latin-1 header encoding.
    """
    response = Response(status_code=status.HTTP_307_TEMPORARY_REDIRECT)
    response.raw_headers.append((b"location", uri.encode("utf-8")))
    return response


ROUTES: List[Tuple[Predicate, Handler]] = [
    (_prefixed(ASSET_LINKS_PATH), serve_asset_links),
    (_prefixed(APP_SITE_ASSOCIATION_PATH), serve_app_site_association),
    (_prefixed(*APP_PATH_PREFIXES), resolve_deep_link),
]


def dispatch(request: IncomingRequest, cfg: AppConfig) -> Response:
    """
    Produce the response for a request.

    Raises:
        HTTPException: 404 when no route claims the path
    """
    if request.method.upper() == PREFLIGHT_METHOD:
        return Response(status_code=status.HTTP_200_OK)

    for matches, handler in ROUTES:
        if matches(request.path):
            return handler(request, cfg)

    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
