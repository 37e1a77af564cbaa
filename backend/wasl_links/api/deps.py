from typing import Annotated

from fastapi import Depends, Request

from wasl_links.core.config import settings
from wasl_links.core.router import IncomingRequest
from wasl_links.models.schemas.app_config import AppConfig

_app_config = settings.app_config


def get_app_config() -> AppConfig:
    """
    Dependency returning the process-wide application identity.
    Override it in tests to serve a different package or team.
    """
    return _app_config


def get_incoming_request(request: Request) -> IncomingRequest:
    return IncomingRequest(
        method=request.method,
        path=request.url.path,
        user_agent=request.headers.get("user-agent"),
        accept_language=request.headers.get("accept-language"),
    )


AppConfigDep = Annotated[AppConfig, Depends(get_app_config)]
IncomingRequestDep = Annotated[IncomingRequest, Depends(get_incoming_request)]
