from fastapi import APIRouter
from starlette.responses import Response

from wasl_links.api.deps import AppConfigDep, IncomingRequestDep
from wasl_links.core.router import dispatch

router = APIRouter()

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/{full_path:path}", methods=ALL_METHODS, include_in_schema=False)
def resolve(incoming: IncomingRequestDep, app_config: AppConfigDep) -> Response:
    """
    Serve the verification manifests and app link redirects.

    Every path goes through the prefix table in ``core.router``; paths it
    does not know end in a 404.
    """
    return dispatch(incoming, app_config)
