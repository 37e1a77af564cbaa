import logging

import sentry_sdk
import uvicorn
from fastapi import FastAPI
from fastapi.routing import APIRoute

from wasl_links.api.main import api_router
from wasl_links.core.config import settings
from wasl_links.core.security import CORSHeadersMiddleware, RequestLoggingMiddleware
from wasl_links.core.security.request_logging import request_logger

logging.basicConfig(level=settings.LOG_LEVEL)
request_logger.setLevel(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def custom_generate_unique_id(route: APIRoute) -> str:
    return f"{route.tags[0]}-{route.name}"


if settings.SENTRY_DSN and settings.ENVIRONMENT != "local":
    sentry_sdk.init(dsn=str(settings.SENTRY_DSN), enable_tracing=True)

# No docs or schema routes: every path outside the link table is a 404
app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=None,
    docs_url=None,
    redoc_url=None,
    generate_unique_id_function=custom_generate_unique_id,
)

# Last added runs first: log the final response, CORS headers included
app.add_middleware(CORSHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(api_router)


def run() -> None:
    logger.info(f"Server running on port :{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
