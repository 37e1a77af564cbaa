"""
Request logging middleware.
"""

import time
import logging
import traceback
from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from wasl_links.core.platform_detection import classify
from wasl_links.core.router import APP_PATH_PREFIXES

# Dedicated access logger
request_logger = logging.getLogger("wasl_links.requests")
if not request_logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    ))
    request_logger.addHandler(handler)
    request_logger.setLevel(logging.INFO)
    request_logger.propagate = False


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that logs one line per request. A 404 is the normal outcome
    for unknown paths and is logged at INFO like any other response.
    """

    def __init__(self, app: FastAPI):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next) -> Response:
        start_time = time.time()
        path = request.url.path
        user_agent = request.headers.get("user-agent", "")

        try:
            response = await call_next(request)
        except Exception as e:
            duration = (time.time() - start_time) * 1000
            request_logger.error(
                f"Error processing request: {request.method} {path} - "
                f"Error: {e} - Took {duration:.2f}ms\n"
                f"Traceback:\n{traceback.format_exc()}"
            )
            raise

        duration = (time.time() - start_time) * 1000
        message = (
            f"Request: Method={request.method}, "
            f"Path={path}, "
            f"Status={response.status_code}, "
            f"Duration={duration:.2f}ms"
        )
        if path.startswith(APP_PATH_PREFIXES):
            message += f", Platform={classify(user_agent).value}, User-Agent={user_agent}"

        request_logger.info(message)
        return response
