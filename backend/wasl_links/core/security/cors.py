"""
CORS header middleware for FastAPI.
"""

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Accept, Content-Type, Content-Length, Accept-Encoding, Authorization",
}


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds the fixed CORS headers to all responses,
    including 404s and pre-flight replies.
    """

    def __init__(self, app: FastAPI):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        for name, value in CORS_HEADERS.items():
            response.headers[name] = value

        return response
