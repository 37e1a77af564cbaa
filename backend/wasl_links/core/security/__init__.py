from .cors import CORSHeadersMiddleware, CORS_HEADERS
from .request_logging import RequestLoggingMiddleware

__all__ = ["CORSHeadersMiddleware", "CORS_HEADERS", "RequestLoggingMiddleware"]
