"""
Custom middleware for the application
"""
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
import logging
import time
import uuid

logger = logging.getLogger("work_ledger.http")


class RequestTrackingMiddleware(BaseHTTPMiddleware):
    """Tag every request with an id, echoed back in ``X-Request-ID``"""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Request logging with timing; sensitive query params are never logged"""

    def __init__(self, app, slow_request_threshold: float = 2.0, sensitive_params: set = None):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold
        self.sensitive_params = sensitive_params or {
            'password', 'token', 'secret', 'key', 'authorization'
        }

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start_time = time.time()

        safe_params = {
            k: v for k, v in request.query_params.items()
            if k.lower() not in self.sensitive_params
        }
        request_id = getattr(request.state, "request_id", "unknown")

        logger.info(f"{request.method} {request.url.path} started", extra={
            "request_id": request_id,
            "query_params": safe_params,
            "client_ip": request.client.host if request.client else None,
        })

        response = await call_next(request)

        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = f"{process_time:.3f}"

        logger.info(f"{request.method} {request.url.path} - {response.status_code} - {process_time:.3f}s", extra={
            "request_id": request_id,
            "status_code": response.status_code,
        })
        if process_time > self.slow_request_threshold:
            logger.warning(f"Slow request detected: {request.method} {request.url.path} took {process_time:.3f}s")

        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add security headers to all responses"""

    def __init__(self, app, additional_headers: dict = None):
        super().__init__(app)
        self.security_headers = {
            "X-Content-Type-Options": "nosniff",
            "X-Frame-Options": "DENY",
            "Referrer-Policy": "strict-origin-when-cross-origin",
            "X-Robots-Tag": "noindex",
            **(additional_headers or {})
        }

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        for header, value in self.security_headers.items():
            response.headers[header] = value
        return response
