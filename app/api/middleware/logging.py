# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# This file keeps a diary of every request made to the oyster review app, recording what was asked for,
# how it ended and how long it took, with a tracking number that ties all related log lines together.
# 🧪 Purpose (Technical Summary):
# Request logging middleware: reads or creates the X-Request-ID, binds it to the logging context for the
# whole request, and logs method, path, status and duration with a slow-request warning.
# 🔗 Dependencies:
# starlette BaseHTTPMiddleware, app.shared.utils.logging, uuid, time
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration), error handlers (request id)

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.logging import log_context

from . import get_middleware_config, should_exclude_path

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware

    Features:
    - Request correlation via X-Request-ID (incoming value kept, otherwise generated)
    - Request/response timing
    - Slow request warnings
    """

    request_id_header = "X-Request-ID"

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        config = get_middleware_config("logging")
        self.slow_request_threshold = config.get("slow_request_threshold", 2.0)

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process and log HTTP requests/responses

        Args:
            request: HTTP request
            call_next: Next middleware or endpoint

        Returns:
            HTTP response
        """
        request_id = self._get_or_create_request_id(request)

        with log_context(request_id=request_id):
            # Skip logging for excluded paths
            if should_exclude_path("logging", request.url.path):
                response = await call_next(request)
                response.headers[self.request_id_header] = request_id
                return response

            start_time = time.perf_counter()
            logger.debug(f"Request started: {request.method} {request.url.path}")

            try:
                response = await call_next(request)
            except Exception as e:
                processing_time = time.perf_counter() - start_time
                logger.error(
                    f"Request failed: {request.method} {request.url.path} "
                    f"after {processing_time * 1000:.2f}ms: {type(e).__name__}"
                )
                raise

            processing_time = time.perf_counter() - start_time
            self._log_response(request, response.status_code, processing_time)

            response.headers[self.request_id_header] = request_id
            response.headers["X-Response-Time"] = f"{processing_time:.3f}s"
            return response

    def _get_or_create_request_id(self, request: Request) -> str:
        """
        Get existing request ID or create new one

        Args:
            request: HTTP request

        Returns:
            Request ID string
        """
        request_id = request.headers.get(self.request_id_header.lower()) or str(uuid.uuid4())
        request.state.request_id = request_id
        return request_id

    def _log_response(self, request: Request, status_code: int, processing_time: float) -> None:
        message = (
            f"{request.method} {request.url.path} - {status_code} "
            f"({processing_time * 1000:.2f}ms)"
        )

        fields = {
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": round(processing_time * 1000, 2),
        }

        if status_code >= 500:
            logger.error(message, extra=fields)
        elif status_code >= 400:
            logger.warning(message, extra=fields)
        elif processing_time > self.slow_request_threshold:
            logger.warning(f"Slow request: {message}", extra=fields)
        else:
            logger.info(message, extra=fields)
