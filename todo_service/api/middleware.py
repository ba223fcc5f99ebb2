"""
Request middleware for the todo service.

Every request goes through:
    Request → log start → route handler → log completion + metrics → Response
"""
import json
import time
import traceback
from typing import Any, Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR
from starlette.types import ASGIApp

from core.metrics_collector import MetricsCollector
from todo_service.core.request_logger import RequestLogger


class RequestObservationMiddleware(BaseHTTPMiddleware):
    """Logs each request and its completion and records it in the metrics collector."""

    def __init__(self, app: ASGIApp, request_logger: RequestLogger, metrics: MetricsCollector):
        super().__init__(app)
        self.request_logger = request_logger
        self.metrics = metrics

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        method = request.method
        url = self._get_url(request)

        self.request_logger.log_request_start(method, url, await self._get_body(request))

        try:
            response = await call_next(request)
        except Exception as e:
            self.request_logger.log_error(
                f"Unhandled error during {method} {url}",
                {
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                    "traceback": traceback.format_exc(),
                },
            )
            response = JSONResponse(
                status_code=HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Internal Server Error"},
            )

        duration = time.perf_counter() - start_time
        self.metrics.observe_request(method, self._get_route_path(request), duration)
        self.request_logger.log_request_end(method, url, duration, response.status_code)
        return response

    @staticmethod
    def _get_url(request: Request) -> str:
        if request.url.query:
            return f"{request.url.path}?{request.url.query}"
        return request.url.path

    @staticmethod
    def _get_route_path(request: Request) -> str:
        """Matched route template, so that every id shares one label set."""
        route = request.scope.get("route")
        return getattr(route, "path", None) or request.url.path

    @staticmethod
    async def _get_body(request: Request) -> Any:
        raw = await request.body()
        if not raw:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            return raw.decode("utf-8", errors="replace")
