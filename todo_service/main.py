# todo_service/main.py
"""
Main module of the todo service.

Builds the FastAPI application: store selected from configuration, request
logging and metrics middleware, error translation and the todo routes.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config_service.config import GlobalSettings, settings as default_settings
from core.logging import get_logger, setup_logging
from core.metrics_collector import MetricsCollector
from todo_service import __version__
from todo_service.api.errors import register_exception_handlers
from todo_service.api.middleware import RequestObservationMiddleware
from todo_service.api.routes import router
from todo_service.core.request_logger import RequestLogger
from todo_service.storage import build_store
from todo_service.storage.base import TodoStore

# every todo_service.* logger propagates to this JSON handler
logger = get_logger("todo_service", service="todo_service")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle of the todo service."""
    logger.info(f"🚀 Starting todo service with '{app.state.store.backend}' store")

    yield

    logger.info("🛑 Stopping todo service")
    app.state.store.close()


def create_app(
    settings: Optional[GlobalSettings] = None,
    store: Optional[TodoStore] = None,
    metrics: Optional[MetricsCollector] = None,
    request_logger: Optional[RequestLogger] = None,
) -> FastAPI:
    """Create and configure the FastAPI application of the todo service."""
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="API to manage todos",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.store = store if store is not None else build_store(settings)
    app.state.metrics = metrics if metrics is not None else MetricsCollector()
    app.state.request_logger = request_logger or RequestLogger(
        slow_request_threshold=settings.SLOW_REQUEST_THRESHOLD_SECONDS
    )

    # CORS only in dev, a reverse proxy handles it elsewhere
    if settings.ENVIRONMENT == "dev":
        origins = settings.get_cors_origins()
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials="*" not in origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_middleware(
        RequestObservationMiddleware,
        request_logger=app.state.request_logger,
        metrics=app.state.metrics,
    )
    register_exception_handlers(app)
    app.include_router(router, tags=["todos"])

    @app.get("/health", tags=["health"])
    def health_check(request: Request):
        """Health of the service and of its store."""
        store: TodoStore = request.app.state.store
        store_healthy, store_message = store.health()

        health_status = {
            "service": "todo_service",
            "status": "healthy" if store_healthy else "unhealthy",
            "version": __version__,
            "store": {
                "backend": store.backend,
                "healthy": store_healthy,
                "message": store_message,
            },
        }

        if not store_healthy:
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content=health_status,
            )

        return health_status

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
