"""
Dependencies for the todo API.

The store, metrics collector and request logger are created once by
``create_app`` and kept on ``app.state``; routes receive them from here.
"""
from fastapi import Request

from core.metrics_collector import MetricsCollector
from todo_service.core.request_logger import RequestLogger
from todo_service.storage.base import TodoStore


def get_store(request: Request) -> TodoStore:
    return request.app.state.store


def get_metrics_collector(request: Request) -> MetricsCollector:
    return request.app.state.metrics


def get_request_logger(request: Request) -> RequestLogger:
    return request.app.state.request_logger
