"""Application pipeline – middleware chain layered over a bus."""
from taskbus.application.pipeline.middleware import Handler, Middleware, Next
from taskbus.application.pipeline.middlewares import (
    LoggingMiddleware,
    TimeoutMiddleware,
    ValidationMiddleware,
)
from taskbus.application.pipeline.pipeline import Pipeline

__all__ = [
    "Handler",
    "LoggingMiddleware",
    "Middleware",
    "Next",
    "Pipeline",
    "TimeoutMiddleware",
    "ValidationMiddleware",
]
