"""Application – CQRS dispatch, middleware pipeline and pagination."""

from taskbus.application.cqrs import (
    Command,
    CommandBus,
    CommandHandler,
    CommandRegistry,
    InProcessCommandBus,
    InProcessQueryBus,
    MiddlewareAwareCommandBus,
    MiddlewareAwareQueryBus,
    Query,
    QueryBus,
    QueryHandler,
    QueryRegistry,
)
from taskbus.application.pagination import Page, PageRequest, Sort, SortDirection
from taskbus.application.pipeline import Middleware, Pipeline

__all__ = [
    "Command",
    "CommandBus",
    "CommandHandler",
    "CommandRegistry",
    "InProcessCommandBus",
    "InProcessQueryBus",
    "Middleware",
    "MiddlewareAwareCommandBus",
    "MiddlewareAwareQueryBus",
    "Page",
    "PageRequest",
    "Pipeline",
    "Query",
    "QueryBus",
    "QueryHandler",
    "QueryRegistry",
    "Sort",
    "SortDirection",
]
