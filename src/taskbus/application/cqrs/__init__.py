"""Application CQRS – requests, handlers, registries and buses."""
from taskbus.application.cqrs.bus import DispatchBus
from taskbus.application.cqrs.commands import CommandBus, InProcessCommandBus
from taskbus.application.cqrs.contracts import Command, CommandHandler, Query, QueryHandler, Request
from taskbus.application.cqrs.pipeline_bus import MiddlewareAwareCommandBus, MiddlewareAwareQueryBus
from taskbus.application.cqrs.queries import InProcessQueryBus, QueryBus
from taskbus.application.cqrs.registry import CommandRegistry, HandlerRegistry, QueryRegistry, ReplaceHook

__all__ = [
    "Command",
    "CommandBus",
    "CommandHandler",
    "CommandRegistry",
    "DispatchBus",
    "HandlerRegistry",
    "InProcessCommandBus",
    "InProcessQueryBus",
    "MiddlewareAwareCommandBus",
    "MiddlewareAwareQueryBus",
    "Query",
    "QueryBus",
    "QueryHandler",
    "QueryRegistry",
    "ReplaceHook",
    "Request",
]
