"""Unit tests for the middleware Pipeline and middleware-aware buses."""

from __future__ import annotations

import asyncio
import dataclasses
from typing import Any

import pytest

from taskbus.application.cqrs import (
    Command,
    CommandRegistry,
    InProcessCommandBus,
    InProcessQueryBus,
    MiddlewareAwareCommandBus,
    MiddlewareAwareQueryBus,
    Query,
    QueryRegistry,
)
from taskbus.application.pipeline import (
    LoggingMiddleware,
    Middleware,
    Pipeline,
    TimeoutMiddleware,
    ValidationMiddleware,
)
from taskbus.kernel.errors import HandlerNotFoundError, InvalidRequestError, ValidationError
from taskbus.kernel.errors import TimeoutError as UseCaseTimeoutError
from taskbus.testing import RecordingHandler


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_recording_middleware(name: str, record: list[str]) -> Middleware:
    class Rec(Middleware):
        async def __call__(self, request: Any, next_: Any) -> Any:
            record.append(f"{name}:before")
            result = await next_(request)
            record.append(f"{name}:after")
            return result

    return Rec()


async def identity_handler(request: object) -> object:
    return request


class CapturingLogger:
    def __init__(self) -> None:
        self.events: list[tuple[str, str, dict[str, Any]]] = []

    def info(self, event: str, **kw: Any) -> None:
        self.events.append(("info", event, kw))

    def error(self, event: str, **kw: Any) -> None:
        self.events.append(("error", event, kw))


@dataclasses.dataclass(frozen=True)
class CreateTodo(Command):
    title: str

    def validate(self) -> None:
        if not self.title:
            raise ValidationError("Title is required")


@dataclasses.dataclass(frozen=True)
class GetTodo(Query):
    todo_id: str


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class TestPipeline:
    def test_no_middleware_calls_handler(self) -> None:
        assert asyncio.run(Pipeline().execute("hello", identity_handler)) == "hello"

    def test_first_added_runs_outermost(self) -> None:
        record: list[str] = []
        pipeline = (
            Pipeline()
            .add(make_recording_middleware("A", record))
            .add(make_recording_middleware("B", record))
        )
        asyncio.run(pipeline.execute("x", identity_handler))
        assert record == ["A:before", "B:before", "B:after", "A:after"]

    def test_constructor_accepts_middlewares(self) -> None:
        record: list[str] = []
        pipeline = Pipeline([make_recording_middleware("A", record)])
        assert len(pipeline) == 1
        asyncio.run(pipeline.execute("x", identity_handler))
        assert record == ["A:before", "A:after"]

    def test_middleware_can_short_circuit(self) -> None:
        class Stop(Middleware):
            async def __call__(self, request: Any, next_: Any) -> Any:
                return "stopped"

        handler = RecordingHandler("handled")
        result = asyncio.run(Pipeline().add(Stop()).execute("x", handler.handle))
        assert result == "stopped"
        assert handler.call_count == 0


# ---------------------------------------------------------------------------
# Built-in middlewares
# ---------------------------------------------------------------------------


class TestLoggingMiddleware:
    def test_logs_completion(self) -> None:
        log = CapturingLogger()
        pipeline = Pipeline().add(LoggingMiddleware(log))
        asyncio.run(pipeline.execute(CreateTodo("x"), identity_handler))
        level, event, kw = log.events[0]
        assert (level, event) == ("info", "bus.request.completed")
        assert kw["request"] == "CreateTodo"
        assert kw["duration_ms"] >= 0

    def test_logs_failure_and_reraises(self) -> None:
        log = CapturingLogger()
        error = RuntimeError("DB down")
        handler = RecordingHandler(error=error)
        pipeline = Pipeline().add(LoggingMiddleware(log))
        with pytest.raises(RuntimeError) as info:
            asyncio.run(pipeline.execute(CreateTodo("x"), handler.handle))
        assert info.value is error
        assert log.events[0][:2] == ("error", "bus.request.failed")
        assert log.events[0][2]["error"] == "RuntimeError"
        assert "error_code" not in log.events[0][2]

    def test_failure_carries_error_code(self) -> None:
        log = CapturingLogger()
        handler = RecordingHandler(error=HandlerNotFoundError("Command", CreateTodo))
        pipeline = Pipeline().add(LoggingMiddleware(log))
        with pytest.raises(HandlerNotFoundError):
            asyncio.run(pipeline.execute(CreateTodo("x"), handler.handle))
        kw = log.events[0][2]
        assert kw["error_code"] == "handler_not_found"
        assert kw["error_detail"] == {"request_type": "CreateTodo"}

    def test_default_logger_is_structlog(self) -> None:
        result = asyncio.run(Pipeline().add(LoggingMiddleware()).execute("x", identity_handler))
        assert result == "x"


class TestValidationMiddleware:
    def test_calls_validate(self) -> None:
        handler = RecordingHandler("ok")
        pipeline = Pipeline().add(ValidationMiddleware())
        with pytest.raises(ValidationError):
            asyncio.run(pipeline.execute(CreateTodo(""), handler.handle))
        assert handler.call_count == 0

    def test_passes_requests_without_validate(self) -> None:
        query = GetTodo("t-1")
        pipeline = Pipeline().add(ValidationMiddleware())
        assert asyncio.run(pipeline.execute(query, identity_handler)) is query


class TestTimeoutMiddleware:
    def test_raises_timeout(self) -> None:
        async def slow(request: Any) -> Any:
            await asyncio.sleep(1)
            return request

        pipeline = Pipeline().add(TimeoutMiddleware(0.01))
        with pytest.raises(UseCaseTimeoutError, match="timed out"):
            asyncio.run(pipeline.execute(CreateTodo("x"), slow))

    def test_fast_handler_passes(self) -> None:
        pipeline = Pipeline().add(TimeoutMiddleware(1.0))
        assert asyncio.run(pipeline.execute("x", identity_handler)) == "x"

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValueError):
            TimeoutMiddleware(0)


# ---------------------------------------------------------------------------
# Middleware-aware buses
# ---------------------------------------------------------------------------


class TestMiddlewareAwareCommandBus:
    def test_dispatches_through_pipeline(self) -> None:
        record: list[str] = []
        handler = RecordingHandler("created")
        bus = MiddlewareAwareCommandBus(
            InProcessCommandBus(CommandRegistry()),
            Pipeline().add(make_recording_middleware("A", record)),
        )
        bus.register(CreateTodo, handler)  # type: ignore[arg-type]

        assert asyncio.run(bus.execute(CreateTodo("x"))) == "created"
        assert record == ["A:before", "A:after"]
        assert handler.call_count == 1

    def test_register_reaches_inner_registry(self) -> None:
        registry = CommandRegistry()
        bus = MiddlewareAwareCommandBus(InProcessCommandBus(registry), Pipeline())
        handler = RecordingHandler()
        bus.register(CreateTodo, handler)  # type: ignore[arg-type]
        assert registry.get_handler(CreateTodo) is handler

    def test_inner_errors_are_preserved(self) -> None:
        bus = MiddlewareAwareCommandBus(InProcessCommandBus(CommandRegistry()), Pipeline())
        with pytest.raises(HandlerNotFoundError, match="CreateTodo"):
            asyncio.run(bus.execute(CreateTodo("x")))
        with pytest.raises(InvalidRequestError):
            asyncio.run(bus.execute(None))  # type: ignore[arg-type]


class TestMiddlewareAwareQueryBus:
    def test_dispatches_through_pipeline(self) -> None:
        record: list[str] = []
        bus = MiddlewareAwareQueryBus(
            InProcessQueryBus(QueryRegistry()),
            Pipeline().add(make_recording_middleware("Q", record)),
        )
        bus.register(GetTodo, RecordingHandler({"id": "t-1"}))  # type: ignore[arg-type]
        assert asyncio.run(bus.execute(GetTodo("t-1"))) == {"id": "t-1"}
        assert record == ["Q:before", "Q:after"]
        assert isinstance(bus.inner, InProcessQueryBus)
