"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from taskbus.kernel.errors import (
    ApplicationError,
    BaseError,
    DispatchError,
    DomainError,
    ForbiddenError,
    HandlerNotFoundError,
    InvalidHandlerError,
    InvalidRequestError,
    InvalidTransitionError,
    NotFoundError,
    TimeoutError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        assert BaseError("something went wrong").message == "something went wrong"

    def test_default_and_custom_code(self) -> None:
        assert BaseError("m").code == "taskbus_error"
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(NotFoundError("Todo")) == "NotFoundError('Todo not found', code='not_found')"

    def test_raise_from_sets_cause(self) -> None:
        with pytest.raises(BaseError) as info:
            try:
                raise KeyError("t-1")
            except KeyError as exc:
                raise BaseError("lookup failed") from exc
        assert isinstance(info.value.cause, KeyError)

    def test_log_fields(self) -> None:
        assert BaseError("m").log_fields() == {"error_code": "taskbus_error"}
        assert BaseError("m", detail={"x": 1}).log_fields() == {"error_code": "taskbus_error", "error_detail": {"x": 1}}


class TestDomainErrors:
    def test_hierarchy(self) -> None:
        for cls in (ValidationError, NotFoundError, InvalidTransitionError):
            assert issubclass(cls, DomainError)

    def test_validation_errors_in_dict(self) -> None:
        err = ValidationError("bad", errors=[{"field": "title"}])
        assert err.to_dict()["errors"] == [{"field": "title"}]

    def test_not_found_message(self) -> None:
        assert NotFoundError("Todo").message == "Todo not found"
        assert NotFoundError("Todo", "t-1").message == "Todo 't-1' not found"
        assert NotFoundError("Todo", "t-1").detail == {"resource": "Todo", "identifier": "t-1"}

    def test_required_shortcut(self) -> None:
        err = ValidationError.required("user_id")
        assert err.message == "user_id is required"
        assert err.fields == ["user_id"]

    def test_invalid_transition(self) -> None:
        err = InvalidTransitionError("COMPLETED", "IN_PROGRESS")
        assert err.message == "Cannot move a COMPLETED todo to IN_PROGRESS"
        assert err.detail == {"from": "COMPLETED", "to": "IN_PROGRESS"}


class TestDispatchErrors:
    def test_hierarchy(self) -> None:
        for cls in (InvalidRequestError, InvalidHandlerError, HandlerNotFoundError):
            assert issubclass(cls, DispatchError)
            assert issubclass(cls, ApplicationError)

    def test_invalid_request_message(self) -> None:
        err = InvalidRequestError("Command")
        assert err.message == "Command cannot be None"
        assert err.code == "invalid_request"
        assert isinstance(err, ValueError)

    def test_invalid_handler_message(self) -> None:
        err = InvalidHandlerError()
        assert err.message == "Handler cannot be None"
        assert isinstance(err, ValueError)

    def test_handler_not_found_names_the_type(self) -> None:
        class ArchiveTodo:
            pass

        err = HandlerNotFoundError("Command", ArchiveTodo)
        assert err.message == "No handler registered for command: ArchiveTodo"
        assert err.request_type is ArchiveTodo
        assert "ArchiveTodo" in err.detail["request_type"]
        with pytest.raises(LookupError):
            raise err


class TestApplicationErrors:
    def test_forbidden_defaults(self) -> None:
        err = ForbiddenError(resource="t-1")
        assert err.message == "Access denied"
        assert err.resource == "t-1"

    def test_timeout_code(self) -> None:
        assert TimeoutError("slow").code == "timeout"
