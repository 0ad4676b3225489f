from typing import Any

import pytest
from returns.result import Success

from resulttypes import (
    MalformedResultError,
    Result,
    ResultError,
    ResultType,
    TypeMismatchError,
    failure,
    from_returns,
    is_error,
    success,
    unwrap,
    unwrap_error,
)


def test_success_defaults_to_exception_error_type() -> None:
    x = success(2)
    assert isinstance(x, Result)
    assert x.type == ResultType(int, Exception)
    assert unwrap(x) == 2
    assert not is_error(x)


def test_success_with_error_type() -> None:
    x = success(2, ZeroDivisionError)
    assert x.type == ResultType(int, ZeroDivisionError)
    assert unwrap(x) == 2


def test_success_can_hold_none() -> None:
    x = success(None)
    assert x.has_value()
    assert unwrap(x) is None
    assert not is_error(x)


def test_failure_from_message_wraps_generic_error() -> None:
    x = failure("Basic Error", value_type=int)
    assert is_error(x)
    assert x.type == ResultType(int, ResultError)
    e = unwrap_error(x)
    assert isinstance(e, ResultError)
    assert e.msg == "Basic Error"


def test_failure_without_arguments() -> None:
    x = failure()
    assert x.type == ResultType(Any, ResultError)
    assert unwrap_error(x).msg == ""


def test_failure_with_typed_error() -> None:
    err = ZeroDivisionError()
    x = failure(err, value_type=int)
    assert x.type == ResultType(int, ZeroDivisionError)
    assert unwrap_error(x) is err


def test_error_type_must_be_an_exception_class() -> None:
    with pytest.raises(TypeMismatchError):
        success(2, int)  # type: ignore[arg-type]


def test_results_are_immutable() -> None:
    x = success(2)
    with pytest.raises(AttributeError):
        x.value_type = float  # type: ignore[misc]


def test_result_type_from_subscripted_hint() -> None:
    assert ResultType.from_hint(Result[int, KeyError]) == ResultType(int, KeyError)
    assert str(ResultType(int, KeyError)) == "Result[int, KeyError]"
    with pytest.raises(TypeMismatchError):
        ResultType.from_hint(int)


def test_result_cannot_hold_a_value_and_an_error() -> None:
    with pytest.raises(MalformedResultError):
        Result(int, Exception, 1, KeyError())


def test_declared_value_type_is_enforced() -> None:
    with pytest.raises(TypeMismatchError):
        success("not an int", value_type=int)
    with pytest.raises(TypeMismatchError):
        from_returns(Success("not an int"), value_type=int)


def test_declared_value_type_coerces_numbers() -> None:
    x = success(2, value_type=float)
    assert x.type == ResultType(float, Exception)
    assert unwrap(x) == 2.0 and isinstance(unwrap(x), float)
    assert unwrap(success(True, value_type=Any)) is True
