import numbers
from typing import Any

import pytest

from resulttypes import (
    InexactConversionError,
    Result,
    ResultType,
    TypeMismatchError,
    convert,
    failure,
    success,
    unwrap,
    unwrap_error,
)


def test_value_to_result() -> None:
    x = convert(Result[int, Exception], 2.0)
    assert unwrap(x) == 2 and isinstance(unwrap(x), int)
    assert x.type == ResultType(int, Exception)


def test_error_to_result() -> None:
    err = ZeroDivisionError()
    x = convert(ResultType(int, ZeroDivisionError), err)
    assert unwrap_error(x) is err
    assert x.type == ResultType(int, ZeroDivisionError)


def test_foreign_error_is_rejected() -> None:
    with pytest.raises(TypeMismatchError):
        convert(Result[int, ZeroDivisionError], KeyError("k"))


def test_foreign_error_can_be_an_any_value() -> None:
    err = KeyError("k")
    x = convert(Result[Any, ZeroDivisionError], err)
    assert not x.is_error()
    assert unwrap(x) is err


def test_value_that_does_not_fit_is_rejected() -> None:
    with pytest.raises(TypeMismatchError):
        convert(Result[int, Exception], "two")


def test_same_type_is_identity() -> None:
    r = failure(ZeroDivisionError(), value_type=int)
    assert convert(Result[int, ZeroDivisionError], r) is r

    r = success(2, ResultType(int, Exception).error_type)
    assert convert(ResultType(int, Exception), r) is r


def test_widening_keeps_the_error() -> None:
    err = KeyError("foo")
    r = failure(err, value_type=int)
    x = convert(Result[numbers.Real, Exception], r)
    assert x.type == ResultType(numbers.Real, Exception)
    with pytest.raises(KeyError) as info:
        unwrap(x)
    assert info.value is err


def test_widening_keeps_the_value() -> None:
    r = success(2, KeyError)
    x = convert(Result[numbers.Real, Exception], r)
    assert x.type == ResultType(numbers.Real, Exception)
    assert unwrap(x) == 2


def test_numeric_widening_converts_the_value() -> None:
    r = success(2, ZeroDivisionError)
    x = convert(Result[float, Exception], r)
    value = unwrap(x)
    assert value == 2.0 and isinstance(value, float)


def test_numeric_widening_rounds_but_rejects_overflow() -> None:
    x = convert(Result[float, Exception], success(2**53 + 1))
    assert unwrap(x) == float(2**53)
    with pytest.raises(InexactConversionError):
        convert(Result[float, Exception], success(10**400))


def test_narrowing_is_rejected() -> None:
    with pytest.raises(TypeMismatchError):
        convert(Result[int, Exception], success(2.5))
    with pytest.raises(TypeMismatchError):
        convert(Result[int, ZeroDivisionError], success(2))


def test_result_to_plain_type_unwraps() -> None:
    assert convert(float, success(2)) == 2.0
    with pytest.raises(ZeroDivisionError):
        convert(int, failure(ZeroDivisionError(), value_type=int))


def test_malformed_result_converts_to_malformed() -> None:
    x = convert(Result[float, Exception], Result._malformed(int, KeyError))
    assert x.is_malformed()
    assert x.type == ResultType(float, Exception)
