import pytest

from resulttypes import (
    EarlyReturn,
    Result,
    ResultType,
    TypeMismatchError,
    coerce_return,
    failure,
    success,
    try_unwrap,
    unwrap,
    unwrap_error,
)


@coerce_return(int, ZeroDivisionError)
def integer_division(x: int, y: int) -> Result[int, ZeroDivisionError]:
    if y == 0:
        return ZeroDivisionError()
    return x // y


def test_return_values_are_coerced() -> None:
    x = integer_division(3, 2)
    assert x.type == ResultType(int, ZeroDivisionError)
    assert unwrap(x) == 1


def test_returned_errors_are_coerced() -> None:
    y = integer_division(1, 0)
    assert y.type == ResultType(int, ZeroDivisionError)
    assert isinstance(unwrap_error(y), ZeroDivisionError)


def test_capture_turns_raised_errors_into_results() -> None:
    @coerce_return(int, ZeroDivisionError, capture=True)
    def divide(x: int, y: int) -> Result[int, ZeroDivisionError]:
        return x // y

    assert unwrap(divide(4, 2)) == 2
    assert isinstance(unwrap_error(divide(1, 0)), ZeroDivisionError)


def test_without_capture_raised_errors_propagate() -> None:
    @coerce_return(int, ZeroDivisionError)
    def divide(x: int, y: int) -> Result[int, ZeroDivisionError]:
        return x // y

    with pytest.raises(ZeroDivisionError):
        divide(1, 0)


def test_returning_the_wrong_type_fails_at_the_boundary() -> None:
    @coerce_return(int, ZeroDivisionError)
    def wrong() -> Result[int, ZeroDivisionError]:
        return "not a number"  # type: ignore[return-value]

    with pytest.raises(TypeMismatchError):
        wrong()


def test_try_unwrap_returns_the_value() -> None:
    @coerce_return(int, ZeroDivisionError)
    def halve_quotient(x: int, y: int) -> Result[int, ZeroDivisionError]:
        return try_unwrap(integer_division(x, y)) // 2

    assert unwrap(halve_quotient(8, 2)) == 2


def test_try_unwrap_returns_early_with_the_error() -> None:
    reached = []

    @coerce_return(int, ZeroDivisionError)
    def halve_quotient(x: int, y: int) -> Result[int, ZeroDivisionError]:
        quotient = try_unwrap(integer_division(x, y))
        reached.append(quotient)
        return quotient // 2

    result = halve_quotient(1, 0)
    assert isinstance(unwrap_error(result), ZeroDivisionError)
    assert reached == []


def test_try_unwrap_with_fallback_error() -> None:
    replacement = LookupError("missing")

    @coerce_return(str, LookupError)
    def first_key(x: Result[str, KeyError]) -> Result[str, LookupError]:
        return try_unwrap(x, replacement)

    assert unwrap_error(first_key(failure(KeyError("k"), value_type=str))) is replacement
    assert unwrap(first_key(success("a", KeyError))) == "a"


def test_try_unwrap_outside_a_coerce_return_function() -> None:
    err = KeyError("k")
    with pytest.raises(EarlyReturn) as info:
        try_unwrap(failure(err))
    assert info.value.error is err
    assert try_unwrap(5) == 5
