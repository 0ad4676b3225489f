"""
Control-flow helpers for functions that return Results.

`coerce_return` lets a function body return bare values or bare exceptions
and converts them to the declared Result type at the boundary. Inside such a
function, `try_unwrap` bails out of the function with the error of an error
Result, the way an early `return` would.

    @coerce_return(int, ZeroDivisionError)
    def halve_quotient(x: int, y: int) -> Result[int, ZeroDivisionError]:
        if y == 0:
            return ZeroDivisionError()
        quotient = try_unwrap(safe_divide(x, y))
        return quotient // 2
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, Final

from .conversion import convert
from .errors import TypeMismatchError
from .result import _EMPTY, Result, ResultType, is_error, unwrap, unwrap_error

logger = logging.getLogger(__name__)

_NO_FALLBACK: Final = object()


class EarlyReturn(Exception):
    """Signal raised by `try_unwrap`; caught by the enclosing `coerce_return`."""

    def __init__(self, error: BaseException) -> None:
        super().__init__(error)
        self.error = error


def try_unwrap(x: Any, fallback: Any = _NO_FALLBACK) -> Any:
    """
    Unwrap `x`, or return early from the enclosing `coerce_return` function.

    Args:
        x: A Result or a plain value.
        fallback: Error to return instead of the one held by `x`.

    Returns:
        The unwrapped value when `x` is not an error.

    Raises:
        EarlyReturn: When `x` is an error. Escapes only if the caller is not
            decorated with `coerce_return`.
    """
    if is_error(x):
        raise EarlyReturn(unwrap_error(x) if fallback is _NO_FALLBACK else fallback)
    return unwrap(x)


def _error_result(target: ResultType, error: BaseException) -> Result[Any, Any]:
    if not isinstance(error, target.error_type):
        raise TypeMismatchError(f"Early return of {error!r} does not fit {target}")
    return Result(target.value_type, target.error_type, _EMPTY, error)


def coerce_return(
    value_type: Any = Any,
    error_type: type[BaseException] = Exception,
    *,
    capture: bool = False,
) -> Callable[[Callable[..., Any]], Callable[..., Result[Any, Any]]]:
    """
    Convert a function's return value to `Result[value_type, error_type]`.

    Args:
        value_type: Declared value type of the returned Result.
        error_type: Declared error type of the returned Result.
        capture: Also turn raised `error_type` exceptions into error Results.

    Returns:
        A decorator.
    """
    target = ResultType(value_type, error_type)

    def decorator(func: Callable[..., Any]) -> Callable[..., Result[Any, Any]]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Result[Any, Any]:
            try:
                returned = func(*args, **kwargs)
            except EarlyReturn as bail:
                logger.debug("%s returned early with %r", func.__qualname__, bail.error)
                return _error_result(target, bail.error)
            except error_type as exc:
                if not capture:
                    raise
                return _error_result(target, exc)
            return convert(target, returned)

        return wrapper

    return decorator


__all__ = ["EarlyReturn", "coerce_return", "try_unwrap"]
