"""
Bridges between `Result` and the `returns` library's containers.
"""

from typing import Any

from returns.result import Failure, Success
from returns.result import Result as ReturnsResult

from . import config
from .errors import MalformedResultError, ResultError
from .result import Result, failure, success, unwrap, unwrap_error


def to_returns(result: Result[Any, Any]) -> ReturnsResult[Any, BaseException]:
    """Convert a Result into `Success(value)` or `Failure(error)`."""
    if result.is_malformed():
        raise MalformedResultError(f"Cannot convert empty {result.type} type")
    if result.is_error():
        return Failure(unwrap_error(result))
    return Success(unwrap(result))


def from_returns(
    container: ReturnsResult[Any, Any],
    value_type: Any = Any,
    error_type: type[BaseException] = config.DEFAULT_ERROR_TYPE,
) -> Result[Any, Any]:
    """
    Convert a `returns` container into a Result.

    Failure payloads that are not exceptions, such as the error strings used
    throughout `returns`-based code, are wrapped in `ResultError`. A failure's
    error type is the class of its payload; `error_type` only applies to
    successes.
    """
    match container:
        case Success():
            return success(container.unwrap(), error_type, value_type=value_type)
        case Failure():
            error = container.failure()
            if not isinstance(error, BaseException):
                error = ResultError(str(error))
            return failure(error, value_type=value_type)
        case _:
            raise TypeError(f"Expected a returns Result, got {type(container).__name__}")


__all__ = ["from_returns", "to_returns"]
