"""
Defines the `Result` container for type-safe error propagation.

A `Result` holds either a successful value of type `T` or an error of type `E`,
so that failures become an explicit part of a function's return type instead
of an exception raised through the caller. Since Python erases generic
parameters at run time, every instance also records its value type and error
type; `Result[int, KeyError]` remains usable as a static hint.

Construct results with `success` and `failure`, query them with `is_error`,
and extract payloads with `unwrap`, `unwrap_as` and `unwrap_error`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, Generic, TypeVar, get_args, get_origin

from . import config
from .coercion import coerce_value, type_name
from .errors import (
    MalformedResultError,
    NotAnErrorResultError,
    ResultError,
    TypeMismatchError,
)

# T represents the type of the success value.
# E represents the type of the error value.
T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


class _Empty:
    """Marker for an unpopulated slot, so that `None` stays a legal value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return config.MALFORMED_RESULT_STAND_IN


_EMPTY: Final = _Empty()


def _check_error_type(error_type: Any) -> None:
    if not (isinstance(error_type, type) and issubclass(error_type, BaseException)):
        raise TypeMismatchError(f"Error type must be an exception class, got {error_type!r}")


@dataclass(frozen=True, slots=True)
class ResultType:
    """Run-time descriptor of `Result[value_type, error_type]`."""

    value_type: Any
    error_type: type[BaseException]

    def __post_init__(self) -> None:
        _check_error_type(self.error_type)

    @classmethod
    def from_hint(cls, hint: Any) -> ResultType:
        """Build a descriptor from a `ResultType` or a subscripted `Result[S, E]`."""
        if isinstance(hint, ResultType):
            return hint
        if get_origin(hint) is Result:
            value_type, error_type = get_args(hint)
            return cls(value_type, error_type)
        if hint is Result:
            return cls(Any, config.DEFAULT_ERROR_TYPE)
        raise TypeMismatchError(f"{hint!r} does not describe a Result type")

    @staticmethod
    def is_result_hint(hint: Any) -> bool:
        return isinstance(hint, ResultType) or hint is Result or get_origin(hint) is Result

    def __str__(self) -> str:
        return f"Result[{type_name(self.value_type)}, {type_name(self.error_type)}]"


@dataclass(frozen=True, slots=True, repr=False)
class Result(Generic[T, E]):
    """
    Either a value of type `T` or an error of type `E`.

    Exactly one slot is populated in any result built with `success` or
    `failure`. Results are immutable.

    Attributes:
        value_type: The type hint of the value slot.
        error_type: The exception class of the error slot.
    """

    value_type: Any
    error_type: type[E]
    _value: Any
    _error: Any

    def __post_init__(self) -> None:
        _check_error_type(self.error_type)
        if self._value is not _EMPTY and self._error is not _EMPTY:
            raise MalformedResultError("A Result cannot hold both a value and an error")

    @classmethod
    def _malformed(cls, value_type: Any = Any, error_type: type[BaseException] = Exception) -> Result[Any, Any]:
        """A result holding neither a value nor an error. For failure-path tests only."""
        return cls(value_type, error_type, _EMPTY, _EMPTY)

    @property
    def type(self) -> ResultType:
        return ResultType(self.value_type, self.error_type)

    def has_value(self) -> bool:
        return self._value is not _EMPTY

    def is_error(self) -> bool:
        return self._error is not _EMPTY

    def is_malformed(self) -> bool:
        return not (self.has_value() or self.is_error())

    def unwrap(self) -> T:
        return unwrap(self)

    def unwrap_as(self, target: Any) -> Any:
        return unwrap_as(target, self)

    def unwrap_error(self) -> E:
        return unwrap_error(self)

    def __repr__(self) -> str:
        return render(self)

    __str__ = __repr__


def success(
    value: T,
    error_type: type[BaseException] = config.DEFAULT_ERROR_TYPE,
    *,
    value_type: Any = None,
) -> Result[T, Any]:
    """
    Create a Result holding `value`.

    Args:
        value: The successful value.
        error_type: The error type the result could have held instead.
        value_type: The declared value type. Defaults to `type(value)`.

    Returns:
        A value-holding Result. A value that does not fit a declared
        `value_type` is coerced to it, as `convert` would.

    Raises:
        TypeMismatchError: If `value` cannot be coerced to `value_type`.
    """
    if value_type is None:
        return Result(type(value), error_type, value, _EMPTY)
    return Result(value_type, error_type, coerce_value(value_type, value), _EMPTY)


def failure(error: BaseException | str = "", *, value_type: Any = Any) -> Result[Any, Any]:
    """
    Create a Result holding an error.

    Text is wrapped in the default `ResultError` kind; an exception instance
    is stored unchanged and its class becomes the result's error type.

    Args:
        error: The error, or a message for a generic error.
        value_type: The value type the result could have held instead.

    Returns:
        An error-holding Result.
    """
    if not isinstance(error, BaseException):
        error = ResultError(str(error))
    return Result(value_type, type(error), _EMPTY, error)


def is_error(x: Any) -> bool:
    """True for an exception instance or a Result holding an error."""
    if isinstance(x, BaseException):
        return True
    return isinstance(x, Result) and x.is_error()


def unwrap(x: Any) -> Any:
    """
    Extract the value from a Result.

    Arguments that are not Results are returned unchanged, so generic code can
    unwrap plain values and Results alike.

    Raises:
        The held error, if `x` holds one.
        MalformedResultError: If `x` holds neither a value nor an error.
    """
    if not isinstance(x, Result):
        return x
    if x.has_value():
        return x._value
    if x.is_error():
        raise x._error
    raise MalformedResultError(f"Empty {x.type} type")


def unwrap_as(target: Any, x: Any) -> Any:
    """Unwrap `x`, then coerce the value to `target`."""
    return coerce_value(target, unwrap(x))


def unwrap_error(x: Any) -> Any:
    """
    Extract the error from a Result.

    Exception instances are returned unchanged.

    Raises:
        NotAnErrorResultError: If `x` holds a value or is not an error at all.
        MalformedResultError: If `x` holds neither a value nor an error.
    """
    if isinstance(x, BaseException):
        return x
    if not isinstance(x, Result):
        raise NotAnErrorResultError(f"{x!r} is not an ErrorResult")
    if x.is_error():
        return x._error
    if x.is_malformed():
        raise MalformedResultError(f"Empty {x.type} type")
    raise NotAnErrorResultError(f"{render(x)} is not an ErrorResult")


def render(result: Result[Any, Any]) -> str:
    """Human-readable form of a Result. Never raises."""
    if result.has_value():
        return f"Result({_safe_repr(result._value)})"
    payload = result._error if result.is_error() else _EMPTY
    return f"ErrorResult({type_name(result.value_type)}, {_safe_repr(payload)})"


def _safe_repr(obj: Any) -> str:
    try:
        return repr(obj)
    except Exception:
        return f"<{type(obj).__name__} object>"


__all__ = [
    "Result",
    "ResultType",
    "failure",
    "is_error",
    "render",
    "success",
    "unwrap",
    "unwrap_as",
    "unwrap_error",
]
