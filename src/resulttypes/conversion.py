"""
The conversion lattice between Results, raw values and raw errors.

`convert` is the single entry point. Its target is either a Result type
(a `ResultType` or a subscripted `Result[S, E]`) or a plain type hint:

- Result to the same Result type: the instance itself.
- Result to a wider Result type: the payload is re-wrapped.
- Raw value to a Result type: the value is coerced and wrapped as a success.
- Raw error to a Result type: the error is wrapped as a failure.
- Result to a plain type: the value is unwrapped and coerced.

`promote_result_type` and friends compute the common Result type of
heterogeneous Results, for collections and generic pipelines.
"""

from collections.abc import Iterable
from typing import Any

from . import config
from .coercion import coerce_value, is_widening, join_error_types, join_types
from .errors import TypeMismatchError
from .result import _EMPTY, Result, ResultType, unwrap_as


def _rewrap(target: ResultType, result: Result[Any, Any]) -> Result[Any, Any]:
    if result.type == target:
        return result
    if not (
        is_widening(result.value_type, target.value_type)
        and issubclass(result.error_type, target.error_type)
    ):
        raise TypeMismatchError(f"Cannot convert {result.type} to {target}")
    value = coerce_value(target.value_type, result._value) if result.has_value() else _EMPTY
    return Result(target.value_type, target.error_type, value, result._error)


def _wrap_raw(target: ResultType, x: Any) -> Result[Any, Any]:
    if isinstance(x, target.error_type):
        return Result(target.value_type, target.error_type, _EMPTY, x)
    try:
        value = coerce_value(target.value_type, x)
    except TypeMismatchError as exc:
        if isinstance(x, BaseException):
            raise TypeMismatchError(
                f"Cannot convert error {x!r} to {target}: it is neither a "
                f"{target.error_type.__name__} nor a valid value"
            ) from exc
        raise
    return Result(target.value_type, target.error_type, value, _EMPTY)


def convert(target: Any, x: Any) -> Any:
    """
    Convert `x` to `target` following the Result conversion lattice.

    Args:
        target: A Result type (`ResultType` or `Result[S, E]`) or a plain type hint.
        x: A Result, a raw value or a raw error.

    Returns:
        The converted Result or value.

    Raises:
        TypeMismatchError: If no conversion exists.
        The held error, when unwrapping an error Result into a plain type.
    """
    if ResultType.is_result_hint(target):
        result_type = ResultType.from_hint(target)
        if isinstance(x, Result):
            return _rewrap(result_type, x)
        return _wrap_raw(result_type, x)
    return unwrap_as(target, x)


def promote_result_type(first: ResultType, second: ResultType) -> ResultType:
    """The smallest Result type both arguments convert into."""
    return ResultType(
        join_types(first.value_type, second.value_type),
        join_error_types(first.error_type, second.error_type),
    )


def common_result_type(results: Iterable[Result[Any, Any]]) -> ResultType:
    """
    The common Result type of a collection of Results.

    Value types and error types are joined over the whole collection at once,
    so the outcome does not depend on the order of `results`. An empty
    collection yields `Result[Any, Exception]`.
    """
    types = [result.type for result in results]
    if not types:
        return ResultType(Any, config.DEFAULT_ERROR_TYPE)
    return ResultType(
        join_types(*(t.value_type for t in types)),
        join_error_types(*(t.error_type for t in types)),
    )


def promote_results(results: Iterable[Result[Any, Any]]) -> list[Result[Any, Any]]:
    """Convert every Result in `results` to their common Result type."""
    materialized = list(results)
    target = common_result_type(materialized)
    return [_rewrap(target, result) for result in materialized]


__all__ = [
    "common_result_type",
    "convert",
    "promote_result_type",
    "promote_results",
]
