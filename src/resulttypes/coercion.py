"""
Value-level coercion and type joins.

These are the building blocks of the Result conversion lattice: converting a
single payload to a target type hint, deciding whether one hint widens into
another, and computing the smallest common type of two hints.
"""

import numbers
from fractions import Fraction
from typing import Any, Final

from beartype.door import is_bearable, is_subhint
from beartype.roar import BeartypeException

from .errors import InexactConversionError, TypeMismatchError

# Ordered from narrowest to widest. Conversions up the tower always succeed.
_NUMERIC_TOWER: Final[tuple[type, ...]] = (bool, int, Fraction, float, complex)
# Conversions that must round-trip exactly. Floating-point targets round to
# the nearest representable value instead.
_EXACT_TARGETS: Final[tuple[type, ...]] = (bool, int, Fraction)


def type_name(hint: Any) -> str:
    """Short display name for a type hint."""
    if hint is Any:
        return "Any"
    if isinstance(hint, type):
        return hint.__name__
    return repr(hint).replace("typing.", "")


def _numeric_rank(hint: Any) -> int | None:
    return _NUMERIC_TOWER.index(hint) if hint in _NUMERIC_TOWER else None


def _is_top(hint: Any) -> bool:
    return hint is Any or hint is object


def _bearable(value: Any, hint: Any) -> bool:
    try:
        return is_bearable(value, hint)
    except BeartypeException:
        return False


def _convert_number(target: type, value: Any) -> Any:
    def mismatch() -> TypeMismatchError:
        return TypeMismatchError(
            f"Cannot convert {value!r} of type {type_name(type(value))} to {type_name(target)}"
        )

    try:
        if target is complex:
            return complex(value)
        source = value
        if isinstance(source, numbers.Complex) and not isinstance(source, numbers.Real):
            if source.imag:
                raise InexactConversionError(
                    f"Cannot convert {value!r} to {type_name(target)} without dropping its imaginary part"
                )
            source = source.real
        converted = target(source)
    except OverflowError as exc:
        raise InexactConversionError(
            f"{type_name(type(value))} value is out of range for {type_name(target)}"
        ) from exc
    except (ArithmeticError, TypeError, ValueError) as exc:
        if isinstance(exc, TypeMismatchError):
            raise
        raise mismatch() from exc

    if target in _EXACT_TARGETS and converted != value:
        raise InexactConversionError(f"Converting {value!r} to {type_name(target)} is inexact")
    return converted


def coerce_value(target: Any, value: Any) -> Any:
    """
    Convert a plain value to the given type hint.

    Values that already satisfy the hint are returned unchanged. Numbers are
    converted along the numeric tower; narrowing conversions must be exact.

    Args:
        target: The type hint to convert to.
        value: The value to convert.

    Returns:
        The value, converted where necessary.

    Raises:
        TypeMismatchError: If no conversion exists.
        InexactConversionError: If a numeric conversion would lose information.
    """
    if _is_top(target) or _bearable(value, target):
        return value
    if _numeric_rank(target) is not None and isinstance(value, numbers.Number):
        return _convert_number(target, value)
    raise TypeMismatchError(
        f"Cannot convert {value!r} of type {type_name(type(value))} to {type_name(target)}"
    )


def is_widening(source: Any, target: Any) -> bool:
    """Whether every value of hint `source` is acceptable as a value of hint `target`."""
    if _is_top(target):
        return True
    if source is Any:
        return False
    source_rank, target_rank = _numeric_rank(source), _numeric_rank(target)
    if source_rank is not None and target_rank is not None:
        return source_rank <= target_rank
    if isinstance(source, type) and isinstance(target, type):
        return issubclass(source, target)
    try:
        return is_subhint(source, target)
    except BeartypeException:
        return source == target


def _sort_key(hint: Any) -> tuple[str, str]:
    if isinstance(hint, type):
        return hint.__module__, hint.__qualname__
    return "", repr(hint)


def common_base(*classes: type) -> type:
    """
    The most derived class every argument inherits from.

    With multiple inheritance several unrelated bases can be equally near.
    Each of them is a valid answer; the first in `(module, qualname)` order
    is returned.
    """
    first, *rest = classes
    candidates = [cls for cls in first.__mro__ if all(issubclass(other, cls) for other in rest)]
    minimal = [
        cls
        for cls in candidates
        if not any(other is not cls and issubclass(other, cls) for other in candidates)
    ]
    return min(minimal, key=_sort_key)


def join_types(*hints: Any) -> Any:
    """
    The smallest type hint all arguments widen into.

    Numbers promote along the numeric tower, related hints join to the widest
    one, and unrelated classes join to their nearest common base class.
    `Any` is returned when nothing narrower than `object` is shared. The
    join is computed over all hints at once, so argument order never matters.
    """
    distinct = list(dict.fromkeys(hints))
    if len(distinct) == 1:
        return distinct[0]
    if any(hint is Any for hint in distinct):
        return Any
    ranks = [_numeric_rank(hint) for hint in distinct]
    if all(rank is not None for rank in ranks):
        return _NUMERIC_TOWER[max(ranks)]
    upper = [
        hint
        for hint in distinct
        if all(is_widening(other, hint) for other in distinct)
    ]
    if upper:
        return min(upper, key=_sort_key)
    if all(isinstance(hint, type) for hint in distinct):
        base = common_base(*distinct)
        return Any if base is object else base
    return Any


def join_error_types(*error_types: type[BaseException]) -> type[BaseException]:
    """The nearest exception class all error types derive from."""
    return common_base(*error_types)


__all__ = [
    "coerce_value",
    "common_base",
    "is_widening",
    "join_error_types",
    "join_types",
    "type_name",
]
