"""
Error kinds used by the Result container.

Every error kind carries a human-readable message and an optional cause, and
can render itself, cause chain included, through `render()`. `render_error`
applies the same rendering to arbitrary exceptions so that foreign errors
nested inside a chain are never lost.
"""

from __future__ import annotations

import traceback
from typing import Protocol, runtime_checkable


@runtime_checkable
class ErrorKind(Protocol):
    """Capability shared by every error a Result can carry."""

    @property
    def message(self) -> str: ...

    @property
    def cause(self) -> BaseException | None: ...

    def render(self) -> str: ...


class ResultError(Exception):
    """The default, message-only error kind."""

    def __init__(self, msg: str = "", caused_by: BaseException | None = None) -> None:
        super().__init__(msg)
        self.msg = msg
        self.caused_by = caused_by
        if caused_by is not None:
            self.__cause__ = caused_by

    @property
    def message(self) -> str:
        return self.msg

    @property
    def cause(self) -> BaseException | None:
        return self.caused_by

    def headline(self) -> str:
        """The first line of the rendering, without the cause chain."""
        return f"{type(self).__name__}: {self.message}" if self.message else type(self).__name__

    def render(self) -> str:
        return _append_cause(self.headline(), self.cause)


class MalformedResultError(ResultError):
    """A Result holds neither a value nor an error."""


class NotAnErrorResultError(ResultError):
    """An error was requested from a Result that holds a value."""


class TypeMismatchError(ResultError, TypeError):
    """No conversion exists between a source and a target type."""


class InexactConversionError(TypeMismatchError):
    """A numeric conversion would lose information."""


def _append_cause(text: str, cause: BaseException | None) -> str:
    if cause is None:
        return text
    return f"{text}\nCaused by:\n{render_error(cause)}"


def render_error(error: BaseException) -> str:
    """
    Render any exception to text, following its cause chain.

    Error kinds render themselves. Other exceptions use their standard
    one-line form and then follow `__cause__`.

    Args:
        error: The exception to render.

    Returns:
        The rendering. Never raises.
    """
    if isinstance(error, ErrorKind):
        try:
            return error.render()
        except Exception:
            return repr(error)
    headline = "".join(traceback.format_exception_only(type(error), error)).rstrip()
    return _append_cause(headline, error.__cause__)


__all__ = [
    "ErrorKind",
    "InexactConversionError",
    "MalformedResultError",
    "NotAnErrorResultError",
    "ResultError",
    "TypeMismatchError",
    "render_error",
]
