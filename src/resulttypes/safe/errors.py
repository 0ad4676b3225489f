"""
Domain error kinds produced by the safe adapters.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import ModuleType
from typing import Any

from .. import config
from ..coercion import type_name
from ..common.ast_utils import ast_node_to_source, indent_source
from ..errors import ResultError, render_error
from .backtrace import Backtrace, capture_backtrace, format_backtrace
from .models import Diagnostic


def context_name(context: ModuleType | Mapping[str, Any]) -> str:
    """Display name of an evaluation context."""
    if isinstance(context, ModuleType):
        return context.__name__
    return str(context.get("__name__", config.ANONYMOUS_NAMESPACE))


class DiagnosticError(ResultError):
    """Structured diagnostics reported by a failed syntax parse."""

    def __init__(self, diagnostics: Sequence[Diagnostic], caused_by: BaseException | None = None) -> None:
        self.diagnostics = tuple(diagnostics)
        super().__init__("; ".join(str(d) for d in self.diagnostics), caused_by)


class ParseError(ResultError):
    """
    An object could not be parsed into a target type.

    Attributes:
        target: The type the source was to be parsed into.
        source: The object that failed to parse.
        msg: Description of the failure.
        bt: Call stack at the point of failure.
        caused_by: The underlying error, if any.
    """

    def __init__(
        self,
        target: Any,
        source: Any,
        msg: str,
        bt: Backtrace | None = None,
        caused_by: BaseException | None = None,
    ) -> None:
        super().__init__(msg, caused_by)
        self.target = target
        self.source = source
        self.bt = capture_backtrace(skip=2) if bt is None else bt

    def __str__(self) -> str:
        return f"Failed to parse object {self.source!r} into type {type_name(self.target)!r}: {self.msg}"

    def headline(self) -> str:
        return f"{type(self).__name__}: {self}"

    def render(self) -> str:
        text = self.headline()
        trace = format_backtrace(self.bt)
        if trace:
            text = f"{text}\n{trace}"
        if self.caused_by is not None:
            text = f"{text}\nCaused by:\n{render_error(self.caused_by)}"
        return text


class EvalError(ResultError):
    """
    An error raised while evaluating an expression.

    Attributes:
        context: The module or namespace the expression ran in.
        expr: The syntax node or source text that was evaluated.
        exc: The underlying error.
        bt: The frames `exc` travelled through.
    """

    def __init__(
        self,
        context: ModuleType | Mapping[str, Any],
        expr: Any,
        exc: BaseException,
        bt: Backtrace | None = None,
    ) -> None:
        super().__init__(f"Error while evaluating expression in module `{context_name(context)}`", exc)
        self.context = context
        self.expr = expr
        self.exc = exc
        self.bt = capture_backtrace(skip=2) if bt is None else bt

    def render(self) -> str:
        expression = self.expr if isinstance(self.expr, str) else ast_node_to_source(self.expr)
        text = (
            f"{type(self).__name__}: Error while evaluating expression:\n\n"
            f"{indent_source(expression)}\n\n"
            f"in module `{context_name(self.context)}`, caused by:\n\n"
            f"{render_error(self.exc)}"
        )
        trace = format_backtrace(self.bt)
        return f"{text}\n{trace}" if trace else text


__all__ = ["DiagnosticError", "EvalError", "ParseError", "context_name"]
