"""
Data models for the safe adapters: parse modes, options and diagnostics.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .. import config


class ImmutableModel(BaseModel):
    """Base class for immutable Pydantic models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
    )


class ParseMode(str, Enum):
    """How much of the input a syntax parse consumes."""

    STATEMENT = "statement"
    ALL = "all"


class DiagnosticKind(str, Enum):
    """Category of a syntax diagnostic. Both categories are parse failures."""

    ERROR = "error"
    INCOMPLETE = "incomplete"


class Diagnostic(ImmutableModel):
    """
    A structured syntax problem.

    Attributes:
        kind: Whether the input is malformed or merely truncated.
        message: Description of the problem.
        lineno: 1-based line of the problem, if known.
        offset: 1-based column of the problem, if known.
        text: The offending source line, if known.
    """

    kind: DiagnosticKind
    message: str
    lineno: int | None = None
    offset: int | None = None
    text: str | None = None

    @classmethod
    def from_syntax_error(cls, exc: SyntaxError) -> Diagnostic:
        message = exc.msg or str(exc)
        incomplete = any(marker in message for marker in config.INCOMPLETE_INPUT_MARKERS)
        return cls(
            kind=DiagnosticKind.INCOMPLETE if incomplete else DiagnosticKind.ERROR,
            message=message,
            lineno=exc.lineno,
            offset=exc.offset,
            text=exc.text.rstrip("\n") if exc.text else None,
        )

    def __str__(self) -> str:
        location = f"{self.lineno}:{self.offset}: " if self.lineno is not None else ""
        return f"{location}{self.kind.value}: {self.message}"


class SyntaxOptions(ImmutableModel):
    """Options accepted by `safe_parse_syntax` and forwarded by `safe_eval`."""

    mode: ParseMode = ParseMode.STATEMENT
    filename: str = Field(default=config.DEFAULT_SYNTAX_FILENAME, min_length=1)
    feature_version: tuple[int, int] | None = None
    type_comments: bool = False


__all__ = ["Diagnostic", "DiagnosticKind", "ImmutableModel", "ParseMode", "SyntaxOptions"]
