"""
Safe parsing of text into values and into Python syntax trees.

`safe_parse` turns text into numbers and other registered types;
`safe_parse_syntax` turns Python source into `ast` nodes. Both always return
a `Result` whose error slot holds a `ParseError`, never raising on bad input.
"""

import ast
import logging
from collections.abc import Callable
from decimal import Decimal
from fractions import Fraction
from typing import Any, Generic, NamedTuple, Protocol, TypeVar

from pydantic import ValidationError
from returns.result import safe

from .. import config
from ..coercion import type_name
from ..errors import TypeMismatchError
from ..result import Result, failure, success, unwrap
from .errors import DiagnosticError, ParseError
from .models import Diagnostic, DiagnosticKind, ParseMode, SyntaxOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TextParser(Protocol[T]):
    """Protocol for best-effort parsers: `None` signals failure."""

    def try_parse(self, *source: Any, **options: Any) -> T | None:
        """Parse the source arguments into a T, or return None."""
        ...


class BasicParser(Generic[T]):
    """Adapts a raising conversion function into a `TextParser`."""

    def __init__(self, convert: Callable[..., T]):
        self.convert = convert

    def try_parse(self, *source: Any, **options: Any) -> T | None:
        """Run the conversion on text arguments, absorbing any exception."""
        if not source or not all(isinstance(item, str) for item in source):
            return None
        return safe(self.convert)(*source, **options).value_or(None)


def _parse_bool(text: str) -> bool:
    match text.strip().lower():
        case "true" | "1":
            return True
        case "false" | "0":
            return False
        case _:
            raise ValueError(f"invalid literal for bool: {text!r}")


_PARSERS: dict[type, TextParser[Any]] = {
    int: BasicParser(int),
    float: BasicParser(float),
    complex: BasicParser(complex),
    bool: BasicParser(_parse_bool),
    Fraction: BasicParser(Fraction),
    Decimal: BasicParser(Decimal),
}


def register_parser(target: type, parser: TextParser[Any]) -> None:
    """Make `safe_parse` and `try_parse` support `target`."""
    _PARSERS[target] = parser


def registered_types() -> tuple[type, ...]:
    return tuple(_PARSERS)


def try_parse(target: type, *source: Any, **options: Any) -> Any | None:
    """
    Best-effort parse of `source` into `target`.

    Returns:
        The parsed value, or None if parsing failed or `target` has no parser.
    """
    parser = _PARSERS.get(target)
    if parser is None:
        return None
    return parser.try_parse(*source, **options)


def safe_parse(target: type, *source: Any, **options: Any) -> Result[Any, ParseError]:
    """
    Parse `source` into `target`, returning a Result instead of raising.

    Args:
        target: The type to parse into.
        *source: The text to parse, as it would be passed to `target`.
        **options: Parser options, such as `base` for `int`.

    Returns:
        `Result[target, ParseError]` holding the parsed value or a ParseError
        that records `target`, the `source` tuple and the current stack.
    """
    if target not in _PARSERS:
        msg = config.MISSING_PARSER_TEMPLATE.format(target=type_name(target))
        logger.debug(msg)
        return failure(ParseError(target, source, msg), value_type=target)

    parsed = try_parse(target, *source, **options)
    if parsed is None:
        msg = config.PARSE_FAILURE_TEMPLATE.format(
            source="".join(str(item) for item in source), target=type_name(target)
        )
        logger.debug(msg)
        return failure(ParseError(target, source, msg), value_type=target)
    return success(parsed, ParseError, value_type=target)


# ---------------------------
# Python syntax


class SyntaxReport(NamedTuple):
    """Outcome of a syntax parse that reports problems instead of raising."""

    tree: ast.Module | None
    diagnostics: tuple[Diagnostic, ...]
    exception: BaseException | None


def collect_diagnostics(text: str, options: SyntaxOptions) -> SyntaxReport:
    """
    Parse `text` with `ast.parse`, reporting failures as diagnostics.

    In statement mode, input holding anything but a single statement is
    reported as well.
    """
    try:
        tree = ast.parse(
            text,
            filename=options.filename,
            mode="exec",
            type_comments=options.type_comments,
            feature_version=options.feature_version,
        )
    except SyntaxError as exc:
        return SyntaxReport(None, (Diagnostic.from_syntax_error(exc),), exc)
    except (ValueError, RecursionError) as exc:
        # Null bytes on older interpreters, or nesting too deep for the parser.
        return SyntaxReport(None, (Diagnostic(kind=DiagnosticKind.ERROR, message=str(exc)),), exc)

    if options.mode is ParseMode.ALL:
        return SyntaxReport(tree, (), None)
    if not tree.body:
        return SyntaxReport(
            tree, (Diagnostic(kind=DiagnosticKind.ERROR, message=config.EMPTY_INPUT_MESSAGE),), None
        )
    if len(tree.body) > 1:
        extra = tree.body[1]
        diagnostic = Diagnostic(
            kind=DiagnosticKind.ERROR,
            message=config.TRAILING_TEXT_MESSAGE,
            lineno=extra.lineno,
            offset=extra.col_offset + 1,
        )
        return SyntaxReport(tree, (diagnostic,), None)
    return SyntaxReport(tree, (), None)


def _syntax_options(**options: Any) -> SyntaxOptions:
    try:
        return SyntaxOptions(**options)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise TypeMismatchError(f"Invalid syntax options: {problems}") from exc


def _parsed_node(tree: ast.Module, mode: ParseMode) -> ast.AST:
    if mode is ParseMode.ALL:
        return tree
    statement = tree.body[0]
    return statement.value if isinstance(statement, ast.Expr) else statement


def safe_parse_syntax(
    text: str,
    mode: ParseMode | str = ParseMode.STATEMENT,
    filename: str = config.DEFAULT_SYNTAX_FILENAME,
    **options: Any,
) -> Result[ast.AST, ParseError]:
    """
    Parse Python source into a syntax tree, returning a Result.

    Malformed input and incomplete input are both parse failures.

    Args:
        text: The source code.
        mode: `"statement"` for exactly one statement, `"all"` for a module.
        filename: Name reported in diagnostics.
        **options: `feature_version` and `type_comments`, as for `ast.parse`.

    Returns:
        In statement mode, the statement node, or the expression node of an
        expression statement. In `all` mode, the `ast.Module`. On failure, a
        ParseError caused by a DiagnosticError.

    Raises:
        TypeMismatchError: If the options are unknown or of the wrong type.
    """
    settings = _syntax_options(mode=mode, filename=filename, **options)
    report = collect_diagnostics(text, settings)
    if report.tree is None or report.diagnostics:
        cause = DiagnosticError(report.diagnostics, report.exception)
        logger.debug("Could not parse %s: %s", settings.filename, cause.msg)
        return failure(
            ParseError(ast.AST, text, config.SYNTAX_FAILURE_MESSAGE, caused_by=cause),
            value_type=ast.AST,
        )
    return success(_parsed_node(report.tree, settings.mode), ParseError, value_type=ast.AST)


def parse_syntax(
    text: str,
    mode: ParseMode | str = ParseMode.STATEMENT,
    filename: str = config.DEFAULT_SYNTAX_FILENAME,
    **options: Any,
) -> ast.AST:
    """Like `safe_parse_syntax`, but raises the ParseError."""
    return unwrap(safe_parse_syntax(text, mode, filename, **options))


def parse_all_syntax(
    text: str, filename: str = config.DEFAULT_SYNTAX_FILENAME, **options: Any
) -> ast.Module:
    """Parse a whole module of Python source, raising ParseError on failure."""
    return parse_syntax(text, ParseMode.ALL, filename, **options)


__all__ = [
    "BasicParser",
    "SyntaxReport",
    "TextParser",
    "collect_diagnostics",
    "parse_all_syntax",
    "parse_syntax",
    "register_parser",
    "registered_types",
    "safe_parse",
    "safe_parse_syntax",
    "try_parse",
]
