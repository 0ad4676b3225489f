"""
Safe adapters: parsing and evaluation functions that return a `Result`
instead of raising. Their names start with `safe_`; the raising variants
(`parse_syntax`, `parse_all_syntax`) are provided for call sites that prefer
exceptions.
"""

from .backtrace import Backtrace, capture_backtrace, catch_backtrace
from .errors import DiagnosticError, EvalError, ParseError
from .evaluation import safe_eval
from .models import Diagnostic, DiagnosticKind, ParseMode, SyntaxOptions
from .parsing import (
    BasicParser,
    TextParser,
    collect_diagnostics,
    parse_all_syntax,
    parse_syntax,
    register_parser,
    safe_parse,
    safe_parse_syntax,
    try_parse,
)

__all__ = [
    "Backtrace",
    "BasicParser",
    "Diagnostic",
    "DiagnosticError",
    "DiagnosticKind",
    "EvalError",
    "ParseError",
    "ParseMode",
    "SyntaxOptions",
    "TextParser",
    "capture_backtrace",
    "catch_backtrace",
    "collect_diagnostics",
    "parse_all_syntax",
    "parse_syntax",
    "register_parser",
    "safe_eval",
    "safe_parse",
    "safe_parse_syntax",
    "try_parse",
]
