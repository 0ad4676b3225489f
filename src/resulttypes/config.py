"""
Configuration for the resulttypes package.
"""

from typing import Final

# --- Result Defaults ---
DEFAULT_ERROR_TYPE: Final[type[Exception]] = Exception
MALFORMED_RESULT_STAND_IN: Final[str] = "<empty result>"

# --- Syntax Parsing ---
DEFAULT_SYNTAX_FILENAME: Final[str] = "none"
SYNTAX_FAILURE_MESSAGE: Final[str] = "Failed to parse string into Python syntax tree"
TRAILING_TEXT_MESSAGE: Final[str] = "unexpected text after parsing statement"
EMPTY_INPUT_MESSAGE: Final[str] = "no statement found in input"
# Substrings of SyntaxError messages raised for truncated input.
INCOMPLETE_INPUT_MARKERS: Final[tuple[str, ...]] = (
    "was never closed",
    "unexpected EOF",
    "incomplete input",
    "unterminated triple-quoted string",
    "expected an indented block",
)

# --- Value Parsing ---
PARSE_FAILURE_TEMPLATE: Final[str] = "Could not parse {source} into type {target}"
MISSING_PARSER_TEMPLATE: Final[str] = "No parser registered for type {target}"

# --- Evaluation ---
EVAL_FILENAME: Final[str] = "<safe_eval>"
ANONYMOUS_NAMESPACE: Final[str] = "<namespace>"

# --- Backtraces ---
# None keeps every frame.
BACKTRACE_LIMIT: Final[int | None] = None

# --- Runtime Type Checking ---
BEARTYPE_THIS_PACKAGE_ENV: Final[str] = "RESULTTYPES_BEARTYPE_THIS_PACKAGE"
BEARTYPE_ALL_ENV: Final[str] = "RESULTTYPES_BEARTYPE_ALL"

# --- UI Configuration ---
SUCCESS_BORDER_STYLE: Final[str] = "green"
FAILURE_BORDER_STYLE: Final[str] = "red"

# --- SSoT Enforcement ---
__all__ = [
    "ANONYMOUS_NAMESPACE",
    "BACKTRACE_LIMIT",
    "BEARTYPE_ALL_ENV",
    "BEARTYPE_THIS_PACKAGE_ENV",
    "DEFAULT_ERROR_TYPE",
    "DEFAULT_SYNTAX_FILENAME",
    "EMPTY_INPUT_MESSAGE",
    "EVAL_FILENAME",
    "FAILURE_BORDER_STYLE",
    "INCOMPLETE_INPUT_MARKERS",
    "MALFORMED_RESULT_STAND_IN",
    "MISSING_PARSER_TEMPLATE",
    "PARSE_FAILURE_TEMPLATE",
    "SUCCESS_BORDER_STYLE",
    "SYNTAX_FAILURE_MESSAGE",
    "TRAILING_TEXT_MESSAGE",
]
