"""
Safe evaluation of Python syntax trees and source text.
"""

import ast
import logging
from types import ModuleType
from typing import Any

from returns.result import Failure, safe

from .. import config
from ..result import Result, failure, is_error, success, unwrap, unwrap_error
from .backtrace import catch_backtrace
from .errors import EvalError, context_name
from .parsing import safe_parse_syntax

logger = logging.getLogger(__name__)


def _namespace(context: ModuleType | dict[str, Any]) -> dict[str, Any]:
    return vars(context) if isinstance(context, ModuleType) else context


def _compile_expression(node: ast.expr) -> Any:
    tree = ast.fix_missing_locations(ast.Expression(body=node))
    return compile(tree, config.EVAL_FILENAME, "eval")


def _run_statements(statements: list[ast.stmt], namespace: dict[str, Any]) -> Any:
    """Execute statements; a trailing expression statement supplies the value."""
    if not statements:
        return None
    *leading, last = statements
    if leading:
        module = ast.fix_missing_locations(ast.Module(body=leading, type_ignores=[]))
        exec(compile(module, config.EVAL_FILENAME, "exec"), namespace)
    if isinstance(last, ast.Expr):
        return eval(_compile_expression(last.value), namespace)
    module = ast.fix_missing_locations(ast.Module(body=[last], type_ignores=[]))
    exec(compile(module, config.EVAL_FILENAME, "exec"), namespace)
    return None


def _evaluate(expr: Any, namespace: dict[str, Any]) -> Any:
    match expr:
        case ast.Module(body=body) | ast.Interactive(body=body):
            return _run_statements(body, namespace)
        case ast.Expression(body=body):
            return eval(_compile_expression(body), namespace)
        case ast.stmt():
            return _run_statements([expr], namespace)
        case ast.expr():
            return eval(_compile_expression(expr), namespace)
        case _:
            # Literals and other plain values evaluate to themselves.
            return expr


def safe_eval(
    context: ModuleType | dict[str, Any],
    expr: Any,
    **parse_options: Any,
) -> Result[Any, EvalError]:
    """
    Evaluate an expression in a module or namespace, returning a Result.

    Args:
        context: The module, or globals mapping, to evaluate in.
        expr: A syntax node, a plain value, or Python source text.
        **parse_options: Options for `safe_parse_syntax`, used when `expr` is text.

    Returns:
        `Result[Any, EvalError]` holding the value produced, or an EvalError
        recording the context, the expression and the underlying error. Text
        that fails to parse yields an EvalError caused by the ParseError.

    Raises:
        TypeMismatchError: If `parse_options` are unknown or of the wrong type.
    """
    if isinstance(expr, str):
        parsed = safe_parse_syntax(expr, **parse_options)
        if is_error(parsed):
            logger.debug("Skipping evaluation in %s: source did not parse", context_name(context))
            return failure(EvalError(context, expr, unwrap_error(parsed)), value_type=Any)
        expr = unwrap(parsed)

    outcome = safe(_evaluate)(expr, _namespace(context))
    if isinstance(outcome, Failure):
        exc = outcome.failure()
        logger.debug("Evaluation in %s raised %r", context_name(context), exc)
        return failure(EvalError(context, expr, exc, catch_backtrace(exc)), value_type=Any)
    return success(outcome.unwrap(), EvalError, value_type=Any)


__all__ = ["safe_eval"]
