"""
Single source of truth for rendering syntax nodes as text.
"""

import ast
import textwrap
from typing import Any


def ast_node_to_source(node: Any) -> str:
    """
    Convert a syntax node back to its source code representation.

    Args:
        node: The AST node to convert. Non-AST values, such as the literals
            `safe_eval` accepts, are rendered with `repr`.

    Returns:
        The source code string for the node, or a repr for fallback.
    """
    if not isinstance(node, ast.AST):
        return repr(node)
    try:
        return ast.unparse(node)
    except Exception:
        # Hand-built nodes may lack fields that ast.unparse requires.
        return ast.dump(node)


def indent_source(source: str, prefix: str = "  ") -> str:
    """Indent every line of `source`, blank lines included."""
    return textwrap.indent(source, prefix, predicate=lambda _line: True)
