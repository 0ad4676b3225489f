"""
Common utilities shared by the resulttypes modules.
"""

from .ast_utils import ast_node_to_source, indent_source

__all__ = ["ast_node_to_source", "indent_source"]
