import ast

import pytest

from resulttypes import ParseError, TypeMismatchError, is_error, parse_all_syntax, parse_syntax, safe_parse_syntax, unwrap, unwrap_error
from resulttypes.safe import DiagnosticError, DiagnosticKind


def test_function_definition() -> None:
    res = safe_parse_syntax("def foo(bar): return 42")
    node = unwrap(res)
    assert isinstance(node, ast.FunctionDef)
    assert node.name == "foo"


def test_malformed_expression() -> None:
    res = safe_parse_syntax("/a")
    assert is_error(res)
    e = unwrap_error(res)
    assert isinstance(e, ParseError)
    assert e.source == "/a"
    assert e.msg == "Failed to parse string into Python syntax tree"
    assert isinstance(e.caused_by, DiagnosticError)
    assert e.caused_by.diagnostics[0].kind is DiagnosticKind.ERROR


def test_incomplete_input_is_a_parse_error() -> None:
    e = unwrap_error(safe_parse_syntax("("))
    assert isinstance(e, ParseError)
    assert e.caused_by.diagnostics[0].kind is DiagnosticKind.INCOMPLETE
    assert isinstance(e.caused_by.__cause__, SyntaxError)


def test_unmatched_paren() -> None:
    assert is_error(safe_parse_syntax(")"))
    with pytest.raises(ParseError):
        parse_syntax(")")


def test_parse_syntax_raises_or_returns() -> None:
    name = parse_syntax("a")
    assert isinstance(name, ast.Name) and name.id == "a"
    with pytest.raises(ParseError):
        parse_syntax("/a")


def test_node_kinds() -> None:
    assert isinstance(parse_syntax("color(apple)"), ast.Call)
    assert isinstance(parse_syntax("1"), ast.Constant)
    assert isinstance(parse_syntax("int"), ast.Name)
    assert isinstance(parse_syntax("a = 1"), ast.Assign)


def test_multiple_statements() -> None:
    module = parse_all_syntax("\na = 1\nb = a + 1\n")
    assert isinstance(module, ast.Module)
    assert len(module.body) == 2
    assert ast.unparse(module.body[1]) == "b = a + 1"

    e = unwrap_error(safe_parse_syntax("\na = 1\nb = a + 1\n"))
    diagnostic = e.caused_by.diagnostics[0]
    assert diagnostic.message == "unexpected text after parsing statement"
    assert diagnostic.lineno == 3


def test_mode_accepts_strings() -> None:
    assert isinstance(unwrap(safe_parse_syntax("a = 1\nb = 2", "all")), ast.Module)


def test_empty_input_in_statement_mode() -> None:
    e = unwrap_error(safe_parse_syntax(""))
    assert e.caused_by.diagnostics[0].message == "no statement found in input"
    assert parse_all_syntax("").body == []


def test_filename_is_reported() -> None:
    e = unwrap_error(safe_parse_syntax("(", filename="snippet.py"))
    assert isinstance(e.caused_by.__cause__, SyntaxError)
    assert e.caused_by.__cause__.filename == "snippet.py"


def test_invalid_options_are_rejected() -> None:
    with pytest.raises(TypeMismatchError, match="colour"):
        safe_parse_syntax("a", colour="blue")
    with pytest.raises(TypeError):
        safe_parse_syntax("a", mode="expression")
    with pytest.raises(TypeMismatchError):
        safe_parse_syntax("a", filename="")
