from typer.testing import CliRunner

from resulttypes.cli import app

runner = CliRunner()


def test_parse_success() -> None:
    result = runner.invoke(app, ["parse", "int", "42"])
    assert result.exit_code == 0
    assert "Result(42)" in result.output


def test_parse_with_base() -> None:
    result = runner.invoke(app, ["parse", "int", "ff", "--base", "16"])
    assert result.exit_code == 0
    assert "Result(255)" in result.output


def test_parse_failure() -> None:
    result = runner.invoke(app, ["parse", "int", "42/2"])
    assert result.exit_code == 1
    assert "ParseError" in result.output
    assert "42/2" in result.output


def test_parse_unknown_type() -> None:
    result = runner.invoke(app, ["parse", "list", "[]"])
    assert result.exit_code == 2


def test_syntax_success_and_failure() -> None:
    ok = runner.invoke(app, ["syntax", "def foo(bar): return 42"])
    assert ok.exit_code == 0
    assert "FunctionDef" in ok.output

    bad = runner.invoke(app, ["syntax", "("])
    assert bad.exit_code == 1
    assert "ParseError" in bad.output


def test_eval() -> None:
    ok = runner.invoke(app, ["eval", "1 // 1"])
    assert ok.exit_code == 0
    assert "Result(1)" in ok.output

    bad = runner.invoke(app, ["eval", "1 // 0"])
    assert bad.exit_code == 1
    assert "ZeroDivisionError" in bad.output


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output
