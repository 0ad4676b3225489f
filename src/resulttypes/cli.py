"""
Command-line interface for resulttypes.

Runs the safe adapters on command-line input and prints the resulting
`Result`, which makes it easy to see how a given input parses or evaluates
and what error chain a failure carries.
"""

import ast
from typing import Annotated, Any

import typer
from rich import print as rprint
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from . import config
from .errors import render_error
from .result import Result, render, unwrap, unwrap_error
from .safe import ParseMode, safe_eval, safe_parse, safe_parse_syntax
from .safe.parsing import registered_types

console = Console()

app = typer.Typer(
    name="resulttypes",
    help="Parse and evaluate input through the safe adapters and show the Result.",
    add_completion=False,
    pretty_exceptions_show_locals=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

__version__ = "0.1.0"


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        rprint(f"[bold blue]resulttypes[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version and exit"),
    ] = False,
) -> None:
    """Inspect Results produced by the safe adapters."""


def _show(result: Result[Any, Any], body: str | None = None) -> None:
    """Print a Result in a panel; exit with status 1 if it holds an error."""
    if result.is_error():
        console.print(
            Panel(
                Text(render_error(unwrap_error(result))),
                title=Text(render(result)),
                border_style=config.FAILURE_BORDER_STYLE,
            )
        )
        raise typer.Exit(code=1)
    console.print(
        Panel(
            Text(body if body is not None else render(result)),
            title=Text(str(result.type)),
            border_style=config.SUCCESS_BORDER_STYLE,
        )
    )


@app.command()
def parse(
    type_name: Annotated[str, typer.Argument(help="Target type, e.g. int or Fraction", metavar="TYPE")],
    text: Annotated[str, typer.Argument(help="Text to parse")],
    base: Annotated[int | None, typer.Option("--base", "-b", min=2, max=36, help="Base for int parsing")] = None,
) -> None:
    """Parse TEXT into a value of TYPE."""
    targets = {target.__name__: target for target in registered_types()}
    target = targets.get(type_name)
    if target is None:
        console.print(f"[bold red]Error:[/bold red] unknown type {type_name!r}; choose from {', '.join(targets)}")
        raise typer.Exit(code=2)
    options = {"base": base} if base is not None else {}
    _show(safe_parse(target, text, **options))


@app.command()
def syntax(
    text: Annotated[str, typer.Argument(help="Python source to parse")],
    whole: Annotated[bool, typer.Option("--all", help="Parse a whole module instead of one statement")] = False,
    filename: Annotated[str, typer.Option("--filename", "-f", help="Filename used in diagnostics")] = config.DEFAULT_SYNTAX_FILENAME,
) -> None:
    """Parse TEXT into a Python syntax tree."""
    mode = ParseMode.ALL if whole else ParseMode.STATEMENT
    result = safe_parse_syntax(text, mode, filename)
    body = None if result.is_error() else ast.dump(unwrap(result), indent=2)
    _show(result, body)


@app.command("eval")
def evaluate(
    text: Annotated[str, typer.Argument(help="Python source to evaluate")],
    whole: Annotated[bool, typer.Option("--all", help="Evaluate a whole module; the last expression is the value")] = False,
) -> None:
    """Evaluate TEXT in a fresh namespace."""
    mode = ParseMode.ALL if whole else ParseMode.STATEMENT
    _show(safe_eval({"__name__": "__cli__"}, text, mode=mode))


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
