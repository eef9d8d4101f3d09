"""Typer entrypoint for the cinnamon command.

    cinnamon SCRIPT            run a script file
    cinnamon --dump-ast SCRIPT print the parsed tree instead of running it
"""

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer

from .ast.types import dump
from .cinnamon import EXIT_PARSE_ERROR, Cinnamon, read_script
from .errors import ScriptReadError
from .parser import ParseException, parse

app = typer.Typer(
    help="cinnamon - run a tiny shell-like script",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        from . import __version__

        typer.echo(f"cinnamon {__version__}")
        raise typer.Exit()


def _fail(message: str, exit_code: int) -> NoReturn:
    typer.echo(f"cinnamon: {message}", err=True)
    raise typer.Exit(exit_code)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )


@app.command()
def main(
    script: Path = typer.Argument(..., help="Input file."),
    dump_ast: bool = typer.Option(
        False, "--dump-ast", help="Print the parsed tree and exit without running it"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log every command as it is run"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Run SCRIPT. Nothing runs unless the whole script parses."""
    _configure_logging(verbose)

    try:
        source = read_script(script)
    except ScriptReadError as e:
        _fail(str(e), 1)

    if dump_ast:
        try:
            nodes = parse(source)
        except ParseException as e:
            _fail(str(e), EXIT_PARSE_ERROR)
        typer.echo(dump(nodes), nl=False)
        return

    result = Cinnamon().run(source)
    if result.error:
        _fail(result.error, result.exit_code)
    raise typer.Exit(result.exit_code)


if __name__ == "__main__":
    app()
