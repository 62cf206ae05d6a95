"""Typer application for the ``enum-field`` command."""

import logging

import typer

from .. import __version__


app = typer.Typer(
    name="enum-field",
    help="Inspect classes declared with enum_field.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"enum-field {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Register commands
from .commands import show  # noqa: E402,F401
