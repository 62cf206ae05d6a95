"""``enum-field show``: list the members of a host class."""

import importlib
import json

import typer

from ...define import registry_of
from ..app import app


def load_host(target: str) -> type:
    """Import ``module:Class`` (or ``module.Class``) and return the class."""
    if ":" in target:
        module_name, _, attr_path = target.partition(":")
    else:
        module_name, _, attr_path = target.rpartition(".")
    if not module_name or not attr_path:
        raise ValueError(f"Expected MODULE:CLASS, got {target!r}")

    obj = importlib.import_module(module_name)
    for part in attr_path.split("."):
        obj = getattr(obj, part)
    if not isinstance(obj, type):
        raise ValueError(f"{target} is not a class")
    return obj


@app.command()
def show(
    target: str = typer.Argument(..., help="Host class as MODULE:CLASS"),
    as_json: bool = typer.Option(False, "--json", help="Print members as JSON."),
) -> None:
    """Print the id, name and value of every member of a class."""
    try:
        host = load_host(target)
    except (ImportError, AttributeError, ValueError) as e:
        typer.echo(f"Error: cannot load {target}: {e}", err=True)
        raise typer.Exit(1)

    registry = registry_of(host)
    if registry is None:
        typer.echo(f"Error: {host.__qualname__} declares no enum members", err=True)
        raise typer.Exit(1)

    if as_json:
        rows = [
            {"id": m.id, "name": m.name, "value": repr(m.value)}
            for m in registry.members()
        ]
        typer.echo(json.dumps(rows, indent=2))
        return

    typer.echo(f"{host.__qualname__} ({len(registry)} members)")
    width = max((len(str(m.id)) for m in registry.members()), default=1)
    for m in registry.members():
        typer.echo(f"  {m.id:>{width}}  {m.name}  {m.value!r}")
