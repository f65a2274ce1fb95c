"""usenav model command - locate a model file by name."""

import json

import click

from usenav.resolution.ops import ResolutionOps


@click.command()
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def model_command(obj: dict, name: str, as_json: bool) -> None:
    """Find the file of model NAME under app/Models."""
    ops: ResolutionOps = obj["ops"]
    path = ops.find_model_file(name)

    if as_json:
        click.echo(json.dumps({"name": name, "path": str(path) if path else None}))
    elif path is not None:
        click.echo(str(path))
