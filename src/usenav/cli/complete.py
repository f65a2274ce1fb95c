"""usenav complete command - members that can follow a dot."""

import json
from pathlib import Path

import click

from usenav.cli.utils import line_at, read_document
from usenav.editor.cursor import chain_before_cursor
from usenav.resolution.ops import ResolutionOps


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("line", type=click.IntRange(min=0))
@click.argument("column", type=click.IntRange(min=0))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def complete_command(obj: dict, file: Path, line: int, column: int, as_json: bool) -> None:
    """List completions for the X. or X.prop. chain ending at LINE:COLUMN of FILE."""
    ops: ResolutionOps = obj["ops"]
    document = read_document(file)
    chain = chain_before_cursor(line_at(document, line), column)
    completions = ops.list_completions(document, chain) if chain is not None else []

    if as_json:
        click.echo(json.dumps([c.to_dict() for c in completions]))
        return
    for completion in completions:
        click.echo(f"{completion.name}\t{completion.kind.value}")
