"""usenav definition command - go to definition at a cursor position."""

from pathlib import Path

import click
import structlog

from usenav.cli.utils import echo_location, line_at, read_document
from usenav.editor.cursor import member_at, specifier_at
from usenav.resolution.models import Location
from usenav.resolution.ops import ResolutionOps

log = structlog.get_logger(__name__)


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("line", type=click.IntRange(min=0))
@click.argument("column", type=click.IntRange(min=0))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def definition_command(obj: dict, file: Path, line: int, column: int, as_json: bool) -> None:
    """Find the definition under LINE:COLUMN (zero-based) of FILE.

    On a use('App/...') call this is the loaded file. On X.member or
    X.prop.member it is the line declaring member in the file X resolves to.
    """
    ops: ResolutionOps = obj["ops"]
    document = read_document(file)
    line_text = line_at(document, line)

    location: Location | None = None
    raw = specifier_at(line_text, column)
    if raw is not None:
        location = ops.resolve_specifier_location(raw)
    else:
        target = member_at(line_text, column)
        if target is not None:
            chain, member = target
            location = ops.resolve_member_location(document, chain, member)

    log.info("cli.definition", file=str(file), line=line, column=column, found=location is not None)
    echo_location(location, as_json)
