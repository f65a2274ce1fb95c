"""CLI utilities."""

import json
from pathlib import Path

import click

from usenav.resolution.models import Location


def read_document(path: Path) -> str:
    """Read the open document. Undecodable bytes are replaced, not fatal.

    Raises:
        click.ClickException: If the file cannot be read
    """
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise click.ClickException(f"Cannot read {path}: {e}") from e


def line_at(text: str, line: int) -> str:
    """Zero-based line of text, or an empty string past the end."""
    lines = text.splitlines()
    return lines[line] if line < len(lines) else ""


def echo_location(location: Location | None, as_json: bool) -> None:
    """Print a location as ``path:line:character`` (zero-based) or JSON.

    A miss prints nothing in text mode and ``null`` in JSON mode.
    """
    if as_json:
        click.echo(json.dumps(location.to_dict() if location else None))
    elif location is not None:
        click.echo(f"{location.path}:{location.line}:{location.character}")
