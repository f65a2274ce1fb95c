"""usenav CLI - usenav command."""

from pathlib import Path

import click

from usenav import __version__
from usenav.cli.complete import complete_command
from usenav.cli.definition import definition_command
from usenav.cli.model import model_command
from usenav.config.loader import load_config
from usenav.core.errors import ConfigError
from usenav.core.logging import configure_logging, set_query_id
from usenav.resolution.ops import ResolutionOps


@click.group()
@click.version_option(version=__version__, prog_name="usenav")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root (default: current directory)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of <root>/.usenav/config.yaml",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, root: Path | None, config_path: Path | None) -> None:
    """usenav - definitions and completions for use('App/...') projects."""
    root = (root or Path.cwd()).resolve()
    try:
        config = load_config(root, config_path=config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    logging_config = config.logging
    if verbose:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)
    set_query_id()

    ctx.ensure_object(dict)
    ctx.obj["root"] = root
    ctx.obj["config"] = config
    # A missing root is not an error: every query simply finds nothing
    ctx.obj["ops"] = ResolutionOps(root if root.is_dir() else None, config.resolution)


cli.add_command(definition_command, name="definition")
cli.add_command(complete_command, name="complete")
cli.add_command(model_command, name="model")


if __name__ == "__main__":
    cli()
