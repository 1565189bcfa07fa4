"""ksymtypes CLI - ksymtypes command."""

from pathlib import Path

import click

from ksymtypes import __version__
from ksymtypes.cli.compare import compare_command
from ksymtypes.cli.show import show_command
from ksymtypes.config.loader import load_config
from ksymtypes.core.errors import ConfigError
from ksymtypes.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="ksymtypes")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML config file",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """ksymtypes - compare the type surface of exported symbols between two builds."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    logging_config = config.logging
    if verbose:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config


cli.add_command(show_command, name="show")
cli.add_command(compare_command, name="compare")


if __name__ == "__main__":
    cli()
