"""ksymtypes show command - print a type and everything it references."""

from pathlib import Path

import click

from ksymtypes.cli.utils import load_tree
from ksymtypes.config.models import KsymtypesConfig
from ksymtypes.core.errors import InternalError


@click.command()
@click.argument("path", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument("type_name")
@click.pass_context
def show_command(ctx: click.Context, path: Path, type_name: str) -> None:
    """Print TYPE_NAME as declared in every symtypes file under PATH.

    Types referenced by TYPE_NAME are expanded depth-first and listed
    before the declarations that use them.
    """
    config: KsymtypesConfig = ctx.obj["config"]
    corpus = load_tree(path, config.load)

    try:
        found = corpus.print_type(type_name, click.echo)
    except InternalError as e:
        raise click.ClickException(e.message) from e

    if not found:
        raise click.ClickException(f"Type {type_name} not found in {path}")
