"""ksymtypes compare command - diff the exported types of two builds."""

from pathlib import Path

import click

from ksymtypes.cli.utils import load_tree
from ksymtypes.config.constants import DIFF_CONTEXT_MAX
from ksymtypes.config.models import KsymtypesConfig
from ksymtypes.core.errors import InternalError
from ksymtypes.core.progress import pluralize, status

# Exit status when differences are found and --fail-on-change is set.
EXIT_CHANGED = 2


@click.command()
@click.argument("path_a", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument("path_b", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option(
    "--context",
    "-U",
    type=click.IntRange(0, DIFF_CONTEXT_MAX),
    default=None,
    help="Context lines around each change (default from config: 3)",
)
@click.option(
    "--duplicate-exports",
    type=click.Choice(["last", "first", "error"]),
    default=None,
    help="Which file owns an export declared more than once",
)
@click.option("--unsorted", is_flag=True, help="Keep load order instead of sorting by name")
@click.option(
    "--fail-on-change",
    is_flag=True,
    help=f"Exit with status {EXIT_CHANGED} if any difference is found",
)
@click.pass_context
def compare_command(
    ctx: click.Context,
    path_a: Path,
    path_b: Path,
    as_json: bool,
    context: int | None,
    duplicate_exports: str | None,
    unsorted: bool,
    fail_on_change: bool,
) -> None:
    """Compare the symtypes of PATH_A (build A) with PATH_B (build B).

    Reports exports present in only one build, then every type reachable
    from a shared export whose declaration differs, as a unified diff.
    """
    config: KsymtypesConfig = ctx.obj["config"]
    load_config = config.load
    if duplicate_exports is not None:
        load_config = load_config.model_copy(update={"duplicate_exports": duplicate_exports})

    corpus_a = load_tree(path_a, load_config)
    corpus_b = load_tree(path_b, load_config)

    try:
        report = corpus_a.compare_with(
            corpus_b,
            click.echo,
            sort=config.compare.sort_output and not unsorted,
            as_json=as_json,
            context=config.compare.context_lines if context is None else context,
        )
    except InternalError as e:
        raise click.ClickException(e.message) from e

    if not report.has_differences:
        status("No differences found", style="success")
    else:
        status(
            f"{pluralize(len(report.changes), 'changed type')}, "
            f"{len(report.only_in_a)} only in A, {len(report.only_in_b)} only in B",
            style="warning",
        )

    fail_on_change = fail_on_change or config.compare.fail_on_change
    if fail_on_change and report.has_differences:
        ctx.exit(EXIT_CHANGED)
