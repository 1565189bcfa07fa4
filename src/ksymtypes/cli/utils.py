"""CLI utilities."""

from pathlib import Path

import click

from ksymtypes.config.models import LoadConfig
from ksymtypes.core.errors import KsymtypesError
from ksymtypes.core.progress import pluralize, spinner, status
from ksymtypes.sym.corpus import Corpus, load_corpus


def load_tree(root: Path, config: LoadConfig) -> Corpus:
    """Load a corpus with user feedback on stderr.

    Raises:
        click.ClickException: If loading fails for any reason
    """
    try:
        with spinner(f"Loading {root}"):
            corpus = load_corpus(root, config)
    except KsymtypesError as e:
        raise click.ClickException(e.message) from e

    status(
        f"Loaded {pluralize(len(corpus.files), 'file')}, "
        f"{pluralize(len(corpus.exports), 'export')} from {root}",
        style="success",
    )
    return corpus
