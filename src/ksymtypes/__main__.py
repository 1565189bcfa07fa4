"""Allow ``python -m ksymtypes``."""

from ksymtypes.cli.main import cli

cli()
