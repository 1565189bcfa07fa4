"""Unified line diff of two pretty-formatted declarations."""

from __future__ import annotations

import difflib
from collections.abc import Sequence

from ksymtypes.sym.compare import ChangeRecord
from ksymtypes.sym.format import pretty_format_type

DEFAULT_CONTEXT = 3


def unified_diff(
    lines_a: Sequence[str], lines_b: Sequence[str], context: int = DEFAULT_CONTEXT
) -> list[str]:
    """Return ``@@`` hunks with `` ``/``-``/``+`` prefixed lines, without file headers.

    Identical inputs give an empty list.
    """
    diff = list(difflib.unified_diff(list(lines_a), list(lines_b), lineterm="", n=context))
    # Drop the "---"/"+++" file header pair.
    return diff[2:]


def format_type_change(record: ChangeRecord, context: int = DEFAULT_CONTEXT) -> list[str]:
    """Render one change as its type name followed by the diff of both declarations."""
    pretty_a = pretty_format_type(record.tokens_a)
    pretty_b = pretty_format_type(record.tokens_b)
    return [record.name, *unified_diff(pretty_a, pretty_b, context)]
