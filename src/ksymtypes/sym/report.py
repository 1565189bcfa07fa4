"""Rendering of comparison reports as text or JSON."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from typing import Any

from ksymtypes.sym.compare import CompareReport
from ksymtypes.sym.diff import DEFAULT_CONTEXT, format_type_change, unified_diff
from ksymtypes.sym.format import pretty_format_type

LineSink = Callable[[str], None]


def render_text(report: CompareReport, *, context: int = DEFAULT_CONTEXT) -> Iterator[str]:
    """Yield the human-readable report line by line."""
    for name in report.only_in_a:
        yield f"Export {name} is present in A but not in B"
    for name in report.only_in_b:
        yield f"Export {name} is present in B but not in A"
    for record in report.changes:
        yield from format_type_change(record, context)


def report_to_dict(report: CompareReport, *, context: int = DEFAULT_CONTEXT) -> dict[str, Any]:
    changes = []
    for record in report.changes:
        pretty_a = pretty_format_type(record.tokens_a)
        pretty_b = pretty_format_type(record.tokens_b)
        changes.append(
            {
                "name": record.name,
                "a": pretty_a,
                "b": pretty_b,
                "diff": unified_diff(pretty_a, pretty_b, context),
            }
        )
    return {
        "only_in_a": list(report.only_in_a),
        "only_in_b": list(report.only_in_b),
        "changes": changes,
    }


def render_json(report: CompareReport, *, context: int = DEFAULT_CONTEXT) -> str:
    return json.dumps(report_to_dict(report, context=context), indent=2)


def write_report(
    report: CompareReport,
    sink: LineSink,
    *,
    as_json: bool = False,
    context: int = DEFAULT_CONTEXT,
) -> None:
    """Send the rendered report to ``sink``, one call per line (or one JSON document)."""
    if as_json:
        sink(render_json(report, context=context))
        return
    for line in render_text(report, context=context):
        sink(line)
