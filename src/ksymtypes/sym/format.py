"""Pretty-formatting of flat declarations into C-like multi-line text.

Example::

    struct test { int ivalue ; long lvalue ; }

becomes::

    struct test {
        int ivalue;
        long lvalue;
    }

Unbalanced braces are tolerated: indentation never drops below zero and
whatever is pending at the end is still emitted.
"""

from __future__ import annotations

from ksymtypes.config.constants import INDENT
from ksymtypes.sym.tokens import Tokens


def pretty_format_type(tokens: Tokens) -> list[str]:
    lines: list[str] = []
    indent = 0
    line = ""

    for token in tokens:
        word = token.text

        # A closing brace ends any prior line and reduces indentation.
        if word == "}":
            if line:
                lines.append(line)
            indent = max(indent - 1, 0)
            line = ""

        is_first = not line
        if is_first:
            line = INDENT * indent

        if word == "{":
            line += "{" if is_first else " {"
            lines.append(line)
            indent += 1
            line = ""
        elif word == "}":
            line += "}"
        elif word in (";", ","):
            line += word
            lines.append(line)
            line = ""
        else:
            line += word if is_first else f" {word}"

    if line:
        lines.append(line)

    return lines
