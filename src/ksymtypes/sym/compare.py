"""Structural comparison of two corpora.

Starting at each export present in both corpora, the declarations of both
builds are walked in lock-step. Two declarations are equal when they have
the same length and every position holds the same atom or a reference to
the same type name. Matching references are followed so that changes in
nested types are found even when the outer declaration changed too.

Pure and read-only: nothing is printed here, see ``report`` for rendering.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import structlog

from ksymtypes.sym.corpus import Corpus, SymFile
from ksymtypes.sym.tokens import Atom, Tokens, TypeRef

log = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ChangeRecord:
    """A type whose declaration differs between build A and build B."""

    name: str
    tokens_a: Tokens
    tokens_b: Tokens


class ChangeSet:
    """Deduplicated collection of ChangeRecords, grouped by type name.

    Shared by all export roots of one comparison run, so a nested type
    reached from many exports is reported once per distinct pair of
    declarations.
    """

    def __init__(self) -> None:
        self._changes: dict[str, list[ChangeRecord]] = {}

    def add(self, record: ChangeRecord) -> bool:
        """Store ``record`` unless an equal one is present. Return True if added."""
        records = self._changes.setdefault(record.name, [])
        if record in records:
            return False
        records.append(record)
        return True

    def names(self) -> list[str]:
        return list(self._changes)

    def for_name(self, name: str) -> list[ChangeRecord]:
        return list(self._changes.get(name, ()))

    def records(self, *, sort: bool = False) -> list[ChangeRecord]:
        names = sorted(self._changes) if sort else self._changes
        return [record for name in names for record in self._changes[name]]

    def __iter__(self) -> Iterator[ChangeRecord]:
        return iter(self.records())

    def __len__(self) -> int:
        return sum(len(records) for records in self._changes.values())

    def __bool__(self) -> bool:
        return bool(self._changes)


@dataclass
class CompareReport:
    """Result of comparing corpus A with corpus B."""

    only_in_a: list[str] = field(default_factory=list)
    only_in_b: list[str] = field(default_factory=list)
    changes: list[ChangeRecord] = field(default_factory=list)

    @property
    def has_differences(self) -> bool:
        return bool(self.only_in_a or self.only_in_b or self.changes)


def tokens_equal(
    tokens_a: Tokens, tokens_b: Tokens, nested: list[str] | None = None
) -> bool:
    """Compare two declarations position by position.

    Every position up to the shorter length is examined, even after a
    mismatch. Names of references that match on both sides are appended to
    ``nested`` so the caller can descend into them.
    """
    is_equal = len(tokens_a) == len(tokens_b)
    for token_a, token_b in zip(tokens_a, tokens_b):
        if isinstance(token_a, Atom) and isinstance(token_b, Atom):
            is_equal &= token_a.text == token_b.text
        elif isinstance(token_a, TypeRef) and isinstance(token_b, TypeRef):
            if token_a.name == token_b.name:
                if nested is not None:
                    nested.append(token_a.name)
            else:
                is_equal = False
        else:
            is_equal = False
    return is_equal


def compare_types(
    corpus_a: Corpus,
    corpus_b: Corpus,
    file_a: SymFile,
    file_b: SymFile,
    root: str,
    changes: ChangeSet,
) -> None:
    """Walk the type graph below ``root`` and record every differing type.

    Each name is compared at most once per call, which also terminates
    walks through self-referencing types.
    """
    processed: set[str] = set()
    pending = [root]
    while pending:
        name = pending.pop()
        if name in processed:
            continue
        processed.add(name)

        tokens_a = corpus_a.resolve(file_a, name)
        tokens_b = corpus_b.resolve(file_b, name)

        nested: list[str] = []
        if not tokens_equal(tokens_a, tokens_b, nested):
            changes.add(ChangeRecord(name, tokens_a, tokens_b))
        # Reversed so references are visited in declaration order.
        pending.extend(reversed(nested))


def compare_corpora(corpus_a: Corpus, corpus_b: Corpus, *, sort: bool = True) -> CompareReport:
    """Compare every export of A with B and list exports present on one side only.

    With ``sort`` the export names and changed type names are ordered
    lexicographically; otherwise they follow the export index order.
    """
    report = CompareReport()
    changes = ChangeSet()

    exports_a = corpus_a.exports
    files_a = corpus_a.files
    names_a = sorted(exports_a) if sort else list(exports_a)
    for name in names_a:
        file_b = corpus_b.export_file(name)
        if file_b is None:
            report.only_in_a.append(name)
            continue
        compare_types(corpus_a, corpus_b, files_a[exports_a[name]], file_b, name, changes)

    names_b = sorted(corpus_b.exports) if sort else list(corpus_b.exports)
    report.only_in_b = [name for name in names_b if name not in corpus_a.exports]
    report.changes = changes.records(sort=sort)

    log.info(
        "corpora_compared",
        exports_a=len(names_a),
        exports_b=len(names_b),
        only_in_a=len(report.only_in_a),
        only_in_b=len(report.only_in_b),
        changes=len(report.changes),
    )
    return report
