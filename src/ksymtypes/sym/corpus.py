"""Loading of symtypes corpora.

A corpus is everything declared by one build: the interned type table, the
per-file records selecting one variant of every name the file declares, and
the export index mapping each exported symbol to the file that owns it.

Corpora are built once by ``Corpus.load`` and never modified afterwards, so
two of them can be compared without any coordination.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

import structlog

from ksymtypes.config.constants import SYMTYPES_SUFFIX
from ksymtypes.config.models import DuplicateExportPolicy, LoadConfig
from ksymtypes.core.errors import CorpusError, InternalError, SymIOError
from ksymtypes.sym.table import TypeTable
from ksymtypes.sym.tokens import Tokens, TypeRef, is_typeref_name, parse_tokens

if TYPE_CHECKING:
    from ksymtypes.sym.compare import CompareReport

log = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SymFile:
    """One loaded declaration file: declared name -> selected variant index."""

    path: Path
    records: Mapping[str, int] = field(default_factory=dict)

    def __contains__(self, name: object) -> bool:
        return name in self.records


class Corpus:
    """Type table, export index and file records of one build."""

    def __init__(self) -> None:
        self._types = TypeTable()
        self._exports: dict[str, int] = {}
        self._files: list[SymFile] = []

    @property
    def types(self) -> TypeTable:
        return self._types

    @property
    def exports(self) -> Mapping[str, int]:
        """Export name -> index into ``files``, in first-declared order."""
        return MappingProxyType(self._exports)

    @property
    def files(self) -> tuple[SymFile, ...]:
        return tuple(self._files)

    def export_file(self, name: str) -> SymFile | None:
        index = self._exports.get(name)
        return None if index is None else self._files[index]

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    @classmethod
    def load(
        cls,
        root: Path,
        *,
        suffix: str = SYMTYPES_SUFFIX,
        duplicate_exports: DuplicateExportPolicy = "last",
        validate_references: bool = False,
    ) -> Corpus:
        """Load all declaration files under ``root``, recursively.

        Raises:
            SymIOError: A directory or file could not be read. Nothing is returned.
            CorpusError: A policy violation (duplicate export with policy
                ``error``, or a dangling reference when validating).
        """
        corpus = cls()
        loader = _Loader(corpus, suffix, duplicate_exports, validate_references)
        loader.load_dir(Path(root))
        log.info(
            "corpus_loaded",
            root=str(root),
            files=len(corpus._files),
            types=len(corpus._types),
            variants=corpus._types.variant_count(),
            exports=len(corpus._exports),
        )
        return corpus

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def resolve(self, file: SymFile, name: str) -> Tokens:
        """Return the declaration of ``name`` as selected by ``file``.

        Raises InternalError if the file or the type table does not know it.
        """
        index = file.records.get(name)
        if index is None:
            raise InternalError.type_not_in_file(name, str(file.path))
        if name not in self._types:
            raise InternalError.missing_declaration(name)
        return self._types.get(name, index)

    def format_type(self, name: str) -> list[str]:
        """List ``name`` and all types it references, for every file declaring it.

        Each file section starts with a ``Found type`` header. Referenced types
        come before the types that use them and each appears once per file.
        """
        lines: list[str] = []
        for file in self._files:
            if name not in file:
                continue
            lines.append(f"Found type {name} in {file.path}:")
            lines.extend(self._format_file_type(file, name))
        return lines

    def print_type(self, name: str, sink: Callable[[str], None]) -> bool:
        """Send ``format_type(name)`` to ``sink``. Return False if no file declares it."""
        lines = self.format_type(name)
        for line in lines:
            sink(line)
        return bool(lines)

    def compare_with(
        self,
        other: Corpus,
        sink: Callable[[str], None],
        *,
        sort: bool = True,
        as_json: bool = False,
        context: int = 3,
    ) -> CompareReport:
        """Compare this corpus (A) with ``other`` (B) and write the report to ``sink``."""
        from ksymtypes.sym.compare import compare_corpora
        from ksymtypes.sym.report import write_report

        report = compare_corpora(self, other, sort=sort)
        write_report(report, sink, as_json=as_json, context=context)
        return report

    def _format_file_type(self, file: SymFile, name: str) -> list[str]:
        lines: list[str] = []
        processed = {name}
        root_tokens = self.resolve(file, name)
        stack: list[tuple[str, Tokens, Iterator[str]]] = [
            (name, root_tokens, _refs(root_tokens))
        ]
        while stack:
            current, tokens, refs = stack[-1]
            for ref_name in refs:
                if ref_name not in processed:
                    processed.add(ref_name)
                    ref_tokens = self.resolve(file, ref_name)
                    stack.append((ref_name, ref_tokens, _refs(ref_tokens)))
                    break
            else:
                stack.pop()
                lines.append(" ".join([current, *(token.text for token in tokens)]))
        return lines


def _refs(tokens: Tokens) -> Iterator[str]:
    return (token.name for token in tokens if isinstance(token, TypeRef))


def load_corpus(root: Path, config: LoadConfig | None = None) -> Corpus:
    """Load a corpus using the settings from a LoadConfig."""
    config = config or LoadConfig()
    return Corpus.load(
        root,
        suffix=config.suffix,
        duplicate_exports=config.duplicate_exports,
        validate_references=config.validate_references,
    )


class _Loader:
    """Fills one Corpus from a directory tree."""

    def __init__(
        self,
        corpus: Corpus,
        suffix: str,
        duplicate_exports: DuplicateExportPolicy,
        validate_references: bool,
    ) -> None:
        self._corpus = corpus
        self._suffix = suffix
        self._duplicate_exports = duplicate_exports
        self._validate_references = validate_references

    def load_dir(self, path: Path) -> None:
        try:
            entries = sorted(path.iterdir())
        except OSError as e:
            raise SymIOError.directory_read(str(path), e) from e

        for entry in entries:
            if entry.is_dir():
                self.load_dir(entry)
            elif entry.name.endswith(self._suffix):
                self.load_file(entry)

    def load_file(self, path: Path) -> None:
        log.debug("loading_file", path=str(path))

        corpus = self._corpus
        file_index = len(corpus._files)
        records: dict[str, int] = {}

        try:
            f = path.open(encoding="utf-8", newline="\n")
        except OSError as e:
            raise SymIOError.file_open(str(path), e) from e

        with f:
            try:
                for line in f:
                    words = line.split()
                    if not words:
                        continue

                    name = words[0]
                    records[name] = corpus._types.merge(name, parse_tokens(words[1:]))
                    if not is_typeref_name(name):
                        self._add_export(name, file_index, path)
            except (OSError, UnicodeDecodeError) as e:
                raise SymIOError.file_read(str(path), e) from e

        if self._validate_references:
            self._check_references(path, records)

        corpus._files.append(SymFile(path=path, records=MappingProxyType(records)))

    def _add_export(self, name: str, file_index: int, path: Path) -> None:
        exports = self._corpus._exports
        owner = exports.get(name)
        if owner is None or owner == file_index:
            exports[name] = file_index
            return

        owner_path = self._corpus._files[owner].path
        if self._duplicate_exports == "error":
            raise CorpusError.duplicate_export(name, str(owner_path), str(path))

        log.warning(
            "duplicate_export",
            name=name,
            kept=str(path if self._duplicate_exports == "last" else owner_path),
            dropped=str(owner_path if self._duplicate_exports == "last" else path),
        )
        if self._duplicate_exports == "last":
            exports[name] = file_index

    def _check_references(self, path: Path, records: dict[str, int]) -> None:
        types = self._corpus._types
        for name, index in records.items():
            for ref_name in _refs(types.get(name, index)):
                if ref_name not in records:
                    raise CorpusError.dangling_reference(name, ref_name, str(path))
