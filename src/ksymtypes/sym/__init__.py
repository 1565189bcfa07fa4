"""Symtypes corpus model, structural comparator and renderers."""

from ksymtypes.sym.compare import (
    ChangeRecord,
    ChangeSet,
    CompareReport,
    compare_corpora,
    compare_types,
    tokens_equal,
)
from ksymtypes.sym.corpus import Corpus, SymFile, load_corpus
from ksymtypes.sym.diff import format_type_change, unified_diff
from ksymtypes.sym.format import pretty_format_type
from ksymtypes.sym.report import render_json, render_text, write_report
from ksymtypes.sym.table import TypeTable
from ksymtypes.sym.tokens import Atom, Token, Tokens, TypeRef, parse_tokens

__all__ = [
    # Model
    "Atom",
    "Corpus",
    "SymFile",
    "Token",
    "Tokens",
    "TypeRef",
    "TypeTable",
    "load_corpus",
    "parse_tokens",
    # Comparison
    "ChangeRecord",
    "ChangeSet",
    "CompareReport",
    "compare_corpora",
    "compare_types",
    "tokens_equal",
    # Rendering
    "format_type_change",
    "pretty_format_type",
    "render_json",
    "render_text",
    "unified_diff",
    "write_report",
]
