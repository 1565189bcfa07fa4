"""Token model for symtypes declarations.

A declaration body is a sequence of words. Each word is either a literal
``Atom`` or a ``TypeRef`` naming another declared type. genksyms marks
references with ``#`` as the second character: ``s#foo`` (struct),
``u#foo`` (union), ``e#foo`` (enum) and ``t#foo`` (typedef).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ksymtypes.config.constants import TYPEREF_MARKER


@dataclass(frozen=True, slots=True)
class Atom:
    """A literal word such as ``int``, ``{`` or a member name."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class TypeRef:
    """A reference to another declared type, by its full marked name."""

    name: str

    @property
    def text(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


Token = Atom | TypeRef

# Positional equality of two declarations is plain tuple equality.
Tokens = tuple[Token, ...]


def is_typeref_name(word: str) -> bool:
    """True if ``word`` carries the reference marker as its second character."""
    return len(word) > 1 and word[1] == TYPEREF_MARKER


def parse_token(word: str) -> Token:
    return TypeRef(word) if is_typeref_name(word) else Atom(word)


def parse_tokens(words: Iterable[str]) -> Tokens:
    return tuple(parse_token(word) for word in words)


def format_tokens(tokens: Tokens) -> str:
    """Join tokens back into the single-line symtypes form."""
    return " ".join(token.text for token in tokens)
