"""Interning table of type declarations.

Every type name maps to the list of structurally distinct declarations
("variants") seen for it across all loaded files. Files refer to a variant
by its index, so identical declarations repeated in thousands of files are
stored once.
"""

from __future__ import annotations

from collections.abc import Iterator

from ksymtypes.core.errors import InternalError
from ksymtypes.sym.tokens import Tokens


class TypeTable:
    """Append-only mapping of type name -> distinct variants."""

    def __init__(self) -> None:
        self._types: dict[str, list[Tokens]] = {}

    def merge(self, name: str, tokens: Tokens) -> int:
        """Return the index of the variant equal to ``tokens``, adding it if new."""
        variants = self._types.get(name)
        if variants is None:
            self._types[name] = [tokens]
            return 0
        for index, variant in enumerate(variants):
            if variant == tokens:
                return index
        variants.append(tokens)
        return len(variants) - 1

    def get(self, name: str, index: int) -> Tokens:
        variants = self._types.get(name)
        if variants is None or not (0 <= index < len(variants)):
            raise InternalError.missing_declaration(name)
        return variants[index]

    def variants(self, name: str) -> tuple[Tokens, ...]:
        return tuple(self._types.get(name, ()))

    def variant_count(self) -> int:
        return sum(len(variants) for variants in self._types.values())

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)
