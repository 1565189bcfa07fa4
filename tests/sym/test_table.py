"""Tests for sym/table.py."""

import pytest

from ksymtypes.core.errors import ErrorCode, InternalError
from ksymtypes.sym.table import TypeTable
from ksymtypes.sym.tokens import Atom, TypeRef, parse_tokens


def _tokens(line: str) -> tuple:
    return parse_tokens(line.split())


class TestMerge:
    """Variant interning."""

    def test_given_new_name_when_merged_then_variant_zero(self) -> None:
        table = TypeTable()

        assert table.merge("s#foo", _tokens("struct foo { int a ; }")) == 0
        assert "s#foo" in table
        assert len(table) == 1

    def test_given_same_tokens_when_merged_twice_then_same_index(self) -> None:
        """Merging is idempotent for structurally equal declarations."""
        table = TypeTable()
        first = table.merge("s#foo", _tokens("struct foo { int a ; }"))

        second = table.merge("s#foo", _tokens("struct foo { int a ; }"))

        assert first == second == 0
        assert table.variants("s#foo") == (_tokens("struct foo { int a ; }"),)

    def test_given_different_tokens_when_merged_then_new_index(self) -> None:
        table = TypeTable()
        table.merge("s#foo", _tokens("struct foo { int a ; }"))

        index = table.merge("s#foo", _tokens("struct foo { long a ; }"))

        assert index == 1
        assert table.variant_count() == 2

    def test_existing_variant_found_among_several(self) -> None:
        table = TypeTable()
        table.merge("s#foo", _tokens("struct foo { int a ; }"))
        table.merge("s#foo", _tokens("struct foo { long a ; }"))
        table.merge("s#foo", _tokens("struct foo { char a ; }"))

        assert table.merge("s#foo", _tokens("struct foo { long a ; }")) == 1
        assert table.variant_count() == 3

    def test_prefix_is_not_equal(self) -> None:
        """A shorter declaration is a distinct variant."""
        table = TypeTable()
        table.merge("foo", _tokens("int foo ( int )"))

        assert table.merge("foo", _tokens("int foo")) == 1

    def test_atom_and_reference_are_distinct_variants(self) -> None:
        table = TypeTable()
        table.merge("foo", (Atom("s#bar"),))

        assert table.merge("foo", (TypeRef("s#bar"),)) == 1

    def test_no_whitespace_or_order_normalization(self) -> None:
        table = TypeTable()
        table.merge("foo", _tokens("unsigned long"))

        assert table.merge("foo", _tokens("long unsigned")) == 1

    def test_empty_declaration_is_a_variant(self) -> None:
        table = TypeTable()

        assert table.merge("foo", ()) == 0
        assert table.merge("foo", ()) == 0
        assert table.get("foo", 0) == ()


class TestLookup:
    def test_get_returns_variant(self) -> None:
        table = TypeTable()
        table.merge("t#u8", _tokens("typedef unsigned char u8"))

        assert table.get("t#u8", 0) == _tokens("typedef unsigned char u8")

    @pytest.mark.parametrize(("name", "index"), [("t#u16", 0), ("t#u8", 1), ("t#u8", -1)])
    def test_get_unknown_raises_internal_error(self, name: str, index: int) -> None:
        table = TypeTable()
        table.merge("t#u8", _tokens("typedef unsigned char u8"))

        with pytest.raises(InternalError) as exc_info:
            table.get(name, index)

        assert exc_info.value.code == ErrorCode.MISSING_DECLARATION

    def test_variants_of_unknown_name_is_empty(self) -> None:
        assert TypeTable().variants("s#missing") == ()

    def test_iteration_in_insertion_order(self) -> None:
        table = TypeTable()
        table.merge("b", ())
        table.merge("a", ())

        assert list(table) == ["b", "a"]
