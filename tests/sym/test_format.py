"""Tests for sym/format.py."""

from ksymtypes.sym.format import pretty_format_type
from ksymtypes.sym.tokens import Atom, TypeRef, parse_tokens


def _format(line: str) -> list[str]:
    return pretty_format_type(parse_tokens(line.split()))


class TestPrettyFormatType:
    """Declaration layouts."""

    def test_typedef(self) -> None:
        assert _format("typedef unsigned long long u64") == ["typedef unsigned long long u64"]

    def test_enum(self) -> None:
        assert _format("enum test { VALUE1 , VALUE2 , VALUE3 }") == [
            "enum test {",
            "\tVALUE1,",
            "\tVALUE2,",
            "\tVALUE3",
            "}",
        ]

    def test_struct(self) -> None:
        assert _format("struct test { int ivalue ; long lvalue ; }") == [
            "struct test {",
            "\tint ivalue;",
            "\tlong lvalue;",
            "}",
        ]

    def test_union(self) -> None:
        assert _format("union test { int ivalue ; long lvalue ; }") == [
            "union test {",
            "\tint ivalue;",
            "\tlong lvalue;",
            "}",
        ]

    def test_enum_constant(self) -> None:
        assert _format("7") == ["7"]

    def test_nested(self) -> None:
        line = "union nested { struct { int ivalue1 ; int ivalue2 ; } ; long lvalue ; }"

        assert _format(line) == [
            "union nested {",
            "\tstruct {",
            "\t\tint ivalue1;",
            "\t\tint ivalue2;",
            "\t};",
            "\tlong lvalue;",
            "}",
        ]

    def test_imbalanced(self) -> None:
        """Extra closing braces never underflow, dangling opens are still emitted."""
        assert _format("struct imbalanced { { } } } ; { {") == [
            "struct imbalanced {",
            "\t{",
            "\t}",
            "}",
            "};",
            "{",
            "\t{",
        ]

    def test_pending_content_after_open_brace_flushed(self) -> None:
        assert _format("struct open { int a") == ["struct open {", "\tint a"]

    def test_leading_close_brace(self) -> None:
        assert _format("} int x ;") == ["} int x;"]

    def test_typeref(self) -> None:
        tokens = (
            Atom("struct"),
            Atom("typeref"),
            Atom("{"),
            TypeRef("s#other"),
            Atom("other"),
            Atom(";"),
            Atom("}"),
        )

        assert pretty_format_type(tokens) == [
            "struct typeref {",
            "\ts#other other;",
            "}",
        ]

    def test_function(self) -> None:
        assert _format("int foo ( s#bar * , int )") == ["int foo ( s#bar *,", "int )"]

    def test_empty(self) -> None:
        assert pretty_format_type(()) == []
