import pytest

from stripblankimports.core.exceptions import GoSyntaxError
from stripblankimports.golang.parser import parse
from stripblankimports.golang.syntax import Token


PROGRAM = b"""package main

import (
\tf "fmt"
\t_ "embed"
\t. "math"
\t"os"
)

type T struct {
\tA int `json:"a"`
}

func main() {
\tif len(os.Args) > 1 {
\t\tf.Println("hi", 'x', 1.5, Pi)
\t}
}
"""

SQUASHABLE = b'package main\n\nimport (\n\t"a"\n\n\n\t"b"\n)\n\n'


def test_parse_collects_imports() -> None:
    tree, table = parse(PROGRAM)

    assert tree.package == "main"
    assert len(tree.decls) == 1
    assert tree.decls[0].is_block
    assert [(spec.name, spec.unquoted_path) for spec in tree.imports] == [
        ("f", "fmt"),
        ("_", "embed"),
        (".", "math"),
        (None, "os"),
    ]
    assert table.size == len(PROGRAM)


def test_import_spec_span_starts_at_name() -> None:
    tree, _ = parse(PROGRAM)
    named, *_, plain = tree.imports

    assert named.pos == PROGRAM.index(b'f "fmt"')
    assert named.end == PROGRAM.index(b'"fmt"') + len(b'"fmt"')
    assert plain.pos == PROGRAM.index(b'"os"')


def test_block_parentheses_are_recorded() -> None:
    tree, _ = parse(PROGRAM)
    decl = tree.decls[0]

    assert decl.lparen == PROGRAM.index(b"(")
    assert decl.rparen == PROGRAM.index(b")")


def test_single_import_declarations() -> None:
    tree, _ = parse(b'package p\n\nimport "fmt"\nimport os2 "os"\n')

    assert [decl.is_block for decl in tree.decls] == [False, False]
    assert [spec.unquoted_path for spec in tree.imports] == ["fmt", "os"]


def test_offsets_are_bytes() -> None:
    source = 'package p\n\n// café\nimport (\n\t"a"\n\t"b"\n)\n'.encode()
    tree, _ = parse(source)

    assert [spec.path_pos for spec in tree.imports] == [
        source.index(b'"a"'),
        source.index(b'"b"'),
    ]
    assert tree.comments[0].text == "// café"


def test_tokens_are_the_leaves_in_source_order() -> None:
    source = b'package p\n\nimport (\n\t"a" // c\n)\n'
    tree, _ = parse(source)

    kinds = [lexeme.kind for lexeme in tree.tokens if lexeme.kind is not Token.SEMICOLON]
    assert kinds == [
        Token.OTHER,
        Token.OTHER,
        Token.IMPORT,
        Token.LPAREN,
        Token.STRING,
        Token.COMMENT,
        Token.RPAREN,
        Token.EOF,
    ]
    string = next(lexeme for lexeme in tree.tokens if lexeme.kind is Token.STRING)
    assert source[string.pos : string.end] == b'"a"'
    assert tree.tokens[-1].pos == len(source)


def test_comment_groups_follow_go_rules() -> None:
    source = (
        b"package main\n"
        b"\n"
        b"import (\n"
        b'\t"fmt" // trailing\n'
        b"\t// doc one\n"
        b"\t// doc two\n"
        b"\n"
        b"\t// separate\n"
        b'\t"os"\n'
        b")\n"
    )
    tree, _ = parse(source)

    assert [group.text for group in tree.comments] == [
        "// trailing",
        "// doc one\n// doc two",
        "// separate",
    ]
    assert tree.comments[1].pos == source.index(b"// doc one")
    assert tree.comments[1].end == source.index(b"// doc two") + len(b"// doc two")


def test_comments_outside_imports_are_collected() -> None:
    source = b"// Package p does things.\npackage p\n\nfunc f() {\n\t/* inner */\n}\n"
    tree, _ = parse(source)

    assert [group.text for group in tree.comments] == ["// Package p does things.", "/* inner */"]


def test_leading_bom_keeps_offsets_aligned() -> None:
    source = b'\xef\xbb\xbfpackage p\n\nimport (\n\t"a"\n\t"b"\n)\n'
    tree, table = parse(source)

    assert tree.package == "p"
    assert tree.package_pos == 3
    assert tree.imports[0].path_pos == source.index(b'"a"')
    assert table.size == len(source)


@pytest.mark.parametrize(
    ("source", "message"),
    [
        (b'import "fmt"\n', "expected 'package'"),
        (b"", "expected 'package', found EOF"),
        (
            b'package p\nfunc f() {}\nimport "fmt"\n',
            "imports must appear before other declarations",
        ),
        (b"package p\nx := 1\n", "expected declaration"),
        (b'package p\nimport ""\n', "invalid import path"),
    ],
)
def test_declaration_errors(source: bytes, message: str) -> None:
    with pytest.raises(GoSyntaxError) as excinfo:
        parse(source)

    assert message in str(excinfo.value)


@pytest.mark.parametrize(
    "source",
    [
        SQUASHABLE + b"func main() { x := := 1 }",
        SQUASHABLE + b"var x =",
        SQUASHABLE + b'func main() {\n\timport "os"\n}',
        SQUASHABLE + b"type T struct { a b c d }",
        b"package p\nfunc f() {\n",
        b"package p\nfunc f() {)\n",
        b"package p\nimport (\n\tfmt\n)\n",
        b'package p\nimport (\n\t"a" "b"\n)\n',
        b'package p\nvar s = "abc\n',
    ],
)
def test_grammar_errors(source: bytes) -> None:
    with pytest.raises(GoSyntaxError):
        parse(source)


def test_grammar_error_points_past_the_import_block() -> None:
    source = SQUASHABLE + b"func main() { x := := 1 }"

    with pytest.raises(GoSyntaxError) as excinfo:
        parse(source)

    assert excinfo.value.line == 10


def test_invalid_utf8_is_a_syntax_error() -> None:
    with pytest.raises(GoSyntaxError, match="UTF-8"):
        parse(b"package p\n\xff\n")


def test_error_carries_position() -> None:
    with pytest.raises(GoSyntaxError) as excinfo:
        parse(b"package p\n\nx := 1\n")

    assert (excinfo.value.line, excinfo.value.column) == (3, 1)
    assert str(excinfo.value).startswith("3:1: ")
