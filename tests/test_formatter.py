import pytest

from stripblankimports.core.bounds import BlockBounds
from stripblankimports.core.exceptions import (
    GoSyntaxError,
    NonBlockImportError,
    NotApplicableError,
)
from stripblankimports.core.formatter import format_source, transform


def _go(*lines: str) -> bytes:
    return ("\n".join(lines) + "\n").encode("utf-8")


def test_gap_of_two_blank_lines_collapses() -> None:
    source = _go("package main", "", "import (", '\t"a"', "", "", '\t"b"', ")")

    assert transform(source) == _go("package main", "", "import (", '\t"a"', '\t"b"', ")")


def test_adjacent_entries_are_unchanged() -> None:
    source = _go("package main", "", "import (", '\t"a"', '\t"b"', ")")

    result = format_source(source)

    assert result.content == source
    assert not result.changed


def test_single_blank_line_is_preserved() -> None:
    source = _go("package main", "", "import (", '\t"a"', "", '\t"b"', ")")

    assert transform(source) == source


def test_multi_line_comment_between_entries() -> None:
    source = _go(
        "package main",
        "",
        "import (",
        '\t"a"',
        "",
        "",
        "\t/*",
        "\t   grouped",
        "\t*/",
        "",
        "",
        '\t"b"',
        ")",
    )

    assert transform(source) == _go(
        "package main",
        "",
        "import (",
        '\t"a"',
        "\t/*",
        "\t   grouped",
        "\t*/",
        '\t"b"',
        ")",
    )


def test_single_entry_is_not_applicable() -> None:
    with pytest.raises(NotApplicableError):
        format_source(_go("package main", "", "import (", '\t"a"', ")"))


def test_no_imports_is_not_applicable() -> None:
    with pytest.raises(NotApplicableError):
        format_source(_go("package main", "", "func main() {}"))


def test_bare_imports_are_rejected() -> None:
    with pytest.raises(NonBlockImportError):
        format_source(_go("package main", "", 'import "a"', 'import "b"'))


def test_bare_import_before_block_is_rejected() -> None:
    source = _go("package main", "", 'import "a"', "", "import (", '\t"b"', "", "", '\t"c"', ")")

    with pytest.raises(NonBlockImportError):
        format_source(source)


def test_syntax_errors_propagate() -> None:
    with pytest.raises(GoSyntaxError):
        format_source(b'package main\n\nimport (\n\t"a"\n\t"b"\n')


@pytest.mark.parametrize(
    "body",
    [
        b"func main() { x := := 1 }",
        b"var x =",
        b'func main() {\n\timport "os"\n}',
        b"type T struct { a b c d }",
    ],
)
def test_invalid_code_after_the_block_is_rejected(body: bytes) -> None:
    source = b'package main\n\nimport (\n\t"a"\n\n\n\t"b"\n)\n\n' + body

    with pytest.raises(GoSyntaxError):
        transform(source)


def test_result_reports_block_bounds() -> None:
    source = b'package main\n\nimport (\n\t"a"\n\t"b"\n)\n'

    assert format_source(source).bounds == BlockBounds(source.index(b"("), source.index(b")"))


def test_every_gap_is_collapsed_and_reported() -> None:
    source = _go(
        "package main",
        "",
        "import (",
        '\t"a"',
        "",
        "",
        "",
        '\t"b"',
        "",
        '\t"c"',
        "\t",
        "  ",
        '\tname "d"',
        ")",
    )

    result = format_source(source)

    assert result.content == _go(
        "package main",
        "",
        "import (",
        '\t"a"',
        '\t"b"',
        "",
        '\t"c"',
        '\tname "d"',
        ")",
    )
    assert result.merged_lines == 5
    assert result.imports == 4
    assert result.comments == 0
    assert result.changed


def test_comments_are_members_of_the_block() -> None:
    source = _go(
        "package main",
        "",
        "import (",
        '\t"a" // first',
        "",
        "",
        "\t// standard library above",
        '\t"b"',
        ")",
    )

    result = format_source(source)

    assert result.comments == 2
    assert result.content == _go(
        "package main",
        "",
        "import (",
        '\t"a" // first',
        "\t// standard library above",
        '\t"b"',
        ")",
    )


def test_content_outside_the_block_is_untouched() -> None:
    source = _go(
        "// Package main is a demo.",
        "",
        "",
        "package main",
        "",
        "",
        "import (",
        '\t"a"',
        "",
        "",
        '\t"b"',
        "",
        "",
        ")",
        "",
        "",
        "func main() {",
        "",
        "",
        "}",
    )

    assert transform(source) == _go(
        "// Package main is a demo.",
        "",
        "",
        "package main",
        "",
        "",
        "import (",
        '\t"a"',
        '\t"b"',
        "",
        "",
        ")",
        "",
        "",
        "func main() {",
        "",
        "",
        "}",
    )


def test_only_the_first_block_is_squashed() -> None:
    source = _go(
        "package main",
        "",
        "import (",
        '\t"a"',
        ")",
        "",
        "import (",
        '\t"b"',
        "",
        "",
        '\t"c"',
        ")",
    )

    result = format_source(source)

    assert result.content == source
    assert result.merged_lines == 0
    assert result.imports == 1


def test_crlf_sources_keep_their_line_endings() -> None:
    source = b'package main\r\n\r\nimport (\r\n\t"a"\r\n\r\n\r\n\t"b"\r\n)\r\n'

    assert transform(source) == b'package main\r\n\r\nimport (\r\n\t"a"\r\n\t"b"\r\n)\r\n'


def test_transform_is_idempotent() -> None:
    source = _go(
        "package main",
        "",
        "import (",
        '\t"a"',
        "",
        "",
        "\t/* one",
        "",
        "\tthree */",
        "",
        "",
        '\t"b"',
        "",
        '\t"c"',
        ")",
    )

    once = transform(source)

    assert transform(once) == once
    assert format_source(once).merged_lines == 0
