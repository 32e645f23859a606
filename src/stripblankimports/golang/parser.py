"""Parse Go source files into a :class:`SyntaxTree`.

The concrete syntax tree comes from the tree-sitter Go grammar. Any ERROR or
MISSING node in it is reported as a :class:`GoSyntaxError`. On top of the
grammar, the file must open with a package clause, every top-level node must
be a declaration and imports must precede the other declarations, which the
grammar alone tolerates.

The tree is then reduced to the package clause, the import declarations, the
leaf tokens in source order and the comment groups. Comments are grouped
using the Go rules: a comment on the same line as the previous token starts
its own group, and later comments join a group while no blank line separates
them.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from functools import lru_cache
import logging

from tree_sitter import Language, Node, Parser
from tree_sitter_language_pack import get_language

from stripblankimports.core.exceptions import GoSyntaxError

from .positions import PositionTable
from .syntax import Comment, CommentGroup, ImportDecl, ImportSpec, Lexeme, SyntaxTree, Token


__all__ = ["go_language", "parse"]


logger = logging.getLogger(__name__)

_BOM = b"\xef\xbb\xbf"

_DECLARATIONS = frozenset(
    {
        "const_declaration",
        "function_declaration",
        "method_declaration",
        "type_declaration",
        "var_declaration",
    }
)
_ATOMIC = {
    "comment": Token.COMMENT,
    "interpreted_string_literal": Token.STRING,
    "raw_string_literal": Token.STRING,
    "rune_literal": Token.OTHER,
}
_LEAVES = {
    "import": Token.IMPORT,
    "(": Token.LPAREN,
    ")": Token.RPAREN,
    "\n": Token.SEMICOLON,
    ";": Token.SEMICOLON,
    "\0": Token.SEMICOLON,
}


@lru_cache(maxsize=None)
def go_language() -> Language:
    """Return the tree-sitter Go grammar."""
    return get_language("go")


def _first_error(root: Node) -> Node:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        stack.extend(
            child for child in reversed(node.children) if child.has_error or child.is_missing
        )
    return root


class _TreeBuilder:
    def __init__(self, source: bytes, table: PositionTable) -> None:
        self.source = source
        self.table = table

    def _text(self, node: Node) -> str:
        return self.source[node.start_byte : node.end_byte].decode("utf-8")

    def _describe(self, node: Node) -> str:
        text = self._text(node).strip()
        if not text:
            return node.type
        return f"'{text.splitlines()[0]}'"

    def _error(self, offset: int, message: str) -> GoSyntaxError:
        position = self.table.position(offset)
        return GoSyntaxError(message, line=position.line, column=position.column)

    def check(self, root: Node) -> None:
        if not root.has_error:
            return
        node = _first_error(root)
        if node.is_missing:
            raise self._error(node.start_byte, f"missing '{node.type}'")
        raise self._error(node.start_byte, f"unexpected {self._describe(node)}")

    def build(self, root: Node) -> SyntaxTree:
        nodes = [child for child in root.named_children if child.type != "comment"]
        if not nodes or nodes[0].type != "package_clause":
            offset = nodes[0].start_byte if nodes else len(self.source)
            found = self._describe(nodes[0]) if nodes else "EOF"
            raise self._error(offset, f"expected 'package', found {found}")

        clause = nodes[0]
        name_node = next(child for child in clause.named_children if child.type != "comment")
        package = self._text(name_node)
        if package == "_":
            raise self._error(name_node.start_byte, "invalid package name _")

        decls: list[ImportDecl] = []
        seen_other = False
        for node in nodes[1:]:
            if node.type == "import_declaration":
                if seen_other:
                    raise self._error(
                        node.start_byte, "imports must appear before other declarations"
                    )
                decls.append(self._import_decl(node))
            elif node.type in _DECLARATIONS:
                seen_other = True
            else:
                raise self._error(
                    node.start_byte, f"expected declaration, found {self._describe(node)}"
                )

        tokens = list(self._lexemes(root))
        logger.debug("parsed package %s with %d import declaration(s)", package, len(decls))
        return SyntaxTree(
            source=self.source,
            package=package,
            package_pos=clause.start_byte,
            decls=decls,
            comments=self._group_comments(tokens),
            tokens=tokens,
        )

    def _import_decl(self, node: Node) -> ImportDecl:
        body = next(child for child in node.named_children if child.type != "comment")
        if body.type == "import_spec":
            return ImportDecl(keyword_pos=node.start_byte, specs=(self._import_spec(body),))

        specs = tuple(
            self._import_spec(child)
            for child in body.named_children
            if child.type == "import_spec"
        )
        return ImportDecl(
            keyword_pos=node.start_byte,
            specs=specs,
            lparen=body.children[0].start_byte,
            rparen=body.children[-1].start_byte,
        )

    def _import_spec(self, node: Node) -> ImportSpec:
        path = node.child_by_field_name("path")
        name = node.child_by_field_name("name")
        assert path is not None
        text = self._text(path)
        if len(text) <= 2:
            raise self._error(path.start_byte, f"invalid import path: {text}")
        return ImportSpec(
            path=text,
            path_pos=path.start_byte,
            path_end=path.end_byte,
            name=self._text(name) if name is not None else None,
            name_pos=name.start_byte if name is not None else None,
        )

    def _lexemes(self, root: Node) -> Iterator[Lexeme]:
        stack = list(reversed(root.children))
        while stack:
            node = stack.pop()
            kind = _ATOMIC.get(node.type)
            if kind is None and node.child_count:
                stack.extend(reversed(node.children))
                continue
            if node.start_byte == node.end_byte:
                continue
            if kind is None:
                kind = _LEAVES.get(node.type, Token.OTHER)
            end = node.end_byte
            if kind is Token.COMMENT and self.source[end - 1 : end] == b"\r":
                end -= 1
            yield Lexeme(kind=kind, pos=node.start_byte, end=end)
        yield Lexeme(kind=Token.EOF, pos=len(self.source), end=len(self.source))

    def _is_auto_terminator(self, lexeme: Lexeme) -> bool:
        return (
            lexeme.kind is Token.SEMICOLON
            and self.source[lexeme.pos : lexeme.pos + 1] != b";"
        )

    def _group_comments(self, tokens: Sequence[Lexeme]) -> list[CommentGroup]:
        lexemes = [lexeme for lexeme in tokens if not self._is_auto_terminator(lexeme)]
        line = self.table.physical_line
        groups: list[CommentGroup] = []
        prev: Lexeme | None = None
        index = 0
        while index < len(lexemes):
            lexeme = lexemes[index]
            if lexeme.kind is not Token.COMMENT:
                prev = lexeme
                index += 1
                continue
            if prev is not None and line(lexeme.pos) == line(prev.pos):
                index = self._take_group(lexemes, index, 0, groups)
            while index < len(lexemes) and lexemes[index].kind is Token.COMMENT:
                index = self._take_group(lexemes, index, 1, groups)
        return groups

    def _take_group(
        self,
        lexemes: Sequence[Lexeme],
        index: int,
        max_gap: int,
        groups: list[CommentGroup],
    ) -> int:
        line = self.table.physical_line
        comments: list[Comment] = []
        end_line = line(lexemes[index].pos)
        while (
            index < len(lexemes)
            and lexemes[index].kind is Token.COMMENT
            and line(lexemes[index].pos) <= end_line + max_gap
        ):
            lexeme = lexemes[index]
            text = self.source[lexeme.pos : lexeme.end].decode("utf-8")
            comments.append(Comment(pos=lexeme.pos, end=lexeme.end, text=text))
            end_line = line(lexeme.end)
            index += 1
        groups.append(CommentGroup(tuple(comments)))
        return index


def parse(text: bytes) -> tuple[SyntaxTree, PositionTable]:
    """Parse a Go file into its syntax tree and position table.

    Offsets in the tree are byte offsets into ``text``. Raises
    :class:`GoSyntaxError` when the bytes are not UTF-8 or not Go.
    """
    try:
        text.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise GoSyntaxError(f"source is not valid UTF-8: {exc.reason}") from exc

    table = PositionTable(text)
    # Blank out a leading BOM so byte offsets stay aligned with ``text``.
    parsed = b"   " + text[len(_BOM) :] if text.startswith(_BOM) else text
    parser = Parser()
    parser.language = go_language()
    root = parser.parse(parsed).root_node

    builder = _TreeBuilder(text, table)
    builder.check(root)
    return builder.build(root), table
