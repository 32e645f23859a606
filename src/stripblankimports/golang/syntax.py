"""Syntax nodes produced by the Go source parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable


__all__ = [
    "Comment",
    "CommentGroup",
    "ImportDecl",
    "ImportSpec",
    "Lexeme",
    "Positioned",
    "SyntaxTree",
    "Token",
]


@runtime_checkable
class Positioned(Protocol):
    """Anything spanning the half-open byte range ``[pos, end)``."""

    @property
    def pos(self) -> int: ...

    @property
    def end(self) -> int: ...


class Token(Enum):
    """Leaf classes the import block locator distinguishes."""

    EOF = "EOF"
    COMMENT = "COMMENT"
    IMPORT = "import"
    LPAREN = "("
    RPAREN = ")"
    STRING = "STRING"
    SEMICOLON = ";"
    OTHER = "OTHER"


@dataclass(frozen=True, slots=True)
class Lexeme:
    """One leaf of the syntax tree, in source order."""

    kind: Token
    pos: int
    end: int


@dataclass(frozen=True, slots=True)
class Comment:
    """A single ``//`` or ``/* */`` comment."""

    pos: int
    end: int
    text: str


@dataclass(frozen=True, slots=True)
class CommentGroup:
    """A run of comments with no tokens and no blank lines between them."""

    comments: tuple[Comment, ...]

    @property
    def pos(self) -> int:
        return self.comments[0].pos

    @property
    def end(self) -> int:
        return self.comments[-1].end

    @property
    def text(self) -> str:
        return "\n".join(comment.text for comment in self.comments)


@dataclass(frozen=True, slots=True)
class ImportSpec:
    """One import: an optional local name followed by the quoted path."""

    path: str
    path_pos: int
    path_end: int
    name: str | None = None
    name_pos: int | None = None

    @property
    def pos(self) -> int:
        return self.name_pos if self.name_pos is not None else self.path_pos

    @property
    def end(self) -> int:
        return self.path_end

    @property
    def unquoted_path(self) -> str:
        return self.path[1:-1]


@dataclass(frozen=True, slots=True)
class ImportDecl:
    """An ``import`` declaration, parenthesised or not."""

    keyword_pos: int
    specs: tuple[ImportSpec, ...]
    lparen: int | None = None
    rparen: int | None = None

    @property
    def is_block(self) -> bool:
        return self.lparen is not None


@dataclass(slots=True)
class SyntaxTree:
    """Parsed view of a Go file restricted to what import handling needs."""

    source: bytes
    package: str
    package_pos: int
    decls: list[ImportDecl] = field(default_factory=list)
    comments: list[CommentGroup] = field(default_factory=list)
    tokens: list[Lexeme] = field(default_factory=list)

    @property
    def imports(self) -> list[ImportSpec]:
        """Return every import spec in source order."""
        return [spec for decl in self.decls for spec in decl.specs]
