"""Go source layer: tree-sitter parser, position table and printer."""

from __future__ import annotations

from .parser import go_language, parse
from .positions import Position, PositionTable
from .printer import render
from .syntax import (
    Comment,
    CommentGroup,
    ImportDecl,
    ImportSpec,
    Lexeme,
    Positioned,
    SyntaxTree,
    Token,
)


__all__ = [
    "Comment",
    "CommentGroup",
    "ImportDecl",
    "ImportSpec",
    "Lexeme",
    "Position",
    "PositionTable",
    "Positioned",
    "SyntaxTree",
    "Token",
    "go_language",
    "parse",
    "render",
]
