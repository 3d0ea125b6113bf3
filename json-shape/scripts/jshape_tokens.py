#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Grammar tokens consumed by the shape parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from jshape_lexer import Lexeme


class TokenKind(Enum):
    OBJECT_OPEN = "{"
    OBJECT_CLOSE = "}"
    ARRAY_OPEN = "["
    ARRAY_CLOSE = "]"
    COLON = ":"
    COMMA = ","
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


LEXEME_KINDS: dict[str, TokenKind] = {
    "OBJECT_OPEN": TokenKind.OBJECT_OPEN,
    "OBJECT_CLOSE": TokenKind.OBJECT_CLOSE,
    "ARRAY_OPEN": TokenKind.ARRAY_OPEN,
    "ARRAY_CLOSE": TokenKind.ARRAY_CLOSE,
    "COLON": TokenKind.COLON,
    "COMMA": TokenKind.COMMA,
    "STRING": TokenKind.STRING,
    "NUMBER": TokenKind.NUMBER,
    "TRUE": TokenKind.BOOLEAN,
    "FALSE": TokenKind.BOOLEAN,
    "NULL": TokenKind.NULL,
}

# Only literals keep their text; everything else is a bare marker.
LITERAL_KINDS = frozenset({TokenKind.STRING, TokenKind.NUMBER})


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str | None = None
    offset: int = -1

    def describe(self) -> str:
        """Human readable form used in diagnostics."""
        shown = self.text if self.text is not None else self.kind.value
        if self.offset >= 0:
            return f"{shown!r} at offset {self.offset}"
        return repr(shown)


def from_lexeme(lexeme: Lexeme) -> Token:
    """Normalize a raw lexeme into a grammar token."""
    kind = LEXEME_KINDS[lexeme.kind]
    text = lexeme.text if kind in LITERAL_KINDS else None
    return Token(kind, text, lexeme.offset)


def normalize(lexemes: Iterable[Lexeme]) -> Iterator[Token]:
    for lexeme in lexemes:
        yield from_lexeme(lexeme)
