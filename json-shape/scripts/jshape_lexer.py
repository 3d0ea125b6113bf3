#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Split raw JSON input into lexemes.

Lexemes keep their exact literal text: strings include their surrounding
quotes and escapes are left undecoded, numbers are not converted. Only the
lexical shape is checked here; ordering rules belong to the parser.
"""

from __future__ import annotations

import codecs
import re
from typing import Iterator, NamedTuple

from jshape_errors import LexError

_STRING = r'"(?:[^"\\\x00-\x1f]|\\["\\/bfnrt]|\\u[0-9a-fA-F]{4})*"'
_NUMBER = r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?"

LEXEME_RE = re.compile(
    rf"(?P<STRING>{_STRING})"
    rf"|(?P<NUMBER>{_NUMBER})(?![0-9A-Za-z.+-])"
    r"|(?P<TRUE>true)(?![0-9A-Za-z_])"
    r"|(?P<FALSE>false)(?![0-9A-Za-z_])"
    r"|(?P<NULL>null)(?![0-9A-Za-z_])"
    r"|(?P<OBJECT_OPEN>\{)"
    r"|(?P<OBJECT_CLOSE>\})"
    r"|(?P<ARRAY_OPEN>\[)"
    r"|(?P<ARRAY_CLOSE>\])"
    r"|(?P<COLON>:)"
    r"|(?P<COMMA>,)"
)
WHITESPACE_RE = re.compile(r"[ \t\r\n]*")
# Used only to show what went wrong: an unterminated string or a bare word.
BAD_LEXEME_RE = re.compile(r'"[^"\n]*"?|[^\s{}\[\]:,"]+|.')


class Lexeme(NamedTuple):
    kind: str
    text: str
    offset: int


def decode(data: bytes) -> str:
    """Decode UTF-8 input, dropping a leading byte order mark."""
    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8):]
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as err:
        raise LexError(f"invalid UTF-8 byte {data[err.start]:#04x} at byte {err.start}") from err


def line_column(text: str, offset: int) -> tuple[int, int]:
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column


def lex(text: str) -> Iterator[Lexeme]:
    """Yield lexemes lazily, raising LexError on the first invalid one."""
    pos = WHITESPACE_RE.match(text).end()
    end = len(text)
    while pos < end:
        match = LEXEME_RE.match(text, pos)
        if match is None:
            bad = BAD_LEXEME_RE.match(text, pos).group()
            line, column = line_column(text, pos)
            if bad.startswith('"'):
                raise LexError(f"invalid string literal {bad!r}", line, column)
            raise LexError(f"invalid token {bad!r}", line, column)
        yield Lexeme(match.lastgroup, match.group(), pos)
        pos = WHITESPACE_RE.match(text, match.end()).end()


def lex_bytes(data: bytes) -> Iterator[Lexeme]:
    return lex(decode(data))
