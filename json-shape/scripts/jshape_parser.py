#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Recursive descent over grammar tokens, building shapes as values close."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from jshape_errors import GrammarError, NestingError
from jshape_lexer import lex_bytes
from jshape_shape import Array, Field, Object, Shape, absorb, count_shapes, from_token
from jshape_tokens import Token, TokenKind, normalize

logger = logging.getLogger(__name__)

VALUE_STARTS = frozenset(
    {
        TokenKind.OBJECT_OPEN,
        TokenKind.ARRAY_OPEN,
        TokenKind.STRING,
        TokenKind.NUMBER,
        TokenKind.BOOLEAN,
        TokenKind.NULL,
    }
)


class TokenCursor:
    """Token stream with one token of lookahead."""

    def __init__(self, tokens: Iterable[Token]):
        self._tokens: Iterator[Token] = iter(tokens)
        self._peeked: Token | None = None
        self.consumed = 0

    def peek(self) -> Token | None:
        if self._peeked is None:
            self._peeked = next(self._tokens, None)
        return self._peeked

    def advance(self) -> Token:
        """Consume the next token; running out of input is a grammar error."""
        token = self.peek()
        if token is None:
            raise GrammarError("unexpected end of input")
        self._peeked = None
        self.consumed += 1
        return token

    def expect(self, kind: TokenKind) -> bool:
        """Consume the next token only if it has the given kind."""
        token = self.peek()
        if token is not None and token.kind is kind:
            self.advance()
            return True
        return False


def parse_value(cursor: TokenCursor) -> Shape:
    token = cursor.advance()
    if token.kind not in VALUE_STARTS:
        raise GrammarError("unexpected token", token)
    if token.kind is TokenKind.OBJECT_OPEN:
        return _parse_object(cursor)
    if token.kind is TokenKind.ARRAY_OPEN:
        return _parse_array(cursor)
    return from_token(token)


def _parse_object(cursor: TokenCursor) -> Object:
    fields: dict[str, Field] = {}
    if cursor.expect(TokenKind.OBJECT_CLOSE):
        return Object(fields)
    while True:
        token = cursor.advance()
        if token.kind is not TokenKind.STRING:
            raise GrammarError("expected object key", token)
        key = token.text[1:-1]
        if key in fields:
            raise GrammarError(f"duplicate key {key!r}", token)
        if not cursor.expect(TokenKind.COLON):
            raise GrammarError("expected ':'", cursor.advance())
        fields[key] = Field((parse_value(cursor),))
        token = cursor.advance()
        if token.kind is TokenKind.COMMA:
            continue
        if token.kind is TokenKind.OBJECT_CLOSE:
            return Object(fields)
        raise GrammarError("expected ',' or '}'", token)


def _parse_array(cursor: TokenCursor) -> Array:
    elements: tuple[Shape, ...] = ()
    if cursor.expect(TokenKind.ARRAY_CLOSE):
        return Array(elements, 0, 0)
    count = 0
    while True:
        elements = absorb(elements, (parse_value(cursor),))
        count += 1
        token = cursor.advance()
        if token.kind is TokenKind.COMMA:
            continue
        if token.kind is TokenKind.ARRAY_CLOSE:
            return Array(elements, count, count)
        raise GrammarError("expected ',' or ']'", token)


def parse_document(tokens: Iterable[Token]) -> Shape:
    """Parse exactly one JSON value; anything after it is rejected."""
    cursor = TokenCursor(tokens)
    shape = parse_value(cursor)
    trailing = cursor.peek()
    if trailing is not None:
        raise GrammarError("unexpected token after document", trailing)
    logger.debug("parsed %d tokens into %d shape nodes", cursor.consumed, count_shapes(shape))
    return shape


def infer_shape(data: bytes) -> Shape:
    """Lex, normalize, and parse a whole document."""
    try:
        return parse_document(normalize(lex_bytes(data)))
    except RecursionError as err:
        raise NestingError("parse") from err
