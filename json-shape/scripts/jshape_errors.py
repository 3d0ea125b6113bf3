#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Failures raised while reading, tokenizing, or parsing a document."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jshape_tokens import Token


class ShapeError(Exception):
    """Base class for every fatal json-shape failure."""


class InputError(ShapeError):
    """The input file could not be opened or read."""

    def __init__(self, filename: str, cause: OSError):
        self.filename = filename
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"could not read {filename}: {reason}")


class LexError(ShapeError):
    """The input bytes do not form valid JSON lexemes."""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        self.line = line
        self.column = column
        if line:
            message = f"{message} at line {line} column {column}"
        super().__init__(message)


class GrammarError(ShapeError):
    """A token appeared where the JSON grammar does not allow it.

    `token` is None when the input ended before the document was complete.
    """

    def __init__(self, message: str, token: Token | None = None):
        self.token = token
        if token is not None:
            message = f"{message}: {token.describe()}"
        super().__init__(message)


class NestingError(ShapeError):
    """The document nests deeper than the interpreter's recursion limit."""

    def __init__(self, stage: str):
        self.stage = stage
        super().__init__(f"document nested too deeply to {stage}")
