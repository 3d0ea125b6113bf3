#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Inferred shapes of JSON values and the rules for merging them.

A shape summarises every value seen at one position of a document. Two
shapes of the same variant merge into one; shapes of different variants
cannot be merged and are kept side by side as alternatives.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Union

from jshape_tokens import Token, TokenKind

MAX_EXAMPLES = 4

STRING = "String"
NUMBER = "Number"


@dataclass(frozen=True)
class Scalar:
    """A string or number, with up to MAX_EXAMPLES distinct literals."""

    kind: str
    examples: frozenset[str] = frozenset()
    truncated: bool = False


@dataclass(frozen=True)
class Boolean:
    pass


@dataclass(frozen=True)
class Null:
    pass


@dataclass(frozen=True)
class Field:
    """Alternatives observed under one object key.

    `optional` is set once an object merged into this one lacked the key.
    """

    alternatives: tuple[Shape, ...]
    optional: bool = False


@dataclass(frozen=True)
class Object:
    fields: dict[str, Field] = field(default_factory=dict)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.fields.items())))


@dataclass(frozen=True)
class Array:
    elements: tuple[Shape, ...] = ()
    min_len: int = 0
    max_len: int = 0


Shape = Union[Scalar, Boolean, Null, Object, Array]

# null < boolean < number < string < array < object
_PRECEDENCE = {Null: 1, Boolean: 2, Array: 5, Object: 6}


def sort_key(shape: Shape) -> int:
    """Fixed type precedence used to order alternatives for display."""
    if isinstance(shape, Scalar):
        return 3 if shape.kind == NUMBER else 4
    return _PRECEDENCE[type(shape)]


def from_token(token: Token) -> Shape:
    """Build the initial shape for the token that starts a value.

    Objects and arrays come back empty; the parser fills them in.
    """
    if token.kind is TokenKind.STRING:
        return Scalar(STRING, frozenset([token.text]))
    if token.kind is TokenKind.NUMBER:
        return Scalar(NUMBER, frozenset([token.text]))
    if token.kind is TokenKind.BOOLEAN:
        return Boolean()
    if token.kind is TokenKind.NULL:
        return Null()
    if token.kind is TokenKind.OBJECT_OPEN:
        return Object()
    if token.kind is TokenKind.ARRAY_OPEN:
        return Array()
    raise ValueError(f"token does not start a value: {token.describe()}")


def merge(left: Shape, right: Shape) -> Shape | None:
    """Merge two shapes, or return None when their variants differ."""
    if isinstance(left, Scalar) and isinstance(right, Scalar):
        if left.kind != right.kind:
            return None
        return _merge_scalars(left, right)
    if type(left) is not type(right):
        return None
    if isinstance(left, (Boolean, Null)):
        return left
    if isinstance(left, Object):
        return _merge_objects(left, right)
    return Array(
        absorb(left.elements, right.elements),
        min(left.min_len, right.min_len),
        max(left.max_len, right.max_len),
    )


def _merge_scalars(left: Scalar, right: Scalar) -> Scalar:
    union = left.examples | right.examples
    truncated = left.truncated or right.truncated or len(union) > MAX_EXAMPLES
    # Keep the smallest literals of the union.
    return Scalar(left.kind, frozenset(sorted(union)[:MAX_EXAMPLES]), truncated)


def _merge_objects(left: Object, right: Object) -> Object:
    fields: dict[str, Field] = {}
    for key, ours in left.fields.items():
        theirs = right.fields.get(key)
        if theirs is None:
            fields[key] = Field(ours.alternatives, True)
        else:
            fields[key] = Field(
                absorb(ours.alternatives, theirs.alternatives),
                ours.optional or theirs.optional,
            )
    for key, theirs in right.fields.items():
        if key not in left.fields:
            fields[key] = Field(theirs.alternatives, True)
    return Object(fields)


def absorb(alternatives: Iterable[Shape], incoming: Iterable[Shape]) -> tuple[Shape, ...]:
    """Fold each incoming shape into the first alternative it merges with.

    Shapes that merge with none of the alternatives are appended.
    """
    result = list(alternatives)
    for shape in incoming:
        for index, existing in enumerate(result):
            merged = merge(existing, shape)
            if merged is not None:
                result[index] = merged
                break
        else:
            result.append(shape)
    return tuple(result)


def count_shapes(shape: Shape) -> int:
    """Number of shape nodes in a tree, for diagnostics."""
    if isinstance(shape, Object):
        return 1 + sum(
            count_shapes(alt) for entry in shape.fields.values() for alt in entry.alternatives
        )
    if isinstance(shape, Array):
        return 1 + sum(count_shapes(alt) for alt in shape.elements)
    return 1
