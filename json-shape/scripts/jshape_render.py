#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Render shapes as deterministic, indented text.

Example output for `[{"a": 1}, {"a": 2, "b": "x"}]`:

    Array (len 2) [
        {
            "a": Number (1, 2),
            "b": optional String ("x"),
        },
    ]
"""

from __future__ import annotations

from jshape_errors import NestingError
from jshape_shape import Array, Boolean, Field, Null, Object, Scalar, Shape, sort_key

INDENT = "    "


def render_document(shape: Shape) -> str:
    """Render a whole tree, turning exhausted recursion into a NestingError."""
    try:
        return render(shape)
    except RecursionError as err:
        raise NestingError("render") from err


def render(shape: Shape) -> str:
    if isinstance(shape, Scalar):
        return render_scalar(shape)
    if isinstance(shape, Boolean):
        return "Boolean"
    if isinstance(shape, Null):
        return "null"
    if isinstance(shape, Object):
        items = [f'"{key}": {render_field(shape.fields[key])}' for key in sorted(shape.fields)]
        return _block("{", items, "}")
    if isinstance(shape, Array):
        if shape.min_len == shape.max_len:
            header = f"Array (len {shape.min_len}) "
        else:
            header = f"Array (len {shape.min_len}..{shape.max_len}) "
        items = [render(alt) for alt in sorted(shape.elements, key=sort_key)]
        return header + _block("[", items, "]")
    raise TypeError(f"not a shape: {shape!r}")


def render_scalar(scalar: Scalar) -> str:
    examples = sorted(scalar.examples)
    if scalar.truncated:
        examples.append("...")
    return f"{scalar.kind} ({', '.join(examples)})"


def render_field(entry: Field) -> str:
    prefix = "optional " if entry.optional else ""
    if len(entry.alternatives) == 1:
        return prefix + render(entry.alternatives[0])
    items = [render(alt) for alt in sorted(entry.alternatives, key=sort_key)]
    return prefix + _block("(", items, ")")


def _block(opening: str, items: list[str], closing: str) -> str:
    if not items:
        return opening + closing
    body = "".join(_indent(item) + ",\n" for item in items)
    return f"{opening}\n{body}{closing}"


def _indent(text: str) -> str:
    return "\n".join(INDENT + line for line in text.split("\n"))
