#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Print the inferred structural shape of a JSON document."""

from __future__ import annotations

import argparse
import logging
import sys

from jshape_common import configure_logging, read_input, write_text
from jshape_errors import ShapeError
from jshape_parser import infer_shape
from jshape_render import render_document

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-shape",
        description="Show the shape of a JSON document: types, examples, lengths and optional keys.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Input JSON file path or '-' for stdin.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        data = read_input(args.input)
        logger.debug("read %d bytes from %s", len(data), args.input)
        text = render_document(infer_shape(data))
    except ShapeError as err:
        sys.stderr.write(f"error: {err}\n")
        return 1

    write_text(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
