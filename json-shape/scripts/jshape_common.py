#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Shared helpers for json-shape scripts."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from jshape_errors import InputError

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def read_input(path: str | None) -> bytes:
    """Read raw bytes from a file path or stdin when path is '-' or None."""
    stdin = not path or path == "-"
    try:
        if stdin:
            return sys.stdin.buffer.read()
        return Path(path).read_bytes()
    except OSError as err:
        raise InputError("<stdin>" if stdin else path, err) from err


def write_text(text: str) -> None:
    """Write text to stdout, always newline-terminated."""
    sys.stdout.write(text)
    if not text.endswith("\n"):
        sys.stdout.write("\n")


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
