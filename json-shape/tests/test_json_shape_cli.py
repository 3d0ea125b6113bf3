# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import io
import logging
import sys
from pathlib import Path

import pytest

import json_shape


def write(tmp_path: Path, text: str) -> str:
    path = tmp_path / "input.json"
    path.write_text(text, encoding="utf-8")
    return str(path)


def set_stdin(monkeypatch: pytest.MonkeyPatch, data: bytes) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))


def test_main_reads_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = write(tmp_path, '[{"a":1},{"a":1,"b":2}]')
    assert json_shape.main([path]) == 0
    out = capsys.readouterr().out
    assert out == (
        "Array (len 2) [\n"
        "    {\n"
        '        "a": Number (1),\n'
        '        "b": optional Number (2),\n'
        "    },\n"
        "]\n"
    )


@pytest.mark.parametrize("argv", [[], ["-"]])
def test_main_reads_stdin(
    argv: list[str], monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    set_stdin(monkeypatch, b'{"x": [true, false]}')
    assert json_shape.main(argv) == 0
    assert capsys.readouterr().out == '{\n    "x": Array (len 2) [\n        Boolean,\n    ],\n}\n'


def test_main_output_is_deterministic(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = write(tmp_path, '{"z": [5, 1, 3, 9, 7, 2], "a": {"q": "x"}, "m": null}')
    assert json_shape.main([path]) == 0
    first = capsys.readouterr().out
    assert json_shape.main([path]) == 0
    assert capsys.readouterr().out == first


def test_main_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = str(tmp_path / "missing.json")
    assert json_shape.main([missing]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith(f"error: could not read {missing}")
    assert captured.err.count("\n") == 1


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ('{"a":1,}', "error: expected object key"),
        ('{"a":1,"a":2}', "error: duplicate key 'a'"),
        ("[1, tru]", "error: invalid token 'tru'"),
        ("[1, 2", "error: unexpected end of input"),
    ],
)
def test_main_rejects_malformed_json(
    text: str, message: str, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert json_shape.main([write(tmp_path, text)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith(message)


def test_main_rejects_invalid_utf8(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    set_stdin(monkeypatch, b'["\xff"]')
    assert json_shape.main([]) == 1
    assert "invalid UTF-8" in capsys.readouterr().err


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as err:
        json_shape.main(["--version"])
    assert err.value.code == 0
    assert capsys.readouterr().out.strip() == f"json-shape {json_shape.__version__}"


def test_unknown_flag_is_usage_error() -> None:
    with pytest.raises(SystemExit) as err:
        json_shape.main(["--bogus"])
    assert err.value.code == 2


def test_debug_logging_reports_parse_summary(
    tmp_path: Path, caplog: pytest.LogCaptureFixture, capsys: pytest.CaptureFixture[str]
) -> None:
    caplog.set_level(logging.DEBUG)
    assert json_shape.main(["-v", write(tmp_path, "[1, 2, 3]")]) == 0
    assert "parsed 7 tokens into 2 shape nodes" in caplog.text
    assert capsys.readouterr().out == "Array (len 3) [\n    Number (1, 2, 3),\n]\n"


def test_main_rejects_document_nested_too_deeply(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = write(tmp_path, "[" * 1000 + "]" * 1000)
    assert json_shape.main([path]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: document nested too deeply")
    assert captured.err.count("\n") == 1


class FailingStdin:
    class buffer:
        @staticmethod
        def read() -> bytes:
            raise OSError(5, "Input/output error")


def test_main_reports_stdin_read_failure(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "stdin", FailingStdin())
    assert json_shape.main(["-"]) == 1
    assert capsys.readouterr().err == "error: could not read <stdin>: Input/output error\n"
