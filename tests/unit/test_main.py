from __future__ import annotations

"""
Unit tests for the main entry point and global supervisor.

Verifies:
1. The reference program prints the encoded and decoded lines.
2. A fatal error escaping the reference program is logged at CRITICAL,
   reported on stderr and turned into exit code 1.
3. The interpreter hook exits with status 1 after reporting.
"""

import logging

import pytest

import morsetree.main as entry
from morsetree.domain.errors import InvalidSignalError
from morsetree.infra.logging import shutdown_logging

pytestmark = pytest.mark.usefixtures("reset_logging")


def _raise_invalid_signal(*_args, **_kwargs):
    raise InvalidSignalError("x", "x")


def test_main_without_arguments_runs_reference_program(capsys) -> None:
    assert entry.main([]) == 0
    shutdown_logging()

    out = capsys.readouterr().out
    assert out.splitlines() == [
        "encoded: .... . .-.. .-.. ---  .-- --- .-. .-.. -.. ",
        "decoded: hello world ",
    ]


def test_main_reports_fatal_error_and_returns_one(monkeypatch, capsys, caplog) -> None:
    monkeypatch.setattr(entry, "run_demo", _raise_invalid_signal)

    with caplog.at_level(logging.CRITICAL, logger="morsetree.supervisor"):
        exit_code = entry.main([])
    shutdown_logging()

    assert exit_code == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "CRITICAL ERROR (MORSETREE)" in captured.err
    assert "Unexpected character 'x'" in captured.err

    fatal = [r for r in caplog.records if r.name == "morsetree.supervisor"]
    assert len(fatal) == 1
    assert fatal[0].levelno == logging.CRITICAL
    assert "FATAL EXCEPTION DETECTED" in fatal[0].getMessage()


def test_global_exception_handler_exits_with_status_one(capsys, caplog) -> None:
    try:
        raise InvalidSignalError("?", ".?")
    except InvalidSignalError as e:
        err = e

    with caplog.at_level(logging.CRITICAL, logger="morsetree.supervisor"):
        with pytest.raises(SystemExit) as exc:
            entry.global_exception_handler(type(err), err, err.__traceback__)

    assert exc.value.code == 1
    assert "CRITICAL ERROR (MORSETREE)" in capsys.readouterr().err
    assert any(r.levelno == logging.CRITICAL for r in caplog.records)
