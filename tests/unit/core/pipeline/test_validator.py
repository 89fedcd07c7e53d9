from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Default value injection.
2. Type coercion (String/Number to Bool) and choice normalization.
3. Strict mode validation.
4. Log file path normalization.
"""

import pytest

from morsetree.core.pipeline.validator import validate_config


def test_validate_none_returns_defaults() -> None:
    cfg, warnings = validate_config(None)

    assert cfg["mode"] == "demo"
    assert cfg["text"] == "hello world"
    assert cfg["log_level"] == "WARNING"
    assert len(warnings) == 1


def test_validate_empty_dict_returns_defaults() -> None:
    cfg, warnings = validate_config({})

    assert cfg["print_tree"] is False
    assert cfg["save_log"] is False
    assert warnings == []


def test_validate_keeps_text_spacing_verbatim() -> None:
    cfg, warnings = validate_config({"mode": "decode", "text": " .-  -... "})

    assert cfg["text"] == " .-  -... "
    assert warnings == []


def test_validate_converts_strings_to_bools() -> None:
    raw = {
        "print_tree": "true",
        "show_table": "no",
        "json_output": 1,
        "save_log": "off",
    }
    cfg, warnings = validate_config(raw)

    assert cfg["print_tree"] is True
    assert cfg["show_table"] is False
    assert cfg["json_output"] is True
    assert cfg["save_log"] is False
    assert len(warnings) == 4


def test_validate_normalizes_choice_case() -> None:
    cfg, warnings = validate_config({"mode": " ENCODE ", "log_level": "debug"})

    assert cfg["mode"] == "encode"
    assert cfg["log_level"] == "DEBUG"
    assert warnings == []


def test_validate_unknown_choice_falls_back() -> None:
    cfg, warnings = validate_config({"mode": "translate", "log_level": "LOUD"})

    assert cfg["mode"] == "demo"
    assert cfg["log_level"] == "WARNING"
    assert len(warnings) == 2


def test_validate_non_string_text_falls_back() -> None:
    cfg, warnings = validate_config({"text": 42})

    assert cfg["text"] == "hello world"
    assert any("'text'" in w for w in warnings)


def test_validate_ignores_unknown_keys() -> None:
    cfg, warnings = validate_config({"colour": "blue"})

    assert "colour" not in cfg
    assert warnings == ["Unknown config keys ignored: colour."]


def test_validate_strict_mode_raises() -> None:
    with pytest.raises(TypeError):
        validate_config("not a dict", strict=True)
    with pytest.raises(TypeError):
        validate_config({"print_tree": "yes"}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"mode": "translate"}, strict=True)


def test_validate_log_file_is_stripped_and_defaults_empty() -> None:
    cfg, warnings = validate_config({"log_file": "  /tmp/m.log "})
    assert cfg["log_file"] == "/tmp/m.log"
    assert warnings == []

    cfg, _ = validate_config({"log_file": None})
    assert cfg["log_file"] == ""


def test_validate_log_file_rejects_non_string() -> None:
    cfg, warnings = validate_config({"log_file": 3})
    assert cfg["log_file"] == ""
    assert len(warnings) == 1

    with pytest.raises(TypeError):
        validate_config({"log_file": 3}, strict=True)
